"""Parameter sets named in the n..h..d..w..lt..k.. form."""

from __future__ import annotations

import re
from dataclasses import dataclass

_NAME_MAP = {
    "128s": "n16h63d7w16lt12k14",
    "128s-round3": "n16h63d7w16lt12k14",
    "128f": "n16h66d22w16lt6k33",
    "128f-round3": "n16h66d22w16lt6k33",
    "192s": "n24h63d7w16lt14k17",
    "192s-round3": "n24h63d7w16lt14k17",
    "192f": "n24h66d22w16lt8k33",
    "192f-round3": "n24h66d22w16lt8k33",
    "256s": "n32h64d8w16lt14k22",
    "256s-round3": "n32h64d8w16lt14k22",
    "256f": "n32h68d17w16lt9k35",
    "256f-round3": "n32h68d17w16lt9k35",
    "128s-round1": "n16h64d8w16lt15k10",
    "128f-round1": "n16h60d20w16lt9k30",
    "192s-round1": "n24h64d8w16lt16k14",
    "192f-round1": "n24h66d22w16lt8k33",
    "256s-round1": "n32h64d8w16lt14k22",
    "256f-round1": "n32h68d17w16lt10k30",
}

_PATTERN = re.compile(
    r"n([0-9]+)h([0-9]+)d([0-9]+)w([0-9]+)lt([0-9]+)k([0-9]+)"
)

_LIMITS = (
    ("hash_bytes", 16, 32),
    ("hypertree_height", 48, 256),
    ("hypertree_depth", 4, 64),
    ("winternitz_base", 2, 256),
    ("fors_leaves", 4, 64),
    ("fors_trees", 8, 64),
)


@dataclass(frozen=True)
class SpxParamset:
    """Hash-based signature parameters under their canonical name."""

    name: str
    hash_bytes: int
    hypertree_height: int
    hypertree_depth: int
    winternitz_base: int
    fors_leaves: int
    fors_trees: int


def _canonical_name(n: int, h: int, d: int, w: int, lt: int, k: int) -> str:
    return f"n{n}h{h}d{d}w{w}lt{lt}k{k}"


def paramset_from_name(name: str) -> SpxParamset:
    """Look up a published or canonical parameter set name.

    Raises ValueError if the name is not valid.
    """
    canonical = _NAME_MAP.get(name, name)
    match = _PATTERN.fullmatch(canonical)
    if match is None:
        raise ValueError(f"invalid parameter set name: {name!r}")
    numbers = [int(group) for group in match.groups()]
    for value, (field, low, high) in zip(numbers, _LIMITS):
        if not low <= value <= high:
            raise ValueError(f"{field} {value} out of range {low}..{high} in {name!r}")
    rendered = _canonical_name(*numbers)
    if rendered != canonical:
        raise ValueError(f"non-canonical parameter set name: {name!r}")
    return SpxParamset(rendered, *numbers)