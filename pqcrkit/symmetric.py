"""Symmetric primitives used by the signature scheme: a XOF and domain-separated hashing."""

from __future__ import annotations

import hashlib
import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Iterable, Protocol, Sequence, Union

from .xoesch import XOEsch256, XOEsch384

PERMSAMPLER_RANDOM_MASK = 0xFFFFFF80
PERMSAMPLER_INDEX_MASK = 0x0000007F

HASHIDX_SECKEYSEEDEXPAND_PI_INV = 0
HASHIDX_SECKEYSEEDEXPAND_PUBPARAMSSEED = 1

HASHIDX_EXPANDBLINDINGSEED_RUN_INDEX_FACTOR = 256
HASHIDX_EXPANDBLINDINGSEED_COMMITMENT = 0
HASHIDX_EXPANDBLINDINGSEED_PI_SIGMA_INV = 1
HASHIDX_EXPANDBLINDINGSEED_R_SIGMA = 2


class HashContext(IntEnum):
    """Domain-separation byte that starts every incremental hash."""

    PUBPARAMS = 0
    SECKEYSEEDEXPAND = 1
    SECKEYCHECKSUM = 2
    MESSAGEHASH = 3
    EXPANDBLINDINGSEED = 4
    COMMITMENT = 5
    CHALLENGE1HASH = 6
    CHALLENGE1EXPAND = 7
    CHALLENGE2HASH = 8
    CHALLENGE2EXPAND = 9

    INTERNAL_GENMSGHASHSALT = 0x80
    INTERNAL_GENBLINDINGSEEDGENSEED = 0x81
    INTERNAL_GENBLINDINGSEED = 0x82


class _SpongeState(Protocol):
    def update(self, data: bytes) -> None: ...

    def finish(self, length: int) -> bytes: ...

    def copy(self) -> "_SpongeState": ...


class _ShakeState:
    """SHAKE256 state with the same interface as the XOEsch states."""

    __slots__ = ("_hash",)

    def __init__(self, hash_obj=None) -> None:
        self._hash = hash_obj if hash_obj is not None else hashlib.shake_256()

    def update(self, data: bytes) -> None:
        self._hash.update(data)

    def finish(self, length: int) -> bytes:
        if length < 0:
            raise ValueError(f"output length must not be negative, got {length}")
        return self._hash.digest(length)

    def copy(self) -> "_ShakeState":
        return _ShakeState(self._hash.copy())


def _pack_ui16vec(vec: Sequence[int]) -> bytes:
    values = list(vec)
    try:
        return struct.pack(f"<{len(values)}H", *values)
    except struct.error as exc:
        raise ValueError(f"vector element out of 16-bit range: {exc}") from None


class IncrementalHash:
    """A hash started with a context byte and prefix, fed piece by piece."""

    __slots__ = ("_state", "_finished")

    def __init__(self, state: _SpongeState) -> None:
        self._state = state
        self._finished = False

    def _absorb(self, data: bytes) -> None:
        if self._finished:
            raise ValueError("hash already expanded")
        self._state.update(data)

    def index(self, index: int) -> None:
        """Absorb a 32-bit index, little-endian."""
        if not 0 <= index <= 0xFFFFFFFF:
            raise ValueError(f"index out of 32-bit range: {index}")
        self._absorb(struct.pack("<I", index))

    def chunk(self, data: bytes) -> None:
        """Absorb raw bytes."""
        self._absorb(bytes(data))

    def ui16vec(self, vec: Sequence[int]) -> None:
        """Absorb a vector of 16-bit values, each little-endian."""
        self._absorb(_pack_ui16vec(vec))

    def expand(self, length: int) -> bytes:
        """Finish the hash and return length output bytes."""
        if self._finished:
            raise ValueError("hash already expanded")
        out = self._state.finish(length)
        self._finished = True
        return out

    def copy(self) -> IncrementalHash:
        """Return an independent copy, e.g. to reuse a common prefix."""
        clone = IncrementalHash(self._state.copy())
        clone._finished = self._finished
        return clone


ContextLike = Union[HashContext, int]


@dataclass(frozen=True)
class SymmetricAlgo:
    """A named XOF with the security levels it can support."""

    name: str
    long_ui_name: str
    short_ui_name: str
    max_seclevel_preimage_bytes: int
    max_seclevel_crhash_bytes: int
    _factory: Callable[[], _SpongeState] = field(repr=False, compare=False)

    def check_seclevel(self, preimage_bytes: int, crhash_bytes: int) -> bool:
        """Whether this algorithm reaches the given security levels."""
        return (
            preimage_bytes <= self.max_seclevel_preimage_bytes
            and crhash_bytes <= self.max_seclevel_crhash_bytes
        )

    def xof(self, chunks: Iterable[bytes], length: int) -> bytes:
        """Hash the concatenation of chunks and return length bytes."""
        state = self._factory()
        for chunk in chunks:
            state.update(bytes(chunk))
        return state.finish(length)

    def hasher(self, context: ContextLike, prefix: bytes = b"") -> IncrementalHash:
        """Start an incremental hash with a context byte and a prefix."""
        ctx = int(context)
        if not 0 <= ctx <= 0xFF:
            raise ValueError(f"context must fit in one byte, got {ctx}")
        state = self._factory()
        state.update(bytes([ctx]))
        state.update(bytes(prefix))
        return IncrementalHash(state)


_ALGOS: dict[str, SymmetricAlgo] = {
    algo.name: algo
    for algo in (
        SymmetricAlgo("shake256", "SHAKE256", "SHAKE256", 64, 64, _ShakeState),
        SymmetricAlgo("xoesch256", "XOEsch256", "XOEsch256", 32, 32, XOEsch256),
        SymmetricAlgo("xoesch384", "XOEsch384", "XOEsch384", 48, 48, XOEsch384),
    )
}


def get_algo(name: str) -> SymmetricAlgo:
    """Return the algorithm with the given name; raises ValueError if unknown."""
    try:
        return _ALGOS[name]
    except KeyError:
        raise ValueError(f"unknown symmetric algorithm: {name!r}") from None


def algo_names() -> list[str]:
    """Names of all available symmetric algorithms."""
    return list(_ALGOS)