"""Compact byte encoding of integer vectors with per-element upper bounds."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .modulo import Modulus

ENCODE_LIMIT = 16384
_OUTMOD = 256
_U32 = 0xFFFFFFFF


def _ceildiv_by_outmod(m: int) -> int:
    return (m + _OUTMOD - 1) // _OUTMOD


@dataclass(frozen=True)
class _BytesLayer:
    total: int
    outcounts: tuple[int, ...]


@dataclass(frozen=True)
class _MergeLayer:
    moduli: tuple[Modulus, ...]
    has_odd_element: bool


@dataclass(frozen=True)
class _Step:
    nelts_lower: int
    bytes: Optional[_BytesLayer]
    merge: _MergeLayer


def _bytes_layer(bounds: list[int]) -> tuple[Optional[_BytesLayer], list[int]]:
    outcounts = []
    reduced = []
    for m in bounds:
        count = 0
        while m >= ENCODE_LIMIT:
            m = _ceildiv_by_outmod(m)
            count += 1
        outcounts.append(count)
        reduced.append(m)
    total = sum(outcounts)
    layer = _BytesLayer(total, tuple(outcounts)) if total else None
    return layer, reduced


def _merge_layer(bounds: list[int]) -> tuple[_MergeLayer, list[int]]:
    moduli = tuple(Modulus(m) for m in bounds)
    merged = [a * b for a, b in zip(bounds[0::2], bounds[1::2])]
    has_odd = len(bounds) % 2 == 1
    if has_odd:
        merged.append(bounds[-1])
    return _MergeLayer(moduli, has_odd), merged


class VectCoder:
    """Encoder/decoder for vectors whose i-th element lies in [0, bounds[i])."""

    def __init__(self, bounds: Iterable[int]) -> None:
        current = list(bounds)
        if not current:
            raise ValueError("a vector coder needs at least one element")
        for m in current:
            if not 1 <= m <= _U32:
                raise ValueError(f"element bound out of range: {m}")

        steps = []
        while len(current) > 1:
            nelts = len(current)
            byte_layer, current = _bytes_layer(current)
            merge_layer, current = _merge_layer(current)
            steps.append(_Step(nelts, byte_layer, merge_layer))
        self._steps: tuple[_Step, ...] = tuple(steps)

        self._root_bound = current[0]
        root_bytes = 0
        bound = self._root_bound
        while bound > 1:
            bound = _ceildiv_by_outmod(bound)
            root_bytes += 1
        self._root_bytes = root_bytes

    @classmethod
    def uniform(cls, bound: int, nelts: int) -> VectCoder:
        """Build a coder for nelts elements that share one bound."""
        return cls([bound] * nelts)

    @property
    def nelts(self) -> int:
        """Number of vector elements."""
        return self._steps[0].nelts_lower if self._steps else 1

    @property
    def nbytes_separate_root(self) -> int:
        """Encoded size in bytes, not counting the root."""
        return sum(step.bytes.total for step in self._steps if step.bytes)

    @property
    def root_bound(self) -> int:
        """Exclusive upper bound of the root value."""
        return self._root_bound

    @property
    def nbytes(self) -> int:
        """Encoded size in bytes, root included."""
        return self.nbytes_separate_root + self._root_bytes

    def _check_values(self, values: Sequence[int]) -> list[int]:
        result = list(values)
        if len(result) != self.nelts:
            raise ValueError(f"expected {self.nelts} values, got {len(result)}")
        return result

    def encode_separate_root(self, values: Sequence[int]) -> tuple[bytes, int]:
        """Encode values, returning the bytes and the root kept apart."""
        r = self._check_values(values)
        out = bytearray()
        for step in self._steps:
            if step.bytes is not None:
                for i, count in enumerate(step.bytes.outcounts):
                    x = r[i]
                    for _ in range(count):
                        out.append(x & 0xFF)
                        x >>= 8
                    r[i] = x
            moduli = step.merge.moduli
            n = step.nelts_lower
            merged = [
                (r[i] + moduli[i].mult(r[i + 1])) & _U32 for i in range(0, n - 1, 2)
            ]
            if step.merge.has_odd_element:
                merged.append(r[n - 1])
            r = merged
        return bytes(out), r[0]

    def encode(self, values: Sequence[int]) -> bytes:
        """Encode values into exactly nbytes bytes."""
        body, root = self.encode_separate_root(values)
        return body + root.to_bytes(self._root_bytes, "little") if self._root_bytes else body

    def _decode_body(self, data: bytes, end: int, root: int) -> list[int]:
        r = [0] * self.nelts
        r[0] = root
        pos = end
        for step in reversed(self._steps):
            n = step.nelts_lower
            moduli = step.merge.moduli
            if step.merge.has_odd_element:
                r[n - 1] = r[(n - 1) >> 1]
            for i in range((n & ~1) - 2, -1, -2):
                quotient, remainder = moduli[i].divmod(r[i >> 1])
                r[i] = remainder
                r[i + 1] = moduli[i + 1].modulo(quotient)
            if step.bytes is not None:
                for i in range(n - 1, -1, -1):
                    x = r[i]
                    for _ in range(step.bytes.outcounts[i]):
                        pos -= 1
                        x = ((x << 8) | data[pos]) & _U32
                    r[i] = x
        return r

    def decode_separate_root(self, data: bytes, root: int) -> list[int]:
        """Decode values from bytes and a separately stored root."""
        needed = self.nbytes_separate_root
        if len(data) < needed:
            raise ValueError(f"need {needed} bytes, got {len(data)}")
        return self._decode_body(bytes(data), needed, root)

    def decode(self, data: bytes) -> list[int]:
        """Decode values from the first nbytes bytes of data."""
        if len(data) < self.nbytes:
            raise ValueError(f"need {self.nbytes} bytes, got {len(data)}")
        data = bytes(data)
        start = self.nbytes_separate_root
        root = int.from_bytes(data[start:start + self._root_bytes], "little") & _U32
        return self._decode_body(data, start, root)