"""Esch256/Esch384 hashes and their extendable-output variants XOEsch256/XOEsch384."""

from __future__ import annotations

import struct
from functools import reduce
from operator import xor
from typing import TypeVar

_U32 = 0xFFFFFFFF

_BRANCH_CONSTANTS = (
    0xB7E15162, 0xBF715880,
    0x38B4DA56, 0x324E7738,
    0xBB1185EB, 0x4F7C7B57,
    0xCFBFA1C8, 0xC2B3293D,
)

_BLOCK_BYTES = 16
_BLOCK = struct.Struct("<4I")

_CONST_XOF = 4
_CONST_HASH = 0

_T = TypeVar("_T", bound="_XOEsch")


def _ror32(x: int, shift: int) -> int:
    return ((x >> shift) | (x << (32 - shift))) & _U32


def _alzette(x: int, y: int, c: int) -> tuple[int, int]:
    x = (x + _ror32(y, 31)) & _U32
    y ^= _ror32(x, 24)
    x ^= c
    x = (x + _ror32(y, 17)) & _U32
    y ^= _ror32(x, 17)
    x ^= c
    x = (x + y) & _U32
    y ^= _ror32(x, 31)
    x ^= c
    x = (x + _ror32(y, 24)) & _U32
    y ^= _ror32(x, 16)
    x ^= c
    return x, y


def _ell(x: int) -> int:
    return _ror32(x, 16) ^ (x & 0xFFFF)


def _feistel_words(words: list[int]) -> list[int]:
    """Words to XOR into the other half (or the state) for the linear layer."""
    xs = words[0::2]
    ys = words[1::2]
    l_sum_x = _ell(reduce(xor, xs, 0))
    l_sum_y = _ell(reduce(xor, ys, 0))
    out: list[int] = []
    for x, y in zip(xs, ys):
        out.append(x ^ l_sum_y)
        out.append(y ^ l_sum_x)
    return out


def _sparkle(state: list[int], branches: int, steps: int) -> None:
    half = branches  # words in half the state: 2 * (branches // 2)
    for step in range(steps):
        state[1] ^= _BRANCH_CONSTANTS[step & 7]
        state[3] ^= step
        for i, c in enumerate(_BRANCH_CONSTANTS[:branches]):
            state[2 * i], state[2 * i + 1] = _alzette(state[2 * i], state[2 * i + 1], c)
        left = state[:half]
        right = [r ^ t for r, t in zip(state[half:], _feistel_words(left))]
        state[:] = right[2:] + right[:2] + left


class _XOEsch:
    """Common sponge built on the Sparkle permutation."""

    _BRANCHES: int
    _INJECT_BRANCHES: int
    _ROUNDS_SLIM: int
    _ROUNDS_BIG: int
    digest_size: int

    def __init__(self, data: bytes = b"") -> None:
        self._state = [0] * (2 * self._BRANCHES)
        self._buffer = b""
        self._finished = False
        if data:
            self._update(data)

    def _inject(self, block: bytes) -> None:
        words = list(_BLOCK.unpack(block))
        words += [0] * (2 * self._INJECT_BRANCHES - len(words))
        for i, t in enumerate(_feistel_words(words)):
            self._state[i] ^= t

    def _absorb(self, block: bytes) -> None:
        self._inject(block)
        _sparkle(self._state, self._BRANCHES, self._ROUNDS_SLIM)

    def _update(self, data: bytes) -> None:
        if self._finished:
            raise ValueError("hash state already finished")
        pending = self._buffer + bytes(data)
        if not pending:
            return
        # The last block (1..16 bytes) stays buffered until finish.
        nfull = (len(pending) - 1) // _BLOCK_BYTES
        for start in range(0, nfull * _BLOCK_BYTES, _BLOCK_BYTES):
            self._absorb(pending[start:start + _BLOCK_BYTES])
        self._buffer = pending[nfull * _BLOCK_BYTES:]

    def _finish(self, length: int, const_m: int) -> bytes:
        if length < 0:
            raise ValueError(f"output length must not be negative, got {length}")
        if self._finished:
            raise ValueError("hash state already finished")
        self._finished = True

        block = self._buffer
        if len(block) < _BLOCK_BYTES:
            block = block + b"\x80" + bytes(_BLOCK_BYTES - len(block) - 1)
            tag = 1
        else:
            tag = 2
        self._buffer = b""

        self._inject(block)
        self._state[len(self._state) // 2 - 1] ^= ((tag ^ const_m) & 0xFF) << 24
        _sparkle(self._state, self._BRANCHES, self._ROUNDS_BIG)

        out = bytearray(_BLOCK.pack(*self._state[:4]))
        while len(out) < length:
            _sparkle(self._state, self._BRANCHES, self._ROUNDS_SLIM)
            out += _BLOCK.pack(*self._state[:4])
        return bytes(out[:length])

    def _copy(self: _T) -> _T:
        clone = type(self).__new__(type(self))
        clone._state = list(self._state)
        clone._buffer = self._buffer
        clone._finished = self._finished
        return clone


class XOEsch256(_XOEsch):
    """XOEsch256 / Esch256 over the 384-bit Sparkle permutation."""

    _BRANCHES = 6
    _INJECT_BRANCHES = 3
    _ROUNDS_SLIM = 7
    _ROUNDS_BIG = 11
    digest_size = 32

    def __init__(self, data: bytes = b"") -> None:
        super().__init__(data)

    def update(self, data: bytes) -> None:
        """Absorb more message bytes; raises ValueError once finished."""
        self._update(data)

    def finish(self, length: int) -> bytes:
        """Return length bytes of extendable output; the state is then spent."""
        return self._finish(length, _CONST_XOF)

    def finish_esch(self) -> bytes:
        """Return the 32-byte Esch256 digest; the state is then spent."""
        return self._finish(self.digest_size, _CONST_HASH)

    def copy(self) -> XOEsch256:
        """Return an independent copy of the current state."""
        return self._copy()


class XOEsch384(_XOEsch):
    """XOEsch384 / Esch384 over the 512-bit Sparkle permutation."""

    _BRANCHES = 8
    _INJECT_BRANCHES = 4
    _ROUNDS_SLIM = 8
    _ROUNDS_BIG = 12
    digest_size = 48

    def __init__(self, data: bytes = b"") -> None:
        super().__init__(data)

    def update(self, data: bytes) -> None:
        """Absorb more message bytes; raises ValueError once finished."""
        self._update(data)

    def finish(self, length: int) -> bytes:
        """Return length bytes of extendable output; the state is then spent."""
        return self._finish(length, _CONST_XOF)

    def finish_esch(self) -> bytes:
        """Return the 48-byte Esch384 digest; the state is then spent."""
        return self._finish(self.digest_size, _CONST_HASH)

    def copy(self) -> XOEsch384:
        """Return an independent copy of the current state."""
        return self._copy()


def xoesch256(data: bytes, length: int) -> bytes:
    """Return length bytes of XOEsch256 output for data."""
    return XOEsch256(data).finish(length)


def esch256(data: bytes) -> bytes:
    """Return the 32-byte Esch256 digest of data."""
    return XOEsch256(data).finish_esch()


def xoesch384(data: bytes, length: int) -> bytes:
    """Return length bytes of XOEsch384 output for data."""
    return XOEsch384(data).finish(length)


def esch384(data: bytes) -> bytes:
    """Return the 48-byte Esch384 digest of data."""
    return XOEsch384(data).finish_esch()