"""Division and remainder by small moduli using a precomputed reciprocal."""

MODULUS_MAX = 16384

_U32 = 0xFFFFFFFF


def _ceildiv(x: int, div: int) -> int:
    return (x + div - 1) // div


class Modulus:
    """A divisor in the range 1..16384 with a fixed-point reciprocal.

    Dividends are expected to be below 2**30; no range check is made on them.
    """

    __slots__ = ("value", "recip", "shift")

    def __init__(self, value: int) -> None:
        if not 1 <= value <= MODULUS_MAX:
            raise ValueError(f"modulus must be in 1..{MODULUS_MAX}, got {value}")
        shift = value.bit_length()
        recip = _ceildiv(1 << (31 + shift), value)
        if recip & 1 == 0:
            recip >>= 1
            shift -= 1
        self.value = value
        self.recip = recip
        self.shift = shift

    def __repr__(self) -> str:
        return f"Modulus({self.value})"

    def divide(self, value: int) -> int:
        """Return value // self.value."""
        return ((value * self.recip) >> (31 + self.shift)) & _U32

    def divmod(self, value: int) -> tuple[int, int]:
        """Return (quotient, remainder) of value by this modulus."""
        quotient = self.divide(value)
        remainder = (value - quotient * self.value) & _U32
        return quotient, remainder

    def modulo(self, value: int) -> int:
        """Return value % self.value."""
        return self.divmod(value)[1]

    def mult(self, value: int) -> int:
        """Return value * self.value, wrapped to 32 bits."""
        return (value * self.value) & _U32