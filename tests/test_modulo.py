import pytest
from hypothesis import given, strategies as st

from pqcrkit.modulo import MODULUS_MAX, Modulus


@pytest.mark.parametrize("bad", [0, MODULUS_MAX + 1, -1, 100000])
def test_invalid_modulus_rejected(bad):
    with pytest.raises(ValueError):
        Modulus(bad)


@given(
    st.integers(min_value=1, max_value=MODULUS_MAX),
    st.integers(min_value=0, max_value=2**30 - 1),
)
def test_divmod_matches_builtin(m, x):
    mod = Modulus(m)
    assert mod.divmod(x) == divmod(x, m)
    assert mod.divide(x) == x // m
    assert mod.modulo(x) == x % m


@pytest.mark.parametrize("m", [1, 3, 977, 16381, MODULUS_MAX])
def test_extremes_of_dividend_range(m):
    mod = Modulus(m)
    for x in (0, 1, m - 1, m, m + 1, 2**30 - 1, 2**30 - 2):
        assert mod.divmod(x) == divmod(x, m)


@given(
    st.integers(min_value=1, max_value=MODULUS_MAX),
    st.integers(min_value=0, max_value=2**32 - 1),
)
def test_mult_wraps_to_32_bits(m, x):
    assert Modulus(m).mult(x) == (x * m) % 2**32


def test_repr_names_value():
    assert repr(Modulus(12289)) == "Modulus(12289)"