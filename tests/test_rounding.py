import pytest
from hypothesis import given
from hypothesis import strategies as st

from dilipoly.params import D, Q
from dilipoly.rounding import decompose, make_hint, power2round, use_hint

GAMMA2_VALUES = [(Q - 1) // 88, (Q - 1) // 32]
coeffs = st.integers(min_value=0, max_value=Q - 1)
gammas = st.sampled_from(GAMMA2_VALUES)


@given(coeffs)
def test_power2round_recombines(a):
    a1, a0 = power2round(a)
    assert a1 * (1 << D) + a0 == a
    assert -(1 << (D - 1)) < a0 <= 1 << (D - 1)


@given(coeffs, gammas)
def test_decompose_recombines_within_bounds(a, gamma2):
    a1, a0 = decompose(a, gamma2)
    m = (Q - 1) // (2 * gamma2)
    assert 0 <= a1 < m
    assert (a1 * 2 * gamma2 + a0 - a) % Q == 0
    assert -gamma2 <= a0 <= gamma2
    if a0 == -gamma2:
        assert a1 == 0


@pytest.mark.parametrize("gamma2", GAMMA2_VALUES)
def test_decompose_top_wraps_to_zero(gamma2):
    assert decompose(Q - 1, gamma2) == (0, -1)


def test_decompose_rejects_unknown_gamma2():
    with pytest.raises(ValueError):
        decompose(0, 12345)


@pytest.mark.parametrize("gamma2", GAMMA2_VALUES)
def test_make_hint_boundaries(gamma2):
    assert make_hint(0, 0, gamma2) == 0
    assert make_hint(gamma2, 0, gamma2) == 0
    assert make_hint(gamma2 + 1, 0, gamma2) == 1
    assert make_hint(-gamma2 - 1, 0, gamma2) == 1
    assert make_hint(-gamma2, 0, gamma2) == 0
    assert make_hint(-gamma2, 1, gamma2) == 1


@given(coeffs, gammas)
def test_use_hint_zero_keeps_high_bits(a, gamma2):
    assert use_hint(a, 0, gamma2) == decompose(a, gamma2)[0]


@given(coeffs, gammas)
def test_use_hint_one_moves_by_one(a, gamma2):
    m = (Q - 1) // (2 * gamma2)
    a1, _ = decompose(a, gamma2)
    r = use_hint(a, 1, gamma2)
    assert 0 <= r < m
    assert (r - a1) % m in {1, m - 1}


def test_use_hint_wraps_below_zero():
    assert use_hint(Q - 1, 1, (Q - 1) // 88) == 43
    assert use_hint(Q - 1, 1, (Q - 1) // 32) == 15


def test_use_hint_rejects_unknown_gamma2():
    with pytest.raises(ValueError):
        use_hint(0, 1, 777)