from hypothesis import given
from hypothesis import strategies as st

from dilipoly.params import Q
from dilipoly.reduce import MONT, caddq, freeze, montgomery_reduce, reduce32

INT32_MIN = -(1 << 31)
REDUCE32_MAX = (1 << 31) - (1 << 22) - 1


def test_montgomery_reduce_zero():
    assert montgomery_reduce(0) == 0


@given(st.integers(min_value=0, max_value=Q - 1))
def test_montgomery_reduce_undoes_mont_factor(x):
    assert freeze(montgomery_reduce(x * MONT)) == x


@given(st.integers(min_value=INT32_MIN, max_value=REDUCE32_MAX))
def test_reduce32_congruence_and_range(a):
    r = reduce32(a)
    assert -6283008 <= r <= 6283008
    assert (r - a) % Q == 0


def test_reduce32_of_q_is_zero():
    assert reduce32(Q) == 0


def test_caddq_negative_and_positive():
    assert caddq(-1) == Q - 1
    assert caddq(5) == 5
    assert caddq(0) == 0


@given(st.integers(min_value=INT32_MIN, max_value=REDUCE32_MAX))
def test_freeze_is_standard_representative(a):
    r = freeze(a)
    assert 0 <= r < Q
    assert r == a % Q