import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from checkedint import safe_compare
from checkedint.types import INT8, INT16, INT32, UINT8, UINT32, UINT64


@pytest.mark.parametrize(
    "t,u,expected",
    [
        # a naive C comparison converts -1 to UINT_MAX and gets these wrong
        (INT32(-1), UINT32(1), True),
        (INT32(-1), UINT32(0), True),
        (UINT32(1), INT32(-1), False),
        (UINT32(0), INT32(-1), False),
        (UINT32(0), INT32(1), True),
        (INT8(5), UINT64(2**64 - 1), True),
        (UINT64(2**64 - 1), INT8(127), False),
        (INT16(-3), INT16(-2), True),
        (UINT8(3), UINT8(3), False),
    ],
)
def test_less_than(t, u, expected):
    assert safe_compare.less_than(t, u) is expected
    assert safe_compare.greater_than(u, t) is expected


@pytest.mark.parametrize(
    "t,u,expected",
    [
        (INT32(-1), UINT32(2**32 - 1), False),
        (UINT32(2**32 - 1), INT32(-1), False),
        (INT32(7), UINT32(7), True),
        (INT8(0), UINT8(0), True),
    ],
)
def test_equal(t, u, expected):
    assert safe_compare.equal(t, u) is expected
    assert safe_compare.not_equal(t, u) is not expected


def test_explicit_types():
    assert safe_compare.less_than(-1, 1, INT8, UINT8)
    assert safe_compare.greater_than(255, -1, UINT8, INT8)
    assert safe_compare.greater_than_equal(3, 3, UINT8, INT8)
    assert safe_compare.less_than_equal(-1, 0, INT8, UINT8)


@pytest.mark.fuzzing
@settings(max_examples=200)
@given(
    t=st.integers(min_value=-(2**31), max_value=2**31 - 1),
    u=st.integers(min_value=0, max_value=2**32 - 1),
)
def test_matches_mathematical_order(t, u):
    a, b = INT32(t), UINT32(u)
    assert safe_compare.less_than(a, b) == (t < u)
    assert safe_compare.greater_than(a, b) == (t > u)
    assert safe_compare.equal(a, b) == (t == u)
    assert safe_compare.less_than_equal(b, a) == (u <= t)
