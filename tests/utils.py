from hypothesis import strategies as st

from checkedint import CheckedResult, ErrorKind
from checkedint.types import IntegerT


def values_of(typ: IntegerT):
    lo, hi = typ.int_bounds
    return st.integers(min_value=lo, max_value=hi).map(typ)


# the narrow types are fast to search exhaustively enough; wide ones
# exercise the division based paths
SMALL_TYPES = [IntegerT(s, b) for s in (True, False) for b in (8, 16)]
TYPES = [IntegerT(s, b) for s in (True, False) for b in (8, 16, 32, 64, 128)]


def assert_error(result: CheckedResult, kind: ErrorKind):
    assert result.is_error, result
    assert result.kind == kind, result


def assert_value(result: CheckedResult, expected):
    assert not result.is_error, result
    assert result.value == expected
