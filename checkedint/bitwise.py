import operator

from checkedint.result import CheckedResult, ErrorKind
from checkedint.types import IntegerT, IntValue, get_int_value, get_integer_type
from checkedint.utils import significant_bits

# INT13-C is not enforced as written: signed operands are permitted.


def _bitwise_op(R, t, u, op, combine, description) -> CheckedResult[IntValue]:
    R = get_integer_type(R)
    t = get_int_value(t)
    u = get_int_value(u)

    result_size = combine(significant_bits(t), significant_bits(u))
    if result_size > R.bits:
        return CheckedResult.error(
            ErrorKind.POSITIVE_OVERFLOW_ERROR, f"result type too small to hold {description}"
        )
    # the result is a bit pattern; take it as R sees it
    return CheckedResult.ok(R.wrap(op(int(t), int(u))))


def bitwise_or(R: IntegerT, t: IntValue, u: IntValue) -> CheckedResult[IntValue]:
    return _bitwise_op(R, t, u, operator.or_, max, "bitwise or")


def bitwise_xor(R: IntegerT, t: IntValue, u: IntValue) -> CheckedResult[IntValue]:
    return _bitwise_op(R, t, u, operator.xor, max, "bitwise xor")


def bitwise_and(R: IntegerT, t: IntValue, u: IntValue) -> CheckedResult[IntValue]:
    # NOTE: the smaller operand width is used as the required width of the
    # result.
    return _bitwise_op(R, t, u, operator.and_, min, "bitwise and")
