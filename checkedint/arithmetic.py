from checkedint.cast import Operands, cast_operands
from checkedint.result import CheckedResult, ErrorKind
from checkedint.settings import get_global_settings
from checkedint.types import IntegerT, IntValue, get_int_value
from checkedint.utils import c_div, c_mod


def add(R: IntegerT, t: IntValue, u: IntValue) -> CheckedResult[IntValue]:
    operands = cast_operands(R, t, u)
    if isinstance(operands, CheckedResult):
        return operands
    t, u = operands
    lo, hi = R.int_bounds

    if not R.is_signed:
        # INT30-C. Ensure that unsigned integer operations do not wrap
        if hi - u < t:
            return CheckedResult.error(
                ErrorKind.POSITIVE_OVERFLOW_ERROR, "addition result too large"
            )
    else:
        # INT32-C. Ensure that operations on signed integers do not result in overflow
        if u > 0 and t > hi - u:
            return CheckedResult.error(
                ErrorKind.POSITIVE_OVERFLOW_ERROR, "addition result too large"
            )
        if u < 0 and t < lo - u:
            return CheckedResult.error(ErrorKind.NEGATIVE_OVERFLOW_ERROR, "addition result too low")

    return CheckedResult.ok(R(t + u))


def subtract(R: IntegerT, t: IntValue, u: IntValue) -> CheckedResult[IntValue]:
    operands = cast_operands(R, t, u)
    if isinstance(operands, CheckedResult):
        return operands
    t, u = operands
    lo, hi = R.int_bounds

    if not R.is_signed:
        if t < u:
            return CheckedResult.error(
                ErrorKind.RANGE_ERROR, "subtraction result cannot be negative"
            )
    else:
        # NOTE: a result that is too low is reported as a positive overflow,
        # and a result that is too high as a negative overflow.
        if u > 0 and t < lo + u:
            return CheckedResult.error(
                ErrorKind.POSITIVE_OVERFLOW_ERROR, "subtraction result overflows result type"
            )
        if u < 0 and t > hi + u:
            return CheckedResult.error(
                ErrorKind.NEGATIVE_OVERFLOW_ERROR, "subtraction result overflows result type"
            )

    return CheckedResult.ok(R(t - u))


def _multiply_overflow(positive: bool) -> CheckedResult:
    kind = ErrorKind.POSITIVE_OVERFLOW_ERROR if positive else ErrorKind.NEGATIVE_OVERFLOW_ERROR
    return CheckedResult.error(kind, "multiplication overflow")


def multiply_widened(R: IntegerT, t: int, u: int) -> CheckedResult[IntValue]:
    """
    Multiply two values of type `R` in a scratch integer of twice the
    width of `R`, then range check the exact product.
    """
    lo, hi = R.int_bounds
    scratch_lo, scratch_hi = IntegerT(R.is_signed, 2 * R.bits).int_bounds

    product = t * u
    assert scratch_lo <= product <= scratch_hi

    if product > hi:
        return _multiply_overflow(positive=True)
    if product < lo:
        return _multiply_overflow(positive=False)
    return CheckedResult.ok(R(product))


def multiply_by_division(R: IntegerT, t: int, u: int) -> CheckedResult[IntValue]:
    """
    Multiply two values of type `R` without any wider intermediate, by
    checking each factor against the bound divided by the other factor.

    All divisions truncate toward zero, as they would on the values of `R`.
    """
    lo, hi = R.int_bounds

    if not R.is_signed:
        # INT30-C
        if u > 0 and t > hi // u:
            return _multiply_overflow(positive=True)
        return CheckedResult.ok(R(t * u))

    # INT32-C
    if t > 0:
        if u > 0:
            if t > c_div(hi, u):
                return _multiply_overflow(positive=True)
        elif u < c_div(lo, t):
            return _multiply_overflow(positive=False)
    else:  # t <= 0
        if u > 0:
            if t < c_div(lo, u):
                return _multiply_overflow(positive=False)
        # t == 0 never overflows, and must not be used as a divisor
        elif t != 0 and u < c_div(hi, t):
            return _multiply_overflow(positive=True)

    return CheckedResult.ok(R(t * u))


def multiply(R: IntegerT, t: IntValue, u: IntValue) -> CheckedResult[IntValue]:
    operands = cast_operands(R, t, u)
    if isinstance(operands, CheckedResult):
        return operands
    t, u = operands

    # widening is only possible while twice the width of R still fits in
    # the widest native integer
    native_bits = get_global_settings().get_native_bits()
    if R.bits > native_bits // 2:
        return multiply_by_division(R, int(t), int(u))
    return multiply_widened(R, int(t), int(u))


def _cast_operands_or_domain_error(R: IntegerT, t, u) -> Operands:
    operands = cast_operands(R, t, u)
    if isinstance(operands, CheckedResult):
        # the specific reason the cast failed is not reported
        return CheckedResult.error(ErrorKind.DOMAIN_ERROR, "failure converting argument types")
    return operands


def divide(R: IntegerT, t: IntValue, u: IntValue) -> CheckedResult[IntValue]:
    if get_int_value(u) == 0:
        return CheckedResult.error(ErrorKind.DOMAIN_ERROR, "divide by zero")

    operands = _cast_operands_or_domain_error(R, t, u)
    if isinstance(operands, CheckedResult):
        return operands
    t, u = operands

    if not R.is_signed:
        return CheckedResult.ok(R(t // u))

    if u == -1 and t == R.min_value:
        return CheckedResult.error(ErrorKind.RANGE_ERROR, "result cannot be represented")
    return CheckedResult.ok(R(c_div(t, u)))


def _abs(R: IntegerT, x: int) -> int:
    # -MIN is not representable in R, so MIN is returned as is
    if x < 0 and x != R.min_value:
        return -x
    return x


def modulus(R: IntegerT, t: IntValue, u: IntValue) -> CheckedResult[IntValue]:
    if get_int_value(u) == 0:
        return CheckedResult.error(ErrorKind.DOMAIN_ERROR, "denominator is zero")

    operands = _cast_operands_or_domain_error(R, t, u)
    if isinstance(operands, CheckedResult):
        return operands
    t, u = operands

    # t % u on hardware may go through a divide instruction, and
    # MIN / -1 traps. t % abs(u) has the same value: the sign of the
    # remainder follows the dividend.
    return CheckedResult.ok(R(c_mod(int(t), _abs(R, int(u)))))
