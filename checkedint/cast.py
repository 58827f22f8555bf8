import math
from typing import Tuple, Union

from checkedint import safe_compare
from checkedint.exceptions import TypeCheckFailure
from checkedint.result import CheckedResult, ErrorKind
from checkedint.settings import get_global_settings
from checkedint.types import FloatT, IntegerT, IntValue, get_int_value, get_integer_type
from checkedint.utils import checked_warn, significant_bits


def _cast_integer(R: IntegerT, t: IntValue) -> CheckedResult[IntValue]:
    T = t.typ
    lo, hi = R.int_bounds

    if R.is_signed and T.is_signed:
        # INT32-C Ensure that operations on signed integers do not overflow
        if safe_compare.greater_than(t, hi, T, R):
            return CheckedResult.error(
                ErrorKind.POSITIVE_OVERFLOW_ERROR, "converted signed value too large"
            )
        if safe_compare.less_than(t, lo, T, R):
            return CheckedResult.error(
                ErrorKind.NEGATIVE_OVERFLOW_ERROR, "converted signed value too small"
            )

    elif R.is_signed:
        # INT30-C Ensure that unsigned integer operations do not wrap
        if safe_compare.greater_than(t, hi, T, R):
            return CheckedResult.error(
                ErrorKind.POSITIVE_OVERFLOW_ERROR, "converted unsigned value too large"
            )

    elif not T.is_signed:
        if safe_compare.greater_than(t, hi, T, R):
            return CheckedResult.error(
                ErrorKind.POSITIVE_OVERFLOW_ERROR, "converted unsigned value too large"
            )

    else:
        # signed -> unsigned
        if safe_compare.less_than(t, 0, T, T):
            return CheckedResult.error(
                ErrorKind.DOMAIN_ERROR, "converted negative value to unsigned"
            )
        if safe_compare.greater_than(t, hi, T, R):
            return CheckedResult.error(
                ErrorKind.POSITIVE_OVERFLOW_ERROR, "converted signed value too large"
            )

    return CheckedResult.ok(R(int(t)))


def _cast_float(R: FloatT, t: IntValue) -> CheckedResult[float]:
    # no failure path. precision loss is only reported as a warning
    ret = R(int(t))
    if get_global_settings().get_warn_lossy_cast():
        excess = significant_bits(t) - R.mantissa_bits
        if math.isinf(ret) or (excess > 0 and abs(int(t)) % (2**excess) != 0):
            checked_warn(f"cast of {t!r} to {R} loses precision (result: {ret!r})")
    return CheckedResult.ok(ret)


def cast(R, t) -> CheckedResult:
    """
    Convert the typed integer `t` to the type `R`.

    Arguments
    ---------
    R : IntegerT | FloatT
        The result type.
    t : IntValue
        The value to convert; its type is the source type.

    Returns
    -------
    CheckedResult
        `t` as a value of type `R`, or an error if `t` is not representable
        in `R` (`positive_overflow_error`, `negative_overflow_error`, or
        `domain_error` for a negative value cast to an unsigned type).
        Casts to a floating point type always succeed.
    """
    t = get_int_value(t)
    if isinstance(R, FloatT):
        return _cast_float(R, t)
    if not isinstance(R, IntegerT):
        raise TypeCheckFailure(f"cannot cast to {R!r}")
    return _cast_integer(R, t)


Operands = Union[CheckedResult, Tuple[IntValue, IntValue]]


def cast_operands(R: IntegerT, t, u) -> Operands:
    """
    Bring both operands of a binary operation into the result type `R`.

    Returns the failing cast result if either operand does not fit,
    otherwise a tuple of the converted operands.
    """
    R = get_integer_type(R)
    rt = cast(R, t)
    if rt.is_error:
        return rt
    ru = cast(R, u)
    if ru.is_error:
        return ru
    return rt.value, ru.value
