from checkedint import safe_compare
from checkedint.cast import cast
from checkedint.result import CheckedResult, ErrorKind
from checkedint.types import IntegerT, IntValue, get_int_value, get_integer_type
from checkedint.utils import significant_bits


def _check_shift_amount(R: IntegerT, u: IntValue):
    # INT34-C - Do not shift an expression by a negative number of bits
    if u < 0:
        return CheckedResult.error(
            ErrorKind.IMPLEMENTATION_DEFINED_BEHAVIOR,
            "shifting negative amount is implementation defined behavior",
        )
    if safe_compare.greater_than(u, R.digits, u.typ, R):
        return CheckedResult.error(
            ErrorKind.IMPLEMENTATION_DEFINED_BEHAVIOR,
            "shifting more bits than available is implementation defined behavior",
        )
    return None


def _left_shift_unsigned(R: IntegerT, t: IntValue, u: IntValue) -> CheckedResult[IntValue]:
    # E1 << E2 is E1 * 2**E2. every bit of it must survive in R
    if safe_compare.greater_than(u, R.digits - significant_bits(t), u.typ, None):
        return CheckedResult.error(
            ErrorKind.UNDEFINED_BEHAVIOR,
            "shifting left more bits than available is undefined behavior",
        )
    return CheckedResult.ok(R(int(t) << int(u)))


def left_shift(R: IntegerT, t: IntValue, u: IntValue) -> CheckedResult[IntValue]:
    """
    Shift `t` left by `u` bits, producing a value of type `R`.

    A shift by zero returns `t` itself, without converting it to `R`.
    """
    R = get_integer_type(R)
    t = get_int_value(t)
    u = get_int_value(u)

    if u == 0:
        return CheckedResult.ok(t)

    err = _check_shift_amount(R, u)
    if err is not None:
        return err

    if t == 0:
        return cast(R, t)

    if not t.typ.is_signed:
        return _left_shift_unsigned(R, t, u)

    if t >= 0:
        # a non-negative signed value shifts exactly like its unsigned
        # counterpart
        return left_shift(R, t.typ.unsigned()(int(t)), u)

    return CheckedResult.error(
        ErrorKind.UNDEFINED_BEHAVIOR, "shifting a negative value is undefined behavior"
    )


def right_shift(R: IntegerT, t: IntValue, u: IntValue) -> CheckedResult[IntValue]:
    """
    Shift `t` right by `u` bits, producing a value of type `R`.

    A shift by zero returns `t` itself, without converting it to `R`.
    """
    R = get_integer_type(R)
    t = get_int_value(t)
    u = get_int_value(u)

    if u == 0:
        return CheckedResult.ok(t)

    err = _check_shift_amount(R, u)
    if err is not None:
        return err

    if t == 0:
        return CheckedResult.ok(R(0))

    if t.typ.is_signed and t < 0:
        # sign extension is implementation defined, not undefined
        return CheckedResult.error(
            ErrorKind.IMPLEMENTATION_DEFINED_BEHAVIOR,
            "shifting a negative value is implementation defined behavior",
        )

    # the integral part of E1 / 2**E2, still of type T
    return cast(R, t.typ(int(t) >> int(u)))
