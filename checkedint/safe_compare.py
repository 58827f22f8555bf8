"""
Comparisons between integers of possibly different signedness.

In C, comparing a negative signed value against an unsigned one converts
the signed operand to unsigned first, so `-1 < 1u` is false. The functions
here never rely on such a conversion: when the signedness of the two
operands differs, the sign of the signed operand is tested first and the
magnitudes are only compared once both are known to be non-negative.

Each operand is an `IntValue`, or a plain `int` paired with an explicit
`IntegerT` via the `t_typ` / `u_typ` arguments (plain ints default to a
signed interpretation).
"""

from checkedint.types import IntegerT, IntValue


def _is_signed(x, typ) -> bool:
    if typ is not None:
        return typ.is_signed
    if isinstance(x, IntValue):
        return x.typ.is_signed
    return True


def less_than(t, u, t_typ: IntegerT = None, u_typ: IntegerT = None) -> bool:
    t_signed = _is_signed(t, t_typ)
    u_signed = _is_signed(u, u_typ)

    if t_signed == u_signed:
        return int(t) < int(u)

    if t_signed:
        # signed < unsigned
        return t < 0 or int(t) < int(u)

    # unsigned < signed
    return u > 0 and int(t) < int(u)


def greater_than(t, u, t_typ: IntegerT = None, u_typ: IntegerT = None) -> bool:
    return less_than(u, t, u_typ, t_typ)


def less_than_equal(t, u, t_typ: IntegerT = None, u_typ: IntegerT = None) -> bool:
    return not greater_than(t, u, t_typ, u_typ)


def greater_than_equal(t, u, t_typ: IntegerT = None, u_typ: IntegerT = None) -> bool:
    return not less_than(t, u, t_typ, u_typ)


def equal(t, u, t_typ: IntegerT = None, u_typ: IntegerT = None) -> bool:
    t_signed = _is_signed(t, t_typ)
    u_signed = _is_signed(u, u_typ)

    if t_signed == u_signed:
        return int(t) == int(u)

    # a negative signed value never equals an unsigned one
    if (t_signed and t < 0) or (u_signed and u < 0):
        return False
    return int(t) == int(u)


def not_equal(t, u, t_typ: IntegerT = None, u_typ: IntegerT = None) -> bool:
    return not equal(t, u, t_typ, u_typ)
