# comparisons are carried out in the result type R. if an operand does not
# fit in R, the comparison is undecidable and the cast error is returned
# in place of a truth value.

from checkedint.cast import cast_operands
from checkedint.result import CheckedResult
from checkedint.types import IntegerT, IntValue


def less_than(R: IntegerT, t: IntValue, u: IntValue) -> CheckedResult[bool]:
    operands = cast_operands(R, t, u)
    if isinstance(operands, CheckedResult):
        return operands
    tx, ux = operands
    return CheckedResult.ok(int(tx) < int(ux))


def greater_than(R: IntegerT, t: IntValue, u: IntValue) -> CheckedResult[bool]:
    operands = cast_operands(R, t, u)
    if isinstance(operands, CheckedResult):
        return operands
    tx, ux = operands
    return CheckedResult.ok(int(tx) > int(ux))


def equal(R: IntegerT, t: IntValue, u: IntValue) -> CheckedResult[bool]:
    operands = cast_operands(R, t, u)
    if isinstance(operands, CheckedResult):
        return operands
    tx, ux = operands
    return CheckedResult.ok(int(tx) == int(ux))
