from checkedint.exceptions import UnknownType

from .primitives import (
    SINT,
    UINT,
    FloatT,
    IntegerT,
    IntValue,
    get_int_value,
    get_integer_type,
)

INT8, INT16, INT32, INT64, INT128, INT256 = (SINT(b) for b in (8, 16, 32, 64, 128, 256))
UINT8, UINT16, UINT32, UINT64, UINT128, UINT256 = (UINT(b) for b in (8, 16, 32, 64, 128, 256))
FLOAT32, FLOAT64 = FloatT(32), FloatT(64)


def _get_primitive_types():
    res = []
    res.extend(IntegerT.all())
    res.extend(FloatT.all())

    return {t._id: t for t in res}


# note: it might be good to make this a frozen dict of some sort
PRIMITIVE_TYPES = _get_primitive_types()


def parse_type(name: str):
    try:
        return PRIMITIVE_TYPES[name]
    except KeyError:
        raise UnknownType(f"No builtin type '{name}'") from None


__all__ = [
    "FLOAT32",
    "FLOAT64",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "INT128",
    "INT256",
    "PRIMITIVE_TYPES",
    "SINT",
    "UINT",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "UINT128",
    "UINT256",
    "FloatT",
    "IntValue",
    "IntegerT",
    "get_int_value",
    "get_integer_type",
    "parse_type",
]
