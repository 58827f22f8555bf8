# fixed-width primitive types, and the typed operands built from them

import math
import struct
from functools import cached_property
from typing import Tuple

from checkedint.exceptions import InvalidLiteral, TypeCheckFailure
from checkedint.utils import int_bounds, unsigned_to_signed

RANGE_1_32 = list(range(1, 33))


class _PrimT:
    """
    Base class for checkedint types.

    Attributes
    ----------
    _id : str
        The name of the type.
    _equality_attrs : Tuple
        Attributes which together identify the type.
    """

    _id: str
    _equality_attrs: tuple = ()

    def _get_equality_attrs(self):
        return tuple(getattr(self, attr) for attr in self._equality_attrs)

    def __hash__(self):
        return hash(self._get_equality_attrs())

    def __eq__(self, other):
        if self is other:
            return True
        return (
            type(self) is type(other) and self._get_equality_attrs() == other._get_equality_attrs()
        )

    def __repr__(self):
        return self._id

    def __str__(self):
        return self._id


class IntValue(int):
    """
    An integer which knows its type.

    Operations read the operand type (the `T` or `U` of an operation) from
    `typ`. Arithmetic on an `IntValue` produces a plain `int`.
    """

    typ: "IntegerT"

    def __new__(cls, value, typ):
        ret = super().__new__(cls, value)
        ret.typ = typ
        return ret

    def __repr__(self):
        return f"{self.typ}({int(self)})"

    def __reduce__(self):
        return (IntValue, (int(self), self.typ))


class IntegerT(_PrimT):
    """
    General integer type. All signed and unsigned ints from uint8 thru int256

    Attributes
    ----------
    bits : int
        Number of bits the value occupies in memory
    is_signed : bool
        Is the value signed?
    """

    _equality_attrs = ("is_signed", "bits")

    def __init__(self, is_signed, bits):
        self.is_signed = is_signed
        self.bits = bits

    @cached_property
    def _id(self):
        u = "u" if not self.is_signed else ""
        return f"{u}int{self.bits}"

    @cached_property
    def int_bounds(self) -> Tuple[int, int]:
        return int_bounds(self.is_signed, self.bits)

    @property
    def min_value(self) -> int:
        return self.int_bounds[0]

    @property
    def max_value(self) -> int:
        return self.int_bounds[1]

    # number of value bits, excluding the sign bit
    # (`std::numeric_limits<R>::digits`)
    @cached_property
    def digits(self) -> int:
        return self.bits - 1 if self.is_signed else self.bits

    def unsigned(self) -> "IntegerT":
        return UINT(self.bits)

    def contains(self, value: int) -> bool:
        lo, hi = self.int_bounds
        return lo <= value <= hi

    def __call__(self, value) -> IntValue:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidLiteral(f"Invalid literal for type {self}: {value!r}")
        lo, hi = self.int_bounds
        if value < lo:
            raise InvalidLiteral(f"Value is below lower bound for given type ({lo})")
        if value > hi:
            raise InvalidLiteral(f"Value exceeds upper bound for given type ({hi})")
        return IntValue(value, self)

    def wrap(self, value: int) -> IntValue:
        """
        Reinterpret the low `bits` bits of `value` as a value of this type.
        """
        value &= (2**self.bits) - 1
        if self.is_signed:
            value = unsigned_to_signed(value, self.bits)
        return IntValue(value, self)

    @classmethod
    def signeds(cls) -> Tuple["IntegerT", ...]:
        return tuple(cls(is_signed=True, bits=i * 8) for i in RANGE_1_32)

    @classmethod
    def unsigneds(cls) -> Tuple["IntegerT", ...]:
        return tuple(cls(is_signed=False, bits=i * 8) for i in RANGE_1_32)

    @classmethod
    def all(cls) -> Tuple["IntegerT", ...]:
        return cls.signeds() + cls.unsigneds()


class FloatT(_PrimT):
    """
    IEEE-754 binary floating point type. Only valid as the result type
    of a cast.
    """

    _equality_attrs = ("bits",)

    # (struct format, mantissa bits including the implicit bit)
    _FORMATS = {32: ("f", 24), 64: ("d", 53)}

    def __init__(self, bits):
        if bits not in self._FORMATS:
            raise TypeCheckFailure(f"unsupported float width: {bits}")
        self.bits = bits

    @cached_property
    def _id(self):
        return f"float{self.bits}"

    @cached_property
    def mantissa_bits(self) -> int:
        return self._FORMATS[self.bits][1]

    def __call__(self, value) -> float:
        fmt = self._FORMATS[self.bits][0]
        try:
            return struct.unpack(fmt, struct.pack(fmt, float(value)))[0]
        except OverflowError:
            # beyond the largest finite value of this width
            return math.copysign(math.inf, value)

    @classmethod
    def all(cls) -> Tuple["FloatT", ...]:
        return tuple(cls(bits) for bits in cls._FORMATS)


# helper function for readability.
# returns a uint<N> type.
def UINT(bits):
    return IntegerT(False, bits)


# helper function for readability.
# returns an int<N> type.
def SINT(bits):
    return IntegerT(True, bits)


def get_int_value(value, name="operand") -> IntValue:
    if not isinstance(value, IntValue):
        raise TypeCheckFailure(
            f"{name} must be a typed integer, got {type(value).__name__}",
            hint="construct operands from a type, e.g. INT32(5)",
        )
    return value


def get_integer_type(typ, name="result type") -> IntegerT:
    if not isinstance(typ, IntegerT):
        raise TypeCheckFailure(f"{name} must be an integer type, got {typ!r}")
    return typ
