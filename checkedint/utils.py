import enum
import warnings

from checkedint.exceptions import CheckedIntPanic


class StringEnum(enum.Enum):
    # Must be first, or else won't work, specifies what .value is
    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return name.lower()

    # Override ValueError with our own internal exception
    @classmethod
    def _missing_(cls, value):
        raise CheckedIntPanic(f"{value} is not a valid {cls.__name__}")

    def __str__(self) -> str:
        return self.value


def int_bounds(signed, bits):
    """
    calculate the bounds on an integer type
    ex. int_bounds(True, 8) -> (-128, 127)
        int_bounds(False, 8) -> (0, 255)
    """
    if signed:
        return -(2 ** (bits - 1)), (2 ** (bits - 1)) - 1
    return 0, (2**bits) - 1


def significant_bits(x: int) -> int:
    """
    Number of bits needed to hold the magnitude of `x`.
    ex. significant_bits(0) -> 0
        significant_bits(255) -> 8
        significant_bits(-128) -> 8
    """
    return int(x).bit_length()


def unsigned_to_signed(int_, bits):
    """
    Reinterpret an unsigned integer with n bits as a signed integer.
    """
    if int_ > (2 ** (bits - 1)) - 1:
        return int_ - (2**bits)
    return int_


# C division semantics as a python function (truncates toward zero)
def c_div(x, y):
    sign = -1 if (x * y) < 0 else 1
    return sign * (abs(x) // abs(y))


# C remainder semantics as a python function
# (the sign of the result follows the dividend)
def c_mod(x, y):
    sign = -1 if x < 0 else 1
    return sign * (abs(x) % abs(y))


def checked_warn(msg):
    warnings.warn(msg, stacklevel=2)
