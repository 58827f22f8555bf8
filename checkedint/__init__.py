from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _version

from checkedint.arithmetic import (
    add,
    divide,
    modulus,
    multiply,
    multiply_by_division,
    multiply_widened,
    subtract,
)
from checkedint.bitwise import bitwise_and, bitwise_or, bitwise_xor
from checkedint.cast import cast
from checkedint.comparison import equal, greater_than, less_than
from checkedint.result import CheckedResult, ErrorAction, ErrorKind, value_of
from checkedint.shift import left_shift, right_shift
from checkedint.types import (
    FLOAT32,
    FLOAT64,
    INT8,
    INT16,
    INT32,
    INT64,
    INT128,
    INT256,
    SINT,
    UINT,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    UINT128,
    UINT256,
    FloatT,
    IntegerT,
    IntValue,
    parse_type,
)

__version__: str
try:
    __version__ = _version(__name__)
except PackageNotFoundError:
    from checkedint.version import version

    __version__ = version
