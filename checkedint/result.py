from enum import auto
from typing import Any, Generic, Optional, TypeVar

from checkedint.exceptions import (
    CheckedIntPanic,
    DomainException,
    ImplementationDefinedBehaviorException,
    NegativeOverflowException,
    PositiveOverflowException,
    RangeException,
    UndefinedBehaviorException,
)
from checkedint.utils import StringEnum

_R = TypeVar("_R")


class ErrorAction(StringEnum):
    # the result is mathematically wrong or does not exist
    ARITHMETIC_ERROR = auto()
    UNDEFINED_BEHAVIOR = auto()
    IMPLEMENTATION_DEFINED_BEHAVIOR = auto()


class ErrorKind(StringEnum):
    POSITIVE_OVERFLOW_ERROR = auto()
    NEGATIVE_OVERFLOW_ERROR = auto()
    RANGE_ERROR = auto()
    DOMAIN_ERROR = auto()
    UNDEFINED_BEHAVIOR = auto()
    IMPLEMENTATION_DEFINED_BEHAVIOR = auto()

    @property
    def action(self) -> ErrorAction:
        if self is ErrorKind.UNDEFINED_BEHAVIOR:
            return ErrorAction.UNDEFINED_BEHAVIOR
        if self is ErrorKind.IMPLEMENTATION_DEFINED_BEHAVIOR:
            return ErrorAction.IMPLEMENTATION_DEFINED_BEHAVIOR
        return ErrorAction.ARITHMETIC_ERROR

    @property
    def exception_class(self):
        return _EXCEPTIONS[self]


_EXCEPTIONS = {
    ErrorKind.POSITIVE_OVERFLOW_ERROR: PositiveOverflowException,
    ErrorKind.NEGATIVE_OVERFLOW_ERROR: NegativeOverflowException,
    ErrorKind.RANGE_ERROR: RangeException,
    ErrorKind.DOMAIN_ERROR: DomainException,
    ErrorKind.UNDEFINED_BEHAVIOR: UndefinedBehaviorException,
    ErrorKind.IMPLEMENTATION_DEFINED_BEHAVIOR: ImplementationDefinedBehaviorException,
}


class CheckedResult(Generic[_R]):
    """
    Outcome of a checked operation: either a value or an error.

    Exactly one variant is active. A value result holds `value`; an error
    result holds `kind` (an `ErrorKind`) and a diagnostic `message`, which
    is meant for humans and should never be parsed.

    Results are immutable and compare equal when their variants and
    payloads are equal.
    """

    __slots__ = ("_value", "_kind", "_message")

    def __init__(self, value: Optional[_R] = None, kind: Optional[ErrorKind] = None, message=""):
        if (value is None) == (kind is None):
            raise CheckedIntPanic("CheckedResult must hold exactly one of a value or an error")
        if kind is not None and not isinstance(kind, ErrorKind):
            raise CheckedIntPanic(f"not an ErrorKind: {kind!r}")
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_message", message)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @classmethod
    def ok(cls, value: _R) -> "CheckedResult[_R]":
        return cls(value=value)

    @classmethod
    def error(cls, kind: ErrorKind, message: str) -> "CheckedResult[Any]":
        return cls(kind=kind, message=message)

    @property
    def is_error(self) -> bool:
        return self._kind is not None

    # alias of is_error
    def exception(self) -> bool:
        return self.is_error

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def value(self) -> _R:
        """
        The wrapped value. Accessing it on an error result raises the
        exception mapped to the error kind.
        """
        self.dispatch()
        return self._value  # type: ignore

    def dispatch(self) -> None:
        if self._kind is not None:
            exc_cls = self._kind.exception_class
            raise exc_cls(f"{self._kind}: {self._message}", kind=self._kind)

    def unwrap(self) -> _R:
        return self.value

    def unwrap_or(self, default):
        if self.is_error:
            return default
        return self._value

    def __eq__(self, other):
        if not isinstance(other, CheckedResult):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def _key(self):
        # IntValue compares as a plain int, so its type is compared separately
        return (self._value, getattr(self._value, "typ", None), self._kind, self._message)

    def __repr__(self):
        if self.is_error:
            return f"CheckedResult(Error({self._kind}, {self._message!r}))"
        return f"CheckedResult(Value({self._value!r}))"


def value_of(result: CheckedResult[_R]) -> _R:
    return result.value
