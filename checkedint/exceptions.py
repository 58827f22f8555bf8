class _BaseCheckedIntException(Exception):
    """
    Base checkedint exception class.

    This exception is not raised directly. Other exceptions inherit it in
    order to share message and hint formatting.
    """

    def __init__(self, message="Error Message not found.", *, hint=None):
        """
        Exception initializer.

        Arguments
        ---------
        message : str
            Error message to display with the exception.
        hint : str | Callable[[], str], optional
            Additional help for the caller. A callable is only evaluated
            when the formatted message is requested.
        """
        self._message = message
        self._hint = hint
        super().__init__(message)

    @property
    def hint(self):
        # some hints are expensive to compute, so we wait until the last
        # minute when the formatted message is actually requested to compute
        # them.
        if callable(self._hint):
            return self._hint()
        return self._hint

    @property
    def message(self):
        msg = self._message
        if self.hint:
            msg += f"\n\n  (hint: {self.hint})"
        return msg

    def __str__(self):
        return self.message


class CheckedIntException(_BaseCheckedIntException):
    pass


class CheckedArithmeticException(CheckedIntException, ArithmeticError):
    """
    An error result was unwrapped.

    Subclasses map one-to-one onto `ErrorKind` members; the originating
    kind is available as `kind`.
    """

    def __init__(self, message="Error Message not found.", *, kind=None, hint=None):
        super().__init__(message, hint=hint)
        self.kind = kind


class PositiveOverflowException(CheckedArithmeticException):
    """Result exceeds the maximum of the result type."""


class NegativeOverflowException(CheckedArithmeticException):
    """Result is below the minimum of the result type."""


class RangeException(CheckedArithmeticException):
    """Result exists but cannot be represented in the result type."""


class DomainException(CheckedArithmeticException):
    """Operation is undefined for the given arguments."""


class UndefinedBehaviorException(CheckedArithmeticException):
    """Operation would invoke undefined behavior."""


class ImplementationDefinedBehaviorException(CheckedArithmeticException):
    """Operation result depends on the platform."""


class InvalidLiteral(CheckedIntException):
    """Literal value cannot be held by the requested type."""


class UnknownType(CheckedIntException):
    """Reference to a type that does not exist."""


class CheckedIntInternalException(_BaseCheckedIntException):
    """
    Base checkedint internal exception class.

    This exception is not raised directly, it is subclassed by other internal
    exceptions.

    Internal exceptions signal misuse of the library or a broken internal
    invariant, never an arithmetic failure.
    """

    def __str__(self):
        return f"{super().__str__()}\n\nThis is an internal checkedint error."


class CheckedIntPanic(CheckedIntInternalException):
    """General unexpected error."""


class TypeCheckFailure(CheckedIntInternalException):
    """An operand or result type of the wrong kind was passed to an operation."""
