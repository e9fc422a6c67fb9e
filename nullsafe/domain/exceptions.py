"""
Exception hierarchy for null-safe containers.

All failures raised by this package signal programmer error (an unsafe access
on an empty container, or a missing callable passed to a combinator). They are
raised immediately at the call boundary and are never caught internally.

Two families are kept apart on purpose:
- NoSuchElementError: a *value* is absent (``get`` on an empty container).
- AbsentCallableError and subclasses: a *callable* argument is absent.
"""

from enum import Enum


class CallableKind(str, Enum):
    """Kinds of callables accepted by container combinators."""

    SUPPLIER = "supplier"
    CONSUMER = "consumer"
    PREDICATE = "predicate"
    FUNCTION = "function"
    ACTION = "action"


class NullSafeError(Exception):
    """
    Base exception for all null-safe container errors.

    Catch this to handle any failure raised by this package.
    """

    pass


class NoSuchElementError(NullSafeError, LookupError):
    """Raised when a value is requested from an empty container."""

    default_message = "No value present"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class AbsentCallableError(NullSafeError, TypeError):
    """
    Base exception for a callable argument that is None.

    Attributes:
        kind: The kind of callable that was missing
    """

    kind: CallableKind

    def __init__(self) -> None:
        super().__init__(f"Applied {self.kind.value} which was passed to evaluate is None.")

    def __str__(self) -> str:
        """Return message prefixed with the error class name."""
        return f"{type(self).__name__}: {super().__str__()}"


class AbsentSupplierError(AbsentCallableError):
    """Raised when a supplier argument is None."""

    kind = CallableKind.SUPPLIER


class AbsentConsumerError(AbsentCallableError):
    """Raised when a consumer argument is None."""

    kind = CallableKind.CONSUMER


class AbsentPredicateError(AbsentCallableError):
    """Raised when a predicate argument is None."""

    kind = CallableKind.PREDICATE


class AbsentFunctionError(AbsentCallableError):
    """Raised when a transform function argument is None."""

    kind = CallableKind.FUNCTION


class AbsentActionError(AbsentCallableError):
    """Raised when a zero-argument action is None."""

    kind = CallableKind.ACTION
