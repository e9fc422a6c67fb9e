"""Guards for callable and value arguments.

Every combinator on Optional and OptionalArray passes its callable argument
through one of these guards before reading container state. A None callable
raises the AbsentCallableError subclass naming its kind; a None value raises
NoSuchElementError.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from pydantic import ValidationError

from nullsafe.domain.exceptions import (
    AbsentActionError,
    AbsentCallableError,
    AbsentConsumerError,
    AbsentFunctionError,
    AbsentPredicateError,
    AbsentSupplierError,
    CallableKind,
    NoSuchElementError,
)
from nullsafe.domain.functions import Apply, Consumer, MonoFunction, Predicate, Supplier
from nullsafe.shared.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
F = TypeVar("F", bound=Callable[..., Any])

_ERRORS_BY_KIND: dict[CallableKind, type[AbsentCallableError]] = {
    CallableKind.SUPPLIER: AbsentSupplierError,
    CallableKind.CONSUMER: AbsentConsumerError,
    CallableKind.PREDICATE: AbsentPredicateError,
    CallableKind.FUNCTION: AbsentFunctionError,
    CallableKind.ACTION: AbsentActionError,
}


def _log_rejection(what: str) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    try:
        enabled = get_settings().log_guard_failures
    except ValidationError:
        # Invalid configuration never changes which guard error is raised
        return
    if enabled:
        logger.debug(f"Guard rejected None {what}")


def require_callable(fn: F | None, kind: CallableKind) -> F:
    """
    Return ``fn`` unchanged if it is not None.

    Args:
        fn: Callable argument to check
        kind: Kind of callable expected, selects the error raised

    Returns:
        The same callable

    Raises:
        AbsentCallableError: The subclass matching ``kind`` if ``fn`` is None
    """
    if fn is None:
        _log_rejection(kind.value)
        raise _ERRORS_BY_KIND[kind]()
    return fn


def require_non_none_supplier(supplier: Supplier[T] | None) -> Supplier[T]:
    return require_callable(supplier, CallableKind.SUPPLIER)


def require_non_none_consumer(consumer: Consumer[T] | None) -> Consumer[T]:
    return require_callable(consumer, CallableKind.CONSUMER)


def require_non_none_predicate(predicate: Predicate[T] | None) -> Predicate[T]:
    return require_callable(predicate, CallableKind.PREDICATE)


def require_non_none_function(fn: MonoFunction[T, U] | None) -> MonoFunction[T, U]:
    return require_callable(fn, CallableKind.FUNCTION)


def require_non_none_action(action: Apply | None) -> Apply:
    return require_callable(action, CallableKind.ACTION)


def require_non_none_value(value: T | None) -> T:
    """
    Return ``value`` unchanged if it is not None.

    Raises:
        NoSuchElementError: If ``value`` is None
    """
    if value is None:
        _log_rejection("value")
        raise NoSuchElementError()
    return value


def require_non_none_sequence(value: Sequence[T] | None) -> Sequence[T]:
    """
    Return ``value`` unchanged if the reference is not None.

    Length is not checked: an empty sequence passes.

    Raises:
        NoSuchElementError: If ``value`` is None
    """
    if value is None:
        _log_rejection("sequence")
        raise NoSuchElementError()
    return value
