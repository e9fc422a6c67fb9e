"""Optional container for explicit None-safety.

An Optional either holds a value (present) or holds None (empty). Presence is
derived from the held value on every call, never stored separately. Containers
are immutable: every combinator returns the same instance or a new one.

Usage:
    from nullsafe import Optional

    name = Optional.of_nullable(user.nickname).map(str.strip).or_else("anonymous")
"""

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from nullsafe.domain.exceptions import NoSuchElementError
from nullsafe.domain.functions import Apply, Consumer, MonoFunction, Predicate, Supplier
from nullsafe.domain.validation import (
    require_non_none_action,
    require_non_none_consumer,
    require_non_none_function,
    require_non_none_predicate,
    require_non_none_supplier,
    require_non_none_value,
)

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, eq=False, repr=False)
class Optional(Generic[T]):
    """
    Single-value container that is either present or empty.

    Do not call the constructor directly; use the factories ``of``,
    ``of_nullable``, ``of_nullish``, ``of_async`` or ``empty``.
    """

    _value: T | None = None

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "Optional[T]":
        """Return the shared empty Optional."""
        return _EMPTY

    @classmethod
    def of(cls, value: T) -> "Optional[T]":
        """
        Create a present Optional.

        Raises:
            NoSuchElementError: If ``value`` is None
        """
        return cls(require_non_none_value(value))

    @classmethod
    def of_nullable(cls, value: T | None) -> "Optional[T]":
        """Create an Optional that is empty when ``value`` is None."""
        return cls.of_nullish(value)

    @classmethod
    def of_nullish(cls, value: T | None) -> "Optional[T]":
        """Create an Optional that is empty when ``value`` is None."""
        if value is None:
            return _EMPTY
        return cls(value)

    @classmethod
    async def of_async(cls, awaitable: Awaitable[T | None]) -> "Optional[T]":
        """
        Await ``awaitable`` and wrap its result like ``of_nullable``.

        Exceptions raised by the awaitable propagate unchanged.
        """
        return cls.of_nullable(await awaitable)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def get(self) -> T:
        """
        Return the held value.

        Raises:
            NoSuchElementError: If the Optional is empty
        """
        return require_non_none_value(self._value)

    def or_else(self, other: T) -> T:
        """Return the held value, or ``other`` when empty."""
        return self._value if self._value is not None else other

    def or_else_get(self, supplier: Supplier[T]) -> T:
        """Return the held value, or the result of ``supplier()`` when empty."""
        supplier_checked = require_non_none_supplier(supplier)
        return self._value if self._value is not None else supplier_checked()

    def or_else_throw_error(self, error_supplier: Supplier[BaseException]) -> T:
        """
        Return the held value, or raise the exception produced by ``error_supplier``.

        Raises:
            AbsentSupplierError: If ``error_supplier`` is None
        """
        error_supplier_checked = require_non_none_supplier(error_supplier)
        if self._value is None:
            raise error_supplier_checked()
        return self._value

    def or_else_throw(self) -> T:
        """
        Return the held value.

        Raises:
            NoSuchElementError: If the Optional is empty
        """
        if self._value is None:
            raise NoSuchElementError()
        return self._value

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def is_empty(self) -> bool:
        return self._value is None

    def is_present(self) -> bool:
        return self._value is not None

    def equals(self, other: "Optional[Any]") -> bool:
        """
        Compare with another Optional.

        Two Optionals are equal when both are empty, or both are present and
        their values compare equal with ``==`` (shallow, host equality).
        """
        if not isinstance(other, Optional):
            return False
        if self.is_empty() and other.is_empty():
            return True
        return self.is_present() and other.is_present() and self._value == other._value

    # ------------------------------------------------------------------
    # Side effects
    # ------------------------------------------------------------------

    def if_present(self, consumer: Consumer[T]) -> None:
        """Call ``consumer`` with the held value if present."""
        consumer_checked = require_non_none_consumer(consumer)
        if self._value is not None:
            consumer_checked(self._value)

    def if_present_or_else(self, consumer_present: Consumer[T], apply_empty: Apply) -> None:
        """Call ``consumer_present`` with the value if present, otherwise ``apply_empty``."""
        consumer_checked = require_non_none_consumer(consumer_present)
        apply_checked = require_non_none_action(apply_empty)
        if self._value is not None:
            consumer_checked(self._value)
        else:
            apply_checked()

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def map(self, fn: MonoFunction[T, U]) -> "Optional[U]":
        """
        Transform the held value with ``fn``.

        Empty stays empty and ``fn`` is not called. A ``fn`` result of None
        produces an empty Optional.
        """
        fn_checked = require_non_none_function(fn)
        if self._value is None:
            return _EMPTY
        return Optional.of_nullable(fn_checked(self._value))

    def or_(self, supplier: Supplier[T | None]) -> "Optional[T]":
        """
        Return self if present, otherwise an Optional built from ``supplier()``.

        ``supplier`` is only called when empty.
        """
        supplier_checked = require_non_none_supplier(supplier)
        if self._value is not None:
            return self
        return Optional.of_nullable(supplier_checked())

    def filter(self, predicate: Predicate[T]) -> "Optional[T]":
        """Return self if present and ``predicate`` holds, otherwise empty."""
        predicate_checked = require_non_none_predicate(predicate)
        if self._value is None:
            return _EMPTY
        return self if predicate_checked(self._value) else _EMPTY

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((Optional, self._value))

    def __repr__(self) -> str:
        if self._value is None:
            return "Optional.empty"
        return f"Optional({self._value!r})"


# Shared empty instance returned by every empty() call
_EMPTY: Optional[Any] = Optional(None)
