"""OptionalArray container for possibly missing or empty sequences.

An OptionalArray is present only when it holds a non-None sequence with at
least one element. A None reference and a zero-length sequence are both empty.

Note the deliberate asymmetry: ``get()`` only rejects a None reference, so an
OptionalArray built with ``of_not_nullish_array([])`` is empty but still
returns its (empty) sequence from ``get()``.
"""

from collections.abc import Awaitable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from nullsafe.domain.functions import Consumer, MonoFunction, Predicate
from nullsafe.domain.optional import Optional
from nullsafe.domain.validation import (
    require_non_none_consumer,
    require_non_none_function,
    require_non_none_predicate,
    require_non_none_sequence,
)

T = TypeVar("T")
U = TypeVar("U")


def _has_elements(value: Sequence[Any] | None) -> bool:
    return value is not None and len(value) > 0


@dataclass(frozen=True, eq=False, repr=False)
class OptionalArray(Generic[T]):
    """
    Sequence container that is either present (non-empty) or empty.

    Do not call the constructor directly; use ``of_array``,
    ``of_array_async``, ``of_not_nullish_array`` or ``empty``.
    """

    _value: Sequence[T] | None = None

    @classmethod
    def empty(cls) -> "OptionalArray[T]":
        """Return the shared empty OptionalArray."""
        return _EMPTY_ARRAY

    @classmethod
    def of_array(cls, value: Sequence[T] | None) -> "OptionalArray[T]":
        """Create an OptionalArray that is empty for None or a zero-length sequence."""
        if _has_elements(value):
            return cls.of_not_nullish_array(value)
        return _EMPTY_ARRAY

    @classmethod
    async def of_array_async(cls, awaitable: Awaitable[Sequence[T] | None]) -> "OptionalArray[T]":
        """
        Await ``awaitable`` and wrap its result like ``of_array``.

        Exceptions raised by the awaitable propagate unchanged.
        """
        return cls.of_array(await awaitable)

    @classmethod
    def of_not_nullish_array(cls, value: Sequence[T] | None) -> "OptionalArray[T]":
        """
        Create an OptionalArray from a sequence that must not be None.

        A zero-length sequence is accepted (and is empty).

        Raises:
            NoSuchElementError: If ``value`` is None
        """
        return cls(require_non_none_sequence(value))

    def is_empty(self) -> bool:
        return not _has_elements(self._value)

    def is_present(self) -> bool:
        return _has_elements(self._value)

    def is_nullish(self) -> bool:
        """True only when no sequence is held at all."""
        return self._value is None

    def equals(self, other: "OptionalArray[Any]") -> bool:
        """
        Compare with another OptionalArray.

        Equal when both are empty, or both are present and their sequences
        compare equal with ``==``.
        """
        if not isinstance(other, OptionalArray):
            return False
        if self.is_empty() and other.is_empty():
            return True
        return self.is_present() and other.is_present() and self._value == other._value

    def get(self) -> Sequence[T]:
        """
        Return the held sequence, even if it has no elements.

        Raises:
            NoSuchElementError: If no sequence is held
        """
        return require_non_none_sequence(self._value)

    def get_safe(self) -> Sequence[T]:
        """Return the held sequence if present, otherwise a new empty list."""
        if _has_elements(self._value):
            return self._value
        return []

    def if_present(self, consumer: Consumer[Sequence[T]]) -> None:
        """Call ``consumer`` with the whole sequence if present."""
        consumer_checked = require_non_none_consumer(consumer)
        if _has_elements(self._value):
            consumer_checked(self._value)

    def if_one_present(self, consumer: Consumer[T]) -> None:
        """Call ``consumer`` with the only element if exactly one is held."""
        consumer_checked = require_non_none_consumer(consumer)
        if _has_elements(self._value) and len(self._value) == 1:
            consumer_checked(self._value[0])

    def map(self, fn: MonoFunction[T, U]) -> "OptionalArray[U]":
        """Apply ``fn`` to every element, preserving order."""
        fn_checked = require_non_none_function(fn)
        if not _has_elements(self._value):
            return _EMPTY_ARRAY
        return OptionalArray.of_array([fn_checked(item) for item in self._value])

    def filter(self, predicate: Predicate[T]) -> "OptionalArray[T]":
        """Keep elements satisfying ``predicate``; empty if none remain."""
        predicate_checked = require_non_none_predicate(predicate)
        if not _has_elements(self._value):
            return _EMPTY_ARRAY
        return OptionalArray.of_array([item for item in self._value if predicate_checked(item)])

    def find_one(self, predicate: Predicate[T]) -> Optional[T]:
        """Return an Optional with the first element satisfying ``predicate``."""
        predicate_checked = require_non_none_predicate(predicate)
        if not _has_elements(self._value):
            return Optional.empty()
        found = next((item for item in self._value if predicate_checked(item)), None)
        return Optional.of_nullable(found)

    def get_first(self) -> Optional[T]:
        """Return an Optional with the first element."""
        if not _has_elements(self._value):
            return Optional.empty()
        return Optional.of_nullable(self._value[0])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionalArray):
            return NotImplemented
        return self.equals(other)

    # Holds a mutable sequence
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.is_empty():
            return "OptionalArray.empty"
        return f"OptionalArray({self._value!r})"


# Shared empty instance returned by every empty() call
_EMPTY_ARRAY: OptionalArray[Any] = OptionalArray(None)
