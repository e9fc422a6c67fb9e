"""
nullsafe: explicit None-safety containers.

Provides Optional (single value) and OptionalArray (sequence) together with the
errors they raise and the callable aliases their combinators accept.
"""

from nullsafe.domain.exceptions import (
    AbsentActionError,
    AbsentCallableError,
    AbsentConsumerError,
    AbsentFunctionError,
    AbsentPredicateError,
    AbsentSupplierError,
    CallableKind,
    NoSuchElementError,
    NullSafeError,
)
from nullsafe.domain.functions import Apply, BiFunction, Consumer, MonoFunction, Predicate, Supplier
from nullsafe.domain.optional import Optional
from nullsafe.domain.optional_array import OptionalArray

__version__ = "0.1.0"

__all__ = [
    "Optional",
    "OptionalArray",
    "NullSafeError",
    "NoSuchElementError",
    "AbsentCallableError",
    "AbsentSupplierError",
    "AbsentConsumerError",
    "AbsentPredicateError",
    "AbsentFunctionError",
    "AbsentActionError",
    "CallableKind",
    "Supplier",
    "Consumer",
    "Predicate",
    "MonoFunction",
    "BiFunction",
    "Apply",
]
