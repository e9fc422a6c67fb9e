"""Callable type aliases accepted by container combinators."""

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")
S = TypeVar("S")
U = TypeVar("U")

# Zero-argument producer
Supplier = Callable[[], T]

# One-argument side-effecting function
Consumer = Callable[[T], None]

# One-argument boolean test
Predicate = Callable[[T], bool]

# One-argument transform
MonoFunction = Callable[[T], U]

# Two-argument transform
BiFunction = Callable[[T, S], U]

# Zero-argument side-effecting action
Apply = Callable[[], None]
