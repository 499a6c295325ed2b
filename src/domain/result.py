"""
Result type - Explicit success/failure values for expected outcomes.

Domain operations return ``Ok`` or ``Err`` instead of raising for
recoverable conditions. Exceptions are reserved for fatal faults.
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T", covariant=True)
E = TypeVar("E", covariant=True)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying a typed domain error."""

    error: E


Result: TypeAlias = Ok[T] | Err[E]
