"""Result type for adapter operations that can fail on bad input."""

from dataclasses import dataclass
from typing import TypeAlias, TypeVar, Generic

T = TypeVar("T")
E = TypeVar("E", bound=Exception)

@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    def __str__(self) -> str:
        return str(self.error)

Result: TypeAlias = Ok[T] | Err[E]
