from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

from roster_rank.domain.errors import RosterError

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E


Result: TypeAlias = Ok[T] | Err[E]

# Services report expected failures as a RosterError (or a subclass).
RosterResult: TypeAlias = Result[T, RosterError]


def rejected(message: str) -> Err[RosterError]:
    """Shorthand for refusing a request with a plain ``RosterError``."""
    return Err(RosterError(message))
