"""Store Results — tagged union returned by every UserStore operation.

Invariants:
    - Exactly four variants: Ok, NotFound, Invalid, Conflict
    - Results are immutable (frozen dataclasses)
    - Invalid.messages is never empty and keeps validation order

Design Decisions:
    - Return values over exceptions for expected outcomes: callers must handle
      each variant explicitly (match on the class)
    - Each variant exposes `kind` so logs and tests can compare against ResultKind
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from user_api.core.domain_types import ResultKind, UserId

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Operation succeeded with a payload."""
    value: T

    @property
    def kind(self) -> ResultKind:
        return ResultKind.OK


@dataclass(frozen=True)
class NotFound:
    """No live record has the requested id."""
    user_id: UserId | None = None

    @property
    def kind(self) -> ResultKind:
        return ResultKind.NOT_FOUND


@dataclass(frozen=True)
class Invalid:
    """One or more field constraints violated."""
    messages: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.messages:
            raise ValueError("Invalid result requires at least one message")

    @property
    def kind(self) -> ResultKind:
        return ResultKind.VALIDATION


@dataclass(frozen=True)
class Conflict:
    """Normalized email already belongs to another live record."""
    email: str

    @property
    def kind(self) -> ResultKind:
        return ResultKind.CONFLICT


StoreResult = Ok[Any] | NotFound | Invalid | Conflict
