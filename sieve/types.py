"""
Type definitions for sieve validation.

Provides the Result type (Ok/Err), the Issue record and the UNDEFINED sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")

PathKey = Union[str, int]
Path = tuple[PathKey, ...]


class Undefined(Enum):
    """
    Sentinel for an absent value.

    Python only has one null, so the "no value at all" case (a record field
    missing from the input, or the output of `optional`) gets its own marker.
    `None` is still a value: `literal(None)` matches it, but not `UNDEFINED`.
    """

    UNDEFINED = "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = Undefined.UNDEFINED


@dataclass(frozen=True, slots=True)
class Issue:
    """
    One validation failure.

    `path` is None when the issue was raised at the root, otherwise it reads
    outermost key first.
    """

    message: str
    path: Path | None = None

    def prepend(self, key: PathKey) -> Issue:
        """Return a copy located one level deeper, under `key`."""
        if self.path is None:
            return Issue(self.message, (key,))
        return Issue(self.message, (key, *self.path))


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err:
    """Failure result containing a non-empty tuple of issues."""

    issues: tuple[Issue, ...]

    def __post_init__(self) -> None:
        if not self.issues:
            raise ValueError("Err requires at least one issue")

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


# Type aliases
Result = Union[Ok[T], Err]
CheckSafeFn = Callable[[Any], Result[T]]


def fail(message: str) -> Err:
    """Build a single root-level issue result."""
    return Err((Issue(message),))


def prepend_key(key: PathKey, issues: tuple[Issue, ...]) -> tuple[Issue, ...]:
    """Relocate every issue one level deeper, under `key`."""
    return tuple(issue.prepend(key) for issue in issues)
