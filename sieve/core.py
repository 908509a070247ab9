"""
Core validator classes for sieve.

Provides the Validator and RecordValidator dataclasses and SchemaError.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from .standard import StandardSchemaProps
from .types import UNDEFINED, CheckSafeFn, Err, Issue, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SchemaError(Exception):
    """Raised by `Validator.check` when validation fails."""

    def __init__(self, issues: tuple[Issue, ...]):
        super().__init__(issues)
        self.issues = issues

    def __str__(self) -> str:
        return "\n".join(_format_issue(issue) for issue in self.issues)


def _format_issue(issue: Issue) -> str:
    if issue.path is None:
        return issue.message
    location = ""
    for key in issue.path:
        if isinstance(key, int):
            location += f"[{key}]"
        else:
            location += f".{key}" if location else key
    return f"{location}: {issue.message}"


@dataclass(frozen=True, slots=True, eq=False)
class Validator(Generic[T]):
    """
    Immutable validator node.

    Wraps a raw `value -> Ok | Err` function. `check_safe` is that function,
    untouched; `check` is the raising variant built on it. `type_hint`,
    `required`, `default` and `inner` (the wrapped validator of a modifier)
    are metadata for introspection (see `to_pydantic`); they never influence
    validation.
    """

    check_safe: CheckSafeFn[T]
    type_hint: Any = Any
    required: bool = True
    default: Any = UNDEFINED
    inner: Validator[Any] | None = None

    def __call__(self, value: Any) -> Result[T]:
        return self.check_safe(value)

    def check(self, value: Any) -> T:
        """
        Validate a value.

        Returns:
            The validated value

        Raises:
            SchemaError: carrying every issue of the failed result
        """
        result = self.check_safe(value)
        if isinstance(result, Err):
            logger.debug("Validation failed with %d issue(s)", len(result.issues))
            raise SchemaError(result.issues)
        return result.value

    @property
    def __standard_schema__(self) -> StandardSchemaProps:
        return StandardSchemaProps(validate=self.check_safe)


@dataclass(frozen=True, slots=True, eq=False)
class RecordValidator(Validator[dict[str, Any]]):
    """Validator for dict structures, exposing the field validators it was built from."""

    shape: Mapping[str, Validator[Any]] = field(
        default_factory=lambda: MappingProxyType({})
    )


@dataclass(frozen=True, slots=True, eq=False)
class SequenceValidator(Validator[list[Any]]):
    """Validator for list structures, exposing the element validator."""

    items: Validator[Any] | None = None
