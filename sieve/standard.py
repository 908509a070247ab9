"""
Interop contract shared with other validation libraries.

Any object exposing `__standard_schema__` with a `validate` callable, a vendor
string and an integer version can be used as a validator by consuming code,
without importing sieve's own classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

from .types import Result

STANDARD_VERSION = 1
VENDOR = "sieve"


@dataclass(frozen=True, slots=True)
class StandardSchemaProps:
    """The object found under `__standard_schema__`."""

    validate: Callable[[Any], Result[Any]]
    vendor: str = VENDOR
    version: int = STANDARD_VERSION


@runtime_checkable
class StandardSchema(Protocol):
    """Structural type for anything that speaks the interop contract."""

    @property
    def __standard_schema__(self) -> StandardSchemaProps: ...


def is_standard_schema(obj: Any) -> bool:
    """
    Check whether `obj` satisfies the interop contract.

    Only the shape is inspected, so foreign implementations qualify as long as
    their props object carries the same three members.
    """
    props = getattr(obj, "__standard_schema__", None)
    if props is None:
        return False
    return (
        callable(getattr(props, "validate", None))
        and isinstance(getattr(props, "vendor", None), str)
        and type(getattr(props, "version", None)) is int
    )


def standard_validate(schema: Any, value: Any) -> Result[Any]:
    """
    Validate `value` with any interop-compliant schema.

    Raises:
        TypeError: If `schema` does not expose the interop contract
    """
    if not is_standard_schema(schema):
        raise TypeError(
            f"{type(schema).__name__} does not expose __standard_schema__"
        )
    return schema.__standard_schema__.validate(value)
