"""
Built-in validators for sieve.

Provides factory functions that return Validator instances: primitives
(text, numeric, boolean, literal), combinators (sequence_of, record_of) and
modifiers for absent input (optional, optional_with_default).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Literal, Optional, TypeVar

from .context import current_depth, descend, get_max_depth
from .core import RecordValidator, SequenceValidator, Validator
from .types import UNDEFINED, Err, Ok, Result, Undefined, fail, prepend_key

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_record(value: Any) -> bool:
    """
    Check if the value is a plain dict.

    Subclasses (OrderedDict, defaultdict, ...) and every other mapping or
    object are rejected, as are lists and None.
    """
    return type(value) is dict


def is_number(value: Any) -> bool:
    """Check if the value is a finite int or float. Booleans are not numbers."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _kind(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, bool):
        return bool
    if isinstance(value, (int, float)):
        return float
    if isinstance(value, str):
        return str
    return type(value)


def _depth_exceeded() -> Err | None:
    limit = get_max_depth()
    if current_depth() >= limit:
        logger.debug("Nesting depth limit %d reached", limit)
        return fail(f"Maximum nesting depth of {limit} exceeded")
    return None


def text(message: str = "Expected string") -> Validator[str]:
    """
    Validate that value is a str.

    Usage:
        text()
        text("Name must be text")
    """

    def check_safe(value: Any) -> Result[str]:
        if isinstance(value, str):
            return Ok(value)
        return fail(message)

    return Validator(check_safe, type_hint=str)


def numeric(message: str = "Expected number") -> Validator[int | float]:
    """
    Validate that value is a finite number.

    NaN and both infinities are rejected even though they are floats, and so
    are booleans even though they are ints.
    """

    def check_safe(value: Any) -> Result[int | float]:
        if is_number(value):
            return Ok(value)
        return fail(message)

    return Validator(check_safe, type_hint=int | float)


def boolean(message: str = "Expected boolean") -> Validator[bool]:
    """Validate that value is a bool."""

    def check_safe(value: Any) -> Result[bool]:
        if isinstance(value, bool):
            return Ok(value)
        return fail(message)

    return Validator(check_safe, type_hint=bool)


def literal(value: Any, message: str | None = None) -> Validator[Any]:
    """
    Validate strict equality with a fixed value.

    Equality is only checked between values of the same kind, so
    `literal(1)` rejects `True`, `literal(0)` rejects `False` and
    `literal(None)` rejects everything except None.

    Usage:
        literal("circle")   # discriminant field
        literal(None, "Must be null")
    """
    expected = _kind(value)
    msg = message if message is not None else f"Expected {value!r}"

    def check_safe(x: Any) -> Result[Any]:
        if _kind(x) == expected and x == value:
            return Ok(x)
        return fail(msg)

    return Validator(check_safe, type_hint=Literal[value])


def sequence_of(
    validator: Validator[T], message: str = "Expected array"
) -> SequenceValidator:
    """
    Validate a list (or tuple) element by element.

    Stops at the first invalid element and reports its issues under the
    element's index. On success the output is a new list of validated values.

    Usage:
        sequence_of(numeric())
        sequence_of(record_of({"id": text()}))
    """

    def check_safe(value: Any) -> Result[list[T]]:
        if not isinstance(value, (list, tuple)):
            return fail(message)
        exceeded = _depth_exceeded()
        if exceeded is not None:
            return exceeded

        output: list[T] = []
        with descend():
            for i, item in enumerate(value):
                result = validator.check_safe(item)
                if isinstance(result, Err):
                    return Err(prepend_key(i, result.issues))
                output.append(result.value)
        return Ok(output)

    return SequenceValidator(
        check_safe, type_hint=list[validator.type_hint], items=validator
    )


def record_of(
    shape: Mapping[str, Validator[Any]], message: str = "Expected object"
) -> RecordValidator:
    """
    Validate a dict field by field, in the order the shape declares them.

    Fields missing from the input are validated as UNDEFINED. Stops at the
    first invalid field and reports its issues under the field name. On
    success the output is a new dict holding exactly the declared fields;
    keys the shape does not mention are dropped.

    Usage:
        record_of({
            "name": text(),
            "age": optional(numeric()),
        })
    """
    if not isinstance(shape, Mapping):
        raise TypeError(f"Shape must be a mapping, got {type(shape).__name__}")
    fields = MappingProxyType(dict(shape))

    def check_safe(value: Any) -> Result[dict[str, Any]]:
        if not is_record(value):
            return fail(message)
        exceeded = _depth_exceeded()
        if exceeded is not None:
            return exceeded

        output: dict[str, Any] = {}
        with descend():
            for key, field_validator in fields.items():
                result = field_validator.check_safe(value.get(key, UNDEFINED))
                if isinstance(result, Err):
                    return Err(prepend_key(key, result.issues))
                output[key] = result.value
        return Ok(output)

    return RecordValidator(check_safe, type_hint=dict[str, Any], shape=fields)


def optional(validator: Validator[T]) -> Validator[T | Undefined]:
    """
    Accept None or UNDEFINED as UNDEFINED, validate anything else.

    Both kinds of absence come out as UNDEFINED so downstream code has a
    single thing to test for.

    Usage:
        optional(text())
    """

    def check_safe(value: Any) -> Result[Any]:
        if value is None or value is UNDEFINED:
            return Ok(UNDEFINED)
        return validator.check_safe(value)

    return Validator(
        check_safe,
        type_hint=Optional[validator.type_hint],
        required=False,
        inner=validator,
    )


def optional_with_default(validator: Validator[T], default: T) -> Validator[T]:
    """
    Substitute `default` for None or UNDEFINED, validate anything else.

    The default is captured once and returned as-is on every absent input.

    Usage:
        optional_with_default(numeric(), 42)
    """

    def check_safe(value: Any) -> Result[T]:
        if value is None or value is UNDEFINED:
            return Ok(default)
        return validator.check_safe(value)

    return Validator(
        check_safe,
        type_hint=validator.type_hint,
        required=False,
        default=default,
        inner=validator,
    )


# Original names for the absent-input modifiers
maybe = optional
defaulted = optional_with_default
