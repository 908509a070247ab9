"""
Pydantic interop for sieve.

Provides to_pydantic(), compiling a record validator's shape to a model.
"""

from __future__ import annotations

from typing import Any
from typing import Optional as TypingOptional

from pydantic import create_model

from .core import RecordValidator, SequenceValidator, Validator
from .types import UNDEFINED


def to_pydantic(name: str, validator: RecordValidator) -> type:
    """
    Compile a record validator to a Pydantic model.

    Args:
        name: Name of the generated model class
        validator: A validator built by `record_of`

    Returns:
        A Pydantic BaseModel subclass. Nested records become nested models
        named `<name>_<field>`, including records inside sequences and
        optional fields.

    Usage:
        User = to_pydantic("User", record_of({
            "name": text(),
            "email": optional(text()),
        }))
        user = User(name="Alice")
    """
    if not isinstance(validator, RecordValidator):
        raise TypeError("to_pydantic() requires a validator built by record_of()")

    fields: dict[str, Any] = {}

    for key, v in validator.shape.items():
        field_type, default = _extract_pydantic_field(f"{name}_{key}", v)
        fields[key] = (field_type, default)

    return create_model(name, **fields)


def _extract_pydantic_field(name: str, v: Validator[Any]) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from validator."""
    field_type = _extract_pydantic_type(name, v)
    match v:
        case Validator(required=True):
            return (field_type, ...)
        case Validator(default=d) if d is not UNDEFINED:
            return (field_type, d)

    return (TypingOptional[field_type], None)


def _extract_pydantic_type(name: str, v: Validator[Any]) -> Any:
    """Resolve the annotation for a validator, generating models for records."""
    match v:
        case RecordValidator():
            return to_pydantic(name, v)
        case SequenceValidator(items=Validator() as items):
            item_type = _extract_pydantic_type(name, items)
            return list[item_type]  # type: ignore[valid-type]
        case Validator(inner=Validator() as inner):
            return _extract_pydantic_type(name, inner)
        case Validator(type_hint=t):
            return t

    return Any
