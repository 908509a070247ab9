"""
Sieve - composable validation of untyped data with path-aware issues.

Usage:
    from sieve import record_of, sequence_of, text, numeric, optional

    User = record_of({
        "name": text(),
        "age": numeric(),
        "tags": optional(sequence_of(text())),
    })

    result = User.check_safe(data)   # Ok(value) or Err(issues)
    user = User.check(data)          # value, or raises SchemaError
"""

from .context import DEFAULT_MAX_DEPTH, get_max_depth, validation_context
from .core import RecordValidator, SchemaError, SequenceValidator, Validator
from .schema import to_pydantic
from .standard import (
    StandardSchema,
    StandardSchemaProps,
    is_standard_schema,
    standard_validate,
)
from .types import UNDEFINED, Err, Issue, Ok, Result, Undefined
from .validators import (
    boolean,
    defaulted,
    is_number,
    is_record,
    literal,
    maybe,
    numeric,
    optional,
    optional_with_default,
    record_of,
    sequence_of,
    text,
)

__all__ = [
    # Result types
    "Ok",
    "Err",
    "Issue",
    "Result",
    "UNDEFINED",
    "Undefined",
    # Core
    "Validator",
    "RecordValidator",
    "SequenceValidator",
    "SchemaError",
    # Validators
    "text",
    "numeric",
    "boolean",
    "literal",
    "sequence_of",
    "record_of",
    "optional",
    "optional_with_default",
    "maybe",
    "defaulted",
    "is_record",
    "is_number",
    # Interop
    "StandardSchema",
    "StandardSchemaProps",
    "is_standard_schema",
    "standard_validate",
    "to_pydantic",
    # Configuration
    "validation_context",
    "get_max_depth",
    "DEFAULT_MAX_DEPTH",
]
