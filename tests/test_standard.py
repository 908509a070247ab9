"""
Tests for the interop contract.
"""

from dataclasses import dataclass

import pytest

from sieve import (
    Err,
    Issue,
    Ok,
    StandardSchema,
    is_standard_schema,
    numeric,
    record_of,
    sequence_of,
    standard_validate,
    text,
)


@dataclass
class ForeignProps:
    validate: object
    vendor: str = "elsewhere"
    version: int = 1


class ForeignSchema:
    """A schema from some other library that only knows the contract."""

    @property
    def __standard_schema__(self):
        def validate(value):
            if value == "ok":
                return Ok(value)
            return Err((Issue("not ok"),))

        return ForeignProps(validate)


class TestStandardSchemaProps:
    def test_vendor_and_version(self):
        props = text().__standard_schema__
        assert props.vendor == "sieve"
        assert props.version == 1

    def test_validate_matches_check_safe(self):
        v = record_of({"xs": sequence_of(numeric())})
        validate = v.__standard_schema__.validate
        for value in ({"xs": [1, 2]}, {"xs": [1, "a"]}, "nope", None):
            assert validate(value) == v.check_safe(value)

    def test_validator_satisfies_protocol(self):
        assert isinstance(numeric(), StandardSchema)


class TestIsStandardSchema:
    def test_sieve_validator(self):
        assert is_standard_schema(text())

    def test_foreign_schema(self):
        assert is_standard_schema(ForeignSchema())

    @pytest.mark.parametrize("value", [None, "text", {"validate": print}, object()])
    def test_rejects_other_values(self, value):
        assert not is_standard_schema(value)

    def test_rejects_bad_version(self):
        class BadVersion:
            __standard_schema__ = ForeignProps(print, version="1")

        assert not is_standard_schema(BadVersion())


class TestStandardValidate:
    def test_with_sieve_validator(self):
        assert standard_validate(numeric(), 5) == Ok(5)
        assert standard_validate(numeric(), "5") == Err((Issue("Expected number"),))

    def test_with_foreign_schema(self):
        assert standard_validate(ForeignSchema(), "ok") == Ok("ok")
        assert standard_validate(ForeignSchema(), "no").is_err()

    def test_rejects_non_schema(self):
        with pytest.raises(TypeError):
            standard_validate(object(), 1)
