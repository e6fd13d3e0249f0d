"""Config validation error taxonomy."""
from __future__ import annotations

MISSING_FIELD = "missing-field"
TYPE_MISMATCH = "type-mismatch"
INVALID_ENUM_VALUE = "invalid-enum-value"
NESTED_STRUCTURE_INVALID = "nested-structure-invalid"

_ALLOWED_ERROR_TYPES = {
    MISSING_FIELD,
    TYPE_MISMATCH,
    INVALID_ENUM_VALUE,
    NESTED_STRUCTURE_INVALID,
}


def validate_error_type(code: str) -> str:
    assert (
        code in _ALLOWED_ERROR_TYPES
    ), f"Unknown error_type '{code}' (not in taxonomy)"
    return code


_ENUM_ERRORS = {"literal_error", "enum"}
_STRUCTURE_ERRORS = {"model_type", "model_attributes_type", "dict_type"}


def map_pydantic_error(err_type: str, loc: tuple) -> str:
    """Classify a pydantic error ``type`` into a taxonomy code.

    A wrong-kind value at the document root is a plain type mismatch; the
    same failure on a sub-object is reported as a nested structure error.
    """
    if err_type == "missing":
        return MISSING_FIELD
    if err_type in _ENUM_ERRORS:
        return INVALID_ENUM_VALUE
    if err_type in _STRUCTURE_ERRORS and loc:
        return NESTED_STRUCTURE_INVALID
    return TYPE_MISMATCH


__all__ = [
    "MISSING_FIELD",
    "TYPE_MISMATCH",
    "INVALID_ENUM_VALUE",
    "NESTED_STRUCTURE_INVALID",
    "validate_error_type",
    "map_pydantic_error",
]
