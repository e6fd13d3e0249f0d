"""Structural validation of a raw memory config.

``validate`` accepts any value and never raises: every violation pydantic
finds in one pass comes back as a ``ConfigIssue`` on the result. Provider
discriminants and config payloads are checked independently, so a bad
provider does not hide errors inside its ``config``.

Pure function: no logging, metrics or I/O here (see ``loader`` for that).
"""
from __future__ import annotations

from typing import Any, List

from pydantic import ValidationError

from memcore.errors import map_pydantic_error, validate_error_type

from .result import ConfigIssue, ValidationResult
from .schemas.memory import MemoryConfigSchema


def issues_from_error(exc: ValidationError) -> List[ConfigIssue]:
    issues: List[ConfigIssue] = []
    for err in exc.errors(include_url=False):
        loc = tuple(err.get("loc", ()))
        kind = validate_error_type(map_pydantic_error(err["type"], loc))
        issues.append(ConfigIssue(path=loc, kind=kind, message=err["msg"]))
    return issues


def validate(data: Any) -> ValidationResult:
    if isinstance(data, MemoryConfigSchema):
        # Already validated instances are re-checked from their wire dump.
        data = data.model_dump(by_alias=True, exclude_unset=True)
    try:
        cfg = MemoryConfigSchema.model_validate(data)
    except ValidationError as e:
        return ValidationResult.failure(tuple(issues_from_error(e)))
    return ValidationResult.success(cfg)


__all__ = ["validate", "issues_from_error"]
