"""Validation result types."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from .schemas.memory import MemoryConfigSchema

PathSegment = Union[str, int]


@dataclass(frozen=True, slots=True)
class ConfigIssue:
    path: Tuple[PathSegment, ...]
    kind: str  # see memcore.errors taxonomy
    message: str

    @property
    def dotted_path(self) -> str:
        return ".".join(str(p) for p in self.path) or "<root>"

    def render(self) -> str:
        return f"{self.dotted_path}: {self.message}"


@dataclass(slots=True)
class ValidationResult:
    status: str  # ok | error
    value: Optional[MemoryConfigSchema] = None
    issues: Tuple[ConfigIssue, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def as_dict(self) -> Dict[str, Any]:
        """Validated config as wire-format dict; only keys the input set."""
        if self.value is None:
            raise ValueError("no validated value on a failed result")
        return self.value.model_dump(by_alias=True, exclude_unset=True)

    @staticmethod
    def success(value: MemoryConfigSchema) -> "ValidationResult":
        return ValidationResult(status="ok", value=value)

    @staticmethod
    def failure(issues: Tuple[ConfigIssue, ...]) -> "ValidationResult":
        return ValidationResult(status="error", issues=tuple(issues))
