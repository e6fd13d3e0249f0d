"""Config subsystem public API.

Provides:
    validate(data)   -> ValidationResult (never raises)
    ensure_valid(data) -> MemoryConfigSchema or ConfigError
    get_config()     -> cached config from YAML layers + env
    as_dict()        -> wire-format dict of get_config()
"""

from .result import ConfigIssue, ValidationResult  # noqa: F401
from .schemas.memory import MemoryConfigSchema  # noqa: F401
from .validator import validate  # noqa: F401
from .loader import (  # noqa: F401
    ConfigError,
    as_dict,
    clear_config_cache,
    ensure_valid,
    get_config,
    load_raw,
)

__all__ = [
    "ConfigIssue",
    "ValidationResult",
    "MemoryConfigSchema",
    "validate",
    "ConfigError",
    "as_dict",
    "clear_config_cache",
    "ensure_valid",
    "get_config",
    "load_raw",
]
