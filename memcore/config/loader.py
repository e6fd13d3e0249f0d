"""Configuration loading for the memory platform.

Precedence (last wins): base.yaml -> overrides.local.yaml -> ENV (MEMCORE__*).

The merged document is handed to ``validate``; any issue is fatal here
(``ConfigError``) and is counted + logged before raising.
"""
from __future__ import annotations

import logging
import os
import pathlib
import threading
from functools import lru_cache
from typing import (
    Annotated,
    Any,
    Dict,
    Iterable,
    Tuple,
    Type,
    Union,
    get_args,
    get_origin,
)

import yaml
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.fields import FieldInfo

from memcore import metrics

from .result import ConfigIssue
from .schemas.memory import MemoryConfigSchema
from .validator import validate

logger = logging.getLogger("memcore.config")

DEFAULT_CONFIG_DIR = "configs"
ENV_PREFIX = "MEMCORE__"
CONFIG_DIR_ENV = "MEMCORE_CONFIG_DIR"


class ConfigError(Exception):
    def __init__(self, message: str, issues: Iterable[ConfigIssue] = ()):
        super().__init__(message)
        self.issues = tuple(issues)


def _load_yaml_if_exists(path: pathlib.Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path.name}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"{path.name}: top-level document must be a mapping, "
            f"got {type(data).__name__}"
        )
    return data


def _merge_dict(
    base: Dict[str, Any], override: Dict[str, Any]
) -> Dict[str, Any]:
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            base[k] = _merge_dict(base[k], v)
        else:
            base[k] = v
    return base


def _norm(key: str) -> str:
    return key.replace("_", "").lower()


def _schema_field(
    model: Type[BaseModel] | None, segment: str
) -> Tuple[str, FieldInfo] | None:
    """Find the field of ``model`` whose wire key matches ``segment``."""
    if model is None:
        return None
    norm = _norm(segment)
    for name, field in model.model_fields.items():
        alias = field.alias or name
        if _norm(alias) == norm:
            return alias, field
    return None


def _nested_model(annotation: Any) -> Type[BaseModel] | None:
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    for arg in get_args(annotation):
        found = _nested_model(arg)
        if found is not None:
            return found
    return None


def _is_text(annotation: Any) -> bool:
    if annotation is str:
        return True
    origin = get_origin(annotation)
    if origin is Annotated:
        return _is_text(get_args(annotation)[0])
    if origin is Union:
        return any(_is_text(a) for a in get_args(annotation))
    return False


def _env_key(target: Dict[str, Any], segment: str) -> str:
    """Map an env path segment onto a key outside the known schema.

    Existing keys win (case and underscores ignored); otherwise the
    SNAKE_CASE segment becomes camelCase (ON_DISK -> onDisk).
    """
    norm = _norm(segment)
    for key in target:
        if isinstance(key, str) and _norm(key) == norm:
            return key
    return to_camel(segment.lower())


def _cast_env_value(value: str) -> Any:
    if value.lower() in {"true", "false"}:
        return value.lower() == "true"
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


def _apply_env(cfg: Dict[str, Any], environ: Dict[str, str] | None = None) -> None:
    """Apply MEMCORE__* overrides onto ``cfg`` in place.

    Segments resolve against the schema first, so keys land on their wire
    alias (BASE_URL -> baseURL) and text fields keep the raw string. Keys
    outside the schema (open records) fall back to camelCase + casting.
    """
    env = os.environ if environ is None else environ
    prefix_len = len(ENV_PREFIX)
    for env_key, value in sorted(env.items()):
        if not env_key.startswith(ENV_PREFIX):
            continue
        segments = [s for s in env_key[prefix_len:].split("__") if s]
        if not segments:
            continue
        target = cfg
        model: Type[BaseModel] | None = MemoryConfigSchema
        path_parts = []
        for seg in segments[:-1]:
            found = _schema_field(model, seg)
            if found is not None:
                key, field = found
                model = _nested_model(field.annotation)
            else:
                key, model = _env_key(target, seg), None
            if not isinstance(target.get(key), dict):
                target[key] = {}
            target = target[key]
            path_parts.append(key)
        found = _schema_field(model, segments[-1])
        if found is not None:
            leaf, field = found
            if _is_text(field.annotation):
                cast = value
            else:
                cast = _cast_env_value(value)
        else:
            leaf = _env_key(target, segments[-1])
            cast = _cast_env_value(value)
        target[leaf] = cast
        path_parts.append(leaf)
        dotted_path = ".".join(path_parts)
        metrics.inc("env_override_total", {"path": dotted_path})
        logger.info(
            "[config-env-override] path=%s value=*** source=env", dotted_path
        )


def _resolve_config_dir() -> pathlib.Path:
    """Resolve config directory each call honoring env var changes."""
    return pathlib.Path(os.getenv(CONFIG_DIR_ENV, DEFAULT_CONFIG_DIR))


def load_raw(config_dir: str | pathlib.Path | None = None) -> Dict[str, Any]:
    """Read and merge YAML layers plus env overrides (unvalidated)."""
    cfg_dir = (
        pathlib.Path(config_dir) if config_dir is not None
        else _resolve_config_dir()
    )
    base_cfg = _load_yaml_if_exists(cfg_dir / "base.yaml")
    overrides_cfg = _load_yaml_if_exists(cfg_dir / "overrides.local.yaml")
    merged = _merge_dict(base_cfg, overrides_cfg)
    _apply_env(merged)
    return merged


def ensure_valid(raw: Any) -> MemoryConfigSchema:
    """Validate ``raw`` or raise ``ConfigError`` listing every issue."""
    result = validate(raw)
    metrics.inc("config_validation_total", {"status": result.status})
    if result.ok:
        return result.value
    for issue in result.issues:
        metrics.inc(
            "config_validation_errors_total",
            {"path": issue.dotted_path, "code": issue.kind},
        )
        logger.warning(
            "[config-validation] path=%s code=%s msg=%s",
            issue.dotted_path,
            issue.kind,
            issue.message,
        )
    details = "; ".join(issue.render() for issue in result.issues)
    raise ConfigError(f"config validation failed: {details}", result.issues)


_lock = threading.Lock()


@lru_cache(maxsize=1)
def get_config() -> MemoryConfigSchema:  # noqa: D401
    with _lock:
        return ensure_valid(load_raw())


def clear_config_cache() -> None:
    """Clear cached config (primarily for tests)."""
    get_config.cache_clear()


def as_dict() -> Dict[str, Any]:
    return get_config().model_dump(by_alias=True, exclude_unset=True)
