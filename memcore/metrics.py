"""Process-wide counters for config loading.

Counters are keyed by name plus a sorted label tuple. ``snapshot()`` renders
them Prometheus-style (``name{k=v,...}``) for assertions and debug dumps.

Names emitted by ``memcore.config.loader``:
    - env_override_total{path}                  one per applied MEMCORE__ var
    - config_validation_total{status}           one per ensure_valid call
    - config_validation_errors_total{code,path} one per reported issue
"""
from __future__ import annotations

from threading import RLock
from time import time
from typing import Any, Dict, Tuple

LabelKey = Tuple[Tuple[str, str], ...]

_counters: Dict[Tuple[str, LabelKey], float] = {}
_lock = RLock()


def _label_key(labels: Dict[str, Any] | None) -> LabelKey:
    return tuple(sorted((str(k), str(v)) for k, v in (labels or {}).items()))


def _render(name: str, labels: LabelKey) -> str:
    if not labels:
        return name
    return name + "{" + ",".join(f"{k}={v}" for k, v in labels) + "}"


def inc(
    name: str,
    labels: Dict[str, Any] | None = None,
    value: float = 1.0,
) -> None:
    key = (name, _label_key(labels))
    with _lock:
        _counters[key] = _counters.get(key, 0.0) + value


def snapshot() -> Dict[str, Any]:
    with _lock:
        counters = {
            _render(name, labels): total
            for (name, labels), total in _counters.items()
        }
    return {"ts": time(), "counters": counters}


def reset_for_tests() -> None:  # pragma: no cover
    with _lock:
        _counters.clear()


__all__ = ["inc", "snapshot", "reset_for_tests"]
