"""Pytest configuration ensuring project root is importable.

Adds repository root to sys.path explicitly to avoid interpreter/path quirks.
"""
from __future__ import annotations

import sys
from pathlib import Path
import os
import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _isolate_config_env():  # noqa: D401
    """Ensure global config/env side effects do not leak between tests.

    - Clear cached config and metrics between tests
    - Drop MEMCORE__* overrides and restore MEMCORE_CONFIG_DIR
    """
    from memcore import metrics  # local import
    from memcore.config import clear_config_cache

    prev_dir = os.environ.get("MEMCORE_CONFIG_DIR")
    prev_overrides = {
        k: v for k, v in os.environ.items() if k.startswith("MEMCORE__")
    }
    for k in prev_overrides:
        os.environ.pop(k)
    clear_config_cache()
    metrics.reset_for_tests()
    try:
        yield
    finally:
        clear_config_cache()
        for k in [k for k in os.environ if k.startswith("MEMCORE__")]:
            os.environ.pop(k)
        os.environ.update(prev_overrides)
        if prev_dir is None:
            os.environ.pop("MEMCORE_CONFIG_DIR", None)
        else:
            os.environ["MEMCORE_CONFIG_DIR"] = prev_dir


@pytest.fixture
def base_config() -> dict:
    """Minimal valid config: the three mandatory sections only."""
    return {
        "embedder": {"provider": "openai", "config": {}},
        "vectorStore": {
            "provider": "qdrant",
            "config": {"collectionName": "c1"},
        },
        "llm": {"provider": "anthropic", "config": {}},
    }
