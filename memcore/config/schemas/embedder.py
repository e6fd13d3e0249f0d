"""Embedder section schema."""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import Field, StrictStr

from memcore.types import EmbedderProvider

from .common import WireModel


class EmbeddingConfigSchema(WireModel):
    api_key: Optional[StrictStr] = None
    # Either a model name or a provider-native model object.
    model: Any = None
    url: Optional[StrictStr] = None
    base_url: Optional[StrictStr] = Field(None, alias="baseURL")
    model_properties: Optional[Dict[str, Any]] = None


class EmbedderSectionSchema(WireModel):
    provider: EmbedderProvider
    config: EmbeddingConfigSchema
