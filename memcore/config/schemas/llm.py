"""LLM section schema.

``LLMSectionSchema`` carries the LLM provider rule; the graph store's LLM
override subclasses it so both places check the same enumeration.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import Field, StrictStr

from memcore.types import LLMProvider

from .common import WireModel


class LLMProviderConfigSchema(WireModel):
    base_url: Optional[StrictStr] = Field(None, alias="baseURL")
    # Free-form provider options forwarded to the client as-is.
    config: Optional[Dict[str, Any]] = None
    api_key: Optional[StrictStr] = None
    model: Any = None
    model_properties: Optional[Dict[str, Any]] = None


class LLMSectionSchema(WireModel):
    provider: LLMProvider
    config: LLMProviderConfigSchema
