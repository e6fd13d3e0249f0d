"""Graph store section schema (neo4j only)."""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import StrictStr

from memcore.types import GraphStoreProvider

from .common import WireModel
from .llm import LLMSectionSchema


class Neo4jConfigSchema(WireModel):
    url: StrictStr
    username: StrictStr
    password: StrictStr


class GraphLLMSectionSchema(LLMSectionSchema):
    config: Dict[str, Any]


class GraphStoreConfigSchema(WireModel):
    provider: GraphStoreProvider
    config: Neo4jConfigSchema
    llm: Optional[GraphLLMSectionSchema] = None
    custom_prompt: Optional[StrictStr] = None
