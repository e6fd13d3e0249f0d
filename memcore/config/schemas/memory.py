"""Root memory config schema.

Composes the three mandatory provider sections with the optional history
and graph sections. Unknown top-level keys are dropped, not rejected.
"""
from __future__ import annotations

from typing import Optional

from pydantic import StrictBool, StrictStr

from .common import WireModel
from .embedder import EmbedderSectionSchema
from .graph import GraphStoreConfigSchema
from .history import HistoryStoreConfigSchema
from .llm import LLMSectionSchema
from .vector_store import VectorStoreSectionSchema


class MemoryConfigSchema(WireModel):
    version: Optional[StrictStr] = None
    embedder: EmbedderSectionSchema
    vector_store: VectorStoreSectionSchema
    llm: LLMSectionSchema
    history_store: Optional[HistoryStoreConfigSchema] = None
    disable_history: Optional[StrictBool] = None
    history_db_path: Optional[StrictStr] = None
    custom_prompt: Optional[StrictStr] = None
    graph_store: Optional[GraphStoreConfigSchema] = None
    # Orchestrator toggle; independent of whether graph_store is set.
    enable_graph: Optional[StrictBool] = None
