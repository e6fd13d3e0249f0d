"""Structural type model shared by configuration authors and consumers.

Shapes only; no behavior. Keys follow the wire format (camelCase) so a
validated config dumped with ``as_dict()`` type-checks against these
declarations directly.

Provider enumerations are ``Literal`` aliases; the ``*_PROVIDERS`` tuples
are derived from them and are what the validator schemas reuse.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, TypedDict, Union, get_args

EmbedderProvider = Literal[
    "openai",
    "ollama",
    "google",
    "gemini",
    "azure_openai",
    "langchain",
]

VectorStoreProvider = Literal[
    "qdrant",
    "redis",
    "supabase",
    "langchain",
    "vectorize",
    "pgvector",
]

LLMProvider = Literal[
    "openai",
    "openai_structured",
    "anthropic",
    "groq",
    "ollama",
    "google",
    "gemini",
    "azure_openai",
    "mistral",
    "langchain",
]

GraphStoreProvider = Literal["neo4j"]

HistoryStoreProvider = Literal["supabase", "memory"]

EMBEDDER_PROVIDERS: tuple[str, ...] = get_args(EmbedderProvider)
VECTOR_STORE_PROVIDERS: tuple[str, ...] = get_args(VectorStoreProvider)
LLM_PROVIDERS: tuple[str, ...] = get_args(LLMProvider)
GRAPH_STORE_PROVIDERS: tuple[str, ...] = get_args(GraphStoreProvider)
HISTORY_STORE_PROVIDERS: tuple[str, ...] = get_args(HistoryStoreProvider)


# ------------------------------- messages -------------------------------

class ImageURL(TypedDict):
    url: str


class MultiModalMessage(TypedDict):
    type: Literal["image_url"]
    image_url: ImageURL


class Message(TypedDict):
    role: str
    content: Union[str, MultiModalMessage]


# --------------------------- provider payloads ---------------------------

class EmbeddingConfig(TypedDict, total=False):
    apiKey: str
    model: Any  # model name or a provider-native model object
    url: str
    baseURL: str
    modelProperties: Dict[str, Any]


class VectorStoreConfig(TypedDict, total=False):
    # Open record: provider-specific keys are allowed alongside these.
    collectionName: str
    dimension: Union[int, float]
    client: Any
    instance: Any


class LLMConfig(TypedDict, total=False):
    baseURL: str
    config: Dict[str, Any]
    apiKey: str
    model: Any
    modelProperties: Dict[str, Any]


class Neo4jConfig(TypedDict):
    url: str
    username: str
    password: str


class HistoryStoreSettings(TypedDict, total=False):
    # Open record: additional backend keys pass through.
    historyDbPath: str
    supabaseUrl: str
    supabaseKey: str
    tableName: str


# ------------------------------- sections -------------------------------

class EmbedderSection(TypedDict):
    provider: EmbedderProvider
    config: EmbeddingConfig


class VectorStoreSection(TypedDict):
    provider: VectorStoreProvider
    config: VectorStoreConfig


class LLMSection(TypedDict):
    provider: LLMProvider
    config: LLMConfig


class GraphLLMSection(TypedDict):
    provider: LLMProvider
    config: Dict[str, Any]


class _GraphStoreRequired(TypedDict):
    provider: GraphStoreProvider
    config: Neo4jConfig


class GraphStoreConfig(_GraphStoreRequired, total=False):
    llm: GraphLLMSection
    customPrompt: str


class HistoryStoreConfig(TypedDict):
    provider: HistoryStoreProvider
    config: HistoryStoreSettings


class _MemoryConfigRequired(TypedDict):
    embedder: EmbedderSection
    vectorStore: VectorStoreSection
    llm: LLMSection


class MemoryConfig(_MemoryConfigRequired, total=False):
    version: str
    historyStore: HistoryStoreConfig
    disableHistory: bool
    historyDbPath: str
    customPrompt: str
    graphStore: GraphStoreConfig
    enableGraph: bool


# ------------------------- storage / search shapes -------------------------

class _MemoryItemRequired(TypedDict):
    id: str
    memory: str


class MemoryItem(_MemoryItemRequired, total=False):
    hash: str
    createdAt: str
    updatedAt: str
    score: float
    metadata: Dict[str, Any]


class SearchFilters(TypedDict, total=False):
    # Open mapping; arbitrary filter keys are allowed besides these.
    userId: str
    agentId: str
    runId: str


class _SearchResultRequired(TypedDict):
    results: List[MemoryItem]


class SearchResult(_SearchResultRequired, total=False):
    relations: List[Any]


class _VectorStoreResultRequired(TypedDict):
    id: str
    payload: Dict[str, Any]


class VectorStoreResult(_VectorStoreResultRequired, total=False):
    score: float


__all__ = [
    "EmbedderProvider",
    "VectorStoreProvider",
    "LLMProvider",
    "GraphStoreProvider",
    "HistoryStoreProvider",
    "EMBEDDER_PROVIDERS",
    "VECTOR_STORE_PROVIDERS",
    "LLM_PROVIDERS",
    "GRAPH_STORE_PROVIDERS",
    "HISTORY_STORE_PROVIDERS",
    "ImageURL",
    "MultiModalMessage",
    "Message",
    "EmbeddingConfig",
    "VectorStoreConfig",
    "LLMConfig",
    "Neo4jConfig",
    "HistoryStoreSettings",
    "EmbedderSection",
    "VectorStoreSection",
    "LLMSection",
    "GraphLLMSection",
    "GraphStoreConfig",
    "HistoryStoreConfig",
    "MemoryConfig",
    "MemoryItem",
    "SearchFilters",
    "SearchResult",
    "VectorStoreResult",
]
