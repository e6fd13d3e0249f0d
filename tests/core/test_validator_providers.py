import copy

import pytest

from memcore.config import validate
from memcore.errors import INVALID_ENUM_VALUE
from memcore.types import (
    EMBEDDER_PROVIDERS,
    LLM_PROVIDERS,
    VECTOR_STORE_PROVIDERS,
)

SECTIONS = {
    "embedder": EMBEDDER_PROVIDERS,
    "vectorStore": VECTOR_STORE_PROVIDERS,
    "llm": LLM_PROVIDERS,
}


def test_provider_sets_match_documented_members():
    assert EMBEDDER_PROVIDERS == (
        "openai", "ollama", "google", "gemini", "azure_openai", "langchain",
    )
    assert VECTOR_STORE_PROVIDERS == (
        "qdrant", "redis", "supabase", "langchain", "vectorize", "pgvector",
    )
    assert len(LLM_PROVIDERS) == 10
    assert "openai_structured" in LLM_PROVIDERS
    assert "mistral" in LLM_PROVIDERS


@pytest.mark.parametrize(
    "section,provider",
    [(s, p) for s, members in SECTIONS.items() for p in members],
)
def test_every_member_accepted(base_config, section, provider):
    cfg = copy.deepcopy(base_config)
    cfg[section]["provider"] = provider
    res = validate(cfg)
    assert res.ok, res.issues
    assert res.as_dict()[section]["provider"] == provider


@pytest.mark.parametrize("section", list(SECTIONS))
@pytest.mark.parametrize("bad", ["pinecone", "OpenAI", "QDRANT", "", 5, None])
def test_unknown_provider_rejected(base_config, section, bad):
    cfg = copy.deepcopy(base_config)
    cfg[section]["provider"] = bad
    res = validate(cfg)
    assert not res.ok
    assert len(res.issues) == 1
    issue = res.issues[0]
    assert issue.path == (section, "provider")
    assert issue.kind == INVALID_ENUM_VALUE
    assert issue.message


def test_bad_provider_does_not_hide_config_errors(base_config):
    cfg = copy.deepcopy(base_config)
    cfg["llm"] = {"provider": "gpt", "config": {"apiKey": 42}}
    res = validate(cfg)
    assert [i.path for i in res.issues] == [
        ("llm", "provider"),
        ("llm", "config", "apiKey"),
    ]
