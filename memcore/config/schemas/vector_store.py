"""Vector store section schema.

``config`` is an open record: the known keys below are type-checked when
present, anything else a client library needs passes through untouched.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import ConfigDict, StrictStr

from memcore.types import VectorStoreProvider

from .common import Number, WireModel


class VectorStoreConfigSchema(WireModel):
    collection_name: Optional[StrictStr] = None
    dimension: Optional[Number] = None
    client: Any = None
    instance: Any = None

    model_config = ConfigDict(extra="allow")


class VectorStoreSectionSchema(WireModel):
    provider: VectorStoreProvider
    config: VectorStoreConfigSchema
