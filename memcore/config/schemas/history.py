"""History store section schema."""
from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict, StrictStr

from memcore.types import HistoryStoreProvider

from .common import WireModel


class HistoryStoreSettingsSchema(WireModel):
    history_db_path: Optional[StrictStr] = None
    supabase_url: Optional[StrictStr] = None
    supabase_key: Optional[StrictStr] = None
    table_name: Optional[StrictStr] = None

    model_config = ConfigDict(extra="allow")


class HistoryStoreConfigSchema(WireModel):
    provider: HistoryStoreProvider
    config: HistoryStoreSettingsSchema
