"""Core subsystem: the checkpointed reader, key naming, settings and persistence."""

from itemstream.core.checkpoint import CheckpointStore
from itemstream.core.config import (
    CheckpointSettings,
    ItemStreamSettings,
    ReaderSettings,
    SourceSettings,
    load_settings,
)
from itemstream.core.keys import READ_COUNT, context_key, read_count_key
from itemstream.core.reader import CheckpointedReader

__all__ = [
    "READ_COUNT",
    "CheckpointSettings",
    "CheckpointStore",
    "CheckpointedReader",
    "ItemStreamSettings",
    "ReaderSettings",
    "SourceSettings",
    "context_key",
    "load_settings",
    "read_count_key",
]
