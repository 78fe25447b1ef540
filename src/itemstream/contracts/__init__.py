"""Shared contracts for cross-boundary data types.

Errors, enums and the checkpoint context live here so that core and
plugins can both import them without depending on each other.

Import pattern:
    from itemstream.contracts import CheckpointContext, EndOfInput, ReaderState
"""

from itemstream.contracts.context import CheckpointContext, ContextValue
from itemstream.contracts.enums import ContextValueType, ReaderState
from itemstream.contracts.errors import (
    AdapterError,
    CloseError,
    EndOfInput,
    FormatError,
    ItemStreamError,
    OpenError,
    PersistError,
    SourceError,
    StreamCloseError,
    StreamConfigError,
    StreamError,
    StreamInitError,
    StreamRestoreError,
    StreamStateError,
)

__all__ = [
    # context
    "CheckpointContext",
    "ContextValue",
    # enums
    "ContextValueType",
    "ReaderState",
    # errors
    "AdapterError",
    "CloseError",
    "EndOfInput",
    "FormatError",
    "ItemStreamError",
    "OpenError",
    "PersistError",
    "SourceError",
    "StreamCloseError",
    "StreamConfigError",
    "StreamError",
    "StreamInitError",
    "StreamRestoreError",
    "StreamStateError",
]
