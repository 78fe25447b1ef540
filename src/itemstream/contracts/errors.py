"""Error taxonomy for checkpointed readers and their source adapters.

Two families:
- Adapter errors are raised by source adapters while producing items.
  The reader propagates them from read() unchanged.
- Stream errors are raised by the reader itself to say *when in the
  lifecycle* an adapter failed (open, restore, close). The adapter's
  exception is always chained as __cause__.

EndOfInput is deliberately outside ItemStreamError: it is a normal
termination signal, not a failure.
"""


class ItemStreamError(Exception):
    """Base class for all itemstream errors."""


# === Adapter errors ===


class AdapterError(ItemStreamError):
    """Base class for errors raised by source adapters."""


class OpenError(AdapterError):
    """Adapter could not acquire the resources needed to start reading."""


class SourceError(AdapterError):
    """I/O-level failure while producing an item."""


class FormatError(AdapterError):
    """Raw data could not be parsed into an item.

    Attributes:
        position: 1-based position of the offending record in the input,
            if the adapter knows it.
    """

    def __init__(self, message: str, *, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class CloseError(AdapterError):
    """Adapter failed to release its resources."""


class EndOfInput(Exception):  # noqa: N818 - signal, not an error
    """Raised by an adapter when there are no more items.

    This is NOT an error condition. Callers catch it to stop reading.
    """


# === Stream (lifecycle) errors ===


class StreamError(ItemStreamError):
    """Base class for reader lifecycle failures."""


class StreamInitError(StreamError):
    """The adapter failed to open. Fatal; the reader does not retry."""


class StreamRestoreError(StreamError):
    """The stored position could not be replayed on open.

    Signals that the input no longer matches the checkpoint, e.g. the file
    shrank or the dataset changed since the checkpoint was written.
    """


class StreamCloseError(StreamError):
    """The adapter failed to close. The item counter was already reset."""


class PersistError(ItemStreamError):
    """The checkpoint context rejected a write (or was None)."""


class StreamConfigError(ItemStreamError, ValueError):
    """Reader configuration is incomplete, e.g. no stream name with save_state."""


class StreamStateError(ItemStreamError, RuntimeError):
    """Operation called in the wrong lifecycle state, e.g. read() before open()."""
