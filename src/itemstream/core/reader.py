# src/itemstream/core/reader.py
"""Checkpointed sequential reader.

Wraps a source adapter, counts the items it produces, and records that
count in a caller-owned checkpoint context so a restarted run can resume
from the same logical position. Resuming works for any adapter: on open,
the adapter is advanced past the stored count, either by its own
advance() or by re-reading and discarding items.

Not thread-safe. The item counter is a plain int and adapters are
assumed to be single-cursor; one caller drives open/read/checkpoint/close
in sequence.
"""

from collections.abc import Iterator, Mapping, MutableMapping
from contextlib import contextmanager
from typing import Any, Self

import structlog

from itemstream.contracts import (
    EndOfInput,
    PersistError,
    ReaderState,
    StreamCloseError,
    StreamConfigError,
    StreamInitError,
    StreamRestoreError,
    StreamStateError,
)
from itemstream.core.config import ReaderSettings
from itemstream.core.keys import read_count_key
from itemstream.plugins.base import skip_items
from itemstream.plugins.protocols import SourceAdapterProtocol

logger = structlog.get_logger()


class CheckpointedReader:
    """Restartable reader over a source adapter.

    Lifecycle:
        reader = CheckpointedReader(adapter, stream_name="orders")
        reader.open(ctx)            # resumes if ctx holds "orders.read.count"
        while ...:
            item = reader.read()    # raises EndOfInput when exhausted
            reader.checkpoint(ctx)  # ctx["orders.read.count"] = items_read
        reader.close(ctx)

    The count is taken *before* each fetch, so a read that raises still
    counts as an attempted item: after a crash mid-read, the resumed run
    starts after the failed item rather than retrying it.
    """

    def __init__(
        self,
        adapter: SourceAdapterProtocol,
        *,
        stream_name: str | None = None,
        save_state: bool = True,
    ) -> None:
        """Initialize the reader.

        Args:
            adapter: Source adapter producing the items
            stream_name: Namespace for this reader's checkpoint keys.
                Required before open()/checkpoint() when save_state is True.
            save_state: When False, checkpoint() writes nothing and the
                stream is not restartable.
        """
        self._adapter = adapter
        self.stream_name = stream_name
        self.save_state = save_state
        self._items_read = 0
        self._state = ReaderState.UNOPENED

    @classmethod
    def from_settings(
        cls, adapter: SourceAdapterProtocol, settings: ReaderSettings
    ) -> Self:
        """Create a reader configured from ReaderSettings."""
        return cls(
            adapter,
            stream_name=settings.stream_name,
            save_state=settings.save_state,
        )

    @property
    def items_read(self) -> int:
        """Read attempts since the last open(), plus the restored count."""
        return self._items_read

    @property
    def state(self) -> ReaderState:
        return self._state

    @property
    def adapter(self) -> SourceAdapterProtocol:
        return self._adapter

    # === Lifecycle ===

    def open(self, context: Mapping[str, Any]) -> None:
        """Open the adapter and restore the stored position, if any.

        Args:
            context: Checkpoint context to restore from

        Raises:
            StreamStateError: If the reader is already open
            StreamConfigError: If save_state is set but stream_name is not
            StreamInitError: If the adapter fails to open
            StreamRestoreError: If the stored position cannot be replayed
        """
        if self._state == ReaderState.OPEN:
            raise StreamStateError(
                f"Reader for stream {self.stream_name!r} is already open"
            )
        if self.save_state and not self._has_stream_name():
            raise StreamConfigError(
                "stream_name must be set before open() when save_state is enabled"
            )

        try:
            self._adapter.open()
        except Exception as e:
            raise StreamInitError(
                f"Failed to initialize the reader for stream {self.stream_name!r}"
            ) from e

        self._items_read = 0
        self._state = ReaderState.OPEN

        if not self._has_stream_name():
            logger.debug("Reader opened without stream name, restore skipped")
            return

        key = read_count_key(self.stream_name)
        if key not in context:
            logger.debug("Reader opened", stream=self.stream_name, items_read=0)
            return

        item_count = _stored_count(key, context[key])
        try:
            self._advance(item_count)
        except Exception as e:
            raise StreamRestoreError(
                f"Could not move stream {self.stream_name!r} "
                f"to stored position {item_count} on restart"
            ) from e

        self._items_read = item_count
        logger.info(
            "Reader restored from checkpoint",
            stream=self.stream_name,
            restored_from=item_count,
        )

    def read(self) -> Any:
        """Return the next item from the adapter.

        The counter is incremented before delegating. Adapter errors
        (SourceError, FormatError, ...) propagate unchanged and the attempt
        stays counted. EndOfInput propagates unchanged and is not counted,
        since no item was produced.

        Raises:
            StreamStateError: If the reader is not open
            EndOfInput: When the adapter is exhausted
        """
        if self._state != ReaderState.OPEN:
            raise StreamStateError(
                f"Reader for stream {self.stream_name!r} is not open "
                f"(state: {self._state.value})"
            )
        self._items_read += 1
        try:
            return self._adapter.next_item()
        except EndOfInput:
            self._items_read -= 1
            raise

    def checkpoint(self, context: MutableMapping[str, Any] | None) -> None:
        """Write the current item count into the context.

        No-op when save_state is False.

        Raises:
            StreamConfigError: If stream_name is not set
            PersistError: If the context is None or rejects the write
        """
        if not self.save_state:
            return
        if context is None:
            raise PersistError("Checkpoint context must not be None")
        if not self._has_stream_name():
            raise StreamConfigError(
                "stream_name must be set before checkpoint() when save_state is enabled"
            )

        key = read_count_key(self.stream_name)
        try:
            context[key] = self._items_read
        except (TypeError, ValueError) as e:
            raise PersistError(
                f"Checkpoint context rejected {key!r}={self._items_read}"
            ) from e

    def close(self, context: Mapping[str, Any] | None = None) -> None:
        """Reset the counter and close the adapter.

        The counter is reset before the adapter is closed, so a failing
        close never leaves a stale count behind. Safe to call in any state.

        Args:
            context: Checkpoint context (unused; kept for a symmetric lifecycle)

        Raises:
            StreamCloseError: If the adapter fails to close
        """
        self._items_read = 0
        self._state = ReaderState.CLOSED
        try:
            self._adapter.close()
        except Exception as e:
            raise StreamCloseError(
                f"Error while closing reader for stream {self.stream_name!r}"
            ) from e

    # === Transaction hooks ===
    # The only position state is the item count, so there is nothing to mark
    # or roll back to. Real rollback needs a buffer of items read since the
    # mark, composed around this reader.

    def mark(self) -> None:
        """No-op."""

    def reset(self) -> None:
        """No-op."""

    # === Conveniences ===

    def __iter__(self) -> Iterator[Any]:
        """Yield items until the adapter signals EndOfInput."""
        while True:
            try:
                yield self.read()
            except EndOfInput:
                return

    @contextmanager
    def session(self, context: MutableMapping[str, Any]) -> Iterator[Self]:
        """Open the reader for the duration of a with-block.

        Usage:
            with reader.session(ctx) as r:
                for item in r:
                    ...
                    r.checkpoint(ctx)
        """
        self.open(context)
        try:
            yield self
        finally:
            self.close(context)

    def _has_stream_name(self) -> bool:
        return self.stream_name is not None and bool(self.stream_name.strip())

    def _advance(self, count: int) -> None:
        advance = getattr(self._adapter, "advance", None)
        if advance is not None:
            advance(count)
        else:
            skip_items(self._adapter, count)


def _stored_count(key: str, value: Any) -> int:
    """Validate a stored item count.

    Raises:
        StreamRestoreError: If the value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise StreamRestoreError(
            f"Stored position {key!r} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise StreamRestoreError(f"Stored position {key!r} is negative: {value}")
    return value
