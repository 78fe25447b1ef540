# src/itemstream/plugins/protocols.py
"""Protocols defining the source adapter contract.

These protocols define what methods adapters must implement.
They're used for type checking and for runtime capability checks
(does this adapter know how to advance efficiently?).

Lifecycle:
1. __init__(config) - Adapter instantiation
2. open() - Acquire resources
3. next_item() - Called repeatedly; raises EndOfInput when exhausted
4. close() - Release resources (idempotent)
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SourceAdapterProtocol(Protocol):
    """Protocol for source adapters.

    A source adapter produces raw items from one input technology.

    Example:
        class LineAdapter:
            name = "lines"
            plugin_version = "1.0.0"

            def open(self) -> None:
                self._f = open(self._path)

            def next_item(self) -> str:
                line = self._f.readline()
                if not line:
                    raise EndOfInput()
                return line.rstrip("\\n")

            def close(self) -> None:
                self._f.close()
    """

    name: str
    plugin_version: str

    def open(self) -> None:
        """Acquire resources needed to produce items.

        Raises:
            OpenError: If resources cannot be acquired.
        """
        ...

    def next_item(self) -> Any:
        """Return the next item.

        Raises:
            EndOfInput: When there are no more items.
            FormatError: If raw data cannot be parsed into an item.
            SourceError: On I/O-level failure.
        """
        ...

    def close(self) -> None:
        """Release resources. Must be safe to call more than once."""
        ...


@runtime_checkable
class SeekableSourceAdapterProtocol(SourceAdapterProtocol, Protocol):
    """Source adapter that can skip items without materializing them."""

    def advance(self, count: int) -> None:
        """Skip the next ``count`` items.

        Must be observably equivalent to calling next_item() ``count`` times,
        including raising EndOfInput when fewer items remain.
        """
        ...
