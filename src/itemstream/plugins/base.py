# src/itemstream/plugins/base.py
"""Base class for source adapter implementations.

Adapters can subclass BaseSourceAdapter for convenience (config storage,
the default reread advance), or implement SourceAdapterProtocol directly.
"""

from abc import ABC, abstractmethod
from typing import Any

from itemstream.plugins.protocols import SourceAdapterProtocol


def skip_items(adapter: SourceAdapterProtocol, count: int) -> None:
    """Advance an adapter by re-reading and discarding ``count`` items.

    This is the fallback recovery algorithm: correct for any adapter,
    O(count) in resume cost. EndOfInput and adapter errors propagate
    exactly as they would from the equivalent next_item() calls.

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    for _ in range(count):
        adapter.next_item()


class BaseSourceAdapter(ABC):
    """Base class for source adapters.

    Subclass and implement open(), next_item() and close(). Override
    advance() when the underlying source can position itself cheaply.

    Example:
        class RangeAdapter(BaseSourceAdapter):
            name = "range"

            def open(self) -> None:
                self._i = 0

            def next_item(self) -> int:
                if self._i >= self.config["stop"]:
                    raise EndOfInput()
                self._i += 1
                return self._i - 1

            def close(self) -> None:
                pass
    """

    name: str
    plugin_version: str = "0.0.0"

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize with configuration."""
        self.config = config

    @abstractmethod
    def open(self) -> None:
        """Acquire resources. Raise OpenError on failure."""
        ...

    @abstractmethod
    def next_item(self) -> Any:
        """Return the next item or raise EndOfInput."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release resources. Must be idempotent."""
        ...

    def advance(self, count: int) -> None:
        """Skip ``count`` items by re-reading them.

        Override if there is a more efficient way of moving forward.
        """
        skip_items(self, count)
