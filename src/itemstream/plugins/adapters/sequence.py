# src/itemstream/plugins/adapters/sequence.py
"""In-memory sequence adapter.

Produces items from a list held in memory. Useful for tests, for small
reference datasets embedded in settings, and as the simplest example of
an adapter with an efficient advance().
"""

from typing import Any

from itemstream.contracts import EndOfInput, StreamStateError
from itemstream.plugins.base import BaseSourceAdapter
from itemstream.plugins.config_base import PluginConfig


class SequenceAdapterConfig(PluginConfig):
    """Configuration for the sequence adapter."""

    items: list[Any]


class SequenceSourceAdapter(BaseSourceAdapter):
    """Read items from an in-memory list.

    Config options:
        items: The items to produce, in order (required)
    """

    name = "sequence"
    plugin_version = "1.0.0"

    def __init__(self, config: dict[str, Any]) -> None:
        super().__init__(config)
        cfg = SequenceAdapterConfig.from_dict(config)
        self._items = list(cfg.items)
        self._position: int | None = None

    @classmethod
    def of(cls, *items: Any) -> "SequenceSourceAdapter":
        """Shortcut: SequenceSourceAdapter.of("a", "b", "c")."""
        return cls({"items": list(items)})

    @property
    def position(self) -> int | None:
        """Index of the next item, or None when closed."""
        return self._position

    def open(self) -> None:
        self._position = 0

    def next_item(self) -> Any:
        position = self._require_open()
        if position >= len(self._items):
            raise EndOfInput()
        self._position = position + 1
        return self._items[position]

    def advance(self, count: int) -> None:
        """Jump ``count`` items ahead by index.

        Raises:
            ValueError: If count is negative.
            EndOfInput: If fewer than ``count`` items remain. The adapter is
                left at the end of input, as a reread would leave it.
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        position = self._require_open()
        target = position + count
        if target > len(self._items):
            self._position = len(self._items)
            raise EndOfInput()
        self._position = target

    def close(self) -> None:
        self._position = None

    def _require_open(self) -> int:
        if self._position is None:
            raise StreamStateError(f"{self.name} adapter is not open")
        return self._position
