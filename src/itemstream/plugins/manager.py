# src/itemstream/plugins/manager.py
"""Plugin manager for source adapter discovery and construction.

Uses pluggy for hook-based registration.
"""

from typing import Any

import pluggy

from itemstream.plugins.hookspecs import PROJECT_NAME, ItemStreamAdapterSpec
from itemstream.plugins.protocols import SourceAdapterProtocol


class PluginManager:
    """Manages source adapter registration and lookup.

    Usage:
        manager = PluginManager()
        manager.register_builtin_plugins()

        adapter = manager.create_adapter("csv", {"path": "orders.csv"})
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ItemStreamAdapterSpec)

        # Cache - map name to adapter class for duplicate detection
        self._adapters: dict[str, type[SourceAdapterProtocol]] = {}

    def register_builtin_plugins(self) -> None:
        """Register the built-in adapters.

        Call this once at startup to make built-in adapters discoverable.
        """
        from itemstream.plugins.adapters.hookimpl import builtin_adapters

        self.register(builtin_adapters)

    def register(self, plugin: Any) -> None:
        """Register a plugin.

        Args:
            plugin: Plugin instance implementing hook methods

        Raises:
            ValueError: If it provides an adapter name that is already taken
        """
        self._pm.register(plugin)
        try:
            self._refresh_cache()
        except ValueError:
            self._pm.unregister(plugin)
            raise

    def _refresh_cache(self) -> None:
        new_adapters: dict[str, type[SourceAdapterProtocol]] = {}

        for adapters in self._pm.hook.itemstream_get_source_adapters():
            for cls in adapters:
                name = cls.name
                if name in new_adapters:
                    raise ValueError(
                        f"Duplicate source adapter name: '{name}'. "
                        f"Already registered by {new_adapters[name].__name__}"
                    )
                new_adapters[name] = cls

        self._adapters = new_adapters

    def get_adapters(self) -> list[type[SourceAdapterProtocol]]:
        """Get all registered adapter classes, sorted by name."""
        return [self._adapters[name] for name in sorted(self._adapters)]

    def get_adapter_by_name(self, name: str) -> type[SourceAdapterProtocol] | None:
        """Get adapter class by name."""
        return self._adapters.get(name)

    def create_adapter(
        self, name: str, options: dict[str, Any]
    ) -> SourceAdapterProtocol:
        """Instantiate the adapter registered under ``name``.

        Raises:
            KeyError: If no adapter has that name.
            PluginConfigError: If the options are invalid for the adapter.
        """
        adapter_cls = self.get_adapter_by_name(name)
        if adapter_cls is None:
            raise KeyError(
                f"Unknown source adapter: '{name}'. "
                f"Available: {sorted(self._adapters)}"
            )
        return adapter_cls(options)  # type: ignore[call-arg]
