"""Hook implementation for built-in source adapters."""

from typing import Any

from itemstream.plugins.hookspecs import hookimpl


class ItemStreamBuiltinAdapters:
    """Hook implementer for built-in source adapters."""

    @hookimpl
    def itemstream_get_source_adapters(self) -> list[type[Any]]:
        """Return built-in source adapter classes."""
        from itemstream.plugins.adapters.csv_adapter import CSVSourceAdapter
        from itemstream.plugins.adapters.jsonl_adapter import JSONLSourceAdapter
        from itemstream.plugins.adapters.sequence import SequenceSourceAdapter
        from itemstream.plugins.adapters.sql_adapter import SQLTableSourceAdapter

        return [
            CSVSourceAdapter,
            JSONLSourceAdapter,
            SequenceSourceAdapter,
            SQLTableSourceAdapter,
        ]


# Singleton instance for registration
builtin_adapters = ItemStreamBuiltinAdapters()
