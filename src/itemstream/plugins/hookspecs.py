# src/itemstream/plugins/hookspecs.py
"""pluggy hook specifications for itemstream source adapters.

Packages providing adapters implement these hooks to register them.

Usage (implementing a plugin):
    from itemstream.plugins.hookspecs import hookimpl

    class MyAdapters:
        @hookimpl  # NOT @hookspec - that's for defining specs
        def itemstream_get_source_adapters(self):
            return [KafkaSourceAdapter]
"""

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from itemstream.plugins.protocols import SourceAdapterProtocol

# Project name for pluggy
PROJECT_NAME = "itemstream"

# Hook specification marker
hookspec = pluggy.HookspecMarker(PROJECT_NAME)

# Hook implementation marker (for plugins to use)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class ItemStreamAdapterSpec:
    """Hook specifications for source adapters."""

    @hookspec
    def itemstream_get_source_adapters(self) -> list[type["SourceAdapterProtocol"]]:  # type: ignore[empty-body]
        """Return source adapter classes.

        Returns:
            List of adapter classes (not instances)
        """
