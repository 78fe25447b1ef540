"""Source adapter system.

Provides:
- Protocols for the adapter contract (plain and seekable)
- BaseSourceAdapter with the default reread advance()
- Typed adapter configuration
- pluggy-based registration and lookup
"""

from itemstream.plugins.base import BaseSourceAdapter, skip_items
from itemstream.plugins.config_base import (
    FileConfig,
    PluginConfig,
    PluginConfigError,
)
from itemstream.plugins.hookspecs import hookimpl, hookspec
from itemstream.plugins.manager import PluginManager
from itemstream.plugins.protocols import (
    SeekableSourceAdapterProtocol,
    SourceAdapterProtocol,
)

__all__ = [
    "BaseSourceAdapter",
    "FileConfig",
    "PluginConfig",
    "PluginConfigError",
    "PluginManager",
    "SeekableSourceAdapterProtocol",
    "SourceAdapterProtocol",
    "hookimpl",
    "hookspec",
    "skip_items",
]
