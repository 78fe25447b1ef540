# src/itemstream/plugins/config_base.py
"""Typed configuration for source adapters.

Adapters are constructed from plain dicts (from YAML settings or code).
Each adapter validates its dict through a PluginConfig subclass, which
rejects unknown keys and reports every problem in one PluginConfigError.

Example usage:
    class JSONLAdapterConfig(FileConfig):
        pass

    cfg = JSONLAdapterConfig.from_dict({"path": "orders.jsonl"})
    cfg.resolved_path()
"""

from pathlib import Path
from typing import Any, Self

from pydantic import BaseModel, ValidationError, field_validator

from itemstream.contracts import ItemStreamError


class PluginConfigError(ItemStreamError):
    """Raised when adapter configuration is invalid."""


class PluginConfig(BaseModel):
    """Base class for typed adapter configurations."""

    model_config = {"extra": "forbid", "frozen": True}

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> Self:
        """Create config from dict with clear error on validation failure.

        Raises:
            PluginConfigError: If configuration is invalid.
        """
        try:
            return cls(**config)
        except ValidationError as e:
            raise PluginConfigError(
                f"Invalid configuration for {cls.__name__}: {e}"
            ) from e


class FileConfig(PluginConfig):
    """Base for adapters that read a single file."""

    path: str
    encoding: str = "utf-8"

    @field_validator("path")
    @classmethod
    def validate_path_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("path cannot be empty")
        return v

    def resolved_path(self, base_dir: Path | None = None) -> Path:
        """Resolve path relative to base_dir if given and path is relative."""
        p = Path(self.path)
        if base_dir and not p.is_absolute():
            return base_dir / p
        return p
