# src/itemstream/core/config.py
"""
Configuration schema and loading for itemstream.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class ReaderSettings(BaseModel):
    """Checkpointed reader configuration.

    Example YAML:
        reader:
          stream_name: orders
          save_state: true
    """

    model_config = {"frozen": True}

    stream_name: str | None = Field(
        default=None,
        description="Prefix for this stream's keys in the checkpoint context",
    )
    save_state: bool = Field(
        default=True,
        description="Write the item count on checkpoint(); False disables restart",
    )

    @model_validator(mode="after")
    def validate_stream_name_when_saving(self) -> "ReaderSettings":
        """A persisted stream needs a name to namespace its keys."""
        if self.save_state and (
            self.stream_name is None or not self.stream_name.strip()
        ):
            raise ValueError("stream_name is required when save_state is true")
        return self


class SourceSettings(BaseModel):
    """Source adapter selection.

    Example YAML:
        source:
          plugin: csv
          options:
            path: data/orders.csv
            delimiter: ";"
    """

    model_config = {"frozen": True}

    plugin: str = Field(description="Registered adapter name")
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Adapter-specific configuration",
    )

    @field_validator("plugin")
    @classmethod
    def validate_plugin_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("plugin name cannot be empty")
        return v


class CheckpointSettings(BaseModel):
    """Where and how often checkpoints are persisted."""

    model_config = {"frozen": True}

    url: str = Field(
        default="sqlite:///./itemstream.db",
        description="SQLAlchemy URL of the checkpoint store",
    )
    job_key: str = Field(
        default="default",
        min_length=1,
        description="Key of the checkpoint context within the store",
    )
    interval: int = Field(
        default=100,
        gt=0,
        description="Checkpoint after this many items",
    )


class ItemStreamSettings(BaseModel):
    """Top-level settings for a read run."""

    model_config = {"frozen": True}

    source: SourceSettings = Field(description="Source adapter configuration")
    reader: ReaderSettings = Field(
        default_factory=lambda: ReaderSettings(save_state=False),
        description="Reader configuration",
    )
    checkpoint: CheckpointSettings = Field(
        default_factory=CheckpointSettings,
        description="Checkpoint persistence configuration",
    )


def load_settings(config_path: Path) -> ItemStreamSettings:
    """Load settings from YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (ITEMSTREAM_*) - highest priority
    2. Config file
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: ITEMSTREAM_READER__STREAM_NAME for nested keys.

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Explicit check for file existence (Dynaconf silently accepts missing files)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="ITEMSTREAM",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase top-level keys; Pydantic wants lowercase
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {
        k.lower(): v
        for k, v in dynaconf_settings.as_dict().items()
        if k not in internal_keys
    }
    return ItemStreamSettings(**raw_config)
