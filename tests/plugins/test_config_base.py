# tests/plugins/test_config_base.py
"""Tests for adapter configuration base classes."""

from pathlib import Path

import pytest


class TestPluginConfig:
    """Strict validation with one clear error type."""

    def test_from_dict_valid(self) -> None:
        from itemstream.plugins.config_base import PluginConfig

        class MyConfig(PluginConfig):
            batch: int = 10

        assert MyConfig.from_dict({"batch": 5}).batch == 5

    def test_unknown_fields_rejected(self) -> None:
        from itemstream.plugins.config_base import PluginConfig, PluginConfigError

        class MyConfig(PluginConfig):
            batch: int = 10

        with pytest.raises(PluginConfigError, match="MyConfig"):
            MyConfig.from_dict({"batch": 5, "typo": True})

    def test_error_chains_validation_error(self) -> None:
        from pydantic import ValidationError

        from itemstream.plugins.config_base import PluginConfig, PluginConfigError

        class MyConfig(PluginConfig):
            batch: int

        with pytest.raises(PluginConfigError) as exc_info:
            MyConfig.from_dict({"batch": "many"})

        assert isinstance(exc_info.value.__cause__, ValidationError)


class TestFileConfig:
    """Path handling for file-backed adapters."""

    def test_defaults(self) -> None:
        from itemstream.plugins.config_base import FileConfig

        cfg = FileConfig.from_dict({"path": "data.jsonl"})

        assert cfg.encoding == "utf-8"
        assert cfg.resolved_path() == Path("data.jsonl")

    def test_resolves_relative_to_base_dir(self) -> None:
        from itemstream.plugins.config_base import FileConfig

        cfg = FileConfig.from_dict({"path": "data.jsonl"})

        assert cfg.resolved_path(Path("/srv/in")) == Path("/srv/in/data.jsonl")

    def test_absolute_path_ignores_base_dir(self) -> None:
        from itemstream.plugins.config_base import FileConfig

        cfg = FileConfig.from_dict({"path": "/abs/data.jsonl"})

        assert cfg.resolved_path(Path("/srv/in")) == Path("/abs/data.jsonl")

    def test_missing_path_rejected(self) -> None:
        from itemstream.plugins.config_base import FileConfig, PluginConfigError

        with pytest.raises(PluginConfigError):
            FileConfig.from_dict({})
