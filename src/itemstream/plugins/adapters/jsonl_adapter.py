# src/itemstream/plugins/adapters/jsonl_adapter.py
"""JSONL source adapter.

Reads one JSON object per line, lazily. A line stream cannot be positioned
by item, so this adapter relies on the default reread advance().
"""

import json
import logging
from typing import IO, Any

from itemstream.contracts import (
    CloseError,
    EndOfInput,
    FormatError,
    OpenError,
    SourceError,
    StreamStateError,
)
from itemstream.plugins.base import BaseSourceAdapter
from itemstream.plugins.config_base import FileConfig

logger = logging.getLogger(__name__)


class JSONLAdapterConfig(FileConfig):
    """Configuration for the JSONL adapter."""


class JSONLSourceAdapter(BaseSourceAdapter):
    """Read JSON objects from a JSON Lines file.

    Config options:
        path: Path to JSONL file (required)
        encoding: File encoding (default: "utf-8")

    Blank lines are skipped and do not count as items.
    """

    name = "jsonl"
    plugin_version = "1.0.0"

    def __init__(self, config: dict[str, Any]) -> None:
        super().__init__(config)
        cfg = JSONLAdapterConfig.from_dict(config)
        self._path = cfg.resolved_path()
        self._encoding = cfg.encoding
        self._file: IO[str] | None = None
        self._line_number = 0

    def open(self) -> None:
        """Open the file for reading.

        Raises:
            OpenError: If the file cannot be opened.
        """
        try:
            self._file = open(self._path, encoding=self._encoding)  # noqa: SIM115 - closed in close()
        except OSError as e:
            raise OpenError(f"Cannot open JSONL file {self._path}: {e}") from e
        self._line_number = 0

    def next_item(self) -> dict[str, Any]:
        """Parse and return the next non-blank line.

        Raises:
            EndOfInput: At end of file.
            FormatError: If the line is not a JSON object.
            SourceError: If reading the file fails.
        """
        if self._file is None:
            raise StreamStateError(f"JSONL adapter for {self._path} is not open")

        while True:
            try:
                line = self._file.readline()
            except (OSError, UnicodeDecodeError) as e:
                raise SourceError(
                    f"Failed reading {self._path} after line {self._line_number}: {e}"
                ) from e
            if not line:
                raise EndOfInput()
            self._line_number += 1
            line = line.strip()
            if line:
                break

        try:
            item = json.loads(line)
        except json.JSONDecodeError as e:
            raise FormatError(
                f"Invalid JSON on line {self._line_number} of {self._path}: {e.msg}",
                position=self._line_number,
            ) from e
        if not isinstance(item, dict):
            raise FormatError(
                f"Expected JSON object on line {self._line_number} of {self._path}, "
                f"got {type(item).__name__}",
                position=self._line_number,
            )
        return item

    def close(self) -> None:
        if self._file is None:
            return
        f, self._file = self._file, None
        try:
            f.close()
        except OSError as e:
            raise CloseError(f"Failed closing {self._path}: {e}") from e
        logger.debug("Closed %s after %d lines", self._path, self._line_number)
