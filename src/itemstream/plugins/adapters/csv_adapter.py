# src/itemstream/plugins/adapters/csv_adapter.py
"""CSV source adapter.

Loads rows from CSV files using pandas for robust parsing. The whole file
is parsed on open(), so advance() is a constant-time index move.
"""

import logging
from typing import Any

import pandas as pd

from itemstream.contracts import EndOfInput, OpenError, StreamStateError
from itemstream.plugins.base import BaseSourceAdapter
from itemstream.plugins.config_base import FileConfig

logger = logging.getLogger(__name__)


class CSVAdapterConfig(FileConfig):
    """Configuration for the CSV adapter."""

    delimiter: str = ","
    skip_rows: int = 0


class CSVSourceAdapter(BaseSourceAdapter):
    """Read rows from a CSV file as ``dict[str, str]``.

    Config options:
        path: Path to CSV file (required)
        delimiter: Field delimiter (default: ",")
        encoding: File encoding (default: "utf-8")
        skip_rows: Number of leading lines to skip before the header (default: 0)
    """

    name = "csv"
    plugin_version = "1.0.0"

    def __init__(self, config: dict[str, Any]) -> None:
        super().__init__(config)
        cfg = CSVAdapterConfig.from_dict(config)
        self._path = cfg.resolved_path()
        self._delimiter = cfg.delimiter
        self._encoding = cfg.encoding
        self._skip_rows = cfg.skip_rows
        self._records: list[dict[str, str]] | None = None
        self._position = 0

    def open(self) -> None:
        """Parse the CSV file.

        Raises:
            OpenError: If the file is missing, unreadable or not valid CSV.
        """
        if not self._path.exists():
            raise OpenError(f"CSV file not found: {self._path}")

        try:
            dataframe = pd.read_csv(
                self._path,
                delimiter=self._delimiter,
                encoding=self._encoding,
                skiprows=self._skip_rows,
                dtype=str,  # Keep all values as strings for consistent handling
                keep_default_na=False,  # Don't convert empty strings to NaN
            )
        except pd.errors.EmptyDataError:
            dataframe = pd.DataFrame()
        except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
            raise OpenError(f"Cannot parse CSV file {self._path}: {e}") from e

        # DataFrame columns are strings from CSV headers
        self._records = [
            {str(k): v for k, v in record.items()}
            for record in dataframe.to_dict(orient="records")
        ]
        self._position = 0
        logger.debug("Loaded %d rows from %s", len(self._records), self._path)

    def next_item(self) -> dict[str, str]:
        records = self._require_open()
        if self._position >= len(records):
            raise EndOfInput()
        row = records[self._position]
        self._position += 1
        return row

    def advance(self, count: int) -> None:
        """Move the row cursor ``count`` rows ahead.

        Raises:
            EndOfInput: If fewer than ``count`` rows remain.
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        records = self._require_open()
        target = self._position + count
        if target > len(records):
            self._position = len(records)
            raise EndOfInput()
        self._position = target

    def close(self) -> None:
        """Release the parsed rows."""
        self._records = None
        self._position = 0

    def _require_open(self) -> list[dict[str, str]]:
        if self._records is None:
            raise StreamStateError(f"CSV adapter for {self._path} is not open")
        return self._records
