"""Built-in source adapters."""

from itemstream.plugins.adapters.csv_adapter import CSVSourceAdapter
from itemstream.plugins.adapters.jsonl_adapter import JSONLSourceAdapter
from itemstream.plugins.adapters.sequence import SequenceSourceAdapter
from itemstream.plugins.adapters.sql_adapter import SQLTableSourceAdapter

__all__ = [
    "CSVSourceAdapter",
    "JSONLSourceAdapter",
    "SQLTableSourceAdapter",
    "SequenceSourceAdapter",
]
