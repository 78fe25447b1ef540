# src/itemstream/core/checkpoint/schema.py
"""SQLAlchemy table definitions for the checkpoint store.

Uses SQLAlchemy Core (not ORM) for explicit control over queries
and compatibility with multiple database backends.
"""

from sqlalchemy import Column, DateTime, MetaData, String, Table, Text

metadata = MetaData()

# One row per (job, context key). value_type preserves int/float/str
# across the round trip through a text column.
checkpoint_entries_table = Table(
    "checkpoint_entries",
    metadata,
    Column("job_key", String(255), primary_key=True),
    Column("entry_key", String(255), primary_key=True),
    Column("value_type", String(16), nullable=False),
    Column("value_text", Text, nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)
