"""Checkpoint persistence for crash recovery.

Provides:
- CheckpointStore: Load and save checkpoint contexts per job
"""

from itemstream.core.checkpoint.store import CheckpointStore

__all__ = ["CheckpointStore"]
