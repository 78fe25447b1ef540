"""Tests for the database-backed checkpoint store."""

from pathlib import Path

import pytest

from itemstream.contracts import CheckpointContext
from itemstream.core.checkpoint import CheckpointStore
from itemstream.core.reader import CheckpointedReader
from itemstream.plugins.adapters.sequence import SequenceSourceAdapter


class TestCheckpointStore:
    """Contexts survive a round trip through the database."""

    @pytest.fixture
    def store(self, tmp_path: Path) -> CheckpointStore:
        return CheckpointStore(f"sqlite:///{tmp_path}/checkpoints.db")

    def test_unknown_job_loads_empty_context(self, store: CheckpointStore) -> None:
        ctx = store.load("never-run")

        assert len(ctx) == 0
        assert not ctx.dirty

    def test_save_and_load_preserves_types(self, store: CheckpointStore) -> None:
        ctx = CheckpointContext(
            {"orders.read.count": 42, "ratio": 0.25, "cursor": "abc"}
        )
        store.save("job", ctx)

        loaded = store.load("job")

        assert loaded == {"orders.read.count": 42, "ratio": 0.25, "cursor": "abc"}
        assert isinstance(loaded["orders.read.count"], int)
        assert isinstance(loaded["ratio"], float)

    def test_save_clears_dirty_flag(self, store: CheckpointStore) -> None:
        ctx = CheckpointContext({"k": 1})
        store.save("job", ctx)

        assert not ctx.dirty

    def test_save_replaces_previous_entries(self, store: CheckpointStore) -> None:
        store.save("job", CheckpointContext({"old": 1, "kept": 1}))
        store.save("job", CheckpointContext({"kept": 2}))

        assert store.load("job") == {"kept": 2}

    def test_jobs_are_isolated(self, store: CheckpointStore) -> None:
        store.save("a", CheckpointContext({"k": 1}))
        store.save("b", CheckpointContext({"k": 2}))

        assert store.load("a")["k"] == 1
        assert store.load("b")["k"] == 2
        assert store.job_keys() == ["a", "b"]

    def test_delete(self, store: CheckpointStore) -> None:
        store.save("job", CheckpointContext({"x": 1, "y": 2}))

        assert store.delete("job") == 2
        assert len(store.load("job")) == 0
        assert store.delete("job") == 0

    def test_persists_across_store_instances(self, tmp_path: Path) -> None:
        url = f"sqlite:///{tmp_path}/checkpoints.db"
        with CheckpointStore(url) as first:
            first.save("job", CheckpointContext({"orders.read.count": 3}))

        with CheckpointStore(url) as second:
            assert second.load("job") == {"orders.read.count": 3}

    def test_closed_store_raises(self, store: CheckpointStore) -> None:
        store.close()

        with pytest.raises(RuntimeError):
            store.load("job")

    def test_in_memory_store(self) -> None:
        store = CheckpointStore.in_memory()
        store.save("job", CheckpointContext({"k": 1}))

        assert store.load("job") == {"k": 1}

    def test_reader_resumes_across_process_style_restart(self, tmp_path: Path) -> None:
        """Simulates a crash: only the store survives between runs."""
        url = f"sqlite:///{tmp_path}/checkpoints.db"
        items = ["a", "b", "c", "d"]

        with CheckpointStore(url) as store:
            ctx = store.load("nightly")
            reader = CheckpointedReader(
                SequenceSourceAdapter({"items": items}), stream_name="letters"
            )
            reader.open(ctx)
            reader.read()
            reader.read()
            reader.checkpoint(ctx)
            store.save("nightly", ctx)
            reader.read()  # Read past the checkpoint, then "crash"

        with CheckpointStore(url) as store:
            ctx = store.load("nightly")
            reader = CheckpointedReader(
                SequenceSourceAdapter({"items": items}), stream_name="letters"
            )
            reader.open(ctx)

            assert reader.read() == "c"
