"""Property-based tests for reader counting and restart invariants."""

from typing import Any

from hypothesis import given
from hypothesis import strategies as st

from itemstream.contracts import CheckpointContext, EndOfInput
from itemstream.core.reader import CheckpointedReader
from itemstream.plugins.adapters.sequence import SequenceSourceAdapter
from itemstream.plugins.base import skip_items

items_strategy = st.lists(st.integers(), max_size=50)


class _RereadOnly:
    """Adapter without advance(), so restart goes through skip_items."""

    name = "reread"
    plugin_version = "1.0.0"

    def __init__(self, items: list[Any]) -> None:
        self._inner = SequenceSourceAdapter({"items": items})

    def open(self) -> None:
        self._inner.open()

    def next_item(self) -> Any:
        return self._inner.next_item()

    def close(self) -> None:
        self._inner.close()


@given(items=items_strategy, data=st.data())
def test_items_read_equals_number_of_reads(items: list[int], data: st.DataObject) -> None:
    n = data.draw(st.integers(min_value=0, max_value=len(items)))
    reader = CheckpointedReader(SequenceSourceAdapter({"items": items}), stream_name="p")
    reader.open(CheckpointContext())

    for _ in range(n):
        reader.read()

    assert reader.items_read == n


@given(items=items_strategy, data=st.data(), seekable=st.booleans())
def test_round_trip_resumes_at_next_item(
    items: list[int], data: st.DataObject, seekable: bool
) -> None:
    k = data.draw(st.integers(min_value=0, max_value=len(items)))
    ctx = CheckpointContext()

    def make_adapter() -> Any:
        if seekable:
            return SequenceSourceAdapter({"items": items})
        return _RereadOnly(items)

    first = CheckpointedReader(make_adapter(), stream_name="p")
    first.open(ctx)
    for _ in range(k):
        first.read()
    first.checkpoint(ctx)
    first.close(ctx)

    second = CheckpointedReader(make_adapter(), stream_name="p")
    second.open(ctx)

    if k < len(items):
        assert second.read() == items[k]
    else:
        try:
            second.read()
        except EndOfInput:
            pass
        else:
            raise AssertionError("expected EndOfInput after the last item")


@given(items=items_strategy, reads=st.integers(min_value=0, max_value=60))
def test_save_state_false_never_writes(items: list[int], reads: int) -> None:
    ctx = CheckpointContext()
    reader = CheckpointedReader(
        SequenceSourceAdapter({"items": items}), stream_name="p", save_state=False
    )
    reader.open(ctx)

    for _ in range(reads):
        try:
            reader.read()
        except EndOfInput:
            pass
        reader.checkpoint(ctx)

    assert "p.read.count" not in ctx


@given(items=items_strategy, count=st.integers(min_value=0, max_value=60))
def test_default_advance_matches_repeated_next(items: list[int], count: int) -> None:
    skipped = SequenceSourceAdapter({"items": items})
    stepped = SequenceSourceAdapter({"items": items})
    skipped.open()
    stepped.open()

    skip_error = step_error = None
    try:
        skip_items(skipped, count)
    except EndOfInput as e:
        skip_error = e
    try:
        for _ in range(count):
            stepped.next_item()
    except EndOfInput as e:
        step_error = e

    assert type(skip_error) is type(step_error)
    assert skipped.position == stepped.position


@given(items=items_strategy, count=st.integers(min_value=0, max_value=60))
def test_seek_advance_matches_default_advance(items: list[int], count: int) -> None:
    seeked = SequenceSourceAdapter({"items": items})
    reread = SequenceSourceAdapter({"items": items})
    seeked.open()
    reread.open()

    seek_error = reread_error = None
    try:
        seeked.advance(count)
    except EndOfInput as e:
        seek_error = e
    try:
        skip_items(reread, count)
    except EndOfInput as e:
        reread_error = e

    assert type(seek_error) is type(reread_error)
    assert seeked.position == reread.position


@given(reads=st.integers(min_value=0, max_value=10))
def test_close_always_resets_counter(reads: int) -> None:
    reader = CheckpointedReader(
        SequenceSourceAdapter({"items": list(range(10))}), stream_name="p"
    )
    reader.open(CheckpointContext())
    for _ in range(reads):
        reader.read()

    reader.close()
    assert reader.items_read == 0
    reader.close()
    assert reader.items_read == 0
