"""Tests for the source adapter base class and default advance."""

from typing import Any

import pytest

from itemstream.contracts import EndOfInput, SourceError
from itemstream.plugins.base import BaseSourceAdapter, skip_items
from itemstream.plugins.protocols import (
    SeekableSourceAdapterProtocol,
    SourceAdapterProtocol,
)


class CountingAdapter(BaseSourceAdapter):
    """Produces 0..stop-1 and records every next_item() call."""

    name = "counting"

    def __init__(self, stop: int, fail_at: int | None = None) -> None:
        super().__init__({"stop": stop})
        self.stop = stop
        self.fail_at = fail_at
        self.calls = 0
        self.current = 0

    def open(self) -> None:
        self.current = 0

    def next_item(self) -> Any:
        self.calls += 1
        if self.current >= self.stop:
            raise EndOfInput()
        if self.current == self.fail_at:
            self.current += 1
            raise SourceError(f"failed at {self.fail_at}")
        self.current += 1
        return self.current - 1

    def close(self) -> None:
        pass


class TestBaseSourceAdapter:
    """BaseSourceAdapter provides the default reread advance."""

    def test_cannot_instantiate_abstract_base(self) -> None:
        with pytest.raises(TypeError):
            BaseSourceAdapter({})  # type: ignore[abstract]

    def test_stores_config(self) -> None:
        assert CountingAdapter(3).config == {"stop": 3}

    def test_default_version(self) -> None:
        assert CountingAdapter.plugin_version == "0.0.0"

    def test_satisfies_protocols(self) -> None:
        adapter = CountingAdapter(3)

        assert isinstance(adapter, SourceAdapterProtocol)
        assert isinstance(adapter, SeekableSourceAdapterProtocol)

    def test_advance_calls_next_item_n_times(self) -> None:
        adapter = CountingAdapter(10)
        adapter.open()
        adapter.advance(4)

        assert adapter.calls == 4
        assert adapter.next_item() == 4

    def test_advance_zero_is_no_op(self) -> None:
        adapter = CountingAdapter(3)
        adapter.open()
        adapter.advance(0)

        assert adapter.calls == 0


class TestSkipItems:
    """skip_items() is the reread fallback."""

    def test_short_input_raises_end_of_input(self) -> None:
        adapter = CountingAdapter(2)
        adapter.open()

        with pytest.raises(EndOfInput):
            skip_items(adapter, 3)

        assert adapter.calls == 3

    def test_item_errors_propagate(self) -> None:
        adapter = CountingAdapter(5, fail_at=1)
        adapter.open()

        with pytest.raises(SourceError):
            skip_items(adapter, 3)

        assert adapter.calls == 2

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            skip_items(CountingAdapter(1), -1)
