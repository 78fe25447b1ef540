# src/itemstream/contracts/context.py
"""Checkpoint context: a caller-owned key-value map of primitive values.

Readers only rely on the MutableMapping interface (``key in ctx``,
``ctx[key]``, ``ctx[key] = value``), so any mapping can stand in.
CheckpointContext adds what a persistent store needs on top of that:
primitive-only values, typed accessors and a dirty flag.
"""

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any, Self

ContextValue = int | float | str

_PRIMITIVE_TYPES = (int, float, str)


class CheckpointContext(MutableMapping[str, ContextValue]):
    """Mapping from string keys to int/float/str values.

    Example:
        ctx = CheckpointContext()
        ctx.put_int("orders.read.count", 42)
        ctx.get_int("orders.read.count")  # 42
        ctx.dirty  # True until the store saves it
    """

    def __init__(self, values: Mapping[str, ContextValue] | None = None) -> None:
        self._values: dict[str, ContextValue] = {}
        self._dirty = False
        if values:
            self.update(values)

    # === MutableMapping ===

    def __getitem__(self, key: str) -> ContextValue:
        return self._values[key]

    def __setitem__(self, key: str, value: ContextValue) -> None:
        if not isinstance(key, str):
            raise TypeError(f"Context keys must be str, got {type(key).__name__}")
        # bool is an int subclass but has no stable round trip through storage
        if isinstance(value, bool) or not isinstance(value, _PRIMITIVE_TYPES):
            raise TypeError(
                f"Context values must be int, float or str, "
                f"got {type(value).__name__} for key {key!r}"
            )
        self._values[key] = value
        self._dirty = True

    def __delitem__(self, key: str) -> None:
        del self._values[key]
        self._dirty = True

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"CheckpointContext({self._values!r})"

    # === Typed accessors ===

    def get_int(self, key: str, default: int | None = None) -> int:
        """Get an integer value.

        Raises:
            KeyError: If the key is missing and no default is given.
            TypeError: If the stored value is not an int.
        """
        if key not in self._values:
            if default is None:
                raise KeyError(key)
            return default
        value = self._values[key]
        if not isinstance(value, int):
            raise TypeError(f"Value for {key!r} is {type(value).__name__}, not int")
        return value

    def put_int(self, key: str, value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Expected int for {key!r}, got {type(value).__name__}")
        self[key] = value

    def get_str(self, key: str, default: str | None = None) -> str:
        if key not in self._values:
            if default is None:
                raise KeyError(key)
            return default
        value = self._values[key]
        if not isinstance(value, str):
            raise TypeError(f"Value for {key!r} is {type(value).__name__}, not str")
        return value

    def put_str(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Expected str for {key!r}, got {type(value).__name__}")
        self[key] = value

    # === Persistence support ===

    @property
    def dirty(self) -> bool:
        """True if the context changed since creation or the last clear_dirty()."""
        return self._dirty

    def clear_dirty(self) -> None:
        self._dirty = False

    def to_dict(self) -> dict[str, ContextValue]:
        return dict(self._values)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> Self:
        """Build a clean (not dirty) context from stored values."""
        ctx = cls(values)
        ctx.clear_dirty()
        return ctx
