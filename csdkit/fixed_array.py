"""An array whose length is fixed when it is created."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Any

_FILL = 0


class FixedArray:
    """A fixed-length array; unused slots start as zero."""

    def __init__(self, size: int, items: Iterable[Any] = ()) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        values = list(items)
        if len(values) > size:
            raise IndexError("Too many initializers")
        self._items = values + [_FILL] * (size - len(values))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, pos: int) -> Any:
        return self._items[operator.index(pos)]

    def __setitem__(self, pos: int, value: Any) -> None:
        self._items[operator.index(pos)] = value

    def _check(self, pos: int) -> int:
        pos = operator.index(pos)
        if not 0 <= pos < len(self._items):
            raise IndexError(f"pos out range:{pos}")
        return pos

    def at(self, pos: int) -> Any:
        """Return the item at ``pos``, which must be in ``[0, len)``."""
        return self._items[self._check(pos)]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"FixedArray({len(self._items)}, {self._items!r})"