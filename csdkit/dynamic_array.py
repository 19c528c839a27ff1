"""A growable array that tracks its own capacity."""

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 2


class DynamicArray:
    """Array with explicit capacity that doubles when full."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._items: list[Any] = []
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Number of items that fit before the array has to grow."""
        return self._capacity

    def set_capacity(self, new_capacity: int) -> int:
        """Change the capacity; it may not drop below the current size."""
        if new_capacity < len(self._items):
            raise ValueError("capacity cannot be smaller than the size")
        self._capacity = new_capacity
        return new_capacity

    def _grow_if_full(self) -> None:
        if len(self._items) >= self._capacity:
            self.set_capacity(max(self._capacity * 2, 1))

    def append(self, item: Any) -> int:
        """Add ``item`` at the end and return its index."""
        self._grow_if_full()
        self._items.append(item)
        return len(self._items) - 1

    def insert(self, index: int, item: Any) -> int:
        """Insert ``item`` before ``index`` and return the index."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert index out of range: {index}")
        self._grow_if_full()
        self._items.insert(index, item)
        return index

    def delete(self, index: int) -> Any:
        """Remove the item at ``index`` and return it."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"delete index out of range: {index}")
        return self._items.pop(index)

    def trim_to_size(self) -> None:
        """Shrink the capacity to the size, or to the default when empty."""
        self.set_capacity(len(self._items) or DEFAULT_CAPACITY)

    def clear(self) -> None:
        """Remove all items, keeping the capacity."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r}, capacity={self._capacity})"