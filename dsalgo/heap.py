"""Binary heap ordered by a configurable comparison."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any

Compare = Callable[[Any, Any], bool]


class Heap:
    """Array-backed binary heap.

    ``compare(a, b)`` returns True when ``a`` belongs nearer the top than
    ``b``. The default, ``operator.gt``, gives a max-heap.
    """

    def __init__(self, compare: Compare = operator.gt) -> None:
        self._compare = compare
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Add value and restore the heap order."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1, value)

    def pop(self) -> Any:
        """Remove and return the top element.

        Raises IndexError when the heap is empty.
        """
        if not self._items:
            raise IndexError("Heap is empty, can't pop anymore")
        result = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return result

    def top(self) -> Any:
        """Return the top element without removing it.

        Raises IndexError when the heap is empty.
        """
        if not self._items:
            raise IndexError("Heap is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the elements in their internal array order."""
        return iter(list(self._items))

    def _sift_up(self, pos: int, value: Any) -> None:
        items = self._items
        while pos > 0:
            parent = (pos - 1) // 2
            if not self._compare(value, items[parent]):
                break
            items[pos] = items[parent]
            pos = parent
        items[pos] = value

    def _sift_down(self, pos: int) -> None:
        items = self._items
        size = len(items)
        value = items[pos]
        while pos < size // 2:
            child = 2 * pos + 1
            if child + 1 < size and self._compare(items[child + 1], items[child]):
                child += 1
            if self._compare(value, items[child]):
                break
            items[pos] = items[child]
            pos = child
        items[pos] = value