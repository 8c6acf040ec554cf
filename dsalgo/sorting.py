"""Classic comparison and distribution sorts.

Every function sorts the given mutable sequence in place and returns it,
so calls can be chained or used as expressions.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, TypeVar

Seq = TypeVar("Seq", bound=MutableSequence[Any])


def _swap(items: MutableSequence[Any], a: int, b: int) -> None:
    items[a], items[b] = items[b], items[a]


def bubble_sort(items: Seq) -> Seq:
    """Repeatedly bubble the largest remaining element to the end."""
    n = len(items)
    for done in range(n):
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                _swap(items, j, j + 1)
    return items


def _sift_down(items: MutableSequence[Any], pos: int, count: int) -> None:
    value = items[pos]
    boundary = count // 2
    while pos < boundary:
        child = 2 * pos + 1
        if child + 1 < count and items[child + 1] > items[child]:
            child += 1
        if items[child] < value:
            break
        items[pos] = items[child]
        pos = child
    items[pos] = value


def heap_sort(items: Seq) -> Seq:
    """Build a max-heap in place, then repeatedly move its root to the end."""
    size = len(items)
    for pos in range((size - 2) // 2, -1, -1):
        _sift_down(items, pos, size)
    for end in range(size - 1, 0, -1):
        _swap(items, 0, end)
        _sift_down(items, 0, end)
    return items


def insertion_sort(items: Seq) -> Seq:
    """Insert each element into the sorted prefix before it."""
    for i in range(1, len(items)):
        value = items[i]
        j = i - 1
        while j >= 0 and items[j] > value:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = value
    return items


def _merged(values: list[Any]) -> list[Any]:
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    left = _merged(values[:mid])
    right = _merged(values[mid:])
    result: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(items: Seq) -> Seq:
    """Split in halves, sort each recursively and merge them."""
    items[:] = _merged(list(items))
    return items


def _partition(items: MutableSequence[Any], left: int, right: int) -> int:
    pivot = items[left]
    while left < right:
        while left < right and items[right] >= pivot:
            right -= 1
        items[left] = items[right]
        while left < right and items[left] <= pivot:
            left += 1
        items[right] = items[left]
    items[left] = pivot
    return left


def _quick_sort(items: MutableSequence[Any], left: int, right: int) -> None:
    # Recurse into the smaller side only, so depth stays logarithmic.
    while left < right:
        mid = _partition(items, left, right)
        if mid - left < right - mid:
            _quick_sort(items, left, mid - 1)
            left = mid + 1
        else:
            _quick_sort(items, mid + 1, right)
            right = mid - 1


def quick_sort(items: Seq) -> Seq:
    """Partition around the first element and sort both sides."""
    _quick_sort(items, 0, len(items) - 1)
    return items


def radix_sort(items: Seq) -> Seq:
    """Least-significant-digit radix sort for non-negative integers.

    Raises ValueError if any value is negative.
    """
    if not items:
        return items
    if min(items) < 0:
        raise ValueError("radix_sort only handles non-negative integers")
    passes = len(str(max(items)))
    divisor = 1
    for _ in range(passes):
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[value // divisor % 10].append(value)
        items[:] = [value for bucket in buckets for value in bucket]
        divisor *= 10
    return items


def selection_sort(items: Seq) -> Seq:
    """Move the smallest remaining element to the front on each pass."""
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        _swap(items, smallest, i)
    return items


def shell_sort(items: Seq) -> Seq:
    """Gapped insertion sort with gaps halving from len // 2 down to 1."""
    gap = len(items) // 2
    while gap > 0:
        for i in range(gap, len(items)):
            value = items[i]
            j = i - gap
            while j >= 0 and items[j] > value:
                items[j + gap] = items[j]
                j -= gap
            items[j + gap] = value
        gap //= 2
    return items