"""Top-K selection using bounded heaps and quickselect partitioning."""

from __future__ import annotations

import heapq
from collections.abc import Callable, MutableSequence, Sequence
from typing import Any

from .sorting import _partition


def digit_sum(num: int) -> int:
    """Sum of the decimal digits of a positive integer; 0 for num <= 0."""
    total = 0
    while num > 0:
        num, digit = divmod(num, 10)
        total += digit
    return total


def _check_k(data: Sequence[Any], k: int) -> None:
    if not 0 <= k <= len(data):
        raise ValueError(f"k must be between 0 and {len(data)}, got {k}")


def smallest_k(data: Sequence[int], k: int) -> list[int]:
    """Return the k smallest values, largest first, via a bounded max-heap."""
    _check_k(data, k)
    heap = [-value for value in data[:k]]
    heapq.heapify(heap)
    for value in data[k:]:
        if heap and -heap[0] > value:
            heapq.heapreplace(heap, -value)
    return sorted((-value for value in heap), reverse=True)


def largest_k(data: Sequence[int], k: int) -> list[int]:
    """Return the k largest values, smallest first, via a bounded min-heap."""
    _check_k(data, k)
    heap = list(data[:k])
    heapq.heapify(heap)
    for value in data[k:]:
        if heap and heap[0] < value:
            heapq.heapreplace(heap, value)
    return sorted(heap)


def largest_k_by(data: Sequence[Any], k: int, key: Callable[[Any], Any]) -> list[Any]:
    """Return the k values with the largest key, in ascending key order."""
    _check_k(data, k)
    heap = [(key(value), index, value) for index, value in enumerate(data[:k])]
    heapq.heapify(heap)
    for index, value in enumerate(data[k:], start=k):
        weight = key(value)
        if heap and heap[0][0] < weight:
            heapq.heapreplace(heap, (weight, index, value))
    return [value for _, _, value in sorted(heap)]


def quickselect_smallest(data: MutableSequence[Any], k: int) -> list[Any]:
    """Partition data in place so its first k items are the k smallest.

    Returns those k items, in no particular order.
    """
    _check_k(data, k)
    begin, end = 0, len(data) - 1
    while begin <= end:
        index = _partition(data, begin, end)
        if index == k - 1:
            break
        if index < k - 1:
            begin = index + 1
        else:
            end = index - 1
    return list(data[:k])