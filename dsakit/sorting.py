"""Recursive merge sort and quick sort on lists."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list:
    """Return a new list with the items in ascending order, using merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    split = (len(values) + 1) // 2
    return _merge(merge_sort(values[:split]), merge_sort(values[split:]))


def partition(items: MutableSequence, start: int, end: int) -> int:
    """Partition items[start:end + 1] in place around items[start].

    Returns the final index of the pivot: everything before it is no greater
    than the pivot and everything after it is greater.
    """
    pivot = items[start]
    count = sum(1 for value in items[start + 1 : end + 1] if value <= pivot)
    pivot_index = start + count
    items[pivot_index], items[start] = items[start], items[pivot_index]

    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(items: Iterable[Any]) -> list:
    """Return a new list with the items in ascending order, using quick sort."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot_index = partition(result, start, end)
        pending.append((pivot_index + 1, end))
        pending.append((start, pivot_index - 1))
    return result