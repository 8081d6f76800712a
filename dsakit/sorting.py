"""Classic comparison sorts.

Each function returns a new sorted list and leaves its input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by bubbling larger items to the end; stop early once sorted."""
    items = list(values)
    for last in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(last):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort ascending by settling the smallest remaining item at each slot."""
    items = list(values)
    for i in range(len(items) - 1):
        for j in range(i + 1, len(items)):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
    return items


def selection_sort_descending(values: Iterable[Any]) -> list[Any]:
    """Sort descending by settling the largest remaining item at each slot."""
    items = list(values)
    for i in range(len(items) - 1):
        for j in range(len(items) - 1, i, -1):
            if items[j] > items[i]:
                items[i], items[j] = items[j], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by sliding each item left into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort stably by splitting in halves and merging the sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _quick(items: list[Any], start: int, end: int) -> None:
    while start < end:
        pivot = items[end]
        pos = start
        for i in range(start, end + 1):
            if items[i] <= pivot:
                items[i], items[pos] = items[pos], items[i]
                pos += 1
        # The pivot now sits at pos - 1; recurse into the smaller side.
        if pos - 2 - start < end - pos:
            _quick(items, start, pos - 2)
            start = pos
        else:
            _quick(items, pos, end)
            end = pos - 2


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the last item of each range."""
    items = list(values)
    _quick(items, 0, len(items) - 1)
    return items