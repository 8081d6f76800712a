"""Linear and binary searches over lists, rotated lists and matrices.

Searches that look for a value return its index, or ``-1`` when it is absent.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from typing import Any

NOT_FOUND = -1


def linear_search(values: Sequence[Any], target: Any) -> int:
    """Return the index of the first item equal to ``target``, or -1."""
    return next(
        (index for index, value in enumerate(values) if value == target), NOT_FOUND
    )


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Find ``target`` in an ascending list; return its index or -1."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            start = mid + 1
        else:
            end = mid - 1
    return NOT_FOUND


def binary_search_descending(values: Sequence[Any], target: Any) -> int:
    """Find ``target`` in a descending list; return its index or -1."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            end = mid - 1
        else:
            start = mid + 1
    return NOT_FOUND


def _boundary(values: Sequence[Any], target: Any, *, leftmost: bool) -> int:
    start, end = 0, len(values) - 1
    found = NOT_FOUND
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == target:
            found = mid
            if leftmost:
                end = mid - 1
            else:
                start = mid + 1
        elif values[mid] < target:
            start = mid + 1
        else:
            end = mid - 1
    return found


def first_last_index(values: Sequence[Any], target: Any) -> tuple[int, int]:
    """Return the first and last index of ``target`` in an ascending list.

    Both are -1 when the value does not occur.
    """
    return (
        _boundary(values, target, leftmost=True),
        _boundary(values, target, leftmost=False),
    )


def count_occurrences(values: Sequence[Any], target: Any) -> int:
    """Count how often ``target`` occurs in an ascending list."""
    first, last = first_last_index(values, target)
    if first == NOT_FOUND:
        return 0
    return last - first + 1


def insert_position(values: Sequence[Any], target: Any) -> int:
    """Return where ``target`` sits, or would be inserted, in an ascending list."""
    return bisect_left(values, target)


def kth_missing(values: Sequence[int], k: int) -> int:
    """Return the k-th positive integer missing from a strictly ascending list
    of positive integers."""
    if k < 1:
        raise ValueError("k must be at least 1")
    start, end = 0, len(values) - 1
    answer = len(values)
    while start <= end:
        mid = (start + end) // 2
        if values[mid] - mid - 1 >= k:
            answer = mid
            end = mid - 1
        else:
            start = mid + 1
    return answer + k


def peak_index(values: Sequence[Any]) -> int:
    """Return the index of an item no smaller than its neighbours."""
    if not values:
        raise ValueError("no peak in an empty list")
    start, end = 0, len(values) - 1
    while start < end:
        mid = (start + end) // 2
        if values[mid] < values[mid + 1]:
            start = mid + 1
        else:
            end = mid
    return start


def search_rotated(values: Sequence[Any], target: Any) -> int:
    """Find ``target`` in a rotated ascending list of distinct items."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == target:
            return mid
        if values[start] <= values[mid]:
            if values[start] <= target < values[mid]:
                end = mid - 1
            else:
                start = mid + 1
        elif values[mid] < target <= values[end]:
            start = mid + 1
        else:
            end = mid - 1
    return NOT_FOUND


def rotated_minimum(values: Sequence[Any]) -> Any:
    """Return the smallest item of a rotated ascending list of distinct items."""
    if not values:
        raise ValueError("no minimum of an empty list")
    first = values[0]
    answer = first
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] >= first:
            start = mid + 1
        else:
            answer = values[mid]
            end = mid - 1
    return answer


def integer_sqrt(n: int) -> int:
    """Return the largest integer whose square does not exceed ``n``."""
    if n < 0:
        raise ValueError("square root of a negative number")
    if n < 2:
        return n
    start, end = 1, n // 2
    answer = 1
    while start <= end:
        mid = (start + end) // 2
        if mid * mid <= n:
            answer = mid
            start = mid + 1
        else:
            end = mid - 1
    return answer


def _search_flat(
    matrix: Sequence[Sequence[Any]], target: Any, *, descending: bool
) -> tuple[int, int] | None:
    if not matrix or not matrix[0]:
        return None
    cols = len(matrix[0])
    start, end = 0, len(matrix) * cols - 1
    while start <= end:
        mid = (start + end) // 2
        row, col = divmod(mid, cols)
        value = matrix[row][col]
        if value == target:
            return row, col
        if (value < target) != descending:
            start = mid + 1
        else:
            end = mid - 1
    return None


def search_matrix(
    matrix: Sequence[Sequence[Any]], target: Any
) -> tuple[int, int] | None:
    """Find ``target`` in a matrix ascending in row-major order.

    Return its ``(row, col)`` or ``None``.
    """
    return _search_flat(matrix, target, descending=False)


def search_matrix_descending(
    matrix: Sequence[Sequence[Any]], target: Any
) -> tuple[int, int] | None:
    """Find ``target`` in a matrix descending in row-major order.

    Return its ``(row, col)`` or ``None``.
    """
    return _search_flat(matrix, target, descending=True)