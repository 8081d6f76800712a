"""Array problems: subarrays, prefix sums, matrix rotation and the like."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate
from typing import Any

_EMPTY_SET = "Φ"


def subarrays(values: Sequence[Any]) -> list[list[Any]]:
    """Return every contiguous subarray, by start index and then by length."""
    items = list(values)
    return [
        items[start:stop]
        for start in range(len(items))
        for stop in range(start + 1, len(items) + 1)
    ]


def can_split_equal(values: Sequence[int]) -> bool:
    """Tell whether the array splits into two non-empty parts of equal sum."""
    total = sum(values)
    prefixes = list(accumulate(values))[:-1]
    return any(2 * prefix == total for prefix in prefixes)


def _require_items(values: Sequence[Any], least: int = 1) -> list[Any]:
    items = list(values)
    if len(items) < least:
        raise ValueError(f"need at least {least} value(s)")
    return items


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    items = _require_items(values)
    best = items[0]
    running = 0
    for value in items:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def max_subarray_product(values: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous subarray."""
    items = _require_items(values)
    best = high = low = items[0]
    for value in items[1:]:
        if value < 0:
            high, low = low, high
        high = max(value, high * value)
        low = min(value, low * value)
        best = max(best, high)
    return best


def max_difference(values: Sequence[int]) -> int:
    """Return the largest ``values[j] - values[i]`` with ``j > i``."""
    items = _require_items(values, least=2)
    best_later = items[-1]
    best = items[-1] - items[-2]
    for value in reversed(items[:-1]):
        best = max(best, best_later - value)
        best_later = max(best_later, value)
    return best


def power_set(values: Sequence[Any]) -> list[list[Any]]:
    """Return every subset, ordered by the bit mask that selects it."""
    items = list(values)
    return [
        [item for bit, item in enumerate(items) if mask >> bit & 1]
        for mask in range(1 << len(items))
    ]


def format_subset(subset: Sequence[Any]) -> str:
    """Render a subset as ``{a,b}``, the empty set as ``{Φ}``."""
    if not subset:
        return "{" + _EMPTY_SET + "}"
    return "{" + ",".join(str(item) for item in subset) + "}"


def rotate_90(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return the matrix turned a quarter turn clockwise."""
    return [list(row) for row in zip(*reversed(matrix))]


def rotate_180(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return the matrix turned half a turn."""
    return [list(reversed(row)) for row in reversed(matrix)]


def rotate_270(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return the matrix turned a quarter turn anticlockwise."""
    return [list(row) for row in reversed(list(zip(*matrix)))]


def rotate_times(matrix: Sequence[Sequence[Any]], k: int) -> list[list[Any]]:
    """Return the matrix turned ``k`` quarter turns clockwise."""
    result = [list(row) for row in matrix]
    for _ in range(k % 4):
        result = rotate_90(result)
    return result


def prefix_sums(values: Sequence[int]) -> list[int]:
    """Return the running sums from the front."""
    return list(accumulate(values))


def suffix_sums(values: Sequence[int]) -> list[int]:
    """Return the running sums from the back, aligned with ``values``."""
    return list(accumulate(reversed(values)))[::-1]


def trapped_water(heights: Sequence[int]) -> int:
    """Return how much rain water the bars of ``heights`` hold."""
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    water = 0
    while left <= right:
        left_max = max(left_max, heights[left])
        right_max = max(right_max, heights[right])
        if left_max < right_max:
            water += left_max - heights[left]
            left += 1
        else:
            water += right_max - heights[right]
            right -= 1
    return water