"""Pair, triplet and counting problems on integer arrays."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

# A packed count lives in the last two decimal digits.
_COUNT_BASE = 100


def three_sum(values: Sequence[int], target: int) -> tuple[int, int, int] | None:
    """Return three values, in ascending order, that add up to ``target``.

    Return ``None`` when no such triplet exists.
    """
    items = sorted(values)
    n = len(items)
    for i in range(n - 2):
        rest = target - items[i]
        start, end = i + 1, n - 1
        while start < end:
            pair = items[start] + items[end]
            if pair == rest:
                return items[i], items[start], items[end]
            if pair > rest:
                end -= 1
            else:
                start += 1
    return None


def four_sum(values: Sequence[int], target: int) -> tuple[int, int, int, int] | None:
    """Return four values, in ascending order, that add up to ``target``.

    Return ``None`` when no such quadruplet exists.
    """
    items = sorted(values)
    n = len(items)
    for i in range(n - 3):
        rest_i = target - items[i]
        for j in range(i + 1, n - 2):
            rest = rest_i - items[j]
            start, end = j + 1, n - 1
            while start < end:
                pair = items[start] + items[end]
                if pair == rest:
                    return items[i], items[j], items[start], items[end]
                if pair > rest:
                    end -= 1
                else:
                    start += 1
    return None


def two_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find two values adding up to ``target``.

    The values are sorted first; the indices returned point into that sorted
    order. Return ``None`` when no pair matches.
    """
    items = sorted(values)
    start, end = 0, len(items) - 1
    while start < end:
        pair = items[start] + items[end]
        if pair == target:
            return start, end
        if pair > target:
            end -= 1
        else:
            start += 1
    return None


def two_difference(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find two values whose difference is ``abs(target)``.

    Indices point into the sorted values, the smaller value first.
    """
    items = sorted(values)
    goal = abs(target)
    start, end = 0, 1
    while end < len(items):
        difference = items[end] - items[start]
        if difference == goal:
            return start, end
        if difference < goal:
            end += 1
        else:
            start += 1
        if start == end:
            end += 1
    return None


def _truncated_quotient(dividend: int, divisor: int) -> int:
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def two_quotient(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find two values whose whole-number quotient is ``abs(target)``.

    The quotient truncates towards zero. Indices point into the sorted
    values, the divisor first. A zero divisor raises ``ZeroDivisionError``.
    """
    items = sorted(values)
    goal = abs(target)
    start, end = 0, 1
    while end < len(items):
        quotient = _truncated_quotient(items[end], items[start])
        if quotient == goal:
            return start, end
        if quotient < goal:
            end += 1
        else:
            start += 1
        if start == end:
            end += 1
    return None


def two_product(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find two values of an ascending list whose product is ``target``.

    Return their indices, or ``None``.
    """
    start, end = 0, len(values) - 1
    while start < end:
        product = values[start] * values[end]
        if product == target:
            return start, end
        if product > target:
            end -= 1
        else:
            start += 1
    return None


def pack_count(number: int, count: int) -> int:
    """Store a number and a count below 100 in one integer."""
    if not 0 <= count < _COUNT_BASE:
        raise ValueError(f"count must be between 0 and {_COUNT_BASE - 1}")
    if number < 0:
        raise ValueError("number must not be negative")
    return number * _COUNT_BASE + count


def unpack_count(packed: int) -> tuple[int, int]:
    """Split a value made by :func:`pack_count` into number and count."""
    if packed < 0:
        raise ValueError("packed value must not be negative")
    number, count = divmod(packed, _COUNT_BASE)
    return number, count


def majority_element(values: Sequence[int]) -> int | None:
    """Return the value held by more than half the items, or ``None``."""
    count = 0
    candidate = None
    for value in values:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if candidate is not None and sum(1 for v in values if v == candidate) > len(values) // 2:
        return candidate
    return None


def _counts_in_range(values: Sequence[int]) -> Counter[int]:
    n = len(values)
    if any(not 1 <= value <= n for value in values):
        raise ValueError(f"values must lie between 1 and {n}")
    return Counter(values)


def missing_and_repeated(values: Sequence[int]) -> tuple[list[int], list[int]]:
    """For values drawn from 1..n, return the numbers that never occur and
    those that occur exactly twice, each ascending."""
    counts = _counts_in_range(values)
    numbers = range(1, len(values) + 1)
    missing = [number for number in numbers if counts[number] == 0]
    repeated = [number for number in numbers if counts[number] == 2]
    return missing, repeated


def occurrence_counts(values: Sequence[int]) -> dict[int, int]:
    """For values drawn from 1..n, map every number of 1..n to how often it occurs."""
    counts = _counts_in_range(values)
    return {number: counts[number] for number in range(1, len(values) + 1)}


def segregate_binary(values: Sequence[int]) -> list[int]:
    """Return the values with every 0 moved to the front by swapping from the ends."""
    items = list(values)
    start, end = 0, len(items) - 1
    while start < end:
        if items[start] == 0:
            start += 1
        elif items[end] == 0:
            items[start], items[end] = items[end], items[start]
            start += 1
            end -= 1
        else:
            end -= 1
    return items