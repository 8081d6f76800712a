"""Binary search on the answer: splitting work and spacing things out."""

from __future__ import annotations

from collections.abc import Sequence


def _parts_needed(items: Sequence[int], limit: int) -> int:
    parts = 1
    load = 0
    for item in items:
        load += item
        if load > limit:
            parts += 1
            load = item
    return parts


def _min_largest_part(items: Sequence[int], workers: int) -> int:
    if not items:
        raise ValueError("nothing to allocate")
    if workers < 1:
        raise ValueError("need at least one worker")
    start, end = max(items), sum(items)
    answer = end
    while start <= end:
        mid = (start + end) // 2
        if _parts_needed(items, mid) <= workers:
            answer = mid
            end = mid - 1
        else:
            start = mid + 1
    return answer


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum of pages any student reads when
    the books are handed out in order as contiguous runs.

    Every student must get at least one book.
    """
    if students > len(pages):
        raise ValueError("more students than books")
    return _min_largest_part(pages, students)


def painter_partition(boards: Sequence[int], painters: int) -> int:
    """Return the least time to paint the boards when each painter takes a
    contiguous run and a unit of length takes a unit of time."""
    return _min_largest_part(boards, painters)


def largest_min_distance(stalls: Sequence[int], cows: int) -> int:
    """Return the largest least distance between any two of ``cows`` cows
    placed in the given stall positions."""
    if cows < 2:
        raise ValueError("need at least two cows")
    if cows > len(stalls):
        raise ValueError("more cows than stalls")
    positions = sorted(stalls)
    start, end = 1, positions[-1] - positions[0]
    answer = 0
    while start <= end:
        mid = (start + end) // 2
        placed = 1
        last = positions[0]
        for position in positions:
            if last + mid <= position:
                placed += 1
                last = position
        if placed < cows:
            end = mid - 1
        else:
            answer = mid
            start = mid + 1
    return answer


def min_eating_speed(piles: Sequence[int], hours: int) -> int:
    """Return the slowest whole eating speed that finishes every pile within
    ``hours``, one pile at most per hour."""
    if not piles:
        raise ValueError("no piles")
    if hours < len(piles):
        raise ValueError("not enough hours for one pile per hour")
    start = max(1, sum(piles) // hours)
    end = max(piles)
    answer = end
    while start <= end:
        mid = (start + end) // 2
        needed = sum(-(-pile // mid) for pile in piles)
        if needed > hours:
            start = mid + 1
        else:
            answer = mid
            end = mid - 1
    return answer