"""Recursive search and counting problems: subsets, permutations, mazes and more."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

_MAZE_STEPS = (("U", -1, 0), ("D", 1, 0), ("L", 0, -1), ("R", 0, 1))


@dataclass(frozen=True)
class Move:
    """One move of a disk between two rods."""

    disk: int
    source: int
    target: int

    def __str__(self) -> str:
        return f"move disk {self.disk} from rod {self.source} to rod {self.target}"


def count_ordered_ways(values: Sequence[int], target: int) -> int:
    """Count the ordered sequences of ``values`` (with reuse) that sum to ``target``."""
    options = tuple(values)
    if any(value <= 0 for value in options):
        raise ValueError("values must be positive")
    if target < 0:
        return 0
    ways = [1] + [0] * target
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - value] for value in options if value <= total)
    return ways[target]


def _check_circle(n: int, k: int) -> None:
    if n < 1:
        raise ValueError("there must be at least one person")
    if k < 1:
        raise ValueError("the step must be at least 1")


def josephus(n: int, k: int) -> int:
    """Return the 0-based position of the survivor when every k-th person goes."""
    _check_circle(n, k)
    survivor = 0
    for size in range(2, n + 1):
        survivor = (survivor + k) % size
    return survivor


def josephus_simulated(n: int, k: int) -> int:
    """Like :func:`josephus`, but found by playing out the eliminations."""
    _check_circle(n, k)
    people = list(range(n))
    index = 0
    while len(people) > 1:
        index = (index + k - 1) % len(people)
        people.pop(index)
        index %= len(people)
    return people[0]


def prefix_binary_strings(n: int) -> list[str]:
    """Return the n-bit strings in which no prefix has more 0s than 1s."""
    if n < 0:
        raise ValueError("length must not be negative")

    def extend(prefix: str, zeros: int, ones: int) -> Iterator[str]:
        if len(prefix) == n:
            yield prefix
            return
        yield from extend(prefix + "1", zeros, ones + 1)
        if zeros < ones:
            yield from extend(prefix + "0", zeros + 1, ones)

    return list(extend("", 0, 0))


def count_subsets_with_sum(values: Sequence[int], target: int) -> int:
    """Count the subsets of ``values`` (by position) whose sum is ``target``."""
    items = tuple(values)

    def count(index: int, remaining: int) -> int:
        if index == len(items):
            return int(remaining == 0)
        return count(index + 1, remaining) + count(index + 1, remaining - items[index])

    return count(0, target)


def balanced_parentheses(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses, in order."""
    if n < 0:
        raise ValueError("pair count must not be negative")

    def build(text: str, opened: int, closed: int) -> Iterator[str]:
        if opened + closed == 2 * n:
            yield text
            return
        if opened < n:
            yield from build(text + "(", opened + 1, closed)
        if closed < opened:
            yield from build(text + ")", opened, closed + 1)

    return list(build("", 0, 0))


def _swap_permutations(items: list[Any], index: int, distinct: bool) -> Iterator[list[Any]]:
    if index == len(items):
        yield list(items)
        return
    seen: set[Any] = set()
    for i in range(index, len(items)):
        if distinct:
            if items[i] in seen:
                continue
            seen.add(items[i])
        items[index], items[i] = items[i], items[index]
        yield from _swap_permutations(items, index + 1, distinct)
        items[index], items[i] = items[i], items[index]


def permutations(values: Sequence[Any]) -> list[list[Any]]:
    """Return every arrangement of ``values``, built by swapping in place."""
    return list(_swap_permutations(list(values), 0, distinct=False))


def unique_permutations(values: Sequence[Any]) -> list[list[Any]]:
    """Return every distinct arrangement of ``values``, equal values merged."""
    return list(_swap_permutations(list(values), 0, distinct=True))


def maze_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return, sorted, every path of U/D/L/R steps from the top-left to the
    bottom-right corner of a square maze, moving only over non-zero cells and
    never visiting a cell twice."""
    n = len(maze)
    if any(len(row) != n for row in maze):
        raise ValueError("maze must be square")
    if n == 0 or not maze[0][0] or not maze[n - 1][n - 1]:
        return []
    visited: set[tuple[int, int]] = set()

    def walk(row: int, col: int, path: str) -> Iterator[str]:
        if row == n - 1 and col == n - 1:
            yield path
            return
        visited.add((row, col))
        for letter, d_row, d_col in _MAZE_STEPS:
            r, c = row + d_row, col + d_col
            if 0 <= r < n and 0 <= c < n and maze[r][c] and (r, c) not in visited:
                yield from walk(r, c, path + letter)
        visited.discard((row, col))

    return sorted(walk(0, 0, ""))


def _subsequences(items: Sequence[Any], index: int, chosen: list[Any]) -> Iterator[list[Any]]:
    if index == len(items):
        yield list(chosen)
        return
    yield from _subsequences(items, index + 1, chosen)
    chosen.append(items[index])
    yield from _subsequences(items, index + 1, chosen)
    chosen.pop()


def subsequences(values: Sequence[Any]) -> list[list[Any]]:
    """Return every subsequence, those leaving out earlier items first."""
    return list(_subsequences(list(values), 0, []))


def string_subsequences(text: str) -> list[str]:
    """Return every subsequence of ``text`` as a string, in the same order."""
    return ["".join(chars) for chars in _subsequences(text, 0, [])]


def subsequence_sums(values: Sequence[int]) -> list[tuple[int, list[int]]]:
    """Pair every subsequence with its sum."""
    return [(sum(chosen), chosen) for chosen in subsequences(values)]


def has_subset_sum(values: Sequence[int], target: int) -> bool:
    """Tell whether some subset of ``values`` sums to ``target``.

    The search gives up on a branch as soon as the remainder drops below
    zero, so the values are taken to be non-negative.
    """
    items = tuple(values)

    def search(index: int, remaining: int) -> bool:
        if remaining == 0:
            return True
        if remaining < 0 or index == len(items):
            return False
        return search(index + 1, remaining) or search(index + 1, remaining - items[index])

    return search(0, target)


def tower_of_hanoi(n: int, source: int = 1, target: int = 3, auxiliary: int = 2) -> list[Move]:
    """Return the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n < 0:
        raise ValueError("disk count must not be negative")

    def solve(disks: int, start: int, spare: int, goal: int) -> Iterator[Move]:
        if disks == 0:
            return
        yield from solve(disks - 1, start, goal, spare)
        yield Move(disks, start, goal)
        yield from solve(disks - 1, spare, start, goal)

    return list(solve(n, source, auxiliary, target))