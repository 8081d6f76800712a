"""Text patterns of stars, numbers and letters.

Each function returns the whole pattern as a string. Every row ends with a
newline, and the spacing, trailing spaces included, is kept exactly as it is
printed. A size below one gives an empty pattern.
"""

from __future__ import annotations

from collections.abc import Iterable

# Each row of the number grid starts this far past the row above it.
_ROW_STEP = 5


def _render(rows: Iterable[str]) -> str:
    return "".join(f"{row}\n" for row in rows)


def _stars(count: int) -> str:
    return "* " * count


def _cells(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


def _mirrored_row(n: int, i: int) -> str:
    return _stars(i) + "  " * (2 * (n - i)) + _stars(i)


def _letter(first: str, offset: int) -> str:
    return chr(ord(first) + offset)


def countdown_triangle(n: int) -> str:
    """Row i counts down from i to 1."""
    return _render(_cells(range(i, 0, -1)) for i in range(1, n + 1))


def number_grid(n: int) -> str:
    """An n-by-n grid of numbers, each row starting five past the last."""
    return _render(
        _cells(j + _ROW_STEP * (i - 1) for j in range(1, n + 1))
        for i in range(1, n + 1)
    )


def letter_triangle(n: int) -> str:
    """Row i repeats the i-th lower-case letter i times."""
    return _render(_cells(_letter("a", i - 1) * i) for i in range(1, n + 1))


def countdown_from_n(n: int) -> str:
    """Row i counts down i numbers starting from n."""
    return _render(_cells(range(n, n - i, -1)) for i in range(1, n + 1))


def butterfly(n: int) -> str:
    """Two star wings that meet in the middle row."""
    rows = [_mirrored_row(n, i) for i in range(1, n + 1)]
    rows += [_mirrored_row(n, i) for i in range(n - 1, 0, -1)]
    return _render(rows)


def inverted_pyramid(n: int) -> str:
    """A star pyramid standing on its point."""
    return _render(
        "  " * i + _stars(2 * (n - i) + 1) for i in range(1, n + 1)
    )


def palindrome_triangle(n: int) -> str:
    """Centred rows counting up to i and back down to 1."""
    return _render(
        "  " * (n - i) + _cells(range(1, i + 1)) + _cells(range(i - 1, 0, -1))
        for i in range(1, n + 1)
    )


def right_countdown_triangle(n: int) -> str:
    """Right-aligned rows counting down from i to 1."""
    return _render(
        "  " * (n - i) + _cells(range(i, 0, -1)) for i in range(1, n + 1)
    )


def right_repeat_triangle(n: int) -> str:
    """Right-aligned rows repeating the number i, i times."""
    return _render("  " * (n - i) + _cells([i] * i) for i in range(1, n + 1))


def right_letter_triangle(n: int) -> str:
    """Right-aligned rows repeating the i-th capital letter i times."""
    return _render(
        "  " * (n - i) + _cells(_letter("A", i - 1) * i) for i in range(1, n + 1)
    )


def star_arrow(n: int) -> str:
    """A right-aligned star triangle followed by its mirror image."""
    sizes = [*range(1, n + 1), *range(n, 0, -1)]
    return _render(" " * (n - i) + _stars(i) for i in sizes)


def pyramid(n: int) -> str:
    """A centred star pyramid with 2i-1 stars in row i."""
    return _render("  " * (n - i) + _stars(2 * i - 1) for i in range(1, n + 1))


def star_table(n: int) -> str:
    """Two star wings that part in the middle, an inside-out butterfly."""
    sizes = [*range(n, 0, -1), *range(1, n + 1)]
    return _render(_mirrored_row(n, i) for i in sizes)


def inverted_triangle(n: int) -> str:
    """A left-aligned star triangle, widest row first."""
    return _render(_stars(i) for i in range(n, 0, -1))