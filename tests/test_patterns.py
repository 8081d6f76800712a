import pytest

from dsakit import patterns


def _render_all(n):
    return [
        patterns.countdown_triangle(n),
        patterns.number_grid(n),
        patterns.letter_triangle(n),
        patterns.countdown_from_n(n),
        patterns.butterfly(n),
        patterns.inverted_pyramid(n),
        patterns.palindrome_triangle(n),
        patterns.right_countdown_triangle(n),
        patterns.right_repeat_triangle(n),
        patterns.right_letter_triangle(n),
        patterns.star_arrow(n),
        patterns.pyramid(n),
        patterns.star_table(n),
        patterns.inverted_triangle(n),
    ]


def test_size_zero_is_empty():
    assert patterns.countdown_triangle(0) == ""
    assert patterns.number_grid(0) == ""
    assert patterns.letter_triangle(0) == ""
    assert patterns.countdown_from_n(0) == ""
    assert patterns.butterfly(0) == ""
    assert patterns.inverted_pyramid(0) == ""
    assert patterns.palindrome_triangle(0) == ""
    assert patterns.right_countdown_triangle(0) == ""
    assert patterns.right_repeat_triangle(0) == ""
    assert patterns.right_letter_triangle(0) == ""
    assert patterns.star_arrow(0) == ""
    assert patterns.pyramid(0) == ""
    assert patterns.star_table(0) == ""
    assert patterns.inverted_triangle(0) == ""


def test_every_row_ends_with_newline():
    texts = [
        patterns.countdown_triangle(4),
        patterns.number_grid(4),
        patterns.letter_triangle(4),
        patterns.countdown_from_n(4),
        patterns.butterfly(4),
        patterns.inverted_pyramid(4),
        patterns.palindrome_triangle(4),
        patterns.right_countdown_triangle(4),
        patterns.right_repeat_triangle(4),
        patterns.right_letter_triangle(4),
        patterns.star_arrow(4),
        patterns.pyramid(4),
        patterns.star_table(4),
        patterns.inverted_triangle(4),
    ]
    assert len(texts) == 14
    for text in texts:
        assert text.endswith("\n")
        assert text.count("\n") == len(text.splitlines())


def test_render_all_helper_matches_sizes():
    assert all(text == "" for text in _render_all(0))


def test_countdown_triangle_exact():
    assert patterns.countdown_triangle(3) == "1 \n2 1 \n3 2 1 \n"


def test_countdown_triangle_rows_count_down():
    lines = patterns.countdown_triangle(6).splitlines()
    assert len(lines) == 6
    for i, line in enumerate(lines, start=1):
        numbers = [int(token) for token in line.split()]
        assert numbers[0] == i
        assert numbers[-1] == 1
        assert len(numbers) == i


def test_number_grid_five_counts_through():
    lines = patterns.number_grid(5).splitlines()
    numbers = [int(token) for line in lines for token in line.split()]
    assert numbers == list(range(1, 26))


def test_number_grid_rows_step_by_five():
    lines = patterns.number_grid(3).splitlines()
    firsts = [int(line.split()[0]) for line in lines]
    assert firsts[1] - firsts[0] == 5
    assert firsts[2] - firsts[1] == 5


def test_letter_triangle_exact():
    assert patterns.letter_triangle(2) == "a \nb b \n"


def test_letter_triangle_rows():
    lines = patterns.letter_triangle(5).splitlines()
    for i, line in enumerate(lines, start=1):
        tokens = line.split()
        assert len(tokens) == i
        assert set(tokens) == {"abcde"[i - 1]}


def test_countdown_from_n_rows():
    n = 5
    lines = patterns.countdown_from_n(n).splitlines()
    assert len(lines) == n
    for i, line in enumerate(lines, start=1):
        numbers = [int(token) for token in line.split()]
        assert numbers[0] == n
        assert len(numbers) == i
        assert all(a - b == 1 for a, b in zip(numbers, numbers[1:]))


def test_butterfly_shape():
    n = 4
    lines = patterns.butterfly(n).splitlines()
    assert len(lines) == 2 * n - 1
    assert lines == lines[::-1]
    assert {len(line) for line in lines} == {4 * n}
    assert lines[n - 1].count("*") == 2 * n


def test_inverted_pyramid_shape():
    n = 4
    lines = patterns.inverted_pyramid(n).splitlines()
    for i, line in enumerate(lines, start=1):
        assert line.count("*") == 2 * (n - i) + 1
        assert len(line) - len(line.lstrip(" ")) == 2 * i


def test_palindrome_triangle_rows_read_both_ways():
    n = 5
    lines = patterns.palindrome_triangle(n).splitlines()
    for i, line in enumerate(lines, start=1):
        tokens = line.split()
        assert tokens == tokens[::-1]
        assert max(int(t) for t in tokens) == i
        assert len(line) - len(line.lstrip(" ")) == 2 * (n - i)


@pytest.mark.parametrize("n", [1, 3, 6])
def test_right_aligned_rows_share_width(n):
    for text in (
        patterns.right_countdown_triangle(n),
        patterns.right_repeat_triangle(n),
        patterns.right_letter_triangle(n),
    ):
        lines = text.splitlines()
        assert len(lines) == n
        assert {len(line) for line in lines} == {2 * n}


def test_right_countdown_triangle_tokens():
    lines = patterns.right_countdown_triangle(4).splitlines()
    for i, line in enumerate(lines, start=1):
        assert [int(t) for t in line.split()] == list(range(i, 0, -1))


def test_right_repeat_triangle_tokens():
    lines = patterns.right_repeat_triangle(4).splitlines()
    for i, line in enumerate(lines, start=1):
        assert line.split() == [str(i)] * i


def test_right_letter_triangle_letters():
    lines = patterns.right_letter_triangle(3).splitlines()
    assert [set(line.split()) for line in lines] == [{"A"}, {"B"}, {"C"}]


def test_star_arrow_is_mirrored():
    n = 3
    lines = patterns.star_arrow(n).splitlines()
    assert len(lines) == 2 * n
    assert lines == lines[::-1]
    assert lines[0].startswith(" " * (n - 1) + "*")


def test_pyramid_exact():
    assert patterns.pyramid(2) == "  * \n* * * \n"


def test_pyramid_star_counts_are_odd():
    lines = patterns.pyramid(5).splitlines()
    assert [line.count("*") for line in lines] == [2 * i - 1 for i in range(1, 6)]


def test_star_table_is_inside_out_butterfly():
    n = 4
    table = patterns.star_table(n).splitlines()
    wings = patterns.butterfly(n).splitlines()
    assert len(table) == 2 * n
    assert table == table[::-1]
    assert table[0] == wings[n - 1]
    assert table[n - 1] == wings[0]


def test_inverted_triangle_star_counts():
    lines = patterns.inverted_triangle(5).splitlines()
    assert [line.count("*") for line in lines] == [5, 4, 3, 2, 1]