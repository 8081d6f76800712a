import itertools

import pytest

from dsakit import recursion
from dsakit.recursion import Move


def test_count_ordered_ways_base_cases():
    assert recursion.count_ordered_ways([1, 2, 3], 0) == 1
    assert recursion.count_ordered_ways([1, 2, 3], -4) == 0
    assert recursion.count_ordered_ways([], 5) == 0


def test_count_ordered_ways_single_step_has_one_way():
    assert all(recursion.count_ordered_ways([1], t) == 1 for t in range(10))


def test_count_ordered_ways_follows_recurrence():
    ways = [recursion.count_ordered_ways([1, 2], t) for t in range(12)]
    assert all(ways[t] == ways[t - 1] + ways[t - 2] for t in range(2, 12))


def test_count_ordered_ways_rejects_non_positive():
    with pytest.raises(ValueError):
        recursion.count_ordered_ways([0, 1], 3)


@pytest.mark.parametrize("n", range(1, 12))
@pytest.mark.parametrize("k", range(1, 6))
def test_josephus_formula_matches_simulation(n, k):
    assert recursion.josephus(n, k) == recursion.josephus_simulated(n, k)


def test_josephus_step_one_leaves_last():
    assert recursion.josephus(9, 1) == 8
    assert recursion.josephus_simulated(9, 1) == 8


def test_josephus_rejects_empty_circle():
    with pytest.raises(ValueError):
        recursion.josephus(0, 2)
    with pytest.raises(ValueError):
        recursion.josephus_simulated(3, 0)


def test_prefix_binary_strings_invariants():
    n = 6
    result = recursion.prefix_binary_strings(n)
    assert result[0] == "1" * n
    assert len(result) == len(set(result))
    for s in result:
        assert len(s) == n
        assert all(s[:i].count("1") >= s[:i].count("0") for i in range(1, n + 1))
    everything = {"".join(bits) for bits in itertools.product("01", repeat=n)}
    valid = {
        s for s in everything
        if all(s[:i].count("1") >= s[:i].count("0") for i in range(1, n + 1))
    }
    assert set(result) == valid


def test_prefix_binary_strings_negative():
    with pytest.raises(ValueError):
        recursion.prefix_binary_strings(-1)


def test_count_subsets_with_sum_matches_combinations():
    values = [1, 2, 3, 3, 4]
    for target in range(0, 14):
        expected = sum(
            1
            for r in range(len(values) + 1)
            for combo in itertools.combinations(values, r)
            if sum(combo) == target
        )
        assert recursion.count_subsets_with_sum(values, target) == expected


def test_count_subsets_empty():
    assert recursion.count_subsets_with_sum([], 0) == 1
    assert recursion.count_subsets_with_sum([], 1) == 0


def test_balanced_parentheses_exact():
    assert recursion.balanced_parentheses(2) == ["(())", "()()"]


def test_balanced_parentheses_invariants():
    result = recursion.balanced_parentheses(4)
    assert result == sorted(result)
    assert len(result) == len(set(result))
    for s in result:
        depth = 0
        for ch in s:
            depth += 1 if ch == "(" else -1
            assert depth >= 0
        assert depth == 0
        assert len(s) == 8


def test_permutations_cover_all_arrangements():
    values = [1, 2, 3, 4]
    result = recursion.permutations(values)
    assert len(result) == 24
    assert sorted(result) == sorted(list(p) for p in itertools.permutations(values))
    assert result[0] == values
    assert values == [1, 2, 3, 4]


def test_unique_permutations_merges_duplicates():
    values = [1, 1, 2, 2]
    result = recursion.unique_permutations(values)
    assert len(result) == len({tuple(p) for p in result})
    assert {tuple(p) for p in result} == set(itertools.permutations(values))


def test_unique_permutations_equal_plain_for_distinct():
    values = [3, 1, 2]
    assert recursion.unique_permutations(values) == recursion.permutations(values)


def _follow(maze, path):
    row = col = 0
    seen = {(0, 0)}
    steps = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}
    for letter in path:
        d_row, d_col = steps[letter]
        row, col = row + d_row, col + d_col
        assert maze[row][col] == 1
        assert (row, col) not in seen
        seen.add((row, col))
    return row, col


MAZE = [[1, 0, 0, 0], [1, 1, 0, 1], [1, 1, 0, 0], [0, 1, 1, 1]]


def test_maze_paths_example():
    assert recursion.maze_paths(MAZE) == ["DDRDRR", "DRDDRR"]


def test_maze_paths_are_valid_and_sorted():
    maze = [[1, 1, 1], [1, 1, 1], [1, 1, 1]]
    paths = recursion.maze_paths(maze)
    assert paths == sorted(paths)
    assert len(paths) == len(set(paths))
    assert all(_follow(maze, p) == (2, 2) for p in paths)
    assert "DDRR" in paths and "RRDD" in paths


def test_maze_paths_blocked_and_trivial():
    assert recursion.maze_paths([[0, 1], [1, 1]]) == []
    assert recursion.maze_paths([[1, 1], [1, 0]]) == []
    assert recursion.maze_paths([[1]]) == [""]


def test_maze_paths_rejects_non_square():
    with pytest.raises(ValueError):
        recursion.maze_paths([[1, 1, 1], [1, 1, 1]])


def test_subsequences_exact():
    assert recursion.subsequences([1, 2]) == [[], [2], [1], [1, 2]]


def test_subsequences_count_and_order():
    values = [5, 6, 7, 8]
    result = recursion.subsequences(values)
    assert len(result) == 2 ** len(values)
    assert result[0] == []
    assert result[-1] == values
    for sub in result:
        assert sub == [v for v in values if v in sub]


def test_string_subsequences_match_list_version():
    text = "abc"
    assert recursion.string_subsequences(text) == [
        "".join(sub) for sub in recursion.subsequences(list(text))
    ]


def test_subsequence_sums_pair_sum_with_items():
    values = [3, -1, 4]
    result = recursion.subsequence_sums(values)
    assert [sub for _, sub in result] == recursion.subsequences(values)
    assert all(total == sum(sub) for total, sub in result)


def test_has_subset_sum_agrees_with_count():
    values = [2, 3, 7, 8]
    for target in range(1, 25):
        expected = recursion.count_subsets_with_sum(values, target) > 0
        assert recursion.has_subset_sum(values, target) is expected


def test_has_subset_sum_edges():
    assert recursion.has_subset_sum([], 0) is True
    assert recursion.has_subset_sum([4], -4) is False


def test_move_text():
    assert str(Move(1, 1, 3)) == "move disk 1 from rod 1 to rod 3"


@pytest.mark.parametrize("n", range(1, 7))
def test_tower_of_hanoi_moves_are_legal(n):
    moves = recursion.tower_of_hanoi(n, 1, 3, 2)
    assert len(moves) == 2 ** n - 1
    rods = {1: list(range(n, 0, -1)), 2: [], 3: []}
    for move in moves:
        disk = rods[move.source].pop()
        assert disk == move.disk
        assert not rods[move.target] or rods[move.target][-1] > disk
        rods[move.target].append(disk)
    assert rods[3] == list(range(n, 0, -1))
    assert rods[1] == [] and rods[2] == []


def test_tower_of_hanoi_zero_and_negative():
    assert recursion.tower_of_hanoi(0, 1, 3, 2) == []
    with pytest.raises(ValueError):
        recursion.tower_of_hanoi(-1, 1, 3, 2)