# dsakit

A collection of classic data-structure and algorithm exercises, written as
plain Python functions that take values and return results. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
python -m pytest
```

## Modules

- `dsakit.singly`: singly linked lists made of `Node` objects. Each
  operation takes the head (or `None` for an empty list) and returns the new
  head where the shape can change. `from_values`, `to_values`, `iter_nodes`
  and `format_list` (renders `->1->2->3`) convert to and from Python values.
  Operations: `push_front`, `append`, `insert_after`, `delete_first`,
  `delete_last`, `delete_at`, `delete_every_kth`, `remove_nth_from_end`,
  `reverse`, `middle`, `has_loop`, `loop_length`, `is_palindrome` and
  `rotate_right`. Positions are 1-based; a position that does not exist
  raises `IndexError`.
- `dsakit.doubly`: doubly linked lists made of `DNode` objects, with
  `from_values`, `to_values`, `to_values_backward`, `format_list` (renders
  `<=>1<=>2`), `push_front`, `append`, `insert_at` (position 0 inserts
  before the head), `delete_first`, `delete_last` and `delete_at`.
- `dsakit.list_algorithms`: `add_numbers` for numbers stored as digit
  lists, `copy_random_list` and `copy_random_list_interleaved` for lists of
  `RandomNode` objects, `intersection_point` of two Y-shaped lists,
  `merge_sorted`, `reverse_in_groups` and `segregate_012`.
- `dsakit.patterns`: star, number and letter patterns returned as strings,
  one line per row, such as `pyramid`, `inverted_pyramid`, `butterfly`,
  `star_table`, `star_arrow`, `palindrome_triangle`, `number_grid` and
  `letter_triangle`.
- `dsakit.recursion`: `josephus` and `josephus_simulated`,
  `balanced_parentheses`, `prefix_binary_strings`, `permutations` and
  `unique_permutations`, `subsequences`, `string_subsequences`,
  `subsequence_sums`, `count_subsets_with_sum`, `has_subset_sum`,
  `count_ordered_ways`, `maze_paths` (sorted U/D/L/R paths through a square
  maze) and `tower_of_hanoi`, which returns a list of `Move` objects.
- `dsakit.arrays`: `subarrays`, `can_split_equal`, `max_subarray_sum`,
  `max_subarray_product`, `max_difference`, `power_set` with
  `format_subset`, `rotate_90`, `rotate_180`, `rotate_270`, `rotate_times`,
  `prefix_sums`, `suffix_sums` and `trapped_water`.
- `dsakit.sorting`: `bubble_sort`, `selection_sort`,
  `selection_sort_descending`, `insertion_sort`, `merge_sort` and
  `quick_sort`. Each returns a new list and leaves its input untouched.
- `dsakit.searching`: `linear_search`, `binary_search`,
  `binary_search_descending`, `first_last_index`, `count_occurrences`,
  `insert_position`, `kth_missing`, `peak_index`, `search_rotated`,
  `rotated_minimum`, `integer_sqrt`, `search_matrix` and
  `search_matrix_descending`. Index searches return `-1` when the value is
  absent; the matrix searches return `(row, col)` or `None`.
- `dsakit.allocation`: binary search on the answer with `allocate_books`,
  `painter_partition`, `largest_min_distance` (aggressive cows) and
  `min_eating_speed`.
- `dsakit.pairs`: `two_sum`, `two_difference`, `two_quotient`,
  `two_product`, `three_sum`, `four_sum`, `pack_count` and `unpack_count`,
  `majority_element`, `missing_and_repeated`, `occurrence_counts` and
  `segregate_binary`.
- `dsakit.strings`: `defang_ip`, `factorial_digits`, `int_to_roman`,
  `roman_to_int`, `add_strings`, `longest_palindrome_length`,
  `min_chars_for_palindrome`, `is_pangram`, `sort_letters`,
  `sort_sentence`, `sort_vowels`, `rotate_clockwise`,
  `rotate_anticlockwise` and `rotation_match`, which returns a `Rotation`
  flag.

## Example

```python
from dsakit import patterns, searching, singly, strings

head = singly.from_values([1, 2, 3, 4, 5])
print(singly.to_values(singly.rotate_right(head, 2)))   # [4, 5, 1, 2, 3]

print(searching.binary_search([1, 3, 5, 7], 5))          # 2
print(strings.int_to_roman(1994))                        # MCMXCIV
print(patterns.pyramid(3), end="")
```

## What it does not do

The package is a library only. It has no command-line program and reads no
input from the terminal: build your lists, arrays and strings in Python and
pass them to the functions.