# algodeck

A library of well-known algorithm solutions. Each one is a plain function that
takes Python data (lists, strings, integers) and returns the answer. It needs
nothing beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Functions |
| --- | --- |
| `algodeck.backtracking` | `add_operators`, `make_square`, `max_compatibility_sum`, `word_break` |
| `algodeck.interactive` | `guess_permutation`, `find_kth_zero` |
| `algodeck.kadane` | `max_subarray`, `constrained_subset_sum` |
| `algodeck.matrix` | `count_squares`, `maximal_square` |
| `algodeck.memoization` | `num_factored_binary_trees`, `unique_paths_with_obstacles`, `valid_partition`, `count_orders`, `can_cross` |
| `algodeck.knapsack` | `num_squares`, `paint_walls` |
| `algodeck.lcs` | `is_interleave`, `minimum_delete_sum` |
| `algodeck.lis` | `largest_divisible_subset`, `longest_unequal_adjacent_groups`, `longest_arithmetic_subsequence`, `max_sum_increasing_subsequence`, `number_of_lis`, `length_of_lis` |
| `algodeck.recurrence` | `n_choose_r_mod`, `count_routes`, `dice_throw_ways`, `check_record` |
| `algodeck.trees` | `TreeNode`, `all_possible_fbt` |
| `algodeck.heaps` | `find_maximized_capital`, `longest_diverse_string`, `min_deletions`, `maximum_safeness_factor`, `smallest_chair` |
| `algodeck.intervals` | `min_groups`, `erase_overlap_intervals` |
| `algodeck.monotonic_stack` | `find_132_pattern`, `largest_rectangle_area`, `remove_duplicates`, `remove_duplicate_letters`, `sum_subarray_mins`, `longest_valid_substring` |
| `algodeck.greedy_misc` | `has_exact_pairs`, `nice_matrix_operations`, `furthest_building` |
| `algodeck.constructive` | `divine_array_queries`, `complete_square`, `reconstruct_queue` |
| `algodeck.math_tricks` | `max_teams`, `impossible_dice_values`, `column_title`, `interesting_function_sum` |
| `algodeck.observations` | `wonderful_coloring`, `can_reach_end`, `longest_divisors_interval`, `min_substring_function`, `max_same_colour` |
| `algodeck.array_updates` | `color_the_array`, `repeated_substring_pattern` |

Every function carries a docstring that states what it computes.

## Examples

```python
from algodeck.backtracking import add_operators, word_break
from algodeck.lis import length_of_lis
from algodeck.math_tricks import column_title
from algodeck.monotonic_stack import largest_rectangle_area

add_operators("105", 5)                 # expressions over "105" that evaluate to 5
word_break("catsanddog", ["cat", "cats", "and", "sand", "dog"])
length_of_lis([10, 9, 2, 5, 3, 7, 101, 18])   # 4
column_title(28)                        # "AB"
largest_rectangle_area([2, 1, 5, 6, 2, 3])    # 10
```

Interactive problems take a `query` callable in place of a judge, so they
can be driven by any function:

```python
from algodeck.interactive import find_kth_zero

bits = [1, 0, 1, 1, 0, 1]
prefix_sum = lambda left, right: sum(bits[left - 1:right])
find_kth_zero(len(bits), 2, prefix_sum)  # 1-based position of the second zero
```

`complete_square` returns the two missing corners as a tuple and raises
`ValueError` when the given points cannot be corners of an axis-parallel square.

Results that can grow large, such as `count_orders`, `check_record`,
`count_routes`, `n_choose_r_mod`, `num_factored_binary_trees` and
`sum_subarray_mins`, are returned modulo 1 000 000 007.

Inputs that have no meaningful answer (an empty list where at least one value
is needed, mismatched lengths, out-of-range positions) raise `ValueError` or
`IndexError`.

## What it does not do

The package is a library only. It has no command-line program: it does not
read test cases from standard input or print answers, and it does not act as
a judge for the interactive problems. Callers pass data in and get the answer
back as a return value.