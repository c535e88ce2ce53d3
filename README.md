# dynaprog

A small library of classic dynamic programming solutions, written in plain
Python with no third-party dependencies, plus a `dynaprog` command that
solves a few of them from standard input.

## What is inside

| Module | Functions |
| --- | --- |
| `dynaprog.knapsack` | `knapsack`, `knapsack_recursive`, `unbounded_knapsack`, `rod_cutting`, `cut_rod` |
| `dynaprog.subset_sum` | `is_subset_sum`, `can_partition`, `reachable_subset_sums`, `count_subsets_with_sum`, `min_subset_sum_difference`, `count_partitions_with_difference`, `target_sum_ways` |
| `dynaprog.coins` | `coin_change_ways`, `min_coins` |
| `dynaprog.lcs` | `lcs_table`, `lcs_length`, `lcs_length_recursive`, `longest_common_subsequence`, `longest_common_substring_length`, `is_subsequence` |
| `dynaprog.sequences` | `shortest_common_supersequence_length`, `shortest_common_supersequence`, `min_insertions_deletions`, `longest_palindromic_subsequence`, `min_deletions_to_palindrome`, `min_insertions_to_palindrome`, `longest_repeating_subsequence` |
| `dynaprog.mcm` | `matrix_chain_cost`, `min_score_triangulation` |
| `dynaprog.palindrome_partition` | `is_palindrome`, `min_palindrome_cuts` |
| `dynaprog.boolean_parenthesization` | `count_ways` |
| `dynaprog.scramble` | `is_scramble` |
| `dynaprog.egg_drop` | `egg_drop`, `egg_drop_binary_search` |
| `dynaprog.trees` | `TreeNode`, `diameter`, `max_path_sum`, `max_leaf_path_sum` |
| `dynaprog.cli` | `main`, the entry point of the `dynaprog` command |

A few points worth knowing:

- `min_coins` returns `None` when the amount cannot be made.
- `count_subsets_with_sum` and `count_ways` take an optional `modulus`;
  `count_partitions_with_difference` always reduces modulo `10**9 + 7`
  (`dynaprog.subset_sum.MOD`).
- `count_ways` expects an expression alternating `T`/`F` with `|`, `&`
  and `^`, such as `"T|F&T"`, and takes `want_true` to count ways of
  reaching `True` or `False`.
- `TreeNode` is a dataclass with `value`, `left` and `right`. `diameter`
  counts edges and returns 0 for an empty tree; `max_path_sum` and
  `max_leaf_path_sum` raise `ValueError` for an empty tree.
- Negative weights, counts, amounts or capacities, mismatched lengths and
  malformed expressions raise `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Usage

```python
from dynaprog.knapsack import knapsack
from dynaprog.coins import coin_change_ways, min_coins
from dynaprog.lcs import lcs_length, longest_common_subsequence
from dynaprog.mcm import matrix_chain_cost
from dynaprog.scramble import is_scramble
from dynaprog.egg_drop import egg_drop
from dynaprog.trees import TreeNode, diameter

knapsack([1, 3, 4, 5], [1, 4, 5, 7], 7)          # 9
min_coins([1, 2, 5], 11)                         # 3
min_coins([2], 3)                                # None
coin_change_ways([1, 2, 5], 5)                   # 4
lcs_length("AGGTAB", "GXTXAYB")                  # 4
longest_common_subsequence("AGGTAB", "GXTXAYB")  # 'GTAB'
matrix_chain_cost([40, 20, 30, 10, 30])          # 26000
is_scramble("great", "rgeat")                    # True
egg_drop(2, 10)                                  # 4

tree = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
diameter(tree)                                   # 3
```

## Command line

The `dynaprog` command takes the name of a problem and reads its input as
whitespace-separated words from standard input, then prints the answer.

| Command | Input |
| --- | --- |
| `knapsack` | N, N weights, N values, capacity |
| `rod-cutting` | N, N piece lengths, N prices, rod length |
| `lcs` | two strings; prints the LCS length |
| `print-lcs` | two strings; prints one LCS |
| `mcm` | N, N matrix dimensions |
| `palindrome-partition` | a string; prints the fewest cuts |
| `boolean-parenthesization` | an expression such as `T|F&T`; prints the ways to make it true |
| `scramble` | two strings; prints `Yes` or `No` |
| `egg-drop` | eggs and floors |

For example:

```
echo "4  1 3 4 5  1 4 5 7  7" | dynaprog knapsack
echo "great rgeat" | dynaprog scramble
echo "2 10" | dynaprog egg-drop
```

Missing or malformed input is reported as a usage error. List the commands
with:

```
dynaprog --help
```

Only the problems in the table above are available from the command line;
the rest of the library is used from Python.