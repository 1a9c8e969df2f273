# algorium

A small library of classic algorithms written in plain Python. It has no
dependencies outside the standard library.

## Installation

```
pip install algorium
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "algorium[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algorium.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `heap_sort`, `merge_sort`, `quick_sort`, `radix_sort`, `cocktail_sort`, `dutch_flag_sort` |
| `algorium.searching` | `linear_search`, `binary_search`, `prefix_function`, `kmp_search` |
| `algorium.avl` | `AVLTree`, a self-balancing binary search tree of distinct values |
| `algorium.graphs` | `bellman_ford`, `floyd_warshall`, `Graph` (depth-first traversal), `WeightedAdjacencyList`, `Edge`, `NegativeCycleError` |
| `algorium.problems` | `max_gold`, `longest_palindromic_subsequence`, `solve_n_queens`, `subset_sums`, `palindrome_partitions`, `permutations`, `schedule_jobs` with `Job`, `fractional_knapsack` with `Item`, `subarray_with_sum` |
| `algorium.arrays` | `add_arrays`, `multiply_matrices`, `transpose`, `hourglass_sums`, `max_hourglass_sum`, `is_palindrome_sequence`, `sum_and_product`, `moves_to_equalize`, `halves`, `largest_even` |
| `algorium.numeric` | `is_prime`, `gradient`, `fahrenheit_table`, `sum_below`, `weekday_name` |
| `algorium.text` | `split_words`, `reverse_string`, `normalize_case` |
| `algorium.patterns` | `hollow_diamond`, `number_triangle`, `digit_staircase` |

## Examples

Sorting functions take any iterable and return a new list; the input is
left unchanged:

```python
from algorium.sorting import merge_sort, quick_sort, radix_sort

merge_sort([5, 2, 9, 1])                     # [1, 2, 5, 9]
quick_sort([1, 9, 2, 23], descending=True)   # [23, 9, 2, 1]
radix_sort([237, 146, 48, 36])               # [36, 48, 146, 237]
```

`radix_sort` raises `ValueError` for negative values, and `dutch_flag_sort`
for anything other than 0, 1 or 2.

Searching:

```python
from algorium.searching import binary_search, kmp_search, linear_search

linear_search([4, 7, 7], 7)                          # 1
binary_search([1, 3, 5, 7], 4)                       # None
kmp_search("ABABCABAB", "ABABDABACDABABCABAB")       # [10]
```

`linear_search` and `binary_search` return `None` when the item is absent;
`binary_search` raises `ValueError` if the values are not in ascending order.
`kmp_search` returns every start index, overlapping matches included.

An AVL tree behaves like a sorted set:

```python
from algorium.avl import AVLTree

tree = AVLTree()
for value in (30, 20, 10, 25):
    tree.insert(value)        # False if the value was already present
10 in tree                    # True
list(tree)                    # [10, 20, 25, 30]
tree.preorder()               # root-left-right order
tree.search(10)               # value of 10's parent, None for the root
tree.remove(20)               # KeyError if absent
```

Shortest paths:

```python
import math
from algorium.graphs import Edge, bellman_ford, floyd_warshall

edges = [Edge(0, 1, -1), Edge(0, 2, 4), Edge(1, 2, 3)]
bellman_ford(3, edges, 0)   # [0, -1, 2]

floyd_warshall([[0, 5, math.inf], [math.inf, 0, 3], [math.inf, math.inf, 0]])
# [[0, 5, 8], [inf, 0, 3], [inf, inf, 0]]
```

`bellman_ford` gives `math.inf` for unreachable vertices and raises
`NegativeCycleError` (a `ValueError`) when a negative-weight cycle is
reachable.

Puzzles:

```python
from algorium.problems import Job, palindrome_partitions, schedule_jobs, solve_n_queens

solve_n_queens(4)               # 4x4 board of 0/1 rows, or None if impossible
palindrome_partitions("aab")    # [['a', 'a', 'b'], ['aa', 'b']]
schedule_jobs([Job("a", 2, 100), Job("b", 1, 19), Job("c", 2, 27)])   # ['c', 'a']
```

## What it does not do

`algorium` is a library only. It reads no input, prints nothing and
installs no command-line programs; every routine takes its data as
arguments and returns its result.