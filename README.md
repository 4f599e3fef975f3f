# daily_algorithms

Plain-Python solutions to well-known algorithm problems, grouped by theme. Every
function takes ordinary Python values (ints, strings, lists) and returns a result;
nothing reads or writes files, and nothing prints.

Requires Python 3.10 or later. The only runtime dependency is `sortedcontainers`,
used by `daily_algorithms.sequences`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `daily_algorithms.bits`

- `concatenated_binary(n)`: value of the binary forms of 1..n written one after
  another, modulo `MOD` (1,000,000,007).
- `bitwise_complement(n)`: flips every bit below the highest set bit; `0` gives `1`.
  Negative `n` raises `ValueError`.
- `reverse_bits(n)`: reverses an unsigned 32-bit integer; values outside that range
  raise `ValueError`.
- `has_alternating_bits(n)`: whether adjacent bits always differ.
- `min_bitwise_array(nums)`: for each value, the smallest `x` with `x | (x + 1) == v`,
  or `-1` for even values.
- `min_bitwise_array_primes(nums)`: the same for primes, where only `2` gives `-1`.
- `read_binary_watch(turned_on)`: every `"h:mm"` time a binary watch can show with
  that many LEDs lit.
- `sort_by_bits(values)`: sorted by number of set bits, then by value.
- `find_different_binary_string(strings)`: a binary string differing from each given one.

### `daily_algorithms.strings`

- `min_partitions(n)`: fewest deci-binary numbers summing to the decimal string `n`.
- `min_alternating_operations(s)`: fewest flips to make a binary string alternate.
- `minimum_deletions(s)`: fewest deletions so no `'b'` precedes an `'a'`.
- `longest_balanced_substring(s)`: longest substring of `a`/`b`/`c` in which every
  letter present occurs equally often.
- `happy_string(n, k)`: the k-th (1-based) string of length `n` over `abc` with no two
  equal neighbours, or `""` if there is none.
- `count_binary_substrings(s)`: substrings with equal, grouped runs of 0s and 1s.

### `daily_algorithms.trees`

- `TreeNode(val, left=None, right=None)`: a dataclass node; `TreeNode.inorder()`
  yields values left-root-right.
- `build_balanced(values)`: a height-balanced tree whose in-order walk gives `values`.
- `balance_bst(root)`: a balanced search tree with the same values as `root`.
- `preorder_traversal(root)`: values root-left-right, as a list.

### `daily_algorithms.sequences`

- `minimum_cost_k_split(nums, k, dist)`: least cost to split `nums` into `k` parts
  (cost is the sum of each part's first element) with the later starts within
  `dist` of each other. `k` outside `1..len(nums)` raises `ValueError`.
- `max_sum_trionic(nums)`: largest sum of a subarray that rises, falls, then rises;
  raises `ValueError` if there is no such subarray.
- `minimum_pair_removal_fast(nums)`: merges of the leftmost minimum-sum adjacent pair
  needed to make the values non-decreasing, using sorted containers.

### `daily_algorithms.arrays`

- `minimum_cost_three_split(nums)`: least cost to cut `nums` into three parts.
- `is_trionic(nums)`: whether `nums` strictly rises, falls, then rises to the end.
- `min_removal(nums, k)`: fewest removals so that max ≤ `k` × min.
- `longest_balanced_subarray(nums)`: longest subarray with as many distinct even as
  distinct odd values.
- `median_of_sorted(first, second)`: median of two sorted sequences by binary search
  on partitions.
- `reverse_integer(x)`: digits reversed, or `0` outside the signed 32-bit range.
- `remove_duplicates(nums)`: the distinct values of a sorted sequence, as a new list.
- `minimum_pair_removal(nums)`: the same count as `minimum_pair_removal_fast`, by
  direct simulation.
- `min_pair_sum(nums)`: smallest possible largest pair sum.
- `minimum_difference(nums, k)`: smallest max-min gap over any `k` values.
- `minimum_abs_difference(values)`: all ascending pairs with the smallest gap.

### `daily_algorithms.dynamic`

- `max_dot_product(first, second)`: largest dot product of equal-length non-empty
  subsequences.
- `number_of_stable_arrays(zero, one, limit)`: binary arrays with no run longer than
  `limit`, modulo `MOD`.
- `largest_rectangle_area(heights)` and `maximal_rectangle(matrix)`: histogram and
  binary-matrix rectangles (cells may be `"1"` or `1`).
- `max_side_length(matrix, threshold)`: largest square whose sum is at most `threshold`.
- `maximize_square_area(m, n, h_fences, v_fences)`: largest square area modulo `MOD`,
  or `-1`.
- `min_path_cost_with_teleports(grid, k)`: cheapest right/down path with up to `k`
  free teleports to cells of no greater value, or `-1`.

### `daily_algorithms.graphs`

- `DisjointSet(size)`: union-find with `find(item)`, `union(first, second)` (returns
  `False` if already joined) and a `count` of sets.
- `max_stability(n, edges, k)`: highest minimum strength of a spanning tree, with
  edges `(u, v, strength, must)` and up to `k` doublings; `-1` if none.
- `min_cost_with_reversals(n, edges)`: cheapest path from `0` to `n - 1` where an edge
  may be walked backwards at twice its weight; `-1` if unreachable.
- `minimum_char_conversion_cost(...)` and `minimum_substring_conversion_cost(...)`:
  least cost to turn `source` into `target` through given letter or substring
  changes; `-1` if impossible, `ValueError` if the lengths differ.

## Examples

```python
from daily_algorithms.bits import concatenated_binary, read_binary_watch
from daily_algorithms.strings import happy_string
from daily_algorithms.arrays import median_of_sorted
from daily_algorithms.trees import build_balanced, preorder_traversal
from daily_algorithms.graphs import DisjointSet

concatenated_binary(3)          # 27  ("1" + "10" + "11" == 0b11011)
read_binary_watch(1)[:2]        # ['0:01', '0:02']
happy_string(3, 9)              # 'cab'
median_of_sorted([1, 3], [2])   # 2.0

root = build_balanced([1, 2, 3])
preorder_traversal(root)        # [2, 1, 3]

groups = DisjointSet(4)
groups.union(0, 1)                # True
groups.find(0) == groups.find(1)  # True
```

## What it does not do

This is a library only: there is no command-line program, and inputs are not
read from files or standard input. Callers pass values in and use the return values.