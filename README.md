# weeklysolvers

This package solves a set of weekly algorithm exercises. You can call each
solver as a plain Python function. You can also run them from the command line
on competition-style input.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library

- `weeklysolvers.geometry`
  - `is_collinear(a, b, c)` and `count_triangles(points)`, which counts the
    non-degenerate triangles.
  - `PlanarSubdivision`: add segments with `add_edge(x1, y1, x2, y2)`.
    `face_areas()` returns the areas of the bounded faces.
  - `sum_of_squared_areas(segments)`.
- `weeklysolvers.strings`
  - `Trie`, which has `insert` and supports `in`.
  - `count_segmentations(text, words)`: the number of ways to split `text`
    into dictionary words, modulo 1e9+7.
  - `longest_a_to_z(text)`: the length of the longest substring that starts
    with `A` and ends with `Z`, or 0.
- `weeklysolvers.dsu`
  - `DSU`, a disjoint-set union with `merge`, `same`, `leader`, `size` and
    `groups`. An index out of range raises `IndexError`.
  - `largest_component(n, edges)`, where vertices are numbered from 1.
- `weeklysolvers.sequences`
  - `longest_non_increasing(values)`.
  - `min_operations_non_decreasing(values, m)`.
  - `covered_span(intervals)`, which takes `(start, length)` pairs.
  - `zigzag_arrange(values)`.
- `weeklysolvers.number_theory`
  - `smallest_zeckendorf_term(n)`.
  - `min_steps_to_equal(a, b)`.
  - `binomial_divisor_count(n, k)`, which requires `0 <= k <= n <= 504`.
  - `lucas(n)`, which requires `0 <= n <= 91`.
  - `has_distinct_square_sum(n)`.
- `weeklysolvers.segment_tree`
  - `SeatTree(n)`: positions 1..n, all free at the start. It has
    `assign(left, right, free)`, `first_fit(k)` and `longest_run`.
  - `count_rejected(n, requests)`: requests are `("A", k)` and
    `("L", l, r)`.
- `weeklysolvers.counting`
  - `count_gapped_subsets(values, k)`, modulo 998244353.
  - `min_bottles(amounts, capacities)`: returns `(bottles, poured)`, or
    `None`.

When an argument is out of range, the function raises `ValueError`.

Example:

```python
from weeklysolvers.geometry import count_triangles
from weeklysolvers.dsu import largest_component

count_triangles([(0, 0), (1, 0), (0, 1), (1, 1)])    # 4
largest_component(5, [(1, 2), (2, 3)])                # 3
```

## Command line

```
weeklysolvers PROBLEM [INPUT] [-o OUTPUT]
```

`PROBLEM` is one of these names:

| Name | Problem |
|------|---------|
| `1A` | Triangles |
| `1B` | Segmentations |
| `1C` | A-to-Z |
| `1D` | Non-increasing subsequence |
| `1E` | Zeckendorf |
| `1G` | Modular sort |
| `1H` | Equal steps |
| `1I` | Binomial divisors |
| `1J` | Covered span |
| `2B` | Zigzag |
| `2C` | Face areas |
| `2D` | Seats |
| `2E` | Gapped subsets |
| `2F` | Bottles |
| `2G` | Lucas |
| `2H` | Components |
| `2J` | Square sum |

Case does not matter.

The program reads whitespace-separated input from `INPUT`. Without `INPUT`, it
reads standard input. It writes the answer to `OUTPUT`, or to standard output
if you give no `-o`. On malformed input it prints an error to standard error
and exits with status 1.

Run `weeklysolvers --help` to see the options.

From Python, `weeklysolvers.cli.solve(problem, text)` returns the same output
as a string.