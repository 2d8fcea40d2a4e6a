# contestlib

A collection of classic competitive-programming algorithms, plus solutions to
a set of contest and olympiad problems. Every solution is an ordinary Python
function (or a small class) that takes Python values and returns Python
values. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `contestlib.segment_trees`: bottom-up segment trees over positions
  `0 .. size - 1`, all starting at zero. Each is built with a size:
  - `RangeAddPointSum(size)`: `update(value, left, right)` adds to a range,
    `query(position)` reads one position.
  - `RangeMaxPointMax(size)`: `update(value, left, right)` raises a range to
    at least `value`, `query(position)` reads one position.
  - `PointAddRangeSum(size)`: `update(position, value)` adds at one position,
    `query(left, right)` sums an inclusive range.
  - `PointMaxRangeMax(size)`: `update(position, value)` raises one position,
    `query(left, right)` returns the maximum of an inclusive range.

  Positions outside the tree raise `IndexError`; an empty range raises
  `ValueError`.
- `contestlib.text`: `prefix_function(sequence)`, the prefix function used by
  KMP, and `SubstringHasher(text, base=31, modulus=10**9 + 7)` whose
  `hash(position, length)` gives the polynomial hash of any substring in
  constant time.
- `contestlib.graphs`: `bfs_order(edges, start)` and `dfs_order(edges, start)`
  for undirected graphs, `strongly_connected_components(n, edges)` for a
  directed graph on `1..n` (components in topological order), and
  `dijkstra(n, edges, source)` returning a dict of distances with `None` for
  unreachable vertices.
- `contestlib.dynamic`: `max_subarray_sum`, `knapsack_max_fill` and
  `min_coins` (which returns `None` when the amount cannot be paid).
- `contestlib.search`: `find_position(values, target)`, the index of the first
  occurrence in a sorted sequence or `None`.
- `contestlib.codeforces`: solutions to Codeforces problems, such as
  `bun_length`, `min_matryoshka_sets`, `pattern_matches`, `selfie_lines`,
  `promotion_cost` and `triangle_colorings`.
- `contestlib.szkopul_other`: practice problems, such as `count_rectangles`,
  `tetris_height`, `tower_positions`, `nearest_plot_distances` and
  `max_fishing_gap`.
- `contestlib.oi_early`, `contestlib.oi_middle`, `contestlib.oi_late`:
  olympiad problems, from `project_schedule` (which raises `CycleError` when
  task dependencies form a cycle) and `template_length`, through
  `TransmitterNetwork` (with `place`, `remove` and `average`) and
  `diversity`, to `orient_estates`, `board_design` and `dwarf_photo_order`.
  Where a problem has no answer, the function returns `None`.

## Examples

```python
from contestlib.text import prefix_function
from contestlib.segment_trees import PointAddRangeSum
from contestlib.dynamic import min_coins

prefix_function("abab")          # [0, 0, 1, 2]

tree = PointAddRangeSum(11)
tree.update(3, 5)
tree.update(7, 2)
tree.query(0, 10)                # 7

min_coins(11, [1, 5, 6])         # 2
```

Problem solutions take the problem's input as arguments:

```python
from contestlib.codeforces import bun_length
from contestlib.szkopul_other import count_rectangles

bun_length(3)                    # 17
count_rectangles(6)              # 8
```

## What it does not do

There is no command-line program: nothing reads standard input or prints
answers in a judge's output format. Interactive problems, which need a
judge's query library, are not included. To use a solution, import the
function and pass it the input as Python values.