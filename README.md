# algokit

A compact collection of classic algorithms and data structures in plain
Python, with no third-party dependencies. It also ships two small terminal
games, a maze and a snake game.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.bits` | `extract_bit`, `set_bit`, `clear_bit` |
| `algokit.number_theory` | `fast_expo`, `gcd`, `solve_diophantine`, `is_prime`, `NoIntegralSolution` |
| `algokit.matrix` | `mat_mul`, `mat_pow`, reducing entries by a modulus (default `98765431`) |
| `algokit.coin_change` | `coin_ways_top_down`, `coin_ways_bottom_up` |
| `algokit.search` | `linear_search`, `binary_search`, `ternary_search`, `find_pivot` |
| `algokit.sorting` | `bubble_sort`, `bubble_sort_recursive`, `insertion_sort`, `insertion_sort_recursive`, `heap_sort`, `selection_sort`, `merge_sorted`, `merge_into` |
| `algokit.linked_list` | `LinkedList`, `read_until_sentinel` |
| `algokit.bst` | `BinarySearchTree` |
| `algokit.graphs` | `shortest_distances`, `shortest_distance`, `dfs_order`, `bfs_order` |
| `algokit.maze` | `Maze`, `Direction` and the maze game (`main`) |
| `algokit.snake` | `SnakeGame`, `tile_char` and the snake game (`main`) |

## Examples

```python
from algokit.bits import extract_bit, set_bit, clear_bit
from algokit.number_theory import fast_expo, gcd
from algokit.coin_change import coin_ways_top_down, coin_ways_bottom_up
from algokit.bst import BinarySearchTree

extract_bit(5, 0)   # 1
set_bit(5, 1)       # 7
clear_bit(5, 0)     # 4

fast_expo(2, 10)    # 1024
gcd(12, 18)         # 6

# Ordered ways to pay 3 with coins 1, 2, 3 and 8
coin_ways_top_down(3, [1, 2, 3, 8])   # 4
coin_ways_bottom_up(3, [1, 2, 3, 8])  # 4

tree = BinarySearchTree([50, 30, 20, 40, 70, 60, 80])
list(tree)          # [20, 30, 40, 50, 60, 70, 80]
40 in tree          # True
```

Some behaviour worth knowing:

- `solve_diophantine(a, b, c)` returns one pair `(x, y)` with
  `a*x + b*y == c` and raises `NoIntegralSolution` (a `ValueError`) when `c`
  is not a multiple of `gcd(a, b)`.
- `is_prime(n)` reports every value below 4, including 0, 1 and negative
  numbers, as prime.
- The search functions return an index, or `None` when the target is absent.
  `find_pivot` returns the index of the largest item of a rotated ascending
  sequence, or `None` if the sequence is not rotated.
- The sorting functions return a new sorted list and leave their input alone.
  `merge_sorted(first, second, descending=False)` sorts both inputs and merges
  them; `merge_into(buffer, items, empty=None)` merges ascending `items` into
  the `empty` slots of `buffer` in place.
- `mat_mul(a, b, modulus)` computes `a @ b` entry by entry modulo `modulus`;
  `mat_pow(a, power, modulus)` needs a square matrix and a power of at least 1.
- `shortest_distances(node_count, edges, source=1)` takes undirected
  `(a, b, weight)` edges on nodes `1..node_count` and maps unreachable nodes
  to `None`. `shortest_distance` defaults its target to the last node.
- `dfs_order` and `bfs_order` take a mapping from node to neighbours and
  return the visiting order from a start node.
- `LinkedList.render()` gives `1-->2-->3-->`; `read_until_sentinel(values,
  sentinel=-1)` builds a list from values up to the first sentinel.

## Games

Two games run in the terminal:

```
algokit-maze
algokit-snake
```

In the maze, walk the `*` marker to the `>` exit; walls are drawn as `.`.
Type one command per line: `up`, `down`, `left`, `right` (or `w`, `s`, `a`,
`d`), and `q` to quit.

In the snake game, steer with `w`, `a`, `s` and `d` followed by Enter, eat the
food `O` to grow, and avoid the walls `X` and your own body. Your score is the
snake's length. `--delay` sets the seconds between steps (default 0.5) and
`--seed` fixes the random food placement.

## What the package does not do

Neither game reads single key presses: input arrives a line at a time, so
every move or turn needs Enter. The snake game redraws the board with ANSI
escape codes, which a terminal without ANSI support will show as raw text.