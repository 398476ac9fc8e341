# dsakit

A small collection of classic algorithms and data structures, written as
plain Python functions and classes. It needs nothing beyond the standard
library and supports Python 3.10 and later.

## Installation

```
pip install .
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `max_area`, `find_duplicates`, `max_product`, `missing_number`, `or_with_next`, `floor_value`, `ceil_value`, `largest_element`, `max_subarray_sum`, `is_palindromic_array`, `remove_duplicates`, `rotate` |
| `dsakit.matrix` | `lower_triangle`, `lower_triangle_sum`, `matrix_sum`, `matrix_multiply`, `format_matrix` |
| `dsakit.bits` | `binomial_coefficient`, `count_set_bits`, `xor_swap`, `hex_to_binary` |
| `dsakit.maze` | `solve_maze`, `format_solution` |
| `dsakit.greedy` | `min_refills`, `coin_change`, `lottery_bills` |
| `dsakit.graph` | `DirectedGraph`, `UndirectedGraph`, `Edge`, `DisjointSet`, `prim_mst`, `kruskal_mst`, `dijkstra` |
| `dsakit.searching` | `jump_search`, `binary_search`, `binary_search_recursive`, `linear_search` |
| `dsakit.boundedqueue` | `BoundedQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsakit.sorting` | `heap_sort`, `insertion_sort`, `bubble_sort`, `radix_sort`, `counting_sort`, `cycle_sort`, `merge_sort`, `quick_sort`, `selection_sort` |
| `dsakit.brackets` | `are_brackets_balanced`, `is_valid` |
| `dsakit.hanoi` | `Move`, `hanoi_moves`, `format_move` |
| `dsakit.expressions` | `precedence`, `apply_op`, `evaluate`, `infix_to_postfix` |
| `dsakit.stackops` | `next_greater`, `next_greater_frequency`, `reverse_words`, `sort_stack`, `reverse_stack` |
| `dsakit.tree` | `Node`, `BinaryTree`, `bst_insert` |

## Conventions

- The sorting functions take any iterable and return a new sorted list;
  the input is left untouched. `radix_sort` and `counting_sort` accept
  non-negative integers only and raise `ValueError` otherwise.
- The searching functions return the index of the value found, or `None`
  when it is absent.
- Invalid input raises an exception rather than returning a sentinel:
  `ValueError` for empty sequences where a value is required, malformed
  expressions, invalid hexadecimal digits, vertices out of range, a
  disconnected graph in `prim_mst`, or an unreachable destination in
  `min_refills`. `BoundedQueue` raises `QueueFullError` and
  `QueueEmptyError`.
- `dijkstra` returns `math.inf` for vertices that cannot be reached.
- `next_greater` and `next_greater_frequency` put `None` where no later
  element qualifies.

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.searching import binary_search
from dsakit.expressions import evaluate, infix_to_postfix
from dsakit.graph import UndirectedGraph

merge_sort([12, 11, 13, 5, 6, 7])        # [5, 6, 7, 11, 12, 13]
binary_search([2, 3, 4, 10, 40], 10)     # 3
binary_search([2, 3, 4, 10, 40], 5)      # None
evaluate("100 * ( 2 + 12 ) / 14")        # 100
infix_to_postfix("a+b*c")                # "abc*+"

graph = UndirectedGraph(5)
graph.add_edge(0, 1)
graph.add_edge(0, 2)
graph.add_edge(2, 3)
graph.add_edge(2, 4)
graph.bfs(0)                             # [0, 1, 2, 3, 4]
```

A bounded queue raises instead of silently refusing:

```python
from dsakit.boundedqueue import BoundedQueue, QueueFullError

queue = BoundedQueue(2)
queue.enqueue(20)
queue.enqueue(30)
try:
    queue.enqueue(40)
except QueueFullError:
    pass
queue.dequeue()                          # 20
```

A binary tree fills each level from left to right:

```python
from dsakit.tree import BinaryTree

tree = BinaryTree([10, 11, 9, 7, 12, 15, 8])
tree.inorder()                           # [7, 11, 12, 10, 15, 9, 8]
tree.delete(11)                          # True
tree.left_view()                         # [10, 8, 7]
```

## What it does not do

This is a library only: it has no command-line program and reads no
input from the terminal. Functions such as `format_matrix`,
`format_solution`, `format_move` and the `format` methods return strings;
printing them is left to the caller.

## Running the tests

```
pip install .[test]
pytest
```