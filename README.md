# dsakit

A small library of classic data structures and the algorithms usually taught
alongside them. It is plain Python with no dependencies beyond the standard
library.

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
| `dsakit.chars` | `CharKind` and `classify_char(ch)`, which returns the kind of an ASCII lowercase letter, uppercase letter or digit, `None` for any other character, and raises `ValueError` unless given exactly one character |
| `dsakit.sorting` | `merge_sort(items)` and `quick_sort(items)`, which return new sorted lists, and `partition(items, start, end)`, the in-place step quick sort uses |
| `dsakit.queues` | Fixed-capacity queues: `ArrayQueue` (`push`, `pop`, `front`, `rear`, `is_empty`), `CircularQueue` (`enqueue`, `dequeue`, `is_empty`, `is_full`) and `Deque` (`push_front`, `push_rear`, `pop_front`, `pop_rear`, `front`, `rear`, `is_empty`, `is_full`) |
| `dsakit.tree` | `TreeNode`, `build_tree(values)` from a pre-order listing where `-1` marks an empty child, and the traversals `level_order` (a list per level), `inorder`, `preorder`, `postorder` |
| `dsakit.linked_list` | `Node` and `LinkedList` (`insert_at_head`, `insert_at_tail`, 1-based `insert_at_position` and `delete_at_position`); on node chains: `detect_loop`, `floyd_detect_loop`, `get_starting_node`, `remove_loop`, `find_mid`, `merge_sorted`, `merge_sort` |
| `dsakit.circular_list` | `CircularNode`, `CircularLinkedList` with `insert(after, value)` and `delete(value)`, and `is_circular(head)` |
| `dsakit.stack` | `ArrayStack` (`push`, `pop`, `peek`, `is_empty`), plus `reverse_string`, and `delete_middle`, `insert_at_bottom`, `reverse_stack`, `sort_stack` for stacks kept as lists whose end is the top |
| `dsakit.brackets` | `is_valid_parenthesis`, `has_redundant_brackets`, `min_bracket_reversals` |
| `dsakit.histogram` | `next_smaller`, `next_smaller_indices`, `prev_smaller_indices`, `largest_rectangle_area`, `max_rectangle` for binary matrices, and `find_celebrity` |

## Errors

Failures are raised rather than signalled with sentinel values:

- Pushing onto a full `ArrayStack`, `ArrayQueue`, `CircularQueue` or `Deque`
  raises `OverflowError`; popping or peeking an empty one raises `IndexError`.
- `LinkedList` positions out of range raise `IndexError`.
- `CircularLinkedList.insert` and `delete` raise `ValueError` when the value
  is not in the list; deleting from an empty list raises `IndexError`.
- `build_tree` raises `ValueError` when the values run out before the tree is
  complete.
- `min_bracket_reversals` raises `ValueError` for a string of odd length, and
  `has_redundant_brackets` for a `)` with no matching `(`.
- `find_celebrity` returns `None` when there is no celebrity.

## A quick look

```python
from dsakit.brackets import is_valid_parenthesis
from dsakit.histogram import largest_rectangle_area
from dsakit.tree import build_tree, inorder, level_order

is_valid_parenthesis("[{()}]")              # True
largest_rectangle_area([2, 1, 5, 6, 2, 3])  # 10

root = build_tree([1, 3, 7, -1, -1, 11, -1, -1, 5, 17, -1, -1, -1])
inorder(root)      # [7, 3, 11, 1, 17, 5]
level_order(root)  # [[1], [3, 5], [7, 11, 17]]
```

## What it does not do

`dsakit` is a library only. It has no command-line program and reads nothing
from standard input or files: every function takes ordinary Python values and
returns its result.