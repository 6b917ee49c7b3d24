# drillbook

A library of compact, tested solutions to classic algorithm exercises,
grouped by topic. It is meant for study: read a solution, call it, and
check what it returns. It has no dependencies beyond the standard library.

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

| Module | Contents |
| --- | --- |
| `drillbook.nodes` | `ListNode`, `TreeNode`, `Node` (with `Node.from_level_order`), and helpers: `build_list`, `list_values`, `build_tree`, `inorder`, `preorder`, `postorder`, `is_mirror` |
| `drillbook.trees` | `inorder_traversal`, `is_valid_bst`, `odd_even_list` |
| `drillbook.sorting` | `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort` |
| `drillbook.arrays` | `trap`, `first_missing_positive`, `largest_rectangle_area`, `move_zeroes`, `find_duplicate`, `length_of_lis`, `increasing_triplet`, `reverse_string`, `top_k_frequent`, `intersect`, `four_sum_count`, `missing_number`, `wiggle_sort` |
| `drillbook.strings` | `is_match` (wildcards `?` and `*`), `min_window`, `is_anagram`, `fizz_buzz`, `first_uniq_char`, `word_break` |
| `drillbook.matrix` | `search_matrix`, `kth_smallest`, `game_of_life` |
| `drillbook.numbers` | `num_squares`, `is_power_of_three`, `get_sum`, `get_multi`, `count_primes`, `gcd`, `max_points`, `bottles`, `weight_num`, `coin_change` |
| `drillbook.graphs` | `can_finish_bfs`, `can_finish_dfs`, `find_order` |
| `drillbook.dp` | `seats`, `stamps`, `fruit`, `boat`, `job_plan`, `missile`, `sub_series`, `stack_sequences` |
| `drillbook.designs` | `RandomizedSet`, `ArrayShuffler`, `LinkedQueue`, `LinkedStack` |
| `drillbook.point24` | `judge_point24`, `calculate_string` |

## Examples

```python
from drillbook.arrays import trap
from drillbook.strings import is_match
from drillbook.nodes import build_tree
from drillbook.trees import inorder_traversal, is_valid_bst
from drillbook.numbers import coin_change, gcd

trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
is_match("adceb", "*a*b")                     # True
coin_change([1, 2, 5], 11)                    # 3
gcd(18, 24)                                   # 6

root = build_tree([2, 1, 3])                  # level-order, None for gaps
inorder_traversal(root)                       # [1, 2, 3]
is_valid_bst(root)                            # True
```

Trees are built from heap-indexed level-order lists: the children of slot
`i` are slots `2i+1` and `2i+2`, and a `None` slot has no node. The
traversals `inorder`, `preorder` and `postorder` are generators.

The sorts in `drillbook.sorting`, and `move_zeroes`, `reverse_string`,
`wiggle_sort` and `game_of_life`, change the list they are given in place
and return `None`.

`RandomizedSet` and `ArrayShuffler` take an optional `random.Random`
instance, so their random choices can be reproduced:

```python
import random
from drillbook.designs import RandomizedSet, LinkedStack

rs = RandomizedSet(random.Random(0))
rs.insert(1)
rs.insert(2)
rs.remove(1)
rs.get_random()     # 2

stack = LinkedStack()
stack.push(10)
stack.top()         # 10
len(stack)          # 1
```

`LinkedQueue.pop` and `LinkedStack.pop` return the removed item, or `None`
when empty; `top` and `RandomizedSet.get_random` raise `IndexError` when
there is nothing to return.

## Notes on behaviour

- `calculate_string` does not use ordinary operator precedence: a digit
  after `*` or `/` is folded into the number before it, and the remaining
  numbers are summed from the right, each taking the sign of the operator
  popped with it. `judge_point24` reads expressions this way and accepts a
  value that truncates to 24.
- `stamps` raises `ValueError` when the total cannot be reached.
- `coin_change` returns `-1` when the amount cannot be made, and also for
  answers of 10000 coins or more.
- `get_sum` and `get_multi` wrap like signed 32-bit arithmetic;
  `get_multi` rejects a negative multiplier.
- `word_break` returns its sentences in sorted order.

## What it does not do

drillbook is a library only. It has no command-line program and no
interactive driver; call the functions from Python.