# algobox

A collection of classic algorithms and data structures in plain Python, with
no third-party dependencies. Requires Python 3.10 or later.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.sorting` | `insertion_sort`, `selection_sort`, `heap_sort`, `merge` |
| `algobox.inversions` | `count_inversions` (bottom-up merge sort) |
| `algobox.searching` | `binary_search`, `find_substring`, `max_element`, `sum_of_squares` |
| `algobox.numeric` | `ackermann`, `binary_power`, `binomial`, `average_cube`, `trapezoid_area` |
| `algobox.sequences` | `Item`, `remove_even`, `count_subarrays_at_most`, `longest_increasing_run`, `greedy_knapsack_value`, `edit_distance` |
| `algobox.graph` | `adjacency_to_incidence` |
| `algobox.linked` | `ListNode`, `LinkedList`, `delete_duplicates`, `Stack` |
| `algobox.heap` | `Heap` (binary max-heap), `TernaryHeap` (three children per node) |
| `algobox.aho_corasick` | `AhoCorasick` multi-pattern matcher |
| `algobox.kmp` | `prefix_function`, `find_occurrences` |
| `algobox.bignum` | `karatsuba` multiplication on decimal digits |
| `algobox.avl` | `AVLTree` |
| `algobox.hashtable` | `HashTable` with separate chaining, `is_prime`, `select_table_size` |
| `algobox.btree` | `BTree` of minimum degree `t` |

A few behaviours worth knowing:

- The sorting functions return a new sorted list and leave their input alone.
- `binary_search` returns the first index of the element in a sorted
  sequence, or `-1`.
- `Heap.pop`, `Heap.top`, `TernaryHeap.pop_max`, `Stack.pop` and `Stack.peek`
  raise `IndexError` when empty; `max_element` raises `ValueError` on an
  empty input.
- `LinkedList.add` inserts at the front, so `LinkedList([30, 20, 10])`
  iterates as `10, 20, 30`.
- `AhoCorasick.search` yields `(end_index, word)` pairs; it builds the
  automaton on first use if `build()` was not called.
- `find_occurrences` returns 0-based start positions, overlaps included, and
  raises `ValueError` for an empty pattern.
- `HashTable` keeps duplicates; `remove` drops one occurrence.
- `BTree.erase` raises `KeyError` when the key is absent.

## Examples

```python
from algobox.sorting import heap_sort
from algobox.searching import binary_search
from algobox.aho_corasick import AhoCorasick
from algobox.avl import AVLTree
from algobox.bignum import karatsuba

print(heap_sort([4, 2, 1, 0, 12]))              # [0, 1, 2, 4, 12]

print(binary_search([0, 2, 4, 5, 7, 8], 7))      # 4

matcher = AhoCorasick()
for word in ("test", "li", "line", "_", "t"):
    matcher.add_word(word)
matcher.build()
print(list(matcher.search("test_line!")))
# [(0, 't'), (3, 'test'), (3, 't'), (4, '_'), (6, 'li'), (8, 'line')]

tree = AVLTree()
for key in (10, 20, 30):
    tree.insert(key)
print(20 in tree, tree.balance(), list(tree))    # True 0 [10, 20, 30]

print(karatsuba(1234, 5678))                     # 7006652
```

## Command-line tools

Several modules come with a small command that reads an input file and
writes the result to an output file:

```
algobox-inversions INPUT OUTPUT   # a count, then that many integers -> number of inversions
algobox-kmp INPUT OUTPUT          # pattern (first line), text (second line) -> count and 1-based positions
algobox-avl INPUT OUTPUT          # a count, then +X / -X / ?X operations on an AVL tree
algobox-hashtable INPUT OUTPUT    # a count, then +X / -X / ?X operations on a hash table
algobox-btree INPUT OUTPUT        # degree t, a count, then +X / -X / ?X operations on a B-tree
```

After each `+` or `-`, `algobox-avl` writes the root balance (lines ended by
`\r\n`) and `algobox-btree` writes the root's key count followed by its keys.
Each `?` writes `true` or `false`; `algobox-hashtable` writes only the query
answers. The exit status is non-zero when arguments are missing or a file
cannot be read or written; `algobox-btree` also exits with 4 if asked to
delete a key that is not in the tree.

`algobox-karatsuba` reads two non-negative integers from standard input, one
per line, and prints their product:

```
printf '1234\n5678\n' | algobox-karatsuba
```