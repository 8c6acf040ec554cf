# dsalgo

Plain-Python implementations of classic data structures and algorithms,
written to be read and studied as well as used. The package has no
dependencies beyond the standard library.

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

### Sorting — `dsalgo.sorting`

Each function sorts a mutable sequence in ascending order, in place, and
also returns that same sequence so it can be used in an expression:

- `bubble_sort(items)`
- `selection_sort(items)`
- `insertion_sort(items)`
- `shell_sort(items)` — gaps halve from `len(items) // 2` down to 1
- `merge_sort(items)`
- `quick_sort(items)` — partitions around the first element
- `heap_sort(items)` — builds a max-heap in place
- `radix_sort(items)` — least-significant-digit sort for non-negative
  integers; raises `ValueError` if any value is negative

All but `radix_sort` work on any mutually comparable values.

```python
from dsalgo.sorting import quick_sort

values = [42, 7, 19, 3, 88]
quick_sort(values)
print(values)  # [3, 7, 19, 42, 88]
```

### Binary heap — `dsalgo.heap`

`Heap(compare=operator.gt)` is an array-backed binary heap.
`compare(a, b)` returns `True` when `a` belongs nearer the top than `b`;
the default gives a max-heap, and `operator.lt` gives a min-heap.

- `push(value)` adds a value.
- `pop()` removes and returns the top value; raises `IndexError` when empty.
- `top()` returns the top value without removing it; raises `IndexError`
  when empty.
- `len(heap)`, truth testing, and iteration (in internal array order) are
  supported.

```python
from dsalgo.heap import Heap

heap = Heap()
for value in (1, 9, 5, 4, 17):
    heap.push(value)

print(heap.top())  # 17
print(heap.pop())  # 17
print(len(heap))   # 4
```

### AVL tree — `dsalgo.avl`

`AVLTree` is a self-balancing binary search tree holding distinct,
comparable values. Its nodes are `Node` objects reachable from `tree.root`.

- `insert(value)` returns `True` if the value was added, `False` if it was
  already present.
- `erase(value)` returns `True` if the value was removed, `False` if it was
  not present.
- Iteration yields values in ascending order; `len()` and `in` are
  supported.
- `is_balanced()` checks that no node's subtrees differ in height by more
  than one.

```python
from dsalgo.avl import AVLTree

tree = AVLTree()
for value in range(1, 10):
    tree.insert(value)
tree.erase(3)

print(list(tree))          # [1, 2, 4, 5, 6, 7, 8, 9]
print(5 in tree)           # True
print(tree.is_balanced())  # True
```

### Bitmap — `dsalgo.bitmap`

`BitMap(maxnum)` records which integers from 0 to `maxnum` are present,
using one bit per number. A negative `maxnum` raises `ValueError`.

- `insert(num)` returns `True` if newly added, `False` if already present.
- `erase(num)` returns `True` if removed, `False` if it was not present.
- Both raise `ValueError` for a number outside `0..maxnum`.
- `find(num)` and `num in bitmap` report presence; out-of-range numbers are
  simply reported absent.

```python
from dsalgo.bitmap import BitMap

seen = BitMap(6547)
seen.insert(23)       # True: newly added
seen.insert(23)       # False: already present
print(23 in seen)     # True
seen.erase(23)
print(seen.find(23))  # False
```

### Top-k selection — `dsalgo.top_k`

- `smallest_k(data, k)` returns the k smallest values, largest first,
  using a bounded max-heap.
- `largest_k(data, k)` returns the k largest values, smallest first,
  using a bounded min-heap.
- `largest_k_by(data, k, key)` returns the k values with the largest
  `key(value)`, in ascending key order.
- `quickselect_smallest(data, k)` rearranges `data` in place by
  quicksort-style partitioning so its first k items are the k smallest,
  and returns those k items in no particular order.
- `digit_sum(num)` is the sum of the decimal digits of a positive integer
  (0 for `num <= 0`), handy as a `key`.

Each selection function raises `ValueError` unless `0 <= k <= len(data)`.

```python
from dsalgo.top_k import digit_sum, largest_k, largest_k_by

data = [10, 31, 45, 56, 67, 32, 44, 89, 91, 112, 456]
print(largest_k(data, 3))                # [91, 112, 456]
print(largest_k_by(data, 2, digit_sum))  # [456, 89]
```

### Consistent hashing — `dsalgo.consistent_hash`

`ConsistentHash(vnode_count=10)` is a hash ring. `add_node(node)` places
`vnode_count` `VirtualNode` entries on the ring for a `PhysicalNode(ip,
source="source")`. `find(key)` returns the `describe()` text
(`"<source> in <ip>"`) of the node owning the first ring position at or
after the key's hash, wrapping around to the start. Positions come from a
stable 64-bit BLAKE2b hash, so results are the same across processes.

`find` on a ring with no nodes raises `LookupError`. `len(ring)` is the
number of positions on the ring. A `vnode_count` below 1 raises
`ValueError`.

```python
from dsalgo.consistent_hash import ConsistentHash, PhysicalNode

ring = ConsistentHash()
ring.add_node(PhysicalNode("192.168.1.1", "Node1"))
ring.add_node(PhysicalNode("192.168.1.2", "Node2"))

print(ring.find("http://example.com/file1"))  # e.g. "Node2 in 192.168.1.2"
```

## What it does not do

`dsalgo` is a library only: it installs no command-line program, and its
data structures live in memory with no persistence. The consistent-hash
ring supports adding nodes but not removing them.