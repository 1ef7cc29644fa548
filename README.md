# cpkit

A small library of classic algorithms and data structures, written in plain
Python with no dependencies beyond the standard library.

## Installation

```
pip install cpkit
```

To run the tests:

```
pip install "cpkit[test]"
pytest
```

## Modules

### `cpkit.backtracking`

Generators that enumerate results in backtracking order.

- `combinations(data, r)` yields each `r`-element combination of `data` as a
  tuple, in index order. A negative `r`, or one larger than `len(data)`,
  yields nothing.
- `permutations(text)` yields every arrangement of a string. The strings come
  from swapping positions, so they are not in lexicographic order. An empty
  string yields nothing.
- `subsets(data)` yields every subset as a tuple. At each step it includes
  the item first and then leaves it out.

### `cpkit.dp`

- `longest_common_subsequence(a, b)` returns one longest common subsequence
  of two strings.
- `longest_increasing_subsequence_length(values)` returns the length of the
  longest strictly increasing subsequence.

### `cpkit.graph`

Both functions take 1-based node numbers and an iterable of undirected
edges. They return the nodes of a path from node 1 to `node_count`, or
`None` when `node_count` cannot be reached.

- `bfs_path(node_count, edges)` takes edges as `(u, v)` and returns a path
  with the fewest edges.
- `dijkstra_path(node_count, edges)` takes edges as `(u, v, weight)` and
  returns a path with the least total weight.

### `cpkit.kmp`

- `build_lps(pattern)` returns the prefix-function table. It raises
  `ValueError` if the pattern is empty.
- `find_all(text, pattern)` returns the start index of every match,
  overlapping matches included.

### `cpkit.bigint`

Arithmetic on non-negative integers written as decimal digit strings. Every
function raises `ValueError` if an operand is empty or has a character that
is not a digit.

- `larger(a, b)` returns the larger operand, or `None` if the two are equal.
- `to_int(a)` returns the value as a Python `int`.
- `add(a, b)` returns the sum. Leading zeros in the operands are kept.
- `subtract(a, b)` returns `a - b` without leading zeros. A negative result
  starts with `-`.
- `multiply(a, b)` returns the product without leading zeros.
- `remainder(a, b)` returns `a` modulo the positive integer `b`. It raises
  `ZeroDivisionError` if `b` is 0 and `ValueError` if `b` is negative.

### `cpkit.ordered_set`

`OrderedMultiset(values=())` is a sorted collection that keeps duplicates.
It supports:

- `add(value)` and `discard(value)`. `discard` removes one occurrence and
  does nothing if the value is absent.
- `find_by_order(k)` returns the element of rank `k`, counting from 0. It
  raises `IndexError` if `k` is out of range.
- `order_of_key(value)` returns the number of elements strictly smaller
  than `value`.
- `lower_bound(value)` returns the first element `>= value`, or `None`.
- `upper_bound(value)` returns the first element `> value`, or `None`.
- `iter()`, `len()` and `in`.

### `cpkit.hashing`

- `splitmix64(x)` returns the SplitMix64 mix of `x`, taken as an unsigned
  64-bit value.
- `SeededHasher(seed=None)` is a callable that hashes integer keys with
  `splitmix64` after adding a fixed seed. When no seed is given, the seed
  comes from a monotonic clock, so the hash values cannot be known in
  advance.

## Examples

```python
from cpkit.backtracking import combinations, subsets
from cpkit.kmp import find_all
from cpkit.bigint import multiply, subtract
from cpkit.ordered_set import OrderedMultiset

list(combinations([1, 2, 3], 2))        # [(1, 2), (1, 3), (2, 3)]
list(subsets([1, 2]))                   # [(1, 2), (1,), (2,), ()]
find_all("abababa", "aba")              # [0, 2, 4]
multiply("656545", "455")               # "298727975"
subtract("5", "12")                     # "-7"

ms = OrderedMultiset([1, 10, 2, 7, 2])
list(ms)                                # [1, 2, 2, 7, 10]
ms.order_of_key(6)                      # 3
ms.find_by_order(3)                     # 7
```

## What it does not do

cpkit is a library only. It has no command-line program, and it does not
read problem input from standard input or write answers to standard output.
Your own code parses the input and calls these functions.