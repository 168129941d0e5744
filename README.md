# polybag

A small collection of value types and integer containers.

- `polybag.bigint.BigInt` is an immutable non-negative integer that is kept as
  a string of decimal digits. You can build one from an `int`, a digit string
  (leading zeros are removed) or another `BigInt`. Negative numbers raise
  `ValueError`. Strings that are not plain digits also raise `ValueError`.
  Booleans and other types raise `TypeError`. It supports `+`, the comparison
  operators, `int()`, `str()` and hashing. Shifts count decimal digits: `x << n`
  appends `n` zeros and `x >> n` drops the last `n` digits. A shift of `n` or
  more digits gives `0`. A plain `int` may be used as the other operand of
  `+` and of the comparisons.
- `polybag.vect2.Vect2` is a mutable pair of integers `x` and `y`. It supports
  `+`, `-`, multiplication by an integer on either side, and the in-place forms
  `+=`, `-=` and `*=`. It also supports `==`, iteration and indexing. Index `0`
  is `x`, and any other index is `y`, for both reading and writing. It prints
  as `{x, y}`. It is not hashable.
- `polybag.bags` holds the bag types:
  - `Bag` and `SearchableBag` are abstract bases. They provide `insert`,
    `insert_many`, `render`, `print` and `clear`. `SearchableBag` adds `has`
    and `in`.
  - `ArrayBag` keeps items in insertion order, duplicates included. It
    supports `len()`, iteration and `copy()`.
  - `TreeBag` is an unbalanced binary search tree. It ignores duplicates and
    iterates in ascending order. `render()` leaves zero values out, even
    though the bag still holds them. It also provides `copy()`, plus
    `extract_tree()` and `set_tree()` for working with the root `TreeNode`
    directly.
  - `SearchableArrayBag` searches by a linear scan. `SearchableTreeBag`
    searches the tree.
- `polybag.bagset.BagSet` is a set view over any searchable bag. It only
  inserts an item when the bag does not already hold it. The bag is shared,
  not copied, and is available as the `bag` property.

`render()` writes each value followed by a space. `print()` writes the
rendered text and a newline to standard output.

## Install

```
pip install .
```

## Examples

```python
from polybag.bigint import BigInt
from polybag.vect2 import Vect2
from polybag.bags import SearchableArrayBag, SearchableTreeBag
from polybag.bagset import BagSet

n = BigInt("0001234")
print(n + BigInt(66))     # 1300
print(n << 3)             # 1234000
print(n >> 2)             # 12
print(n > 999)            # True

v = Vect2(1, 2)
v += Vect2(10, 20)
print(v * 2)              # {22, 44}
v[0] = 7
print(list(v))            # [7, 22]

bag = SearchableArrayBag()
bag.insert_many([3, 1, 3])
print(repr(bag.render())) # '3 1 3 '
print(3 in bag)           # True

tree = SearchableTreeBag([5, 2, 8, 2])
print(list(tree))         # [2, 5, 8]

s = BagSet(SearchableArrayBag())
s.insert(5)
s.insert(5)
print(repr(s.render()))   # '5 '
```

## Command line

```
polybag 5 3 8 1
```

The command reads each argument as an integer in a lenient way. It takes a
leading integer if there is one and reads anything else as `0`. With no
arguments it exits with status 1.

It inserts each number into a tree bag and into an array bag, then prints
both bags. For each number `n`, it reports whether each bag holds `n` and
`n - 1`, in lines such as `busca a t: 5 --> 1`.

Next it empties both bags and prints an empty copy of the array bag. It then
runs the numbers through set views of the two bags. For each number, it
inserts the number into both sets and prints the array set, the array bag
and the tree set. It then clears the array set and refills it with
`1 2 3 4`.

## What it does not do

`BigInt` has no subtraction, multiplication or division, and it cannot hold
negative values. The bags hold integers only. Nothing is saved to disk. The
command is a demonstration run over its arguments, not an interactive tool.