"""Command that exercises the searchable bags and the set built on them."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from polybag.bags import SearchableArrayBag, SearchableTreeBag
from polybag.bagset import BagSet

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_REFILL = (1, 2, 3, 4)


def _atoi(text: str) -> int:
    """Read a leading integer the lenient way: junk yields 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _report(label: str, value: int, found: bool) -> None:
    print(f"busca a {label}: {value} --> {int(found)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Fill both bag kinds with the given numbers, query them and show the sets.

    Returns 1 when no numbers are given, 0 otherwise.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 1
    numbers = [_atoi(arg) for arg in args]

    tree = SearchableTreeBag()
    array = SearchableArrayBag()
    for number in numbers:
        tree.insert(number)
        array.insert(number)
    tree.print()
    array.print()

    for number in numbers:
        for value in (number, number - 1):
            _report("t", value, tree.has(value))
            _report("a", value, array.has(value))

    tree.clear()
    array.clear()

    snapshot = array.copy()
    snapshot.print()
    snapshot.has(1)

    array_set = BagSet(array)
    tree_set = BagSet(tree)
    for number in numbers:
        tree_set.insert(number)
        array_set.insert(number)

        array_set.has(number)
        array_set.print()
        array_set.bag.print()
        tree_set.print()
        array_set.clear()
        array_set.insert_many(_REFILL)
        print()

    return 0


if __name__ == "__main__":
    sys.exit(main())