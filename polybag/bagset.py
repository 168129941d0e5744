"""A set of integers built on top of any searchable bag."""

from __future__ import annotations

from collections.abc import Iterable

from polybag.bags import SearchableBag


class BagSet(SearchableBag):
    """A view over a searchable bag that refuses to store duplicates.

    The bag is shared, not copied: changes made through the set are seen
    in the bag and the other way round.
    """

    def __init__(self, bag: SearchableBag) -> None:
        if not isinstance(bag, SearchableBag):
            raise TypeError(
                f"BagSet needs a SearchableBag, not {type(bag).__name__}"
            )
        self._bag = bag

    def insert(self, item: int) -> None:
        """Add ``item`` unless the bag already holds it."""
        if not self._bag.has(item):
            self._bag.insert(item)

    def insert_many(self, items: Iterable[int]) -> None:
        """Add every item of ``items`` that is not held yet."""
        for item in items:
            self.insert(item)

    def render(self) -> str:
        return self._bag.render()

    def clear(self) -> None:
        self._bag.clear()

    def has(self, item: int) -> bool:
        return self._bag.has(item)

    @property
    def bag(self) -> SearchableBag:
        """The bag that holds the values."""
        return self._bag