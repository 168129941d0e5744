"""Bags of integers: an array-backed bag and a binary-search-tree bag."""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class Bag(ABC):
    """A container of integers that can be filled, shown and emptied."""

    @abstractmethod
    def insert(self, item: int) -> None:
        """Add one item."""

    @abstractmethod
    def insert_many(self, items: Iterable[int]) -> None:
        """Add every item of ``items``."""

    @abstractmethod
    def render(self) -> str:
        """Return the contents as text, each value followed by a space."""

    def print(self) -> None:
        """Write the rendered contents and a newline to standard output."""
        sys.stdout.write(self.render() + "\n")

    @abstractmethod
    def clear(self) -> None:
        """Remove every item."""


class SearchableBag(Bag):
    """A bag that can answer whether it holds a value."""

    @abstractmethod
    def has(self, item: int) -> bool:
        """Return True if ``item`` is in the bag."""

    def __contains__(self, item: object) -> bool:
        return isinstance(item, int) and self.has(item)


@dataclass
class TreeNode:
    """A node of a binary search tree."""

    value: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _copy_tree(node: TreeNode | None) -> TreeNode | None:
    if node is None:
        return None
    return TreeNode(node.value, _copy_tree(node.left), _copy_tree(node.right))


def _walk_in_order(node: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _walk_pre_order(node: TreeNode | None) -> Iterator[TreeNode]:
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


class ArrayBag(Bag):
    """A bag that keeps items in insertion order, duplicates included."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._data: list[int] = list(items)

    def insert(self, item: int) -> None:
        self._data.append(item)

    def insert_many(self, items: Iterable[int]) -> None:
        self._data.extend(items)

    def render(self) -> str:
        return "".join(f"{value} " for value in self._data)

    def clear(self) -> None:
        self._data.clear()

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def copy(self) -> ArrayBag:
        """Return an independent bag of the same type with the same items."""
        return type(self)(self._data)


class TreeBag(Bag):
    """A bag kept as an unbalanced binary search tree; duplicates are dropped."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._root: TreeNode | None = None
        self.insert_many(items)

    def insert(self, item: int) -> None:
        logger.debug("create node: %d", item)
        new_node = TreeNode(item)
        if self._root is None:
            self._root = new_node
            return
        current = self._root
        while True:
            if item < current.value:
                if current.left is None:
                    current.left = new_node
                    return
                current = current.left
            elif item > current.value:
                if current.right is None:
                    current.right = new_node
                    return
                current = current.right
            else:
                logger.debug("duplicate value: %d", item)
                return

    def insert_many(self, items: Iterable[int]) -> None:
        for item in items:
            self.insert(item)

    def render(self) -> str:
        # Zero values are held but not shown.
        return "".join(f"{value} " for value in self if value != 0)

    def clear(self) -> None:
        for node in _walk_pre_order(self._root):
            logger.debug("destroying value: %d", node.value)
        self._root = None

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in _walk_in_order(self._root))

    def copy(self) -> TreeBag:
        """Return an independent bag of the same type with a copied tree."""
        duplicate = type(self)()
        duplicate._root = _copy_tree(self._root)
        return duplicate

    def extract_tree(self) -> TreeNode | None:
        """Detach and return the root node, leaving the bag empty."""
        root, self._root = self._root, None
        return root

    def set_tree(self, tree: TreeNode | None) -> None:
        """Replace the whole tree with ``tree``."""
        self.clear()
        self._root = tree


class SearchableArrayBag(ArrayBag, SearchableBag):
    """An array bag with a linear membership search."""

    def has(self, item: int) -> bool:
        return item in self._data


class SearchableTreeBag(TreeBag, SearchableBag):
    """A tree bag with a binary search for membership."""

    def has(self, item: int) -> bool:
        current = self._root
        while current is not None:
            if current.value == item:
                return True
            current = current.left if item < current.value else current.right
        return False