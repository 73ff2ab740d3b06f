"""Unbalanced binary search tree of products."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import suppress
from dataclasses import dataclass
from typing import Optional

from .product import Product


@dataclass
class Node:
    """A tree node holding one product."""

    item: Product
    left: Optional[Node] = None
    right: Optional[Node] = None


class ProductTree:
    """A binary search tree of products, keyed by name or by price.

    Products inserted with ``insert`` are ordered by name; those inserted
    with ``insert_by_price`` are ordered by price. The tree also records
    products in the order they were inserted.
    """

    def __init__(self) -> None:
        self.root: Optional[Node] = None
        self.chronological: list[Product] = []

    def is_empty(self) -> bool:
        return self.root is None

    def _attach(self, item: Product, goes_right) -> None:
        self.chronological.append(item)
        new = Node(item)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if goes_right(node.item):
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = new
                    return
                node = node.left

    def insert(self, item: Product) -> None:
        """Insert ordered by name; equal names go left."""
        self._attach(item, lambda current: current < item)

    def insert_by_price(self, item: Product) -> None:
        """Insert ordered by price; equal prices go left."""
        self._attach(item, lambda current: current.price < item.price)

    def _locate(self, item: Product, stop) -> tuple[Node, Optional[Node]]:
        current, parent = self.root, None
        while current is not None and not stop(current.item):
            parent = current
            current = current.left if item < current.item else current.right
        if current is None:
            raise KeyError(item)
        return current, parent

    def _unlink(self, current: Node, parent: Optional[Node]) -> None:
        if current.left is None or current.right is None:
            child = current.left if current.left is not None else current.right
            if parent is None:
                self.root = child
            elif parent.left is current:
                parent.left = child
            else:
                parent.right = child
            return
        successor_parent = None
        successor = current.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        current.item = successor.item
        if successor_parent is not None:
            successor_parent.left = successor.right
        else:
            current.right = successor.right

    def remove(self, item: Product) -> None:
        """Remove a product from a name-ordered tree.

        The walk stops at the first node sharing any field with ``item``.
        Nothing happens when no node has the item's name.
        """
        with suppress(ValueError):
            self.chronological.remove(item)
        if self.root is None or not self.search(item):
            return
        current, parent = self._locate(item, lambda p: not p.differs_in_all(item))
        self._unlink(current, parent)

    def remove_by_price(self, item: Product) -> None:
        """Remove the node whose price matches ``item``'s.

        Requires a node with the item's name to be reachable by name
        search; raises KeyError if the walk by name finds no matching price.
        """
        if self.root is None or not self.search(item):
            return
        current, parent = self._locate(item, lambda p: p.price == item.price)
        self._unlink(current, parent)

    def search(self, item: Product) -> bool:
        """Whether a node with the item's name is found walking by name."""
        node = self.root
        while node is not None:
            if item.name == node.item.name:
                return True
            node = node.left if item < node.item else node.right
        return False

    def search_by_price(self, item: Product) -> bool:
        """Whether a node with the item's price is found walking by price."""
        node = self.root
        while node is not None:
            if item.price == node.item.price:
                return True
            node = node.left if item.price < node.item.price else node.right
        return False

    def in_order(self) -> Iterator[Product]:
        """Products from leftmost to rightmost."""
        yield from self._walk(self.root, reverse=False)

    def reverse_order(self) -> Iterator[Product]:
        """Products from rightmost to leftmost."""
        yield from self._walk(self.root, reverse=True)

    def _walk(self, node: Optional[Node], reverse: bool) -> Iterator[Product]:
        stack: list[Node] = []
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right if reverse else node.left
            node = stack.pop()
            yield node.item
            node = node.left if reverse else node.right

    @staticmethod
    def _lines(prefix: str, items) -> str:
        return "".join(f"{prefix}{item}\n" for item in items)

    def format_chronological(self) -> str:
        return self._lines("", self.chronological)

    def format_ascending(self) -> str:
        return self._lines("item : ", self.in_order())

    def format_descending(self) -> str:
        return self._lines("item : ", self.reverse_order())

    def format_by_price_ascending(self) -> str:
        return self._lines("price : ", self.in_order())

    def format_by_price_descending(self) -> str:
        return self._lines("price : ", self.reverse_order())