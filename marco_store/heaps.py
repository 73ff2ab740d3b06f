"""Binary heap of products keyed by price."""

from __future__ import annotations

from contextlib import suppress

from .product import Product


class Heap:
    """A min- or max-heap of products ordered by price.

    Also keeps the products in the order they were inserted.
    """

    def __init__(self, max_heap: bool) -> None:
        self.max_heap = max_heap
        self._heap: list[Product] = []
        self._chronological: list[Product] = []

    def __len__(self) -> int:
        return len(self._heap)

    def _out_of_order(self, upper: Product, lower: Product) -> bool:
        if self.max_heap:
            return upper.price < lower.price
        return upper.price > lower.price

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index:
            parent = (index - 1) // 2
            if not self._out_of_order(heap[parent], heap[index]):
                break
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            target = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._out_of_order(heap[target], heap[child]):
                    target = child
            if target == index:
                return
            heap[index], heap[target] = heap[target], heap[index]
            index = target

    def insert(self, item: Product) -> None:
        """Add a product to the heap."""
        self._heap.append(item)
        self._chronological.append(item)
        self._sift_up(len(self._heap) - 1)

    def remove(self) -> Product:
        """Remove and return the top of the heap.

        The entry dropped from the insertion record is the heap's last
        element, not the removed top.
        """
        if not self._heap:
            raise IndexError("Heap is empty!")
        last = self._heap[-1]
        with suppress(ValueError):
            self._chronological.remove(last)
        top = self._heap[0]
        self._heap[0] = last
        self._heap.pop()
        if self._heap:
            self._sift_down(0)
        return top

    def items(self) -> list[Product]:
        """Products in heap array order."""
        return list(self._heap)

    def chronological_items(self) -> list[Product]:
        """Products in insertion order."""
        return list(self._chronological)

    def sorted_by_name(self, ascending: bool) -> list[Product]:
        return sorted(self._heap, key=lambda p: p.name, reverse=not ascending)

    def sorted_by_price(self, ascending: bool) -> list[Product]:
        return sorted(self._heap, key=lambda p: p.price, reverse=not ascending)

    def display(self) -> None:
        """Print the products in heap array order."""
        for item in self._heap:
            print(item)

    def display_chronological(self) -> None:
        """Print the products in insertion order."""
        for item in self._chronological:
            print(item)