"""Store product record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A product with a name, a category and an integer price.

    Equality compares all three fields; ordering compares names only.
    """

    name: str
    category: str
    price: int

    def __lt__(self, other: Product) -> bool:
        return self.name < other.name

    def __gt__(self, other: Product) -> bool:
        return self.name > other.name

    def __str__(self) -> str:
        return f"Product: {self.name}, Category: {self.category}, Price: {self.price}"

    def differs_in_all(self, other: Product) -> bool:
        """True only when name, category and price all differ."""
        return (
            self.name != other.name
            and self.category != other.category
            and self.price != other.price
        )