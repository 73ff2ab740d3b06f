"""Product catalogue kept in binary heaps and binary search trees."""

__version__ = "0.1.0"
__all__ = ["bst", "heaps", "product"]