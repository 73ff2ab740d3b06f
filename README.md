# marco_store

A small product catalogue library. A product has a name, a category and an
integer price. Products can be kept in a binary heap (cheapest or dearest at
the root) or in a binary search tree (keyed by name or by price). Both
structures also remember the order in which products were added.

## Installation

```
pip install .
```

## Products

```python
from marco_store.product import Product

apple = Product("apple", "fruit", 3)
print(apple)
# Product: apple, Category: fruit, Price: 3
```

`Product` is a frozen dataclass. Two products are equal when name, category
and price all match; `<` and `>` compare names only.
`a.differs_in_all(b)` is true only when the name, the category and the price
all differ.

## Heaps

```python
from marco_store.heaps import Heap
from marco_store.product import Product

cheapest_first = Heap(max_heap=False)
cheapest_first.insert(Product("milk", "dairy", 5))
cheapest_first.insert(Product("bread", "bakery", 2))

len(cheapest_first)                            # 2
cheapest_first.items()                         # heap array order, cheapest first
cheapest_first.chronological_items()           # order of insertion
cheapest_first.sorted_by_name(ascending=True)
cheapest_first.sorted_by_price(ascending=False)
top = cheapest_first.remove()                  # the bread
```

`Heap(max_heap=True)` keeps the dearest product at the root instead.

`remove()` takes off and returns the product at the root, and raises
`IndexError` when the heap is empty. Note that the entry it drops from the
insertion record is the product that was last in the heap array, not
necessarily the one returned.

`sorted_by_name()` and `sorted_by_price()` return new lists and leave the
heap unchanged. `display()` and `display_chronological()` print one product
per line, in heap array order and in insertion order.

## Binary search trees

```python
from marco_store.bst import ProductTree
from marco_store.product import Product

by_name = ProductTree()
by_name.insert(Product("milk", "dairy", 5))
by_name.insert(Product("bread", "bakery", 2))
by_name.search(Product("milk", "dairy", 5))    # True
print(by_name.format_ascending(), end="")
# item : Product: bread, Category: bakery, Price: 2
# item : Product: milk, Category: dairy, Price: 5

by_price = ProductTree()
by_price.insert_by_price(Product("milk", "dairy", 5))
by_price.insert_by_price(Product("bread", "bakery", 2))
by_price.search_by_price(Product("eggs", "dairy", 2))  # True
print(by_price.format_by_price_descending(), end="")
# price : Product: milk, Category: dairy, Price: 5
# price : Product: bread, Category: bakery, Price: 2
```

- `insert()` orders by name and `insert_by_price()` by price; equal keys go
  to the left. Use one of them per tree.
- `search()` walks the tree by name and `search_by_price()` by price.
- `remove()` deletes from a name-ordered tree and also drops the product from
  the insertion record. It does nothing when no node has the product's name.
- `remove_by_price()` deletes the node with the product's price. It first
  checks with a name search and does nothing if that fails; it raises
  `KeyError` if the walk then finds no node with that price.
- `in_order()` and `reverse_order()` yield the stored products from leftmost
  to rightmost and back.
- `format_chronological()`, `format_ascending()`, `format_descending()`,
  `format_by_price_ascending()` and `format_by_price_descending()` return
  the listings as text, one product per line. `is_empty()` tells whether the
  tree has any nodes.

## What it does not do

This is a library only. There is no command-line program or interactive
menu, and products are kept in memory: nothing is read from or saved to
files. The trees are not self-balancing.

## Running the tests

```
pip install .[test]
pytest
```