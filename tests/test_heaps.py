import pytest

from marco_store.heaps import Heap
from marco_store.product import Product

PRODUCTS = [
    Product("milk", "dairy", 5),
    Product("bread", "bakery", 2),
    Product("apple", "fruit", 9),
    Product("cheese", "dairy", 7),
    Product("rice", "grain", 1),
    Product("eggs", "dairy", 4),
]


def build(max_heap):
    h = Heap(max_heap)
    for p in PRODUCTS:
        h.insert(p)
    return h


def assert_heap_property(h):
    items = h.items()
    for i, item in enumerate(items):
        for child in (2 * i + 1, 2 * i + 2):
            if child < len(items):
                if h.max_heap:
                    assert item.price >= items[child].price
                else:
                    assert item.price <= items[child].price


@pytest.mark.parametrize("max_heap", [True, False])
def test_heap_property_holds(max_heap):
    h = build(max_heap)
    assert len(h) == len(PRODUCTS)
    assert_heap_property(h)


def test_max_heap_top_is_most_expensive():
    h = build(True)
    assert h.items()[0].price == max(p.price for p in PRODUCTS)


def test_min_heap_top_is_cheapest():
    h = build(False)
    assert h.items()[0].price == min(p.price for p in PRODUCTS)


@pytest.mark.parametrize("max_heap", [True, False])
def test_repeated_remove_yields_sorted_prices(max_heap):
    h = build(max_heap)
    removed = []
    while len(h):
        removed.append(h.remove().price)
        assert_heap_property(h)
    assert removed == sorted((p.price for p in PRODUCTS), reverse=max_heap)


def test_remove_empty_raises():
    h = Heap(True)
    with pytest.raises(IndexError):
        h.remove()


def test_chronological_is_insert_order():
    h = build(True)
    assert h.chronological_items() == PRODUCTS


def test_remove_drops_last_heap_element_from_chronological():
    h = build(True)
    last = h.items()[-1]
    top = h.items()[0]
    assert h.remove() == top
    chrono = h.chronological_items()
    assert last not in chrono
    assert top in chrono
    assert len(chrono) == len(PRODUCTS) - 1


def test_sorted_by_name():
    h = build(False)
    names = [p.name for p in PRODUCTS]
    assert [p.name for p in h.sorted_by_name(True)] == sorted(names)
    assert [p.name for p in h.sorted_by_name(False)] == sorted(names, reverse=True)


def test_sorted_by_price():
    h = build(True)
    prices = [p.price for p in PRODUCTS]
    assert [p.price for p in h.sorted_by_price(True)] == sorted(prices)
    assert [p.price for p in h.sorted_by_price(False)] == sorted(prices, reverse=True)


def test_sorting_does_not_change_heap():
    h = build(True)
    before = h.items()
    h.sorted_by_name(True)
    h.sorted_by_price(False)
    assert h.items() == before


def test_display(capsys):
    h = build(True)
    h.display()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(p) for p in h.items()]


def test_display_chronological(capsys):
    h = build(False)
    h.display_chronological()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(p) for p in PRODUCTS]