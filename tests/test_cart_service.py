"""Tests for cart line-item merging and removal."""

import random

import pytest

from app.services.cart_service import CartManager
from app.services.state_cell import StateRegistry, encode_value


def _cart(cookies=None):
    registry = StateRegistry(cookies or {})
    return CartManager(registry), registry


def _lines(cart):
    return [(item.book_id, item.quantity) for item in cart.items()]


class TestAddItem:
    def test_add_new_item(self):
        cart, _ = _cart()
        cart.add_item(1, 2)

        assert _lines(cart) == [(1, 2)]
        assert cart.count() == 1

    def test_add_existing_item_merges_quantity(self):
        cart, _ = _cart()
        cart.add_item(1, 2)
        cart.add_item(1, 3)

        assert _lines(cart) == [(1, 5)]

    def test_two_adds_equal_one_combined_add(self):
        split, _ = _cart()
        split.add_item(4, 2)
        split.add_item(4, 5)

        combined, _ = _cart()
        combined.add_item(4, 7)

        assert _lines(split) == _lines(combined)

    def test_items_keep_insertion_order(self):
        cart, _ = _cart()
        cart.add_item(3, 1)
        cart.add_item(1, 1)
        cart.add_item(3, 1)

        assert _lines(cart) == [(3, 2), (1, 1)]

    def test_negative_quantity_adjusts_existing_line(self):
        cart, _ = _cart()
        cart.add_item(1, 5)
        cart.add_item(1, -2)

        assert _lines(cart) == [(1, 3)]

    def test_adjusting_to_zero_drops_line(self):
        cart, _ = _cart()
        cart.add_item(1, 2)
        cart.add_item(2, 1)

        cart.add_item(1, -2)

        assert _lines(cart) == [(2, 1)]

    def test_adjusting_below_zero_drops_line(self):
        cart, _ = _cart()
        cart.add_item(1, 2)

        cart.add_item(1, -5)

        assert _lines(cart) == []

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_non_positive_add_on_missing_book_adds_nothing(self, quantity):
        cart, _ = _cart()
        cart.add_item(1, 1)

        cart.add_item(5, quantity)

        assert _lines(cart) == [(1, 1)]

    def test_count_is_distinct_lines_not_units(self):
        cart, _ = _cart()
        cart.add_item(1, 10)
        cart.add_item(2, 1)

        assert cart.count() == 2

    def test_mutation_marks_cell_dirty(self):
        cart, registry = _cart()
        cart.add_item(1, 1)

        assert registry.bind("cart").dirty is True


class TestRemoveItem:
    def test_remove_missing_item_is_noop(self):
        cart, registry = _cart()
        cart.add_item(1, 1)
        registry.bind("cart").dirty = False

        cart.remove_item(99, 1)

        assert _lines(cart) == [(1, 1)]
        assert registry.bind("cart").dirty is False

    def test_partial_remove_reduces_quantity_only(self):
        cart, _ = _cart()
        cart.add_item(1, 5)
        cart.add_item(2, 2)

        cart.remove_item(1, 3)

        assert _lines(cart) == [(1, 2), (2, 2)]

    def test_remove_full_quantity_drops_line(self):
        cart, _ = _cart()
        cart.add_item(1, 2)
        cart.add_item(2, 2)

        cart.remove_item(1, 2)

        assert _lines(cart) == [(2, 2)]

    def test_remove_more_than_quantity_drops_line(self):
        cart, _ = _cart()
        cart.add_item(1, 2)

        cart.remove_item(1, 10)

        assert _lines(cart) == []
        assert cart.count() == 0

    def test_clear_empties_cart(self):
        cart, _ = _cart()
        cart.add_item(1, 2)
        cart.add_item(2, 1)

        cart.clear()

        assert cart.count() == 0


class TestPersistedCart:
    def test_cart_is_seeded_from_cookie(self):
        raw = encode_value([{"bookId": 8, "quantity": 3}])
        cart, _ = _cart({"cart": raw})

        assert _lines(cart) == [(8, 3)]

    def test_duplicate_cookie_lines_are_merged(self):
        raw = encode_value(
            [
                {"bookId": 2, "quantity": 1},
                {"bookId": 7, "quantity": 2},
                {"bookId": 2, "quantity": 3},
            ]
        )
        cart, registry = _cart({"cart": raw})

        assert _lines(cart) == [(2, 4), (7, 2)]
        assert registry.bind("cart").dirty is True

    def test_non_positive_cookie_lines_are_dropped(self):
        raw = encode_value(
            [
                {"bookId": 1, "quantity": 0},
                {"bookId": 2, "quantity": -4},
                {"bookId": 3, "quantity": 1},
            ]
        )
        cart, _ = _cart({"cart": raw})

        assert _lines(cart) == [(3, 1)]

    def test_clean_cookie_is_left_untouched(self):
        raw = encode_value([{"bookId": 1, "quantity": 2}])
        _, registry = _cart({"cart": raw})

        assert registry.bind("cart").dirty is False

    def test_malformed_cart_value_is_reset(self):
        raw = encode_value({"bookId": 8})
        cart, registry = _cart({"cart": raw})

        assert cart.count() == 0
        assert registry.bind("cart").dirty is True

    def test_two_managers_in_one_registry_share_state(self):
        registry = StateRegistry({})
        first = CartManager(registry)
        second = CartManager(registry)

        first.add_item(1, 1)

        assert second.count() == 1


def test_random_sequences_keep_unique_positive_lines():
    rng = random.Random(1234)

    for _ in range(200):
        cart, _ = _cart()
        for _ in range(rng.randint(1, 30)):
            book_id = rng.randint(1, 5)
            quantity = rng.randint(-4, 4)
            if rng.random() < 0.6:
                cart.add_item(book_id, quantity)
            else:
                cart.remove_item(book_id, quantity)

        book_ids = [item.book_id for item in cart.items()]
        assert len(book_ids) == len(set(book_ids))
        assert all(item.quantity > 0 for item in cart.items())
