"""
Tests for the Cart Engine — reservations kept in lockstep with stock.
"""

import pytest

from core.errors import InsufficientStock, NotFound, ValidationError
from engines.cart.services import Cart
from engines.inventory.services import InventoryStore


def _setup(quantity=10):
    inventory = InventoryStore()
    item = inventory.add_item("Item A", 100, quantity, 10)
    return inventory, Cart(inventory), item.item_id


def _conserved(inventory, cart, item_id, original):
    return inventory.available(item_id) + cart.reserved_quantity(item_id) == original


class TestAddItem:
    def test_add_reserves_stock(self):
        inventory, cart, item_id = _setup()
        line = cart.add_item(item_id, 2)
        assert line.quantity == 2
        assert line.price == inventory.get_item(item_id).price
        assert inventory.available(item_id) == 8

    def test_add_same_item_merges_line(self):
        inventory, cart, item_id = _setup()
        cart.add_item(item_id, 2)
        line = cart.add_item(item_id, 3)
        assert line.quantity == 5
        assert len(cart.lines()) == 1
        assert _conserved(inventory, cart, item_id, 10)

    def test_add_over_stock_leaves_cart_unchanged(self):
        inventory, cart, item_id = _setup(quantity=3)
        cart.add_item(item_id, 2)
        with pytest.raises(InsufficientStock):
            cart.add_item(item_id, 2)
        assert cart.line(item_id).quantity == 2
        assert inventory.available(item_id) == 1

    @pytest.mark.parametrize("qty", [0, -1, 1.5, True, "2"])
    def test_non_positive_or_non_integer_qty_rejected(self, qty):
        inventory, cart, item_id = _setup()
        with pytest.raises(ValidationError):
            cart.add_item(item_id, qty)
        assert cart.is_empty
        assert inventory.available(item_id) == 10

    def test_add_unknown_item(self):
        _, cart, _ = _setup()
        with pytest.raises(NotFound):
            cart.add_item(99, 1)
        assert cart.is_empty

    def test_line_keeps_price_snapshot(self):
        inventory = InventoryStore()
        inventory.add_item("Item A", 100, 10, 10)
        cart = Cart(inventory)
        line = cart.add_item(1, 1)
        assert line.name == "Item A"
        assert str(line.tax_rate) == "10"


class TestRemoveItem:
    def test_remove_returns_stock(self):
        # Line of 3 with 5 left in stock: removal restores 8.
        inventory, cart, item_id = _setup(quantity=8)
        cart.add_item(item_id, 3)
        assert inventory.available(item_id) == 5
        cart.remove_item(item_id)
        assert inventory.available(item_id) == 8
        assert cart.is_empty

    def test_remove_then_readd_restores_prior_quantity(self):
        inventory, cart, item_id = _setup()
        cart.add_item(item_id, 4)
        before = inventory.available(item_id)
        cart.remove_item(item_id)
        cart.add_item(item_id, 4)
        assert inventory.available(item_id) == before

    def test_remove_missing_line(self):
        _, cart, item_id = _setup()
        with pytest.raises(NotFound):
            cart.remove_item(item_id)


class TestAdjustQuantity:
    def test_increment(self):
        inventory, cart, item_id = _setup()
        cart.add_item(item_id, 1)
        line = cart.adjust_quantity(item_id, +1)
        assert line.quantity == 2
        assert inventory.available(item_id) == 8

    def test_decrement(self):
        inventory, cart, item_id = _setup()
        cart.add_item(item_id, 3)
        line = cart.adjust_quantity(item_id, -2)
        assert line.quantity == 1
        assert inventory.available(item_id) == 9

    def test_increment_without_stock_leaves_line_unchanged(self):
        inventory, cart, item_id = _setup(quantity=2)
        cart.add_item(item_id, 2)
        assert inventory.available(item_id) == 0
        with pytest.raises(InsufficientStock):
            cart.adjust_quantity(item_id, +1)
        assert cart.line(item_id).quantity == 2
        assert inventory.available(item_id) == 0

    def test_drop_below_one_removes_line(self):
        inventory, cart, item_id = _setup()
        cart.add_item(item_id, 2)
        assert cart.adjust_quantity(item_id, -5) is None
        assert cart.is_empty
        assert inventory.available(item_id) == 10

    def test_zero_delta_is_noop(self):
        inventory, cart, item_id = _setup()
        cart.add_item(item_id, 2)
        assert cart.adjust_quantity(item_id, 0).quantity == 2
        assert inventory.available(item_id) == 8

    def test_non_integer_delta_rejected(self):
        _, cart, item_id = _setup()
        cart.add_item(item_id, 2)
        with pytest.raises(ValidationError):
            cart.adjust_quantity(item_id, 0.5)

    def test_adjust_missing_line(self):
        _, cart, item_id = _setup()
        with pytest.raises(NotFound):
            cart.adjust_quantity(item_id, 1)


class TestClearAndConsume:
    def test_clear_releases_every_line(self):
        inventory = InventoryStore()
        a = inventory.add_item("Item A", 100, 10, 10)
        b = inventory.add_item("Item B", 200, 5, 5)
        cart = Cart(inventory)
        cart.add_item(a.item_id, 3)
        cart.add_item(b.item_id, 5)

        released = cart.clear()

        assert len(released) == 2
        assert cart.is_empty
        assert inventory.available(a.item_id) == 10
        assert inventory.available(b.item_id) == 5

    def test_consume_keeps_stock_reserved(self):
        inventory, cart, item_id = _setup()
        cart.add_item(item_id, 2)
        consumed = cart.consume()
        assert [line.quantity for line in consumed] == [2]
        assert cart.is_empty
        assert inventory.available(item_id) == 8

    def test_lines_is_a_copy(self):
        _, cart, item_id = _setup()
        cart.add_item(item_id, 1)
        lines = cart.lines()
        lines.clear()
        assert len(cart.lines()) == 1
