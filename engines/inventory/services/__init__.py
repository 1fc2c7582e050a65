"""
POS Billing Inventory Engine — Inventory Store
================================================
Owns item stock levels. The only component allowed to change
Item.quantity.

Reservation moves units out of available stock into a cart line;
release moves them back. Both are atomic per item: a lock per
item id guards the read-check-write, so two carts reserving the
same item never lose an update.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from core.errors import InsufficientStock, NotFound, ValidationError
from core.primitives.item import Item
from core.primitives.money import (
    HUNDRED,
    to_non_negative_decimal,
    to_quantity,
)
from engines.inventory.policies import negative_stock_policy

logger = logging.getLogger("billing.inventory")


def _require_int_amount(amount, field: str = "amount") -> int:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValidationError(f"{field} must be an integer.", field=field)
    return amount


class InventoryStore:
    """In-memory item catalogue with per-item atomic stock moves."""

    def __init__(self):
        # item_id → current snapshot, insertion ordered
        self._items: Dict[int, Item] = {}
        # item_id → mutation lock
        self._item_locks: Dict[int, threading.Lock] = {}
        self._lock = threading.Lock()
        self._next_id = 1

    # ── Reads ─────────────────────────────────────────────────

    def list_items(self) -> List[Item]:
        with self._lock:
            return list(self._items.values())

    def find_item(self, item_id: int) -> Optional[Item]:
        return self._items.get(item_id)

    def get_item(self, item_id: int) -> Item:
        item = self._items.get(item_id)
        if item is None:
            raise NotFound("Item", item_id)
        return item

    def available(self, item_id: int) -> int:
        return self.get_item(item_id).quantity

    def search(self, term: str) -> List[Item]:
        """Case-insensitive name match; an empty term matches everything."""
        needle = (term or "").strip().lower()
        return [
            item for item in self.list_items()
            if needle in item.name.lower()
        ]

    def low_stock(self, threshold: int) -> List[Item]:
        return [
            item for item in self.list_items()
            if item.is_low_stock(threshold)
        ]

    # ── Catalogue ─────────────────────────────────────────────

    def add_item(self, name, price, quantity, tax_rate) -> Item:
        if name is None or not isinstance(name, str) or not name.strip():
            raise ValidationError("name is required.", field="name")
        price_value = to_non_negative_decimal(price, "price")
        quantity_value = to_quantity(quantity, "quantity", minimum=0)
        tax_value = to_non_negative_decimal(tax_rate, "tax_rate")
        if tax_value > HUNDRED:
            raise ValidationError(
                "tax_rate must be between 0 and 100.", field="tax_rate",
            )

        with self._lock:
            item = Item(
                item_id=self._next_id,
                name=name.strip(),
                price=price_value,
                quantity=quantity_value,
                tax_rate=tax_value,
            )
            self._items[item.item_id] = item
            self._item_locks[item.item_id] = threading.Lock()
            self._next_id = item.item_id + 1

        logger.info(
            "Item %s registered: %r price=%s qty=%s tax=%s%%",
            item.item_id, item.name, item.price, item.quantity, item.tax_rate,
        )
        return item

    # ── Stock moves ───────────────────────────────────────────

    def _item_lock(self, item_id: int) -> threading.Lock:
        with self._lock:
            lock = self._item_locks.get(item_id)
        if lock is None:
            raise NotFound("Item", item_id)
        return lock

    def reserve(self, item_id: int, amount: int) -> Item:
        """Take amount units out of available stock."""
        amount = _require_int_amount(amount)
        with self._item_lock(item_id):
            item = self._items[item_id]
            rejection = negative_stock_policy(item, amount)
            if rejection is not None:
                logger.debug("Reserve refused: %s", rejection.message)
                raise InsufficientStock(rejection)
            updated = item.with_quantity(item.quantity - amount)
            self._items[item_id] = updated

        logger.debug(
            "Reserved %s of item %s, %s left", amount, item_id, updated.quantity,
        )
        return updated

    def release(self, item_id: int, amount: int) -> Item:
        """Return amount previously reserved units to available stock."""
        amount = _require_int_amount(amount)
        if amount < 1:
            raise ValidationError(
                "release amount must be >= 1.", field="amount",
            )
        with self._item_lock(item_id):
            item = self._items[item_id]
            updated = item.with_quantity(item.quantity + amount)
            self._items[item_id] = updated

        logger.debug(
            "Released %s of item %s, %s available", amount, item_id,
            updated.quantity,
        )
        return updated
