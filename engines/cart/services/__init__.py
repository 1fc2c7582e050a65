"""
POS Billing Cart Engine — Active Cart
=======================================
Reserved line items for one in-progress sale.

Every stock change is delegated to the Inventory Store and the
line set is updated only after the store call succeeds, so store
and cart move in lockstep:

    original_quantity == available + Σ line.quantity   (per item)

The cart lock is re-entrant; the Checkout Coordinator holds it
across a whole commit.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional, Tuple

from core.errors import NotFound, ValidationError
from core.primitives.item import CartLine
from engines.inventory.services import InventoryStore

logger = logging.getLogger("billing.cart")


class Cart:
    """Mutable set of CartLines backed by stock reservations."""

    def __init__(self, inventory: InventoryStore):
        self._inventory = inventory
        # item_id → line, insertion ordered
        self._lines: Dict[int, CartLine] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    # ── Reads ─────────────────────────────────────────────────

    def lines(self) -> List[CartLine]:
        with self._lock:
            return list(self._lines.values())

    def line(self, item_id: int) -> CartLine:
        line = self._lines.get(item_id)
        if line is None:
            raise NotFound("Cart line", item_id)
        return line

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def reserved_quantity(self, item_id: int) -> int:
        line = self._lines.get(item_id)
        return line.quantity if line is not None else 0

    # ── Mutations ─────────────────────────────────────────────

    def add_item(self, item_id: int, requested_qty: int) -> CartLine:
        if (
            isinstance(requested_qty, bool)
            or not isinstance(requested_qty, int)
            or requested_qty < 1
        ):
            raise ValidationError(
                "quantity must be a positive integer.", field="quantity",
            )

        with self._lock:
            item = self._inventory.reserve(item_id, requested_qty)
            existing = self._lines.get(item_id)
            if existing is not None:
                line = existing.with_quantity(existing.quantity + requested_qty)
            else:
                line = CartLine.from_item(item, requested_qty)
            self._lines[item_id] = line

        logger.debug("Cart line %s now %s", item_id, line.quantity)
        return line

    def remove_item(self, item_id: int) -> CartLine:
        with self._lock:
            line = self.line(item_id)
            self._inventory.release(item_id, line.quantity)
            del self._lines[item_id]

        logger.debug("Cart line %s removed (%s released)", item_id, line.quantity)
        return line

    def adjust_quantity(self, item_id: int, delta: int) -> Optional[CartLine]:
        """
        Move a line's quantity by delta.

        Returns the updated line, or None when the line dropped below
        one unit and was removed.
        """
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise ValidationError("delta must be an integer.", field="delta")

        with self._lock:
            line = self.line(item_id)
            if delta == 0:
                return line

            new_quantity = line.quantity + delta
            if new_quantity < 1:
                self.remove_item(item_id)
                return None

            if delta > 0:
                self._inventory.reserve(item_id, delta)
            else:
                self._inventory.release(item_id, -delta)
            updated = line.with_quantity(new_quantity)
            self._lines[item_id] = updated

        logger.debug("Cart line %s adjusted by %+d", item_id, delta)
        return updated

    def clear(self) -> Tuple[CartLine, ...]:
        """Abandon the cart: every reserved unit goes back to stock."""
        with self._lock:
            released = tuple(self._lines.values())
            for line in released:
                self._inventory.release(line.item_id, line.quantity)
                del self._lines[line.item_id]

        if released:
            logger.info("Cart abandoned, %s line(s) released", len(released))
        return released

    def consume(self) -> Tuple[CartLine, ...]:
        """
        Empty the cart without releasing stock.

        Reservations become the sale; only checkout calls this.
        """
        with self._lock:
            consumed = tuple(self._lines.values())
            self._lines.clear()
        return consumed
