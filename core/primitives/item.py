"""
POS Billing Item Primitive — Inventory Item and Cart Line
===========================================================
Shared by: Inventory Engine, Cart Engine, Pricing Engine,
           Checkout Engine, Transaction Ledger.

RULES (NON-NEGOTIABLE):
- Items and cart lines are immutable snapshots
- Prices are Decimal, tax rates are percentages (0–100)
- Only the Inventory Store produces a new Item with a changed
  quantity; every other field is fixed at creation
- A CartLine copies the item's pricing fields at reservation
  time, so later catalogue changes never reach an open cart
  or recorded sale

This file contains NO persistence logic.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from core.primitives.money import HUNDRED, ZERO, money_str


def _validate_pricing(name, price, tax_rate) -> None:
    if not name or not isinstance(name, str):
        raise ValueError("name must be non-empty string.")
    if not isinstance(price, Decimal):
        raise TypeError("price must be Decimal.")
    if price < ZERO:
        raise ValueError("price cannot be negative.")
    if not isinstance(tax_rate, Decimal):
        raise TypeError("tax_rate must be Decimal.")
    if not ZERO <= tax_rate <= HUNDRED:
        raise ValueError("tax_rate must be between 0 and 100.")


# ══════════════════════════════════════════════════════════════
# ITEM (inventory record)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Item:
    """
    Inventory record.

    Fields:
        item_id:  Stable identifier assigned by the Inventory Store
        name:     Display name
        price:    Unit price (Decimal, >= 0)
        quantity: Available (unreserved) stock
        tax_rate: Percentage, 0–100
    """
    item_id: int
    name: str
    price: Decimal
    quantity: int
    tax_rate: Decimal

    def __post_init__(self):
        if not isinstance(self.item_id, int) or self.item_id < 1:
            raise ValueError("item_id must be positive integer.")
        _validate_pricing(self.name, self.price, self.tax_rate)
        if not isinstance(self.quantity, int) or self.quantity < 0:
            raise ValueError("quantity must be non-negative integer.")

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0

    def is_low_stock(self, threshold: int) -> bool:
        return self.quantity <= threshold

    def with_quantity(self, quantity: int) -> Item:
        return replace(self, quantity=quantity)

    def to_dict(self) -> dict:
        return {
            "id": self.item_id,
            "name": self.name,
            "price": money_str(self.price),
            "quantity": self.quantity,
            "tax_rate": str(self.tax_rate),
        }


# ══════════════════════════════════════════════════════════════
# CART LINE (reserved snapshot)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class CartLine:
    """
    Item pricing snapshot plus the units reserved for one sale.

    quantity counts units already taken out of available stock.
    """
    item_id: int
    name: str
    price: Decimal
    tax_rate: Decimal
    quantity: int

    def __post_init__(self):
        if not isinstance(self.item_id, int) or self.item_id < 1:
            raise ValueError("item_id must be positive integer.")
        _validate_pricing(self.name, self.price, self.tax_rate)
        if not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError("quantity must be positive integer.")

    @classmethod
    def from_item(cls, item: Item, quantity: int) -> CartLine:
        return cls(
            item_id=item.item_id,
            name=item.name,
            price=item.price,
            tax_rate=item.tax_rate,
            quantity=quantity,
        )

    def with_quantity(self, quantity: int) -> CartLine:
        return replace(self, quantity=quantity)

    def to_dict(self) -> dict:
        return {
            "id": self.item_id,
            "name": self.name,
            "price": money_str(self.price),
            "tax_rate": str(self.tax_rate),
            "quantity": self.quantity,
        }
