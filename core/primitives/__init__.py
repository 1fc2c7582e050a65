"""
POS Billing Core Primitives — Shared Records
==============================================
Engine-agnostic building blocks consumed by every billing engine.

- Pure Python (no Django dependency)
- Immutable (frozen dataclasses)
- Deterministic (same input → same output)

Primitives:
    money   — Decimal coercion and cent rounding
    item    — Inventory item and cart line snapshots
    party   — Credit customer
    ledger  — Payment mode and completed transaction
"""

from core.primitives.item import CartLine, Item
from core.primitives.ledger import PaymentMode, Transaction
from core.primitives.money import format_money, money_str, round_money
from core.primitives.party import Customer

__all__ = [
    "CartLine",
    "Customer",
    "Item",
    "PaymentMode",
    "Transaction",
    "format_money",
    "money_str",
    "round_money",
]
