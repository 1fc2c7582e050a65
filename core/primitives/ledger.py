"""
POS Billing Ledger Primitive — Completed Sale Record
======================================================
Shared by: Checkout Engine, Transaction Ledger, HTTP API.

RULES (NON-NEGOTIABLE):
- A Transaction is immutable once recorded
- items is a tuple of CartLine snapshots taken at commit time;
  the sale can be recomputed from them alone
- total and tax are recorded rounded to cents
- customer_id is a reference, not ownership

This file contains NO persistence logic.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from core.errors import ValidationError
from core.primitives.item import CartLine
from core.primitives.money import money_str


# ══════════════════════════════════════════════════════════════
# ENUMS
# ══════════════════════════════════════════════════════════════

class PaymentMode(Enum):
    """How a sale is settled."""
    PAID = "paid"       # Settled at the counter
    CREDIT = "credit"   # Charged to the customer's credit account

    @classmethod
    def parse(cls, value) -> PaymentMode:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ValidationError(
                f"payment_mode '{value}' not valid.",
                field="payment_mode",
                allowed=[m.value for m in cls],
            ) from exc


# ══════════════════════════════════════════════════════════════
# TRANSACTION
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Transaction:
    """
    Completed sale.

    transaction_id is None until the Transaction Ledger records it.
    """
    customer_id: int
    items: Tuple[CartLine, ...]
    total: Decimal
    tax: Decimal
    payment_mode: PaymentMode
    date: date
    transaction_id: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.customer_id, int) or self.customer_id < 1:
            raise ValueError("customer_id must be positive integer.")
        if not isinstance(self.items, tuple) or not self.items:
            raise ValueError("items must be a non-empty tuple.")
        for line in self.items:
            if not isinstance(line, CartLine):
                raise TypeError("items must contain CartLine snapshots.")
        if not isinstance(self.total, Decimal):
            raise TypeError("total must be Decimal.")
        if not isinstance(self.tax, Decimal):
            raise TypeError("tax must be Decimal.")
        if not isinstance(self.payment_mode, PaymentMode):
            raise ValueError("payment_mode must be PaymentMode enum.")
        if not isinstance(self.date, date):
            raise TypeError("date must be datetime.date.")
        if self.transaction_id is not None and (
            not isinstance(self.transaction_id, int) or self.transaction_id < 1
        ):
            raise ValueError("transaction_id must be positive integer or None.")

    @property
    def is_recorded(self) -> bool:
        return self.transaction_id is not None

    def with_id(self, transaction_id: int) -> Transaction:
        return replace(self, transaction_id=transaction_id)

    def to_dict(self) -> dict:
        return {
            "id": self.transaction_id,
            "customer_id": self.customer_id,
            "items": [line.to_dict() for line in self.items],
            "total": money_str(self.total),
            "tax": money_str(self.tax),
            "payment_mode": self.payment_mode.value,
            "date": self.date.isoformat(),
        }
