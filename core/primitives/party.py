"""
POS Billing Party Primitive — Credit Customer
===============================================
Shared by: Customer Ledger, Checkout Engine, HTTP API.

RULES (NON-NEGOTIABLE):
- Customers are immutable snapshots
- credit_used <= credit_limit on every snapshot
- Only the Customer Ledger produces a snapshot with a new
  credit_used value

This file contains NO persistence logic.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from core.primitives.money import ZERO, money_str


@dataclass(frozen=True)
class Customer:
    """
    Registered customer with a store-credit account.

    Fields:
        customer_id:  Stable identifier assigned by the Customer Ledger
        name:         Display name
        phone:        Contact number (free text)
        credit_limit: Maximum outstanding credit (Decimal, >= 0)
        credit_used:  Credit charged so far (Decimal, >= 0)
    """
    customer_id: int
    name: str
    phone: str
    credit_limit: Decimal
    credit_used: Decimal = ZERO

    def __post_init__(self):
        if not isinstance(self.customer_id, int) or self.customer_id < 1:
            raise ValueError("customer_id must be positive integer.")
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be non-empty string.")
        if not self.phone or not isinstance(self.phone, str):
            raise ValueError("phone must be non-empty string.")
        if not isinstance(self.credit_limit, Decimal):
            raise TypeError("credit_limit must be Decimal.")
        if not isinstance(self.credit_used, Decimal):
            raise TypeError("credit_used must be Decimal.")
        if self.credit_limit < ZERO:
            raise ValueError("credit_limit cannot be negative.")
        if self.credit_used < ZERO:
            raise ValueError("credit_used cannot be negative.")
        if self.credit_used > self.credit_limit:
            raise ValueError("credit_used cannot exceed credit_limit.")

    @property
    def available_credit(self) -> Decimal:
        return self.credit_limit - self.credit_used

    def with_credit_used(self, credit_used: Decimal) -> Customer:
        return replace(self, credit_used=credit_used)

    def to_dict(self) -> dict:
        return {
            "id": self.customer_id,
            "name": self.name,
            "phone": self.phone,
            "credit_limit": money_str(self.credit_limit),
            "credit_used": money_str(self.credit_used),
            "available_credit": money_str(self.available_credit),
        }
