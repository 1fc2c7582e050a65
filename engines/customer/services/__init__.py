"""
POS Billing Customer Engine — Customer Ledger
===============================================
Owns each customer's credit limit and credit used.
charge_credit() is the only path that changes credit_used.
"""

from __future__ import annotations

import logging
import threading
from decimal import Decimal
from typing import Dict, List, Optional

from core.errors import CreditLimitExceeded, NotFound, ValidationError
from core.primitives.money import to_non_negative_decimal
from core.primitives.party import Customer
from engines.customer.policies import credit_limit_policy

logger = logging.getLogger("billing.customer")


def _require_text(value, field: str) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required.", field=field)
    return value.strip()


class CustomerLedger:
    """In-memory customer registry with credit accounting."""

    def __init__(self):
        # customer_id → current snapshot, insertion ordered
        self._customers: Dict[int, Customer] = {}
        self._lock = threading.Lock()
        self._next_id = 1

    def list_customers(self) -> List[Customer]:
        with self._lock:
            return list(self._customers.values())

    def find_customer(self, customer_id: int) -> Optional[Customer]:
        return self._customers.get(customer_id)

    def get_customer(self, customer_id: int) -> Customer:
        customer = self._customers.get(customer_id)
        if customer is None:
            raise NotFound("Customer", customer_id)
        return customer

    def register(self, name, phone, credit_limit) -> Customer:
        name_value = _require_text(name, "name")
        phone_value = _require_text(phone, "phone")
        limit_value = to_non_negative_decimal(credit_limit, "credit_limit")

        with self._lock:
            customer = Customer(
                customer_id=self._next_id,
                name=name_value,
                phone=phone_value,
                credit_limit=limit_value,
            )
            self._customers[customer.customer_id] = customer
            self._next_id = customer.customer_id + 1

        logger.info(
            "Customer %s registered: %r limit=%s",
            customer.customer_id, customer.name, customer.credit_limit,
        )
        return customer

    def can_charge(self, customer_id: int, amount: Decimal) -> bool:
        customer = self.get_customer(customer_id)
        return credit_limit_policy(customer, amount) is None

    def charge_credit(self, customer_id: int, amount) -> Customer:
        amount_value = to_non_negative_decimal(amount, "amount")
        with self._lock:
            customer = self._customers.get(customer_id)
            if customer is None:
                raise NotFound("Customer", customer_id)
            rejection = credit_limit_policy(customer, amount_value)
            if rejection is not None:
                raise CreditLimitExceeded(rejection)
            updated = customer.with_credit_used(
                customer.credit_used + amount_value
            )
            self._customers[customer_id] = updated

        logger.info(
            "Customer %s charged %s on credit (used %s of %s)",
            customer_id, amount_value, updated.credit_used,
            updated.credit_limit,
        )
        return updated
