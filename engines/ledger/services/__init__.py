"""
POS Billing Ledger Engine — Transaction Ledger
================================================
Append-only record of completed sales.

There is no update or delete. A recorded Transaction is frozen and
its lines are deep-copied on the way in, so nothing a caller holds
can reach back into history.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import List

from core.errors import NotFound, ValidationError
from core.primitives.ledger import PaymentMode, Transaction

logger = logging.getLogger("billing.ledger")


class TransactionLedger:
    """In-memory append-only sale ledger."""

    def __init__(self):
        self._transactions: List[Transaction] = []
        self._lock = threading.Lock()
        self._next_id = 1

    def record(self, transaction: Transaction) -> Transaction:
        """Append and return the stored copy with its assigned id."""
        if not isinstance(transaction, Transaction):
            raise ValidationError(
                "record() expects a Transaction.", field="transaction",
            )
        if transaction.is_recorded:
            raise ValidationError(
                "Transaction already recorded.",
                field="transaction_id",
                transaction_id=transaction.transaction_id,
            )

        with self._lock:
            stored = copy.deepcopy(transaction).with_id(self._next_id)
            self._transactions.append(stored)
            self._next_id = stored.transaction_id + 1

        logger.info(
            "Transaction %s recorded: customer=%s mode=%s total=%s tax=%s",
            stored.transaction_id, stored.customer_id,
            stored.payment_mode.value, stored.total, stored.tax,
        )
        return stored

    def all(self) -> List[Transaction]:
        with self._lock:
            return list(self._transactions)

    def get(self, transaction_id: int) -> Transaction:
        for transaction in self.all():
            if transaction.transaction_id == transaction_id:
                return transaction
        raise NotFound("Transaction", transaction_id)

    def filter_by_payment_mode(self, mode) -> List[Transaction]:
        mode = PaymentMode.parse(mode)
        return [t for t in self.all() if t.payment_mode is mode]

    def for_customer(self, customer_id: int) -> List[Transaction]:
        return [t for t in self.all() if t.customer_id == customer_id]

    def __len__(self) -> int:
        return len(self._transactions)
