"""
POS Billing Checkout Engine — Checkout Coordinator
====================================================
Turns a cart into a recorded sale as one atomic step.

State machine:

    IDLE ──(customer + mode + non-empty cart)──► READY
    READY ──complete_purchase()──► COMMITTING
    COMMITTING ──► COMMITTED   (credit charged if credit mode,
                                transaction appended, cart consumed)
    COMMITTING ──► REJECTED    (nothing changed)

A credit rejection leaves the cart and its stock reservations in
place so the operator can retry with another mode or customer.

The commit lock and the cart lock are held from resolving the
customer until the cart is consumed. The commit lock is injectable:
BillingService passes its own service lock, and every read through
the service takes it, so no reader sees a charged customer without
the matching transaction, or a recorded transaction with a
still-populated cart.
"""

from __future__ import annotations

import copy
import logging
import threading
from enum import Enum
from typing import Optional

from core.errors import BillingError, EmptyCart, NoCustomerSelected
from core.primitives.ledger import PaymentMode, Transaction
from core.primitives.money import round_money
from core.primitives.party import Customer
from core.time.clock import Clock, SystemClock
from engines.cart.services import Cart
from engines.customer.services import CustomerLedger
from engines.ledger.services import TransactionLedger
from engines.pricing import cart_tax, cart_total

logger = logging.getLogger("billing.checkout")


class CheckoutState(Enum):
    """Checkout lifecycle."""
    IDLE = "IDLE"
    READY = "READY"
    COMMITTING = "COMMITTING"
    COMMITTED = "COMMITTED"
    REJECTED = "REJECTED"


class CheckoutCoordinator:
    """Validates, prices and commits a single sale."""

    def __init__(
        self,
        *,
        customers: CustomerLedger,
        ledger: TransactionLedger,
        clock: Optional[Clock] = None,
        lock: Optional[threading.RLock] = None,
    ):
        self._customers = customers
        self._ledger = ledger
        self._clock = clock if clock is not None else SystemClock()
        self._lock = lock if lock is not None else threading.RLock()
        self._state = CheckoutState.IDLE

    @property
    def state(self) -> CheckoutState:
        """Outcome of the most recent attempt (IDLE before any)."""
        return self._state

    @staticmethod
    def readiness(
        customer: Optional[Customer],
        payment_mode: Optional[PaymentMode],
        cart: Cart,
    ) -> CheckoutState:
        if customer is None or payment_mode is None or cart.is_empty:
            return CheckoutState.IDLE
        return CheckoutState.READY

    def complete_purchase(
        self,
        customer_id: Optional[int],
        payment_mode,
        cart: Cart,
    ) -> Transaction:
        """
        Commit the cart as a sale for customer_id.

        Every failure, including an unknown customer or payment mode,
        leaves state at REJECTED and re-raises.
        """
        with self._lock, cart.lock:
            self._state = CheckoutState.COMMITTING
            try:
                transaction = self._commit(customer_id, payment_mode, cart)
            except BillingError as exc:
                self._state = CheckoutState.REJECTED
                logger.warning(
                    "Checkout rejected [%s]: %s", exc.code, exc.message,
                )
                raise
            self._state = CheckoutState.COMMITTED

        logger.info(
            "Sale %s committed: customer=%s mode=%s total=%s",
            transaction.transaction_id, transaction.customer_id,
            transaction.payment_mode.value, transaction.total,
        )
        return transaction

    def _commit(
        self,
        customer_id: Optional[int],
        payment_mode,
        cart: Cart,
    ) -> Transaction:
        mode = PaymentMode.parse(payment_mode)
        if customer_id is None:
            raise NoCustomerSelected()
        # current balance, read under the commit lock
        customer = self._customers.get_customer(customer_id)

        lines = tuple(cart.lines())
        if not lines:
            raise EmptyCart()

        total = round_money(cart_total(lines))
        tax = round_money(cart_tax(lines))
        draft = Transaction(
            customer_id=customer.customer_id,
            items=copy.deepcopy(lines),
            total=total,
            tax=tax,
            payment_mode=mode,
            date=self._clock.today(),
        )

        if mode is PaymentMode.CREDIT:
            self._customers.charge_credit(customer.customer_id, total)

        recorded = self._ledger.record(draft)
        cart.consume()
        return recorded
