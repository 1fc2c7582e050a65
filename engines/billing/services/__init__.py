"""
POS Billing Engine — Application Service
===========================================
The counter session: inventory browse, cart, customer selection,
checkout and history behind one object.

Each store keeps sole ownership of its own state; this service only
wires them together and remembers the operator's session choices
(selected customer, payment mode).

One re-entrant service lock guards every call. The Checkout
Coordinator commits under the same lock, so a reader going through
this service sees a sale either entirely or not at all.

Lock order: service → cart → inventory / customer / ledger.
"""

from __future__ import annotations

import threading
from typing import List, Optional

from core.config.rules import BillingConfig
from core.primitives.item import CartLine, Item
from core.primitives.ledger import PaymentMode, Transaction
from core.primitives.party import Customer
from core.time.clock import Clock
from engines.cart.services import Cart
from engines.checkout.services import CheckoutCoordinator, CheckoutState
from engines.customer.services import CustomerLedger
from engines.inventory.services import InventoryStore
from engines.ledger.services import TransactionLedger
from engines.pricing import CartTotals, cart_totals


class BillingService:
    """Billing engine application service — one counter, one cart."""

    def __init__(
        self,
        *,
        config: Optional[BillingConfig] = None,
        clock: Optional[Clock] = None,
        inventory: Optional[InventoryStore] = None,
        customers: Optional[CustomerLedger] = None,
        ledger: Optional[TransactionLedger] = None,
    ):
        self._config = config if config is not None else BillingConfig()
        self._inventory = inventory if inventory is not None else InventoryStore()
        self._customers = customers if customers is not None else CustomerLedger()
        self._ledger = ledger if ledger is not None else TransactionLedger()
        self._lock = threading.RLock()
        self._cart = Cart(self._inventory)
        self._checkout = CheckoutCoordinator(
            customers=self._customers,
            ledger=self._ledger,
            clock=clock,
            lock=self._lock,
        )
        self._selected_customer_id: Optional[int] = None
        self._payment_mode = self._config.default_payment_mode

    # ── Components ────────────────────────────────────────────

    @property
    def config(self) -> BillingConfig:
        return self._config

    @property
    def inventory(self) -> InventoryStore:
        return self._inventory

    @property
    def customers(self) -> CustomerLedger:
        return self._customers

    @property
    def ledger(self) -> TransactionLedger:
        return self._ledger

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    # ── Inventory ─────────────────────────────────────────────

    def list_items(self) -> List[Item]:
        with self._lock:
            return self._inventory.list_items()

    def add_item(self, name, price, quantity, tax_rate) -> Item:
        with self._lock:
            return self._inventory.add_item(name, price, quantity, tax_rate)

    def search_items(self, term: str) -> List[Item]:
        with self._lock:
            return self._inventory.search(term)

    def low_stock_items(self) -> List[Item]:
        with self._lock:
            return self._inventory.low_stock(self._config.low_stock_threshold)

    # ── Cart ──────────────────────────────────────────────────

    def add_to_cart(self, item_id: int, qty: int) -> CartLine:
        with self._lock:
            return self._cart.add_item(item_id, qty)

    def remove_from_cart(self, item_id: int) -> CartLine:
        with self._lock:
            return self._cart.remove_item(item_id)

    def adjust_quantity(self, item_id: int, delta: int) -> Optional[CartLine]:
        with self._lock:
            return self._cart.adjust_quantity(item_id, delta)

    def get_cart_lines(self) -> List[CartLine]:
        with self._lock:
            return self._cart.lines()

    def get_totals(self) -> CartTotals:
        with self._lock:
            return cart_totals(self._cart.lines())

    def get_line_totals(self, line: CartLine) -> CartTotals:
        return cart_totals((line,))

    def abandon_cart(self) -> None:
        with self._lock:
            self._cart.clear()

    # ── Customers ─────────────────────────────────────────────

    def list_customers(self) -> List[Customer]:
        with self._lock:
            return self._customers.list_customers()

    def find_customer(self, customer_id: int) -> Optional[Customer]:
        with self._lock:
            return self._customers.find_customer(customer_id)

    def register_customer(self, name, phone, credit_limit) -> Customer:
        with self._lock:
            return self._customers.register(name, phone, credit_limit)

    # ── Checkout session ──────────────────────────────────────

    @property
    def selected_customer(self) -> Optional[Customer]:
        with self._lock:
            if self._selected_customer_id is None:
                return None
            return self._customers.find_customer(self._selected_customer_id)

    def select_customer(self, customer_id: Optional[int]) -> Optional[Customer]:
        """Pick the customer for the next sale; None clears the choice."""
        with self._lock:
            if customer_id is None:
                self._selected_customer_id = None
                return None
            customer = self._customers.get_customer(customer_id)
            self._selected_customer_id = customer.customer_id
            return customer

    @property
    def payment_mode(self) -> PaymentMode:
        return self._payment_mode

    def set_payment_mode(self, mode) -> PaymentMode:
        with self._lock:
            self._payment_mode = PaymentMode.parse(mode)
            return self._payment_mode

    @property
    def checkout_state(self) -> CheckoutState:
        with self._lock:
            return CheckoutCoordinator.readiness(
                self.selected_customer, self._payment_mode, self._cart,
            )

    @property
    def last_checkout_state(self) -> CheckoutState:
        return self._checkout.state

    def complete_purchase(
        self,
        customer_id: Optional[int] = None,
        payment_mode=None,
    ) -> Transaction:
        """
        Commit the cart as a sale.

        Falls back to the session's selected customer and payment
        mode when arguments are omitted.
        """
        with self._lock:
            if customer_id is None:
                customer_id = self._selected_customer_id
            mode = self._payment_mode if payment_mode is None else payment_mode
            return self._checkout.complete_purchase(customer_id, mode, self._cart)

    # ── History ───────────────────────────────────────────────

    def list_transactions(self, payment_mode=None) -> List[Transaction]:
        with self._lock:
            if payment_mode is None:
                return self._ledger.all()
            return self._ledger.filter_by_payment_mode(payment_mode)
