"""
POS Billing Engine — Demo Data
=================================
Starter catalogue, customers and sale history for local runs.

Opening credit balances go through charge_credit() like any other
credit movement. Historical sales are recorded straight into the
ledger with their original dates and do not touch stock or credit.
"""

from __future__ import annotations

from datetime import date

from core.primitives.item import CartLine
from core.primitives.ledger import PaymentMode, Transaction
from core.primitives.money import round_money
from engines.pricing import cart_tax, cart_total

DEMO_ITEMS = (
    # name, price, quantity, tax_rate
    ("Item A", 100, 10, 10),
    ("Item B", 200, 5, 5),
    ("Item C", 150, 8, 8),
)

DEMO_CUSTOMERS = (
    # name, phone, credit_limit, opening credit_used
    ("John Doe", "555-1234", 1000, 200),
    ("Jane Smith", "555-5678", 2000, 500),
)

DEMO_SALES = (
    # customer index, item index, quantity, payment mode, date
    (0, 0, 2, PaymentMode.PAID, date(2025, 3, 28)),
    (1, 1, 1, PaymentMode.CREDIT, date(2025, 3, 29)),
    (0, 2, 3, PaymentMode.CREDIT, date(2025, 3, 30)),
)


def seed_demo_data(service) -> None:
    """Load the demo records into an empty BillingService."""
    items = [
        service.add_item(name, price, quantity, tax_rate)
        for name, price, quantity, tax_rate in DEMO_ITEMS
    ]

    customers = []
    for name, phone, limit, opening in DEMO_CUSTOMERS:
        customer = service.register_customer(name, phone, limit)
        if opening:
            customer = service.customers.charge_credit(
                customer.customer_id, opening,
            )
        customers.append(customer)

    for customer_idx, item_idx, quantity, mode, sold_on in DEMO_SALES:
        lines = (CartLine.from_item(items[item_idx], quantity),)
        service.ledger.record(Transaction(
            customer_id=customers[customer_idx].customer_id,
            items=lines,
            total=round_money(cart_total(lines)),
            tax=round_money(cart_tax(lines)),
            payment_mode=mode,
            date=sold_on,
        ))
