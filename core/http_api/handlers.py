"""
POS Billing HTTP API - Framework-Agnostic Handlers
==================================================
Pure handler functions over contracts and injected dependencies.

Every handler returns the {ok, data | error} envelope. Engine
errors become rejection payloads; nothing raises past a handler.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from core.errors import BillingError
from core.http_api.contracts import (
    CartAddHttpRequest,
    CartAdjustHttpRequest,
    CartRemoveHttpRequest,
    CheckoutHttpRequest,
    CustomerRegisterHttpRequest,
    ItemCreateHttpRequest,
    ItemSearchRequest,
    TransactionsReadRequest,
)
from core.http_api.errors import rejection_response, success_response
from core.primitives.item import CartLine, Item
from core.primitives.ledger import Transaction
from core.primitives.money import format_money

logger = logging.getLogger("billing.http")


def _guarded(action: Callable[[], Any]) -> dict[str, Any]:
    try:
        data = action()
    except BillingError as exc:
        logger.info("Request rejected [%s]: %s", exc.code, exc.message)
        return rejection_response(exc.to_rejection())
    return success_response(data)


# ── Serializers ───────────────────────────────────────────────

def _item_payload(item: Item, low_stock_threshold: int) -> dict[str, Any]:
    payload = item.to_dict()
    payload["low_stock"] = item.is_low_stock(low_stock_threshold)
    return payload


def _line_payload(service, line: CartLine) -> dict[str, Any]:
    payload = line.to_dict()
    totals = service.get_line_totals(line).to_dict()
    payload["subtotal"] = totals["subtotal"]
    payload["tax"] = totals["tax"]
    return payload


def _cart_payload(service) -> dict[str, Any]:
    # single snapshot of the cart
    with service.lock:
        return {
            "lines": [
                _line_payload(service, line) for line in service.get_cart_lines()
            ],
            "totals": service.get_totals().to_dict(),
            "checkout_state": service.checkout_state.value,
        }


def _transaction_payload(service, transaction: Transaction) -> dict[str, Any]:
    payload = transaction.to_dict()
    customer = service.find_customer(transaction.customer_id)
    payload["customer_name"] = customer.name if customer is not None else None
    return payload


# ── Inventory ─────────────────────────────────────────────────

def list_items(request: ItemSearchRequest, dependencies) -> dict[str, Any]:
    service = dependencies.billing_service
    threshold = service.config.low_stock_threshold
    return _guarded(lambda: [
        _item_payload(item, threshold)
        for item in service.search_items(request.term)
    ])


def post_item_create(request: ItemCreateHttpRequest, dependencies) -> dict[str, Any]:
    service = dependencies.billing_service
    threshold = service.config.low_stock_threshold
    return _guarded(lambda: _item_payload(
        service.add_item(
            request.name, request.price, request.quantity, request.tax_rate,
        ),
        threshold,
    ))


# ── Cart ──────────────────────────────────────────────────────

def get_cart(dependencies) -> dict[str, Any]:
    service = dependencies.billing_service
    return _guarded(lambda: _cart_payload(service))


def post_cart_add(request: CartAddHttpRequest, dependencies) -> dict[str, Any]:
    service = dependencies.billing_service

    def _action():
        service.add_to_cart(request.item_id, request.quantity)
        return _cart_payload(service)

    return _guarded(_action)


def post_cart_remove(request: CartRemoveHttpRequest, dependencies) -> dict[str, Any]:
    service = dependencies.billing_service

    def _action():
        service.remove_from_cart(request.item_id)
        return _cart_payload(service)

    return _guarded(_action)


def post_cart_adjust(request: CartAdjustHttpRequest, dependencies) -> dict[str, Any]:
    service = dependencies.billing_service

    def _action():
        service.adjust_quantity(request.item_id, request.delta)
        return _cart_payload(service)

    return _guarded(_action)


def post_cart_clear(dependencies) -> dict[str, Any]:
    service = dependencies.billing_service

    def _action():
        service.abandon_cart()
        return _cart_payload(service)

    return _guarded(_action)


# ── Customers ─────────────────────────────────────────────────

def list_customers(dependencies) -> dict[str, Any]:
    service = dependencies.billing_service
    return _guarded(lambda: [c.to_dict() for c in service.list_customers()])


def post_customer_register(
    request: CustomerRegisterHttpRequest,
    dependencies,
) -> dict[str, Any]:
    service = dependencies.billing_service
    return _guarded(lambda: service.register_customer(
        request.name, request.phone, request.credit_limit,
    ).to_dict())


# ── Checkout / history ────────────────────────────────────────

def post_checkout(request: CheckoutHttpRequest, dependencies) -> dict[str, Any]:
    service = dependencies.billing_service

    def _action():
        transaction = service.complete_purchase(
            customer_id=request.customer_id,
            payment_mode=request.payment_mode,
        )
        return {
            "transaction": _transaction_payload(service, transaction),
            "message": (
                f"Purchase completed! Total: {format_money(transaction.total)}"
            ),
        }

    return _guarded(_action)


def list_transactions(
    request: TransactionsReadRequest,
    dependencies,
) -> dict[str, Any]:
    service = dependencies.billing_service
    return _guarded(lambda: [
        _transaction_payload(service, transaction)
        for transaction in service.list_transactions(request.payment_mode)
    ])
