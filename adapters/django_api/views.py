"""
POS Billing Django Adapter Views
================================
Pass-through HTTP views over core/http_api handlers.
"""

from __future__ import annotations

import json
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt

from adapters.django_api.wiring import build_dependencies
from core.commands.rejection import ReasonCode
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
from core.http_api.errors import error_response, status_for_payload
from core.http_api.handlers import (
    get_cart,
    list_customers,
    list_items,
    list_transactions,
    post_cart_add,
    post_cart_adjust,
    post_cart_clear,
    post_cart_remove,
    post_checkout,
    post_customer_register,
    post_item_create,
)


def _json(payload: dict[str, Any]) -> JsonResponse:
    return JsonResponse(payload, status=status_for_payload(payload))


def _json_error(code: str, message: str, status: int = 400) -> JsonResponse:
    return JsonResponse(
        error_response(code=code, message=message, details={}),
        status=status,
    )


def _parse_json_body(request: HttpRequest) -> dict[str, Any]:
    if not request.body:
        return {}
    try:
        parsed = json.loads(request.body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError("Request body must be valid JSON.") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object.")
    return parsed


def _method_not_allowed() -> JsonResponse:
    return _json_error(
        ReasonCode.METHOD_NOT_ALLOWED,
        "Method not allowed for this endpoint.",
        status=405,
    )


def _dispatch_write(write_handler, request_contract_factory, request: HttpRequest):
    try:
        body = _parse_json_body(request)
        contract = request_contract_factory(body)
    except KeyError as exc:
        return _json_error(
            ReasonCode.INVALID_REQUEST, f"{exc.args[0]} is required.",
        )
    except ValueError as exc:
        return _json_error(ReasonCode.INVALID_REQUEST, str(exc))

    return _json(write_handler(contract, build_dependencies()))


# ── Contract factories ────────────────────────────────────────

def _item_create_contract_factory(body):
    return ItemCreateHttpRequest(
        name=body["name"],
        price=body["price"],
        quantity=body["quantity"],
        tax_rate=body["tax_rate"],
    )


def _cart_add_contract_factory(body):
    return CartAddHttpRequest(
        item_id=body["item_id"],
        quantity=body["quantity"],
    )


def _cart_remove_contract_factory(body):
    return CartRemoveHttpRequest(item_id=body["item_id"])


def _cart_adjust_contract_factory(body):
    return CartAdjustHttpRequest(
        item_id=body["item_id"],
        delta=body["delta"],
    )


def _customer_register_contract_factory(body):
    return CustomerRegisterHttpRequest(
        name=body["name"],
        phone=body["phone"],
        credit_limit=body["credit_limit"],
    )


def _checkout_contract_factory(body):
    return CheckoutHttpRequest(
        customer_id=body.get("customer_id"),
        payment_mode=body.get("payment_mode"),
    )


# ── Views ─────────────────────────────────────────────────────

@csrf_exempt
def items_view(request: HttpRequest) -> JsonResponse:
    if request.method == "GET":
        contract = ItemSearchRequest(term=request.GET.get("q", ""))
        return _json(list_items(contract, build_dependencies()))
    if request.method == "POST":
        return _dispatch_write(
            post_item_create, _item_create_contract_factory, request,
        )
    return _method_not_allowed()


@csrf_exempt
def cart_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    return _json(get_cart(build_dependencies()))


@csrf_exempt
def cart_add_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    return _dispatch_write(post_cart_add, _cart_add_contract_factory, request)


@csrf_exempt
def cart_remove_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    return _dispatch_write(
        post_cart_remove, _cart_remove_contract_factory, request,
    )


@csrf_exempt
def cart_adjust_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    return _dispatch_write(
        post_cart_adjust, _cart_adjust_contract_factory, request,
    )


@csrf_exempt
def cart_clear_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    return _json(post_cart_clear(build_dependencies()))


@csrf_exempt
def customers_view(request: HttpRequest) -> JsonResponse:
    if request.method == "GET":
        return _json(list_customers(build_dependencies()))
    if request.method == "POST":
        return _dispatch_write(
            post_customer_register,
            _customer_register_contract_factory,
            request,
        )
    return _method_not_allowed()


@csrf_exempt
def checkout_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    return _dispatch_write(post_checkout, _checkout_contract_factory, request)


@csrf_exempt
def transactions_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    contract = TransactionsReadRequest(
        payment_mode=request.GET.get("payment_mode") or None,
    )
    return _json(list_transactions(contract, build_dependencies()))
