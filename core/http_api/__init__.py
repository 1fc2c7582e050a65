"""
POS Billing HTTP API - Public API
=================================
"""

from core.http_api.contracts import (
    CartAddHttpRequest,
    CartAdjustHttpRequest,
    CartRemoveHttpRequest,
    CheckoutHttpRequest,
    CustomerRegisterHttpRequest,
    HttpApiErrorBody,
    HttpApiResponse,
    ItemCreateHttpRequest,
    ItemSearchRequest,
    TransactionsReadRequest,
)
from core.http_api.dependencies import HttpApiDependencies
from core.http_api.errors import (
    HTTP_STATUS_BY_CODE,
    error_response,
    map_rejection_reason,
    rejection_response,
    status_for_payload,
    success_response,
)
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

__all__ = [
    "CartAddHttpRequest",
    "CartAdjustHttpRequest",
    "CartRemoveHttpRequest",
    "CheckoutHttpRequest",
    "CustomerRegisterHttpRequest",
    "HttpApiErrorBody",
    "HttpApiResponse",
    "ItemCreateHttpRequest",
    "ItemSearchRequest",
    "TransactionsReadRequest",
    "HttpApiDependencies",
    "HTTP_STATUS_BY_CODE",
    "error_response",
    "map_rejection_reason",
    "rejection_response",
    "status_for_payload",
    "success_response",
    "get_cart",
    "list_customers",
    "list_items",
    "list_transactions",
    "post_cart_add",
    "post_cart_adjust",
    "post_cart_clear",
    "post_cart_remove",
    "post_checkout",
    "post_customer_register",
    "post_item_create",
]
