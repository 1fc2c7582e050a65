"""
POS Billing HTTP API - Contracts
================================
Framework-agnostic request/response DTOs for billing endpoints.

Contracts check transport shape only (ids are ints, text is text).
Range and business rules (non-negative, within stock, within
credit) stay with the engines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number_like(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, str))


# ══════════════════════════════════════════════════════════════
# INVENTORY
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ItemSearchRequest:
    term: str = ""

    def __post_init__(self):
        if not isinstance(self.term, str):
            raise ValueError("q must be a string.")


@dataclass(frozen=True)
class ItemCreateHttpRequest:
    name: str
    price: Any
    quantity: Any
    tax_rate: Any

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise ValueError("name must be a string.")
        for field_name in ("price", "quantity", "tax_rate"):
            if not _is_number_like(getattr(self, field_name)):
                raise ValueError(f"{field_name} must be a number.")


# ══════════════════════════════════════════════════════════════
# CART
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class CartAddHttpRequest:
    item_id: int
    quantity: int

    def __post_init__(self):
        if not _is_int(self.item_id):
            raise ValueError("item_id must be an integer.")
        if not _is_int(self.quantity):
            raise ValueError("quantity must be an integer.")


@dataclass(frozen=True)
class CartRemoveHttpRequest:
    item_id: int

    def __post_init__(self):
        if not _is_int(self.item_id):
            raise ValueError("item_id must be an integer.")


@dataclass(frozen=True)
class CartAdjustHttpRequest:
    item_id: int
    delta: int

    def __post_init__(self):
        if not _is_int(self.item_id):
            raise ValueError("item_id must be an integer.")
        if not _is_int(self.delta):
            raise ValueError("delta must be an integer.")


# ══════════════════════════════════════════════════════════════
# CUSTOMERS / CHECKOUT / HISTORY
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class CustomerRegisterHttpRequest:
    name: str
    phone: str
    credit_limit: Any

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise ValueError("name must be a string.")
        if not isinstance(self.phone, str):
            raise ValueError("phone must be a string.")
        if not _is_number_like(self.credit_limit):
            raise ValueError("credit_limit must be a number.")


@dataclass(frozen=True)
class CheckoutHttpRequest:
    customer_id: Optional[int] = None
    payment_mode: Optional[str] = None

    def __post_init__(self):
        if self.customer_id is not None and not _is_int(self.customer_id):
            raise ValueError("customer_id must be an integer or null.")
        if self.payment_mode is not None and not isinstance(self.payment_mode, str):
            raise ValueError("payment_mode must be a string or null.")


@dataclass(frozen=True)
class TransactionsReadRequest:
    payment_mode: Optional[str] = None

    def __post_init__(self):
        if self.payment_mode is not None and not isinstance(self.payment_mode, str):
            raise ValueError("payment_mode must be a string or null.")


# ══════════════════════════════════════════════════════════════
# RESPONSE ENVELOPE
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class HttpApiErrorBody:
    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class HttpApiResponse:
    ok: bool
    data: Any = None
    error: Optional[HttpApiErrorBody] = None
    meta: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            body = {"ok": True, "data": self.data}
        else:
            if self.error is None:
                raise ValueError("error must be set when ok is False.")
            body = {"ok": False, "error": self.error.to_dict()}
        if self.meta:
            body["meta"] = dict(self.meta)
        return body
