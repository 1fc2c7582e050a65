"""
POS Billing — Errors
=======================
Typed, recoverable failures raised by the billing engines.

Every error:
- leaves engine state exactly as it was before the call
- carries a stable ReasonCode for transport mapping
- renders a RejectionReason for audit/log output

Stock and credit refusals wrap the RejectionReason produced by
the engine policy that refused them.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from core.commands.rejection import ReasonCode, RejectionReason


class BillingError(Exception):
    """Base error for billing engine operations."""

    code = ReasonCode.VALIDATION_FAILED

    def __init__(
        self,
        message: str,
        *,
        policy_name: str = "billing",
        **details: Any,
    ):
        super().__init__(message)
        self.message = message
        self.policy_name = policy_name
        self.details = details

    def to_rejection(self) -> RejectionReason:
        return RejectionReason(
            code=self.code,
            message=self.message,
            policy_name=self.policy_name,
            details=dict(self.details),
        )


class ValidationError(BillingError, ValueError):
    """Missing, malformed or out-of-range input."""

    code = ReasonCode.VALIDATION_FAILED

    def __init__(self, message: str, *, field: Optional[str] = None, **details):
        if field is not None:
            details["field"] = field
        super().__init__(message, policy_name="input_validation", **details)
        self.field = field


class NotFound(BillingError, LookupError):
    """Unknown item, customer, cart line or transaction reference."""

    code = ReasonCode.NOT_FOUND

    def __init__(self, kind: str, ref: Any):
        self.kind = kind
        self.ref = ref
        super().__init__(
            f"{kind} '{ref}' not found.",
            policy_name="reference_lookup",
            kind=kind,
            ref=ref,
        )


class InsufficientStock(BillingError):
    """Requested quantity exceeds available stock."""

    code = ReasonCode.INSUFFICIENT_STOCK

    def __init__(self, reason: RejectionReason):
        super().__init__(
            reason.message, policy_name=reason.policy_name, **reason.details,
        )
        self.reason = reason
        self.item_id = reason.details["item_id"]
        self.requested = reason.details["requested"]
        self.available = reason.details["available"]

    def to_rejection(self) -> RejectionReason:
        return self.reason


class CreditLimitExceeded(BillingError):
    """Credit charge would breach the customer's credit limit."""

    code = ReasonCode.CREDIT_LIMIT_EXCEEDED

    def __init__(self, reason: RejectionReason):
        super().__init__(
            reason.message, policy_name=reason.policy_name, **reason.details,
        )
        self.reason = reason
        self.customer_id = reason.details["customer_id"]
        self.amount = Decimal(reason.details["amount"])
        self.available = Decimal(reason.details["available"])

    def to_rejection(self) -> RejectionReason:
        return self.reason


class NoCustomerSelected(BillingError):
    """Checkout attempted without a customer."""

    code = ReasonCode.NO_CUSTOMER_SELECTED

    def __init__(self):
        super().__init__(
            "A customer must be selected before completing a purchase.",
            policy_name="checkout_customer_policy",
        )


class EmptyCart(BillingError):
    """Checkout attempted with no cart lines."""

    code = ReasonCode.EMPTY_CART

    def __init__(self):
        super().__init__(
            "Cart is empty.",
            policy_name="checkout_cart_policy",
        )
