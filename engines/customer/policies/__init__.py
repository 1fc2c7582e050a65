"""
POS Billing Customer Engine — Policies
========================================
Credit checks shared by the Customer Ledger and checkout.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from core.commands.rejection import ReasonCode, RejectionReason
from core.primitives.party import Customer


def credit_limit_policy(
    customer: Customer,
    amount: Decimal,
) -> Optional[RejectionReason]:
    """Reject a charge that would push credit_used past credit_limit."""
    if customer.credit_used + amount > customer.credit_limit:
        return RejectionReason(
            code=ReasonCode.CREDIT_LIMIT_EXCEEDED,
            message=(
                f"Charge of {amount} exceeds available credit "
                f"{customer.available_credit} for customer "
                f"{customer.customer_id}."
            ),
            policy_name="credit_limit_policy",
            details={
                "customer_id": customer.customer_id,
                "amount": str(amount),
                "available": str(customer.available_credit),
            },
        )
    return None
