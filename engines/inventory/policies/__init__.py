"""
POS Billing Inventory Engine — Policies
=========================================
Stock checks shared by the Inventory Store and the Cart.
"""

from __future__ import annotations

from typing import Optional

from core.commands.rejection import ReasonCode, RejectionReason
from core.primitives.item import Item


def negative_stock_policy(item: Item, amount: int) -> Optional[RejectionReason]:
    """
    Reject a reservation that is non-positive or larger than the
    available quantity. Stock can never go below zero.
    """
    if amount < 1 or amount > item.quantity:
        return RejectionReason(
            code=ReasonCode.INSUFFICIENT_STOCK,
            message=(
                f"Insufficient stock: {item.quantity} available, "
                f"{amount} requested for item {item.item_id}."
            ),
            policy_name="negative_stock_policy",
            details={
                "item_id": item.item_id,
                "requested": amount,
                "available": item.quantity,
            },
        )
    return None
