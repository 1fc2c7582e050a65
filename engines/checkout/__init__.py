"""
POS Billing Checkout Engine
=============================
Atomic cart-to-sale commit.
"""

from engines.checkout.services import CheckoutCoordinator, CheckoutState

__all__ = [
    "CheckoutCoordinator",
    "CheckoutState",
]
