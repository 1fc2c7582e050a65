"""
POS Billing Cart Engine
=========================
Active cart backed by inventory reservations.
"""

from engines.cart.services import Cart

__all__ = ["Cart"]
