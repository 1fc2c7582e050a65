"""
POS Billing Core Config — Public API
=======================================
Operator-configurable settings.
"""

from core.config.rules import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    BillingConfig,
)

__all__ = [
    "DEFAULT_LOW_STOCK_THRESHOLD",
    "BillingConfig",
]
