"""
POS Billing Inventory Engine
==============================
Item catalogue and stock reservation.
"""

from engines.inventory.policies import negative_stock_policy
from engines.inventory.services import InventoryStore

__all__ = [
    "InventoryStore",
    "negative_stock_policy",
]
