"""
POS Billing Engine
====================
Counter-facing application service over the billing engines.
"""

from engines.billing.seed import seed_demo_data
from engines.billing.services import BillingService

__all__ = [
    "BillingService",
    "seed_demo_data",
]
