"""
POS Billing Customer Engine
=============================
Customer registry and credit accounting.
"""

from engines.customer.policies import credit_limit_policy
from engines.customer.services import CustomerLedger

__all__ = [
    "CustomerLedger",
    "credit_limit_policy",
]
