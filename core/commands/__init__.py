"""
POS Billing — Command Layer
==============================
Rejection reasons shared by every engine and the HTTP layer.
"""

from core.commands.rejection import (
    ReasonCode,
    RejectionReason,
)

__all__ = [
    "ReasonCode",
    "RejectionReason",
]
