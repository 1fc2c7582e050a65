"""
POS Billing HTTP API - Dependencies
===================================
Injected collaborators for handler wiring.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from engines.billing.services import BillingService


@dataclass(frozen=True)
class HttpApiDependencies:
    billing_service: "BillingService"
