"""
POS Billing Django Adapter Wiring
=================================
Constructs HttpApiDependencies for the running process.

This module is adapter-only glue:
- settings.BILLING feeds BillingConfig
- one in-memory BillingService per process (state lives as long
  as the process does)
"""

from __future__ import annotations

import logging
import threading

from django.conf import settings

from core.config.rules import BillingConfig
from core.http_api.dependencies import HttpApiDependencies
from core.time.clock import SystemClock
from engines.billing.seed import seed_demo_data
from engines.billing.services import BillingService

logger = logging.getLogger("billing.http")

_DEPENDENCIES_LOCK = threading.Lock()
_DEPENDENCIES: HttpApiDependencies | None = None


def _create_dependencies() -> HttpApiDependencies:
    config = BillingConfig.from_mapping(getattr(settings, "BILLING", None))
    service = BillingService(config=config, clock=SystemClock())
    if config.seed_demo_data:
        seed_demo_data(service)
        logger.info(
            "Seeded demo data: %s items, %s customers, %s transactions",
            len(service.list_items()),
            len(service.list_customers()),
            len(service.list_transactions()),
        )
    return HttpApiDependencies(billing_service=service)


def build_dependencies() -> HttpApiDependencies:
    """
    Lazy singleton wiring for adapter runtime.
    """
    global _DEPENDENCIES
    with _DEPENDENCIES_LOCK:
        if _DEPENDENCIES is None:
            _DEPENDENCIES = _create_dependencies()
        return _DEPENDENCIES


def reset_dependencies() -> None:
    """Drop the process-wide service; the next request builds a fresh one."""
    global _DEPENDENCIES
    with _DEPENDENCIES_LOCK:
        _DEPENDENCIES = None
