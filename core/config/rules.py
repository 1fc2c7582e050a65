"""
POS Billing Core Config — Operator Settings
==============================================
Tunable values that are data, not code. The Django adapter
builds a BillingConfig from settings.BILLING; tests build one
directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from core.errors import ValidationError
from core.primitives.ledger import PaymentMode

DEFAULT_LOW_STOCK_THRESHOLD = 3


@dataclass(frozen=True)
class BillingConfig:
    """
    Billing engine settings.

    low_stock_threshold:  Items at or below this quantity are flagged.
    seed_demo_data:       Load the demo catalogue, customers and
                          history when the service is wired.
    default_payment_mode: Payment mode a fresh checkout session starts in.
    """

    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    seed_demo_data: bool = False
    default_payment_mode: PaymentMode = PaymentMode.PAID

    def __post_init__(self) -> None:
        if (
            isinstance(self.low_stock_threshold, bool)
            or not isinstance(self.low_stock_threshold, int)
            or self.low_stock_threshold < 0
        ):
            raise ValidationError(
                "low_stock_threshold must be a non-negative integer.",
                field="low_stock_threshold",
            )
        if not isinstance(self.seed_demo_data, bool):
            raise ValidationError(
                "seed_demo_data must be a boolean.", field="seed_demo_data",
            )
        if not isinstance(self.default_payment_mode, PaymentMode):
            raise ValidationError(
                "default_payment_mode must be PaymentMode.",
                field="default_payment_mode",
            )

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> BillingConfig:
        """Build from a settings dict; keys are case-insensitive."""
        values = {str(k).lower(): v for k, v in (data or {}).items()}
        unknown = set(values) - {
            "low_stock_threshold", "seed_demo_data", "default_payment_mode",
        }
        if unknown:
            raise ValidationError(
                f"Unknown billing settings: {', '.join(sorted(unknown))}.",
                field="BILLING",
            )
        kwargs: dict[str, Any] = {}
        if "low_stock_threshold" in values:
            kwargs["low_stock_threshold"] = values["low_stock_threshold"]
        if "seed_demo_data" in values:
            kwargs["seed_demo_data"] = values["seed_demo_data"]
        if "default_payment_mode" in values:
            kwargs["default_payment_mode"] = PaymentMode.parse(
                values["default_payment_mode"]
            )
        return cls(**kwargs)
