"""
POS Billing Core Time — Injectable Clock
==========================================
Engines never call datetime.now() directly. The Checkout
Coordinator stamps each sale with clock.today(), so tests pin
dates with FixedClock and production uses SystemClock.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Protocol


# ══════════════════════════════════════════════════════════════
# CLOCK PROTOCOL
# ══════════════════════════════════════════════════════════════

class Clock(Protocol):
    """Injectable time source."""

    def now_utc(self) -> datetime:
        ...  # pragma: no cover

    def today(self) -> date:
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ══════════════════════════════════════════════════════════════

class SystemClock:
    """Production clock — real system time."""

    def now_utc(self) -> datetime:
        return datetime.now(timezone.utc)

    def today(self) -> date:
        return self.now_utc().date()


class FixedClock:
    """
    Test clock — returns a fixed timestamp.

    Usage:
        clock = FixedClock(datetime(2025, 3, 28, tzinfo=timezone.utc))
        assert clock.today().isoformat() == "2025-03-28"
    """

    def __init__(self, fixed_dt: datetime) -> None:
        if fixed_dt.tzinfo is None:
            raise ValueError("FixedClock requires timezone-aware datetime.")
        self._fixed_dt = fixed_dt

    def now_utc(self) -> datetime:
        return self._fixed_dt

    def today(self) -> date:
        return self._fixed_dt.date()

    def advance(self, days: int = 0, seconds: float = 0) -> None:
        """Move the fixed time forward (multi-day test scenarios)."""
        self._fixed_dt = self._fixed_dt + timedelta(days=days, seconds=seconds)
