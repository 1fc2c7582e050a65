"""
Tests for core.time — injectable clocks.
"""

import pytest
from datetime import date, datetime, timezone, timedelta

from core.time.clock import FixedClock, SystemClock


# ── Clock Tests ──────────────────────────────────────────────

class TestSystemClock:
    def test_returns_utc_datetime(self):
        clock = SystemClock()
        dt = clock.now_utc()
        assert dt.tzinfo is not None
        assert dt.tzinfo == timezone.utc

    def test_time_advances(self):
        clock = SystemClock()
        t1 = clock.now_utc()
        t2 = clock.now_utc()
        assert t2 >= t1

    def test_today_is_a_date(self):
        assert isinstance(SystemClock().today(), date)


class TestFixedClock:
    def test_returns_fixed_time(self):
        fixed = datetime(2025, 3, 28, 12, 0, 0, tzinfo=timezone.utc)
        clock = FixedClock(fixed)
        assert clock.now_utc() == fixed
        assert clock.now_utc() == fixed  # Same every time
        assert clock.today() == date(2025, 3, 28)

    def test_rejects_naive_datetime(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            FixedClock(datetime(2025, 1, 1))

    def test_advance_seconds(self):
        fixed = datetime(2025, 3, 28, 12, 0, 0, tzinfo=timezone.utc)
        clock = FixedClock(fixed)
        clock.advance(seconds=60)
        assert clock.now_utc() == fixed + timedelta(seconds=60)

    def test_advance_days_rolls_the_date(self):
        clock = FixedClock(datetime(2025, 3, 28, 23, 0, tzinfo=timezone.utc))
        clock.advance(days=1)
        assert clock.today() == date(2025, 3, 29)
