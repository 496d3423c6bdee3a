from __future__ import annotations

from datetime import datetime, timezone

import pytest

from balance_sheet.models import DatedAmount


def utc(year: int, month: int, day: int = 1, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


@pytest.fixture
def entry():
    """Factory for `DatedAmount` values dated in UTC."""
    def _make(amount: int, year: int, month: int, day: int = 1, hour: int = 0, minute: int = 0) -> DatedAmount:
        return DatedAmount(amount=amount, start_date=utc(year, month, day, hour, minute))
    return _make
