from __future__ import annotations

from datetime import timezone

import pytest
from pydantic import ValidationError

from balance_sheet.models import AggregationResult, BalanceInput, DatedAmount, MonthSlot
from conftest import utc


def test_dated_amount_reads_wire_names() -> None:
    rec = DatedAmount.model_validate({"amount": -7, "startDate": "2021-04-01T00:00:00.000Z"})
    assert rec.amount == -7
    assert rec.start_date == utc(2021, 4)


def test_dated_amount_assumes_utc_for_naive_timestamps() -> None:
    rec = DatedAmount.model_validate({"amount": 1, "startDate": "2021-04-01T00:00:00"})
    assert rec.start_date.tzinfo == timezone.utc


def test_dated_amount_rejects_fractional_amount() -> None:
    with pytest.raises(ValidationError):
        DatedAmount.model_validate({"amount": 1.5, "startDate": "2021-04-01T00:00:00Z"})


def test_balance_input_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        BalanceInput.model_validate({"expenseData": [], "revenueData": [], "other": 1})


def test_aggregation_result_requires_twelve_ascending_slots() -> None:
    slots = [MonthSlot(amount=0, start_date=utc(2021, m)) for m in range(1, 13)]
    AggregationResult(months=slots, last_real_month=1)

    with pytest.raises(ValidationError):
        AggregationResult(months=slots[:11], last_real_month=1)
    with pytest.raises(ValidationError):
        AggregationResult(months=list(reversed(slots)), last_real_month=1)


def test_aggregation_result_bounds_last_real_month() -> None:
    slots = [MonthSlot(amount=0, start_date=utc(2021, m)) for m in range(1, 13)]
    with pytest.raises(ValidationError):
        AggregationResult(months=slots, last_real_month=0)
    with pytest.raises(ValidationError):
        AggregationResult(months=slots, last_real_month=13)


@pytest.mark.parametrize("value", [1609459200, "2021-01-01", "01/01/2021 00:00"])
def test_dated_amount_requires_full_timestamp_text(value: object) -> None:
    with pytest.raises(ValidationError):
        DatedAmount.model_validate({"amount": 1, "startDate": value})


def test_dated_amount_accepts_offset_timestamps() -> None:
    rec = DatedAmount.model_validate({"amount": 1, "startDate": "2021-01-01T05:30:00+05:30"})
    assert rec.start_date == utc(2021, 1)
