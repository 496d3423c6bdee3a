"""Pydantic models for the input entries, month grid and balance sheet.

Input models mirror the JSON layout (`expenseData`/`revenueData` lists of
`{amount, startDate}`); the remaining models carry values between the
aggregation, merge and export steps.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator, model_validator

MONTHS_PER_YEAR = 12

# date and time of day are both required; the offset is optional
TIMESTAMP_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})?$"
)


class DatedAmount(BaseModel):
    """One raw expense or revenue observation.

    Timestamps without an offset are taken as UTC.
    """
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
    amount: StrictInt
    start_date: datetime = Field(..., alias="startDate")

    @field_validator("start_date", mode="before")
    @classmethod
    def _require_timestamp_text(cls, v: object) -> object:
        if isinstance(v, datetime):
            return v
        if isinstance(v, str) and TIMESTAMP_RE.match(v):
            return v
        raise ValueError("startDate must be an RFC3339 timestamp string")

    @field_validator("start_date")
    @classmethod
    def _assume_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class BalanceInput(BaseModel):
    """Top-level input document."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
    expense_data: list[DatedAmount] = Field(..., alias="expenseData")
    revenue_data: list[DatedAmount] = Field(..., alias="revenueData")


class MonthSlot(BaseModel):
    """Summed amount for one month of a series' grid."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    amount: int
    start_date: datetime


class AggregationResult(BaseModel):
    """A series folded onto its 12-slot grid.

    Attributes:
        months: The 12 slots in ascending date order, zero-filled where no
            entry landed.
        last_real_month: Highest calendar month (1-12) seen among the raw
            entries; only this many leading slots are meaningful.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    months: list[MonthSlot]
    last_real_month: int = Field(..., ge=1, le=MONTHS_PER_YEAR)

    @model_validator(mode="after")
    def _check_grid(self) -> "AggregationResult":
        if len(self.months) != MONTHS_PER_YEAR:
            raise ValueError(f"expected {MONTHS_PER_YEAR} month slots, got {len(self.months)}")
        dates = [m.start_date for m in self.months]
        if any(a >= b for a, b in zip(dates, dates[1:])):
            raise ValueError("month slots must be strictly ascending by date")
        return self

    @property
    def anchor(self) -> datetime:
        """Start-of-year timestamp the grid was generated from."""
        return self.months[0].start_date


class BalanceEntry(BaseModel):
    """Net amount for one month (revenue minus expense)."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    amount: int
    start_date: datetime


class BalanceRow(BaseModel):
    """Output row with its date already rendered as text."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
    amount: int
    start_date: str = Field(..., alias="startDate")


class BalanceSheet(BaseModel):
    """Output document: `{"balance": [{"amount", "startDate"}, ...]}`."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    balance: list[BalanceRow]
