"""Fold a series of dated amounts onto a 12-month grid.

The grid is anchored on the first entry: same day-of-month and time-of-day,
moved back to January of that year. Slots are generated by adding 0..11
months to the anchor. A day-of-month past the end of a target month rolls
over into the following month (anchor Jan 31 gives Mar 3 for "February" in
2021), so slot dates are only first-of-month when the anchor is.

Two matching policies are supported:

- ``SlotMatch.EXACT``: an entry must equal a slot timestamp exactly.
- ``SlotMatch.MONTH``: the grid is the first instant of each month in the
  anchor's timezone and entries match on (year, month) alone.

Entries that fit no slot raise `OffGridEntryError` under either policy.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, Hashable, Sequence

import pandas as pd

from balance_sheet.errors import EmptySeriesError, OffGridEntryError
from balance_sheet.models import MONTHS_PER_YEAR, AggregationResult, DatedAmount, MonthSlot

log = logging.getLogger(__name__)


class SlotMatch(str, Enum):
    """How an entry's timestamp is matched to a month slot."""
    EXACT = "exact"
    MONTH = "month"


def add_months(ts: datetime, months: int) -> datetime:
    """Shift `ts` by `months` calendar months, keeping day and time of day.

    Days past the end of the target month roll over into the next month
    rather than being clamped.

    Args:
        ts: Timestamp to shift.
        months: Number of months to add (may be negative).

    Returns:
        The shifted timestamp, with the same tzinfo as `ts`.
    """
    total = ts.month - 1 + months
    year = ts.year + total // MONTHS_PER_YEAR
    month = total % MONTHS_PER_YEAR + 1
    return ts.replace(year=year, month=month, day=1) + timedelta(days=ts.day - 1)


def anchor_for(ts: datetime, slot_match: SlotMatch = SlotMatch.EXACT) -> datetime:
    """Return the start-of-year anchor for a series whose first entry is `ts`."""
    if slot_match is SlotMatch.MONTH:
        return ts.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    return add_months(ts, 1 - ts.month)


def slot_grid(anchor: datetime) -> list[datetime]:
    """Return the 12 slot timestamps generated from `anchor`."""
    return [add_months(anchor, i) for i in range(MONTHS_PER_YEAR)]


def _slot_key(slot_match: SlotMatch, anchor: datetime) -> Callable[[datetime], Hashable]:
    if slot_match is SlotMatch.MONTH:
        def month_key(ts: datetime) -> Hashable:
            local = ts.astimezone(anchor.tzinfo)
            return (local.year, local.month)
        return month_key
    # aware datetimes hash and compare by instant
    return lambda ts: ts


def aggregate_months(
    entries: Sequence[DatedAmount],
    slot_match: SlotMatch = SlotMatch.EXACT,
    series: str = "series",
) -> AggregationResult:
    """Sum a series' entries per month slot.

    Args:
        entries: Non-empty sequence of entries; the first one anchors the grid.
        slot_match: Matching policy between entries and slots.
        series: Label used in log and error messages (e.g. "expense").

    Returns:
        `AggregationResult` with 12 ascending, zero-filled slots and the
        highest month number seen among `entries`.

    Raises:
        EmptySeriesError: if `entries` is empty.
        OffGridEntryError: if an entry matches none of the 12 slots.
    """
    if not entries:
        raise EmptySeriesError(f"{series} data is empty; cannot derive a start-of-year anchor")

    slot_match = SlotMatch(slot_match)
    log.info("Merging same month %s data (%d entries)...", series, len(entries))

    anchor = anchor_for(entries[0].start_date, slot_match)
    grid = slot_grid(anchor)
    key = _slot_key(slot_match, anchor)
    index_by_key = {key(ts): i for i, ts in enumerate(grid)}

    slots: list[int] = []
    amounts: list[int] = []
    last_real_month = 0
    for entry in entries:
        idx = index_by_key.get(key(entry.start_date))
        if idx is None:
            raise OffGridEntryError(
                f"{series} entry dated {entry.start_date.isoformat()} does not fall on "
                f"any month slot of the grid anchored at {anchor.isoformat()} "
                f"(slot matching: {slot_match.value})"
            )
        slots.append(idx)
        amounts.append(entry.amount)
        # month policy counts months in the grid's timezone
        month = grid[idx].month if slot_match is SlotMatch.MONTH else entry.start_date.month
        last_real_month = max(last_real_month, month)

    totals = (
        # object dtype keeps Python ints, so sums never wrap at int64
        pd.DataFrame({"slot": slots, "amount": pd.Series(amounts, dtype=object)})
        .groupby("slot")["amount"]
        .agg(lambda group: sum(group, 0))
        .reindex(range(MONTHS_PER_YEAR), fill_value=0)
    )

    log.info("Sorting %s data by date...", series)
    months = sorted(
        (MonthSlot(amount=int(totals.loc[i]), start_date=ts) for i, ts in enumerate(grid)),
        key=lambda slot: slot.start_date,
    )

    log.debug("%s grid anchored at %s, last real month %d", series, anchor.isoformat(), last_real_month)
    return AggregationResult(months=months, last_real_month=last_real_month)
