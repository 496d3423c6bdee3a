"""Merge an expense grid and a revenue grid into signed monthly balances."""

from __future__ import annotations

import logging

from balance_sheet.models import AggregationResult, BalanceEntry, MonthSlot

log = logging.getLogger(__name__)


def _as_entry(slot: MonthSlot) -> BalanceEntry:
    return BalanceEntry(amount=slot.amount, start_date=slot.start_date)


def merge_balances(expense: AggregationResult, revenue: AggregationResult) -> list[BalanceEntry]:
    """Sorted-merge two month grids by date and truncate to the real extent.

    Months present on both sides yield ``revenue - expense``. A month present
    on one side only is emitted with that side's amount unchanged. The merged
    sequence is cut to ``max(expense.last_real_month, revenue.last_real_month)``
    entries.

    Args:
        expense: Aggregated expense series.
        revenue: Aggregated revenue series.

    Returns:
        Chronologically ordered balance entries.
    """
    exp, rev = expense.months, revenue.months
    merged: list[BalanceEntry] = []
    i = j = 0

    while i < len(exp) and j < len(rev):
        e, r = exp[i], rev[j]
        if e.start_date == r.start_date:
            merged.append(BalanceEntry(amount=r.amount - e.amount, start_date=e.start_date))
            i += 1
            j += 1
        elif e.start_date > r.start_date:
            merged.append(_as_entry(r))
            j += 1
        else:
            merged.append(_as_entry(e))
            i += 1

    merged.extend(_as_entry(e) for e in exp[i:])
    merged.extend(_as_entry(r) for r in rev[j:])

    extent = max(expense.last_real_month, revenue.last_real_month)
    log.debug("Merged %d months, keeping the first %d", len(merged), extent)
    return merged[:extent]
