"""Turn validated input into a rendered balance sheet.

`build_balance_sheet` is the pure transform behind the CLI: aggregate each
series, check that both grids share an anchor, merge, and render dates.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from balance_sheet.aggregate.merge import merge_balances
from balance_sheet.aggregate.months import SlotMatch, aggregate_months
from balance_sheet.errors import AnchorMismatchError
from balance_sheet.models import BalanceInput, BalanceRow, BalanceSheet

log = logging.getLogger(__name__)

START_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.000Z"


def format_start_date(ts: datetime) -> str:
    """Render `ts` as RFC3339 UTC with a fixed `.000` fraction.

    Naive timestamps are taken as UTC; sub-second precision is dropped.
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc).strftime(START_DATE_FORMAT)


def build_balance_sheet(
    data: BalanceInput,
    slot_match: SlotMatch = SlotMatch.EXACT,
    allow_anchor_mismatch: bool = False,
) -> BalanceSheet:
    """Build the monthly revenue-minus-expense balance sheet.

    Args:
        data: Validated expense and revenue entries.
        slot_match: Matching policy passed to `aggregate_months`.
        allow_anchor_mismatch: When False, series anchored on different
            start-of-year timestamps are rejected. When True they are merged
            by date order anyway, which interleaves rather than nets them.

    Returns:
        `BalanceSheet` ready for serialization.

    Raises:
        EmptySeriesError: if either series is empty.
        OffGridEntryError: if an entry falls outside its series' grid.
        AnchorMismatchError: if the anchors differ and mismatches are not allowed.
    """
    expense = aggregate_months(data.expense_data, slot_match, series="expense")
    revenue = aggregate_months(data.revenue_data, slot_match, series="revenue")

    if expense.anchor != revenue.anchor:
        msg = (
            f"expense and revenue grids are anchored differently "
            f"({expense.anchor.isoformat()} vs {revenue.anchor.isoformat()})"
        )
        if not allow_anchor_mismatch:
            raise AnchorMismatchError(msg)
        log.warning("%s; months will be interleaved instead of netted", msg)

    log.info("Generating balance sheet...")
    entries = merge_balances(expense, revenue)
    sheet = BalanceSheet(
        balance=[
            BalanceRow(amount=e.amount, start_date=format_start_date(e.start_date))
            for e in entries
        ]
    )
    log.info("Completed generating balance sheet: %d months", len(sheet.balance))
    return sheet
