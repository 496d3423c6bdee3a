"""Read and validate the expense/revenue input document."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from balance_sheet.errors import IOFailure, MalformedSource
from balance_sheet.models import BalanceInput

log = logging.getLogger(__name__)


def parse_input(raw: bytes | str) -> BalanceInput:
    """Decode JSON text into a `BalanceInput`.

    Raises:
        MalformedSource: if the text is not valid JSON or does not match the
            expected `expenseData`/`revenueData` structure.
    """
    try:
        return BalanceInput.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedSource(f"input does not match the expected structure: {e}") from e


def read_input(path: Path) -> BalanceInput:
    """Read `path` and parse it with `parse_input`.

    Args:
        path: JSON file to read.

    Returns:
        Validated input document.

    Raises:
        IOFailure: if the file cannot be read.
        MalformedSource: if its contents cannot be parsed.
    """
    log.info("Parsing JSON data from %s...", path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise IOFailure(f"cannot read input file {path}: {e}") from e

    data = parse_input(raw)
    log.info(
        "Completed parsing JSON data: %d expense entries, %d revenue entries",
        len(data.expense_data),
        len(data.revenue_data),
    )
    return data
