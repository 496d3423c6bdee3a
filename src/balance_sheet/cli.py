"""Command-line interface for building the balance sheet.

Reads the input file named in settings, builds the balance sheet and writes
it to the configured output file. Exits with status 1 on any pipeline error.
"""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from dotenv import load_dotenv

from balance_sheet.config import Settings, get_settings
from balance_sheet.errors import BalanceSheetError
from balance_sheet.export.write_balance import write_balance_sheet
from balance_sheet.ingest.load_input import read_input
from balance_sheet.logging_config import configure_logging
from balance_sheet.models import BalanceSheet
from balance_sheet.pipeline import build_balance_sheet

log = logging.getLogger(__name__)


def run(s: Settings) -> BalanceSheet:
    """Read input, build the balance sheet and write it out.

    Args:
        s: Settings naming the input/output files and matching policy.

    Returns:
        The balance sheet that was written.
    """
    data = read_input(s.input_path)
    sheet = build_balance_sheet(
        data,
        slot_match=s.slot_match,
        allow_anchor_mismatch=s.allow_anchor_mismatch,
    )
    write_balance_sheet(sheet, s.output_path)
    return sheet


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    The command takes no options; file locations come from the environment
    (see `balance_sheet.config`).
    """
    return argparse.ArgumentParser(
        prog="balance_sheet",
        description=(
            "Merge monthly expense and revenue entries into a balance sheet. "
            "Paths are read from BALANCE_INPUT_PATH and BALANCE_OUTPUT_PATH."
        ),
    )


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point: configure logging, run the pipeline, set exit status."""
    load_dotenv()
    build_parser().parse_args(argv)

    try:
        s = get_settings()
        configure_logging(s.log_path, s.log_level)
    except RuntimeError as e:
        configure_logging()
        log.error("Invalid configuration: %s", e)
        raise SystemExit(1) from e

    try:
        run(s)
    except BalanceSheetError as e:
        log.error("%s", e)
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
