"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the pipeline's file locations and matching policy from environment
variables (optionally supplied through a project-root `.env`).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

from balance_sheet.aggregate.months import SlotMatch

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Container for pipeline configuration read from the environment.

    Attributes:
        input_path: JSON file holding `expenseData` and `revenueData`.
        output_path: Destination for the rendered balance sheet.
        slot_match: How entries are matched to month slots.
        allow_anchor_mismatch: Merge series anchored on different years
            instead of failing.
        log_path: Optional log file in addition to stdout.
        log_level: Logging level name.
    """
    input_path: Path
    output_path: Path
    slot_match: SlotMatch
    allow_anchor_mismatch: bool
    log_path: Path | None
    log_level: str


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `BALANCE_SLOT_MATCH` names an unknown policy.
    """
    input_path = Path(os.getenv("BALANCE_INPUT_PATH", "2-input.json"))
    output_path = Path(os.getenv("BALANCE_OUTPUT_PATH", "2-input-test.json"))
    raw_match = os.getenv("BALANCE_SLOT_MATCH", SlotMatch.EXACT.value).strip().lower()
    allow_mismatch = os.getenv("BALANCE_ALLOW_ANCHOR_MISMATCH", "").strip().lower() in _TRUTHY
    raw_log_path = os.getenv("BALANCE_LOG_PATH", "").strip()
    log_level = os.getenv("BALANCE_LOG_LEVEL", "INFO").strip().upper()

    try:
        slot_match = SlotMatch(raw_match)
    except ValueError:
        choices = ", ".join(m.value for m in SlotMatch)
        raise RuntimeError(
            f"BALANCE_SLOT_MATCH must be one of: {choices} (got {raw_match!r})."
        ) from None

    return Settings(
        input_path=input_path,
        output_path=output_path,
        slot_match=slot_match,
        allow_anchor_mismatch=allow_mismatch,
        log_path=Path(raw_log_path) if raw_log_path else None,
        log_level=log_level,
    )
