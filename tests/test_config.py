from __future__ import annotations

from pathlib import Path

import pytest

from balance_sheet.aggregate.months import SlotMatch
from balance_sheet.config import get_settings

ENV_VARS = (
    "BALANCE_INPUT_PATH",
    "BALANCE_OUTPUT_PATH",
    "BALANCE_SLOT_MATCH",
    "BALANCE_ALLOW_ANCHOR_MISMATCH",
    "BALANCE_LOG_PATH",
    "BALANCE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = get_settings()
    assert s.input_path == Path("2-input.json")
    assert s.output_path == Path("2-input-test.json")
    assert s.slot_match is SlotMatch.EXACT
    assert s.allow_anchor_mismatch is False
    assert s.log_path is None
    assert s.log_level == "INFO"


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BALANCE_INPUT_PATH", "data/in.json")
    monkeypatch.setenv("BALANCE_SLOT_MATCH", " Month ")
    monkeypatch.setenv("BALANCE_ALLOW_ANCHOR_MISMATCH", "yes")
    monkeypatch.setenv("BALANCE_LOG_PATH", "logs/balance.log")
    monkeypatch.setenv("BALANCE_LOG_LEVEL", "debug")
    s = get_settings()
    assert s.input_path == Path("data/in.json")
    assert s.slot_match is SlotMatch.MONTH
    assert s.allow_anchor_mismatch is True
    assert s.log_path == Path("logs/balance.log")
    assert s.log_level == "DEBUG"


def test_unknown_slot_match_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BALANCE_SLOT_MATCH", "fuzzy")
    with pytest.raises(RuntimeError, match="BALANCE_SLOT_MATCH"):
        get_settings()
