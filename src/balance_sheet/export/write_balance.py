"""Persist a balance sheet as indented JSON.

The document is written to a temporary file next to the destination and
renamed into place, so a failed run never leaves a partial output file.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from balance_sheet.errors import IOFailure
from balance_sheet.models import BalanceSheet

log = logging.getLogger(__name__)

OUTPUT_MODE = 0o644


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def render_balance_sheet(sheet: BalanceSheet) -> str:
    """Return the JSON text for `sheet` using its wire field names."""
    return sheet.model_dump_json(by_alias=True, indent=2)


def write_balance_sheet(sheet: BalanceSheet, path: Path) -> Path:
    """Atomically write `sheet` to `path`.

    Raises:
        IOFailure: if the destination cannot be written.
    """
    text = render_balance_sheet(sheet)
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", delete=False
        ) as fh:
            tmp_name = fh.name
            fh.write(text)
        os.chmod(tmp_name, OUTPUT_MODE & ~_current_umask())
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise IOFailure(f"cannot write output file {path}: {e}") from e

    log.info("Saved balance sheet: %s (%d months)", path, len(sheet.balance))
    return path
