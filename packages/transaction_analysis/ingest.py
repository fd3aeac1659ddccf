"""Load analysis inputs from JSON or CSV files.

Loaders only parse; they never filter. Rows with odd amounts are handed to the
aggregators untouched so the usual validity rules decide what counts.
"""

from __future__ import annotations

import csv
import json
import re
from collections.abc import Iterable, Mapping
from os import PathLike
from pathlib import Path
from typing import Any

from .logging_setup import get_logger

logger = get_logger("transaction_analysis.ingest")

_INT_RE = re.compile(r"^[+-]?\d+$")


def _coerce_amount(raw: Any) -> Any:
    """Parse a CSV amount cell to ``int``/``float``; leave it raw when it doesn't parse."""

    if not isinstance(raw, str):
        return raw
    s = raw.strip().replace(",", "")
    if _INT_RE.match(s):
        return int(s)
    try:
        return float(s)
    except ValueError:
        return raw


def rows_to_transactions(rows: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Convert CSV rows to transaction dicts with numeric ``amount`` where possible.

    Blank cells for the optional text columns become ``None``.
    """

    out: list[dict[str, Any]] = []
    for row in rows:
        record: dict[str, Any] = {}
        for key, value in row.items():
            if key is None:
                # Surplus cells beyond the header row
                continue
            k = key.strip()
            if isinstance(value, str):
                value = value.strip() or None
            record[k] = value
        if "amount" in record:
            record["amount"] = _coerce_amount(record["amount"])
        out.append(record)
    return out


def _read_json(p: Path) -> Any:
    with p.open(encoding="utf-8") as f:
        return json.load(f)


def load_transactions(path: str | PathLike[str]) -> list[Any]:
    """Read a transaction batch from ``path``.

    Supported formats:
    - ``.json``: a top-level array of records, or an object holding one under
      ``"transactions"``.
    - ``.csv``: a header row naming the record keys (``id``, ``type``,
      ``amount``, ``to``, ``category``, ``date``).

    Raises ``ValueError`` for unsupported extensions or a JSON document of the
    wrong shape; I/O and parse errors propagate unchanged.
    """

    p = Path(path)
    suffix = p.suffix.lower()

    if suffix == ".json":
        data = _read_json(p)
        if isinstance(data, Mapping):
            data = data.get("transactions")
        if not isinstance(data, list):
            raise ValueError(
                f"expected a JSON array of transactions (or a 'transactions' array): {p}"
            )
        logger.info("loaded %d transaction records from %s", len(data), p)
        return data

    if suffix == ".csv":
        with p.open(encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            if reader.fieldnames is None:
                raise csv.Error(f"CSV appears to have no header row: {p}")
            records = rows_to_transactions(reader)
        logger.info("loaded %d transaction records from %s", len(records), p)
        return records

    raise ValueError(f"unsupported input format {suffix or '(none)'!r}; use .json or .csv")


def load_auction(path: str | PathLike[str]) -> tuple[Any, Any]:
    """Read ``{"team": {...}, "players": [...]}`` from a JSON file.

    Returns the raw ``(team, players)`` pair; validation is left to
    :func:`transaction_analysis.auction.summarize_auction`.
    """

    p = Path(path)
    data = _read_json(p)
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object with 'team' and 'players': {p}")
    return data.get("team"), data.get("players")


__all__ = ["load_auction", "load_transactions", "rows_to_transactions"]
