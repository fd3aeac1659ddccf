"""Transaction log analysis.

``analyze_transactions`` filters a batch of UPI-style credit/debit records
down to the valid ones and returns a :class:`TransactionSummary`, or ``None``
when the input is unusable:

- the input is not a list-like sequence (strings and mappings do not count);
- the sequence is empty;
- no record survives the validity filter.

A record is valid when it is a mapping whose ``amount`` is a finite real number
greater than zero and whose ``type`` is ``"credit"`` or ``"debit"``. Invalid
records are dropped silently; the function never raises for them.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from types import MappingProxyType
from typing import Any

from .aggregation import (
    add_amounts,
    first_max_by,
    group_key,
    is_finite_number,
    is_record_sequence,
    most_frequent_sorted,
    rounded_mean,
    sum_by_key,
    total,
)
from .logging_setup import get_logger
from .models import TransactionRecord, TransactionSummary

logger = get_logger("transaction_analysis.transactions")

CREDIT = "credit"
DEBIT = "debit"
TRANSACTION_TYPES: tuple[str, ...] = (CREDIT, DEBIT)

# Strict lower bound for ``all_above_100``.
SMALL_AMOUNT_LIMIT = 100
# Inclusive lower bound for ``has_large_transaction``.
LARGE_AMOUNT_THRESHOLD = 5000


def is_valid_transaction(record: Any) -> bool:
    """Return True when ``record`` has a positive finite amount and a known type."""

    if not isinstance(record, Mapping):
        return False
    amount = record.get("amount")
    return (
        is_finite_number(amount)
        and amount > 0
        and record.get("type") in TRANSACTION_TYPES
    )


def valid_transactions(transactions: Any) -> list[TransactionRecord]:
    """Return the valid records of ``transactions`` in input order.

    Non-sequence input yields an empty list.
    """

    if not is_record_sequence(transactions):
        return []
    return [t for t in transactions if is_valid_transaction(t)]


def _type_total(records: list[TransactionRecord], tx_type: str) -> Any:
    return total(r["amount"] for r in records if r["type"] == tx_type)


def _category_key(record: TransactionRecord) -> Hashable:
    return group_key(record.get("category"))


def analyze_transactions(transactions: Any) -> TransactionSummary | None:
    """Summarize a batch of transaction records.

    Parameters
    ----------
    transactions:
        A sequence of transaction mappings (``id``, ``type``, ``amount``,
        ``to``, ``category``, ``date``). Any other input returns ``None``.

    Returns
    -------
    TransactionSummary | None
        The summary over the valid records, or ``None`` when the input is not
        a sequence, is empty, or holds no valid record.

    Notes
    -----
    ``frequent_contact`` breaks count ties by sorted order of the contact
    names, not by first appearance: ``["Zara", "Amit", "Zara", "Amit"]``
    yields ``"Amit"``.
    """

    if not is_record_sequence(transactions) or not transactions:
        return None

    records = valid_transactions(transactions)
    logger.debug("kept %d of %d transaction records", len(records), len(transactions))
    if not records:
        return None

    amounts = [r["amount"] for r in records]
    total_credit = _type_total(records, CREDIT)
    total_debit = _type_total(records, DEBIT)
    count = len(records)

    breakdown = sum_by_key(records, key=_category_key, value=lambda r: r["amount"])

    return TransactionSummary(
        total_credit=total_credit,
        total_debit=total_debit,
        net_balance=add_amounts(total_credit, -total_debit),
        transaction_count=count,
        avg_transaction=rounded_mean(amounts),
        highest_transaction=first_max_by(records, lambda r: r["amount"]),
        category_breakdown=MappingProxyType(breakdown),
        frequent_contact=most_frequent_sorted(r.get("to") for r in records),
        all_above_100=all(a > SMALL_AMOUNT_LIMIT for a in amounts),
        has_large_transaction=any(a >= LARGE_AMOUNT_THRESHOLD for a in amounts),
    )


__all__ = [
    "CREDIT",
    "DEBIT",
    "LARGE_AMOUNT_THRESHOLD",
    "SMALL_AMOUNT_LIMIT",
    "TRANSACTION_TYPES",
    "analyze_transactions",
    "is_valid_transaction",
    "valid_transactions",
]
