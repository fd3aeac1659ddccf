"""Data models and type aliases for ``transaction_analysis``.

Input records are kept opaque (plain mappings) so callers can pass JSON
objects or CSV rows straight through. Results are frozen dataclasses built
fresh on every call.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

# ---------------------------------------------------------------------------
# Input records
# ---------------------------------------------------------------------------

TransactionRecord: TypeAlias = Mapping[str, Any]
"""A single transaction with keys ``id``, ``type``, ``amount``, ``to``,
``category`` and ``date``.

Extra keys are ignored. Only ``type`` and ``amount`` decide validity; the
other keys are tolerated when absent.
"""

Transactions: TypeAlias = Sequence[TransactionRecord]
"""A batch of transaction records in input order."""

PlayerRecord: TypeAlias = Mapping[str, Any]
"""An auction purchase with keys ``name``, ``role`` and ``price``."""

TeamRecord: TypeAlias = Mapping[str, Any]
"""A team with keys ``name`` and ``purse``."""


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TransactionSummary:
    """Aggregate view of the valid transactions of one batch.

    Attributes
    ----------
    total_credit:
        Sum of ``amount`` over ``credit`` records.
    total_debit:
        Sum of ``amount`` over ``debit`` records.
    net_balance:
        ``total_credit - total_debit``.
    transaction_count:
        Number of records that survived the validity filter.
    avg_transaction:
        Mean amount rounded half away from zero.
    highest_transaction:
        The original record holding the largest amount (first on ties).
    category_breakdown:
        Read-only mapping of category to summed amount, in first-seen order.
    frequent_contact:
        Most common ``to`` value; ties go to the lexicographically smallest.
    all_above_100:
        Whether every amount is strictly greater than 100.
    has_large_transaction:
        Whether any amount reaches 5000.
    """

    total_credit: float
    total_debit: float
    net_balance: float
    transaction_count: int
    avg_transaction: int
    highest_transaction: TransactionRecord
    category_breakdown: Mapping[Any, float]
    frequent_contact: Any
    all_above_100: bool
    has_large_transaction: bool


@dataclass(frozen=True, slots=True)
class AuctionSummary:
    """Spend summary for one team's auction purchases."""

    team_name: Any
    total_spent: float
    remaining: float
    player_count: int
    costliest_player: PlayerRecord
    cheapest_player: PlayerRecord
    average_price: int
    by_role: Mapping[Any, int]
    is_over_budget: bool


__all__ = [
    "AuctionSummary",
    "PlayerRecord",
    "TeamRecord",
    "TransactionRecord",
    "TransactionSummary",
    "Transactions",
]
