"""Typed payloads for serializing summaries.

The dataclass results in :mod:`transaction_analysis.models` use snake_case
attributes and may hold read-only mappings or the caller's own record
objects. These pydantic models copy them into plain JSON-friendly values and
expose the camelCase key names (``totalCredit``, ``categoryBreakdown``, ...)
through ``model_dump(by_alias=True)``.

Amounts of other real types (``Fraction``, say) are written as floats, and
mapping keys that JSON cannot hold are written as text.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .aggregation import to_float
from .models import AuctionSummary, TransactionSummary

Number = int | float

_JSON_KEY_TYPES = (str, int, float, bool)


def _plain_number(value: Any) -> Number:
    if isinstance(value, (int, float)):
        return value
    return to_float(value)


def _json_key(key: Any) -> Any:
    if key is None or isinstance(key, _JSON_KEY_TYPES):
        return key
    return str(key)


def _plain_mapping(mapping: Any, value=lambda v: v) -> dict[Any, Any]:
    return {_json_key(k): value(v) for k, v in mapping.items()}


class _Payload(BaseModel):
    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TransactionSummaryPayload(_Payload):
    """Serialized form of :class:`~transaction_analysis.models.TransactionSummary`."""

    total_credit: Number
    total_debit: Number
    net_balance: Number
    transaction_count: int
    avg_transaction: int
    highest_transaction: dict[Any, Any]
    category_breakdown: dict[Any, Number]
    frequent_contact: Any
    all_above_100: bool = Field(alias="allAbove100")
    has_large_transaction: bool

    @classmethod
    def from_summary(cls, summary: TransactionSummary) -> TransactionSummaryPayload:
        return cls(
            total_credit=_plain_number(summary.total_credit),
            total_debit=_plain_number(summary.total_debit),
            net_balance=_plain_number(summary.net_balance),
            transaction_count=summary.transaction_count,
            avg_transaction=summary.avg_transaction,
            highest_transaction=_plain_mapping(summary.highest_transaction),
            category_breakdown=_plain_mapping(summary.category_breakdown, _plain_number),
            frequent_contact=summary.frequent_contact,
            all_above_100=summary.all_above_100,
            has_large_transaction=summary.has_large_transaction,
        )


class AuctionSummaryPayload(_Payload):
    """Serialized form of :class:`~transaction_analysis.models.AuctionSummary`."""

    team_name: Any
    total_spent: Number
    remaining: Number
    player_count: int
    costliest_player: dict[Any, Any]
    cheapest_player: dict[Any, Any]
    average_price: int
    by_role: dict[Any, int]
    is_over_budget: bool

    @classmethod
    def from_summary(cls, summary: AuctionSummary) -> AuctionSummaryPayload:
        return cls(
            team_name=summary.team_name,
            total_spent=_plain_number(summary.total_spent),
            remaining=_plain_number(summary.remaining),
            player_count=summary.player_count,
            costliest_player=_plain_mapping(summary.costliest_player),
            cheapest_player=_plain_mapping(summary.cheapest_player),
            average_price=summary.average_price,
            by_role=_plain_mapping(summary.by_role),
            is_over_budget=summary.is_over_budget,
        )


__all__ = ["AuctionSummaryPayload", "TransactionSummaryPayload"]
