"""Auction purse summary for a single team.

Validation returns ``None`` rather than raising:

- ``team`` must be a mapping with a positive, finite numeric ``purse``;
- ``players`` must be a non-empty list-like sequence of mappings, each with a
  finite numeric ``price``.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from types import MappingProxyType
from typing import Any

from .aggregation import (
    add_amounts,
    count_by_key,
    first_max_by,
    first_min_by,
    group_key,
    is_finite_number,
    is_record_sequence,
    rounded_mean,
    total,
)
from .logging_setup import get_logger
from .models import AuctionSummary, PlayerRecord

logger = get_logger("transaction_analysis.auction")


def _is_priced_player(player: Any) -> bool:
    return isinstance(player, Mapping) and is_finite_number(player.get("price"))


def _role_key(player: PlayerRecord) -> Hashable:
    return group_key(player.get("role"))


def summarize_auction(team: Any, players: Any) -> AuctionSummary | None:
    """Summarize a team's auction spend against its purse.

    Parameters
    ----------
    team:
        Mapping with ``name`` and ``purse`` (in lakhs).
    players:
        Sequence of player mappings with ``name``, ``role`` and ``price``.

    Returns
    -------
    AuctionSummary | None
        ``None`` when the team or the player list fails validation.
        ``remaining`` goes negative when the team overspends.
    """

    if not isinstance(team, Mapping):
        return None
    purse = team.get("purse")
    if not is_finite_number(purse) or not purse > 0:
        return None
    if not is_record_sequence(players) or not players:
        return None
    if not all(_is_priced_player(p) for p in players):
        logger.debug("rejecting auction input: player without a finite numeric price")
        return None

    roster = list(players)
    prices = [p["price"] for p in roster]
    total_spent = total(prices)

    return AuctionSummary(
        team_name=team.get("name"),
        total_spent=total_spent,
        remaining=add_amounts(purse, -total_spent),
        player_count=len(roster),
        costliest_player=first_max_by(roster, lambda p: p["price"]),
        cheapest_player=first_min_by(roster, lambda p: p["price"]),
        average_price=rounded_mean(prices),
        by_role=MappingProxyType(count_by_key(roster, _role_key)),
        is_over_budget=total_spent > purse,
    )


__all__ = ["summarize_auction"]
