"""Public interface for the ``transaction_analysis`` package.

Symbol re-exports only; see the individual modules for behavior.
"""

from .auction import summarize_auction
from .ingest import load_auction, load_transactions
from .models import (
    AuctionSummary,
    PlayerRecord,
    TeamRecord,
    TransactionRecord,
    Transactions,
    TransactionSummary,
)
from .payloads import AuctionSummaryPayload, TransactionSummaryPayload
from .titles import fix_title
from .transactions import analyze_transactions, is_valid_transaction, valid_transactions

__all__ = [
    # API
    "analyze_transactions",
    "fix_title",
    "is_valid_transaction",
    "load_auction",
    "load_transactions",
    "summarize_auction",
    "valid_transactions",
    # Models / types
    "AuctionSummary",
    "AuctionSummaryPayload",
    "PlayerRecord",
    "TeamRecord",
    "TransactionRecord",
    "TransactionSummary",
    "TransactionSummaryPayload",
    "Transactions",
]
