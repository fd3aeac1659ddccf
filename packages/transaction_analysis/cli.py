# ruff: noqa: I001
"""CLI for the ``transaction_analysis`` package.

Command handlers (``cmd_*``) return process exit codes and are callable
directly from tests. The Typer app wraps them; its root callback loads a local
``.env`` with ``python-dotenv`` and configures logging before any subcommand
runs. Business logic lives in the library modules.
"""

from __future__ import annotations

import csv
import json
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table
from typer.models import OptionInfo

from .logging_setup import configure_logging, get_logger

logger = get_logger("transaction_analysis.cli")

OUTPUT_FORMATS = ("json", "table")
_FORMAT_ENV_VAR = "TRANSACTION_ANALYSIS_OUTPUT_FORMAT"


# ---- Small module-level helpers ----------------------------------------------


def _resolve_output_format(fmt: str | None) -> str:
    """Pick the output format from the flag, then the env var, then ``json``."""

    candidate = fmt if fmt is not None else os.getenv(_FORMAT_ENV_VAR)
    if candidate:
        v = candidate.strip().lower()
        if v in OUTPUT_FORMATS:
            return v
        if fmt is not None:
            raise ValueError(f"unknown output format {fmt!r}; choose json or table")
    return "json"


def _print_json(payload: Mapping[str, Any]) -> None:
    # default=str keeps odd pass-through values (dates, Decimals) printable
    print(json.dumps(payload, indent=2, default=str))


def _print_table(title: str, payload: Mapping[str, Any], *, console: Console | None = None) -> None:
    table = Table(title=title, show_header=True)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for key, value in payload.items():
        if isinstance(value, Mapping):
            rendered = ", ".join(f"{k}={v}" for k, v in value.items()) or "-"
        else:
            rendered = str(value)
        table.add_row(key, rendered)
    (console or Console()).print(table)


# ---- Command handlers --------------------------------------------------------


def cmd_analyze_transactions(input_path: str, *, output_format: str | None = None) -> int:
    """Load a transaction batch, summarize it, and print the summary.

    Returns ``0`` on success and ``1`` when the file cannot be read or holds no
    valid transaction. Errors are written to stderr.
    """

    from .ingest import load_transactions
    from .payloads import TransactionSummaryPayload
    from .transactions import analyze_transactions

    try:
        fmt = _resolve_output_format(output_format)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        transactions = load_transactions(input_path)
    except FileNotFoundError:
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1
    except PermissionError:
        print(f"Error: Permission denied: {input_path}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Failed to parse JSON: {e}", file=sys.stderr)
        return 1
    except csv.Error as e:
        print(f"Error: Failed to parse CSV: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    summary = analyze_transactions(transactions)
    if summary is None:
        print(
            f"Error: no valid transactions to analyze in {input_path}",
            file=sys.stderr,
        )
        return 1

    payload = TransactionSummaryPayload.from_summary(summary).model_dump(by_alias=True)
    logger.info("analyzed %d transactions from %s", summary.transaction_count, input_path)
    if fmt == "table":
        _print_table("Transaction summary", payload)
    else:
        _print_json(payload)
    return 0


def cmd_auction_summary(input_path: str, *, output_format: str | None = None) -> int:
    """Load an auction input file and print the team's purse summary."""

    from .auction import summarize_auction
    from .ingest import load_auction
    from .payloads import AuctionSummaryPayload

    try:
        fmt = _resolve_output_format(output_format)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        team, players = load_auction(input_path)
    except FileNotFoundError:
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1
    except PermissionError:
        print(f"Error: Permission denied: {input_path}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Failed to parse JSON: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    summary = summarize_auction(team, players)
    if summary is None:
        print(f"Error: invalid team or player list in {input_path}", file=sys.stderr)
        return 1

    payload = AuctionSummaryPayload.from_summary(summary).model_dump(by_alias=True)
    if fmt == "table":
        _print_table("Auction summary", payload)
    else:
        _print_json(payload)
    return 0


def cmd_fix_title(title: str) -> int:
    """Print the normalized form of ``title``; blank results exit with ``1``."""

    from .titles import fix_title

    fixed = fix_title(title)
    if not fixed:
        print("Error: title is empty after trimming", file=sys.stderr)
        return 1
    print(fixed)
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Summarize transaction logs and auction purses, and tidy movie titles. "
        "Loads settings from a local .env before running."
    ),
)

# Module-level option objects keep calls out of parameter defaults (ruff B008).
INPUT_PATH_OPTION: OptionInfo = typer.Option(
    ...,
    "--input-path",
    help="Path to the input file (.json, or .csv for transactions)",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)
FORMAT_OPTION: OptionInfo = typer.Option(
    "--format",
    help=f"Output format: json or table (default from {_FORMAT_ENV_VAR}, else json).",
)


@app.command("analyze-transactions")
def analyze_transactions_cmd(
    input_path: Annotated[Path, INPUT_PATH_OPTION],
    output_format: Annotated[str | None, FORMAT_OPTION] = None,
) -> None:
    """Summarize credit/debit totals, categories, and contacts for a batch."""

    code = cmd_analyze_transactions(str(input_path), output_format=output_format)
    if code:
        raise typer.Exit(code)


@app.command("auction-summary")
def auction_summary_cmd(
    input_path: Annotated[Path, INPUT_PATH_OPTION],
    output_format: Annotated[str | None, FORMAT_OPTION] = None,
) -> None:
    """Summarize a team's auction spend against its purse."""

    code = cmd_auction_summary(str(input_path), output_format=output_format)
    if code:
        raise typer.Exit(code)


@app.command("fix-title")
def fix_title_cmd(title: Annotated[str, typer.Argument(help="The messy title to fix.")]) -> None:
    """Normalize spacing and Title Case of a movie title."""

    code = cmd_fix_title(title)
    if code:
        raise typer.Exit(code)


@app.callback()
def _root(
    log_level: Annotated[
        str | None,
        typer.Option(help="Log level (default from TRANSACTION_ANALYSIS_LOG_LEVEL, else WARNING)."),
    ] = None,
) -> None:
    """Root command: load ``.env`` and configure logging for every subcommand."""

    # override=False keeps variables already set in the environment
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging(log_level)


def main() -> None:
    """Console-script entry point."""

    app()


if __name__ == "__main__":  # pragma: no cover
    main()
