"""Pytest configuration shared by the suite.

Puts the workspace ``packages/`` dir on ``sys.path`` so ``transaction_analysis``
imports without installation, clears the package's environment settings so a
developer's shell or ``.env`` cannot leak into assertions, and resets the
package logger after every test because the CLI configures it.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parents[1]
_PKG_DIR = _ROOT / "packages"
sys.path[:0] = [p for p in [str(_PKG_DIR), str(_ROOT)] if p not in sys.path]


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TRANSACTION_ANALYSIS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TRANSACTION_ANALYSIS_OUTPUT_FORMAT", raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logging():
    from transaction_analysis.logging_setup import reset_logging

    reset_logging()
    yield
    reset_logging()
