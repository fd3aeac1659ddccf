"""Movie title normalization.

Collapses stray spacing and applies Title Case, keeping a fixed set of small
connecting words lower-case unless they open the title. Case changes only
touch ASCII letters.
"""

from __future__ import annotations

from typing import Any

SMALL_WORDS: frozenset[str] = frozenset(
    {"ka", "ki", "ke", "se", "aur", "ya", "the", "of", "in", "a", "an"}
)

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_upper(s: str) -> str:
    return s.translate(_ASCII_UPPER)


def _ascii_lower(s: str) -> str:
    return s.translate(_ASCII_LOWER)


def _fix_word(word: str, *, first: bool) -> str:
    lowered = _ascii_lower(word)
    if not first and lowered in SMALL_WORDS:
        return lowered
    return _ascii_upper(word[0]) + lowered[1:]


def fix_title(title: Any) -> str:
    """Return ``title`` trimmed, single-spaced and in Title Case.

    Non-string input, or a title that is blank after trimming, gives ``""``.

    Examples
    --------
    >>> fix_title("  DILWALE   DULHANIA   LE   JAYENGE  ")
    'Dilwale Dulhania Le Jayenge'
    >>> fix_title("dil ka kya kare")
    'Dil ka Kya Kare'
    """

    if not isinstance(title, str) or not title.strip():
        return ""

    # Split on spaces only; empty pieces come from runs of spaces.
    words = [w for w in title.strip().split(" ") if w]
    return " ".join(_fix_word(w, first=i == 0) for i, w in enumerate(words))


__all__ = ["SMALL_WORDS", "fix_title"]
