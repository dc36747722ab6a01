"""Shared test fixtures for the yin_digits test suite.

WHY: Several test modules check the same hand-verified conversions.
Centralizing them here keeps every module asserting against one table.

HOW: KNOWN_CONVERSIONS maps decimal input lines to the dotted rendering
and head-first digit values the streaming converter must produce.

RULES:
- Every entry was worked out by hand from the conversion rules
- Values are head first, same order as the rendering
"""

import io
from typing import Dict, List, Tuple

import pytest


# ---------------------------------------------------------------------------
# Hand-verified streaming conversions: input → (rendering, values)
# ---------------------------------------------------------------------------

KNOWN_CONVERSIONS: Dict[str, Tuple[str, List[int]]] = {
    "0":         ("bab\n",          [0]),
    "1":         ("bac\n",          [1]),
    "5":         ("bah\n",          [5]),
    "2047":      ("yin\n",          [2047]),
    "2048":      ("bac.bab\n",      [1, 0]),
    "2049":      ("bac.bac\n",      [1, 1]),
    "20490":     ("ban.bac\n",      [10, 1]),
    "123456789": ("bex.ham.bit\n",  [39, 534, 57]),
}


@pytest.fixture
def known_conversions():
    """Copy of the hand-verified conversion table."""
    return dict(KNOWN_CONVERSIONS)


@pytest.fixture
def stdin_lines(monkeypatch):
    """Replace sys.stdin with the given text. Usage: stdin_lines("1\\n2\\n")."""

    def _install(text: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _install
