"""Dotted-syllable formatter, the classic yin number rendering.

WHY: This is the output every existing user of the tool reads and
transcribes: "bex.ham.bit". It must stay byte-identical to the chain's
own rendering.

HOW: Delegates to DigitChain.render().

RULES:
- Syllables most significant first, joined with "."
- A single-digit chain has no delimiter
- Always ends with exactly one "\\n"
"""

from __future__ import annotations

from yin_digits.core.chain import DigitChain
from yin_digits.formatters.base import BaseFormatter


class PlainTextFormatter(BaseFormatter):
    """Formatter that prints dotted syllables."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, chain: DigitChain) -> str:
        return chain.render()
