"""Structured error taxonomy for the codec, chain, and converter.

WHY: Earlier versions printed a message and killed the process on the
first bad character. Callers that embed the converter as a library need
to catch that condition per line instead, so every failure is a typed
exception carrying the offending input.

HOW: One base class, YinError, and one subclass per failure mode. Each
also derives from the builtin that best describes it (ValueError for bad
input, RuntimeError for lifecycle misuse) so generic handlers still work.

RULES:
- Library code raises these; only the CLI turns them into exit codes
- InvalidCharacterError's message matches the classic diagnostic
- ChainReleasedError is a precondition violation, not a recoverable error
"""

from __future__ import annotations

from typing import Optional


def _display(character: str) -> str:
    """Show an undecodable input byte (a surrogate escape) as \\xNN."""
    if len(character) == 1 and 0xDC80 <= ord(character) <= 0xDCFF:
        return "\\x{:02x}".format(ord(character) - 0xDC00)
    return character


class YinError(Exception):
    """Base class for every error raised by yin_digits."""


class InvalidCharacterError(YinError, ValueError):
    """A decimal line contained something other than 0-9 or a terminator."""

    def __init__(self, character: str, position: Optional[int] = None) -> None:
        self.character = character
        self.position = position
        super().__init__("Error, {} is not a digit".format(_display(character)))


class OutOfRangeError(YinError, ValueError):
    """A value outside [0, 2047] was handed to the digit encoder."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__("Value {} does not fit in one yin digit".format(value))


class InvalidSyllableError(YinError, ValueError):
    """Text that is not the rendering of any yin digit."""

    def __init__(self, syllable: str, reason: str = "not a yin digit") -> None:
        self.syllable = syllable
        super().__init__("Error, {!r} is {}".format(syllable, reason))


class ChainReleasedError(YinError, RuntimeError):
    """A released chain was released, rendered, or iterated again."""
