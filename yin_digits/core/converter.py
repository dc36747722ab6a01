"""Streaming decimal → yin digit chain conversion.

WHY: Input numbers can be arbitrarily long decimal strings. The
converter turns them into a digit chain in a single left-to-right pass
over the characters, with one small accumulator, instead of parsing the
whole number first.

HOW: Each decimal digit is folded into the accumulator
(acc = acc * 10 + d). Whenever the accumulator exceeds 11 bits, its low
11 bits are installed as the new head of the chain and the accumulator
is shifted right by 11. After the last character the remaining low bits
are installed unconditionally, so every line yields at least one digit.

RULES:
- Line terminators ("\\n", "\\r") are skipped wherever they appear
- Any other non-digit raises InvalidCharacterError (character + position)
- Each extracted chunk becomes the new head; this order is what every
  previously encoded number was printed with and must not change
- Between checks acc never exceeds YIN_MASK * 10 + 9, so it stays small
- The head-first value of the chain equals the input for every number
  up to 20479; past that the chunks no longer line up with true
  base-2048 positions (use convert_exact() for that)
- An empty line produces the single zero digit ("bab")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from yin_digits.config import LINE_TERMINATORS, YIN_LEN, YIN_MASK
from yin_digits.core.chain import DigitChain
from yin_digits.core.errors import InvalidCharacterError, YinError

logger = logging.getLogger(__name__)

_DECIMAL_DIGITS = "0123456789"


def _digit_value(character: str, position: int) -> int:
    """Return the value of a decimal digit character or raise."""
    value = _DECIMAL_DIGITS.find(character)
    if value < 0 or len(character) != 1:
        raise InvalidCharacterError(character, position)
    return value


def convert(decimal_digits: Iterable[str]) -> DigitChain:
    """Stream decimal characters into a new digit chain.

    Args:
        decimal_digits: A string (or any iterable of single characters)
                        of '0'-'9', optionally containing line terminators.

    Returns:
        A fresh DigitChain. The caller owns it and should release it.

    Raises:
        InvalidCharacterError: A character is neither a digit nor a
            line terminator. The partially built chain is released.
    """
    chain = DigitChain()
    acc = 0

    try:
        for position, character in enumerate(decimal_digits):
            if character in LINE_TERMINATORS:
                continue

            acc = acc * 10 + _digit_value(character, position)

            # More than 11 bits accumulated: peel off the low chunk
            while acc > YIN_MASK:
                chunk = acc & YIN_MASK
                chain.prepend(chunk)
                acc >>= YIN_LEN
                logger.debug("Extracted chunk %d at position %d, carry %d", chunk, position, acc)
    except InvalidCharacterError:
        chain.release()
        raise

    chain.prepend(acc & YIN_MASK)
    return chain


def convert_exact(decimal_digits: str) -> DigitChain:
    """Convert a decimal string to its true base-2048 chain.

    WHY: The streaming chain only matches positional base-2048 for
    numbers up to 20479. Callers who need the chain to decode back to the
    same integer for any length opt into this instead.

    HOW: Validates characters exactly like convert(), then lets Python's
    arbitrary-precision int do the base change.
    """
    digits = []
    for position, character in enumerate(decimal_digits):
        if character in LINE_TERMINATORS:
            continue
        _digit_value(character, position)
        digits.append(character)

    number = int("".join(digits)) if digits else 0
    return DigitChain.from_int(number)


@dataclass
class ConversionResult:
    """Outcome of converting one input line.

    Attributes:
        line_number: 1-based line index within its source.
        text: The raw line, terminator included.
        chain: The converted chain on success, otherwise None.
        error: The structured error on failure, otherwise None.
    """

    line_number: int
    text: str
    chain: Optional[DigitChain] = None
    error: Optional[YinError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def convert_lines(lines: Iterable[str], exact: bool = False) -> Iterator[ConversionResult]:
    """Convert each line independently, yielding one result per line.

    WHY: A bad character should cost the caller one line, not the whole
    run. The caller decides whether to stop at the first failed result.

    RULES:
    - Lines are processed strictly in order, one at a time
    - Only InvalidCharacterError is captured; anything else propagates
    - The caller owns (and must release) every successful chain
    """
    converter = convert_exact if exact else convert
    for line_number, line in enumerate(lines, start=1):
        try:
            chain = converter(line)
        except InvalidCharacterError as e:
            logger.debug("Line %d rejected: %s", line_number, e)
            yield ConversionResult(line_number=line_number, text=line, error=e)
        else:
            yield ConversionResult(line_number=line_number, text=line, chain=chain)
