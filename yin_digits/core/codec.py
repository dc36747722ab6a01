"""Digit codec: 11-bit integers to and from consonant-vowel-consonant syllables.

WHY: A yin digit is the atomic unit of every chain. The converter needs
a deterministic value → syllable mapping, and the decode path needs the
exact inverse, so both directions live here and nowhere else.

HOW: Mixed-radix decomposition. The low consonant is value % 21, the
vowel is the next quotient % 5, the high consonant is what remains. A
YinDigit stores the three alphabet indices; rendering just looks them up.

RULES:
- encode() accepts only ints in [0, YIN_MASK]; anything else raises
- decode(encode(v)) == v for every valid v
- render_digit() only emits letters from CONSONANTS and VOWELS
- parse_digit() rejects syllables whose value exceeds YIN_MASK (the
  alphabets spell 2205 syllables, 157 more than there are digits)
"""

from __future__ import annotations

from dataclasses import dataclass

from yin_digits.config import CONSONANTS, NUM_CONSONANTS, NUM_VOWELS, VOWELS, YIN_MASK
from yin_digits.core.errors import InvalidSyllableError, OutOfRangeError

_CONSONANT_INDEX = {c: idx for idx, c in enumerate(CONSONANTS)}
_VOWEL_INDEX = {v: idx for idx, v in enumerate(VOWELS)}


@dataclass(frozen=True)
class YinDigit:
    """One base-2048 digit as three alphabet indices.

    Attributes:
        y: Highest-order sub-digit, index into CONSONANTS.
        i: Middle sub-digit, index into VOWELS.
        n: Lowest-order sub-digit, index into CONSONANTS.
    """

    y: int
    i: int
    n: int


def encode(value: int) -> YinDigit:
    """Create a yin digit from an integer.

    Args:
        value: The integer to convert. Must satisfy 0 <= value <= 2047.

    Returns:
        The YinDigit whose decode() is ``value``.

    Raises:
        TypeError: ``value`` is not an int.
        OutOfRangeError: ``value`` is negative or needs more than 11 bits.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("Yin digits encode ints, got {}".format(type(value).__name__))
    if value < 0 or value > YIN_MASK:
        raise OutOfRangeError(value)

    rest, n = divmod(value, NUM_CONSONANTS)
    y, i = divmod(rest, NUM_VOWELS)
    assert y < NUM_CONSONANTS
    return YinDigit(y=y, i=i, n=n)


def decode(digit: YinDigit) -> int:
    """Return the integer form of a yin digit."""
    return (digit.y * NUM_VOWELS + digit.i) * NUM_CONSONANTS + digit.n


def render_digit(digit: YinDigit) -> str:
    """Spell a digit as its three-letter syllable."""
    return CONSONANTS[digit.y] + VOWELS[digit.i] + CONSONANTS[digit.n]


def parse_digit(syllable: str) -> YinDigit:
    """Parse one rendered syllable back into a YinDigit.

    HOW: Looks each letter up in the alphabet index tables, then checks
    that the resulting value is a real digit.

    RULES:
    - Exactly three letters, consonant-vowel-consonant, lowercase
    - Leading/trailing whitespace is NOT stripped here (callers do that)
    - Raises InvalidSyllableError on any mismatch
    """
    if len(syllable) != 3:
        raise InvalidSyllableError(syllable, "not three letters long")

    try:
        digit = YinDigit(
            y=_CONSONANT_INDEX[syllable[0]],
            i=_VOWEL_INDEX[syllable[1]],
            n=_CONSONANT_INDEX[syllable[2]],
        )
    except KeyError:
        raise InvalidSyllableError(syllable, "not consonant-vowel-consonant") from None

    if decode(digit) > YIN_MASK:
        raise InvalidSyllableError(syllable, "outside the 11-bit digit range")
    return digit


def sanity_check(value: int) -> str:
    """Encode ``value``, verify the round trip, and describe the result.

    Returns:
        A line like ``"i == 2047 <--> yd == yin"`` (no trailing newline).
    """
    digit = encode(value)
    if decode(digit) != value:
        raise AssertionError("Round trip failed for {}".format(value))
    return "i == {} <--> yd == {}".format(value, render_digit(digit))
