"""Configuration constants, alphabets, exit codes, and .env loading.

WHY: Centralizes every fixed value the codec and CLI depend on so they
are easy to find. The alphabets and chunk width are plain data, not
buried in logic, and the runtime knobs (log level, invalid-input policy,
default output format) can be overridden without touching code.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level strings and ints. check_alphabet_capacity() runs at
import so a bad alphabet edit fails loudly instead of producing digits
that cannot hold 11 bits.

RULES:
- CONSONANTS and VOWELS are fixed; changing them breaks every number
  already encoded, so they are NOT environment-overridable
- NUM_CONSONANTS * NUM_VOWELS * NUM_CONSONANTS must be >= 2 ** YIN_LEN
- Runtime defaults can be overridden via environment variables
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Digit alphabets and chunk width
# ---------------------------------------------------------------------------

CONSONANTS = "bcdfghjklmnpqrstvwxyz"
VOWELS = "aeiou"

NUM_CONSONANTS = len(CONSONANTS)
NUM_VOWELS = len(VOWELS)

YIN_LEN = 11
"""Bits carried by one yin digit."""

YIN_MASK = (1 << YIN_LEN) - 1
"""Largest value a single digit can hold (2047)."""

DELIMITER = "."
"""Separator between syllables in a rendered chain."""

LINE_TERMINATORS = frozenset({"\n", "\r"})
"""Characters the converter skips instead of rejecting."""


def check_alphabet_capacity(
    consonants: str = CONSONANTS,
    vowels: str = VOWELS,
    bits: int = YIN_LEN,
) -> int:
    """Return the number of syllables the alphabets can spell.

    WHY: The chunk mask is only valid while one syllable can represent
    every value in [0, 2 ** bits). Shrinking an alphabet silently would
    make encode() fail for large chunks deep inside a conversion.

    RULES:
    - Raises ValueError when capacity < 2 ** bits
    - Duplicate letters within an alphabet are rejected
    """
    if len(set(consonants)) != len(consonants) or len(set(vowels)) != len(vowels):
        raise ValueError("Alphabets must not contain duplicate letters.")
    capacity = len(consonants) * len(vowels) * len(consonants)
    if capacity < (1 << bits):
        raise ValueError(
            "Alphabets spell only {} syllables; {} bits need {}.".format(
                capacity, bits, 1 << bits
            )
        )
    return capacity


SYLLABLE_CAPACITY = check_alphabet_capacity()

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INVALID_INPUT = 253
"""Status earlier versions produced via exit(-3) on a non-digit character."""

# ---------------------------------------------------------------------------
# Runtime defaults
# ---------------------------------------------------------------------------

INVALID_INPUT_POLICIES = ("abort", "skip")

LOG_LEVEL = os.getenv("YIN_LOG_LEVEL", "WARNING").upper()
DEFAULT_ON_INVALID = os.getenv("YIN_ON_INVALID", "abort").lower()
DEFAULT_FORMAT = os.getenv("YIN_DEFAULT_FORMAT", "plain_text")


def load_on_invalid_policy() -> str:
    """Return the configured invalid-input policy.

    RULES:
    - Raises ValueError for anything other than "abort" or "skip"
    - Never falls back silently to a default when the value is bad
    """
    if DEFAULT_ON_INVALID not in INVALID_INPUT_POLICIES:
        raise ValueError(
            "YIN_ON_INVALID must be one of {}, got '{}'.".format(
                ", ".join(INVALID_INPUT_POLICIES), DEFAULT_ON_INVALID
            )
        )
    return DEFAULT_ON_INVALID


def load_log_level() -> str:
    """Return the configured log level name.

    RULES:
    - Raises ValueError for a name the logging module does not know
    """
    if not isinstance(logging.getLevelName(LOG_LEVEL), int):
        raise ValueError("YIN_LOG_LEVEL is not a logging level: '{}'.".format(LOG_LEVEL))
    return LOG_LEVEL
