"""Yin digits: pronounceable base-2048 numerals for large integers.

WHY: Long decimal or hexadecimal numbers are hard to read aloud, copy by
hand, or compare at a glance. A yin digit packs 11 bits into a single
consonant-vowel-consonant syllable ("yin", "bac", "ham"), so a number
becomes a short dotted chain of syllables that people can actually say.

HOW: Three-stage pipeline: convert (streaming decimal text → digit
chain), render (pluggable formatters), emit (CLI sink). The codec that
maps one 11-bit value to a syllable is shared by the converter and by
the decode path.

RULES:
- All formatters consume the same DigitChain
- The converter never materializes the full number (bounded accumulator)
- Library code raises structured errors; only the CLI decides exit codes
"""

__version__ = "0.1.0"
