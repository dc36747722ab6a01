"""Unit tests for the streaming converter.

WHY: The converter is the hardest part of the system. It merges the
decimal-to-binary conversion and chunk emission into one pass over a
small accumulator. Its digit order is what users have been reading for
years, so these tests pin it down exactly, including where it departs
from positional base-2048.

HOW: Tests cover the hand-verified conversion table, the chunk-width
boundaries, line terminators, invalid characters, the numeric round
trip, the opt-in exact conversion, and per-line results.

RULES:
- Every non-empty or empty line produces at least one digit
- Each extracted chunk becomes the new head of the chain
- Bad characters raise InvalidCharacterError naming the character
"""

import pytest

from yin_digits.config import YIN_MASK
from yin_digits.core.converter import convert, convert_exact, convert_lines
from yin_digits.core.errors import InvalidCharacterError


class TestKnownConversions:

    def test_rendering(self, known_conversions):
        for line, (rendering, values) in known_conversions.items():
            with convert(line) as chain:
                assert chain.render() == rendering
                assert chain.values() == values

    def test_determinism(self, known_conversions):
        for line in known_conversions:
            assert convert(line).render() == convert(line).render()


class TestBoundaries:
    """Chunk-width edges and degenerate lines."""

    def test_zero(self):
        assert convert("0").render() == "bab\n"

    def test_mask_stays_single_digit(self):
        assert convert("2047").values() == [2047]

    def test_2048_splits_into_two_digits(self):
        assert convert("2048").values() == [1, 0]

    def test_empty_line_is_zero_digit(self):
        assert convert("").render() == "bab\n"

    def test_terminator_only_line_is_zero_digit(self):
        assert convert("\n").render() == "bab\n"

    def test_leading_zeros_ignored(self):
        assert convert("0002048").values() == [1, 0]

    def test_newline_terminator_skipped(self):
        assert convert("2048\n").render() == "bac.bab\n"

    def test_crlf_terminator_skipped(self):
        assert convert("2048\r\n").render() == "bac.bab\n"

    def test_accepts_character_iterables(self):
        assert convert(iter(["2", "0", "4", "8"])).values() == [1, 0]


class TestSignificanceOrder:
    """Pin the digit order produced by head-prepending each chunk."""

    def test_round_trip_up_to_20479(self):
        for number in list(range(0, 20480, 7)) + [2047, 2048, 4095, 4096, 20479]:
            assert convert(str(number)).to_int() == number

    def test_digits_after_an_extraction_are_not_shifted_past_it(self):
        # Digits arriving after a chunk was peeled off are not shifted past it
        chain = convert("20490")
        assert chain.values() == [10, 1]
        assert chain.to_int() == 20481

    def test_streaming_value_differs_from_input_past_20479(self):
        chain = convert("123456789")
        assert chain.to_int() == 164671545
        assert chain.to_int() != 123456789

    def test_all_values_fit_in_a_digit(self):
        chain = convert("9" * 300)
        assert len(chain) > 1
        assert all(0 <= value <= YIN_MASK for value in chain.values())


class TestInvalidCharacters:

    def test_letter_rejected(self):
        with pytest.raises(InvalidCharacterError) as excinfo:
            convert("12a3")
        assert excinfo.value.character == "a"
        assert excinfo.value.position == 2
        assert str(excinfo.value) == "Error, a is not a digit"

    def test_colon_rejected(self):
        # ':' follows '9' in ASCII
        with pytest.raises(InvalidCharacterError):
            convert("12:")

    def test_sign_rejected(self):
        with pytest.raises(InvalidCharacterError) as excinfo:
            convert("-5")
        assert excinfo.value.character == "-"

    def test_space_rejected(self):
        with pytest.raises(InvalidCharacterError):
            convert("12 3")

    def test_undecodable_byte_shown_as_hex(self):
        # "\udcff" is how surrogateescape decoding carries the byte 0xff
        with pytest.raises(InvalidCharacterError) as excinfo:
            convert("12\udcff3")
        assert excinfo.value.character == "\udcff"
        assert str(excinfo.value) == "Error, \\xff is not a digit"

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            convert("1.5")


class TestConvertExact:

    def test_matches_positional_base_2048(self):
        assert convert_exact("123456789").render() == "bel.lik.qez\n"
        assert convert_exact("20490").values() == [10, 10]

    def test_agrees_with_streaming_for_small_numbers(self):
        for line in ("0", "2047", "2048", "20479"):
            assert convert_exact(line).values() == convert(line).values()

    def test_huge_number_round_trips(self):
        number = 7 ** 200
        assert convert_exact(str(number) + "\n").to_int() == number

    def test_empty_line_is_zero_digit(self):
        assert convert_exact("\n").render() == "bab\n"

    def test_validates_like_streaming(self):
        with pytest.raises(InvalidCharacterError) as excinfo:
            convert_exact("12a3")
        assert excinfo.value.character == "a"


class TestConvertLines:
    """Per-line results let callers recover from bad lines."""

    def test_one_result_per_line(self):
        results = list(convert_lines(["1\n", "12a3\n", "2048\n"]))
        assert [r.line_number for r in results] == [1, 2, 3]
        assert [r.ok for r in results] == [True, False, True]

    def test_success_carries_chain(self):
        result = next(convert_lines(["2048\n"]))
        assert result.chain.render() == "bac.bab\n"
        assert result.error is None

    def test_failure_carries_error(self):
        result = next(convert_lines(["12a3\n"]))
        assert result.chain is None
        assert isinstance(result.error, InvalidCharacterError)
        assert result.error.character == "a"
        assert result.text == "12a3\n"

    def test_exact_mode(self):
        result = next(convert_lines(["20490\n"], exact=True))
        assert result.chain.values() == [10, 10]
