#
# bigfmt - Digit String Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bigfmt.digits import (
    Rounding,
    increment_digits,
    increment_fraction,
    round_at,
    shape_fraction,
    split_decimal,
    strip_leading_zeros,
    trim_trailing_zeros,
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestSplitDecimal:

    @pytest.mark.parametrize("number, expected", [
        pytest.param("123", ("123", ""), id="no_dot"),
        pytest.param("123.456", ("123", "456"), id="dot"),
        pytest.param(".5", ("", "5"), id="leading_dot"),
        pytest.param("10.", ("10", ""), id="trailing_dot"),
        pytest.param("", ("", ""), id="empty"),
        pytest.param("0.000100", ("0", "000100"), id="zeros_kept"),
    ])
    def test_split(self, number, expected):
        """Split at the dot without adding, dropping or reordering digits."""
        integer, fraction = split_decimal(number)
        assert (integer, fraction) == expected
        assert integer + fraction == number.replace(".", "")


class TestStripLeadingZeros:

    @pytest.mark.parametrize("digits, expected", [
        pytest.param("000123", "123", id="leading"),
        pytest.param("123", "123", id="none"),
        pytest.param("1000", "1000", id="trailing_kept"),
        pytest.param("0000", "0", id="all_zeros"),
        pytest.param("", "0", id="empty"),
    ])
    def test_strip(self, digits, expected):
        assert strip_leading_zeros(digits) == expected


class TestTrimTrailingZeros:

    @pytest.mark.parametrize("digits, min_keep, expected", [
        pytest.param("12000", 1, "12", id="beyond_min_keep"),
        pytest.param("12000", 3, "120", id="stops_at_min_keep"),
        pytest.param("1234", 0, "1234", id="no_trailing_zeros"),
        pytest.param("0000", 0, "", id="all_zeros_to_empty"),
        pytest.param("0000", 2, "00", id="all_zeros_min_keep"),
        pytest.param("10", 5, "10", id="shorter_than_min_keep_no_padding"),
        pytest.param("100", -1, "1", id="negative_min_keep"),
    ])
    def test_trim(self, digits, min_keep, expected):
        assert trim_trailing_zeros(digits, min_keep) == expected


class TestIncrementDigits:

    @pytest.mark.parametrize("digits, expected", [
        pytest.param("128", "129", id="no_carry"),
        pytest.param("129", "130", id="single_carry"),
        pytest.param("999", "1000", id="grows"),
        pytest.param("9", "10", id="single_nine"),
        pytest.param("0", "1", id="zero"),
        pytest.param("", "1", id="empty"),
        pytest.param("009", "010", id="leading_zeros_positional"),
        pytest.param("1" + "9" * 50, "2" + "0" * 50, id="long"),
    ])
    def test_increment(self, digits, expected):
        assert increment_digits(digits) == expected


class TestIncrementFraction:

    @pytest.mark.parametrize("fraction, expected", [
        pytest.param("129", ("130", False), id="no_overflow"),
        pytest.param("000", ("001", False), id="zeros"),
        pytest.param("999", ("000", True), id="wraps"),
        pytest.param("9", ("0", True), id="single_nine"),
        pytest.param("", ("", True), id="empty_always_carries"),
    ])
    def test_increment(self, fraction, expected):
        assert increment_fraction(fraction) == expected


class TestRoundAtNoFraction:
    """Rounding to zero or negative fraction length."""

    @pytest.mark.parametrize("integer, fraction, mode, expected", [
        pytest.param("12", "5", "round", ("13", ""), id="round_half_up"),
        pytest.param("12", "4", "round", ("12", ""), id="round_down"),
        pytest.param("12", "49999", "round", ("12", ""), id="round_leading_digit_only"),
        pytest.param("12", "", "round", ("12", ""), id="round_empty"),
        pytest.param("12", "0001", "ceil", ("13", ""), id="ceil_any_nonzero"),
        pytest.param("12", "", "ceil", ("12", ""), id="ceil_empty"),
        pytest.param("12", "000", "ceil", ("12", ""), id="ceil_zeros"),
        pytest.param("12", "999", "floor", ("12", ""), id="floor_never"),
        pytest.param("999", "9", "round", ("1000", ""), id="integer_grows"),
        pytest.param("0009", "5", "round", ("10", ""), id="normalized"),
    ])
    def test_round_zero_length(self, integer, fraction, mode, expected):
        assert round_at(integer, fraction, 0, mode) == expected

    def test_negative_length(self):
        assert round_at("7", "6", -3, Rounding.ROUND) == ("8", "")


class TestRoundAt:
    """Rounding to a positive fraction length."""

    @pytest.mark.parametrize("integer, fraction, expected", [
        pytest.param("1", "2449", ("1", "24"), id="down"),
        pytest.param("1", "2500", ("1", "25"), id="exact"),
        pytest.param("1", "245", ("1", "25"), id="half_up"),
        pytest.param("1", "2450000", ("1", "25"), id="half_up_not_bankers"),
        pytest.param("1", "9999", ("2", "00"), id="carry_to_int"),
        pytest.param("1", "", ("1", "00"), id="empty_padded"),
    ])
    def test_round(self, integer, fraction, expected):
        assert round_at(integer, fraction, 2, "round") == expected

    @pytest.mark.parametrize("integer, fraction, expected", [
        pytest.param("1", "2999", ("1", "29"), id="truncates"),
        pytest.param("1", "", ("1", "00"), id="empty_padded"),
        pytest.param("9", "9999", ("9", "99"), id="no_carry"),
    ])
    def test_floor(self, integer, fraction, expected):
        assert round_at(integer, fraction, 2, "floor") == expected

    @pytest.mark.parametrize("integer, fraction, expected", [
        pytest.param("1", "2901", ("1", "30"), id="tail_past_boundary"),
        pytest.param("1", "290100", ("1", "30"), id="deep_tail"),
        pytest.param("1", "2900", ("1", "29"), id="zero_tail"),
        pytest.param("1", "29", ("1", "29"), id="exact_length"),
        pytest.param("9", "999", ("10", "00"), id="carry_to_int"),
    ])
    def test_ceil(self, integer, fraction, expected):
        assert round_at(integer, fraction, 2, "ceil") == expected

    def test_strips_leading_zeros(self):
        assert round_at("0009", "999", 2, "round") == ("10", "00")

    def test_enum_mode(self):
        assert round_at("1", "25", 1, Rounding.ROUND) == ("1", "3")

    def test_invalid_mode(self):
        with pytest.raises(ValueError):
            round_at("1", "25", 1, "half_even")

    @pytest.mark.parametrize("prefix", ["0", "12", "999", "5050"])
    def test_round_monotonic_at_boundary(self, prefix):
        """Boundary digit 4 truncates and 5 increments, for any kept prefix."""
        length = len(prefix)
        _, kept_4 = round_at("1", prefix + "4", length, "round")
        int_5, kept_5 = round_at("1", prefix + "5", length, "round")
        assert kept_4 == prefix
        assert (int_5, kept_5) != ("1", prefix)


class TestShapeFraction:

    @pytest.mark.parametrize("fraction, force, expected", [
        pytest.param("12", 4, "1200", id="pad"),
        pytest.param("123456", 3, "123", id="cut"),
        pytest.param("", 2, "00", id="empty"),
        pytest.param("5", 0, "", id="zero"),
    ])
    def test_force_decimals(self, fraction, force, expected):
        """force_decimals overrides min, max and remove_zeros."""
        assert shape_fraction(fraction, 3, 5, force, True) == expected

    @pytest.mark.parametrize("fraction, expected", [
        pytest.param("2", "200", id="pad_to_max"),
        pytest.param("", "000", id="empty"),
        pytest.param("12345", "123", id="cut_to_max"),
    ])
    def test_keep_zeros(self, fraction, expected):
        assert shape_fraction(fraction, 0, 3, None, False) == expected

    @pytest.mark.parametrize("fraction, min_d, max_d, expected", [
        pytest.param("1200", 1, 4, "12", id="trim_beyond_min"),
        pytest.param("1000", 2, 4, "10", id="trim_stops_at_min"),
        pytest.param("", 2, 2, "00", id="pad_to_min"),
        pytest.param("5", 0, 2, "5", id="short"),
        pytest.param("12345", 0, 2, "12", id="cut_to_max"),
        pytest.param("000", 0, 2, "", id="zeros_removed"),
    ])
    def test_default(self, fraction, min_d, max_d, expected):
        assert shape_fraction(fraction, min_d, max_d) == expected

    @pytest.mark.parametrize("fraction, min_d, max_d, force, remove_zeros", [
        pytest.param("1200", 1, 4, None, True, id="default"),
        pytest.param("2", 0, 3, None, False, id="keep_zeros"),
        pytest.param("123456", 0, 5, 3, True, id="force"),
        pytest.param("", 2, 2, None, True, id="empty"),
    ])
    def test_idempotent(self, fraction, min_d, max_d, force, remove_zeros):
        once = shape_fraction(fraction, min_d, max_d, force, remove_zeros)
        assert shape_fraction(once, min_d, max_d, force, remove_zeros) == once
