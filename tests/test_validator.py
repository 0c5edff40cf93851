"""Unit tests for validator.py"""
import pytest
from vin_info.core.errors import (
    ChecksumError,
    IncorrectLength,
    InvalidCharacters,
    VINError,
)
from vin_info.services.validator import (
    canonicalize,
    check_validity,
    compute_check_digit,
    is_valid,
    verify_checksum,
)


def _outcome(vin):
    """Exception type and payload of check_validity, or None on success."""
    try:
        check_validity(vin)
    except IncorrectLength as e:
        return (IncorrectLength, e.length)
    except InvalidCharacters as e:
        return (InvalidCharacters, e.chars)
    return None


class TestCheckLength:
    """Length is counted in characters after upper-casing."""

    def test_empty_string(self):
        with pytest.raises(IncorrectLength):
            check_validity("")

    @pytest.mark.parametrize("length", [1, 16, 18, 40])
    def test_wrong_lengths(self, length):
        with pytest.raises(IncorrectLength) as exc_info:
            check_validity("1" * length)
        assert exc_info.value.length == length

    def test_all_zeros(self, sample_vins):
        check_validity(sample_vins["all_zeros"])

    def test_length_checked_before_alphabet(self):
        """A short string with bad characters is a length failure."""
        with pytest.raises(IncorrectLength):
            check_validity("$$$")

    def test_surrounding_whitespace_not_stripped(self, sample_vins):
        with pytest.raises(IncorrectLength):
            check_validity(f" {sample_vins['porsche']} ")

    def test_non_ascii_counted_as_characters(self):
        """17 non-ASCII characters have the right length but a bad alphabet."""
        with pytest.raises(InvalidCharacters) as exc_info:
            check_validity("é" * 17)
        assert exc_info.value.chars == {"É"}


class TestCheckAlphabet:
    """Test alphabet membership."""

    def test_invalid_characters(self):
        with pytest.raises(InvalidCharacters) as exc_info:
            check_validity("abcdefghioq_958.!")
        assert exc_info.value.chars == {"I", "O", "Q", "_", ".", "!"}

    def test_mixed_case_accepted(self, sample_vins):
        check_validity(sample_vins["mixed_case"])

    def test_single_bad_char(self):
        with pytest.raises(InvalidCharacters) as exc_info:
            check_validity("W$0ZZZ99ZTS392124")
        assert exc_info.value.chars == frozenset("$")

    def test_repeated_bad_char_reported_once(self):
        with pytest.raises(InvalidCharacters) as exc_info:
            check_validity("WOOOOO99ZTS392124")
        assert exc_info.value.chars == {"O"}

    def test_error_message_lists_chars(self):
        with pytest.raises(InvalidCharacters) as exc_info:
            check_validity("WQ0ZZZ99ZTS39212I")
        assert "['I', 'Q']" in str(exc_info.value)

    @pytest.mark.parametrize("vin", [
        "WP0ZZZ99ZTS392124",
        "wp0zzz99zts392124",
        "abcdefghioq_958.!",
        "",
        "short",
        "1m8gdm9axkp042788",
    ])
    def test_canonicalization_is_stable(self, vin):
        assert _outcome(vin) == _outcome(canonicalize(vin))

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            check_validity("")
        with pytest.raises(VINError):
            check_validity("")


class TestChecksum:
    """Test check digit computation and verification."""

    def test_valid_checksum(self, sample_vins):
        verify_checksum(sample_vins["valid_checksum"])

    def test_valid_checksum_lowercase(self, sample_vins):
        verify_checksum(sample_vins["valid_checksum"].lower())

    def test_checksum_mismatch(self, sample_vins):
        with pytest.raises(ChecksumError) as exc_info:
            verify_checksum(sample_vins["bad_checksum"])
        assert exc_info.value.expected == "8"
        assert exc_info.value.received == "Z"
        assert "8 expected, Z received" in str(exc_info.value)

    def test_checksum_error_info(self, sample_vins):
        with pytest.raises(ChecksumError) as exc_info:
            verify_checksum(sample_vins["bad_checksum"])
        info = exc_info.value.info
        assert info.expected == "8"
        assert info.received == "Z"

    def test_remainder_ten_is_x(self, sample_vins):
        assert compute_check_digit(sample_vins["valid_checksum"]) == "X"

    def test_check_digit_ignores_own_position(self, sample_vins):
        """Position 9 has weight 0, so its content never changes the result."""
        assert compute_check_digit(sample_vins["bad_checksum"]) == "8"
        assert compute_check_digit(sample_vins["porsche"]) == "8"

    def test_corrected_vin_passes(self, sample_vins):
        verify_checksum(sample_vins["porsche"])

    def test_all_zeros(self, sample_vins):
        verify_checksum(sample_vins["all_zeros"])

    def test_structural_errors_propagate(self):
        with pytest.raises(IncorrectLength):
            verify_checksum("")
        with pytest.raises(InvalidCharacters):
            verify_checksum("abcdefghioq_958.!")

    def test_compute_requires_valid_vin(self):
        with pytest.raises(IncorrectLength):
            compute_check_digit("1M8")


class TestIsValid:
    """Test boolean convenience wrapper."""

    def test_structure_only(self, sample_vins):
        assert is_valid(sample_vins["bad_checksum"]) is True
        assert is_valid("") is False

    def test_with_checksum(self, sample_vins):
        assert is_valid(sample_vins["valid_checksum"], checksum=True) is True
        assert is_valid(sample_vins["bad_checksum"], checksum=True) is False
        assert is_valid("abcdefghioq_958.!", checksum=True) is False
