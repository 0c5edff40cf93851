"""
VIN Validator Service
Structural validation (length, alphabet) and check digit verification.
"""
from ..core.dicts import ALLOWED_CHARS, CHECK_DIGIT_INDEX, VALUE_MAP, VIN_LENGTH, WEIGHTS
from ..core.errors import ChecksumError, IncorrectLength, InvalidCharacters, VINError


def canonicalize(vin: str) -> str:
    """Canonical VIN form: upper case. Whitespace is kept as-is."""
    return vin.upper()


def check_validity(vin: str) -> None:
    """
    Validate VIN length and alphabet, without computing the checksum.

    Raises:
        IncorrectLength: if the VIN does not have exactly 17 characters
        InvalidCharacters: if any character is outside the VIN alphabet
    """
    vin = canonicalize(vin)

    if len(vin) != VIN_LENGTH:
        raise IncorrectLength(len(vin))

    odd_chars = set(vin) - ALLOWED_CHARS
    if odd_chars:
        raise InvalidCharacters(odd_chars)


def compute_check_digit(vin: str) -> str:
    """
    Compute the check digit for a structurally valid VIN.

    Each character is transliterated to a number, multiplied by its
    positional weight and summed. The sum modulo 11 is the check digit,
    with 10 written as 'X'.
    """
    vin = canonicalize(vin)
    check_validity(vin)

    total = sum(VALUE_MAP[char] * weight for char, weight in zip(vin, WEIGHTS))
    remainder = total % 11
    return 'X' if remainder == 10 else str(remainder)


def verify_checksum(vin: str) -> None:
    """
    Validate the VIN and its check digit (9th character).

    Raises:
        IncorrectLength, InvalidCharacters: see `check_validity`
        ChecksumError: if the 9th character differs from the computed one
    """
    vin = canonicalize(vin)
    expected = compute_check_digit(vin)
    received = vin[CHECK_DIGIT_INDEX]
    if received != expected:
        raise ChecksumError(expected=expected, received=received)


def is_valid(vin: str, checksum: bool = False) -> bool:
    """Boolean form of `check_validity` / `verify_checksum`."""
    try:
        if checksum:
            verify_checksum(vin)
        else:
            check_validity(vin)
    except VINError:
        return False
    return True
