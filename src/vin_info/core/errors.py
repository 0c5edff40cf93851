"""
VIN Errors
The three ways a VIN can fail validation.
"""
from typing import FrozenSet, Iterable

from .schemas import ChecksumErrorInfo


class VINError(ValueError):
    """Base class for VIN validation failures."""


class IncorrectLength(VINError):
    """Provided number does not have exactly 17 characters."""

    def __init__(self, length: int):
        self.length = length
        super().__init__("Incorrect length of given string, 17 chars expected.")


class InvalidCharacters(VINError):
    """Provided number contains characters outside the VIN alphabet."""

    def __init__(self, chars: Iterable[str]):
        self.chars: FrozenSet[str] = frozenset(chars)
        super().__init__(
            f"Invalid characters received in given string: {sorted(self.chars)}."
        )


class ChecksumError(VINError):
    """
    Check digit on the 9th place does not match the computed one.

    Only North American VINs are required to pass this check;
    for other regions a mismatch carries no defect implication.
    """

    def __init__(self, expected: str, received: str):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Invalid checksum symbol on 9th place, {expected} expected, {received} received."
        )

    @property
    def info(self) -> ChecksumErrorInfo:
        return ChecksumErrorInfo(expected=self.expected, received=self.received)
