"""
VIN Decoder Service
Resolves region, country and manufacturer of a VIN and enumerates
the model years its 10th character may stand for.
"""
from datetime import datetime, timezone
from itertools import cycle
from typing import List, Optional

from ..config import Config, config as default_config
from ..core.dicts import BASE_YEAR, YEAR_CHARS, YEAR_INDEX, get_country, get_manufacturer, get_region
from ..core.errors import ChecksumError, VINError
from ..core.schemas import VinRecord
from ..observability import log_decode_event
from .validator import canonicalize, check_validity, verify_checksum

SECONDS_PER_YEAR = 3600 * 24 * 365.25


def _year_ceiling(now: Optional[datetime], lookahead: int) -> int:
    """Current year rounded to the nearest whole year, plus lookahead."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    fractional_year = now.timestamp() / SECONDS_PER_YEAR + 1970
    # Halves round up
    return int(fractional_year + 0.5) + lookahead


def model_years(
    year_char: str,
    now: Optional[datetime] = None,
    lookahead: Optional[int] = None
) -> List[int]:
    """
    Enumerate model years encoded by a single VIN character.

    The year alphabet repeats every 30 years starting with 'A' = 1980,
    so one character matches one or two years up to the ceiling.

    Args:
        year_char: 10th VIN character
        now: Reference time (defaults to the current UTC time)
        lookahead: Years sold ahead of the calendar year (defaults to config)

    Returns:
        Matching years in ascending order; empty if the character never
        encodes a year (U, Z, 0)
    """
    if lookahead is None:
        lookahead = default_config.MODEL_YEAR_LOOKAHEAD

    year_char = year_char.upper()
    if year_char not in YEAR_CHARS:
        return []

    ceiling = _year_ceiling(now, lookahead)
    result = []
    year = BASE_YEAR
    for letter in cycle(YEAR_CHARS):
        if year >= ceiling:
            break
        year += 1
        if letter == year_char:
            result.append(year)
    return result


class VINDecoder:
    """Decodes VIN into region, country and manufacturer."""

    def __init__(self, cfg: Optional[Config] = None):
        self.config = cfg or default_config

    def get_info(self, vin: str) -> VinRecord:
        """
        Decode a VIN.

        A checksum mismatch does not fail the decode; it is recorded in
        `checksum_status`, since only North American VINs must pass it.

        Args:
            vin: 17-character VIN, any case

        Returns:
            VinRecord for the canonical VIN

        Raises:
            IncorrectLength, InvalidCharacters: if the VIN is malformed
        """
        vin = canonicalize(vin)
        check_validity(vin)

        fallback = self.config.FALLBACK_NAME
        try:
            verify_checksum(vin)
            checksum_status = "valid"
        except ChecksumError as e:
            checksum_status = e.info
        except VINError as e:
            # Structure was validated above; anything else here is a bug
            raise RuntimeError(f"Unexpected validation failure for {vin}: {e}") from e

        record = VinRecord(
            vin=vin,
            country=get_country(vin[:2], fallback),
            manufacturer=get_manufacturer(vin[:3], fallback),
            region=get_region(vin[:1], fallback),
            checksum_status=checksum_status,
        )
        record._lookahead = self.config.MODEL_YEAR_LOOKAHEAD
        log_decode_event(record)
        return record

    def years(self, vin: str, now: Optional[datetime] = None) -> List[int]:
        """Possible model years of a VIN, using the configured lookahead."""
        vin = canonicalize(vin)
        check_validity(vin)
        return model_years(vin[YEAR_INDEX], now=now, lookahead=self.config.MODEL_YEAR_LOOKAHEAD)


# Singleton
_decoder: VINDecoder | None = None

def get_vin_decoder() -> VINDecoder:
    global _decoder
    if _decoder is None:
        _decoder = VINDecoder()
    return _decoder


def get_info(vin: str) -> VinRecord:
    """Decode a VIN with the shared decoder. See `VINDecoder.get_info`."""
    return get_vin_decoder().get_info(vin)
