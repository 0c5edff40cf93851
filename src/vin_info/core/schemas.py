from datetime import datetime
from typing import List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from .dicts import ALLOWED_CHARS, VIN_LENGTH, YEAR_INDEX

ChecksumValid = Literal["valid"]

# --- Sub-Models ---

class ChecksumErrorInfo(BaseModel):
    """Expected vs. received symbol at the check digit position."""
    model_config = ConfigDict(frozen=True)

    expected: str = Field(..., min_length=1, max_length=1)
    received: str = Field(..., min_length=1, max_length=1)

# --- Main Models ---

class VinRecord(BaseModel):
    """Decoded information about a single VIN."""
    model_config = ConfigDict(frozen=True)

    vin: str
    country: str
    manufacturer: str
    region: str
    checksum_status: Union[ChecksumValid, ChecksumErrorInfo] = "valid"

    # Set by the decoder that built the record; None means the global config
    _lookahead: Optional[int] = PrivateAttr(default=None)

    @field_validator("vin", mode="before")
    @classmethod
    def validate_canonical_vin(cls, value: str) -> str:
        """
        A record only ever holds an upper-case, 17-character VIN
        drawn from the allowed alphabet.
        """
        value = str(value).upper()
        if len(value) != VIN_LENGTH:
            raise ValueError(f"VIN must have {VIN_LENGTH} characters, got {len(value)}")
        odd = set(value) - ALLOWED_CHARS
        if odd:
            raise ValueError(f"VIN contains invalid characters: {sorted(odd)}")
        return value

    @property
    def valid_checksum(self) -> bool:
        return self.checksum_status == "valid"

    def wmi(self) -> str:
        """World Manufacturer Identifier (characters 1-3)."""
        return self.vin[:3]

    def vds(self) -> str:
        """Vehicle Descriptor Section (characters 4-9)."""
        return self.vin[3:9]

    def vis(self) -> str:
        """Vehicle Identifier Section (characters 10-17)."""
        return self.vin[9:]

    def small_manufacturer(self) -> bool:
        """Whether the manufacturer builds too few vehicles for its own WMI."""
        return self.wmi()[2] == "9"

    def region_code(self) -> str:
        return self.wmi()[:1]

    def country_code(self) -> str:
        return self.wmi()[1:]

    def model_year_char(self) -> str:
        return self.vin[YEAR_INDEX]

    def years(self, now: Optional[datetime] = None, lookahead: Optional[int] = None) -> List[int]:
        """
        Possible model years, ascending. See `model_years`.

        Without an explicit lookahead, the one of the decoder that
        produced this record is used.
        """
        from ..services.vin_decoder import model_years
        if lookahead is None:
            lookahead = self._lookahead
        return model_years(self.model_year_char(), now=now, lookahead=lookahead)
