"""
Configuration module for vin_info
Library defaults, with optional environment overrides for host applications.
"""
import os
from dataclasses import dataclass


@dataclass
class Config:
    """Library configuration."""

    # Display name for unrecognized region/country/manufacturer codes
    FALLBACK_NAME: str = "Unknown"

    # Model years are sold ahead of the calendar year
    MODEL_YEAR_LOOKAHEAD: int = 2

    # Logging
    LOG_LEVEL: str = "WARNING"

    def __post_init__(self):
        if self.MODEL_YEAR_LOOKAHEAD < 0:
            raise ValueError("MODEL_YEAR_LOOKAHEAD must be >= 0")
        self.LOG_LEVEL = self.LOG_LEVEL.upper()

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables."""
        return cls(
            FALLBACK_NAME=os.getenv("VIN_FALLBACK_NAME", "Unknown"),
            MODEL_YEAR_LOOKAHEAD=int(os.getenv("VIN_MODEL_YEAR_LOOKAHEAD", "2")),
            LOG_LEVEL=os.getenv("VIN_LOG_LEVEL", "WARNING"),
        )


# Global config instance (defaults only; call Config.from_env() to opt in)
config = Config()
