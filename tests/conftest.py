"""
Shared test fixtures and configuration.
"""
import pytest
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def sample_vins():
    """Sample VINs for testing."""
    return {
        # North American, passes checksum
        "valid_checksum": "1M8GDM9AXKP042788",
        # Porsche, 'Z' where the check digit should be
        "bad_checksum": "WP0ZZZ99ZTS392124",
        # Same Porsche with the correct check digit
        "porsche": "WP0ZZZ998TS392124",
        "all_zeros": "00000000000000000",
        "mixed_case": "0123456789abcdefg",
    }


@pytest.fixture
def early_2026():
    """Reference time that rounds to 2026 (year ceiling 2028)."""
    return datetime(2026, 3, 1, tzinfo=timezone.utc)


@pytest.fixture
def late_2026():
    """Reference time that rounds to 2027 (year ceiling 2029)."""
    return datetime(2026, 10, 17, tzinfo=timezone.utc)
