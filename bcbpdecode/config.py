"""
Configuration utilities.

Settings come from environment variables, optionally loaded from a
.env file.
"""

# Standard imports
import os
from dataclasses import dataclass, field
from datetime import date

# Third-party imports
from dateutil.parser import isoparse
from dotenv import load_dotenv

# Load environment variables from .env file.
load_dotenv()

def parse_reference_date(value: str | None) -> date | None:
    """Parses an ISO 8601 date string, or returns None if empty."""
    if value is None or value.strip() == "":
        return None
    try:
        return isoparse(value.strip()).date()
    except ValueError as err:
        raise ValueError(
            f"BCBP_REFERENCE_DATE is not an ISO 8601 date: {value!r}"
        ) from err

@dataclass(slots=True)
class Settings:
    """Settings for decoding and the command line tools."""
    reference_date: date | None = field(
        default_factory=lambda: parse_reference_date(
            os.getenv("BCBP_REFERENCE_DATE")
        )
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("BCBP_LOG_LEVEL", "WARNING")
    )
