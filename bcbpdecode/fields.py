"""Tools for parsing the optional fields of a boarding pass."""

# Standard imports
import logging
import re
import string
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "Additional Data"

_FREQUENT_FLYER = re.compile(r"[A-Z]{2}\s*[0-9]+")
_BAGGAGE_TAG = re.compile(r"[0-9]{10,}")

@dataclass(frozen=True)
class OptionalField():
    """Represents one size-prefixed optional field."""
    data: str
    description: str

# Checked in order; the first matching predicate wins. A single digit
# from 0 to 3 is a Check-in Source, never a Selectee Indicator, because
# the Check-in Source rule comes first.
FIELD_PATTERNS = (
    (lambda f: _FREQUENT_FLYER.fullmatch(f) is not None,
        "Frequent Flyer Number"),
    (lambda f: _BAGGAGE_TAG.fullmatch(f) is not None,
        "Baggage Tag License Plate"),
    (lambda f: len(f) == 1 and f in string.digits,
        "Check-in Source"),
    (lambda f: len(f) == 1 and f in "0123",
        "Selectee Indicator"),
    (lambda f: len(f) == 1 and f in "YNT",
        "Fast Track"),
)

def classify(field: str) -> str:
    """Returns a best guess label for an optional field value."""
    for predicate, label in FIELD_PATTERNS:
        if predicate(field):
            return label
    return DEFAULT_DESCRIPTION

def parse_optional_fields(tail: str) -> list[OptionalField]:
    """
    Parses the optional field section of a boarding pass.

    Each field is a 2 character hexadecimal size followed by that many
    characters of data. Parsing stops at the first malformed size or
    truncated field, and the fields parsed so far are returned.
    """
    fields = []
    pos = 0
    while len(tail) - pos >= 2:
        size = _parse_hex(tail[pos:pos + 2])
        if size is None:
            logger.debug("Stopped at invalid field size at %d.", pos)
            break
        pos += 2
        if pos + size > len(tail):
            logger.debug(
                "Stopped at truncated field at %d (size %d).", pos, size
            )
            break
        data = tail[pos:pos + size]
        pos += size
        fields.append(OptionalField(data, classify(data)))
    return fields

def _parse_hex(hex_str) -> int | None:
    """Parses a hexadecimal string."""
    if not hex_str or any(c not in string.hexdigits for c in hex_str):
        return None
    return int(hex_str, 16)
