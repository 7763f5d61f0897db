"""Tools for decoding Bar-Coded Boarding Pass (BCBP) strings."""

# Standard imports
import logging
import re
from dataclasses import asdict, dataclass
from datetime import date

# Project imports
from bcbpdecode.fields import OptionalField, parse_optional_fields
from bcbpdecode.julian import julian_to_calendar, ordinal_flight_date

logger = logging.getLogger(__name__)

FORMAT_CODE = "M"
MANDATORY_LENGTH = 60
VERSION_INDICATOR_INDEX = 60
VERSION_NUMBER_INDEX = 61
OPTIONAL_FIELDS_START = 62

# Mandatory fields as (key, characters, label). Offsets are 0-based over
# the trimmed BCBP text.
MANDATORY_FIELDS = (
    ('format_code', slice(0, 1), "Format Code"),
    ('leg_count', slice(1, 2), "Number of Legs"),
    ('passenger_name', slice(2, 22), "Passenger Name"),
    ('electronic_ticket_indicator', slice(22, 23),
        "Electronic Ticket Indicator"),
    ('pnr', slice(23, 30), "PNR/Booking Reference"),
    ('origin', slice(30, 33), "From Airport"),
    ('destination', slice(33, 36), "To Airport"),
    ('airline', slice(36, 39), "Airline Code"),
    ('flight_number', slice(39, 44), "Flight Number"),
    ('julian_date', slice(44, 47), "Julian Date"),
    ('cabin_class', slice(47, 48), "Cabin Class"),
    ('seat', slice(48, 52), "Seat Number"),
    ('checkin_sequence', slice(52, 57), "Check-in Sequence Number"),
    ('passenger_status', slice(57, 58), "Passenger Status"),
    ('structured_data_size', slice(58, 60), "Structured Data Size"),
)

# Scanners sometimes read a check digit as a P or O prefix.
AIRLINE_CORRECTIONS = {
    'PAA': "AA",
    'PUA': "UA",
    'PQF': "QF",
}
KNOWN_AIRLINES = ("AA", "UA", "DL", "QF", "BA")

UNASSIGNED_SEAT = "Unassigned"
_SEAT_WITH_PREFIX = re.compile(r"[A-Za-z]([0-9]+)([A-Za-z])")
_SEAT = re.compile(r"([0-9]+)([A-Za-z])")
_SEAT_UNASSIGNED = re.compile(r"0+")

CHECKED_IN_STATUSES = ("1", "2")

CABIN_CLASS_NAMES = {
    'F': "First Class",
    'A': "First Class",
    'P': "First Class Premium",
    'J': "Business Class",
    'C': "Business Class",
    'D': "Business Class",
    'I': "Business Class",
    'Z': "Business Class",
    'W': "Premium Economy",
    'S': "Premium Economy",
    'Y': "Economy",
    'M': "Economy",
    'B': "Economy",
    'H': "Economy",
    'K': "Economy",
    'L': "Economy",
    'Q': "Economy",
    'T': "Economy",
    'V': "Economy",
}

PASSENGER_STATUS_NAMES = {
    '0': "Ticket Issuance/Ticket Change",
    '1': "Checked-in",
    '2': "Boarded",
    '3': "Standby",
    '4': "Gate Change",
}


class BoardingPassError(ValueError):
    """Base class for boarding pass decoding failures."""

class InvalidInputError(BoardingPassError):
    """The BCBP data is missing or is not a string."""

class TooShortError(BoardingPassError):
    """The BCBP data is shorter than the mandatory field block."""

class BadFormatError(BoardingPassError):
    """The BCBP data does not start with the M format code."""


@dataclass(frozen=True)
class BoardingPass():
    """
    Represents the first flight leg of a Bar-Coded Boarding Pass (BCBP).

    Instances are created by decode() and never change afterwards.
    Fields after the mandatory block are None when the BCBP text does
    not contain them.
    """
    format_code: str
    leg_count: str
    passenger_name: str
    electronic_ticket_indicator: str
    pnr: str
    origin: str
    destination: str
    airline: str
    flight_number: str
    julian_date: str
    date: str
    flight_date: date | None
    cabin_class: str
    seat: str
    checkin_sequence: str
    passenger_status: str
    structured_data_size: str
    checked_in: bool
    version_indicator: str | None = None
    version_number: str | None = None
    optional_fields: tuple[OptionalField, ...] | None = None

    def __str__(self):
        return (
            f"{self.passenger_name}: {self.airline} {self.flight_number} "
            f"{self.origin} → {self.destination} {self.date}"
        )

    @property
    def cabin_class_name(self) -> str:
        """Human readable cabin class."""
        return cabin_class_name(self.cabin_class)

    @property
    def passenger_status_name(self) -> str:
        """Human readable passenger status."""
        return passenger_status_name(self.passenger_status)

    def to_dict(self) -> dict:
        """Returns a JSON serializable dict of the boarding pass."""
        record = asdict(self)
        if self.flight_date is not None:
            record['flight_date'] = self.flight_date.isoformat()
        if self.optional_fields is not None:
            record['optional_fields'] = [
                asdict(f) for f in self.optional_fields
            ]
        return record


def decode(raw: str, reference_date: date = None) -> BoardingPass:
    """
    Decodes a BCBP string into a BoardingPass.

    reference_date is used to resolve the year of the flight date and
    defaults to today.

    Raises InvalidInputError, TooShortError or BadFormatError.
    """
    if not isinstance(raw, str) or len(raw) == 0:
        raise InvalidInputError("Invalid barcode data")
    data = raw.strip()
    if len(data) < MANDATORY_LENGTH:
        raise TooShortError(
            "Barcode data is too short (must be at least "
            f"{MANDATORY_LENGTH} characters)"
        )
    fields = {key: data[chars] for key, chars, _ in MANDATORY_FIELDS}
    if fields['format_code'] != FORMAT_CODE:
        raise BadFormatError(
            "Not a valid boarding pass format (must start with "
            f"{FORMAT_CODE})"
        )

    version_indicator = None
    version_number = None
    optional_fields = None
    if len(data) > VERSION_INDICATOR_INDEX:
        version_indicator = data[VERSION_INDICATOR_INDEX]
        version_number = data[VERSION_NUMBER_INDEX:VERSION_NUMBER_INDEX + 1]
        if len(data) > OPTIONAL_FIELDS_START:
            optional_fields = tuple(
                parse_optional_fields(data[OPTIONAL_FIELDS_START:])
            )

    bp = BoardingPass(
        format_code=fields['format_code'],
        leg_count=fields['leg_count'],
        passenger_name=reorder_name(fields['passenger_name']),
        electronic_ticket_indicator=fields['electronic_ticket_indicator'],
        pnr=fields['pnr'].strip(),
        origin=fields['origin'],
        destination=fields['destination'],
        airline=correct_airline(fields['airline']),
        flight_number=fields['flight_number'].strip(),
        julian_date=fields['julian_date'],
        date=julian_to_calendar(fields['julian_date'], reference_date),
        flight_date=ordinal_flight_date(
            fields['julian_date'], reference_date
        ),
        cabin_class=fields['cabin_class'],
        seat=normalize_seat(fields['seat']),
        checkin_sequence=fields['checkin_sequence'].strip(),
        passenger_status=fields['passenger_status'],
        structured_data_size=fields['structured_data_size'],
        checked_in=fields['passenger_status'] in CHECKED_IN_STATUSES,
        version_indicator=version_indicator,
        version_number=version_number or None,
        optional_fields=optional_fields,
    )
    logger.debug("Decoded boarding pass: %r", bp)
    return bp

def reorder_name(raw_name: str) -> str:
    """Reorders a LAST/FIRST name as FIRST LAST. Case is not changed."""
    name = raw_name.strip()
    if "/" not in name:
        return name
    last, _, first = name.partition("/")
    return f"{first.strip()} {last.strip()}"

def correct_airline(raw_airline: str) -> str:
    """Corrects airline codes with a misread P or O prefix."""
    if raw_airline in AIRLINE_CORRECTIONS:
        return AIRLINE_CORRECTIONS[raw_airline]
    if len(raw_airline) == 3 and raw_airline[0] in ("P", "O"):
        if raw_airline[1:] in KNOWN_AIRLINES:
            return raw_airline[1:]
    return raw_airline.rstrip()

def normalize_seat(raw_seat: str) -> str:
    """
    Normalizes a seat number.

    C008F and 008F both become 8F, a seat of all zeros is unassigned,
    and anything else is returned trimmed but otherwise unchanged.
    """
    seat = raw_seat.strip()
    match = _SEAT_WITH_PREFIX.fullmatch(seat) or _SEAT.fullmatch(seat)
    if match:
        digits, letter = match.groups()
        return f"{int(digits)}{letter}"
    if _SEAT_UNASSIGNED.fullmatch(seat):
        return UNASSIGNED_SEAT
    return seat

def cabin_class_name(code: str) -> str:
    """Gets a human readable cabin class name from a class code."""
    return CABIN_CLASS_NAMES.get(code, f"Class {code}")

def passenger_status_name(code: str) -> str:
    """Gets a human readable passenger status from a status code."""
    return PASSENGER_STATUS_NAMES.get(code, f"Status {code}")
