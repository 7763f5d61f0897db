import dataclasses
import json
from datetime import date

import pytest

from bcbpdecode.boarding_pass import (
    BadFormatError,
    BoardingPassError,
    InvalidInputError,
    TooShortError,
    cabin_class_name,
    correct_airline,
    decode,
    normalize_seat,
    passenger_status_name,
    reorder_name,
)
from bcbpdecode.fields import OptionalField

REFERENCE_DATE = date(2024, 6, 1)

# Widths of the mandatory fields, in order.
_FIELDS = (
    ('format_code', 1, "M"),
    ('leg_count', 1, "1"),
    ('passenger_name', 20, "SMITH/JOHN"),
    ('electronic_ticket_indicator', 1, "E"),
    ('pnr', 7, "ABC1234"),
    ('origin', 3, "JFK"),
    ('destination', 3, "LAX"),
    ('airline', 3, "AA"),
    ('flight_number', 5, "1234"),
    ('julian_date', 3, "107"),
    ('cabin_class', 1, "Y"),
    ('seat', 4, "012C"),
    ('checkin_sequence', 5, "00001"),
    ('passenger_status', 1, "1"),
    ('structured_data_size', 2, "00"),
)


def make_bcbp(**overrides):
    """Builds a 60 character mandatory block, padding values with spaces."""
    text = "".join(
        overrides.get(key, default).ljust(width)[:width]
        for key, width, default in _FIELDS
    )
    assert len(text) == 60
    return text


def test_decode_mandatory_fields():
    bp = decode(make_bcbp(), REFERENCE_DATE)
    assert bp.format_code == "M"
    assert bp.leg_count == "1"
    assert bp.passenger_name == "JOHN SMITH"
    assert bp.electronic_ticket_indicator == "E"
    assert bp.pnr == "ABC1234"
    assert bp.origin == "JFK"
    assert bp.destination == "LAX"
    assert bp.airline == "AA"
    assert bp.flight_number == "1234"
    assert bp.julian_date == "107"
    assert bp.date == "January 7"
    assert bp.flight_date == date(2024, 4, 16)
    assert bp.cabin_class == "Y"
    assert bp.seat == "12C"
    assert bp.checkin_sequence == "00001"
    assert bp.passenger_status == "1"
    assert bp.structured_data_size == "00"
    assert bp.checked_in is True
    assert bp.version_indicator is None
    assert bp.version_number is None
    assert bp.optional_fields is None


def test_decode_sample_pass():
    raw = "M1DESMARAIS/LUC       EABC123 YULFRAAC 0834 326J001A0025 100"
    bp = decode(raw, REFERENCE_DATE)
    assert bp.passenger_name == "LUC DESMARAIS"
    assert bp.pnr == "ABC123"
    assert (bp.origin, bp.destination) == ("YUL", "FRA")
    assert bp.airline == "AC"
    assert bp.flight_number == "0834"
    assert bp.date == "January 26"
    assert bp.flight_date == date(2023, 11, 22)
    assert bp.cabin_class_name == "Business Class"
    assert bp.seat == "1A"
    assert bp.checkin_sequence == "0025"
    assert bp.passenger_status_name == "Checked-in"


def test_decode_corrects_misread_airline():
    bp = decode(make_bcbp(airline="PAA"), REFERENCE_DATE)
    assert bp.airline == "AA"


def test_decode_strips_surrounding_whitespace():
    raw = make_bcbp()
    assert decode(f"  \n{raw}\r\n", REFERENCE_DATE) == decode(
        raw, REFERENCE_DATE
    )


def test_decode_is_repeatable():
    raw = make_bcbp() + ">6" + "011"
    assert decode(raw, REFERENCE_DATE) == decode(raw, REFERENCE_DATE)


def test_boarding_pass_is_immutable():
    bp = decode(make_bcbp(), REFERENCE_DATE)
    with pytest.raises(dataclasses.FrozenInstanceError):
        bp.seat = "1A"


@pytest.mark.parametrize("raw", [None, "", 123, b"M1SMITH/JOHN"])
def test_decode_rejects_invalid_input(raw):
    with pytest.raises(InvalidInputError):
        decode(raw)


@pytest.mark.parametrize("raw", [
    "M1",
    " ",
    make_bcbp()[:59],
    "   " + make_bcbp()[:59] + "\n",
])
def test_decode_rejects_short_input(raw):
    with pytest.raises(TooShortError):
        decode(raw)


@pytest.mark.parametrize("format_code", ["X", "m", "1"])
def test_decode_rejects_bad_format_code(format_code):
    with pytest.raises(BadFormatError):
        decode(make_bcbp(format_code=format_code))


def test_errors_share_a_base_class():
    for error in (InvalidInputError, TooShortError, BadFormatError):
        assert issubclass(error, BoardingPassError)
        assert issubclass(error, ValueError)


def test_decode_version_indicator_only():
    bp = decode(make_bcbp() + ">", REFERENCE_DATE)
    assert bp.version_indicator == ">"
    assert bp.version_number is None
    assert bp.optional_fields is None


def test_decode_version_fields():
    bp = decode(make_bcbp() + ">6", REFERENCE_DATE)
    assert bp.version_indicator == ">"
    assert bp.version_number == "6"
    assert bp.optional_fields is None


def test_decode_optional_fields():
    raw = make_bcbp() + ">6" + "011" + "0AAA 1234567" + "01Y"
    bp = decode(raw, REFERENCE_DATE)
    assert bp.optional_fields == (
        OptionalField("1", "Check-in Source"),
        OptionalField("AA 1234567", "Frequent Flyer Number"),
        OptionalField("Y", "Fast Track"),
    )


def test_decode_ignores_structured_data_size():
    raw = make_bcbp(structured_data_size="02") + ">6" + "011" + "01N"
    bp = decode(raw, REFERENCE_DATE)
    assert bp.structured_data_size == "02"
    assert len(bp.optional_fields) == 2


def test_decode_malformed_optional_fields():
    bp = decode(make_bcbp() + ">6" + "ZZZZ", REFERENCE_DATE)
    assert bp.optional_fields == ()


@pytest.mark.parametrize("status, checked_in", [
    ("0", False),
    ("1", True),
    ("2", True),
    ("3", False),
    (" ", False),
])
def test_checked_in(status, checked_in):
    bp = decode(make_bcbp(passenger_status=status), REFERENCE_DATE)
    assert bp.checked_in is checked_in


@pytest.mark.parametrize("raw, expected", [
    ("SMITH/JOHN          ", "JOHN SMITH"),
    ("Smith/John", "John Smith"),
    ("SMITH / JOHN MR", "JOHN MR SMITH"),
    ("DE LA CRUZ/ANA/B", "ANA/B DE LA CRUZ"),
    ("SMITH               ", "SMITH"),
])
def test_reorder_name(raw, expected):
    assert reorder_name(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("PAA", "AA"),
    ("PUA", "UA"),
    ("PQF", "QF"),
    ("PDL", "DL"),
    ("PBA", "BA"),
    ("OAA", "AA"),
    ("OUA", "UA"),
    ("PAB", "PAB"),
    ("OZZ", "OZZ"),
    ("AA ", "AA"),
    ("DL ", "DL"),
    ("U2 ", "U2"),
])
def test_correct_airline(raw, expected):
    assert correct_airline(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("C008F", "8F"),
    ("008F", "8F"),
    ("012C", "12C"),
    ("12C", "12C"),
    ("c012a", "12a"),
    ("00000", "Unassigned"),
    ("0000", "Unassigned"),
    ("INF ", "INF"),
    ("    ", ""),
])
def test_normalize_seat(raw, expected):
    assert normalize_seat(raw) == expected


@pytest.mark.parametrize("code, expected", [
    ("F", "First Class"),
    ("P", "First Class Premium"),
    ("J", "Business Class"),
    ("W", "Premium Economy"),
    ("Y", "Economy"),
    ("X", "Class X"),
])
def test_cabin_class_name(code, expected):
    assert cabin_class_name(code) == expected


@pytest.mark.parametrize("code, expected", [
    ("0", "Ticket Issuance/Ticket Change"),
    ("2", "Boarded"),
    ("4", "Gate Change"),
    ("9", "Status 9"),
])
def test_passenger_status_name(code, expected):
    assert passenger_status_name(code) == expected


def test_to_dict_is_json_serializable():
    bp = decode(make_bcbp() + ">6" + "011", REFERENCE_DATE)
    record = json.loads(json.dumps(bp.to_dict()))
    assert record['airline'] == "AA"
    assert record['flight_date'] == "2024-04-16"
    assert record['optional_fields'] == [
        {'data': "1", 'description': "Check-in Source"},
    ]


def test_str():
    bp = decode(make_bcbp(), REFERENCE_DATE)
    assert str(bp) == "JOHN SMITH: AA 1234 JFK → LAX January 7"
