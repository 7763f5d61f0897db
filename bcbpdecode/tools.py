"""Functions for CLI commands."""

# Standard imports
import json
import sys
from datetime import date

# Third-party imports
import colorama
from tabulate import tabulate

# Project imports
from bcbpdecode.boarding_pass import (
    BadFormatError,
    BoardingPassError,
    InvalidInputError,
    TooShortError,
    decode,
)
from bcbpdecode.breakdown import format_breakdown

colorama.init()

ERROR_MESSAGES = {
    TooShortError: (
        "The scanned barcode doesn't contain enough data to be a valid "
        "boarding pass."
    ),
    BadFormatError: (
        "The scanned barcode doesn't appear to be a boarding pass format."
    ),
    InvalidInputError: "Please enter the barcode data.",
}

def error_message(err: BoardingPassError) -> str:
    """Gets a user facing message for a decoding failure."""
    return ERROR_MESSAGES.get(type(err), str(err))

def decode_bcbp(
    bcbp_str: str, reference_date: date = None, as_json: bool = False
) -> None:
    """Decodes a Bar-Coded Boarding Pass string and prints it."""
    try:
        bp = decode(bcbp_str, reference_date)
    except BoardingPassError as err:
        print(
            colorama.Fore.RED
            + f"⚠️ {error_message(err)}"
            + colorama.Style.RESET_ALL,
        )
        sys.exit(1)

    if as_json:
        print(json.dumps(bp.to_dict(), indent=2))
        return

    table = [
        ["Passenger", bp.passenger_name],
        ["PNR", bp.pnr],
        ["Flight", f"{bp.airline} {bp.flight_number}"],
        ["From", bp.origin],
        ["To", bp.destination],
        ["Date", bp.date],
        ["Class", bp.cabin_class_name],
        ["Seat", bp.seat],
        ["Sequence", bp.checkin_sequence],
        ["Status", bp.passenger_status_name],
        ["Checked In", "Yes" if bp.checked_in else "No"],
    ]
    if bp.version_indicator is not None:
        table.append(
            ["Version", f"{bp.version_indicator}{bp.version_number or ''}"]
        )
    print(tabulate(table, disable_numparse=True))

    if bp.optional_fields:
        print()
        print(tabulate(
            [[f.description, f.data] for f in bp.optional_fields],
            headers=["Optional Field", "Data"],
            disable_numparse=True,
        ))
    elif bp.optional_fields is not None:
        print(
            colorama.Fore.YELLOW
            + "ℹ️ Optional field data could not be parsed."
            + colorama.Style.RESET_ALL,
        )

def show_breakdown(bcbp_str: str) -> None:
    """Prints the field position breakdown of a BCBP string."""
    print(format_breakdown(bcbp_str))
