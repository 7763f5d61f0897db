"""Tools for converting BCBP Julian date fragments."""

# Standard imports
import calendar
import logging
from datetime import date, timedelta

logger = logging.getLogger(__name__)

INVALID_DATE = "Invalid date"
UNKNOWN_DATE = "Unknown date"

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)

# A year resolved from a single digit may be at most this many years
# after the reference year.
MAX_YEARS_AHEAD = 2

def julian_to_calendar(fragment: str, reference_date: date = None) -> str:
    """
    Converts a 3 character Julian date fragment to a "Month Day" string.

    The first character is the last digit of the year and the remaining
    two characters are the day of the year. The full year is resolved
    against reference_date (today if not provided). Returns
    INVALID_DATE for malformed fragments and UNKNOWN_DATE if the
    conversion fails for any other reason.
    """
    try:
        if not isinstance(fragment, str) or len(fragment) != 3:
            return INVALID_DATE
        year_digit, day_str = fragment[0], fragment[1:]
        if not (year_digit.isdecimal() and day_str.isdecimal()):
            return INVALID_DATE
        day_of_year = int(day_str)
        if day_of_year < 1 or day_of_year > 366:
            return INVALID_DATE
        year = resolve_year(int(year_digit), reference_date)
        cal_date = date(year, 1, 1) + timedelta(days=day_of_year - 1)
        return f"{MONTH_NAMES[cal_date.month - 1]} {cal_date.day}"
    except (TypeError, ValueError, OverflowError) as err:
        logger.warning("Could not convert Julian date %r: %s", fragment, err)
        return UNKNOWN_DATE

def resolve_year(year_digit: int, reference_date: date = None) -> int:
    """Resolves the last digit of a year to a full year."""
    if reference_date is None:
        reference_date = date.today()
    current_year = reference_date.year
    year = (current_year // 10) * 10 + year_digit
    if year > current_year + MAX_YEARS_AHEAD:
        # Most likely last decade.
        year -= 10
    return year

def ordinal_flight_date(
    fragment: str, reference_date: date = None
) -> date | None:
    """
    Interprets a 3 digit fragment as an IATA day of year.

    Assumes the flight is up to 3 days after reference_date, or else
    the most recent date matching this ordinal before it.
    """
    try:
        day_of_year = int(fragment)
    except (TypeError, ValueError):
        return None
    if day_of_year > 366 or day_of_year < 1:
        return None
    if reference_date is None:
        reference_date = date.today()
    latest_date = reference_date + timedelta(days=3)
    # Searches 8 years since leap years can be up to 8 years apart.
    for year in range(latest_date.year, latest_date.year - 8, -1):
        test_date = _ordinal_date(year, day_of_year)
        if test_date is None:
            continue
        if test_date > latest_date:
            continue
        return test_date
    return None

def _ordinal_date(year: int, day_of_year: int):
    """Creates a date from a year and day of year."""
    if day_of_year < 1 or day_of_year > 366:
        return None
    if day_of_year == 366 and not calendar.isleap(year):
        return None
    return date(year, 1, 1) + timedelta(days=day_of_year-1)
