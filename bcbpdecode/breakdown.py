"""Tools for showing where each field sits in BCBP text."""

# Project imports
from bcbpdecode.boarding_pass import (
    MANDATORY_FIELDS,
    OPTIONAL_FIELDS_START,
    VERSION_INDICATOR_INDEX,
    VERSION_NUMBER_INDEX,
)

MIN_BREAKDOWN_LENGTH = 30

def format_breakdown(raw: str) -> str:
    """
    Creates a position annotated dump of BCBP text for debugging.

    Mandatory fields are shown as [first-last] with inclusive indexes.
    Fields that do not fit in the text are left out.
    """
    if not isinstance(raw, str):
        return "No data for breakdown"
    if len(raw) < MIN_BREAKDOWN_LENGTH:
        return f"Data too short for breakdown (length: {len(raw)})"
    lines = ["Field positions breakdown:", ""]
    for _, chars, label in MANDATORY_FIELDS:
        if len(raw) >= chars.stop:
            lines.append(
                f"[{chars.start}-{chars.stop - 1}] {label}: "
                f"\"{raw[chars]}\""
            )
    if len(raw) > VERSION_INDICATOR_INDEX:
        lines.append(
            f"[{VERSION_INDICATOR_INDEX}] Version Indicator: "
            f"\"{raw[VERSION_INDICATOR_INDEX]}\""
        )
    if len(raw) > VERSION_NUMBER_INDEX:
        lines.append(
            f"[{VERSION_NUMBER_INDEX}] Version Number: "
            f"\"{raw[VERSION_NUMBER_INDEX]}\""
        )
    if len(raw) > OPTIONAL_FIELDS_START:
        lines.append(
            f"[{OPTIONAL_FIELDS_START}+] Optional Fields: "
            f"\"{raw[OPTIONAL_FIELDS_START:]}\""
        )
    return "\n".join(lines) + "\n"
