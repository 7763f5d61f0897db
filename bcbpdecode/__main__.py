"""Tools for decoding Bar-Coded Boarding Pass (BCBP) strings."""

# Standard imports
import argparse

# Project imports
import bcbpdecode.tools as bpt
from bcbpdecode.config import Settings, parse_reference_date
from bcbpdecode.logging_config import setup_logging

if __name__ == "__main__":
    settings = Settings()
    parser = argparse.ArgumentParser(
        description="Tools for decoding boarding pass barcode data."
    )
    parser.add_argument("--log-level",
        default=settings.log_level,
        help="Logging level (default from BCBP_LOG_LEVEL or WARNING)",
        type=str,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # decode
    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode a BCBP-coded text string",
    )
    decode_parser.add_argument("bcbp",
        help="BCBP-coded text string",
        metavar="BCBP_TEXT",
        type=str,
    )
    decode_parser.add_argument("--reference-date",
        help=(
            "ISO 8601 date used to resolve the flight year (default from "
            "BCBP_REFERENCE_DATE or today)"
        ),
        metavar="DATE",
        type=parse_reference_date,
    )
    decode_parser.add_argument("--json",
        action="store_true",
        dest="as_json",
        help="Print the boarding pass as JSON",
    )

    # breakdown
    breakdown_parser = subparsers.add_parser(
        "breakdown",
        help="Show the field positions of a BCBP-coded text string",
    )
    breakdown_parser.add_argument("bcbp",
        help="BCBP-coded text string",
        metavar="BCBP_TEXT",
        type=str,
    )

    # Parse arguments
    args = parser.parse_args()
    setup_logging(args.log_level)
    if args.command == "decode":
        bpt.decode_bcbp(
            args.bcbp,
            args.reference_date or settings.reference_date,
            args.as_json,
        )
    elif args.command == "breakdown":
        bpt.show_breakdown(args.bcbp)
