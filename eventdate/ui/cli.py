"""Command-line interface for eventdate."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .. import __version__
from ..core.event_date import EventDate
from ..core.gedcom_reader import DateFinding, GedcomDateReader, audit_dates


def print_date_details(event_date: EventDate) -> None:
    """Print the canonical form and derived values of a date.

    Args:
        event_date: The date to describe
    """
    print(f"Original:        {event_date.original_text}")
    if event_date.edit_ok():
        print(f"Formatted:       {event_date.format_date()}")
    else:
        print(f"Error:           {event_date.error_message()}")
    if event_date.significant_reformat():
        print("Note:            significantly reformatted, please review")

    print()
    print(f"Year range:      {event_date.year_range() or '-'}")
    print(f"Earliest year:   {_or_dash(event_date.earliest_year())}")
    print(f"Latest year:     {_or_dash(event_date.latest_year())}")
    print(f"Effective year:  {_or_dash(event_date.effective_year())}")
    print(f"Sort key:        {event_date.date_sort_key()}")
    print(f"ISO date:        {event_date.iso_date() or '-'}")
    print(f"Day range:       {event_date.min_day()} - {event_date.max_day()}")


def print_findings(findings: List[DateFinding], show_reformats: bool) -> None:
    """Print audit findings grouped into errors and reformats.

    Args:
        findings: Findings from audit_dates
        show_reformats: Also list dates that are valid but were rewritten
    """
    errors = [f for f in findings if f.is_error]
    reformats = [f for f in findings if not f.is_error]

    print("\n" + "=" * 60)
    print("INVALID DATES")
    print("=" * 60)
    if errors:
        for finding in errors:
            print(finding)
    else:
        print("None found.")

    if show_reformats:
        print("\n" + "=" * 60)
        print("DATES TO REVIEW")
        print("=" * 60)
        if reformats:
            for finding in reformats:
                print(finding)
        else:
            print("None found.")

    print("=" * 60)
    print(f"Invalid: {len(errors):,}   To review: {len(reformats):,}\n")


def parse_command(args: argparse.Namespace) -> int:
    """Execute the parse command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for a valid date, 1 for a date with errors)
    """
    event_date = EventDate(args.date, args.event_type)
    print_date_details(event_date)
    return 0 if event_date.edit_ok() else 1


def audit_command(args: argparse.Namespace) -> int:
    """Execute the audit command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    filepath = args.file

    # Check if file exists
    if not Path(filepath).exists():
        print(f"Error: File not found: {filepath}", file=sys.stderr)
        return 1

    try:
        print(f"Loading GEDCOM file: {filepath}")
        reader = GedcomDateReader()
        events = reader.load_gedcom(filepath)
        print(f"Checking {len(events):,} dated events")

        print_findings(audit_dates(events), args.show_reformats)
        return 0

    except (OSError, ValueError) as e:
        print(f"Error processing file: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='eventdate',
        description='Parse, validate and normalize free-text genealogical event dates.',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands'
    )

    # Parse command
    parse_parser = subparsers.add_parser(
        'parse',
        help='Parse a single date and show its derived values'
    )
    parse_parser.add_argument(
        'date',
        help='The date, e.g. "abt 1850" (quote it)'
    )
    parse_parser.add_argument(
        '-e', '--event-type',
        help='Event type, e.g. Birth (single-instant events turn From/to into Bet/and)'
    )

    # Audit command
    audit_parser = subparsers.add_parser(
        'audit',
        help='Check every event date in a GEDCOM file'
    )
    audit_parser.add_argument(
        'file',
        help='Path to the GEDCOM file'
    )
    audit_parser.add_argument(
        '-r', '--show-reformats',
        action='store_true',
        help='Also list valid dates that would be significantly reformatted'
    )

    return parser


def _or_dash(value) -> str:
    return '-' if value is None else str(value)


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    # If no command specified, print help
    if not args.command:
        parser.print_help()
        return 0

    if args.command == 'parse':
        return parse_command(args)
    elif args.command == 'audit':
        return audit_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
