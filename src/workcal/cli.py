"""
WorkCal CLI

Command-line interface for querying business calendars.

Usage:
    workcal check 2021-12-27 --calendar office.yaml
    workcal range 2021-12-15 2022-01-15 --preset us_federal
    workcal holidays 2024-01-01 2024-12-31 --preset us_federal
    workcal validate office.yaml
    workcal presets

Exit Codes:
    0   OK              - Command succeeded (check: date is a working day)
    1   OFF_DAY         - check: date is an off-day
    10  INPUT_INVALID   - Invalid arguments (dates, missing calendar)
    11  CALENDAR_ERROR  - Calendar loading/validation failed
    20  INTERNAL_ERROR  - Unexpected internal error
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from typing import Any, Optional, Sequence

from .calendars import BusinessCalendar
from .exceptions import CalendarNotFoundError, WorkCalError
from .log import configure_logging
from .packs import CalendarLoader, list_presets, load_preset

logger = logging.getLogger(__name__)


# ============================================================================
# EXIT CODES
# ============================================================================

class ExitCode:
    """Deterministic exit codes for pipeline integration."""
    OK = 0
    OFF_DAY = 1
    INPUT_INVALID = 10
    CALENDAR_ERROR = 11
    INTERNAL_ERROR = 20


class InputError(Exception):
    """Invalid command-line input."""


# ============================================================================
# HELPERS
# ============================================================================

def json_dumps(obj: Any, indent: int = 2) -> str:
    return json.dumps(obj, indent=indent, default=str)


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InputError(f"Invalid date (expected YYYY-MM-DD): {value}")


def _load_selected_calendar(args: argparse.Namespace) -> BusinessCalendar:
    """Load the calendar chosen by --calendar/--name or --preset."""
    if args.preset:
        return load_preset(args.preset)
    if not args.calendar:
        raise InputError("A calendar is required: use --calendar FILE or --preset NAME")

    loader = CalendarLoader()
    calendar = loader.load(args.calendar)
    if args.name:
        named = loader.get_calendar(args.name)
        if named is None:
            raise CalendarNotFoundError(
                message=f"Calendar '{args.name}' not found in {args.calendar}",
                details={"available": loader.list_calendars()},
                calendar=args.name,
            )
        return named
    return calendar


# ============================================================================
# COMMANDS
# ============================================================================

def cmd_check(args: argparse.Namespace) -> int:
    """Report whether a date is a working day."""
    calendar = _load_selected_calendar(args)
    day = _parse_date(args.date)

    if calendar.is_off_day(day):
        name = calendar.get_holiday_name(day)
        print(f"{day.isoformat()} off-day" + (f" ({name})" if name else ""))
        return ExitCode.OFF_DAY

    print(f"{day.isoformat()} working day")
    return ExitCode.OK


def cmd_range(args: argparse.Namespace) -> int:
    """Print the working days of a range."""
    calendar = _load_selected_calendar(args)
    start = _parse_date(args.start)
    end = _parse_date(args.end)

    days = calendar.working_days_in_range(start, end)
    if args.count:
        print(len(days))
    elif args.json:
        print(json_dumps([d.isoformat() for d in days]))
    else:
        for d in days:
            print(d.isoformat())
    return ExitCode.OK


def cmd_holidays(args: argparse.Namespace) -> int:
    """List observed holidays in a range."""
    calendar = _load_selected_calendar(args)
    start = _parse_date(args.start)
    end = _parse_date(args.end)

    holidays = calendar.observed_holidays(start, end)
    if args.json:
        print(json_dumps([
            {
                "observed": h.observed.isoformat(),
                "date": h.raw.isoformat(),
                "policy": h.policy.value,
                "description": h.description,
            }
            for h in holidays
        ]))
    else:
        for h in holidays:
            moved = f" (from {h.raw.isoformat()})" if h.is_moved else ""
            print(f"{h.observed.isoformat()}  {h.description}{moved}")
    return ExitCode.OK


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a calendar file."""
    loader = CalendarLoader()
    loader.load(args.file)

    for name, calendar in loader.get_all_calendars().items():
        weekdays = ",".join(
            wd.value for wd in sorted(calendar.dow, key=lambda wd: wd.number)
        )
        print(f"{name}: valid ({len(calendar.exclude)} rules, working days {weekdays or 'none'})")
        if calendar.inherits:
            print(f"  inherits (not resolved): {', '.join(calendar.inherits)}")
    return ExitCode.OK


def cmd_presets(args: argparse.Namespace) -> int:
    """List bundled presets."""
    for name in list_presets():
        print(name)
    return ExitCode.OK


# ============================================================================
# MAIN
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workcal",
        description="WorkCal - business calendar queries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit Codes:
  0   OK              Success (check: working day)
  1   OFF_DAY         check: date is an off-day
  10  INPUT_INVALID   Invalid arguments
  11  CALENDAR_ERROR  Calendar loading/validation failed
  20  INTERNAL_ERROR  Unexpected error
        """,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WORKCAL_LOG_LEVEL or WARNING)",
    )

    source = argparse.ArgumentParser(add_help=False)
    source.add_argument("--calendar", "-c", help="Calendar YAML/JSON file")
    source.add_argument("--name", "-n", help="Calendar name within a multi-calendar file")
    source.add_argument("--preset", "-p", help="Bundled calendar preset")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser(
        "check", parents=[source], help="Check whether a date is a working day"
    )
    check_parser.add_argument("date", help="Date (YYYY-MM-DD)")
    check_parser.set_defaults(func=cmd_check)

    range_parser = subparsers.add_parser(
        "range", parents=[source], help="List working days in a range (inclusive)"
    )
    range_parser.add_argument("start", help="First date (YYYY-MM-DD)")
    range_parser.add_argument("end", help="Last date (YYYY-MM-DD)")
    range_parser.add_argument("--count", action="store_true", help="Print only the count")
    range_parser.add_argument("--json", action="store_true", help="JSON output")
    range_parser.set_defaults(func=cmd_range)

    holidays_parser = subparsers.add_parser(
        "holidays", parents=[source], help="List observed holidays in a range"
    )
    holidays_parser.add_argument("start", help="First date (YYYY-MM-DD)")
    holidays_parser.add_argument("end", help="Last date (YYYY-MM-DD)")
    holidays_parser.add_argument("--json", action="store_true", help="JSON output")
    holidays_parser.set_defaults(func=cmd_holidays)

    validate_parser = subparsers.add_parser("validate", help="Validate a calendar file")
    validate_parser.add_argument("file", help="Calendar YAML/JSON file")
    validate_parser.set_defaults(func=cmd_validate)

    presets_parser = subparsers.add_parser("presets", help="List bundled presets")
    presets_parser.set_defaults(func=cmd_presets)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if not args.command:
        parser.print_help()
        return ExitCode.INPUT_INVALID

    try:
        return args.func(args)
    except InputError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.INPUT_INVALID
    except WorkCalError as e:
        print(f"error: {e}", file=sys.stderr)
        if e.details:
            print(json_dumps(e.to_dict()), file=sys.stderr)
        return ExitCode.CALENDAR_ERROR
    except Exception as e:
        logger.exception("Unexpected error in %s", args.command, extra={"command": args.command})
        print(f"error: Unexpected error: {e}", file=sys.stderr)
        return ExitCode.INTERNAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
