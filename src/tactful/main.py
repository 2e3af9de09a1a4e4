from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from tactful.app import (
    OutputFormat,
    load_contact_store,
    render_birthday_calendar,
    render_export,
    render_names,
    render_next_birthdays,
)
from tactful.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_output_format(value: str) -> OutputFormat:
    try:
        return OutputFormat.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert and query a personal contact store")
    parser.add_argument(
        "-s",
        "--store",
        type=str,
        default=None,
        help="Path of the contact store directory (defaults to config, then ~/.contact-store)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser(
        "bdays",
        help="List the next birthday of every contact, in chronological order",
    )
    subparsers.add_parser(
        "bdays-calendar",
        help="Create an iCalendar file containing the future birthdays of all contacts",
    )
    export = subparsers.add_parser(
        "export",
        help="Output contacts in the given format (by default vCard)",
    )
    export.add_argument(
        "-f",
        "--fmt",
        dest="format",
        type=_parse_output_format,
        default=OutputFormat.VCARD,
        help="The format of the output (vcard/json)",
    )
    export.add_argument(
        "--compact",
        action="store_true",
        help="Write JSON without indentation",
    )
    subparsers.add_parser("names", help="List the names of all contacts")

    return parser.parse_args(list(argv))


def run(args: argparse.Namespace) -> str:
    """Load the store and render the output of the selected command."""

    store = load_contact_store(args.store)
    if args.command == "names":
        return render_names(store)
    if args.command == "bdays":
        return render_next_birthdays(store)
    if args.command == "bdays-calendar":
        return render_birthday_calendar(store)
    if args.command == "export":
        return render_export(store, args.format, pretty=not args.compact)
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(verbose=parsed_args.verbose)

    try:
        output = run(parsed_args)
    except Exception:
        log.exception("Failed to run %s", parsed_args.command)
        sys.exit(1)

    sys.stdout.write(output)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def cli() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    cli()
