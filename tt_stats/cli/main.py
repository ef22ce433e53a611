"""Main CLI entry point for tt_stats."""

import argparse
import logging
import sys

from tt_stats import __version__
from tt_stats.cli.commands import quote, record, visualize


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="tt-stats",
        description="Typing test statistics: record sessions and chart your progress",
        epilog="Use 'tt-stats <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", help="Path to config.json (default: XDG config location)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # tt-stats visualize [file]
    visualize_parser = subparsers.add_parser(
        "visualize",
        help="Chart typing speed over recent days",
        description="Plot daily min/mean/max WPM from a stats CSV file",
    )
    visualize_parser.add_argument(
        "file",
        nargs="?",
        default="words-stats.csv",
        help="Stats CSV: a filename in the results directory, or a path",
    )
    visualize_parser.add_argument(
        "--days",
        type=int,
        default=None,
        help="Trailing window in days (default: from config, 30)",
    )

    # tt-stats record <type> <wpm> <cpm> <accuracy>
    record_parser = subparsers.add_parser(
        "record",
        help="Append a session result to a stats log",
        description="Append one session (and its mistakes) to the CSV logs",
    )
    record_parser.add_argument("test_type", help="Log name, e.g. words or quotes")
    record_parser.add_argument("wpm", type=int, help="Words per minute")
    record_parser.add_argument("cpm", type=int, help="Characters per minute")
    record_parser.add_argument("accuracy", type=float, help="Accuracy percentage")
    record_parser.add_argument(
        "--timestamp",
        type=int,
        default=None,
        help="Completion time in seconds since epoch (default: now)",
    )
    record_parser.add_argument("--source-file", default=None, help="Text source used")
    record_parser.add_argument("--length", type=int, default=None, help="Words/lines requested")
    record_parser.add_argument(
        "--mistake",
        action="append",
        default=[],
        metavar="WORD:TYPED",
        help="A mistake made in the session (repeatable)",
    )

    # tt-stats quote
    subparsers.add_parser(
        "quote",
        help="Print a quote to type",
        description="Fetch a quote, falling back to cached or built-in quotes offline",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "visualize":
        return visualize.visualize_command(args)
    elif args.command == "record":
        return record.record_command(args)
    elif args.command == "quote":
        return quote.quote_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
