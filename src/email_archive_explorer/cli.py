"""Command-line interface for Email Archive Explorer.

This module provides the main entry point for the CLI application.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import structlog
from pydantic import BaseModel

from email_archive_explorer import __version__
from email_archive_explorer.config import get_settings
from email_archive_explorer.exceptions import ConfigurationError, EmailExplorerError
from email_archive_explorer.explorer import EmailExplorer
from email_archive_explorer.utils import configure_logging

logger = structlog.get_logger()


def _add_pagination(parser: argparse.ArgumentParser, default_limit: int | None = None) -> None:
    parser.add_argument(
        "--limit",
        type=int,
        default=default_limit,
        help="Max results to return (default: from settings)",
    )
    parser.add_argument("--offset", type=int, default=0, help="Number of results to skip")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="email-explorer", description="Email Archive Explorer")
    parser.add_argument(
        "--dataset",
        type=Path,
        default=None,
        help="Path to the dataset JSON file (default: settings dataset_path)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Abort on malformed records or duplicate document IDs",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    _add_pagination(subparsers.add_parser("people", help="People mentioned in email bodies"))
    _add_pagination(subparsers.add_parser("participants", help="Email senders and recipients"))
    _add_pagination(subparsers.add_parser("notable", help="Notable public figures"))
    subparsers.add_parser("crime-types", help="All crime type tags")
    subparsers.add_parser("stats", help="Show dataset and index sizes")

    search_parser = subparsers.add_parser(
        "search-person", help="Search for a person across all indexes"
    )
    search_parser.add_argument("query", help="Name or partial name")
    search_parser.add_argument("--limit", type=int, default=None, help="Max matches")

    emails_parser = subparsers.add_parser(
        "emails", help="Filter emails; every given value must match"
    )
    emails_parser.add_argument(
        "--participant",
        action="append",
        dest="participants",
        help="Participant name (repeatable, or comma-separated)",
    )
    emails_parser.add_argument(
        "--mentioned",
        action="append",
        dest="mentioned_people",
        help="Mentioned person (repeatable, or comma-separated)",
    )
    emails_parser.add_argument(
        "--notable",
        action="append",
        dest="notable_figures",
        help="Notable figure (repeatable, or comma-separated)",
    )
    emails_parser.add_argument(
        "--crime",
        action="append",
        dest="crime_types",
        help="Crime type (repeatable, or comma-separated)",
    )
    _add_pagination(emails_parser)

    show_parser = subparsers.add_parser("show", help="Show full records by document ID")
    show_parser.add_argument("ids", nargs="+", help="Document IDs (may be comma-separated)")

    return parser


def _split_option(values: list[str] | None) -> list[str] | None:
    if not values:
        return None
    return [part.strip() for v in values for part in v.split(",") if part.strip()]


def _run_command(explorer: EmailExplorer, args: argparse.Namespace) -> BaseModel:
    if args.command == "people":
        return explorer.get_mentioned_people(limit=args.limit, offset=args.offset)
    if args.command == "participants":
        return explorer.get_participants(limit=args.limit, offset=args.offset)
    if args.command == "notable":
        return explorer.get_notable_figures(limit=args.limit, offset=args.offset)
    if args.command == "crime-types":
        return explorer.get_crime_types()
    if args.command == "stats":
        return explorer.stats()
    if args.command == "search-person":
        return explorer.search_person(args.query, limit=args.limit)
    if args.command == "emails":
        return explorer.get_emails(
            participants=_split_option(args.participants),
            mentioned_people=_split_option(args.mentioned_people),
            notable_figures=_split_option(args.notable_figures),
            crime_types=_split_option(args.crime_types),
            limit=args.limit,
            offset=args.offset,
        )
    if args.command == "show":
        return explorer.get_emails_by_ids(_split_option(args.ids) or [])

    raise ValueError(f"Unknown command: {args.command}")


def main(args: list[str] | None = None) -> int:
    """Main entry point for the Email Archive Explorer CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    if args is None:
        args = sys.argv[1:]

    try:
        settings = get_settings()
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    configure_logging(settings.log_level)

    logger.info("email_explorer_started", version=__version__, debug=settings.debug)

    parser = _build_parser()
    parsed = parser.parse_args(args)

    try:
        explorer = EmailExplorer.from_json_file(
            parsed.dataset, settings=settings, strict=parsed.strict
        )
        result = _run_command(explorer, parsed)
    except EmailExplorerError as e:
        logger.error("command_failed", command=parsed.command, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(result.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
