"""CLI with subcommands: init, add, show, list, update, delete."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .core.config import StoreConfig, StorePattern
from .core.errors import FilmNotFoundError, FilmStoreError
from .core.models import Film
from .core.protocols import FilmRepository
from .logging.rich_logger import FilmReporter, QuietReporter
from .persistence.database import open_database
from .persistence.factory import create_repository


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="filmstore",
        description="Store films in SQLite through an Active Record or Data Mapper repository.",
    )

    # Global options
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress non-essential output",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=Path("films.sqlite"),
        help="Path to database file (default: films.sqlite)",
    )
    parser.add_argument(
        "--pattern",
        type=str,
        choices=[p.value for p in StorePattern],
        default=StorePattern.DATA_MAPPER.value,
        help="Data-access pattern (default: data-mapper)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=5.0,
        help="Seconds to wait on a locked database (default: 5)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ============ INIT command ============
    subparsers.add_parser(
        "init",
        help="Create the films table",
    )

    # ============ ADD command ============
    add_parser = subparsers.add_parser(
        "add",
        help="Add a film",
    )
    add_parser.add_argument("title", type=str, help="Film title")
    add_parser.add_argument("year", type=int, help="Release year")
    add_parser.add_argument("duration", type=int, help="Duration in minutes")

    # ============ SHOW command ============
    show_parser = subparsers.add_parser(
        "show",
        help="Show one film and its age",
    )
    show_parser.add_argument("id", type=int, help="Film id")

    # ============ LIST command ============
    subparsers.add_parser(
        "list",
        help="List all films",
    )

    # ============ UPDATE command ============
    update_parser = subparsers.add_parser(
        "update",
        help="Change a film's title, year or duration",
    )
    update_parser.add_argument("id", type=int, help="Film id")
    update_parser.add_argument("--title", type=str, default=None, help="New title")
    update_parser.add_argument("--year", type=int, default=None, help="New release year")
    update_parser.add_argument("--duration", type=int, default=None, help="New duration in minutes")

    # ============ DELETE command ============
    delete_parser = subparsers.add_parser(
        "delete",
        help="Delete a film",
    )
    delete_parser.add_argument("id", type=int, help="Film id")

    return parser


# ============ Command Handlers ============

def cmd_init(args: argparse.Namespace, repository: FilmRepository, reporter) -> int:
    """Handle the init command."""
    reporter.success(f"Database ready: {args.db}")
    return 0


def cmd_add(args: argparse.Namespace, repository: FilmRepository, reporter) -> int:
    """Handle the add command."""
    film = Film(args.title, args.year, args.duration)
    repository.save(film)
    reporter.success(f"Added {film.title!r} with id {film.id}")
    return 0


def cmd_show(args: argparse.Namespace, repository: FilmRepository, reporter) -> int:
    """Handle the show command."""
    reporter.print_film(repository.get(args.id))
    return 0


def cmd_list(args: argparse.Namespace, repository: FilmRepository, reporter) -> int:
    """Handle the list command."""
    films = repository.find_all()
    if not films:
        reporter.info("No films stored")
        return 0
    reporter.print_films(films)
    return 0


def cmd_update(args: argparse.Namespace, repository: FilmRepository, reporter) -> int:
    """Handle the update command."""
    changes = {
        key: value
        for key, value in (("title", args.title), ("year", args.year), ("duration", args.duration))
        if value is not None
    }
    if not changes:
        reporter.warning("Nothing to update: pass --title, --year or --duration")
        return 1

    film = repository.get(args.id)
    for key, value in changes.items():
        setattr(film, key, value)
    repository.update(film)
    reporter.success(f"Updated film {film.id}: {', '.join(changes)}")
    return 0


def cmd_delete(args: argparse.Namespace, repository: FilmRepository, reporter) -> int:
    """Handle the delete command."""
    film = repository.get(args.id)
    repository.delete(film)
    reporter.success(f"Deleted {film.title!r} (id {film.id})")
    return 0


COMMANDS = {
    "init": cmd_init,
    "add": cmd_add,
    "show": cmd_show,
    "list": cmd_list,
    "update": cmd_update,
    "delete": cmd_delete,
}

# Only these may create the database file and the films table
CREATING_COMMANDS = {"init", "add"}


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Create reporter
    if getattr(args, "quiet", False):
        reporter = QuietReporter()
    else:
        reporter = FilmReporter(verbose=verbose)

    # No command specified - show help
    if not args.command:
        parser.print_help()
        return 0

    handler = COMMANDS.get(args.command)
    if handler is None:
        reporter.error(f"Unknown command: {args.command}")
        return 1

    creates_database = args.command in CREATING_COMMANDS
    try:
        config = StoreConfig(
            db_path=args.db,
            pattern=args.pattern,
            timeout=args.timeout,
            create_schema=creates_database,
        )
    except ValidationError as e:
        reporter.error(f"Invalid options: {e}")
        return 1

    if not creates_database and not config.in_memory and not config.db_path.exists():
        reporter.error(f"Database not found: {config.db_path}. Run 'filmstore init' first.")
        return 1

    try:
        reporter.debug(f"Database: {config.db_path} ({config.pattern.value})")
        with open_database(config) as database:
            repository = create_repository(config.pattern, database)
            return handler(args, repository, reporter)

    except KeyboardInterrupt:
        # Clean exit on Ctrl+C - no stack trace
        return 130
    except FilmNotFoundError as e:
        reporter.error(str(e))
        return 1
    except FilmStoreError as e:
        reporter.error(f"Error: {e}")
        if verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
