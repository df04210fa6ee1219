"""Command line interface for the encounter XP calculator.

Works out the XP budget of a D&D 5E encounter for a party of adventurers.

Usage:
    encounter-xp --levels "3,5" --difficulty e
    encounter-xp -l "1 1 1"
    encounter-xp -l 4,4,5 -p my_table.json
    python -m encounter_xp -l 10 -d d
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from encounter_xp import __version__
from encounter_xp.core.config import get_settings
from encounter_xp.core.exceptions import EncounterXpError
from encounter_xp.core.logging import bind_context, clear_context, configure_logging, get_logger
from encounter_xp.engine.formatter import format_outcome
from encounter_xp.engine.levels import parse_difficulty, parse_levels
from encounter_xp.engine.table_loader import load_encounter_table


logger = get_logger(__name__)


def build_parser(prog: str = "encounter-xp") -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Simple program for working out an encounter level for 5e DnD",
    )
    parser.add_argument(
        "-l",
        "--levels",
        required=True,
        help="space or comma separated levels of the adventurers in the encounter",
    )
    parser.add_argument(
        "-d",
        "--difficulty",
        help="difficulty either (e)asy, (m)edium, (h)ard or (d)eadly",
    )
    parser.add_argument(
        "-p",
        "--path",
        help="path to encounter table (defaults to using encounter table details from the DMG)",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def run(levels: str, difficulty: str | None = None, path: str | None = None) -> str:
    """Resolve all input and render the encounter budget.

    Args:
        levels: Raw level list.
        difficulty: Raw difficulty selector, or None.
        path: Table file path, or None for the embedded table.

    Returns:
        The formatted budget lines.

    Raises:
        EncounterXpError: If any input or the table is invalid.
    """
    party = parse_levels(levels)
    tier = parse_difficulty(difficulty)
    table = load_encounter_table(path)
    return format_outcome(table, party, tier)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``encounter-xp`` command.

    Args:
        argv: Command line arguments, defaults to ``sys.argv[1:]``.

    Returns:
        Process exit status: 0 on success, 1 on any calculator error.
    """
    configure_logging()
    try:
        settings = get_settings()
        configure_logging(level=settings.log_level, json_format=settings.json_logs)
        args = build_parser(settings.app_name).parse_args(argv)

        path = args.path
        if path is None and settings.table_path is not None:
            path = str(settings.table_path)

        bind_context(levels=args.levels)
        outcome = run(args.levels, args.difficulty, path)
    except EncounterXpError as exc:
        logger.debug("Encounter calculation failed", error=repr(exc))
        print(exc.message, file=sys.stderr)
        return 1
    finally:
        clear_context()

    print(outcome)
    return 0


__all__ = ["build_parser", "main", "run"]
