"""
FARS Unified Command-Line Interface

Exposes two subcommands:

    fars summarize --years <YEAR> [...]       Monthly accident counts per year
    fars map --state <N> --year <YEAR> [...]  Map accident locations for a state

Both accept ``--data-dir`` pointing at the folder holding the
``accident_<year>.csv.bz2`` files (default: the current directory).

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .utils.logging import configure_logging


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\n❌  Error: {message}", file=sys.stderr)
    sys.exit(1)


# ===========================================================================
# Subcommand handlers
# ===========================================================================

# ---------------------------------------------------------------------------
# summarize
# ---------------------------------------------------------------------------

def handle_summarize(args: argparse.Namespace) -> None:
    """Print the month-by-year accident count table.

    Years whose file is missing or unreadable are reported as warnings and
    left out of the table.

    Args:
        args: Parsed CLI arguments.  Required field: ``args.years``.
    """
    from fars.reports.generators import summarize_years

    table = summarize_years(args.years, data_dir=args.data_dir)
    if table.empty:
        _die("no readable accident files for the requested years")

    print(table.to_string())


# ---------------------------------------------------------------------------
# map
# ---------------------------------------------------------------------------

def handle_map(args: argparse.Namespace) -> None:
    """Render the accident map for one state and year.

    A missing, unreadable or malformed file and an unknown state code are
    reported on stderr with exit status 1.

    Args:
        args: Parsed CLI arguments.  Required fields: ``args.state``,
              ``args.year``.
    """
    from fars.reports.generators import map_state

    # FileNotFoundError is an OSError; InvalidStateError, missing columns and
    # pandas parse errors are ValueErrors; EOFError is a truncated bz2 file.
    try:
        map_state(
            args.state,
            args.year,
            data_dir=args.data_dir,
            output_path=args.output,
        )
    except (OSError, EOFError, ValueError) as exc:
        _die(str(exc))

    if args.output:
        print(f"✅  Map written to {args.output}")


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``summarize`` and ``map``
        subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System toolkit\n"
            "Summarise yearly accident files and map accidents by state."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )
    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents per month for one or more years.",
        description=(
            "Read accident_<year>.csv.bz2 for every requested year and\n"
            "print a table with one row per month and one column per year.\n"
            "Months without accidents in a year are shown as NaN."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        type=int,
        metavar="YEAR",
        help="One or more years, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Folder holding the accident files (default: current directory).",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Plot accident locations for one state and year.",
        description=(
            "Plot every accident of the given FARS state code as a point\n"
            "over US state outlines.  Unknown coordinates are skipped."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_map.add_argument(
        "--state",
        required=True,
        type=int,
        metavar="N",
        help="Numeric FARS state code, e.g. 1 for Alabama.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        type=int,
        metavar="YEAR",
        help="Year of the accident file to read.",
    )
    p_map.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Folder holding the accident files (default: current directory).",
    )
    p_map.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Write the map to this HTML file instead of opening a viewer.",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        json_output=args.log_json,
    )
    args.func(args)


if __name__ == "__main__":
    main()
