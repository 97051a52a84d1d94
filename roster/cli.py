"""
Command-Line Interface for the Roster System.

This module provides the interactive CLI for the roster engines.
It handles user input and orchestrates the display of results.

MODES:
------
1. DASHBOARD: Facility totals and per-class seat usage
2. CLASS ROSTERS: Every active room with its children
3. MEDICAL ALERTS: Medications and forms about to expire
4. RELATIONSHIPS: Sibling/friend group of one child
5. BULK IMPORT: Add "name, dob" lines from a text file

NOTE: Don't run this file directly. Run from the repository root:
    python -m roster path/to/roster.json --as-of 09/01/2025
"""

import argparse
import json
import logging
import sys

from .config import DEFAULT_SNAPSHOT_PATH
from .console import RosterConsole
from .data import SnapshotFormatError
from .ui import TerminalDisplay


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roster",
        description="Classroom assignment and enrollment reports for a childcare roster export",
    )
    parser.add_argument(
        "snapshot",
        nargs="?",
        default=str(DEFAULT_SNAPSHOT_PATH),
        help="Roster export JSON (default: %(default)s)",
    )
    parser.add_argument(
        "--as-of",
        dest="as_of",
        help="Projection date (MM/DD/YYYY); overrides the date stored in the export",
    )
    parser.add_argument(
        "--mode",
        choices=["1", "2", "3", "4", "5"],
        help="Run one mode without the interactive menu",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _run_relationships(console: RosterConsole):
    try:
        student_id = input("  Student id: ").strip()
    except EOFError:
        return
    console.show_relationships(student_id)


def _run_import(console: RosterConsole):
    try:
        path = input("  File with 'name, dob' lines: ").strip()
    except EOFError:
        return
    try:
        with open(path, "r", encoding="utf-8") as f:
            added = console.import_students(f.read())
    except OSError as e:
        TerminalDisplay.print_error(f"Could not read {path}: {e}")
        return
    print(f"\n  {TerminalDisplay.GREEN}✓ Imported {len(added)} records{TerminalDisplay.RESET}")


def main(argv=None) -> int:
    """
    Command-line interface for the roster engines.

    ═══════════════════════════════════════════════════════════════════════════
    AVAILABLE MODES
    ═══════════════════════════════════════════════════════════════════════════

    1. DASHBOARD       - totals and seat usage per room
    2. CLASS ROSTERS   - children per room with age and transition dates
    3. MEDICAL ALERTS  - expirations in the next 30 days
    4. RELATIONSHIPS   - transitive sibling/friend group
    5. BULK IMPORT     - append students and save the export

    ═══════════════════════════════════════════════════════════════════════════
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    console = RosterConsole(args.snapshot, projection_date=args.as_of)

    try:
        console.loader.snapshot
    except (OSError, json.JSONDecodeError, SnapshotFormatError) as e:
        TerminalDisplay.print_error(f"Could not read {args.snapshot}: {e}")
        return 1

    mode = args.mode
    if mode is None:
        print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
        print("╔══════════════════════════════════════════════════════════════════╗")
        print("║         CHILDCARE ROSTER CONSOLE                                 ║")
        print("╠══════════════════════════════════════════════════════════════════╣")
        print("║  1. 📊 DASHBOARD      - Enrollment and capacity                  ║")
        print("║  2. 📋 CLASS ROSTERS  - Children per classroom                   ║")
        print("║  3. 🩺 MEDICAL ALERTS - Upcoming expirations                     ║")
        print("║  4. 👪 RELATIONSHIPS  - Sibling/friend groups                    ║")
        print("║  5. 📥 BULK IMPORT    - Add students from a file                 ║")
        print("╚══════════════════════════════════════════════════════════════════╝")
        print(f"{TerminalDisplay.RESET}")
        try:
            mode = input(f"{TerminalDisplay.BOLD}Select mode (1-5): {TerminalDisplay.RESET}").strip()
        except EOFError:
            mode = "1"

    if mode == "2":
        console.show_class_rosters()
    elif mode == "3":
        console.show_medical_alerts()
    elif mode == "4":
        _run_relationships(console)
    elif mode == "5":
        _run_import(console)
    else:
        console.show_dashboard()
    return 0


if __name__ == "__main__":
    sys.exit(main())
