from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .arguments import help_requested
from .config import load_settings
from .pipeline import ConsoleNotifier, run

HELP_EPILOG = """\
Runtime Parameters:
  arg1             .CSV File Path
  arg2             .ICS Destination Directory

  Example (Default):         csvtoics "/opt/csvtoics/CSV/events.csv" "/opt/csvtoics/ICS"

.CSV File Format:
  Title,Description,StartDate,EndDate,Location

  Example:
  "Event Title","Event Description","01-01-2022 12:00 PM","01-01-2022 1:00 PM","Event Location"
"""


def build_parser() -> argparse.ArgumentParser:
    # -h/--help is only honoured as the first argument, see help_requested.
    ap = argparse.ArgumentParser(
        prog="csvtoics",
        description="Convert a .CSV file of events into one .ICS file per event.",
        epilog=HELP_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    ap.add_argument("csv_file_path", nargs="?", help=".CSV file to read")
    ap.add_argument("ics_directory_path", nargs="?", help="existing directory for the .ICS files")
    return ap


def _log_level(name: str) -> int:
    # getLevelName maps unknown names to a "Level x" string.
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    ap = build_parser()
    if help_requested(argv):
        ap.print_help()
        return 0

    load_dotenv()
    settings = load_settings()
    logging.basicConfig(level=_log_level(settings.log_level))

    args, _extra = ap.parse_known_args(argv)
    positional = [value for value in (args.csv_file_path, args.ics_directory_path) if value is not None]
    return run(positional, ConsoleNotifier(interactive=settings.interactive), settings)


if __name__ == "__main__":
    raise SystemExit(main())
