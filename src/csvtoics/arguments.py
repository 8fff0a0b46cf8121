from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from .config import DEFAULT_CSV_FILE_PATH, DEFAULT_ICS_DIRECTORY_PATH
from .models import Arguments

logger = logging.getLogger(__name__)

HELP_FLAGS = ("-h", "--help")


def help_requested(argv: Optional[Sequence[str]]) -> bool:
    """True when the first argument asks for help; the rest are ignored."""
    if not argv:
        return False
    return argv[0] in HELP_FLAGS


def default_arguments() -> Arguments:
    return Arguments(csv_file_path=DEFAULT_CSV_FILE_PATH, ics_directory_path=DEFAULT_ICS_DIRECTORY_PATH)


def resolve_arguments(argv: Optional[Sequence[str]], defaults: Optional[Arguments] = None) -> Arguments:
    """Overlay up to two positional paths onto the defaults.

    Empty strings keep the default for their position. Anything past the
    second argument is ignored. The result is never validated here.
    """
    base = defaults or default_arguments()
    arguments = Arguments(csv_file_path=base.csv_file_path, ics_directory_path=base.ics_directory_path)
    if not argv:
        return arguments

    csv_file_path = argv[0] if len(argv) > 0 else ""
    ics_directory_path = argv[1] if len(argv) > 1 else ""

    if csv_file_path:
        arguments = replace(arguments, csv_file_path=csv_file_path)
    if ics_directory_path:
        arguments = replace(arguments, ics_directory_path=ics_directory_path)
    return arguments


def validate_arguments(arguments: Arguments) -> Arguments:
    if not Path(arguments.csv_file_path).is_file():
        logger.debug("CSV file missing: %s", arguments.csv_file_path)
        return replace(
            arguments,
            is_valid=False,
            validation_message=f"The .CSV file {arguments.csv_file_path} does not exist.",
        )

    if not Path(arguments.ics_directory_path).is_dir():
        logger.debug("ICS directory missing: %s", arguments.ics_directory_path)
        return replace(
            arguments,
            is_valid=False,
            validation_message=(
                f"The directory {arguments.ics_directory_path}, "
                "the location where .ICS files are to be saved, does not exist."
            ),
        )

    return replace(arguments, is_valid=True, validation_message="Arguments are valid.")
