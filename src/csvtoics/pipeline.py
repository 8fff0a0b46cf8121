from __future__ import annotations

import logging
from contextlib import closing
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Union

from .arguments import resolve_arguments, validate_arguments
from .config import Settings
from .directory import clear_directory
from .models import Arguments
from .reader import read_events
from .titles import title_case
from .writer import write_ics_card

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def notify(self, message: str) -> None: ...

    def confirm(self, message: str) -> None: ...


class ConsoleNotifier:
    """Prints progress to stdout; pauses on ``confirm`` only when interactive."""

    def __init__(self, interactive: bool = False) -> None:
        self.interactive = interactive

    def notify(self, message: str) -> None:
        print(message)

    def confirm(self, message: str) -> None:
        if not self.interactive:
            return
        input(message)


def convert_csv_to_ics(
    csv_file_path: Union[str, Path],
    ics_directory_path: Union[str, Path],
    notifier: Optional[Notifier] = None,
    *,
    encoding: str = "utf-8",
) -> List[Path]:
    notifier = notifier or ConsoleNotifier()
    written: List[Path] = []
    try:
        notifier.notify("Reading .CSV File...")
        # Close the reader before returning, even when a write fails.
        with closing(read_events(csv_file_path)) as records:
            for record in records:
                notifier.notify(f"Writing {title_case(record.title)}...")
                written.append(write_ics_card(record, ics_directory_path, encoding=encoding))
    except Exception as e:
        logger.exception("Conversion of %s failed after %d file(s)", csv_file_path, len(written))
        notifier.notify(str(e))
        raise
    return written


def run(
    argv: Optional[Sequence[str]],
    notifier: Optional[Notifier] = None,
    settings: Optional[Settings] = None,
) -> int:
    """Resolve, validate, clear the target directory and convert.

    Returns 1 without touching the filesystem when the arguments are invalid.
    """
    settings = settings or Settings()
    notifier = notifier or ConsoleNotifier(interactive=settings.interactive)

    defaults = Arguments(csv_file_path=settings.csv_file_path, ics_directory_path=settings.ics_directory_path)
    arguments = validate_arguments(resolve_arguments(argv, defaults))
    if not arguments.is_valid:
        logger.info("Invalid arguments: %s", arguments.validation_message)
        notifier.notify(arguments.validation_message)
        return 1

    notifier.notify("Ready to convert your .CSV to .ICS files?")
    notifier.notify(f"The application will read the .CSV file: {arguments.csv_file_path}")
    notifier.notify(f"The application will save the .ICS files here: {arguments.ics_directory_path}")
    notifier.confirm("Press any key when ready...")

    try:
        clear_directory(arguments.ics_directory_path)
    except OSError as e:
        logger.exception("Could not clear %s", arguments.ics_directory_path)
        notifier.notify(str(e))
        raise

    written = convert_csv_to_ics(
        arguments.csv_file_path,
        arguments.ics_directory_path,
        notifier,
        encoding=settings.encoding,
    )
    logger.info("Wrote %d .ics file(s) to %s", len(written), arguments.ics_directory_path)
    notifier.notify("Conversion complete!")
    return 0
