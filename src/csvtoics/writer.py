from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Union

from .models import EventRecord
from .titles import sanitize_title, title_case

logger = logging.getLogger(__name__)

ICS_EXTENSION = ".ics"


def dt_to_ics(dt: datetime) -> str:
    # "Z" is literal; no conversion to UTC happens.
    return dt.strftime("%Y%m%dT%H%M%SZ")


def short_date(dt: datetime) -> str:
    # en-US short date, e.g. 1/1/2022
    return f"{dt.month}/{dt.day}/{dt.year}"


def short_time(dt: datetime) -> str:
    # en-US short time, e.g. 1:05 PM
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt.minute:02d} {'AM' if dt.hour < 12 else 'PM'}"


def _filename_part(text: str) -> str:
    return text.replace("/", "-").replace(":", "-").replace(" ", "_")


def summary_title(record: EventRecord) -> str:
    return sanitize_title(title_case(record.title)) or ""


def ics_file_name(record: EventRecord) -> str:
    """``{Slugged-Title}_{M-d-yyyy}_{h-mm_AM}.ics`` for the record's start."""
    slugged = summary_title(record).replace(" ", "-")
    start_date = _filename_part(short_date(record.start))
    start_time = _filename_part(short_time(record.start))
    return f"{slugged}_{start_date}_{start_time}{ICS_EXTENSION}"


def render_ics_card(record: EventRecord) -> List[str]:
    return [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "CALSCALE:GREGORIAN",
        "BEGIN:VEVENT",
        f"SUMMARY:{summary_title(record)}",
        f"DESCRIPTION:{record.description}",
        f"DTSTART:{dt_to_ics(record.start)}",
        f"DTEND:{dt_to_ics(record.end)}",
        f"LOCATION:{record.location}",
        "END:VEVENT",
        "END:VCALENDAR",
    ]


def write_ics_card(
    record: EventRecord,
    ics_directory_path: Union[str, Path],
    *,
    encoding: str = "utf-8",
) -> Path:
    """Write one calendar file for ``record``, replacing any file of the same name."""
    path = Path(ics_directory_path) / ics_file_name(record)
    if path.exists():
        logger.debug("Overwriting %s", path)
    # Text mode turns each "\n" into os.linesep.
    with path.open("w", encoding=encoding) as f:
        for line in render_ics_card(record):
            f.write(line + "\n")
    logger.debug("Wrote %s", path)
    return path
