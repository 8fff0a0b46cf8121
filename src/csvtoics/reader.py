from __future__ import annotations

import csv
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterator, List, Union

from dateutil import parser as dtparser

from .models import EventRecord

logger = logging.getLogger(__name__)

TITLE = "Title"
DESCRIPTION = "Description"
START_DATE = "StartDate"
END_DATE = "EndDate"
LOCATION = "Location"

REQUIRED_COLUMNS = (TITLE, DESCRIPTION, START_DATE, END_DATE, LOCATION)


class RecordError(ValueError):
    """A row of the .CSV file could not be turned into an EventRecord."""


def parse_timestamp(text: str) -> datetime:
    """Parse month-first dates such as ``01-01-2022 1:00 PM``.

    Any timezone in the text is dropped; components are kept as written.
    """
    value = dtparser.parse(text.strip(), dayfirst=False)
    return value.replace(tzinfo=None)


def _column_index(header: List[str], path: Path) -> Dict[str, int]:
    positions = {name.strip().lower(): i for i, name in enumerate(header)}
    index: Dict[str, int] = {}
    for column in REQUIRED_COLUMNS:
        key = column.lower()
        if key not in positions:
            raise RecordError(f"Header in {path} is missing the '{column}' column.")
        index[column] = positions[key]
    return index


def _field(row: List[str], index: Dict[str, int], column: str, line: int) -> str:
    position = index[column]
    if position >= len(row):
        raise RecordError(f"Line {line}: missing value for '{column}'.")
    return row[position]


def _timestamp(row: List[str], index: Dict[str, int], column: str, line: int) -> datetime:
    raw = _field(row, index, column, line)
    try:
        return parse_timestamp(raw)
    except (ValueError, OverflowError) as exc:
        raise RecordError(f"Line {line}: cannot read '{column}' value {raw!r}: {exc}") from exc


def read_events(path: Union[str, Path]) -> Iterator[EventRecord]:
    """Yield one EventRecord per data row of a .CSV file with a header row.

    Columns are matched by header name in any order. The file stays open
    only while the generator is being consumed.
    """
    p = Path(path)
    with p.open("r", encoding="utf-8-sig", newline="") as f:
        rows = csv.reader(f)
        header = next(rows, None)
        if header is None:
            logger.info("%s is empty", p)
            return
        index = _column_index(header, p)

        count = 0
        for row in rows:
            if not row:
                continue
            line = rows.line_num
            yield EventRecord(
                title=_field(row, index, TITLE, line),
                description=_field(row, index, DESCRIPTION, line),
                start=_timestamp(row, index, START_DATE, line),
                end=_timestamp(row, index, END_DATE, line),
                location=_field(row, index, LOCATION, line),
            )
            count += 1
        logger.debug("Read %d record(s) from %s", count, p)
