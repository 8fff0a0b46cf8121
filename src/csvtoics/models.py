from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime

@dataclass(frozen=True)
class EventRecord:
    title: str
    description: str
    start: datetime             # naive; written as-is
    end: datetime               # not checked against start
    location: str

@dataclass(frozen=True)
class Arguments:
    csv_file_path: str
    ics_directory_path: str
    is_valid: bool = False
    validation_message: str = ""
