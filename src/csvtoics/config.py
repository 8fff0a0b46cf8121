from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional
import os

import yaml

CONFIG_PATH_DEFAULT = "/opt/csvtoics/config.yaml"
CONFIG_PATH_ENV = "CSVTOICS_CONFIG"
LOG_LEVEL_ENV = "CSVTOICS_LOG_LEVEL"

if os.name == "nt":
    DEFAULT_CSV_FILE_PATH = "c:\\CSVtoICS\\CSV\\events.csv"
    DEFAULT_ICS_DIRECTORY_PATH = "c:\\CSVtoICS\\ICS"
else:
    DEFAULT_CSV_FILE_PATH = "/opt/csvtoics/CSV/events.csv"
    DEFAULT_ICS_DIRECTORY_PATH = "/opt/csvtoics/ICS"

@dataclass
class Settings:
    csv_file_path: str = DEFAULT_CSV_FILE_PATH
    ics_directory_path: str = DEFAULT_ICS_DIRECTORY_PATH
    interactive: bool = False
    write_bom: bool = False
    log_level: str = "WARNING"

    @property
    def encoding(self) -> str:
        return "utf-8-sig" if self.write_bom else "utf-8"

def load_settings(path: Optional[str] = None) -> Settings:
    """Load settings from YAML; a missing file means defaults.

    The path falls back to $CSVTOICS_CONFIG, then CONFIG_PATH_DEFAULT.
    $CSVTOICS_LOG_LEVEL wins over the file's log_level.
    """
    p = Path(path or os.environ.get(CONFIG_PATH_ENV) or CONFIG_PATH_DEFAULT)
    data: Dict[str, Any] = {}
    if p.is_file():
        loaded = yaml.safe_load(p.read_text(encoding="utf-8"))
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Settings file {p} must contain a mapping.")
        data = loaded

    return Settings(
        csv_file_path=str(data.get("csv_file_path") or DEFAULT_CSV_FILE_PATH),
        ics_directory_path=str(data.get("ics_directory_path") or DEFAULT_ICS_DIRECTORY_PATH),
        interactive=bool(data.get("interactive", False)),
        write_bom=bool(data.get("write_bom", False)),
        log_level=str(os.environ.get(LOG_LEVEL_ENV) or data.get("log_level", "WARNING")).upper(),
    )
