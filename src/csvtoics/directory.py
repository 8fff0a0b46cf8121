from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


def clear_directory(path: Union[str, Path]) -> int:
    """Delete the files directly inside ``path``; subdirectories are left alone.

    Returns the number of files removed. The first OSError propagates.
    """
    removed = 0
    for entry in sorted(Path(path).iterdir()):
        if entry.is_dir():
            continue
        entry.unlink()
        removed += 1
    logger.info("Removed %d file(s) from %s", removed, path)
    return removed
