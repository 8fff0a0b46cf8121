from __future__ import annotations

import re
from typing import Optional

MAX_TITLE_LENGTH = 100

_DISALLOWED = re.compile(r"[^0-9A-Za-z _-]")
_WORD = re.compile(r"[^\W_]+(?:'[^\W_]+)*")


def _title_word(match: re.Match) -> str:
    word = match.group(0)
    # Acronyms and bare numbers stay as typed.
    if not any(c.islower() for c in word):
        return word
    # Leading digits do not end the word: "3rd" -> "3Rd".
    for i, c in enumerate(word):
        if c.isalpha():
            return word[:i] + c.upper() + word[i + 1:].lower()
    return word


def title_case(value: Optional[str]) -> Optional[str]:
    if not value:
        return value
    return _WORD.sub(_title_word, value)


def sanitize_title(value: Optional[str]) -> Optional[str]:
    """Trim to MAX_TITLE_LENGTH, then drop anything outside [0-9A-Za-z _-].

    The length is counted in UTF-16 code units, so an emoji counts as two.
    """
    if not value:
        return value
    units = value.encode("utf-16-le")
    if len(units) > MAX_TITLE_LENGTH * 2:
        # A surrogate half left by the cut would be filtered out below anyway.
        value = units[: MAX_TITLE_LENGTH * 2].decode("utf-16-le", errors="ignore")
    return _DISALLOWED.sub("", value)
