"""
Lightweight dictionary-entry validation.

The matcher assumes clean tokens. A dictionary entry is clean iff:
  - it is a string
  - it is non-empty
  - it contains ASCII letters A–Z / a–z only (no CR, tabs, digits, '?')

Raw files sometimes carry a stray '\\r' or trailing blanks from CRLF
line endings; the loader trims those before asking this predicate.
"""

import re

_CLEAN_RE = re.compile(r"[A-Za-z]+")


def is_clean_word(word) -> bool:
    """Return True if `word` is a non-empty run of ASCII letters."""
    if not isinstance(word, str):
        return False
    return _CLEAN_RE.fullmatch(word) is not None
