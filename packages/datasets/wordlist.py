"""
Word list provider: turn a dictionary file into the in-memory word list
the matcher scans.

Rules:
  - one word per line, any line ending (LF, CRLF, CR)
  - surrounding whitespace and control characters are trimmed
  - words are stored uppercase (results print as "WORD (score)")
  - lines that are blank or not pure A–Z after trimming are dropped
  - order is preserved and duplicates are kept; the engine never dedupes

Typical use:
    from packages.datasets import load_wordlist
    words = load_wordlist("packages/datasets/data/words.txt")
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from packages.engine.validation import is_clean_word
from .io import read_lines

DEFAULT_WORDLIST = "packages/datasets/data/words.txt"

# whitespace + C0 control characters + DEL
_TRIM = "".join(chr(c) for c in range(0x21)) + "\x7f"


def clean_word(raw: str) -> Optional[str]:
    """
    Normalize one raw dictionary line.

    Returns the uppercase word, or None if the line is not a usable word.
    """
    w = raw.strip(_TRIM).upper()
    return w if is_clean_word(w) else None


def clean_words(lines: Iterable[str]) -> List[str]:
    """Apply clean_word to every line, dropping the rejects (order kept)."""
    out: List[str] = []
    for ln in lines:
        w = clean_word(ln)
        if w is not None:
            out.append(w)
    return out


def load_wordlist(p: Path | str = DEFAULT_WORDLIST) -> List[str]:
    """
    Load and normalize a dictionary file.
    Raises FileNotFoundError if the path doesn't exist; an existing but
    unusable file yields an empty list (the matcher reports that).
    """
    return clean_words(read_lines(p))
