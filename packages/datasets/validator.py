"""
Dataset validator for scrabbleAI.

What this module does:
- Validate a dictionary file (one word per line) before a solving session.
- Enforce formatting rules (A–Z only after trimming, one word per line).
- Detect duplicates, invalid lines and lines that needed repair
  (surrounding whitespace/control characters); compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("packages/datasets/data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from .io import read_lines
from .wordlist import clean_word


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # lines dropped by the loader
    repaired_lines: int  # lines that were valid only after trimming
    longest: int         # length of the longest valid word
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int, int]:
    """
    Load words from a text file and classify each line.

    Rules:
      - one token per line (split exactly as load_wordlist does)
      - must be A–Z / a–z once trimmed
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count, repaired_count)
    """
    valid: List[str] = []
    invalid = 0
    repaired = 0

    # Same line splitting as the loader, so counts match what gets solved;
    # line terminators (LF, CRLF, CR) are already gone here
    for line in read_lines(path):
        w = clean_word(line)
        if w is None:
            invalid += 1
            continue
        if len(w) != len(line):
            repaired += 1
        valid.append(w)

    return valid, invalid, repaired


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str) -> Dict:
    """
    Validate a dictionary file.

    Parameters
    ----------
    path : str
        Path to the word list (one word per line).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport schema) with:
          - counts, SHA-256, duplicate/invalid/repaired diagnostics
          - `passed` boolean (strict: requires existing, non-empty, no invalids)
          - `issues` (list of strings) to surface any problems
    """
    p = Path(path)

    # Early return if the file is missing
    if not p.exists():
        rep = WordlistReport(path, False, 0, "", 0, 0, 0, 0, False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid, repaired = _load_and_check(p)
    unique = set(words)
    issues: List[str] = []

    # Empty-file guardrail (a bad path or preprocessing bug)
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if repaired:
        issues.append(f"word list has {repaired} line(s) with stray whitespace/control characters")
    if len(unique) != len(words):
        issues.append("word list contains duplicate words")

    rep = WordlistReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        repaired_lines=repaired,
        longest=max((len(w) for w in words), default=0),
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=172823 (uniq=172823, sha=abc123...) | invalid=0 | longest=28 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | longest={report['longest']} | {status}"
    )
