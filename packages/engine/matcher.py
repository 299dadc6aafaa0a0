"""
Match engine: which dictionary words can be built from a rack of tiles.

Pipeline for one solve:
  1) Build the inventory from the raw letters ('?' = blank).
  2) Drop words that fail the prefix/suffix/substring constraints.
  3) Feasibility: every letter the rack lacks must be covered by a blank.
  4) Score: full word value minus the value of every blank-covered letter.
  5) Order the matches by the requested sort key.

The engine is pure: the word list and the inventory are only read, so one
loaded dictionary can serve any number of concurrent solves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from .constraints import Constraints, filter_candidates
from .inventory import Inventory, build_inventory, cover_deficits, letter_frequency
from .scoring import word_score
from .sorting import SortKey, parse_sort_key, sort_matches


class DictionaryUnavailableError(Exception):
    """Raised when solve() is handed an empty or missing word list."""


@dataclass(frozen=True)
class Match:
    word: str
    score: int

    def __str__(self) -> str:
        return f"{self.word} ({self.score})"


def match_word(word: str, inventory: Inventory) -> Optional[Match]:
    """
    Test a single word against the rack.

    Returns:
      Match(word, score) if the word can be built (blanks included),
      else None.
    """
    feasible, covered = cover_deficits(letter_frequency(word), inventory)
    if not feasible:
        return None

    return Match(word, word_score(word) - covered)


def solve(
        words: Sequence[str],
        raw_letters: str,
        constraints: Optional[Constraints] = None,
        sort_key: Union[SortKey, str] = SortKey.POINTS,
) -> List[Match]:
    """
    Find every word in `words` that can be assembled from `raw_letters`.

    Args:
      words       : the dictionary, in stored order (never modified)
      raw_letters : user input; letters and '?' count, everything else is ignored
      constraints : optional prefix/suffix/substring filter
      sort_key    : SortKey or its id ("points", "length", "none")

    Returns:
      Ordered list of Match. An empty list means "no results".

    Raises:
      DictionaryUnavailableError if `words` is empty or None.
      ValueError for an unknown sort key.
    """
    if not words:
        raise DictionaryUnavailableError("dictionary unavailable")

    # Resolve the key first so a bad id fails before the scan
    key = parse_sort_key(sort_key)

    inventory = build_inventory(raw_letters)

    found: List[Match] = []
    for w in filter_candidates(words, constraints):
        m = match_word(w, inventory)
        if m is not None:
            found.append(m)

    return sort_matches(found, key)
