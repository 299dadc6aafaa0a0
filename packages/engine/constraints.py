"""
Candidate filtering by word shape.

Given:
  - a pool of words (the dictionary, in its stored order)
  - an optional prefix, suffix and required substring

Return:
  - the words that start with the prefix, end with the suffix and contain
    the substring somewhere.

All comparisons are case-insensitive. An empty (or missing) part always
matches, so an empty Constraints() keeps every word. Filtering never fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class Constraints:
    prefix: str = ""
    suffix: str = ""
    contains: str = ""

    def __post_init__(self):
        # Frozen dataclass: None -> "" and uppercase via object.__setattr__
        for name in ("prefix", "suffix", "contains"):
            value = getattr(self, name) or ""
            object.__setattr__(self, name, value.upper())

    @property
    def empty(self) -> bool:
        return not (self.prefix or self.suffix or self.contains)

    def matches(self, word: str) -> bool:
        """True if `word` satisfies all three parts."""
        w = word.upper()
        return (
                w.startswith(self.prefix)
                and w.endswith(self.suffix)
                and self.contains in w
        )


def filter_candidates(words: Iterable[str], constraints: Optional[Constraints]) -> List[str]:
    """
    Keep only words that satisfy `constraints`.

    Args:
      words       : iterable of candidate words
      constraints : prefix/suffix/substring filter, or None for "no filter"

    Returns:
      List[str] of matching words (order preserved as in `words`).
    """
    if constraints is None or constraints.empty:
        return list(words)
    return [w for w in words if constraints.matches(w)]
