"""
Letter inventory (the player's tiles) and the wild-card feasibility test.

Given:
  - the raw letters typed by the user, e.g. "CAT?" ('?' = blank tile)
  - a candidate word

Answer:
  - can the word be built from those tiles, and how many points do the
    blanks cost it?

Blanks come from ONE shared pool for the whole word. Each blank that
stands in for a missing letter is worth 0, so the word loses that
letter's tile value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .scoring import LETTER_POINTS, letter_index

WILDCARD = "?"
ALPHABET_SIZE = 26


@dataclass
class Inventory:
    """Available tile counts: 26 letter slots (A..Z) plus blanks."""
    counts: List[int] = field(default_factory=lambda: [0] * ALPHABET_SIZE)
    blanks: int = 0


def build_inventory(raw_letters: str) -> Inventory:
    """
    Count tiles in `raw_letters`.

    Letters (either case) fill their slot, '?' adds a blank, and every
    other character is ignored without complaint.
    """
    inv = Inventory()
    for ch in raw_letters or "":
        if ch == WILDCARD:
            inv.blanks += 1
            continue
        i = letter_index(ch)
        if i >= 0:
            inv.counts[i] += 1
    return inv


def letter_frequency(word: str) -> List[int]:
    """26-slot letter histogram of `word` (non-letters skipped)."""
    freq = [0] * ALPHABET_SIZE
    for ch in word:
        i = letter_index(ch)
        if i >= 0:
            freq[i] += 1
    return freq


def cover_deficits(frequency: List[int], inventory: Inventory) -> Tuple[bool, int]:
    """
    Check whether blanks can cover every letter the inventory lacks.

    Walks A..Z; for each letter the word needs more of than we hold, the
    shortfall is paid from the shared blank pool.

    Args:
      frequency : 26-slot histogram of the candidate word
      inventory : tiles available for this query (not modified)

    Returns:
      (feasible, points_covered)
        feasible       : False as soon as the pool cannot cover a shortfall
        points_covered : tile value of every letter played by a blank
    """
    remaining = inventory.blanks
    points_covered = 0

    for i in range(ALPHABET_SIZE):
        deficit = frequency[i] - inventory.counts[i]
        if deficit <= 0:
            continue
        if deficit > remaining:
            return False, points_covered
        remaining -= deficit
        points_covered += LETTER_POINTS[i] * deficit

    return True, points_covered
