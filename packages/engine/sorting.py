"""
Result ordering.

  - points : ascending score, then shorter words first, then the words'
             own character order (stored casing, normally uppercase)
  - length : shorter words first, then character order
  - none   : leave matches in dictionary order
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, List, Sequence, Union

if TYPE_CHECKING:
    from .matcher import Match


class SortKey(str, Enum):
    POINTS = "points"
    LENGTH = "length"
    NONE = "none"


def get_sort_ids() -> List[str]:
    """Sort key ids in declaration order (for CLI choices/help)."""
    return [k.value for k in SortKey]


def parse_sort_key(value: Union[SortKey, str]) -> SortKey:
    """
    Accept a SortKey or its id (case-insensitive).
    """
    if isinstance(value, SortKey):
        return value
    try:
        return SortKey(str(value).strip().lower())
    except ValueError as e:
        raise ValueError(
            f"Unknown sort key: {value}. Available: {get_sort_ids()}") from e


def sort_matches(matches: Sequence["Match"], key: Union[SortKey, str]) -> List["Match"]:
    """
    Return a new list of `matches` ordered by `key`; the input is untouched.
    """
    key = parse_sort_key(key)
    if key is SortKey.POINTS:
        return sorted(matches, key=lambda m: (m.score, len(m.word), m.word))
    if key is SortKey.LENGTH:
        return sorted(matches, key=lambda m: (len(m.word), m.word))
    return list(matches)
