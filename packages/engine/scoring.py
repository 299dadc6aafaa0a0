"""
Letter scoring for a single tile and for a whole word.

Conventions:
  - Standard English Scrabble tile values, indexed A..Z.
  - Case-insensitive: 'q' and 'Q' are both worth 10.
  - Anything that is not an ASCII letter (digits, '?', punctuation) is
    worth 0. No errors are raised; callers can feed raw strings.
"""

from typing import List

# Point value per letter, A..Z
LETTER_POINTS: List[int] = [
    1, 3, 3, 2, 1, 4, 2, 4, 1, 8, 5, 1, 3,
    1, 1, 3, 10, 1, 1, 1, 1, 4, 4, 8, 4, 10,
]


def letter_index(letter: str) -> int:
    """
    Map an ASCII letter to its slot 0..25, or -1 for anything else.
    """
    if len(letter) != 1:
        return -1
    if "A" <= letter <= "Z":
        return ord(letter) - ord("A")
    if "a" <= letter <= "z":
        return ord(letter) - ord("a")
    return -1


def point_value(letter: str) -> int:
    """
    Return the tile value of `letter`.

    Examples:
      point_value("Q") -> 10
      point_value("e") -> 1
      point_value("?") -> 0
    """
    i = letter_index(letter)
    return LETTER_POINTS[i] if i >= 0 else 0


def word_score(word: str) -> int:
    """Sum of point_value over every character of `word`."""
    return sum(point_value(ch) for ch in word)
