from .scoring import point_value, word_score, LETTER_POINTS
from .inventory import Inventory, build_inventory, letter_frequency, cover_deficits, WILDCARD
from .constraints import Constraints, filter_candidates
from .sorting import SortKey, parse_sort_key, sort_matches, get_sort_ids
from .matcher import Match, DictionaryUnavailableError, match_word, solve
from .validation import is_clean_word

__all__ = [
    "point_value", "word_score", "LETTER_POINTS",
    "Inventory", "build_inventory", "letter_frequency", "cover_deficits", "WILDCARD",
    "Constraints", "filter_candidates",
    "SortKey", "parse_sort_key", "sort_matches", "get_sort_ids",
    "Match", "DictionaryUnavailableError", "match_word", "solve",
    "is_clean_word",
]
