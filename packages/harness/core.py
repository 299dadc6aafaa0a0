"""
Query harness primitives.

- Query:     one solve request (rack letters, constraints, sort key).
- run_query: solve a single query against a loaded dictionary and time it.
- run_batch: run many queries in sequence (optionally a sample prefix).

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes. The dictionary
is passed in explicitly; nothing here keeps state between calls.
"""

from __future__ import annotations
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Union

from packages.engine import Constraints, DictionaryUnavailableError, SortKey, solve
from packages.engine.sorting import parse_sort_key
from .report import summarize

# Width of the letter/constraint input boxes in the desktop tool.
MAX_INPUT_CHARS = 15


@dataclass(frozen=True)
class Query:
    letters: str
    constraints: Constraints = field(default_factory=Constraints)
    sort_key: Union[SortKey, str] = SortKey.POINTS


def parse_query_line(line: str, sort_key: Union[SortKey, str] = SortKey.POINTS) -> Query:
    """
    Parse "LETTERS[,PREFIX[,SUFFIX[,CONTAINS]]]" into a Query.

    Missing fields are empty constraints, e.g. "CATS?,CA" -> prefix "CA".
    """
    parts = [p.strip() for p in line.split(",")] + ["", "", ""]
    letters, prefix, suffix, contains = parts[:4]
    return Query(letters, Constraints(prefix, suffix, contains), parse_sort_key(sort_key))


def _assert_dictionary(words: Sequence[str]) -> None:
    """Guardrail: fail once, before any work, if there is nothing to search."""
    if not words:
        raise DictionaryUnavailableError("dictionary unavailable")


def run_query(words: Sequence[str], query: Query) -> Dict:
    """
    Solve one query.

    Args:
        words: loaded dictionary (read-only)
        query: rack letters, constraints and sort key

    Returns:
        dict with keys:
            letters, prefix, suffix, contains, sort (str),
            matches (list[Match]), time_ms (float) and the
            summarize() fields (num_matches, best_word, best_score, longest)
    """
    _assert_dictionary(words)
    key = parse_sort_key(query.sort_key)

    t0 = time.perf_counter_ns()
    matches = solve(words, query.letters, query.constraints, key)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    result = {
        "letters": query.letters,
        "prefix": query.constraints.prefix,
        "suffix": query.constraints.suffix,
        "contains": query.constraints.contains,
        "sort": key.value,
        "matches": matches,
        "time_ms": dt,
    }
    result.update(summarize(matches))
    return result


def run_batch(
        words: Sequence[str],
        queries: Iterable[Query],
        *,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many queries back-to-back. If 'sample' is provided, only the first K
    queries are used to speed up quick experiments.
    """
    _assert_dictionary(words)

    pool = list(queries)
    if sample is not None:
        pool = pool[:sample]

    return [run_query(words, q) for q in pool]
