"""
Plain-text rendering of solve results.

One match per line as "WORD (score)", no trailing newline. An empty result
renders as the NO_RESULTS marker so the display layer always has text.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from packages.engine import Match

NO_RESULTS = "No results"


def format_matches(matches: Sequence[Match], sep: str = "\n", limit: Optional[int] = None) -> str:
    """
    Render matches in their given order.

    Args:
      matches : ordered result list from engine.solve
      sep     : line separator ("\\r\\n" for Windows text boxes)
      limit   : keep only the LAST `limit` entries; with ascending sorts
                those are the best/longest words
    """
    if not matches:
        return NO_RESULTS
    shown = list(matches)
    if limit is not None and limit > 0:
        shown = shown[-limit:]
    return sep.join(str(m) for m in shown)


def summarize(matches: Sequence[Match]) -> Dict:
    """Count, best-scoring match and longest length for batch reports."""
    if not matches:
        return {"num_matches": 0, "best_word": "", "best_score": 0, "longest": 0}
    # ties on score go to the longer word, then the earlier one
    best = max(matches, key=lambda m: (m.score, len(m.word)))
    return {
        "num_matches": len(matches),
        "best_word": best.word,
        "best_score": best.score,
        "longest": max(len(m.word) for m in matches),
    }
