# apps/cli/solve.py
"""
CLI entry point for solving a single rack.

This script:
  1) Loads the dictionary (uppercase, one word per line).
  2) Solves the rack with optional starts-with / ends-with / contains filters.
  3) Prints one "WORD (score)" per line, or "No results".

Usage:
    python -m apps.cli.solve "RETAIN?" --sort points
    python -m apps.cli.solve CATS --starts-with CA --sort length
"""

from __future__ import annotations

import argparse
import sys

from packages.datasets import DEFAULT_WORDLIST, load_wordlist
from packages.engine import Constraints, DictionaryUnavailableError, get_sort_ids
from packages.harness import MAX_INPUT_CHARS, Query, format_matches, run_query


def _clip(text: str | None) -> str:
    """Trim surrounding blanks; input boxes hold MAX_INPUT_CHARS characters."""
    return (text or "").strip()[:MAX_INPUT_CHARS]


def main(argv=None) -> int:
    """
    Parse CLI args, load the dictionary, solve, print the report.
    """
    ap = argparse.ArgumentParser(description="scrabbleAI — find words playable from a rack")
    ap.add_argument("letters", help="rack letters; use '?' for a blank tile")
    ap.add_argument("--starts-with", default="", help="required prefix")
    ap.add_argument("--ends-with", default="", help="required suffix")
    ap.add_argument("--contains", default="", help="required substring")
    ap.add_argument("--sort", choices=get_sort_ids(), default="points",
                    help="result order (default: points)")
    ap.add_argument("--wordlist", default=DEFAULT_WORDLIST,
                    help="path to the dictionary (one word per line)")
    ap.add_argument("--limit", type=int,
                    help="print only the last K results (the best ones for ascending sorts)")
    ap.add_argument("--stats", action="store_true",
                    help="print match count and solve time to stderr")
    args = ap.parse_args(argv)

    try:
        words = load_wordlist(args.wordlist)
    except FileNotFoundError:
        print(f"Dictionary unavailable: {args.wordlist} not found", file=sys.stderr)
        return 1

    query = Query(
        letters=_clip(args.letters),
        constraints=Constraints(_clip(args.starts_with), _clip(args.ends_with),
                                _clip(args.contains)),
        sort_key=args.sort,
    )

    try:
        r = run_query(words, query)
    except DictionaryUnavailableError:
        print(f"Dictionary unavailable: {args.wordlist} has no usable words", file=sys.stderr)
        return 1

    print(format_matches(r["matches"], limit=args.limit))
    if args.stats:
        sys.stderr.write(f"{r['num_matches']} match(es) in {r['time_ms']:.1f} ms\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
