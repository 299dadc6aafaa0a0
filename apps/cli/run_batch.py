# apps/cli/run_batch.py
"""
CLI entry point for solving many racks in one run.

This script:
  1) Validates the word list (prints counts + SHA, flags dirty lines).
  2) Loads the dictionary and the query file
     (one query per line: LETTERS[,PREFIX[,SUFFIX[,CONTAINS]]]).
  3) Runs every query with a live progress indicator (tqdm bar on a
     terminal, plain text otherwise) and writes:
       - CSV:  per-query summary (match count, best word, time)
       - JSON: manifest with config, word list hash, git commit, etc.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.datasets import DEFAULT_WORDLIST, load_wordlist, pretty_summary, read_lines, \
    validate_wordlist
from packages.engine import get_sort_ids
from packages.harness import parse_query_line, run_query
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def main():
    """
    Parse CLI args, validate the word list, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="scrabbleAI — solve a batch of racks")
    ap.add_argument("--queries", required=True,
                    help="file with one query per line: LETTERS[,PREFIX[,SUFFIX[,CONTAINS]]]")
    ap.add_argument("--wordlist", default=DEFAULT_WORDLIST,
                    help="path to the dictionary (one word per line)")
    ap.add_argument("--sort", choices=get_sort_ids(), default="points")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of queries (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(args.wordlist)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")

    # 2) Load dictionary + queries
    if not rep["exists"]:
        raise SystemExit("Dictionary unavailable: fix --wordlist before running.")
    words = load_wordlist(args.wordlist)
    if not words:
        raise SystemExit("Dictionary unavailable: the word list has no usable words.")
    queries = [parse_query_line(ln, args.sort) for ln in read_lines(args.queries, skip_blank=True)]

    # 3) Choose queries (deterministic sample by seed)
    if args.sample and args.sample < len(queries):
        pool = list(queries)
        random.Random(args.seed).shuffle(pool)
        queries = pool[: args.sample]

    total = len(queries)
    mode = _progress_mode(args.progress)

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(queries, ncols=80, desc="Solving", unit="rack") if mode == "bar" else queries

    # 4) Run batch with live progress
    for idx, q in enumerate(iterator, 1):
        results.append(run_query(words, q))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"batch_{run_id}.csv"
    manifest_path = outdir / f"batch_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_queries": len(results),
        "num_with_results": sum(1 for r in results if r["num_matches"]),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
