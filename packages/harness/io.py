"""
I/O utilities for batch runs.

Responsibilities:
- write_csv:     flatten per-query results into a tidy CSV (one row per query).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Constraint fields are prefixed with an apostrophe when they start with a
  character spreadsheet apps treat as a formula ("=", "+", "-", "@").
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

CSV_FIELDS = ["letters", "prefix", "suffix", "contains", "sort",
              "num_matches", "best_word", "best_score", "longest", "time_ms"]


def _excel_safe(text: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "=A1?" -> "'=A1?"
    """
    return "'" + text if text and text[0] in "=+-@" else text


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of query results to CSV.

    Schema (columns):
      letters, prefix, suffix, contains, sort,
      num_matches, best_word, best_score, longest, time_ms

    Args:
      results  : list of dicts returned by harness.run_query.
      path     : output CSV path.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()

        for r in results:
            w.writerow({
                "letters": _excel_safe(r["letters"]),
                "prefix": _excel_safe(r["prefix"]),
                "suffix": _excel_safe(r["suffix"]),
                "contains": _excel_safe(r["contains"]),
                "sort": r["sort"],
                "num_matches": r["num_matches"],
                "best_word": r["best_word"],
                "best_score": r["best_score"],
                "longest": r["longest"],
                "time_ms": round(float(r["time_ms"]), 3),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (wordlist, queries, sort, sample, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_queries: number of queries in this batch
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
