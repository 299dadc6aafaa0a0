"""
Normalize a raw dictionary file into the format the solver loads.

Features:
- Trims whitespace/control characters (stray '\\r' from CRLF files included).
- Uppercases every word and drops lines that are not pure A–Z.
- Removes duplicates, preserving original order by default (stable dedupe).
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Optional length bounds (e.g. drop 1-letter words).
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.prepare_wordlist --in raw/enable1.txt \
        --out packages/datasets/data/words.txt --min-len 2 --sort
"""

import argparse
from pathlib import Path

from packages.datasets import clean_words, read_lines, write_lines


def unique_preserve_order(words: list[str]) -> list[str]:
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def main():
    ap = argparse.ArgumentParser(description="Normalize and dedupe a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--min-len", type=int, default=1, help="drop words shorter than this")
    ap.add_argument("--max-len", type=int, help="drop words longer than this")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    words = clean_words(lines)
    words = [w for w in words
             if len(w) >= args.min_len and (args.max_len is None or len(w) <= args.max_len)]

    out = unique_preserve_order(words)
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
