"""
Download a dictionary and write a clean, uppercase word list.

What it does:
- Downloads the given URL (plain-text word lists are the common case).
- If the server returns HTML, parses visible text with BeautifulSoup instead.
- Splits on whitespace, keeps pure A–Z tokens, uppercases them.
- De-duplicates while preserving source order, and writes to file.

Usage:
    python -m script.fetch_wordlist --out packages/datasets/data/words.txt
    # or alphabetically sorted:
    python -m script.fetch_wordlist --sort --out packages/datasets/data/words.txt
"""

import argparse

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from packages.datasets import clean_words, write_lines

URL = "https://raw.githubusercontent.com/dolph/dictionary/master/enable1.txt"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(body: str, content_type: str = "") -> list[str]:
    """
    Pull candidate words out of a response body (plain text or HTML).
    """
    if "html" in content_type.lower():
        body = BeautifulSoup(body, "html.parser").get_text("\n", strip=True)
    return unique_preserve_order(clean_words(body.split()))


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text, r.headers.get("Content-Type", ""))


def main():
    ap = argparse.ArgumentParser(description="Download a word list for the solver")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="packages/datasets/data/words.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")

if __name__ == "__main__":
    main()
