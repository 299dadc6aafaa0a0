import sys
from pathlib import Path

from script import prepare_wordlist
from script.fetch_wordlist import extract_words


def test_prepare_wordlist_dedupes_and_sorts(tmp_path: Path, monkeypatch):
    src = tmp_path / "raw.txt"
    src.write_bytes(b"zoo\r\ncat\nA\nCAT\nc4t\n\nact\n")
    dst = tmp_path / "words.txt"

    monkeypatch.setattr(sys, "argv", [
        "prepare_wordlist", "--in", str(src), "--out", str(dst), "--min-len", "2", "--sort",
    ])
    prepare_wordlist.main()

    assert dst.read_text(encoding="utf-8") == "ACT\nCAT\nZOO\n"


def test_unique_preserve_order():
    assert prepare_wordlist.unique_preserve_order(["B", "A", "B"]) == ["B", "A"]


def test_extract_words_plain_text():
    assert extract_words("aa\r\naah\nAA\nx-ray\n") == ["AA", "AAH"]


def test_extract_words_html():
    html = "<html><body><ul><li>qi</li><li>za</li><li>qi</li></ul></body></html>"
    assert extract_words(html, "text/html; charset=utf-8") == ["QI", "ZA"]
