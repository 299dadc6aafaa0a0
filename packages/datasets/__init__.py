from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines
from .wordlist import load_wordlist, clean_word, clean_words, DEFAULT_WORDLIST

__all__ = ["validate_wordlist", "pretty_summary", "load_wordlist", "clean_word",
           "clean_words", "read_lines", "write_lines", "DEFAULT_WORDLIST"]
