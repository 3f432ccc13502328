from .validator import validate_wordlist, pretty_summary
from .io import read_lines, load_wordlist, DEFAULT_WORDLIST

__all__ = ["validate_wordlist", "pretty_summary", "read_lines", "load_wordlist", "DEFAULT_WORDLIST"]
