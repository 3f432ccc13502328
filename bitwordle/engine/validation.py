"""
Guess-line parsing.

A guess line is accepted iff, after stripping surrounding whitespace, it
is exactly 5 ASCII letters (any case). Guesses do not have to be in the
dictionary: any well-formed word yields feedback and narrows the universe.
"""

from __future__ import annotations

from .codec import Word, WordError, encode


def parse_guess(line: str) -> Word:
    """Strip and encode; raises WordLengthError / WordCharError."""
    return encode(line.strip())


def validate_guess(line: str) -> bool:
    """Return True if `line` would be accepted by parse_guess()."""
    if not isinstance(line, str):
        return False
    try:
        parse_guess(line)
    except WordError:
        return False
    return True
