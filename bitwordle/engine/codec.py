"""
Positional bitmask encoding for five-letter words.

Representation:
  - a *letter set* is a 26-bit int; bit i set means letter chr(ord('a') + i)
  - an encoded word is a tuple of 5 letter sets, one per position

Two named types share that representation:
  - Word : concrete word, every slot has exactly one bit set (immutable)
  - Mask : candidate mask, each slot holds the letters still allowed there

Examples:
  encode("Mambo")         -> Word with slot 0 == 1 << 12 ('m')
  decode(encode("MAMBO")) -> "mambo"
"""

from __future__ import annotations

from typing import Iterable

WORD_LENGTH = 5
ALPHABET_SIZE = 26

# All 26 letters allowed (0x3ffffff)
ALL_LETTERS = (1 << ALPHABET_SIZE) - 1


class WordError(ValueError):
    """Base class for malformed word input."""


class WordLengthError(WordError):
    def __init__(self, s: str):
        super().__init__(f"word must be exactly {WORD_LENGTH} letters, got {len(s)}: {s!r}")
        self.word = s


class WordCharError(WordError):
    def __init__(self, s: str, ch: str):
        super().__init__(f"word must contain only letters a-z, got {ch!r} in {s!r}")
        self.word = s
        self.char = ch


def letter_bit(ch: str) -> int:
    """
    Single-bit letter set for one character (case-insensitive).
    Raises WordCharError for anything outside ASCII a-z.
    """
    c = ch.lower()
    if len(c) != 1 or not ("a" <= c <= "z"):
        raise WordCharError(ch, ch)
    return 1 << (ord(c) - ord("a"))


def lowest_letter(letter_set: int) -> str:
    """Letter of the lowest set bit (letter_set must be non-zero)."""
    return chr(ord("a") + (letter_set & -letter_set).bit_length() - 1)


def letters_of(letter_set: int) -> str:
    """All letters in a set, alphabetical: letters_of(0b101) -> 'ac'."""
    return "".join(chr(ord("a") + i) for i in range(ALPHABET_SIZE) if letter_set >> i & 1)


def format_letter_set(letter_set: int) -> str:
    """26-character binary rendering, bit 25 ('z') first."""
    return format(letter_set, f"0{ALPHABET_SIZE}b")


class LetterSlots(tuple):
    """Five letter sets, one per word position."""

    def __new__(cls, slots: Iterable[int]):
        slots = tuple(int(s) for s in slots)
        if len(slots) != WORD_LENGTH:
            raise ValueError(f"{cls.__name__} needs {WORD_LENGTH} slots, got {len(slots)}")
        for s in slots:
            if s < 0 or s > ALL_LETTERS:
                raise ValueError(f"letter set out of range: {s:#x}")
        return super().__new__(cls, slots)

    def charset(self) -> int:
        """Union of the letter sets across all positions."""
        out = 0
        for s in self:
            out |= s
        return out

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(format_letter_set(s) for s in self)})"


class Word(LetterSlots):
    """A concrete word: exactly one letter per position."""

    def __new__(cls, slots: Iterable[int]):
        self = super().__new__(cls, slots)
        for i, s in enumerate(self):
            if s == 0 or s & (s - 1):
                raise ValueError(f"slot {i} is not a single letter: {format_letter_set(s)}")
        return self

    def __str__(self) -> str:
        return decode(self)


class Mask(LetterSlots):
    """Letters still allowed at each position."""

    @classmethod
    def full(cls) -> "Mask":
        return cls([ALL_LETTERS] * WORD_LENGTH)

    @classmethod
    def empty(cls) -> "Mask":
        return cls([0] * WORD_LENGTH)

    def admits(self, word: Word) -> bool:
        """True iff every letter of `word` is allowed at its position."""
        return all(w & m == w for w, m in zip(word, self))

    def union(self, other: LetterSlots) -> "Mask":
        return Mask(a | b for a, b in zip(self, other))

    def bit_count(self) -> int:
        """Total allowed letters summed over all positions."""
        return sum(s.bit_count() for s in self)

    def __str__(self) -> str:
        return ",".join(format_letter_set(s) for s in self)


def encode(s: str) -> Word:
    """
    Encode a 5-letter string as a concrete Word.

    Raises:
      WordLengthError : len(s) != 5
      WordCharError   : a character is not an ASCII letter
    """
    if len(s) != WORD_LENGTH:
        raise WordLengthError(s)
    bits = []
    for ch in s:
        try:
            bits.append(letter_bit(ch))
        except WordCharError:
            raise WordCharError(s, ch) from None
    return Word(bits)


def decode(word: Word) -> str:
    """Inverse of encode(); always lowercase."""
    if not isinstance(word, Word):
        # re-validate so a Mask (or raw tuple) can't be decoded silently
        word = Word(word)
    return "".join(lowest_letter(s) for s in word)

