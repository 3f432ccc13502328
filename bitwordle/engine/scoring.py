"""
Feedback pattern for a single (target, guess) pair.

Conventions:
  - 'G' : CORRECT  = guessed letter matches the target at this position
  - 'Y' : PRESENT  = guessed letter occurs somewhere else in the target
  - 'B' : ABSENT   = guessed letter does not occur in the target at all

Algorithm (single pass over the target's letter union):
  1) fullset = OR of the target's five letter bits (no multiplicity kept)
  2) per position: equal bits -> G, guess bit in fullset -> Y, else B

Because fullset drops multiplicity, every copy of a guessed letter that
occurs in the target is marked Y or G, even when the target holds fewer
copies than the guess:

  compute_pattern(encode("mambo"), encode("bombs")) -> B:Y O:Y M:G B:G S:B
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from .codec import WORD_LENGTH, Word, lowest_letter


class PatternKind(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {PatternKind.ABSENT: "B", PatternKind.PRESENT: "Y", PatternKind.CORRECT: "G"}


@dataclass(frozen=True)
class PatternLetter:
    bit: int            # the guessed letter's single-bit set
    kind: PatternKind

    @property
    def letter(self) -> str:
        return lowest_letter(self.bit)

    def __str__(self) -> str:
        return f"{self.letter.upper()}:{self.kind.symbol}"


class Pattern(tuple):
    """Five PatternLetter entries, one per guess position."""

    def __new__(cls, letters: Iterable[PatternLetter]):
        letters = tuple(letters)
        if len(letters) != WORD_LENGTH:
            raise ValueError(f"pattern needs {WORD_LENGTH} entries, got {len(letters)}")
        return super().__new__(cls, letters)

    def __str__(self) -> str:
        return " ".join(str(p) for p in self)

    def compact(self) -> str:
        """Kinds only, e.g. 'YYGGB'."""
        return "".join(p.kind.symbol for p in self)

    def is_solved(self) -> bool:
        return all(p.kind is PatternKind.CORRECT for p in self)


def compute_pattern(target: Word, guess: Word) -> Pattern:
    """
    Score `guess` against `target`.

    Each entry carries the guess's letter bit, never the target's.
    """
    fullset = target.charset()

    out = []
    for t, g in zip(target, guess):
        if g == t:
            kind = PatternKind.CORRECT
        elif g & fullset:
            kind = PatternKind.PRESENT
        else:
            kind = PatternKind.ABSENT
        out.append(PatternLetter(g, kind))

    return Pattern(out)
