"""
Candidate universe: every constraint learned so far.

State (immutable, replaced whole after each guess):
  - mask      : letters still allowed per position
  - required  : letters confirmed present somewhere (Y or G)
  - forbidden : letters confirmed absent everywhere (B)

A word is in the universe iff the mask admits it, its letters include all
of `required`, and none of `forbidden`. Membership is recomputed after
every guess by rescanning the whole lexicon; dictionaries are small and
guesses arrive at human pace, so no incremental index is maintained.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .codec import Mask, Word
from .constraints import apply_pattern, fold_letters
from .lexicon import Lexicon
from .scoring import Pattern, compute_pattern


@dataclass(frozen=True)
class Universe:
    mask: Mask = field(default_factory=Mask.full)
    required: int = 0
    forbidden: int = 0

    def contains(self, word: Word) -> bool:
        letters = word.charset()
        return (
                self.mask.admits(word)
                and letters & self.required == self.required
                and letters & self.forbidden == 0
        )

    def narrow(self, pattern: Pattern) -> "Universe":
        """Fold one pattern into the letter sets and the positional mask."""
        required, forbidden = fold_letters(self.required, self.forbidden, pattern)
        return Universe(apply_pattern(self.mask, pattern), required, forbidden)

    def members(self, lexicon: Lexicon) -> List[Word]:
        """All lexicon words in this universe, in lexicon order."""
        return lexicon.pick(lexicon.select(self.mask, self.required, self.forbidden))


def rescan_universe(
        universe: Universe,
        pattern: Pattern,
        lexicon: Lexicon,
        *,
        condense: bool = False,
) -> Tuple[Universe, int, List[Word]]:
    """
    Narrow `universe` by an already-computed pattern and rescan `lexicon`.

    Args:
      condense : also shrink the mask to the OR of the surviving words.
                 Membership and counts are the same either way; the mask
                 is just tighter (and may become all-zero if nothing survives).

    Returns:
      (new universe, number of members, member words)
    """
    universe = universe.narrow(pattern)
    members = universe.members(lexicon)

    if condense:
        squeezed = Mask.empty()
        for w in members:
            squeezed = squeezed.union(w)
        universe = Universe(squeezed, universe.required, universe.forbidden)

    return universe, len(members), members


def condense_universe(
        guess: Word,
        target: Word,
        universe: Universe,
        lexicon: Lexicon,
        *,
        condense: bool = False,
) -> Tuple[Universe, int, List[Word]]:
    """Score `guess` against `target`, then rescan_universe()."""
    return rescan_universe(universe, compute_pattern(target, guess), lexicon, condense=condense)
