"""
Fold one feedback pattern into the candidate constraints.

Rules, per pattern entry (bit, kind) at position i:
  - ABSENT  : clear `bit` from every position of the mask
  - PRESENT : clear `bit` from position i only
  - CORRECT : position i becomes exactly `bit`

ABSENT eliminates globally even if the same letter is marked PRESENT or
CORRECT elsewhere in the same pattern. compute_pattern never produces
that combination, but a hand-built pattern can; it is applied as-is.
"""

from __future__ import annotations

from typing import Tuple

from .codec import ALL_LETTERS, Mask
from .scoring import Pattern, PatternKind


def apply_pattern(mask: Mask, pattern: Pattern) -> Mask:
    """
    Return `mask` narrowed by `pattern`. The input mask is not modified.

    The result never has a bit set that `mask` did not have, except that
    CORRECT pins position i to the guessed letter outright.
    """
    slots = list(mask)

    for i, p in enumerate(pattern):
        if p.kind is PatternKind.ABSENT:
            keep = ALL_LETTERS & ~p.bit
            slots = [s & keep for s in slots]
        elif p.kind is PatternKind.PRESENT:
            slots[i] &= ALL_LETTERS & ~p.bit
        else:
            slots[i] = p.bit

    return Mask(slots)


def fold_letters(required: int, forbidden: int, pattern: Pattern) -> Tuple[int, int]:
    """
    Accumulate global letter constraints from a pattern.

    Returns:
      (required, forbidden) with ABSENT letters OR-ed into `forbidden`
      and PRESENT/CORRECT letters OR-ed into `required`.
    """
    for p in pattern:
        if p.kind is PatternKind.ABSENT:
            forbidden |= p.bit
        else:
            required |= p.bit
    return required, forbidden
