"""
Immutable encoded dictionary.

A Lexicon is built once at startup from already-parsed strings and then
only read. Besides the tuple of Words it keeps a numpy (n, 5) uint32 grid
and the per-word letter unions so a full rescan is a handful of array ops
instead of a Python loop over thousands of words.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence

import numpy as np

from .codec import WORD_LENGTH, Mask, Word, WordError, decode, encode


class DictionaryError(ValueError):
    """A dictionary entry could not be encoded. Fatal at startup."""

    def __init__(self, index: int, entry: str, cause: WordError):
        super().__init__(f"bad dictionary entry #{index} {entry!r}: {cause}")
        self.index = index
        self.entry = entry


class Lexicon:
    def __init__(self, words: Iterable[Word]):
        self._words = tuple(words)
        self._grid = np.array(self._words, dtype=np.uint32).reshape(-1, WORD_LENGTH)
        self._charsets = np.bitwise_or.reduce(self._grid, axis=1)
        self._grid.setflags(write=False)
        self._charsets.setflags(write=False)

    @classmethod
    def from_strings(cls, strings: Iterable[str]) -> "Lexicon":
        """Encode every entry; the first malformed one raises DictionaryError."""
        words: List[Word] = []
        for i, s in enumerate(strings):
            try:
                words.append(encode(s))
            except WordError as e:
                raise DictionaryError(i, s, e) from e
        return cls(words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words)

    def __contains__(self, word: Word) -> bool:
        return word in self._words

    def select(self, mask: Mask, required: int, forbidden: int) -> np.ndarray:
        """
        Boolean membership vector over the lexicon:
          word AND mask == word at every position,
          word's letters include `required`,
          word's letters avoid `forbidden`.
        """
        m = np.array(mask, dtype=np.uint32)
        fits = np.all((self._grid & m) == self._grid, axis=1)
        has_required = (self._charsets & np.uint32(required)) == np.uint32(required)
        avoids_forbidden = (self._charsets & np.uint32(forbidden)) == 0
        return fits & has_required & avoids_forbidden

    def pick(self, selected: np.ndarray) -> List[Word]:
        return [self._words[i] for i in np.flatnonzero(selected)]

    def strings(self, words: Sequence[Word] | None = None) -> List[str]:
        return [decode(w) for w in (self._words if words is None else words)]
