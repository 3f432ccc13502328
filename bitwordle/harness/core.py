"""
Game simulation primitives.

- GameSimulator: one target word, one candidate universe; process() takes a
  raw guess line and returns the feedback plus the narrowed snapshot.
- run_case:  replay a fixed guess script against one target.
- run_batch: replay the same script against many targets.

These are UI-agnostic so they can be reused by the interactive CLI, the
batch CLI, or a notebook without changes.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from tqdm import tqdm

from bitwordle.engine import (
    Lexicon, Pattern, Universe, Word, compute_pattern, decode, encode, rescan_universe,
    parse_guess,
)


@dataclass(frozen=True)
class Snapshot:
    """Universe after a guess, with its membership already resolved."""
    universe: Universe
    count: int
    words: Tuple[str, ...]

    @property
    def solved(self) -> bool:
        return self.count == 1

    @property
    def inconsistent(self) -> bool:
        # Feedback contradicts every dictionary word (e.g. target not in the dictionary)
        return self.count == 0


@dataclass(frozen=True)
class Step:
    guess: str
    pattern: Pattern
    snapshot: Snapshot


class GameSimulator:
    """
    Guess / feedback / narrow loop for a single target.

    Args:
        target:   the hidden word, as a string (encoded here) or a Word.
                  A malformed string raises WordError; callers treat that as fatal.
        lexicon:  the dictionary, loaded once by the caller and only read here
        condense: shrink the positional mask to the OR of survivors after each guess
    """

    def __init__(self, target: str | Word, lexicon: Lexicon, *, condense: bool = False):
        self.target: Word = target if isinstance(target, Word) else encode(target.strip())
        self.lexicon = lexicon
        self.condense = condense
        self.history: List[Step] = []
        self._snapshot = Snapshot(Universe(), len(lexicon), tuple(lexicon.strings()))

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def universe(self) -> Universe:
        return self._snapshot.universe

    @property
    def finished(self) -> bool:
        """True once fewer than two candidates remain."""
        return self._snapshot.count < 2

    def remaining(self) -> List[str]:
        return list(self._snapshot.words)

    def process(self, line: str) -> Step:
        """
        Score one guess line and narrow the universe.

        Raises WordLengthError / WordCharError for a malformed line; the
        universe and history are left untouched in that case.
        """
        guess = parse_guess(line)
        pattern = compute_pattern(self.target, guess)
        universe, count, members = rescan_universe(
            self._snapshot.universe, pattern, self.lexicon, condense=self.condense
        )
        self._snapshot = Snapshot(universe, count, tuple(self.lexicon.strings(members)))
        step = Step(decode(guess), pattern, self._snapshot)
        self.history.append(step)
        return step


def run_case(
        target: str,
        guesses: Sequence[str],
        lexicon: Lexicon,
        *,
        condense: bool = False,
) -> Dict:
    """
    Replay `guesses` against `target` until one candidate (or none) remains
    or the script runs out.

    Returns:
        dict with keys:
            answer (str), solved (bool), inconsistent (bool), guesses (int),
            remaining (int), time_ms (float),
            history (list[(guess, compact pattern, remaining count)])
    """
    sim = GameSimulator(target, lexicon, condense=condense)

    t0 = time.perf_counter()
    for g in guesses:
        sim.process(g)
        if sim.finished:
            break
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": decode(sim.target),
        "solved": sim.snapshot.solved,
        "inconsistent": sim.snapshot.inconsistent,
        "guesses": len(sim.history),
        "remaining": sim.snapshot.count,
        "time_ms": dt,
        "history": [(s.guess, s.pattern.compact(), s.snapshot.count) for s in sim.history],
    }


def run_batch(
        targets: Iterable[str],
        guesses: Sequence[str],
        lexicon: Lexicon,
        *,
        condense: bool = False,
        sample: int | None = None,
        seed: int | None = None,
        progress: bool = False,
        on_case: Callable[[int, int], None] | None = None,
) -> List[Dict]:
    """
    Run the same guess script against many targets.

    Args:
        sample:   if smaller than the pool, run K targets drawn without
                  replacement by a shuffle seeded with `seed`
        progress: wrap the run in a tqdm bar
        on_case:  called as on_case(done, total) after every case
    """
    pool = list(targets)
    if sample is not None and sample < len(pool):
        random.Random(seed).shuffle(pool)
        pool = pool[:sample]

    total = len(pool)
    iterator = tqdm(pool, ncols=80, desc="Running", unit="game") if progress else pool

    out: List[Dict] = []
    for idx, t in enumerate(iterator, 1):
        out.append(run_case(t, guesses, lexicon, condense=condense))
        if on_case is not None:
            on_case(idx, total)
    return out
