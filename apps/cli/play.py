# apps/cli/play.py
"""
Interactive entry point: guess against a fixed target and watch the
candidate universe shrink.

This script:
  1) Validates the dictionary (prints counts + SHA, checks the target is in it).
  2) Encodes the dictionary and the target; either failing is fatal.
  3) Reads one guess per line from stdin. For each guess prints the pattern,
     the required/forbidden letter sets, the positional mask and the number
     of remaining candidates. A line `p` lists the remaining candidates.
  4) Stops once one candidate (or none) remains, or at end of input.

Usage:
    python -m apps.cli.play --target mambo
    printf 'bombs\\nmambo\\n' | python -m apps.cli.play --target mambo --show-words
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

from bitwordle.datasets import DEFAULT_WORDLIST, load_wordlist, pretty_summary, validate_wordlist
from bitwordle.engine import Lexicon, WordError
from bitwordle.engine.codec import format_letter_set, letters_of
from bitwordle.harness import GameSimulator

LIST_COMMAND = "p"


def _print_words(words: List[str], out: TextIO) -> None:
    for w in words:
        print(w, file=out)


def play(sim: GameSimulator, lines: TextIO, out: TextIO, *, show_words: bool = False) -> int:
    """
    Drive the read loop until the universe is down to one word (or none)
    or `lines` is exhausted. Returns the final candidate count.
    """
    while True:
        print("Guess: ", end="", file=out, flush=True)
        line = lines.readline()
        if not line:
            print(file=out)
            break
        line = line.strip()
        if not line:
            continue
        if line == LIST_COMMAND:
            _print_words(sim.remaining(), out)
            continue

        try:
            step = sim.process(line)
        except WordError as e:
            print(f"error: {e}", file=sys.stderr)
            continue

        u = step.snapshot.universe
        print(
            f"Pattern {step.pattern} solution charset {format_letter_set(u.required)} "
            f"eliminated charset {format_letter_set(u.forbidden)}",
            file=out,
        )
        print(f"letters required: {letters_of(u.required) or '-'} "
              f"forbidden: {letters_of(u.forbidden) or '-'}", file=out)
        print("universe", u.mask, file=out)
        print(step.snapshot.count, "possibilities", file=out)
        if show_words:
            _print_words(list(step.snapshot.words), out)

        if sim.finished:
            if step.snapshot.inconsistent:
                print("no candidates remain: feedback contradicts every dictionary word", file=out)
            else:
                print(step.snapshot.words[0], file=out)
            break

    return sim.snapshot.count


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="bitwordle — interactive candidate narrowing")
    ap.add_argument("--target", required=True, help="target word (5 letters)")
    ap.add_argument("--dictionary", default=str(DEFAULT_WORDLIST),
                    help="word list (.json array or one word per line)")
    ap.add_argument("--condense", action="store_true",
                    help="shrink the positional mask to the surviving words after each guess")
    ap.add_argument("--show-words", action="store_true",
                    help="print the remaining candidates after every guess")
    args = ap.parse_args(argv)

    # 1) Validate, then encode dictionary and target; configuration errors are fatal
    try:
        rep = validate_wordlist(args.dictionary, target=args.target)
        print(pretty_summary(rep))
        for issue in rep["issues"]:
            print(f"warning: {issue}", file=sys.stderr)
        lexicon = Lexicon.from_strings(load_wordlist(args.dictionary))
    except (OSError, ValueError) as e:
        # DictionaryError is a ValueError; so is a malformed JSON file
        raise SystemExit(f"fatal: {e}") from e
    try:
        sim = GameSimulator(args.target, lexicon, condense=args.condense)
    except WordError as e:
        raise SystemExit(f"fatal: bad target: {e}") from e

    # 2) Read loop
    play(sim, sys.stdin, sys.stdout, show_words=args.show_words)
    return 0


if __name__ == "__main__":
    sys.exit(main())
