# apps/cli/run.py
"""
CLI entry point for batch replays.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Encodes the dictionary; a malformed entry is fatal.
  3) Replays one fixed guess script against every target (default: every
     dictionary word) with a live progress indicator and writes:
       - CSV:  per-target results + guess/pattern/remaining columns
       - JSON: manifest with config, dictionary hash, git commit, etc.

Usage:
    python -m apps.cli.run --guesses crane,sloth --sample 100
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Dict, List, Optional

from bitwordle.datasets import DEFAULT_WORDLIST, load_wordlist, pretty_summary, validate_wordlist
from bitwordle.engine import Lexicon, WordError, parse_guess
from bitwordle.harness import run_batch
from bitwordle.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


class _PlainProgress:
    """Throttled one-line progress/ETA on stderr, for terminals without a bar."""

    def __init__(self):
        self.start = time.time()
        self.last_print = 0.0

    def __call__(self, idx: int, total: int) -> None:
        now = time.time()
        if (now - self.last_print >= 1.0) or (idx == total):
            elapsed = now - self.start
            rate = (idx / elapsed) if elapsed > 0 else 0.0
            remaining = (total - idx) / rate if rate > 0 else 0.0
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(
                f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
            )
            sys.stderr.flush()
            self.last_print = now


def _summarize(results: List[Dict]) -> str:
    n = max(1, len(results))
    solved = sum(1 for r in results if r["solved"])
    inconsistent = sum(1 for r in results if r["inconsistent"])
    mean_left = sum(r["remaining"] for r in results) / n
    return (f"cases={len(results)} | solved={solved} ({100.0 * solved / n:.1f}%) "
            f"| inconsistent={inconsistent} | mean remaining={mean_left:.2f}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="bitwordle — replay a guess script over many targets")
    ap.add_argument("--guesses", required=True,
                    help="comma-separated guess script, e.g. crane,sloth")
    ap.add_argument("--dictionary", default=str(DEFAULT_WORDLIST),
                    help="word list (.json array or one word per line)")
    ap.add_argument("--targets",
                    help="target list (same formats); default: every dictionary word")
    ap.add_argument("--condense", action="store_true",
                    help="shrink the positional mask to the surviving words after each guess")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of targets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    # 1) Validate, then encode; configuration errors are fatal
    try:
        rep = validate_wordlist(args.dictionary)
        print(pretty_summary(rep))
        words = load_wordlist(args.dictionary)
        lexicon = Lexicon.from_strings(words)
        targets = load_wordlist(args.targets) if args.targets else [w.lower() for w in words]
    except (OSError, ValueError) as e:
        raise SystemExit(f"fatal: {e}") from e

    guesses = [g.strip() for g in args.guesses.split(",") if g.strip()]
    for g in guesses + targets:
        try:
            parse_guess(g)
        except WordError as e:
            raise SystemExit(f"fatal: {e}") from e

    # 2) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    # 3) Run batch (deterministic sample by seed) with live progress
    results = run_batch(
        targets, guesses, lexicon,
        condense=args.condense,
        sample=args.sample or None,
        seed=args.seed,
        progress=(mode == "bar"),
        on_case=_PlainProgress() if mode == "plain" else None,
    )

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    print(_summarize(results))

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=len(guesses))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_cases": len(results),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
