"""
I/O utilities for batch runs.

Responsibilities:
- write_csv:     flatten per-target results into a tidy CSV (one row per target).
- write_manifest:dump a JSON manifest with config, dictionary hash, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    Serialize a batch of case results to CSV.

    Schema (columns):
      answer, solved, inconsistent, guesses, remaining, time_ms,
      guess_1, patt_1, left_1, ..., guess_max_turns, patt_max_turns, left_max_turns

    Args:
      results  : list of dicts returned by harness.run_case.
      path     : output CSV path.
      max_turns: number of guess columns (the length of the guess script).

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["answer", "solved", "inconsistent", "guesses", "remaining", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}", f"left_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "answer": r["answer"],
                "solved": r["solved"],
                "inconsistent": r["inconsistent"],
                "guesses": r["guesses"],
                "remaining": r["remaining"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, patt, left = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = patt
                    row[f"left_{i}"] = left
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""
                    row[f"left_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (dictionary, targets, guesses, sample, outdir)
      - dictionary: output of datasets.validate_wordlist(...)
      - num_cases: number of targets in this batch
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
