"""
Dictionary validator for bitwordle.

What this module does:
- Validate a word list (text, one per line, or a JSON array of strings).
- Enforce formatting rules (exactly 5 ASCII letters, any case).
- Detect duplicates (case-insensitive) and invalid entries; compute SHA-256 of the raw file.
- Optionally check that the target word is in the dictionary (otherwise the
  universe is bound to run empty).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from bitwordle.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("bitwordle/datasets/data/wordlist.json", target="mambo")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from bitwordle.engine.validation import validate_guess
from .io import load_wordlist


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class ValidationReport:
    """Validation result for one dictionary file."""
    path: str                   # file path (as given)
    exists: bool                # did the file exist on disk?
    count: int                  # number of VALID words
    sha256: str                 # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int           # unique valid words (case-folded)
    invalid_lines: int          # number of entries that would not encode
    target: Optional[str]       # target checked against the list, if any
    target_in_dictionary: Optional[bool]
    passed: bool
    issues: List[str]           # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _split_valid(entries: List[str]) -> Tuple[List[str], int]:
    """
    Returns:
      (valid_words lowercased, invalid_count)
    """
    valid: List[str] = []
    invalid = 0
    for w in entries:
        if validate_guess(w):
            valid.append(w.strip().lower())
        else:
            invalid += 1
    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, target: Optional[str] = None) -> Dict:
    """
    Validate a dictionary file.

    Parameters
    ----------
    path : str
        Path to the word list (.json array or newline-separated text).
    target : str, optional
        Target word to look up in the list.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with
        `passed` (strict: file parses, non-empty, no invalid entries,
        target present when given) and `issues`.
    """
    issues: List[str] = []
    p = Path(path)
    target_norm = target.strip().lower() if target else None

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        return asdict(ValidationReport(
            path=path, exists=False, count=0, sha256="", unique_count=0, invalid_lines=0,
            target=target_norm, target_in_dictionary=None if target is None else False,
            passed=False, issues=issues,
        ))

    readable = True
    try:
        entries = load_wordlist(p)
    except ValueError as e:
        # covers json.JSONDecodeError too
        issues.append(f"dictionary file unreadable: {e}")
        entries = []
        readable = False

    valid, invalid = _split_valid(entries)
    unique = set(valid)

    target_ok: Optional[bool] = None
    if target_norm is not None:
        target_ok = target_norm in unique
        if not target_ok:
            issues.append(f"target {target_norm!r} not in dictionary")

    if not valid:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid entr{'y' if invalid == 1 else 'ies'}")
    if len(valid) != len(unique):
        issues.append("dictionary contains duplicate words")

    passed = readable and bool(valid) and invalid == 0 and target_ok is not False

    rep = ValidationReport(
        path=str(p),
        exists=True,
        count=len(valid),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        target=target_norm,
        target_in_dictionary=target_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        dictionary=212 (uniq=212, sha=abc123...) | target=mambo in=True | OK
    """
    sha = (report.get("sha256") or "")[:12]
    status = "OK" if report["passed"] else "FAIL"
    out = f"dictionary={report['count']} (uniq={report['unique_count']}, sha={sha})"
    if report.get("target") is not None:
        out += f" | target={report['target']} in={report['target_in_dictionary']}"
    return f"{out} | {status}"
