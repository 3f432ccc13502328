from __future__ import annotations

import json
from pathlib import Path
from typing import List

# Default dictionary shipped with the package (JSON array of strings)
DEFAULT_WORDLIST = Path(__file__).parent / "data" / "wordlist.json"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_wordlist(p: Path | str = DEFAULT_WORDLIST) -> List[str]:
    """
    Load dictionary entries, preserving file order.

    Formats:
      - *.json : a JSON array of strings
      - other  : one word per line; blank lines are skipped

    Entries are stripped but otherwise left alone; encoding (and rejecting
    malformed entries) is the Lexicon's job.
    """
    p = Path(p)
    if p.suffix.lower() == ".json":
        if not p.exists():
            raise FileNotFoundError(p)
        data = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(data, list) or not all(isinstance(w, str) for w in data):
            raise ValueError(f"{p}: expected a JSON array of strings")
        return [w.strip() for w in data]
    return [ln.strip() for ln in read_lines(p) if ln.strip()]
