from __future__ import annotations
from pathlib import Path
from typing import List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_dictionary(p: Path | str) -> List[str]:
    """
    Load a dictionary file as whitespace-separated tokens, lowercased.
    Several words per line are fine; blank lines are ignored.
    """
    return [tok.lower() for ln in read_lines(p) for tok in ln.split()]
