"""
Dictionary validator for absurdle.

What this module does:
- Inspect one dictionary file for a requested word length N.
- Count tokens, tokens of length N, unique tokens of length N and
  non-alphabetic tokens; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from absurdle.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary(5, "data/dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List
import hashlib

from .io import load_dictionary


@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary at one word length."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    tokens: int          # whitespace-separated tokens in the file
    length_n: int        # tokens of exactly length N
    unique_length_n: int # distinct tokens of length N (the initial candidate set size)
    non_alpha: int       # tokens containing anything other than letters
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_dictionary(N: int, path: str) -> Dict:
    """
    Validate a dictionary file for word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport schema).
        `passed` requires N >= 1, an existing file and at least one
        word of length N. Non-alphabetic tokens are reported but do not fail.
    """
    issues: List[str] = []
    p = Path(path)

    if N < 1:
        issues.append(f"word length must be at least 1; got {N}")

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        return asdict(DictionaryReport(N, path, False, 0, 0, 0, 0, "", False, issues))

    words = load_dictionary(p)
    of_len = [w for w in words if len(w) == N]
    non_alpha = sum(1 for w in words if not w.isalpha())

    if N >= 1 and not of_len:
        issues.append(f"dictionary contains 0 words of length {N}")
    if non_alpha:
        issues.append(f"dictionary has {non_alpha} non-alphabetic token(s)")

    rep = DictionaryReport(
        N=N,
        path=str(p),
        exists=True,
        tokens=len(words),
        length_n=len(of_len),
        unique_length_n=len(set(of_len)),
        non_alpha=non_alpha,
        sha256=_sha256_file(p),
        passed=N >= 1 and bool(of_len),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | tokens=14855 | length 5=12972 (uniq=12972) | sha=abc123def456 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | tokens={report['tokens']} "
        f"| length {report['N']}={report['length_n']} (uniq={report['unique_length_n']}) "
        f"| sha={sha} | {status}"
    )
