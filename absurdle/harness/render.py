"""
Console presentation of patterns.
"""

from typing import List

from absurdle.engine.scoring import EXACT, PRESENT, ABSENT

GREEN = "🟩"
YELLOW = "🟨"
GRAY = "⬜"

_TILES = {EXACT: GREEN, PRESENT: YELLOW, ABSENT: GRAY}


def render_pattern(pattern: str) -> str:
    """Map 'G', 'Y', '-' marks to coloured tiles."""
    return "".join(_TILES[ch] for ch in pattern)


def render_summary(patterns: List[str]) -> str:
    """
    End-of-game report: the guess count over an unbounded budget, then
    one tile row per guess.

    Example:
        Absurdle 2/∞

        ⬜🟨⬜
        🟩🟩🟩
    """
    lines = [f"Absurdle {len(patterns)}/∞", ""]
    lines += [render_pattern(p) for p in patterns]
    return "\n".join(lines)
