# src/move_name_matcher/presentation/render.py
from __future__ import annotations

"""
render.py

Does: Turn MatchRecords into readable lines: the aligned run is emphasized,
      secondary matches get a trailing '*', mid-move primary matches show their offset.
Returns: highlight() for a single record, render_mapping() for a whole mapping.
Used by: The CLI.
"""

from move_name_matcher.matching.types import Mapping, MatchRecord

__all__ = ["highlight", "render_mapping"]

# ── ANSI ─────────────────────────────────────────────────────────────────────
GREEN = "\033[92m"
ORANGE = "\033[38;5;208m"
CYAN = "\033[96m"
GREY = "\033[90m"
RESET = "\033[0m"

EMPTY_MAPPING = "No data yet"
NO_MOVES = "(no matching moves)"


def _paint(text: str, code: str, color: bool) -> str:
    return f"{code}{text}{RESET}" if color and text else text


def highlight(record: MatchRecord, *, color: bool = False) -> str:
    """
    Does: Render `before[run]after`, where run = move[start:start+match_length].
    Without color the run is wrapped in brackets.
    """
    lo, hi = record.highlight_span
    move = record.move
    run = _paint(move[lo:hi], GREEN, color) if color else f"[{move[lo:hi]}]"

    tail = move[hi:]
    if record.secondary:
        tail += "*"
    elif record.start:
        tail += f" (pos {record.start})"
    if record.secondary:
        tail = _paint(tail, ORANGE, color)

    return f"{move[:lo]}{run}{tail}"


def render_mapping(mapping: Mapping, *, color: bool = False) -> str:
    """Does: One block per creature with a bullet per move."""
    if not mapping:
        return _paint(EMPTY_MAPPING, GREY, color)
    lines: list[str] = []
    for creature, records in mapping.items():
        lines.append(_paint(creature, CYAN, color))
        if not records:
            lines.append(f"  {_paint(NO_MOVES, GREY, color)}")
        for record in records:
            lines.append(f"  • {highlight(record, color=color)}")
    return "\n".join(lines)
