# move_name_matcher/matching/alignment.py
from __future__ import annotations

"""
alignment.py

Does: Score how well a creature's name, read from its first character, lines up
      with some window of a move name (case-insensitive, exact characters only).
Returns: AlignmentResult(match_length, start) with the earliest start on ties.
Used by: matching.selection for the primary and secondary scans.
"""

from .types import AlignmentResult

__all__ = ["score", "run_length"]

__docformat__ = "google"

NO_MATCH = AlignmentResult(0, None)


def run_length(move: str, creature: str, start: int) -> int:
    """
    Does: Count leading characters of `creature` equal to `move[start:]`.
    Both arguments are expected lowercased already.
    """
    n = min(len(move) - start, len(creature))
    i = 0
    while i < n and move[start + i] == creature[i]:
        i += 1
    return i


def score(move: str, creature: str) -> AlignmentResult:
    """
    Does: Try every start offset in the move and keep the longest run against the
          creature's prefix; a tie keeps the smaller offset.
    Returns: AlignmentResult(0, None) when no offset yields even one character.
    """
    move_l = move.lower()
    creature_l = creature.lower()
    if not move_l or not creature_l:
        return NO_MATCH

    best_len, best_pos = 0, None
    for start in range(len(move_l)):
        length = run_length(move_l, creature_l, start)
        # strict '>' keeps the earliest offset among equal runs
        if length > best_len:
            best_len, best_pos = length, start
            if best_len == len(creature_l):
                break

    if best_len == 0:
        return NO_MATCH
    return AlignmentResult(best_len, best_pos)
