# move_name_matcher/matching/selection.py
from __future__ import annotations

"""
selection.py

Does: Reduce the scorer's output to each creature's best move(s):
      top-length tier → start-0 preference → exemption fallback (secondary scan).
Returns: best_matches(creatures, moves) -> {creature: [MatchRecord, ...]}, plus the
         individual stages so each can be exercised on its own.
Used by: The CLI, dataset-driven callers, and tests.
"""

import logging
from typing import AbstractSet, Iterable, Sequence, Tuple

from move_name_matcher.utils.log import debug

from .alignment import score
from .types import DEFAULT_EXEMPTIONS, Mapping, MatchRecord

__all__ = [
    "InvalidInputError",
    "validate_names",
    "primary_scan",
    "position_filter",
    "needs_fallback",
    "secondary_scan",
    "match_creature",
    "best_matches",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

Candidates = Tuple[MatchRecord, ...]


class InvalidInputError(ValueError):
    """Raise when a creature or move list holds a missing, blank or untrimmed entry."""


def validate_names(names: Iterable[object], kind: str = "name") -> list[str]:
    """
    Does: Reject None, non-strings, empty strings and entries with surrounding
          whitespace before they reach the engine.
    Returns: The names as a list, order preserved.
    """
    out: list[str] = []
    for i, name in enumerate(names):
        if not isinstance(name, str):
            raise InvalidInputError(f"{kind} #{i} is not a string: {name!r}")
        if not name or name != name.strip():
            raise InvalidInputError(f"{kind} #{i} is empty or untrimmed: {name!r}")
        out.append(name)
    return out


# ─────────────────────────────────────────────────────────────────────────────
# Stages
# ─────────────────────────────────────────────────────────────────────────────

def primary_scan(creature: str, moves: Sequence[str]) -> Candidates:
    """
    Does: Score every move, drop zero-length results, keep only the longest tier.
    Returns: Candidates in move order (empty when nothing aligns).
    """
    best_len = 0
    best: Candidates = ()
    for move in moves:
        res = score(move, creature)
        if not res.matched:
            continue
        record = MatchRecord(move, res.match_length, res.start)
        if res.match_length > best_len:
            best_len = res.match_length
            best = (record,)
        elif res.match_length == best_len:
            best = best + (record,)
    return best


def position_filter(candidates: Candidates) -> Candidates:
    """Does: If any candidate starts at offset 0, keep only those; else keep all."""
    at_start = tuple(c for c in candidates if c.start == 0)
    return at_start or tuple(candidates)


def needs_fallback(candidates: Candidates, exemptions: AbstractSet[str]) -> bool:
    """Does: True iff there are candidates and every one of them is exempt."""
    return bool(candidates) and all(c.move in exemptions for c in candidates)


def secondary_scan(
    creature: str,
    moves: Sequence[str],
    selected: Candidates,
    exemptions: AbstractSet[str],
) -> Candidates:
    """
    Does: Re-score moves that are neither exempt nor already selected, then keep the
          longest tier and, within it, the earliest start. Ties all survive.
    Returns: Candidates flagged secondary=True (possibly empty).
    """
    taken = {c.move for c in selected}
    pool: list[MatchRecord] = []
    for move in moves:
        if move in exemptions or move in taken:
            continue
        res = score(move, creature)
        if res.matched:
            pool.append(MatchRecord(move, res.match_length, res.start, True))
    if not pool:
        return ()
    max_len = max(c.match_length for c in pool)
    earliest = min(c.start for c in pool if c.match_length == max_len)
    return tuple(c for c in pool if c.match_length == max_len and c.start == earliest)


# ─────────────────────────────────────────────────────────────────────────────
# Public entry points
# ─────────────────────────────────────────────────────────────────────────────

def match_creature(
    creature: str,
    moves: Sequence[str],
    exemptions: AbstractSet[str] = DEFAULT_EXEMPTIONS,
) -> list[MatchRecord]:
    """
    Does: Run the full cascade for one creature.
    Returns: Primary records first, then any secondary records; [] if nothing aligns.
    """
    top = primary_scan(creature, moves)
    if not top:
        debug(f"{creature!r}: no alignment", topic="selection")
        return []

    primary = position_filter(top)
    debug(
        f"{creature!r}: top tier len={top[0].match_length} "
        f"({len(top)} moves) → {len(primary)} after position filter",
        topic="selection",
    )

    if not needs_fallback(primary, exemptions):
        return list(primary)

    extra = secondary_scan(creature, moves, primary, exemptions)
    debug(
        f"{creature!r}: all exempt {[c.move for c in primary]}; "
        f"secondary={[c.move for c in extra]}",
        topic="selection",
    )
    return list(primary + extra)


def best_matches(
    creatures: Iterable[str],
    moves: Sequence[str],
    exemptions: AbstractSet[str] = DEFAULT_EXEMPTIONS,
) -> Mapping:
    """
    Does: Compute a fresh mapping for every creature, in creature order.
    Returns: {creature: [MatchRecord, ...]}; creatures with no match map to [].
    """
    moves = tuple(moves)
    mapping: Mapping = {}
    for creature in creatures:
        mapping[creature] = match_creature(creature, moves, exemptions)
    log.debug(
        "best_matches: %d creatures x %d moves, %d without a match",
        len(mapping),
        len(moves),
        sum(1 for v in mapping.values() if not v),
    )
    return mapping
