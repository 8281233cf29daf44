# src/move_name_matcher/matching/__init__.py
"""
matching.

Does: Facade over the alignment scorer and the best-match selector.
Returns: score(), best_matches() and the stage helpers, plus the record types.
Used by: The CLI, the dataset layer and the presentation helpers.
"""

from __future__ import annotations

# ── Types ────────────────────────────────────────────────────────────────────
from .types import (
    DEFAULT_EXEMPTIONS,
    AlignmentResult,
    Mapping,
    MatchRecord,
)

# ── Scorer ───────────────────────────────────────────────────────────────────
from .alignment import score

# ── Selector ─────────────────────────────────────────────────────────────────
from .selection import (
    InvalidInputError,
    best_matches,
    match_creature,
    needs_fallback,
    position_filter,
    primary_scan,
    secondary_scan,
    validate_names,
)

__all__ = [
    # Types
    "AlignmentResult",
    "MatchRecord",
    "Mapping",
    "DEFAULT_EXEMPTIONS",
    # Scorer
    "score",
    # Selector
    "best_matches",
    "match_creature",
    "primary_scan",
    "position_filter",
    "needs_fallback",
    "secondary_scan",
    "validate_names",
    "InvalidInputError",
]

__docformat__ = "google"
