# move_name_matcher/matching/types.py
from __future__ import annotations

"""
types.py.

Does: Define the immutable records passed between the scorer, the selector
and the presentation layer.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

__all__ = [
    "AlignmentResult",
    "MatchRecord",
    "Mapping",
    "DEFAULT_EXEMPTIONS",
]

__docformat__ = "google"

# Moves that never knock a target out; disfavored as the only suggestion.
DEFAULT_EXEMPTIONS: frozenset[str] = frozenset({"False Swipe", "Pain Split"})


@dataclass(frozen=True)
class AlignmentResult:
    """Best run for one (move, creature) pair. `start` is None iff nothing aligned."""

    match_length: int
    start: Optional[int]

    @property
    def matched(self) -> bool:
        return self.match_length > 0


@dataclass(frozen=True)
class MatchRecord:
    """
    One entry of a creature's result list.

    Unpacks as `(move, match_length, start, secondary)`.
    """

    move: str
    match_length: int
    start: int
    secondary: bool = False

    def __iter__(self) -> Iterator[object]:
        return iter((self.move, self.match_length, self.start, self.secondary))

    @property
    def highlight_span(self) -> Tuple[int, int]:
        return self.start, self.start + self.match_length


Mapping = Dict[str, List[MatchRecord]]
