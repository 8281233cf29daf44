# src/move_name_matcher/presentation/search.py
from __future__ import annotations

"""
search.py

Does: Narrow a computed mapping to a user-entered search term
      (case-insensitive substring on creature and move names).
Used by: The CLI's --search option.
"""

from move_name_matcher.matching.types import Mapping

__all__ = ["filter_mapping"]


def filter_mapping(mapping: Mapping, term: str) -> Mapping:
    """
    Does: Keep creatures whose name or any move contains `term`. A creature kept
          for its own name keeps its full list; otherwise only the matching moves stay.
    Returns: A new mapping (the input is returned as-is when `term` is empty).
    """
    if not term:
        return mapping
    needle = term.lower()
    out: Mapping = {}
    for creature, records in mapping.items():
        name_hit = needle in creature.lower()
        if name_hit or any(needle in r.move.lower() for r in records):
            out[creature] = [r for r in records if name_hit or needle in r.move.lower()]
    return out
