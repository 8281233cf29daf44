"""
presentation.

Search filtering and text rendering for computed mappings.
"""

from __future__ import annotations

from .render import highlight, render_mapping
from .search import filter_mapping

__all__ = ["filter_mapping", "highlight", "render_mapping"]
