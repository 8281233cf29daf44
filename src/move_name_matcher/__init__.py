"""
move_name_matcher
=================

Does: Root package for the creature → move name matcher.
Returns: Exposes the engine (`matching`), the bundled catalogs (`datasets`),
         the text output helpers (`presentation`) and `utils`.
Used by: All higher-level imports starting from `move_name_matcher.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
