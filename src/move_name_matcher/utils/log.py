"""
log.py.

Does: Lightweight debug logger controlled by MOVE_MATCHER_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used across matching/datasets/tests.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "enabled", "reload_topics"]

ENV_VAR = "MOVE_MATCHER_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable MOVE_MATCHER_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enabled(topic: str) -> bool:
    """Does: True if the topic is switched on ('all' switches every topic on)."""
    return "all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "matching",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via MOVE_MATCHER_DEBUG_TOPICS. Silent when no topic is set.
    """
    if not enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
