"""Environment-driven settings for the command line and the HTTP API."""

from __future__ import annotations

import logging
import os
from typing import Optional, Tuple

from .geometry import NESW, Side

_SIDE_LETTERS = {s.letter: s for s in NESW}


def parse_side_order(code: str) -> Tuple[Side, ...]:
    """Converts a four-letter column order such as 'NSWE' into sides.

    Every side must appear exactly once.
    """
    letters = code.strip().upper()
    if len(letters) != 4 or set(letters) != set(_SIDE_LETTERS):
        raise ValueError(f"side order must name each of N, E, S, W once: {code!r}")
    return tuple(_SIDE_LETTERS[ch] for ch in letters)


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def tiles_path() -> Optional[str]:
    return os.getenv("ETERNITY_TILES") or None


def clues_path() -> Optional[str]:
    return os.getenv("ETERNITY_CLUES") or None


def clockwise() -> bool:
    """Whether clue rotations count clockwise rather than counter-clockwise."""
    return _env_flag("ETERNITY_CLOCKWISE")


def side_order() -> Tuple[Side, ...]:
    return parse_side_order(os.getenv("ETERNITY_SIDE_ORDER", "NESW"))


def log_level() -> int:
    name = os.getenv("ETERNITY_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def debug() -> bool:
    return _env_flag("FLASK_DEBUG", _env_flag("DEBUG"))
