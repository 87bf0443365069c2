from __future__ import annotations
"""Helpers for coercing loosely typed values into noise parameters.

Settings files and command lines hand us strings, ``None`` or the odd
boolean.  These helpers turn such values into the numbers the noise engine
needs and fall back to a caller supplied default when a value cannot be
interpreted.  A warning is logged for every fallback so a malformed config is
visible without aborting a render.
"""

from typing import Any, Sequence, Tuple
import math
import logging

logger = logging.getLogger(__name__)


def to_int(value: Any, default: int = 0) -> int:
    """Coerce ``value`` to ``int``.

    Booleans are rejected even though they are ints.  Finite floats are
    truncated and integer-looking strings are parsed.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    if isinstance(value, str):
        s = value.strip()
        if s and (s.isdigit() or (s[0] in {"+", "-"} and s[1:].isdigit())):
            try:
                return int(s)
            except ValueError:
                pass
    if value is None:
        return default
    logger.warning("to_int: coercing %r to default %r", value, default)
    return default


def to_float(value: Any, default: float = 0.0) -> float:
    """Coerce ``value`` to a finite ``float``."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        f = float(value)
        if math.isfinite(f):
            return f
    elif isinstance(value, str):
        try:
            f = float(value.strip())
        except ValueError:
            f = math.nan
        if math.isfinite(f):
            return f
    elif value is None:
        return default
    logger.warning("to_float: coercing %r to default %r", value, default)
    return default


def to_seed(value: Any, default: float = 0.0) -> float:
    """Coerce a seed.

    Integer text stays an exact ``int`` so large seeds keep every bit; anything
    else goes through :func:`to_float`, which keeps fractional seeds such as
    ``"0.5"`` intact.
    """
    if isinstance(value, str):
        s = value.strip()
        if s and (s.isdigit() or (s[0] in {"+", "-"} and s[1:].isdigit())):
            try:
                return int(s)
            except ValueError:
                # isdigit accepts superscripts that int() rejects
                pass
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return to_float(value, default)


def to_color(value: Any, default: Tuple[int, int, int]) -> Tuple[int, int, int]:
    """Coerce a three-item sequence to an RGB tuple with channels in 0..255."""
    if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 3:
        channels = [to_int(v, -1) for v in value]
        if all(0 <= c <= 255 for c in channels):
            return channels[0], channels[1], channels[2]
    if value is None:
        return default
    logger.warning("to_color: coercing %r to default %r", value, default)
    return default
