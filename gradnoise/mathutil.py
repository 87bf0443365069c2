# mathutil.py - small scalar helpers used around the noise engine
from __future__ import annotations
import math
from typing import List, MutableSequence, Optional, Sequence, Tuple, TypeVar

import numpy as np

T = TypeVar("T")
RGB = Tuple[int, int, int]


def map_range(value: float, start1: float, stop1: float, start2: float, stop2: float) -> float:
    """Re-map ``value`` from ``[start1, stop1]`` to ``[start2, stop2]``.

    Values outside the source range extrapolate; nothing is clamped.
    """
    ratio = (value - start1) / (stop1 - start1)
    return start2 + (stop2 - start2) * ratio


def norm(value: float, start: float, stop: float) -> float:
    """Normalize ``value`` from ``[start, stop]`` into ``[0, 1]``."""
    return (value - start) / (stop - start)


def lerp(start: float, stop: float, amt: float) -> float:
    return start + (stop - start) * amt


def constrain(n: float, low: float, high: float) -> float:
    return max(low, min(high, n))


def dist(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)


def shuffle(seq: MutableSequence[T], rng: Optional[np.random.Generator] = None) -> MutableSequence[T]:
    """Shuffle ``seq`` in place; returns ``seq``."""
    if rng is None:
        rng = np.random.default_rng()
    rng.shuffle(seq)
    return seq


def lerp_color(c1: Sequence[float], c2: Sequence[float], amt: float) -> RGB:
    """Blend two RGB colours; channels are rounded and kept in 0..255."""
    out: List[int] = []
    for a, b in zip(c1, c2):
        out.append(int(round(constrain(lerp(a, b, amt), 0, 255))))
    return out[0], out[1], out[2]
