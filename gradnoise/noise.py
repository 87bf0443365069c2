# noise.py - seedable 2D gradient noise and fBm
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .tables import GRAD3, PERMUTATION, TABLE_MASK, TABLE_SIZE, Gradient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoiseSeed:
    """Lookup tables for one seed.

    ``perm`` and ``grad`` both hold 512 entries where entry ``i + 256`` repeats
    entry ``i``, so corner lookups near the lattice edge never need a modulo.
    ``value`` is the normalized integer the tables were built from.
    """

    value: int
    perm: bytes
    grad: Tuple[Gradient, ...]

    def sample(self, x: float, y: float) -> float:
        return noise(self, x, y)

    def fractal_sample(self, x: float, y: float, octaves: int, falloff: float) -> float:
        return fbm(self, x, y, octaves, falloff)


def normalize_seed(s: float) -> int:
    """Reduce a numeric seed to the integer whose two low bytes key the tables.

    Fractions in ``(0, 1)`` are stretched over a 16-bit range first, so a single
    uniform random draw makes a usable seed.  Values below 256 are copied into
    the high byte so both bytes carry entropy.
    """
    if not isinstance(s, int) and not math.isfinite(s):
        logger.warning("noise_seed: non-finite seed %r treated as 0", s)
        s = 0
    if 0 < s < 1:
        s *= 65536
    n = math.floor(s)
    if n < 256:
        n |= n << 8
    return n


def noise_seed(s: float) -> NoiseSeed:
    """Build the permutation and gradient tables for seed ``s``."""
    n = normalize_seed(s)
    lo = n & 255
    hi = (n >> 8) & 255

    perm = bytearray(2 * TABLE_SIZE)
    grad = [GRAD3[0]] * (2 * TABLE_SIZE)
    for i in range(TABLE_SIZE):
        v = PERMUTATION[i] ^ (lo if i & 1 else hi)
        perm[i] = perm[i + TABLE_SIZE] = v
        grad[i] = grad[i + TABLE_SIZE] = GRAD3[v % 8]

    logger.debug("noise_seed: %r -> %d (lo=%d hi=%d)", s, n, lo, hi)
    return NoiseSeed(value=n, perm=bytes(perm), grad=tuple(grad))


def random_seed(rng: Optional[np.random.Generator] = None) -> NoiseSeed:
    """Seed from a single uniform draw in ``[0, 1)``."""
    if rng is None:
        rng = np.random.default_rng()
    return noise_seed(float(rng.random()))


def fade(t: float) -> float:
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def dot(g: Gradient, x: float, y: float) -> float:
    return g.x * x + g.y * y


def noise(seed: NoiseSeed, x: float, y: float) -> float:
    """Gradient noise at ``(x, y)``.

    The result is not clamped.  It lies roughly in ``[-1, 1]`` and is exactly
    zero on integer coordinates.  The lattice repeats every 256 units.
    """
    X = math.floor(x)
    Y = math.floor(y)

    x = x - X
    y = y - Y

    X &= TABLE_MASK
    Y &= TABLE_MASK

    perm = seed.perm
    grad = seed.grad
    n00 = dot(grad[X + perm[Y]], x, y)
    n01 = dot(grad[X + perm[Y + 1]], x, y - 1)
    n10 = dot(grad[X + 1 + perm[Y]], x - 1, y)
    n11 = dot(grad[X + 1 + perm[Y + 1]], x - 1, y - 1)

    u = fade(x)
    return lerp(lerp(n00, n10, u), lerp(n01, n11, u), fade(y))


def fbm(seed: NoiseSeed, x: float, y: float, octaves: int, falloff: float) -> float:
    """Fractal Brownian motion: ``octaves`` layers of :func:`noise`.

    Each octave doubles the frequency and scales the amplitude by ``falloff``.
    The sum is divided by the accumulated amplitude so the output keeps the
    range of a single octave.  ``octaves`` must be positive; otherwise the
    result is ``nan``.
    """
    if octaves <= 0:
        logger.warning("fbm: octaves=%r is not positive, result is nan", octaves)
        return math.nan

    total = 0.0
    freq = 1.0
    amp = 1.0
    amp_sum = 0.0
    for _ in range(octaves):
        total += noise(seed, x * freq, y * freq) * amp
        amp_sum += amp
        amp *= falloff
        freq *= 2.0
    return total / amp_sum
