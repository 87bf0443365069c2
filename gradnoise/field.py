# field.py - numpy sampling of whole coordinate grids
from __future__ import annotations

import logging
from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .noise import NoiseSeed
from .tables import TABLE_SIZE

logger = logging.getLogger(__name__)


def _tables(seed: NoiseSeed) -> Tuple[NDArray[np.intp], NDArray[np.float64], NDArray[np.float64]]:
    perm = np.frombuffer(seed.perm, dtype=np.uint8).astype(np.intp)
    gx = np.array([g.x for g in seed.grad], dtype=np.float64)
    gy = np.array([g.y for g in seed.grad], dtype=np.float64)
    return perm, gx, gy


def _fade(t):
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a, b, t):
    return a + t * (b - a)


def _noise(perm, gx, gy, x: NDArray[np.float64], y: NDArray[np.float64]) -> NDArray[np.float64]:
    X = np.floor(x)
    Y = np.floor(y)
    xf = x - X
    yf = y - Y
    # mod on floats wraps huge magnitudes without overflowing an int cast
    Xi = np.mod(X, TABLE_SIZE).astype(np.intp)
    Yi = np.mod(Y, TABLE_SIZE).astype(np.intp)

    h00 = Xi + perm[Yi]
    h01 = Xi + perm[Yi + 1]
    h10 = Xi + 1 + perm[Yi]
    h11 = Xi + 1 + perm[Yi + 1]

    n00 = gx[h00] * xf + gy[h00] * yf
    n01 = gx[h01] * xf + gy[h01] * (yf - 1)
    n10 = gx[h10] * (xf - 1) + gy[h10] * yf
    n11 = gx[h11] * (xf - 1) + gy[h11] * (yf - 1)

    u = _fade(xf)
    return _lerp(_lerp(n00, n10, u), _lerp(n01, n11, u), _fade(yf))


def noise_array(seed: NoiseSeed, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
    """Array version of :func:`gradnoise.noise.noise`; ``x`` and ``y`` broadcast."""
    x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64),
                               np.asarray(y, dtype=np.float64))
    perm, gx, gy = _tables(seed)
    return _noise(perm, gx, gy, x, y)


def fbm_array(seed: NoiseSeed, x: ArrayLike, y: ArrayLike,
              octaves: int, falloff: float) -> NDArray[np.float64]:
    """Array version of :func:`gradnoise.noise.fbm`."""
    x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64),
                               np.asarray(y, dtype=np.float64))
    if octaves <= 0:
        logger.warning("fbm_array: octaves=%r is not positive, result is nan", octaves)
        return np.full(x.shape, np.nan)

    perm, gx, gy = _tables(seed)
    total = np.zeros(x.shape, dtype=np.float64)
    freq = 1.0
    amp = 1.0
    amp_sum = 0.0
    for _ in range(octaves):
        total += _noise(perm, gx, gy, x * freq, y * freq) * amp
        amp_sum += amp
        amp *= falloff
        freq *= 2.0
    return total / amp_sum


def noise_grid(seed: NoiseSeed, width: int, height: int, scale: float,
               octaves: int = 1, falloff: float = 0.5,
               offset: Tuple[float, float] = (0.0, 0.0)) -> np.ndarray:
    """Sample a ``(height, width)`` field.

    Cell ``[r, c]`` holds the value at ``(offset[0] + c*scale, offset[1] + r*scale)``.
    A single octave is plain noise; more octaves use fBm.
    """
    xs = offset[0] + np.arange(width, dtype=np.float64) * scale
    ys = offset[1] + np.arange(height, dtype=np.float64) * scale
    gx, gy = np.meshgrid(xs, ys)
    if octaves == 1:
        out = noise_array(seed, gx, gy)
    else:
        out = fbm_array(seed, gx, gy, octaves, falloff)
    logger.debug("noise_grid: %dx%d scale=%g octaves=%d range=[%.3f, %.3f]",
                 width, height, scale, octaves,
                 float(np.nanmin(out)) if out.size else 0.0,
                 float(np.nanmax(out)) if out.size else 0.0)
    return out.astype(np.float32)
