# render_noise.py - noise fields to images
from __future__ import annotations
from typing import Optional, Tuple

import numpy as np
from PIL import Image

from gradnoise.mathutil import lerp_color

Color = Tuple[int, int, int]


def to_unit(field: np.ndarray, lo: float = -1.0, hi: float = 1.0) -> np.ndarray:
    """Remap ``[lo, hi]`` to ``[0, 1]``; values outside are clipped, nan becomes 0."""
    t = (np.asarray(field, dtype=np.float64) - lo) / (hi - lo)
    return np.clip(np.nan_to_num(t, nan=0.0), 0.0, 1.0)


def ramp_palette(low_color: Color, high_color: Color) -> np.ndarray:
    """256-entry RGB lookup table running from ``low_color`` to ``high_color``."""
    return np.array([lerp_color(low_color, high_color, i / 255.0) for i in range(256)],
                    dtype=np.uint8)


def render_field(field: np.ndarray, low_color: Optional[Color] = None,
                 high_color: Optional[Color] = None, scale: int = 1,
                 lo: float = -1.0, hi: float = 1.0) -> Image.Image:
    """Render a 2D field.

    Without colours the result is an ``"L"`` image; with both colours each
    value picks from a linear ramp and the result is ``"RGB"``.
    """
    if field.ndim != 2:
        raise ValueError(f"expected a 2D field, got shape {field.shape}")
    H, W = field.shape
    levels = np.rint(to_unit(field, lo, hi) * 255).astype(np.uint8)
    if low_color is None or high_color is None:
        img = Image.fromarray(levels)
    else:
        img = Image.fromarray(ramp_palette(low_color, high_color)[levels])
    if scale > 1:
        img = img.resize((W * scale, H * scale), Image.NEAREST)
    return img
