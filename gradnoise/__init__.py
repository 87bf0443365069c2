# gradnoise/__init__.py
# Package init for the gradient noise engine

from .tables import PERMUTATION, GRAD3, Gradient
from .noise import NoiseSeed, noise_seed, normalize_seed, random_seed, noise, fbm
from .field import noise_array, fbm_array, noise_grid
from .mathutil import map_range, norm, lerp, constrain, dist, shuffle, lerp_color

__all__ = [
    "PERMUTATION", "GRAD3", "Gradient",
    "NoiseSeed", "noise_seed", "normalize_seed", "random_seed", "noise", "fbm",
    "noise_array", "fbm_array", "noise_grid",
    "map_range", "norm", "lerp", "constrain", "dist", "shuffle", "lerp_color",
]
