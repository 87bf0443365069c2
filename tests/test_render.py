import numpy as np
import pytest

from gradnoise import noise_seed, noise_grid
from render import render_field, ramp_palette, to_unit


def test_to_unit_clips_and_clears_nan():
    out = to_unit(np.array([-2.0, -1.0, 0.0, 1.0, 3.0, np.nan]))
    assert out.tolist() == [0.0, 0.0, 0.5, 1.0, 1.0, 0.0]


def test_ramp_palette_endpoints():
    pal = ramp_palette((26, 32, 38), (255, 255, 255))
    assert pal.shape == (256, 3)
    assert tuple(pal[0]) == (26, 32, 38)
    assert tuple(pal[255]) == (255, 255, 255)


def test_render_grayscale_and_ramp():
    field = noise_grid(noise_seed(1), 16, 8, 0.2)
    gray = render_field(field)
    assert gray.mode == "L"
    assert gray.size == (16, 8)

    rgb = render_field(field, (0, 0, 0), (255, 0, 0), scale=3)
    assert rgb.mode == "RGB"
    assert rgb.size == (48, 24)
    # green and blue stay dark on a black-to-red ramp
    assert rgb.getextrema()[1] == (0, 0)


def test_render_zero_maps_to_mid_gray():
    img = render_field(np.zeros((2, 2), dtype=np.float32))
    assert img.getpixel((0, 0)) == 128


def test_render_rejects_non_2d():
    with pytest.raises(ValueError):
        render_field(np.zeros(4))
