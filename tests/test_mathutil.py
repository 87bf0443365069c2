import numpy as np
import pytest

from gradnoise.mathutil import map_range, norm, lerp, constrain, dist, shuffle, lerp_color


def test_map_range_extrapolates():
    assert map_range(0.5, 0, 1, -30, 30) == 0.0
    assert map_range(1.0, 0, 1, -30, 30) == 30.0
    assert map_range(-1.0, 0, 1, -30, 30) == -90.0
    assert map_range(5, 10, 0, 0, 100) == 50.0


def test_map_range_zero_width_source():
    with pytest.raises(ZeroDivisionError):
        map_range(1, 2, 2, 0, 1)


def test_norm_lerp_constrain_dist():
    assert norm(15, 10, 20) == 0.5
    assert lerp(10, 20, 0.25) == 12.5
    assert constrain(-4, 0, 10) == 0
    assert constrain(14, 0, 10) == 10
    assert constrain(4, 0, 10) == 4
    assert dist(0, 0, 3, 4) == 5.0


def test_shuffle_is_a_permutation_and_reproducible():
    a = shuffle(list(range(20)), np.random.default_rng(1))
    b = shuffle(list(range(20)), np.random.default_rng(1))
    assert a == b
    assert sorted(a) == list(range(20))


def test_shuffle_in_place():
    items = [1, 2, 3]
    assert shuffle(items, np.random.default_rng(0)) is items


def test_lerp_color():
    assert lerp_color((0, 0, 0), (255, 255, 255), 0.0) == (0, 0, 0)
    assert lerp_color((0, 0, 0), (255, 255, 255), 1.0) == (255, 255, 255)
    assert lerp_color((0, 100, 200), (100, 200, 0), 0.5) == (50, 150, 100)
    assert lerp_color((0, 0, 0), (255, 255, 255), 2.0) == (255, 255, 255)


def test_shuffle_matches_generator_shuffle():
    expected = list(range(10))
    np.random.default_rng(3).shuffle(expected)
    assert shuffle(list(range(10)), np.random.default_rng(3)) == expected
