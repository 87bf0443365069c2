import numpy as np

from gradnoise import noise_seed, noise, fbm, noise_array, fbm_array, noise_grid


def test_array_matches_scalar():
    seed = noise_seed(0.3)
    xs = np.linspace(-20.0, 300.0, 97)
    ys = np.linspace(-7.5, 90.0, 97)
    got = noise_array(seed, xs, ys)
    want = [noise(seed, float(x), float(y)) for x, y in zip(xs, ys)]
    assert np.allclose(got, want, rtol=0, atol=1e-12)


def test_fbm_array_matches_scalar():
    seed = noise_seed(11)
    xs = np.linspace(0.0, 10.0, 41)
    ys = np.linspace(5.0, -5.0, 41)
    got = fbm_array(seed, xs, ys, 5, 0.6)
    want = [fbm(seed, float(x), float(y), 5, 0.6) for x, y in zip(xs, ys)]
    assert np.allclose(got, want, rtol=0, atol=1e-12)


def test_array_broadcasts_scalars():
    seed = noise_seed(4)
    out = noise_array(seed, np.arange(5) + 0.5, 2.25)
    assert out.shape == (5,)
    assert np.isclose(out[1], noise(seed, 1.5, 2.25), atol=1e-12)


def test_dense_grid_range():
    seed = noise_seed(12345)
    field = noise_grid(seed, 501, 501, 0.1)
    assert field.shape == (501, 501)
    assert field.dtype == np.float32
    assert float(np.abs(field).max()) <= 1.0 + 1e-6
    # integer coordinates every 10 cells
    assert np.allclose(field[::10, ::10], 0.0, atol=1e-6)


def test_grid_layout_and_offset():
    seed = noise_seed(77)
    field = noise_grid(seed, 8, 5, 0.3, offset=(2.0, -1.0))
    assert field.shape == (5, 8)
    assert np.isclose(field[3, 6], noise(seed, 2.0 + 6 * 0.3, -1.0 + 3 * 0.3), atol=1e-6)


def test_grid_with_octaves_uses_fbm():
    seed = noise_seed(77)
    field = noise_grid(seed, 6, 4, 0.25, octaves=3, falloff=0.5)
    assert np.isclose(field[2, 5], fbm(seed, 5 * 0.25, 2 * 0.25, 3, 0.5), atol=1e-6)


def test_huge_coordinates_wrap_like_scalar():
    seed = noise_seed(9)
    x, y = 1e9 + 0.375, -3e9 + 0.625
    assert np.isclose(noise_array(seed, x, y), noise(seed, x, y), atol=1e-9)


def test_fbm_array_non_positive_octaves():
    seed = noise_seed(9)
    out = fbm_array(seed, np.zeros(3), np.zeros(3), 0, 0.5)
    assert out.shape == (3,)
    assert np.isnan(out).all()
