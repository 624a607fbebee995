"""Tests for the simplex kernel and the fBm compositor."""

import math

import numpy as np
import pytest

from simplexforge import FbmParams, SimplexNoise, build_permutation
from simplexforge.fbm import amplitude_budget, fbm
from simplexforge.noise import (
    G2, grad, noise_grid, simplex_noise_2d, simplex_noise_array,
)


@pytest.fixture(scope="module")
def table():
    return build_permutation(1337)


@pytest.mark.parametrize("seed", [0, 1, 1337, 2024])
def test_origin_is_zero(seed):
    assert simplex_noise_2d(build_permutation(seed), 0, 0) == 0


@pytest.mark.parametrize("k", [-300, -17, -1, 1, 2, 5, 255, 256, 1000])
def test_antidiagonal_integers_are_zero(table, k):
    # Points with x + y == 0 sit exactly on a simplex vertex.
    assert simplex_noise_2d(table, k, -k) == 0
    assert simplex_noise_2d(table, float(-k), float(k)) == 0


@pytest.mark.parametrize("i, j", [(1, 0), (0, 1), (3, 4), (-2, 7), (10, 10)])
def test_simplex_vertices_are_near_zero(table, i, j):
    t = (i + j) * G2
    x, y = i - t, j - t
    assert abs(simplex_noise_2d(table, x, y)) < 1e-12


def test_noise_is_deterministic(table):
    pts = [(0.1, 0.2), (2.345, -1.75), (10.01, 10.02), (-55.5, 123.25)]
    for x, y in pts:
        assert simplex_noise_2d(table, x, y) == simplex_noise_2d(table, x, y)


def test_noise_depends_only_on_table():
    a = SimplexNoise(77)
    b = SimplexNoise(77)
    rng = np.random.RandomState(3)
    for x, y in rng.uniform(-50, 50, size=(100, 2)):
        assert a.noise(x, y) == b.noise(x, y)


def test_noise_range(table):
    rng = np.random.RandomState(0)
    x = rng.uniform(-1000, 1000, size=50000)
    y = rng.uniform(-1000, 1000, size=50000)
    n = simplex_noise_array(table, x, y)
    assert n.min() >= -1.0
    assert n.max() <= 1.0
    # Not degenerate
    assert n.std() > 0.05


def test_noise_is_continuous(table):
    eps = 1e-6
    rng = np.random.RandomState(4)
    for x, y in rng.uniform(-20, 20, size=(200, 2)):
        a = simplex_noise_2d(table, x, y)
        b = simplex_noise_2d(table, x + eps, y + eps)
        assert abs(a - b) < 1e-3


def test_array_matches_scalar(table):
    rng = np.random.RandomState(1)
    x = rng.uniform(-300, 300, size=2000)
    y = rng.uniform(-300, 300, size=2000)
    arr = simplex_noise_array(table, x, y)
    scalar = np.array([simplex_noise_2d(table, a, b) for a, b in zip(x, y)])
    np.testing.assert_array_equal(arr, scalar)


def test_array_broadcasts(table):
    xs = np.linspace(-3, 3, 7)
    ys = np.linspace(-2, 2, 5)[:, None]
    out = simplex_noise_array(table, xs, ys)
    assert out.shape == (5, 7)
    assert out[2, 4] == simplex_noise_2d(table, xs[4], ys[2, 0])


def test_array_accepts_scalars(table):
    out = simplex_noise_array(table, 0.5, 0.25)
    assert out.shape == ()
    assert float(out) == simplex_noise_2d(table, 0.5, 0.25)


@pytest.mark.parametrize("x, y", [(math.nan, 0.0), (0.0, math.inf),
                                  (-math.inf, 1.0)])
def test_non_finite_coordinates_rejected(table, x, y):
    with pytest.raises(ValueError):
        simplex_noise_2d(table, x, y)
    with pytest.raises(ValueError):
        simplex_noise_array(table, [0.0, x], [0.0, y])


@pytest.mark.parametrize("h, expected", [
    (0, 3.0), (1, 1.0), (2, -1.0), (3, -3.0),
    (4, 1.0), (5, -1.0), (6, 1.0), (7, -1.0),
    (8, 2.0), (9, -2.0), (10, 2.0), (11, -2.0),
    (12, 2.0), (13, -2.0), (14, 2.0), (15, -2.0),
    (16, 3.0),
])
def test_grad(h, expected):
    assert grad(h, 1.0, 2.0) == expected


def test_grid_matches_scalar(table):
    img = noise_grid(table, 6, 9, scale=4.0, offset=(1.5, -2.0))
    assert img.shape == (6, 9)
    for row in range(6):
        for col in range(9):
            expected = simplex_noise_2d(table, col / 4.0 + 1.5,
                                        row / 4.0 + -2.0)
            assert img[row, col] == expected


@pytest.mark.parametrize("height, width, scale", [(0, 4, 1.0), (4, -1, 1.0),
                                                  (4, 4, 0.0)])
def test_grid_rejects_bad_sizes(table, height, width, scale):
    with pytest.raises(ValueError):
        noise_grid(table, height, width, scale=scale)


def test_fbm_zero_octaves():
    field = SimplexNoise(1337)
    assert field.fbm(3.2, -1.1, 0, 1.0, 1.0, 0.5, 2.0) == 0
    assert field.fbm(100.0, 7.0, 0, 5.0, 9.0, 3.0, 0.1) == 0


def test_fbm_single_octave_is_scaled_noise():
    field = SimplexNoise(1337)
    rng = np.random.RandomState(2)
    for x, y in rng.uniform(-40, 40, size=(50, 2)):
        amp, freq = 1.7, 0.37
        assert (field.fbm(x, y, 1, amp, freq, 0.5, 2.0)
                == field.noise(x * freq, y * freq) * amp)


def test_fbm_amplitude_budget_with_stub():
    total = fbm(lambda x, y: 1.0, 0.3, 0.7, 4, 1.0, 1.0, 0.5, 2.0)
    assert total == 1.875
    assert amplitude_budget(4, 1.0, 0.5) == 1.875


def test_fbm_scales_coordinates():
    seen = []

    def sample(x, y):
        seen.append((x, y))
        return 0.0

    fbm(sample, 1.0, 2.0, 3, 1.0, 0.5, 0.5, 3.0)
    assert seen == [(0.5, 1.0), (1.5, 3.0), (4.5, 9.0)]


def test_fbm_is_bounded_by_budget():
    field = SimplexNoise(9)
    params = FbmParams(octaves=6, amplitude=2.0, frequency=0.01,
                       persistence=0.5, lacunarity=2.0)
    img = field.fbm_grid(64, 64, params)
    assert np.abs(img).max() <= params.budget()


def test_fbm_array_matches_scalar():
    field = SimplexNoise(31)
    params = FbmParams(octaves=5, amplitude=1.0, frequency=0.02,
                       persistence=0.55, lacunarity=2.1)
    img = field.fbm_grid(8, 12, params, scale=1.0, offset=(10.0, 20.0))
    for row in range(8):
        for col in range(12):
            expected = field.fbm(col + 10.0, row + 20.0, params.octaves,
                                 params.amplitude, params.frequency,
                                 params.persistence, params.lacunarity)
            assert img[row, col] == expected


def test_fbm_array_zero_octaves_keeps_shape():
    field = SimplexNoise(31)
    params = FbmParams(octaves=0, amplitude=1.0, frequency=1.0,
                       persistence=0.5, lacunarity=2.0)
    img = field.fbm_grid(3, 4, params)
    assert img.shape == (3, 4)
    assert not img.any()


def test_fbm_rejects_bad_octaves():
    field = SimplexNoise(1)
    with pytest.raises(ValueError):
        field.fbm(0.0, 0.0, -1, 1.0, 1.0, 0.5, 2.0)
    with pytest.raises(TypeError):
        field.fbm(0.0, 0.0, 2.5, 1.0, 1.0, 0.5, 2.0)
    with pytest.raises(ValueError):
        FbmParams(octaves=-3, amplitude=1.0, frequency=1.0,
                  persistence=0.5, lacunarity=2.0).validate()


def test_fbm_grid_requires_params():
    field = SimplexNoise(1)
    with pytest.raises(TypeError):
        field.fbm_grid(4, 4, {"octaves": 2})
