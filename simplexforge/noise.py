"""2D simplex noise for terrain and texture generation.

Based on Stefan Gustavson's speed-improved simplex noise (2012), with the
optimisations by Peter Eastman.
"""

import math

import numpy as np

# Skewing and unskewing factors for 2 dimensions
F2 = 0.5 * (math.sqrt(3.0) - 1.0)
G2 = (3.0 - math.sqrt(3.0)) / 6.0

NOISE_SCALE = 70.0


def grad(hash, x, y):
    """Dot product of the gradient selected by ``hash`` with (x, y)."""
    h = hash & 0x0F
    u = x if h < 8 else y
    v = y if h < 4 else 0

    return (u if (h & 1) == 0 else -u) + (v if (h & 2) == 0 else -v)


def simplex_noise_2d(table, x, y):
    """Sample 2D simplex noise at a single point.

    Args:
        table: PermutationTable used to hash the simplex corners.
        x: x coordinate.
        y: y coordinate.

    Returns:
        Float in roughly [-1, 1]. Simplex lattice vertices (including the
        origin and every integer point with x + y == 0) sample to 0.
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"noise coordinates must be finite, got ({x}, {y})")

    perm = table.perm_lut
    perm_mod12 = table.perm_mod12_lut

    # Skew the input space to find the simplex cell
    s = (x + y) * F2
    i = math.floor(x + s)
    j = math.floor(y + s)
    t = (i + j) * G2

    # Distances from the unskewed cell origin
    x0 = x - (i - t)
    y0 = y - (j - t)

    # Lower triangle (0,0)->(1,0)->(1,1) or upper (0,0)->(0,1)->(1,1)
    if x0 > y0:
        i1, j1 = 1, 0
    else:
        i1, j1 = 0, 1

    x1 = x0 - i1 + G2
    y1 = y0 - j1 + G2
    x2 = x0 - 1.0 + 2.0 * G2
    y2 = y0 - 1.0 + 2.0 * G2

    i &= 255
    j &= 255
    gi0 = perm_mod12[i + perm[j]]
    gi1 = perm_mod12[i + i1 + perm[j + j1]]
    gi2 = perm_mod12[i + 1 + perm[j + 1]]

    t0 = 0.5 - x0 * x0 - y0 * y0
    if t0 < 0:
        n0 = 0.0
    else:
        t0 *= t0
        n0 = t0 * t0 * grad(gi0, x0, y0)

    t1 = 0.5 - x1 * x1 - y1 * y1
    if t1 < 0:
        n1 = 0.0
    else:
        t1 *= t1
        n1 = t1 * t1 * grad(gi1, x1, y1)

    t2 = 0.5 - x2 * x2 - y2 * y2
    if t2 < 0:
        n2 = 0.0
    else:
        t2 *= t2
        n2 = t2 * t2 * grad(gi2, x2, y2)

    return NOISE_SCALE * (n0 + n1 + n2)


def _grad_array(h, x, y):
    h = h & 0x0F
    u = np.where(h < 8, x, y)
    v = np.where(h < 4, y, 0.0)
    return np.where((h & 1) == 0, u, -u) + np.where((h & 2) == 0, v, -v)


def _corner(gi, x, y):
    t = 0.5 - x * x - y * y
    t2 = t * t
    return np.where(t < 0, 0.0, t2 * t2 * _grad_array(gi, x, y))


def simplex_noise_array(table, x, y):
    """Vectorized simplex noise over broadcastable coordinate arrays.

    Every element matches ``simplex_noise_2d`` for the same point exactly;
    the arithmetic runs in the same order.

    Args:
        table: PermutationTable used to hash the simplex corners.
        x: Array-like of x coordinates.
        y: Array-like of y coordinates, broadcastable against ``x``.

    Returns:
        Float64 array with the broadcast shape of ``x`` and ``y``.
    """
    x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64),
                               np.asarray(y, dtype=np.float64))
    if not (np.isfinite(x).all() and np.isfinite(y).all()):
        raise ValueError("noise coordinates must be finite")

    perm = table.perm.astype(np.intp)
    perm_mod12 = table.perm_mod12.astype(np.intp)

    s = (x + y) * F2
    i = np.floor(x + s)
    j = np.floor(y + s)
    t = (i + j) * G2

    x0 = x - (i - t)
    y0 = y - (j - t)

    lower = x0 > y0
    i1 = np.where(lower, 1.0, 0.0)
    j1 = np.where(lower, 0.0, 1.0)

    x1 = x0 - i1 + G2
    y1 = y0 - j1 + G2
    x2 = x0 - 1.0 + 2.0 * G2
    y2 = y0 - 1.0 + 2.0 * G2

    ii = i.astype(np.int64) & 255
    jj = j.astype(np.int64) & 255
    oi = lower.astype(np.int64)
    oj = 1 - oi
    gi0 = perm_mod12[ii + perm[jj]]
    gi1 = perm_mod12[ii + oi + perm[jj + oj]]
    gi2 = perm_mod12[ii + 1 + perm[jj + 1]]

    n0 = _corner(gi0, x0, y0)
    n1 = _corner(gi1, x1, y1)
    n2 = _corner(gi2, x2, y2)

    return NOISE_SCALE * (n0 + n1 + n2)


def grid_coordinates(height, width, scale=1.0, offset=(0.0, 0.0)):
    """Build (height, width) coordinate arrays for sampling a noise image.

    Pixel (row, col) maps to ``(col / scale + offset[0],
    row / scale + offset[1])``, so ``scale`` is the size of one noise unit
    in pixels.
    """
    if height <= 0 or width <= 0:
        raise ValueError(f"grid size must be positive, got {height}x{width}")
    if not scale > 0:
        raise ValueError(f"scale must be positive, got {scale}")

    ox, oy = offset
    x_coords = np.arange(width) / scale + ox
    y_coords = np.arange(height) / scale + oy

    y_m, x_m = np.meshgrid(y_coords, x_coords, indexing='ij')
    return x_m, y_m


def noise_grid(table, height, width, scale=1.0, offset=(0.0, 0.0)):
    """Sample single-octave simplex noise over a pixel grid.

    Args:
        table: PermutationTable used to hash the simplex corners.
        height: Output height in pixels.
        width: Output width in pixels.
        scale: Noise unit size in pixels (larger = smoother).
        offset: (x, y) noise-space origin of pixel (0, 0).

    Returns:
        Array of shape (height, width) with values in roughly [-1, 1].
    """
    x, y = grid_coordinates(height, width, scale, offset)
    return simplex_noise_array(table, x, y)
