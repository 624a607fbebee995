"""Seedable noise field owning its permutation table."""

import logging
import threading

from .fbm import FbmParams, fbm, fbm_array
from .noise import grid_coordinates, simplex_noise_2d, simplex_noise_array
from .permutation import build_permutation

logger = logging.getLogger(__name__)

DEFAULT_SEED = 0


class SimplexNoise:
    """Independent 2D simplex noise field.

    Reseeding swaps in a freshly built, immutable table with a single
    assignment, so a sample taken while another thread reseeds sees either
    the old table or the new one.

    Args:
        seed: Integer seed for the permutation table.
    """

    def __init__(self, seed=DEFAULT_SEED):
        self._lock = threading.Lock()
        self._table = build_permutation(seed)

    def seed(self, value):
        """Rebuild the permutation tables from ``value``."""
        table = build_permutation(value)
        with self._lock:
            self._table = table
        logger.debug("Reseeded noise field %#x with %d", id(self), value)

    @property
    def table(self):
        return self._table

    @property
    def seed_value(self):
        return self._table.seed

    @property
    def perm(self):
        return self._table.perm

    @property
    def perm_mod12(self):
        return self._table.perm_mod12

    def noise(self, x, y):
        return simplex_noise_2d(self._table, x, y)

    def noise_array(self, x, y):
        return simplex_noise_array(self._table, x, y)

    def fbm(self, x, y, octaves, amplitude, frequency, persistence,
            lacunarity):
        # One table for every octave even if a reseed lands mid-sum
        table = self._table
        return fbm(lambda px, py: simplex_noise_2d(table, px, py), x, y,
                   octaves, amplitude, frequency, persistence, lacunarity)

    def fbm_array(self, x, y, params):
        table = self._table
        return fbm_array(lambda px, py: simplex_noise_array(table, px, py),
                         x, y, params)

    def grid(self, height, width, scale=1.0, offset=(0.0, 0.0)):
        """Single-octave noise image of shape (height, width)."""
        x, y = grid_coordinates(height, width, scale, offset)
        return self.noise_array(x, y)

    def fbm_grid(self, height, width, params, scale=1.0, offset=(0.0, 0.0)):
        """Generate an fBm noise image of shape (height, width).

        Args:
            height: Output height in pixels.
            width: Output width in pixels.
            params: FbmParams for the octave sum.
            scale: Noise unit size in pixels at frequency 1.
            offset: (x, y) noise-space origin of pixel (0, 0).

        Returns:
            Unclamped float64 array of shape (height, width).
        """
        if not isinstance(params, FbmParams):
            raise TypeError(f"params must be FbmParams, got "
                            f"{type(params).__name__}")
        x, y = grid_coordinates(height, width, scale, offset)
        return self.fbm_array(x, y, params.validate())
