"""SimplexForge - Seedable 2D simplex noise and fBm for procedural generation."""

from .fbm import FbmParams, amplitude_budget
from .field import DEFAULT_SEED, SimplexNoise
from .noise import noise_grid, simplex_noise_2d, simplex_noise_array
from .permutation import PermutationTable, build_permutation
from .prng import SplitMix32

__version__ = "0.1.0"
__all__ = [
    "seed", "noise", "fbm", "default_field",
    "SimplexNoise", "FbmParams", "PermutationTable", "SplitMix32",
    "build_permutation", "simplex_noise_2d", "simplex_noise_array",
    "noise_grid", "amplitude_budget", "DEFAULT_SEED",
]

_default = SimplexNoise(DEFAULT_SEED)


def default_field():
    """Return the process-wide field used by seed(), noise() and fbm()."""
    return _default


def seed(value):
    """Rebuild the process-wide permutation tables from ``value``."""
    _default.seed(value)


def noise(x, y):
    """Single-octave 2D simplex noise from the process-wide field.

    Args:
        x: x coordinate.
        y: y coordinate.

    Returns:
        Float in roughly [-1, 1].
    """
    return _default.noise(x, y)


def fbm(x, y, octaves, amplitude, frequency, persistence, lacunarity):
    """Multi-octave fBm sample from the process-wide field.

    Args:
        x: x coordinate.
        y: y coordinate.
        octaves: Number of noise layers.
        amplitude: Amplitude of the first octave.
        frequency: Frequency of the first octave.
        persistence: Amplitude decay per octave.
        lacunarity: Frequency multiplier per octave.

    Returns:
        Unclamped sum of the octaves.
    """
    return _default.fbm(x, y, octaves, amplitude, frequency, persistence,
                        lacunarity)
