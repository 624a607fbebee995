"""Fractal Brownian motion: octaves of noise summed at rising frequency."""

import operator
from dataclasses import dataclass

import numpy as np


def _check_octaves(octaves):
    octaves = operator.index(octaves)
    if octaves < 0:
        raise ValueError(f"octaves must be non-negative, got {octaves}")
    return octaves


@dataclass
class FbmParams:
    """Parameters for one fBm evaluation. All fields are required."""

    # Number of noise layers
    octaves: int
    # Amplitude ("height") of the first octave
    amplitude: float
    # Frequency ("width") of the first octave
    frequency: float
    # Amplitude multiplier between octaves
    persistence: float
    # Frequency multiplier between octaves
    lacunarity: float

    def validate(self):
        self.octaves = _check_octaves(self.octaves)
        return self

    def budget(self):
        return amplitude_budget(self.octaves, self.amplitude, self.persistence)


def fbm(sample, x, y, octaves, amplitude, frequency, persistence, lacunarity):
    """Sum ``octaves`` layers of ``sample`` at geometric scales.

    Args:
        sample: Noise function ``sample(x, y)``; scalar or array.
        x, y: Coordinates, passed through to ``sample`` after scaling.
        octaves: Number of layers (0 gives 0).
        amplitude: Amplitude of the first octave.
        frequency: Frequency of the first octave.
        persistence: Amplitude multiplier between octaves.
        lacunarity: Frequency multiplier between octaves.

    Returns:
        The unclamped sum of octaves.
    """
    octaves = _check_octaves(octaves)
    total = 0.0

    for _ in range(octaves):
        total += sample(x * frequency, y * frequency) * amplitude
        amplitude *= persistence
        frequency *= lacunarity

    return total


def fbm_array(sample, x, y, params):
    """Array fBm; always returns an array of the broadcast coordinate shape."""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    total = np.zeros(np.broadcast(x, y).shape)
    total += fbm(sample, x, y, params.octaves, params.amplitude,
                 params.frequency, params.persistence, params.lacunarity)
    return total


def amplitude_budget(octaves, amplitude, persistence):
    """Sum of per-octave amplitudes; bounds |fbm| when |sample| <= 1."""
    octaves = _check_octaves(octaves)
    total = 0.0
    for _ in range(octaves):
        total += abs(amplitude)
        amplitude *= persistence
    return total
