"""SplitMix32 pseudorandom generator used to seed the permutation tables.

Guy L. Steele, Jr., Doug Lea, and Christine H. Flood. 2014. Fast splittable
pseudorandom number generators. OOPSLA '14.
"""

import operator

MASK32 = 0xFFFFFFFF

_GOLDEN_GAMMA = 0x9E3779B9
_MIX1 = 0x21F0AAAD
_MIX2 = 0x735A2D97


class SplitMix32:
    """Small 32-bit generator producing floats in [0, 1).

    All arithmetic wraps at 32 bits, so the stream matches any other
    SplitMix32 implementation bit for bit.

    Args:
        seed: Integer seed. Only the low 32 bits are used, so negative
            seeds wrap (``-1`` behaves as ``0xFFFFFFFF``).
    """

    def __init__(self, seed):
        self._state = operator.index(seed) & MASK32

    @property
    def state(self):
        return self._state

    def next_uint32(self):
        """Advance the state one step and return the raw 32-bit output."""
        self._state = (self._state + _GOLDEN_GAMMA) & MASK32
        t = self._state ^ (self._state >> 16)
        t = (t * _MIX1) & MASK32
        t ^= t >> 15
        t = (t * _MIX2) & MASK32
        t ^= t >> 15
        return t

    def next(self):
        """Return the next float in [0, 1)."""
        return self.next_uint32() / 4294967296

    __call__ = next
