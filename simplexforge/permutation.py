"""Seeded permutation tables that hash lattice coordinates to gradients."""

import logging
from dataclasses import dataclass, field

import numpy as np

from .prng import SplitMix32

logger = logging.getLogger(__name__)

TABLE_SIZE = 512
_PERIOD = TABLE_SIZE // 2


@dataclass(frozen=True, eq=False)
class PermutationTable:
    """A permutation of 0..255 duplicated to 512 entries, plus its mod-12 twin.

    Both arrays are read-only; reseeding builds a new table rather than
    writing into an existing one. The tuple copies serve the scalar kernel,
    which indexes with plain ints.
    """
    seed: object
    perm: np.ndarray = field(repr=False)
    perm_mod12: np.ndarray = field(repr=False)
    perm_lut: tuple = field(init=False, repr=False)
    perm_mod12_lut: tuple = field(init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'perm_lut', tuple(self.perm.tolist()))
        object.__setattr__(self, 'perm_mod12_lut',
                           tuple(self.perm_mod12.tolist()))

    @classmethod
    def from_base(cls, base, seed=None):
        """Expand a 256-entry base permutation into the 512-entry tables."""
        base = np.asarray(base, dtype=np.uint8)
        if base.shape != (_PERIOD,):
            raise ValueError(f"base permutation must have {_PERIOD} entries, "
                             f"got shape {base.shape}")

        perm = base[np.arange(TABLE_SIZE) & (_PERIOD - 1)]
        perm_mod12 = perm % 12
        perm.setflags(write=False)
        perm_mod12.setflags(write=False)
        return cls(seed=seed, perm=perm, perm_mod12=perm_mod12)


def shuffle_base(seed):
    """Shuffle 0..255 with SplitMix32.

    The swap loop stops at index 254, one step short of a full
    Fisher-Yates pass. Changing the bound changes every table, so it stays.
    """
    random = SplitMix32(seed)
    p = list(range(_PERIOD))

    for i in range(_PERIOD - 1):
        r = i + int(random() * (_PERIOD - i))
        p[i], p[r] = p[r], p[i]

    return p


def build_permutation(seed):
    """Build the permutation and gradient-index tables for ``seed``.

    Args:
        seed: Integer seed for SplitMix32.

    Returns:
        A new PermutationTable.
    """
    table = PermutationTable.from_base(shuffle_base(seed), seed=seed)
    logger.debug("Built permutation table for seed %d", seed)
    return table


def identity_permutation():
    """Unshuffled table with perm[i] == i & 255."""
    return PermutationTable.from_base(np.arange(_PERIOD))
