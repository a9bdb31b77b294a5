from __future__ import annotations

from typing import Protocol

import numpy as np

FIXED_SEED = 20


class RandomSource(Protocol):
    """Anything that hands out uniform floats in [0, 1).

    `numpy.random.Generator` and `random.Random` both qualify.
    """

    def random(self) -> float: ...


def make_random_source(seed: int | None = None) -> np.random.Generator:
    """Seeded generators reproduce the same draws; `None` seeds from the OS."""

    return np.random.default_rng(seed)
