"""
Random Source Module
====================

This module defines the RandomSource class, the single source of randomness
used by the network generator.

All draws go through one ``numpy.random.Generator`` so that a generated
network is fully reproducible from its seed. The batch isolator never draws
random numbers.
"""

from typing import Optional

import numpy as np


class RandomSource:
    """
    Seedable source of the random draws needed to generate a network.

    Attributes
    ----------
    seed : int or None
        Seed passed to ``numpy.random.default_rng``. ``None`` draws fresh
        entropy from the operating system.
    rng : numpy.random.Generator
        Underlying generator.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialise a RandomSource.

        Parameters
        ----------
        seed : int, optional
            Seed for the underlying generator.
        """
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def load(self, upper: float = 100.0) -> float:
        """Draw a load uniformly from [0, upper)."""
        return float(self.rng.uniform(0.0, upper))

    def priority(self, levels: int = 5) -> int:
        """Draw a priority uniformly from {1, ..., levels}."""
        return int(self.rng.integers(1, levels + 1))

    def system_index(self, n_systems: int) -> int:
        """Draw a System index uniformly from {0, ..., n_systems - 1}."""
        return int(self.rng.integers(0, n_systems))

    def attachment_count(self, maximum: int = 2) -> int:
        """Draw the number of Interfaces a Connector attaches to, in {1, ..., maximum}."""
        return int(self.rng.integers(1, maximum + 1))
