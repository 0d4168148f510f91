"""Random wall layout generation."""
import logging
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


class WallLayoutGenerator:
    """Generates boolean wall masks where each cell is a wall independently."""

    def __init__(self, wall_probability: float = 0.25, seed: Optional[int] = None):
        """Initialize generator.

        Args:
            wall_probability: Chance of each cell being a wall
            seed: Seed for reproducible layouts; None draws fresh entropy
        """
        if not 0.0 <= wall_probability <= 1.0:
            raise ValueError(f"wall_probability must be in [0, 1], got {wall_probability}")
        self.wall_probability = wall_probability
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def reseed(self, seed: Optional[int]):
        """Restart the random stream from a new seed."""
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def generate(self, width: int, height: int) -> np.ndarray:
        """Return a (height, width) mask, True where a wall stands."""
        walls = self._rng.random((height, width)) < self.wall_probability
        logger.debug(f"Generated {width}x{height} layout with {int(walls.sum())} walls")
        return walls
