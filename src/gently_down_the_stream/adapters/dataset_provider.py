"""
Random Dataset Provider.

Builds the fixed datasets from configuration. Fruits and vegetables are
copied from config; the integer collection is drawn from a private
random generator exactly once.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Tuple

from gently_down_the_stream.config.models import DatasetConfig
from gently_down_the_stream.domain.value_objects import Datasets

logger = logging.getLogger(__name__)


class RandomDatasetProvider:
    """Dataset provider backed by a pseudo-random integer source."""

    def __init__(
        self,
        config: Optional[DatasetConfig] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize provider.

        Args:
            config: Dataset configuration (defaults apply when omitted)
            seed: Random seed for reproducibility. Falls back to
                  config.seed; None means unseeded.
        """
        self.config = config or DatasetConfig()
        self._seed = seed if seed is not None else self.config.seed
        self._rng = random.Random(self._seed)
        self._datasets: Optional[Datasets] = None

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def get_datasets(self) -> Datasets:
        """Return the datasets, generating them on first call."""
        if self._datasets is None:
            self._datasets = Datasets(
                fruits=tuple(self.config.fruits),
                veggies=tuple(self.config.veggies),
                integer_values=self._generate_integers(),
            )
            logger.info(
                f"Generated datasets: {self._datasets.sizes} (seed={self._seed})"
            )
        return self._datasets

    def _generate_integers(self) -> Tuple[int, ...]:
        # randint is inclusive on both ends
        low = self.config.integer_min
        high = self.config.integer_max
        return tuple(
            self._rng.randint(low, high) for _ in range(self.config.integer_count)
        )
