"""Configuration for many-to-many shortest path computations."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SolverConfig:
    """Defaults used when callers leave solver options unset."""

    # Edge attribute holding the edge weight
    weight_attr: str = "weight"

    # Registry name of the strategy used when no factory is supplied
    default_strategy: str = "bidirectional"

    # Worker threads for the population loop; 1 means sequential
    max_workers: int = 1

    def resolve_workers(self, requested: Optional[int]) -> int:
        """Return the effective worker count for a computation.

        Args:
            requested: Caller-supplied worker count, or None for the default.

        Returns:
            A positive worker count.

        Raises:
            ValueError: If the resulting count is smaller than 1.
        """
        workers = self.max_workers if requested is None else requested
        if workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {workers}")
        return workers


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
