"""Configuration classes for netalgo algorithms."""

import logging
from dataclasses import dataclass
from typing import Optional


@dataclass
class AlgorithmConfig:
    """Defaults shared by the algorithm modules."""

    # Residual capacity at or below this value is treated as exhausted
    flow_tolerance: float = 0.0

    # Reject externally supplied Kruskal orderings that are not ascending by weight
    verify_edge_order: bool = True

    # Level applied to the root "netalgo" logger on first set-up
    log_level: int = logging.INFO

    def resolve_tolerance(self, tolerance: Optional[float]) -> float:
        """Return ``tolerance`` or the configured default when it is None."""
        if tolerance is None:
            return self.flow_tolerance
        if tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {tolerance}")
        return float(tolerance)


# Global configuration instance
ALGORITHM_CONFIG = AlgorithmConfig()
