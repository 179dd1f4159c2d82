"""Configuration classes for the pathfind search engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pathfind.types import Cost


@dataclass
class SearchConfig:
    """Tunables for uniform-cost searches."""

    # Edge cost applied when a query is given no traversal policy
    default_edge_cost: Cost = 1

    # Emit a DEBUG progress record every N settled nodes (0 disables)
    progress_log_interval: int = 0

    def __post_init__(self) -> None:
        if self.default_edge_cost < 0:
            raise ValueError(
                f"default_edge_cost must be non-negative, got {self.default_edge_cost}"
            )
        if self.progress_log_interval < 0:
            raise ValueError(
                "progress_log_interval must be non-negative, "
                f"got {self.progress_log_interval}"
            )

    def validate_cost(self, cost: Cost, begin: Any, next_node: Any) -> Cost:
        """Return ``cost`` unchanged, rejecting negative edge costs.

        Raises:
            ValueError: If ``cost`` is negative. Settled costs would no longer
                be final and results would be wrong.
        """
        if cost < 0:
            raise ValueError(
                f"Negative edge cost {cost} from {begin!r} to {next_node!r}; "
                "uniform-cost search requires non-negative costs."
            )
        return cost

    def should_log_progress(self, settled_count: int) -> bool:
        """Return True if a progress record is due after ``settled_count`` nodes."""
        interval = self.progress_log_interval
        return interval > 0 and settled_count % interval == 0


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
