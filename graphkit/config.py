"""Configuration for graphkit algorithms."""

from dataclasses import dataclass
from typing import Optional

from graphkit.types.base import INF


@dataclass
class AlgorithmConfig:
    """Tunables shared by the graph algorithms."""

    # Sentinel for "no edge" / "unreached" when a call does not pass ``inf=``
    infinity: int = INF

    # Stop Bellman-Ford relaxation passes once a full pass relaxes nothing
    bellman_ford_early_exit: bool = True

    def resolve_inf(self, inf: Optional[int]) -> int:
        """Return ``inf`` if given, otherwise the configured sentinel."""
        return self.infinity if inf is None else inf


# Global configuration instance
ALGORITHM_CONFIG = AlgorithmConfig()
