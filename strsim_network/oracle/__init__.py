"""Distance oracles: the rapidfuzz-backed registry and totality adapters."""

from strsim_network.oracle.adapters import TotalOracle, total_oracle
from strsim_network.oracle.algorithms import (
    ALGORITHMS,
    Algorithm,
    BoundsError,
    DistanceKind,
    UnknownAlgorithmError,
    get_algorithm,
)

__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "BoundsError",
    "DistanceKind",
    "TotalOracle",
    "UnknownAlgorithmError",
    "get_algorithm",
    "total_oracle",
]
