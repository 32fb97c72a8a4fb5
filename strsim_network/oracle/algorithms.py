"""Named string distance algorithms backed by rapidfuzz.

Each algorithm belongs to one of two numeric families: integer edit
distances (bounds are non-negative ints) and normalized similarity scores
(bounds are floats in [0, 1]). Bounds are validated against the family
before any matrix is built.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from rapidfuzz.distance import (
    OSA,
    DamerauLevenshtein,
    Hamming,
    Jaro,
    JaroWinkler,
    Levenshtein,
)

from strsim_network.oracle.adapters import total_oracle


class BoundsError(ValueError):
    """Raised when distance bounds are invalid for an algorithm's family."""


class UnknownAlgorithmError(ValueError):
    """Raised when an algorithm name is not in the registry."""


class DistanceKind(Enum):
    INTEGER = "integer"  # edit distances, 0..inf
    UNIT = "unit"  # normalized similarity scores, 0.0..1.0


# Module-level functions so they pickle into worker processes


def levenshtein(a: str, b: str) -> int:
    return Levenshtein.distance(a, b)


def damerau_levenshtein(a: str, b: str) -> int:
    return DamerauLevenshtein.distance(a, b)


def osa_distance(a: str, b: str) -> int:
    return OSA.distance(a, b)


def hamming_strict(a: str, b: str) -> int:
    """Hamming distance; raises ValueError for strings of unequal length."""
    return Hamming.distance(a, b, pad=False)


hamming = total_oracle(hamming_strict)


def jaro(a: str, b: str) -> float:
    return Jaro.similarity(a, b)


def jaro_winkler(a: str, b: str) -> float:
    return JaroWinkler.similarity(a, b)


def normalized_levenshtein(a: str, b: str) -> float:
    return Levenshtein.normalized_similarity(a, b)


def normalized_damerau_levenshtein(a: str, b: str) -> float:
    return DamerauLevenshtein.normalized_similarity(a, b)


def _parse_int(value: Any, which: str) -> int:
    if isinstance(value, bool):
        raise BoundsError(f"Could not parse uint for {which} distance: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise BoundsError(
                f"Could not parse uint for {which} distance: {value!r}"
            )
        value = int(value)
    try:
        parsed = int(value)
    except (TypeError, ValueError) as e:
        raise BoundsError(f"Could not parse uint for {which} distance. {e}") from e
    if parsed < 0:
        raise BoundsError(f"{which} distance must be non-negative, got {parsed}")
    return parsed


def _parse_unit(value: Any, which: str) -> float:
    try:
        parsed = float(value)
    except (TypeError, ValueError) as e:
        raise BoundsError(f"Could not parse float for {which} distance. {e}") from e
    if not 0.0 <= parsed <= 1.0:
        raise BoundsError(
            f"For this algorithm, {which} distance must be between 0.0 and 1.0 "
            f"(inclusive), got {parsed}"
        )
    return parsed


@dataclass(frozen=True, slots=True)
class Algorithm:
    """A named distance oracle and the numeric family of its values."""

    name: str
    kind: DistanceKind
    oracle: Callable[[str, str], Any]

    def parse_bounds(self, min_dist: Any, max_dist: Any) -> tuple[Any, Any]:
        """Parse and validate a [min, max] window for this algorithm.

        Accepts numbers or their string forms (as given on a command line).

        Raises:
            BoundsError: If a bound cannot be parsed, is outside the
                family's legal range, or min > max.
        """
        parse = _parse_int if self.kind is DistanceKind.INTEGER else _parse_unit
        lo = parse(min_dist, "MIN")
        hi = parse(max_dist, "MAX")
        if lo > hi:
            raise BoundsError("MIN distance cannot be greater than MAX distance")
        return lo, hi


ALGORITHMS: dict[str, Algorithm] = {
    a.name: a
    for a in (
        Algorithm("levenshtein", DistanceKind.INTEGER, levenshtein),
        Algorithm("damerau_levenshtein", DistanceKind.INTEGER, damerau_levenshtein),
        Algorithm("jaro", DistanceKind.UNIT, jaro),
        Algorithm("jaro_winkler", DistanceKind.UNIT, jaro_winkler),
        Algorithm(
            "normalized_damerau_levenshtein",
            DistanceKind.UNIT,
            normalized_damerau_levenshtein,
        ),
        Algorithm("normalized_levenshtein", DistanceKind.UNIT, normalized_levenshtein),
        Algorithm("osa_distance", DistanceKind.INTEGER, osa_distance),
        Algorithm("hamming", DistanceKind.INTEGER, hamming),
    )
}


def get_algorithm(name: str) -> Algorithm:
    """Look up an algorithm by name.

    Raises:
        UnknownAlgorithmError: If ``name`` is not registered.
    """
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise UnknownAlgorithmError(
            f"Unknown algorithm {name!r}; expected one of {sorted(ALGORITHMS)}"
        ) from None
