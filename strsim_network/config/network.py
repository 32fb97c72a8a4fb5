"""Network build configuration: frozen, slotted dataclasses."""

from dataclasses import dataclass

from strsim_network.oracle.algorithms import get_algorithm

OUTPUT_FORMATS = ("gml", "gml_compact", "json", "csr")


@dataclass(frozen=True, slots=True)
class NetworkConfig:
    """Everything needed to turn a list of strings into one output document.

    Bounds may be given as strings (as read from a command line); they are
    parsed and validated against the algorithm's numeric family in
    __post_init__ and stored as int or float.
    """

    algorithm: str = "levenshtein"
    min_distance: int | float = 1
    max_distance: int | float = 1
    output_format: str = "gml"
    n_workers: int | None = None  # None = auto-detect, 1 = in-process
    chunk_rows: int = 64  # rows per worker task
    show_progress: bool = True
    accelerated: bool = False  # trie index, levenshtein only

    def __post_init__(self) -> None:
        """Cross-parameter validation (uses object.__setattr__ since frozen)."""
        algorithm = get_algorithm(self.algorithm)
        lo, hi = algorithm.parse_bounds(self.min_distance, self.max_distance)
        object.__setattr__(self, "min_distance", lo)
        object.__setattr__(self, "max_distance", hi)

        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, "
                f"got {self.output_format!r}"
            )
        if self.n_workers is not None and self.n_workers < 1:
            raise ValueError(f"n_workers must be >= 1, got {self.n_workers}")
        if self.chunk_rows < 1:
            raise ValueError(f"chunk_rows must be >= 1, got {self.chunk_rows}")
        if self.accelerated and self.algorithm != "levenshtein":
            raise ValueError(
                f"accelerated build only supports levenshtein, "
                f"got {self.algorithm!r}"
            )
