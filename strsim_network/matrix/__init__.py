"""Sparse relational matrices over pairwise string distances."""

from strsim_network.matrix.coo import (
    DistanceOracle,
    build_coo_matrix,
    build_coo_matrix_levenshtein,
)
from strsim_network.matrix.csr import (
    MatrixIndexError,
    coo_to_csr,
    read_csr_json,
    write_csr_json,
)
from strsim_network.matrix.parallel import (
    DEFAULT_CHUNK_ROWS,
    fork_join,
    get_optimal_workers,
    row_chunks,
)
from strsim_network.matrix.types import CooMatrix, Coordinate, CsrMatrix

__all__ = [
    "CooMatrix",
    "Coordinate",
    "CsrMatrix",
    "DEFAULT_CHUNK_ROWS",
    "DistanceOracle",
    "MatrixIndexError",
    "build_coo_matrix",
    "build_coo_matrix_levenshtein",
    "coo_to_csr",
    "fork_join",
    "get_optimal_workers",
    "read_csr_json",
    "row_chunks",
    "write_csr_json",
]
