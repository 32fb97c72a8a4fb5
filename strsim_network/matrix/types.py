"""Sparse matrix data structures for pairwise string distances."""

from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
import scipy.sparse


@dataclass(frozen=True, slots=True)
class Coordinate:
    """One retained pair: strings[row] vs strings[col] at distance value.

    Only the strict lower triangle is ever produced, so col < row.
    """

    row: int
    col: int
    value: Any  # int edit distance or float similarity score


@dataclass(frozen=True, slots=True)
class CooMatrix:
    """Coordinate-list matrix holding every retained pair exactly once.

    Entries are row-major: ascending row, then ascending col within a row.
    """

    entries: tuple[Coordinate, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.entries)

    @property
    def nnz(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class CsrMatrix:
    """Immutable compressed-sparse-row matrix derived from a CooMatrix.

    Uses frozen=True but omits slots=True since numpy arrays don't
    interact well with __slots__.
    """

    n_row: int
    values: np.ndarray  # length nnz, int64 or float64
    col_indices: np.ndarray  # int64 array of length nnz
    row_ptr: np.ndarray  # int64 array of length n_row + 1

    @property
    def nnz(self) -> int:
        return int(self.row_ptr[-1])

    def row_slice(self, row: int) -> slice:
        """Slice into values/col_indices holding the entries of ``row``."""
        return slice(int(self.row_ptr[row]), int(self.row_ptr[row + 1]))

    def iter_coordinates(self) -> Iterator[Coordinate]:
        """Re-expand row_ptr into (row, col, value) coordinates, row by row."""
        values = self.values.tolist()
        cols = self.col_indices.tolist()
        for row in range(self.n_row):
            s = self.row_slice(row)
            for col, value in zip(cols[s], values[s]):
                yield Coordinate(row=row, col=col, value=value)

    def to_scipy(self) -> scipy.sparse.csr_matrix:
        """Square ``n_row x n_row`` scipy view sharing this matrix's layout."""
        return scipy.sparse.csr_matrix(
            (self.values, self.col_indices, self.row_ptr),
            shape=(self.n_row, self.n_row),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "n_row": self.n_row,
            "values": self.values.tolist(),
            "col_indices": self.col_indices.tolist(),
            "row_ptr": self.row_ptr.tolist(),
        }
