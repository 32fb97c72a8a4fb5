"""COO -> CSR conversion and CSR JSON serialization.

The conversion follows scipy's coo_tocsr (sparsetools/coo.h): count entries
per row, exclusive prefix sum into row offsets, then scatter each entry to
its row's next free slot. The scatter writes through a separate cursor
array so row_ptr keeps its offset form.
"""

import json
import logging
from typing import IO, Any

import numpy as np

from strsim_network.matrix.types import CooMatrix, CsrMatrix

log = logging.getLogger(__name__)


class MatrixIndexError(ValueError):
    """Raised when a coordinate lies outside the declared matrix size."""


def _check_indices(rows: np.ndarray, cols: np.ndarray, n_row: int) -> None:
    for name, idx in (("row", rows), ("col", cols)):
        if idx.size == 0:
            continue
        bad = np.flatnonzero((idx < 0) | (idx >= n_row))
        if bad.size:
            first = int(bad[0])
            raise MatrixIndexError(
                f"Entry {first} has {name}={int(idx[first])} outside "
                f"[0, {n_row}) ({bad.size} out-of-range {name} indices)"
            )


def coo_to_csr(coo: CooMatrix, n_row: int) -> CsrMatrix:
    """Convert a coordinate matrix into compressed sparse row form.

    O(n_row + nnz) time and space. Within each row, entries keep the
    relative order they had in ``coo``; since COO entries are row-major
    with ascending columns, CSR rows come out column-sorted.

    Args:
        coo: Source coordinate matrix.
        n_row: Number of rows (the number of input strings). Must bound
            every row and col index.

    Returns:
        CsrMatrix with len(row_ptr) == n_row + 1 and row_ptr[-1] == nnz.

    Raises:
        MatrixIndexError: If any row or col index is outside [0, n_row).
    """
    if n_row < 0:
        raise MatrixIndexError(f"n_row must be non-negative, got {n_row}")

    nnz = len(coo.entries)
    rows = np.fromiter((c.row for c in coo.entries), dtype=np.int64, count=nnz)
    cols = np.fromiter((c.col for c in coo.entries), dtype=np.int64, count=nnz)
    _check_indices(rows, cols, n_row)

    # 1-2. Per-row entry counts
    row_ptr = np.zeros(n_row + 1, dtype=np.int64)
    np.add.at(row_ptr, rows, 1)

    # 3. Exclusive prefix sum; the last slot is set to nnz explicitly
    counts = row_ptr[:n_row].copy()
    row_ptr[0] = 0
    np.cumsum(counts[:-1], out=row_ptr[1:n_row])
    row_ptr[n_row] = nnz

    # 4-5. Stable scatter in insertion order through a separate cursor array
    cursor = row_ptr[:n_row].copy()
    values: list[Any] = [None] * nnz
    col_indices = np.empty(nnz, dtype=np.int64)
    for coord in coo.entries:
        dest = cursor[coord.row]
        values[dest] = coord.value
        col_indices[dest] = coord.col
        cursor[coord.row] = dest + 1

    log.debug("Converted COO to CSR: n_row=%d, nnz=%d", n_row, nnz)
    return CsrMatrix(
        n_row=n_row,
        values=_values_array(values),
        col_indices=col_indices,
        row_ptr=row_ptr,
    )


def _values_array(values: list[Any]) -> np.ndarray:
    if not values:
        return np.empty(0, dtype=np.int64)
    return np.asarray(values)


def write_csr_json(csr: CsrMatrix, sink: IO[str]) -> None:
    """Write n_row, values, col_indices and row_ptr as one JSON object.

    Errors raised by ``sink`` (broken pipe, disk full) propagate unchanged.
    """
    json.dump(csr.to_dict(), sink, separators=(",", ":"), allow_nan=False)


def read_csr_json(source: IO[str]) -> CsrMatrix:
    """Load a CsrMatrix written by ``write_csr_json``."""
    data = json.load(source)
    return CsrMatrix(
        n_row=int(data["n_row"]),
        values=_values_array(data["values"]),
        col_indices=np.asarray(data["col_indices"], dtype=np.int64),
        row_ptr=np.asarray(data["row_ptr"], dtype=np.int64),
    )
