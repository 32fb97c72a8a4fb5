"""All-pairs distance evaluation producing a coordinate-list matrix.

Two construction paths produce the same entries in the same order:

1. ``build_coo_matrix``: brute force over the strict lower triangle with any
   distance oracle, N*(N-1)/2 evaluations.
2. ``build_coo_matrix_levenshtein``: a trie index over all strings, walked
   with a Levenshtein DP row per query, for small edit-distance windows.

Both split rows into contiguous chunks evaluated by a process pool and
merge chunk results in row order, so the output is row-major with ascending
columns regardless of worker count.
"""

import logging
import time
from typing import Any, Callable, Optional, Sequence

from strsim_network.index.trie import LevenshteinTrie
from strsim_network.matrix.parallel import (
    DEFAULT_CHUNK_ROWS,
    RowRange,
    fork_join,
    row_chunks,
)
from strsim_network.matrix.types import CooMatrix, Coordinate

log = logging.getLogger(__name__)

DistanceOracle = Callable[[str, str], Any]


def _pairwise_rows(
    rows: RowRange,
    strings: Sequence[str],
    min_dist: Any,
    max_dist: Any,
    oracle: DistanceOracle,
) -> list[Coordinate]:
    """Evaluate every (row, col < row) pair for rows in the half-open range."""
    kept: list[Coordinate] = []
    for row in range(*rows):
        a = strings[row]
        for col in range(row):
            dist = oracle(a, strings[col])
            if min_dist <= dist <= max_dist:
                kept.append(Coordinate(row=row, col=col, value=dist))
    return kept


def _trie_shared(
    strings: Sequence[str], min_dist: int, max_dist: int
) -> tuple[Sequence[str], int, int, LevenshteinTrie]:
    return strings, min_dist, max_dist, LevenshteinTrie.from_strings(strings)


def _trie_rows(
    rows: RowRange,
    strings: Sequence[str],
    min_dist: int,
    max_dist: int,
    trie: LevenshteinTrie,
) -> list[Coordinate]:
    """Query the trie for each row, keeping earlier strings within the window."""
    kept: list[Coordinate] = []
    for row in range(*rows):
        matches = sorted(
            (col, dist)
            for col, dist in trie.search(strings[row], max_dist)
            if col < row and dist >= min_dist
        )
        kept.extend(Coordinate(row=row, col=col, value=dist) for col, dist in matches)
    return kept


def _run(
    task: Callable[..., list[Coordinate]],
    initializer: Optional[Callable[..., tuple[Any, ...]]],
    initargs: tuple[Any, ...],
    n_strings: int,
    n_workers: Optional[int],
    chunk_rows: int,
    show_progress: bool,
) -> CooMatrix:
    t0 = time.monotonic()
    entries = fork_join(
        task,
        row_chunks(n_strings, chunk_rows),
        initializer,
        initargs,
        num_workers=n_workers,
        show_progress=show_progress,
    )

    log.info(
        "Built COO matrix: %d strings, %d pairs considered, %d kept in %.2fs",
        n_strings,
        n_strings * (n_strings - 1) // 2,
        len(entries),
        time.monotonic() - t0,
    )
    return CooMatrix(entries=tuple(entries))


def build_coo_matrix(
    strings: Sequence[str],
    min_dist: Any,
    max_dist: Any,
    oracle: DistanceOracle,
    *,
    n_workers: Optional[int] = None,
    chunk_rows: int = DEFAULT_CHUNK_ROWS,
    show_progress: bool = False,
) -> CooMatrix:
    """Find all pairs of strings whose distance lies in [min_dist, max_dist].

    Every pair (row, col) with 0 <= col < row < len(strings) is evaluated
    exactly once as ``oracle(strings[row], strings[col])``. The diagonal and
    the upper triangle are never visited, since the oracle is assumed
    symmetric.

    Args:
        strings: Input strings; duplicates are allowed.
        min_dist: Inclusive lower bound on retained distances.
        max_dist: Inclusive upper bound on retained distances.
        oracle: Pure, total distance function. Must be picklable when more
            than one worker process is used.
        n_workers: Worker processes (default: auto-detect, 1 = in-process).
        chunk_rows: Rows per dispatched task.
        show_progress: Show a tqdm progress bar on stderr.

    Returns:
        CooMatrix with entries in row-major order (ascending row, then col).

    Raises:
        Whatever the oracle raises; a failing pair aborts the whole build.
    """
    return _run(
        _pairwise_rows,
        None,
        (tuple(strings), min_dist, max_dist, oracle),
        len(strings),
        n_workers,
        chunk_rows,
        show_progress,
    )


def build_coo_matrix_levenshtein(
    strings: Sequence[str],
    max_dist: int,
    min_dist: int = 0,
    *,
    n_workers: Optional[int] = None,
    chunk_rows: int = DEFAULT_CHUNK_ROWS,
    show_progress: bool = False,
) -> CooMatrix:
    """Trie-accelerated equivalent of ``build_coo_matrix`` for Levenshtein.

    Indexes every string in a trie, then for each row walks the trie with a
    Levenshtein DP row and prunes subtrees whose row minimum exceeds
    ``max_dist``. Only matches with col < row are kept. Produces the same
    entries, in the same order, as the brute-force path with the
    Levenshtein oracle.

    Args:
        strings: Input strings; duplicates are allowed.
        max_dist: Inclusive maximum edit distance (small values prune best).
        min_dist: Inclusive minimum edit distance.
        n_workers: Worker processes (default: auto-detect, 1 = in-process).
        chunk_rows: Rows per dispatched task.
        show_progress: Show a tqdm progress bar on stderr.

    Returns:
        CooMatrix with true edit distances as values.
    """
    if max_dist < 0 or min_dist < 0:
        raise ValueError(
            f"Edit distance bounds must be non-negative, got [{min_dist}, {max_dist}]"
        )
    return _run(
        _trie_rows,
        _trie_shared,
        (tuple(strings), min_dist, max_dist),
        len(strings),
        n_workers,
        chunk_rows,
        show_progress,
    )
