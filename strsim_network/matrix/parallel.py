"""Fork-join helpers for splitting row-wise work across worker processes.

A task is called as ``task(rows, *shared)``, where ``rows`` is a (start, stop)
row range and ``shared`` holds the read-only arguments common to every chunk.
Pool workers build ``shared`` once through the pool initializer, so tasks
only carry their row range. Results come back through ``executor.map`` and
are concatenated in submission order, so the merged output never depends on
worker scheduling.
"""

import logging
import multiprocessing as mp
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Any, Callable, Optional, TypeVar

from tqdm import tqdm

log = logging.getLogger(__name__)

R = TypeVar("R")

RowRange = tuple[int, int]

DEFAULT_CHUNK_ROWS = 64

# Shared task arguments of the current pool worker. Only ever set inside a
# worker process, and every pool belongs to a single fork_join call.
_worker_shared: tuple[Any, ...] = ()


def get_optimal_workers(reserve_cores: int = 1) -> int:
    """Worker count for CPU-bound pair evaluation, leaving some cores free."""
    return max(1, mp.cpu_count() - reserve_cores)


def row_chunks(n_rows: int, chunk_rows: int = DEFAULT_CHUNK_ROWS) -> list[RowRange]:
    """Split ``range(n_rows)`` into contiguous half-open row ranges.

    Example:
        >>> row_chunks(5, 2)
        [(0, 2), (2, 4), (4, 5)]
    """
    if chunk_rows < 1:
        raise ValueError(f"chunk_rows must be >= 1, got {chunk_rows}")
    return [
        (start, min(start + chunk_rows, n_rows))
        for start in range(0, n_rows, chunk_rows)
    ]


def _shared_args(
    initializer: Optional[Callable[..., tuple[Any, ...]]],
    initargs: tuple[Any, ...],
) -> tuple[Any, ...]:
    if initializer is None:
        return initargs
    return tuple(initializer(*initargs))


def _install_worker_shared(
    initializer: Optional[Callable[..., tuple[Any, ...]]],
    initargs: tuple[Any, ...],
) -> None:
    global _worker_shared
    _worker_shared = _shared_args(initializer, initargs)


def _call_with_worker_shared(task: Callable[..., list[R]], rows: RowRange) -> list[R]:
    return task(rows, *_worker_shared)


def fork_join(
    task: Callable[..., list[R]],
    chunks: list[RowRange],
    initializer: Optional[Callable[..., tuple[Any, ...]]] = None,
    initargs: tuple[Any, ...] = (),
    num_workers: Optional[int] = None,
    show_progress: bool = False,
    desc: str = "rows",
) -> list[R]:
    """Run ``task`` over every row range and concatenate the results.

    ``initializer(*initargs)`` returns the shared arguments passed to every
    ``task`` call after the row range; without an initializer, ``initargs``
    are passed as-is. With a single worker, or fewer than two chunks per
    worker, everything runs in the calling process with call-local shared
    arguments, and nothing needs to be picklable.

    Args:
        task: Function mapping ``(rows, *shared)`` to that range's results.
        chunks: Row ranges, in the order their results should be merged.
        initializer: Builds the shared arguments, once per process.
        initargs: Arguments for ``initializer``.
        num_workers: Worker processes (default: auto-detect).
        show_progress: Show a tqdm bar counting completed chunks.
        desc: Progress bar label.

    Returns:
        Concatenation of every chunk's results, in chunk order.
    """
    if num_workers is None:
        num_workers = get_optimal_workers()

    if not chunks:
        return []

    progress = tqdm(
        total=len(chunks), desc=desc, disable=not show_progress, leave=False
    )
    merged: list[R] = []

    try:
        # For small workloads, sequential is faster due to pickling overhead
        if num_workers <= 1 or len(chunks) < num_workers * 2:
            log.debug("Running %d chunks in-process", len(chunks))
            shared = _shared_args(initializer, initargs)
            for chunk in chunks:
                merged.extend(task(chunk, *shared))
                progress.update(1)
            return merged

        log.debug(
            "Dispatching %d chunks to %d worker processes",
            len(chunks),
            num_workers,
        )
        with ProcessPoolExecutor(
            max_workers=num_workers,
            initializer=_install_worker_shared,
            initargs=(initializer, initargs),
        ) as executor:
            for part in executor.map(partial(_call_with_worker_shared, task), chunks):
                merged.extend(part)
                progress.update(1)
    finally:
        progress.close()

    return merged
