"""
Row-block fan-out for data-parallel matrix kernels.

A parallel region is split into disjoint, contiguous index blocks. Each
block is one task on a thread pool; BlockExecutor.map_blocks() returns only
after every task of the region has finished, which is the barrier between
phases. Tasks must write only the cells of their own block.

NumPy releases the GIL inside its array kernels, so row blocks of a large
matrix do run concurrently on separate cores.
"""

from __future__ import annotations

import os
import warnings
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Literal

from densematrix.core.exceptions import ValidationError
from densematrix.core.validation import check_size


BackendChoice = Literal['auto', 'cpu', 'threaded']

# Smallest leading dimension for which 'auto' picks the threaded backend.
PARALLEL_MIN_ROWS: int = 256


def cpu_count() -> int:
    """Number of CPUs usable by this process (at least 1)."""
    return os.cpu_count() or 1


def resolve_workers(workers: int | None) -> int:
    """
    Turn a worker request into a concrete thread count.

    Args:
        workers: Requested thread count, or None for one per CPU

    Raises:
        ValidationError: If workers is not a positive integer
    """
    if workers is None:
        return cpu_count()
    workers = check_size(workers, 'workers')
    if workers < 1:
        raise ValidationError(f"workers: expected at least 1, got {workers}")
    return workers


def partition(start: int, stop: int, n_blocks: int) -> list[slice]:
    """
    Split [start, stop) into at most n_blocks contiguous, disjoint slices.

    Block sizes differ by at most one. Empty ranges produce no blocks.
    """
    length = stop - start
    if length <= 0:
        return []
    n_blocks = max(1, min(n_blocks, length))
    base, extra = divmod(length, n_blocks)
    blocks = []
    lo = start
    for b in range(n_blocks):
        hi = lo + base + (1 if b < extra else 0)
        blocks.append(slice(lo, hi))
        lo = hi
    return blocks


class BlockExecutor:
    """
    Thread pool scoped to a single matrix operation.

    Usage:
        def scale(rows):
            out[rows] = 2.0 * a[rows]

        with BlockExecutor(workers=4) as ex:
            ex.map_blocks(scale, 0, nrows)
            ex.map_blocks(...)   # starts only after the previous region joined
    """

    def __init__(self, workers: int):
        self.workers = workers
        self._pool: ThreadPoolExecutor | None = None

    def __enter__(self) -> BlockExecutor:
        if self.workers > 1:
            self._pool = ThreadPoolExecutor(
                max_workers=self.workers,
                thread_name_prefix='densematrix',
            )
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._pool is not None:
            self._pool.shutdown(wait=True)
            self._pool = None

    def map_blocks(self, fn: Callable[[slice], None], start: int, stop: int) -> None:
        """
        Run fn over disjoint blocks of [start, stop) and wait for all of them.

        The first exception raised by any block (in block order) is re-raised
        once every block has finished, so no task is still writing when the
        caller sees the error.
        """
        blocks = partition(start, stop, self.workers)
        if self._pool is None or len(blocks) <= 1:
            for block in blocks:
                fn(block)
            return

        futures = [self._pool.submit(fn, block) for block in blocks]
        wait(futures)
        for future in futures:
            future.result()


def select_backend(
    backend: BackendChoice,
    leading_dim: int,
    workers: int | None,
    *,
    stacklevel: int = 2,
) -> tuple[str, int]:
    """
    Resolve a backend request to ('cpu', 1) or ('threaded', n_workers).

    Args:
        backend: 'auto', 'cpu' or 'threaded'
        leading_dim: Number of rows the parallel regions fan out over
        workers: Requested thread count, None for one per CPU
        stacklevel: Passed to warnings.warn() for the single-CPU fallback.
            Public entry points set it so the warning names their caller.

    Raises:
        ValidationError: If backend is unknown or workers is invalid
    """
    if backend not in ('auto', 'cpu', 'threaded'):
        raise ValidationError(
            f"Unknown backend: {backend!r}. Must be 'auto', 'cpu', or 'threaded'."
        )
    n_workers = resolve_workers(workers)

    if backend == 'cpu':
        return 'cpu', 1

    if backend == 'auto':
        if leading_dim >= PARALLEL_MIN_ROWS and n_workers > 1:
            return 'threaded', n_workers
        return 'cpu', 1

    if n_workers == 1 and workers is None:
        warnings.warn(
            "Only one CPU available, using the cpu backend instead of 'threaded'",
            RuntimeWarning,
            stacklevel=stacklevel,
        )
        return 'cpu', 1
    return 'threaded', n_workers
