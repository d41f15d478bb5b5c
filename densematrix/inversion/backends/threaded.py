"""
Threaded backend for matrix inversion.

Same elimination as the CPU reference backend, with each parallel region
split into disjoint blocks on a thread pool:

    forward elimination   rows below the pivot, one barrier per pivot
    normalization         rows
    backward elimination  columns of the accumulator

The pool lives for one solve() call. NumPy releases the GIL inside the
row updates, so large matrices use several cores.
"""

from densematrix.core.result import Result
from densematrix.core.compute.parallel import BlockExecutor, resolve_workers
from densematrix.inversion.design import InversionDesign
from densematrix.inversion.solution import InversionParams
from densematrix.inversion.backends.cpu import _solve


class ThreadedGaussJordanBackend:
    """
    Thread-pool backend using pivotless Gauss-Jordan elimination.

    Produces the same inverse as CPUGaussJordanBackend, bit for bit.
    """

    def __init__(self, workers: int | None = None):
        """
        Parameters
        ----------
        workers : int, optional
            Thread count. None uses one thread per CPU.
        """
        self._workers = resolve_workers(workers)

    @property
    def name(self) -> str:
        return 'threaded_gauss_jordan'

    @property
    def workers(self) -> int:
        return self._workers

    def solve(self, design: InversionDesign) -> Result[InversionParams]:
        """
        Invert the design matrix on a thread pool.

        Raises:
            SingularMatrixError: If a pivot falls below design.zero_limit
        """
        with BlockExecutor(self._workers) as ex:
            return _solve(self, design, ex.map_blocks)
