"""
CPU reference backend for matrix inversion.

Gauss-Jordan elimination without pivoting, with each parallel region run
as a single vectorized NumPy operation over the whole index range.
"""

from typing import Any
import numpy as np

from densematrix.core.result import Result
from densematrix.core.compute.timing import Timer
from densematrix.arithmetic.dominance import row_dominance
from densematrix.inversion.design import InversionDesign
from densematrix.inversion.solution import InversionParams
from densematrix.inversion._elimination import Runner, gauss_jordan, run_inline


class CPUGaussJordanBackend:
    """
    CPU backend using pivotless Gauss-Jordan elimination.

    Implements the Backend protocol for InversionDesign -> InversionParams.

    This is the reference implementation; the threaded backend must
    reproduce its output bit for bit.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    @property
    def workers(self) -> int:
        return 1

    def _runner(self) -> Runner:
        return run_inline

    def solve(self, design: InversionDesign) -> Result[InversionParams]:
        """
        Invert the design matrix.

        Algorithm:
            1. Forward elimination with a fixed pivot order
            2. Normalization of every row by its diagonal entry
            3. Backward elimination, bottom-up, columns right to left

        Args:
            design: Validated inversion design

        Returns:
            Result containing InversionParams

        Raises:
            SingularMatrixError: If a pivot falls below design.zero_limit
        """
        return _solve(self, design, self._runner())


def _solve(backend, design: InversionDesign, run: Runner) -> Result[InversionParams]:
    """Shared solve path for every Gauss-Jordan backend."""
    timer = Timer()
    timer.start()

    with timer.section('dominance_check'):
        dominant = bool(np.all(row_dominance(design.data)))

    inverse, pivots = gauss_jordan(design.data, design.zero_limit, run, timer)

    timer.stop()

    warnings_list: list[str] = []
    if not dominant:
        warnings_list.append(
            "Matrix is not diagonally dominant; elimination without pivoting "
            "may be numerically unstable"
        )

    params = InversionParams(
        inverse=inverse,
        pivots=pivots,
        diagonally_dominant=dominant,
    )

    info: dict[str, Any] = {
        'method': 'gauss_jordan',
        'pivoting': 'none',
        'n': design.n,
        'zero_limit': design.zero_limit,
        'workers': backend.workers,
    }

    return Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name=backend.name,
        warnings=tuple(warnings_list),
    )
