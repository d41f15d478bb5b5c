"""
Inversion solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from densematrix.core.result import Result
from densematrix.core.matrix import Matrix
from densematrix.core.compute.precision import condition_number
from densematrix.core.compute.tolerances import (
    ILL_CONDITIONED_THRESHOLD,
    ToleranceTier,
    select_tolerance,
)

if TYPE_CHECKING:
    from densematrix.inversion.design import InversionDesign


@dataclass(frozen=True)
class InversionParams:
    """
    Parameter payload for Gauss-Jordan inversion.

    Attributes:
        inverse: n x n inverse
        pivots: Diagonal of the working matrix after forward elimination,
            in elimination order (no row exchanges were made)
        diagonally_dominant: Whether the input passed the row dominance check
    """
    inverse: NDArray[np.float64]
    pivots: NDArray[np.float64]
    diagonally_dominant: bool


@dataclass
class InversionSolution:
    """
    User-facing inversion results.

    Wraps Result[InversionParams] and provides convenient accessors.
    """
    _result: Result[InversionParams]
    _design: 'InversionDesign'

    @property
    def inverse(self) -> Matrix:
        """The inverse as a new Matrix (independent copy on every access)."""
        return Matrix._adopt(self._result.params.inverse.copy())

    @property
    def inverse_array(self) -> NDArray[np.float64]:
        """Copy of the inverse as a float64 array."""
        return self._result.params.inverse.copy()

    @property
    def pivots(self) -> NDArray[np.float64]:
        """Pivots after forward elimination, shape (n,)."""
        return self._result.params.pivots.copy()

    @property
    def determinant(self) -> float:
        """Product of the pivots; 1.0 for an empty matrix."""
        return float(np.prod(self._result.params.pivots))

    @property
    def diagonally_dominant(self) -> bool:
        return self._result.params.diagonally_dominant

    @cached_property
    def condition_number(self) -> float:
        """2-norm condition number of the input, computed on first access."""
        return condition_number(self._design.data)

    @property
    def is_ill_conditioned(self) -> bool:
        return self.condition_number > ILL_CONDITIONED_THRESHOLD

    @property
    def tolerance(self) -> ToleranceTier:
        """Tolerance tier for comparing this inverse against a reference."""
        return select_tolerance(self.is_ill_conditioned)

    # --- Metadata ---

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text report of the inversion."""
        lines = [
            "Gauss-Jordan Inversion",
            "======================",
            f"Order:                 {self.n}",
            f"Backend:               {self.backend_name} (workers={self.info['workers']})",
            f"Pivoting:              {self.info['pivoting']}",
            f"Zero limit:            {self.info['zero_limit']:g}",
            f"Diagonally dominant:   {'yes' if self.diagonally_dominant else 'no'}",
            f"Determinant:           {self.determinant:.6g}",
        ]
        if self.n > 0:
            piv = np.abs(self._result.params.pivots)
            lines.append(f"Smallest |pivot|:      {piv.min():.6g}")
            lines.append(f"Tolerance tier:        {self.tolerance.name}")

        if self.timing is not None:
            lines.append("")
            lines.append("Timing (seconds):")
            for phase in ('forward_elimination', 'normalization', 'backward_elimination'):
                if phase in self.timing:
                    lines.append(f"  {phase:<22} {self.timing[phase]:.6f}")
            lines.append(f"  {'total':<22} {self.timing['total_seconds']:.6f}")

        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            for w in self.warnings:
                lines.append(f"  {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"InversionSolution(n={self.n}, backend={self.backend_name!r}, "
            f"determinant={self.determinant:.6g})"
        )
