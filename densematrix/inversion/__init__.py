"""
Matrix inversion module.

Gauss-Jordan elimination with a fixed pivot order (no pivoting), run on a
vectorized CPU backend or a threaded block backend.

Public API:
    invert(matrix)  - Inverse plus pivots, determinant, timing, diagnostics
"""

from densematrix.inversion.design import InversionDesign
from densematrix.inversion.solution import InversionParams, InversionSolution
from densematrix.inversion.solvers import invert

__all__ = [
    "invert",
    "InversionDesign",
    "InversionParams",
    "InversionSolution",
]
