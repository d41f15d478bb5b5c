"""
Inversion backends.

Available backends:
    CPUGaussJordanBackend: Reference implementation, one vectorized task per phase
    ThreadedGaussJordanBackend: Same elimination, row/column blocks on a thread pool
"""

from densematrix.inversion.backends.cpu import CPUGaussJordanBackend
from densematrix.inversion.backends.threaded import ThreadedGaussJordanBackend

__all__ = [
    "CPUGaussJordanBackend",
    "ThreadedGaussJordanBackend",
]
