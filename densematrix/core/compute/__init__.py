"""
Shared compute infrastructure for densematrix.

This module provides timing utilities, numerical thresholds and the
row-block thread fan-out shared by the arithmetic and inversion kernels.

Submodules:
    timing: Execution timing utilities
    tolerances: Zero limit and tolerance tiers
    precision: Machine epsilon, closeness and conditioning
    parallel: Backend selection and disjoint block execution
"""

from densematrix.core.compute.timing import Timer
from densematrix.core.compute.tolerances import ZERO_LIMIT, ToleranceTier
from densematrix.core.compute.parallel import (
    BackendChoice,
    BlockExecutor,
    partition,
    resolve_workers,
    select_backend,
)

__all__ = [
    # Timing
    "Timer",
    # Thresholds
    "ZERO_LIMIT",
    "ToleranceTier",
    # Parallel execution
    "BackendChoice",
    "BlockExecutor",
    "partition",
    "resolve_workers",
    "select_backend",
]
