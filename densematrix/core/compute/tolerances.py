"""
Numerical thresholds and tolerance tiers.

ZERO_LIMIT is the pivot threshold used by Gauss-Jordan inversion: a pivot
whose magnitude falls below it is treated as zero and the inversion fails.
It is a default only; every inversion accepts its own zero_limit.

The tolerance tiers describe how closely derived results are expected to
match exact arithmetic. Matrix.allclose() defaults to CPU_FP64, and an
InversionSolution reports the tier that fits its conditioning.
"""

from dataclasses import dataclass


# Pivot magnitudes below this are considered zero during inversion.
ZERO_LIMIT: float = 1.0e-9


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision, well-conditioned operands
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned',
)

# Double precision after pivotless elimination on ill-conditioned input
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# Condition number above which results fall into the ill-conditioned tier.
ILL_CONDITIONED_THRESHOLD = 1e4


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a computed result."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
