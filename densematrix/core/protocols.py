"""
Core protocols for densematrix.

These define structural interfaces that backend implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) to allow
flexibility while maintaining type safety.
"""

from typing import Protocol, TypeVar, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a validated design and produce a
    parameter payload. The backend handles the execution strategy
    (vectorized single task, threaded block fan-out).

    Backends are stateless apart from construction-time configuration
    such as the worker count. This makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{strategy}_{algorithm}'
        Examples: 'cpu_gauss_jordan', 'threaded_gauss_jordan'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated input container

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a solution (singularity, etc.)
            ValidationError: If design is invalid for this backend
        """
        ...
