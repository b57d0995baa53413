"""
Configuration for the secant root finder.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from Solver.secant import solve
from Solver.telemetry import SolverTrace


@dataclass
class SolverConfig:
    # --- Seeds ---
    pre_initial: float = 0.0      # Second seed; the caller supplies the first.

    # --- Termination ---
    epsilon: float = 0.1          # Stop when consecutive iterates are closer than this.
    max_iter: int = 100

    # --- Output ---
    verbose: bool = False         # Print one line per iteration.

    def __post_init__(self):
        if not self.epsilon > 0.0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon!r}")
        if self.max_iter < 0:
            raise ValueError(f"max_iter must be non-negative, got {self.max_iter!r}")

    def solve(
        self,
        f: Callable[[float], float],
        initial: float,
        trace: Optional[SolverTrace] = None,
    ) -> float:
        return solve(
            f,
            initial,
            pre_initial=self.pre_initial,
            epsilon=self.epsilon,
            max_iter=self.max_iter,
            verbose=self.verbose,
            trace=trace,
        )
