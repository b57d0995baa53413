"""
Minimal in-memory recorder for secant iterations.
"""

from typing import Dict

import numpy as np


class SolverTrace:
    """
    Minimal in-memory recorder for secant iterations.
    """

    def __init__(self):
        self.iteration = []
        self.x_prev = []
        self.delta = []
        self.x_curr = []
        self.termination = ""
        self.result = None

    def record(self, iteration: int, x_prev: float, delta: float, x_curr: float):
        self.iteration.append(int(iteration))
        self.x_prev.append(float(x_prev))
        self.delta.append(float(delta))
        self.x_curr.append(float(x_curr))

    def finish(self, termination: str, result: float):
        self.termination = termination
        self.result = float(result)

    @property
    def converged(self) -> bool:
        return self.termination == "converged"

    @property
    def n_iterations(self) -> int:
        return len(self.iteration)

    def as_arrays(self) -> Dict[str, np.ndarray]:
        """Return the recorded columns as numpy arrays (for plotting)."""
        return {
            "iteration": np.asarray(self.iteration, dtype=int),
            "x_prev": np.asarray(self.x_prev, dtype=float),
            "delta": np.asarray(self.delta, dtype=float),
            "x_curr": np.asarray(self.x_curr, dtype=float),
        }
