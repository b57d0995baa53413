"""
Secant method for finding a zero of a scalar function.

The solver keeps the two most recent iterates and stops either when they are
closer than ``epsilon`` or after ``max_iter`` updates. In both cases the value
returned is one further secant step taken from the final pair of iterates.
"""

from __future__ import annotations

from typing import Callable, Optional

from Solver.telemetry import SolverTrace


class DegenerateSecantError(ZeroDivisionError):
    """Two consecutive function evaluations were equal (flat secant)."""


def _secant_step(f: Callable[[float], float], x_curr: float, x_prev: float) -> float:
    f_curr = float(f(x_curr))
    if f_curr == 0.0:
        # Already on a root: the correction term is zero.
        return x_curr
    f_prev = float(f(x_prev))
    if f_curr == f_prev:
        raise DegenerateSecantError(
            f"secant step is undefined: f({x_curr!r}) == f({x_prev!r}) == {f_curr!r}"
        )
    return x_curr - f_curr * (x_curr - x_prev) / (f_curr - f_prev)


def solve(
    f: Callable[[float], float],
    initial: float,
    pre_initial: float = 0.0,
    epsilon: float = 0.1,
    max_iter: int = 100,
    verbose: bool = False,
    trace: Optional[SolverTrace] = None,
) -> float:
    """Find a zero of ``f`` with the secant method.

    Parameters
    ----------
    f : Callable[[float], float]
        Scalar function whose root is sought.
    initial : float
        Seed for the current iterate.
    pre_initial : float
        Seed for the previous iterate.
    epsilon : float
        Convergence tolerance on the distance between consecutive iterates.
    max_iter : int
        Maximum number of updates before giving up.
    verbose : bool
        Print one line per iteration.
    trace : SolverTrace, optional
        Recorder that receives every iteration and the terminal condition.

    Returns
    -------
    float
        Root estimate. Running out of iterations is not an error; the best
        available estimate is returned and ``trace.termination`` reads
        ``"exhausted"``.

    Raises
    ------
    DegenerateSecantError
        If two consecutive evaluations of ``f`` are equal.
    """
    x_prev = float(pre_initial)
    x_curr = float(initial)
    termination = "exhausted"

    for i in range(max_iter):
        x_prev, x_curr = x_curr, _secant_step(f, x_curr, x_prev)
        delta = x_curr - x_prev

        if verbose:
            print(
                f"[secant] Iter {i:3d} | x_prev: {x_prev:.9g} | "
                f"delta: {delta:.3e} | x_curr: {x_curr:.9g}"
            )
        if trace is not None:
            trace.record(i, x_prev, delta, x_curr)

        if abs(delta) < epsilon:
            termination = "converged"
            break

    result = _secant_step(f, x_curr, x_prev)
    if trace is not None:
        trace.finish(termination, result)
    return result


def to_zero_problem(f: Callable[[float], float], target: float) -> Callable[[float], float]:
    """Turn ``f(x) = target`` into the root-finding problem ``g(x) = 0``."""

    def g(x: float) -> float:
        return f(x) - target

    return g
