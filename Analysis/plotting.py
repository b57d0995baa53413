"""
Functions for plotting constellation geometry and solver convergence.
"""
import numpy as np
import matplotlib.pyplot as plt

from Environment.bodies import Body
from Orbits.resonance import ConstellationPlan
from Solver.telemetry import SolverTrace


def _ellipse_points(periapsis: float, apoapsis: float, n: int = 400):
    """Points of an orbit with the body at the focus and periapsis on +x."""
    a = 0.5 * (periapsis + apoapsis)
    e = (apoapsis - periapsis) / (apoapsis + periapsis)
    nu = np.linspace(0.0, 2.0 * np.pi, n)
    r = a * (1.0 - e**2) / (1.0 + e * np.cos(nu))
    return r * np.cos(nu), r * np.sin(nu)


def plot_constellation(plan: ConstellationPlan, body: Body, show: bool = False):
    """Top-down view of the body, the final ring, the insertion orbit and the slots."""
    fig, ax = plt.subplots(figsize=(7, 7))

    ax.add_patch(plt.Circle((0.0, 0.0), body.radius, color="tab:blue", alpha=0.6, label=body.name))
    if body.has_atmosphere:
        ax.add_patch(
            plt.Circle((0.0, 0.0), body.radius + body.atmosphere_height, color="lightblue",
                       alpha=0.3, label="Atmosphere")
        )

    r_final = plan.final_orbit.periapsis
    x_f, y_f = _ellipse_points(r_final, r_final)
    ax.plot(x_f, y_f, color="tab:green", lw=1.5, label="Final orbit")

    x_i, y_i = _ellipse_points(plan.insertion_orbit.periapsis, plan.insertion_orbit.apoapsis)
    if plan.dive:
        # Release happens at apoapsis; rotate so it sits on +x like the slots.
        x_i, y_i = -x_i, -y_i
    ax.plot(x_i, y_i, color="tab:orange", lw=1.5, ls="--", label="Insertion orbit")

    # Slot angles measured from the release point.
    angles = np.deg2rad(plan.phase_spacing_deg * np.arange(plan.n_satellites))
    ax.scatter(r_final * np.cos(angles), r_final * np.sin(angles), color="black", s=30, zorder=3,
               label="Satellites")

    lim = 1.1 * max(plan.insertion_orbit.apoapsis, r_final)
    ax.set_xlim(-lim, lim)
    ax.set_ylim(-lim, lim)
    ax.set_aspect("equal")
    ax.set_xlabel("x [m]")
    ax.set_ylabel("y [m]")
    ax.set_title(f"{plan.n_satellites}-satellite relay ring around {body.name}")
    ax.legend(loc="upper right")
    fig.tight_layout()
    if show:
        plt.show()
    return fig


def plot_convergence(trace: SolverTrace, show: bool = False):
    """Step size |x_curr - x_prev| per secant iteration on a log axis."""
    data = trace.as_arrays()
    fig, ax = plt.subplots(figsize=(7, 4))
    steps = np.abs(data["delta"])
    # Exact hits give a zero step; keep them visible on the log axis.
    steps = np.where(steps > 0.0, steps, np.finfo(float).tiny)
    ax.semilogy(data["iteration"], steps, marker="o", color="tab:red")
    ax.set_xlabel("Iteration")
    ax.set_ylabel("|delta| [m]")
    ax.set_title(f"Secant convergence ({trace.termination or 'running'})")
    ax.grid(True, which="both", alpha=0.3)
    fig.tight_layout()
    if show:
        plt.show()
    return fig
