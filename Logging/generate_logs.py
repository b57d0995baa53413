"""
Functions for saving solver traces and constellation plans as text.
"""
from __future__ import annotations

from Orbits.resonance import ConstellationPlan
from Solver.telemetry import SolverTrace


def save_trace_to_txt(trace: SolverTrace, filename: str):
    """Write secant iterations to a text (CSV-style) file for analysis."""
    with open(filename, "w") as f:
        f.write(f"# termination={trace.termination or 'n/a'},result={_format_optional(trace.result)}\n")
        f.write("# iteration,x_prev,delta,x_curr\n")
        for i in range(trace.n_iterations):
            f.write(
                f"{trace.iteration[i]},{trace.x_prev[i]:.9e},{trace.delta[i]:.9e},{trace.x_curr[i]:.9e}\n"
            )
    print(f"Saved solver trace to {filename}")


def save_plan_to_txt(plan: ConstellationPlan, filename: str):
    """Write the key numbers of a constellation plan as key,value rows."""
    body = plan.body
    rows = [
        ("body", body.name),
        ("n_satellites", plan.n_satellites),
        ("dive", plan.dive),
        ("final_radius_m", f"{plan.final_orbit.periapsis:.3f}"),
        ("final_altitude_m", f"{body.radius_to_altitude(plan.final_orbit.periapsis):.3f}"),
        ("final_period_s", f"{plan.final_period:.3f}"),
        ("insertion_periapsis_m", f"{plan.insertion_orbit.periapsis:.3f}"),
        ("insertion_apoapsis_m", f"{plan.insertion_orbit.apoapsis:.3f}"),
        ("insertion_period_s", f"{plan.insertion_period:.3f}"),
        ("release_interval_s", f"{plan.release_interval:.3f}"),
        ("circularization_dv_mps", f"{plan.circularization_dv:.3f}"),
        ("line_of_sight", plan.line_of_sight),
        ("insertion_clears_surface", plan.insertion_clears_surface),
    ]
    with open(filename, "w") as f:
        f.write("# key,value\n")
        for key, value in rows:
            f.write(f"{key},{value}\n")
    print(f"Saved constellation plan to {filename}")


def _format_optional(value) -> str:
    return "n/a" if value is None else f"{value:.9e}"
