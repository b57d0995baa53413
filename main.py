"""
Entry point to plan a relay constellation end to end.

This looks up the central body, solves for the resonant insertion orbit with
the secant root finder, prints a short summary and optionally writes the
solver trace and plan to text files and plots the geometry.
"""

from __future__ import annotations

from typing import Optional

from Environment.config import EnvironmentConfig
from Environment.bodies import Body

from Orbits.config import ConstellationConfig
from Orbits.resonance import ConstellationPlan, minimum_relay_radius, synchronous_orbit_radius

from Solver.telemetry import SolverTrace

from Logging.config import LoggingConfig
from Logging.generate_logs import save_trace_to_txt, save_plan_to_txt

from Analysis.plotting import plot_constellation, plot_convergence


def main_orchestrator(
    env_config: Optional[EnvironmentConfig] = None,
    constellation_config: Optional[ConstellationConfig] = None,
    log_config: Optional[LoggingConfig] = None,
):
    # 1. Instantiate all config objects if not provided
    env_config = env_config or EnvironmentConfig()
    constellation_config = constellation_config or ConstellationConfig()
    log_config = log_config or LoggingConfig()

    # 2. Central body from the registry (fails loudly on unknown names)
    body = env_config.create_body()

    # 3. Solve the insertion orbit, keeping the secant iterations for inspection
    trace = SolverTrace()
    plan = constellation_config.create_plan(body, env_config.gravitational_constant, trace=trace)

    return body, plan, trace, env_config, log_config


def print_summary(body: Body, plan: ConstellationPlan, trace: SolverTrace, env_config: EnvironmentConfig):
    """Prints a summary of the constellation plan."""
    def km(radius_m: float) -> str:
        return f"{body.radius_to_altitude(radius_m) / 1000.0:.3f} km"

    print("\n=== Relay constellation plan ===")
    print(f"Body            : {body.name}")
    print(f"Satellites      : {plan.n_satellites} ({plan.phase_spacing_deg:.1f} deg apart)")
    print(f"Insertion type  : {'dive (n-1)/n' if plan.dive else 'resonant (n+1)/n'}")
    print(f"Final altitude  : {km(plan.final_orbit.periapsis)}")
    print(f"Final period    : {plan.final_period:.2f} s")
    print(f"Insertion Pe    : {km(plan.insertion_orbit.periapsis)}")
    print(f"Insertion Ap    : {km(plan.insertion_orbit.apoapsis)}")
    print(f"Insertion period: {plan.insertion_period:.2f} s")
    print(f"Release every   : {plan.release_interval:.2f} s")
    print(f"Circularize dv  : {plan.circularization_dv:.2f} m/s")
    print(f"Solver          : {trace.termination} after {trace.n_iterations} iterations")

    if plan.n_satellites >= 3:
        print(f"Min LOS altitude: {km(minimum_relay_radius(body, plan.n_satellites))}")
    if plan.line_of_sight:
        print("Neighbouring satellites have line of sight.")
    else:
        print("WARNING: neighbouring satellites are blocked by the body or its atmosphere.")
    if not plan.insertion_clears_surface:
        print("WARNING: insertion orbit dips into the surface or atmosphere.")

    sync_radius = synchronous_orbit_radius(body, G=env_config.gravitational_constant)
    print(f"Synchronous alt : {km(sync_radius)}")


def main():
    body, plan, trace, env_config, log_config = main_orchestrator()
    print_summary(body, plan, trace, env_config)

    if log_config.save_logs:
        save_trace_to_txt(trace, log_config.trace_filename)
        save_plan_to_txt(plan, log_config.plan_filename)
    if log_config.plot_constellation:
        plot_constellation(plan, body, show=not log_config.plot_convergence)
    if log_config.plot_convergence:
        plot_convergence(trace, show=True)


if __name__ == "__main__":
    main()
