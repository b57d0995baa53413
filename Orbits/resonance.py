"""
Inverse period problems for relay constellations.

Every solver here expresses "find the orbit whose period is T" as a root of
``period(x) - T`` and hands it to the secant method. For an n-satellite ring
the carrier flies a resonant insertion orbit that touches the final circular
orbit; each lap it returns to the touch point shifted by 1/n of a final-orbit
lap, so releasing one satellite per lap spaces them evenly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from Environment.bodies import G, Body
from Orbits.kepler import Orbit, orbital_period, period_from_semimajor_axis, vis_viva_speed
from Solver.config import SolverConfig
from Solver.secant import to_zero_problem
from Solver.telemetry import SolverTrace


@dataclass
class ConstellationPlan:
    body: Body
    n_satellites: int
    dive: bool
    final_orbit: Orbit
    insertion_orbit: Orbit
    final_period: float
    insertion_period: float
    final_speed: float                  # [m/s] on the circular orbit
    insertion_speed_at_release: float   # [m/s] on the insertion orbit at the release point
    line_of_sight: bool                 # Neighbouring satellites see each other over the limb
    insertion_clears_surface: bool      # Insertion orbit stays above surface and atmosphere

    @property
    def release_radius(self) -> float:
        return self.final_orbit.periapsis

    @property
    def release_interval(self) -> float:
        """Time between consecutive releases [s]: one insertion-orbit lap."""
        return self.insertion_period

    @property
    def circularization_dv(self) -> float:
        """Delta-v [m/s] each satellite needs at release to circularise."""
        return abs(self.final_speed - self.insertion_speed_at_release)

    @property
    def phase_spacing_deg(self) -> float:
        return 360.0 / self.n_satellites


def _solve_for_period(
    semimajor_of: Callable[[float], float],
    period: float,
    mass: float,
    initial: float,
    solver: Optional[SolverConfig],
    G: float,
    trace: Optional[SolverTrace],
) -> float:
    solver = solver or SolverConfig()

    def period_of(x: float) -> float:
        return period_from_semimajor_axis(semimajor_of(x), mass, G)

    return solver.solve(to_zero_problem(period_of, period), initial, trace=trace)


def circular_radius_for_period(
    period: float,
    mass: float,
    initial: float,
    solver: Optional[SolverConfig] = None,
    G: float = G,
    trace: Optional[SolverTrace] = None,
) -> float:
    """Radius [m] of the circular orbit with the given period.

    Periapsis and apoapsis move together, so the free variable is the
    semimajor axis itself. ``initial`` seeds the secant iteration.
    """
    if period <= 0.0:
        raise ValueError(f"period must be positive, got {period!r}")
    return _solve_for_period(lambda r: r, period, mass, initial, solver, G, trace)


def synchronous_orbit_radius(
    body: Body,
    solver: Optional[SolverConfig] = None,
    G: float = G,
    trace: Optional[SolverTrace] = None,
) -> float:
    """Radius [m] of the circular orbit whose period matches the body's rotation."""
    return circular_radius_for_period(
        body.rotation_period, body.mass, initial=body.radius, solver=solver, G=G, trace=trace
    )


def resonant_orbit(
    final_orbit_radius: float,
    n_satellites: int,
    mass: float,
    dive: bool = False,
    solver: Optional[SolverConfig] = None,
    G: float = G,
    trace: Optional[SolverTrace] = None,
) -> Orbit:
    """Insertion orbit for releasing ``n_satellites`` on a circular orbit.

    The default insertion orbit has period (n+1)/n of the final orbit: its
    periapsis is held at ``final_orbit_radius`` and the apoapsis is solved
    for. With ``dive=True`` the period is (n-1)/n: the apoapsis is held at
    ``final_orbit_radius`` and the periapsis is solved for.
    """
    if n_satellites < 1:
        raise ValueError(f"n_satellites must be at least 1, got {n_satellites!r}")
    if dive and n_satellites < 2:
        raise ValueError("a dive insertion orbit needs at least 2 satellites")

    final_period = orbital_period(Orbit.circular(final_orbit_radius), mass, G)
    ratio = (n_satellites - 1 if dive else n_satellites + 1) / n_satellites
    target = ratio * final_period

    def semimajor_of(free_radius: float) -> float:
        return (final_orbit_radius + free_radius) / 2.0

    free_radius = _solve_for_period(
        semimajor_of, target, mass, final_orbit_radius, solver, G, trace
    )
    if dive:
        return Orbit(periapsis=free_radius, apoapsis=final_orbit_radius)
    return Orbit(periapsis=final_orbit_radius, apoapsis=free_radius)


def minimum_relay_radius(body: Body, n_satellites: int) -> float:
    """Smallest ring radius [m] at which neighbouring satellites keep line of sight.

    The chord between two neighbours must pass above the surface and the
    atmosphere: r * cos(pi / n) >= R + h_atm.
    """
    if n_satellites < 3:
        raise ValueError(f"a relay ring needs at least 3 satellites, got {n_satellites!r}")
    return (body.radius + body.atmosphere_height) / np.cos(np.pi / n_satellites)


def plan_constellation(
    body: Body,
    n_satellites: int,
    altitude: float,
    dive: bool = False,
    solver: Optional[SolverConfig] = None,
    G: float = G,
    trace: Optional[SolverTrace] = None,
) -> ConstellationPlan:
    """Work out the final ring and insertion orbit for an n-satellite relay network."""
    if altitude <= 0.0:
        raise ValueError(f"altitude must be positive, got {altitude!r}")

    final_radius = body.altitude_to_radius(altitude)
    final_orbit = Orbit.circular(final_radius)
    insertion_orbit = resonant_orbit(
        final_radius, n_satellites, body.mass, dive=dive, solver=solver, G=G, trace=trace
    )

    line_of_sight = n_satellites >= 3 and final_radius >= minimum_relay_radius(body, n_satellites)
    floor = body.radius + body.atmosphere_height

    return ConstellationPlan(
        body=body,
        n_satellites=n_satellites,
        dive=dive,
        final_orbit=final_orbit,
        insertion_orbit=insertion_orbit,
        final_period=orbital_period(final_orbit, body.mass, G),
        insertion_period=orbital_period(insertion_orbit, body.mass, G),
        final_speed=vis_viva_speed(final_orbit, final_radius, body.mass, G),
        insertion_speed_at_release=vis_viva_speed(insertion_orbit, final_radius, body.mass, G),
        line_of_sight=bool(line_of_sight),
        insertion_clears_surface=insertion_orbit.periapsis > floor,
    )
