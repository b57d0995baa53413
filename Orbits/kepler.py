"""
Two-body orbit geometry: semimajor axis, Keplerian period and vis-viva speed.

All radii are measured from the centre of the central body [m].
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from Environment.bodies import G, Body


@dataclass(frozen=True)
class Orbit:
    periapsis: float
    apoapsis: float

    def __post_init__(self):
        if self.periapsis <= 0.0 or self.apoapsis <= 0.0:
            raise ValueError(
                f"orbit radii must be positive, got periapsis={self.periapsis!r}, apoapsis={self.apoapsis!r}"
            )
        if self.periapsis > self.apoapsis:
            raise ValueError(
                f"periapsis ({self.periapsis!r}) must not exceed apoapsis ({self.apoapsis!r})"
            )

    @classmethod
    def circular(cls, radius: float) -> "Orbit":
        return cls(periapsis=radius, apoapsis=radius)

    @classmethod
    def from_altitudes(cls, body: Body, periapsis_alt: float, apoapsis_alt: float) -> "Orbit":
        """Build an orbit from altitudes above the surface of ``body``."""
        return cls(
            periapsis=body.altitude_to_radius(periapsis_alt),
            apoapsis=body.altitude_to_radius(apoapsis_alt),
        )

    @property
    def semimajor_axis(self) -> float:
        return semimajor_axis(self)

    @property
    def eccentricity(self) -> float:
        return (self.apoapsis - self.periapsis) / (self.apoapsis + self.periapsis)

    @property
    def is_circular(self) -> bool:
        return self.periapsis == self.apoapsis


def semimajor_axis(orbit: Orbit) -> float:
    return (orbit.apoapsis + orbit.periapsis) / 2.0


def period_from_semimajor_axis(a: float, mass: float, G: float = G) -> float:
    """Kepler's third law: T = 2*pi*sqrt(a^3 / (G*M)).

    Parameters
    ----------
    a : float
        Semimajor axis [m].
    mass : float
        Mass of the central body [kg].
    G : float
        Gravitational constant [m^3 kg^-1 s^-2].

    Returns
    -------
    float
        Orbital period [s].
    """
    return float(2.0 * np.pi * np.sqrt(a**3 / (G * mass)))


def orbital_period(orbit: Orbit, mass: float, G: float = G) -> float:
    """Orbital period [s] of ``orbit`` around a body of ``mass`` [kg]."""
    return period_from_semimajor_axis(semimajor_axis(orbit), mass, G)


def vis_viva_speed(orbit: Orbit, radius: float, mass: float, G: float = G) -> float:
    """Speed [m/s] on ``orbit`` at distance ``radius`` from the centre."""
    if not orbit.periapsis <= radius <= orbit.apoapsis:
        raise ValueError(
            f"radius {radius!r} lies outside the orbit [{orbit.periapsis!r}, {orbit.apoapsis!r}]"
        )
    mu = G * mass
    return float(np.sqrt(mu * (2.0 / radius - 1.0 / orbit.semimajor_axis)))
