"""
Static registry of the stock celestial bodies.

Values are the in-game figures: mass [kg], equatorial radius [m], sidereal
rotation period [s] and atmosphere height [m] (0 for airless bodies).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


G = 6.67408e-11  # Gravitational constant used by the game [m^3 kg^-1 s^-2]


class UnknownBodyError(KeyError):
    """Lookup of a body name that is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"celestial body {name!r} not found; known bodies: {', '.join(known_bodies())}"
        )

    def __str__(self) -> str:
        return self.args[0]


@dataclass(frozen=True)
class Body:
    name: str
    mass: float
    radius: float
    rotation_period: float
    atmosphere_height: float = 0.0
    parent: Optional[str] = None

    def gravitational_parameter(self, G: float) -> float:
        return G * self.mass

    def altitude_to_radius(self, altitude: float) -> float:
        """Convert an altitude above the surface to a radius from the centre [m]."""
        return self.radius + altitude

    def radius_to_altitude(self, radius: float) -> float:
        """Convert a radius from the centre to an altitude above the surface [m]."""
        return radius - self.radius

    @property
    def has_atmosphere(self) -> bool:
        return self.atmosphere_height > 0.0


_BODIES = (
    Body("Kerbol", 1.7565459e28, 261_600_000.0, 432_000.0, 600_000.0),
    Body("Moho", 2.5263314e21, 250_000.0, 1_210_000.0, parent="Kerbol"),
    Body("Eve", 1.2243980e23, 700_000.0, 80_500.0, 90_000.0, parent="Kerbol"),
    Body("Gilly", 1.2420363e17, 13_000.0, 28_255.0, parent="Eve"),
    Body("Kerbin", 5.2915158e22, 600_000.0, 21_549.425, 70_000.0, parent="Kerbol"),
    Body("Mun", 9.7599066e20, 200_000.0, 138_984.38, parent="Kerbin"),
    Body("Minmus", 2.6457580e19, 60_000.0, 40_400.0, parent="Kerbin"),
    Body("Duna", 4.5154270e21, 320_000.0, 65_517.859, 50_000.0, parent="Kerbol"),
    Body("Ike", 2.7821615e20, 130_000.0, 65_517.862, parent="Duna"),
    Body("Dres", 3.2190937e20, 138_000.0, 34_800.0, parent="Kerbol"),
    Body("Jool", 4.2332127e24, 6_000_000.0, 36_000.0, 200_000.0, parent="Kerbol"),
    Body("Laythe", 2.9397311e22, 500_000.0, 52_980.879, 50_000.0, parent="Jool"),
    Body("Vall", 3.1087655e21, 300_000.0, 105_962.09, parent="Jool"),
    Body("Tylo", 4.2332127e22, 600_000.0, 211_926.36, parent="Jool"),
    Body("Bop", 3.7261090e19, 65_000.0, 544_507.43, parent="Jool"),
    Body("Pol", 1.0813507e19, 44_000.0, 901_902.62, parent="Jool"),
    Body("Eeloo", 1.1149224e21, 210_000.0, 19_460.0, parent="Kerbol"),
)

# Read-only view; populated once at import time.
BODIES: Mapping[str, Body] = MappingProxyType({body.name: body for body in _BODIES})

_BY_LOWER_NAME = {name.lower(): body for name, body in BODIES.items()}


def known_bodies() -> Tuple[str, ...]:
    return tuple(sorted(BODIES))


def get_body(name: str) -> Body:
    """Return the registered body called ``name`` (case-insensitive).

    Raises
    ------
    UnknownBodyError
        If no body of that name is registered.
    """
    body = _BY_LOWER_NAME.get(str(name).strip().lower())
    if body is None:
        raise UnknownBodyError(name)
    return body
