"""
Configuration for the physical environment (gravitational constant, central body).
"""

from dataclasses import dataclass

from Environment.bodies import G, Body, get_body


@dataclass
class EnvironmentConfig:
    # --- Physics Constants ---
    gravitational_constant: float = G              # [m^3 kg^-1 s^-2]

    # --- Central Body ---
    body_name: str = "Kerbin"

    def create_body(self) -> Body:
        return get_body(self.body_name)
