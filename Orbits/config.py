"""
Configuration for relay-constellation planning.
"""

import dataclasses
from dataclasses import dataclass
from typing import Optional

from Environment.bodies import Body
from Orbits.resonance import ConstellationPlan, plan_constellation
from Solver.config import SolverConfig
from Solver.telemetry import SolverTrace


@dataclass
class ConstellationConfig:
    # --- Ring ---
    n_satellites: int = 3
    altitude_m: float = 750_000.0     # Final circular altitude above the surface

    # --- Insertion ---
    dive: bool = False                # True: (n-1)/n orbit below the ring, released at apoapsis

    # --- Root finder ---
    solver: SolverConfig = dataclasses.field(default_factory=SolverConfig)

    def create_plan(self, body: Body, G: float, trace: Optional[SolverTrace] = None) -> ConstellationPlan:
        return plan_constellation(
            body,
            self.n_satellites,
            self.altitude_m,
            dive=self.dive,
            solver=self.solver,
            G=G,
            trace=trace,
        )
