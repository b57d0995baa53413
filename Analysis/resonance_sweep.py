"""
Sweep the number of satellites in a relay ring and compare insertion orbits.

For each n the resonant insertion orbit is solved for, and the apoapsis
altitude and circularisation delta-v are plotted against n.
"""
import sys
from pathlib import Path

# Allow running this file directly (e.g. `python3 Analysis/resonance_sweep.py`).
if __package__ in (None, ""):
    _repo_root = Path(__file__).resolve().parents[1]
    if str(_repo_root) not in sys.path:
        sys.path.insert(0, str(_repo_root))

from typing import Dict, Iterable, Optional

import numpy as np
import matplotlib.pyplot as plt

from Environment.bodies import G, Body
from Environment.config import EnvironmentConfig
from Orbits.resonance import plan_constellation
from Solver.config import SolverConfig


def sweep_satellite_counts(
    body: Body,
    altitude: float,
    counts: Iterable[int],
    dive: bool = False,
    solver: Optional[SolverConfig] = None,
    G: float = G,
) -> Dict[str, np.ndarray]:
    """Plan one constellation per satellite count and collect the key numbers."""
    n_values = []
    insertion_alt = []
    dv = []
    for n in counts:
        plan = plan_constellation(body, int(n), altitude, dive=dive, solver=solver, G=G)
        free_radius = plan.insertion_orbit.periapsis if dive else plan.insertion_orbit.apoapsis
        n_values.append(int(n))
        insertion_alt.append(body.radius_to_altitude(free_radius))
        dv.append(plan.circularization_dv)
    return {
        "n_satellites": np.array(n_values, dtype=int),
        "insertion_altitude_m": np.array(insertion_alt, dtype=float),
        "circularization_dv_mps": np.array(dv, dtype=float),
    }


def main():
    env_config = EnvironmentConfig()
    body = env_config.create_body()
    altitude = 750_000.0
    counts = np.arange(3, 13)

    print(f"Sweeping n = {counts[0]}..{counts[-1]} around {body.name} at {altitude / 1000:.0f} km ...")
    result = sweep_satellite_counts(body, altitude, counts, G=env_config.gravitational_constant)

    # --- Plot 1: Insertion apoapsis vs n ---
    plt.figure(figsize=(10, 5))
    plt.plot(result["n_satellites"], result["insertion_altitude_m"] / 1000.0, marker="o", lw=2)
    plt.axhline(altitude / 1000.0, color="gray", ls="--", label="Final orbit")
    plt.xlabel("Satellites in ring")
    plt.ylabel("Insertion apoapsis altitude [km]")
    plt.title(f"Resonant insertion orbit vs ring size ({body.name})")
    plt.legend()
    plt.grid(True)
    plt.tight_layout()

    # --- Plot 2: Circularisation delta-v vs n ---
    plt.figure(figsize=(10, 5))
    plt.plot(result["n_satellites"], result["circularization_dv_mps"], marker="o", lw=2)
    plt.xlabel("Satellites in ring")
    plt.ylabel("Circularisation delta-v [m/s]")
    plt.title("Delta-v per satellite at release")
    plt.grid(True)
    plt.tight_layout()

    plt.show()


if __name__ == "__main__":
    main()
