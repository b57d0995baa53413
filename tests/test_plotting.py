import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from Analysis.plotting import plot_constellation, plot_convergence
from Analysis.resonance_sweep import sweep_satellite_counts
from Environment.bodies import get_body
from Orbits.resonance import plan_constellation
from Solver.telemetry import SolverTrace


def test_plot_constellation_draws_both_orbits():
    kerbin = get_body("Kerbin")
    plan = plan_constellation(kerbin, 3, 750_000.0)
    fig = plot_constellation(plan, kerbin)
    ax = fig.axes[0]
    assert len(ax.lines) == 2
    assert ax.get_xlim()[1] >= plan.insertion_orbit.apoapsis
    plt.close(fig)


def test_plot_convergence_one_point_per_iteration():
    trace = SolverTrace()
    plan_constellation(get_body("Minmus"), 4, 200_000.0, trace=trace)
    fig = plot_convergence(trace)
    line = fig.axes[0].lines[0]
    assert len(line.get_xdata()) == trace.n_iterations
    plt.close(fig)


def test_sweep_satellite_counts():
    kerbin = get_body("Kerbin")
    result = sweep_satellite_counts(kerbin, 750_000.0, range(3, 7))
    np.testing.assert_array_equal(result["n_satellites"], [3, 4, 5, 6])
    assert np.all(result["insertion_altitude_m"] > 750_000.0)
    assert np.all(np.diff(result["circularization_dv_mps"]) < 0.0)
