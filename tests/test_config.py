import pytest
from unittest.mock import patch

from Environment.bodies import G, UnknownBodyError, get_body
from Environment.config import EnvironmentConfig
from Logging.config import LoggingConfig
from Orbits.config import ConstellationConfig
from Solver.config import SolverConfig


def test_config_default_values():
    """Spot-check the defaults of every config dataclass."""
    env = EnvironmentConfig()
    assert env.gravitational_constant == 6.67408e-11
    assert env.body_name == "Kerbin"

    constellation = ConstellationConfig()
    assert constellation.n_satellites == 3
    assert constellation.altitude_m == 750_000.0
    assert constellation.dive is False
    assert isinstance(constellation.solver, SolverConfig)

    log = LoggingConfig()
    assert log.save_logs is True
    assert log.trace_filename.endswith(".txt")
    assert log.plan_filename.endswith(".txt")


def test_config_custom_values():
    env = EnvironmentConfig(gravitational_constant=1.0, body_name="Duna")
    constellation = ConstellationConfig(
        n_satellites=5, altitude_m=1.0e6, dive=True, solver=SolverConfig(epsilon=1e-3, verbose=True)
    )

    assert env.gravitational_constant == 1.0
    assert env.create_body() is get_body("Duna")
    assert constellation.n_satellites == 5
    assert constellation.dive is True
    assert constellation.solver.epsilon == 1e-3
    assert constellation.solver.verbose is True


def test_solver_configs_are_not_shared():
    a = ConstellationConfig()
    b = ConstellationConfig()
    assert a.solver is not b.solver


def test_environment_config_unknown_body():
    with pytest.raises(UnknownBodyError):
        EnvironmentConfig(body_name="Vulcan").create_body()


@patch("Orbits.config.plan_constellation", autospec=True)
def test_create_plan_delegation(mock_plan):
    """create_plan forwards every field to plan_constellation."""
    cfg = ConstellationConfig(n_satellites=4, altitude_m=500_000.0, dive=True)
    body = get_body("Mun")

    plan = cfg.create_plan(body, G)

    mock_plan.assert_called_once_with(
        body,
        4,
        500_000.0,
        dive=True,
        solver=cfg.solver,
        G=G,
        trace=None,
    )
    assert plan is mock_plan.return_value
