import pytest

import main
from Environment.bodies import UnknownBodyError
from Environment.config import EnvironmentConfig
from Logging.config import LoggingConfig
from Orbits.config import ConstellationConfig


def test_main_orchestrator_defaults():
    body, plan, trace, env_config, log_config = main.main_orchestrator()

    assert body.name == "Kerbin"
    assert plan.n_satellites == 3
    assert plan.insertion_orbit.apoapsis > plan.final_orbit.periapsis
    assert trace.converged
    assert isinstance(env_config, EnvironmentConfig)
    assert isinstance(log_config, LoggingConfig)


def test_main_orchestrator_custom_body():
    body, plan, trace, _, _ = main.main_orchestrator(
        env_config=EnvironmentConfig(body_name="Mun"),
        constellation_config=ConstellationConfig(n_satellites=4, altitude_m=300_000.0),
    )
    assert body.name == "Mun"
    assert plan.phase_spacing_deg == pytest.approx(90.0)
    assert plan.line_of_sight


def test_main_orchestrator_unknown_body():
    with pytest.raises(UnknownBodyError):
        main.main_orchestrator(env_config=EnvironmentConfig(body_name="Krypton"))


def test_print_summary(capsys):
    body, plan, trace, env_config, _ = main.main_orchestrator()
    main.print_summary(body, plan, trace, env_config)
    out = capsys.readouterr().out
    assert "=== Relay constellation plan ===" in out
    assert "Kerbin" in out
    assert "converged" in out
    assert "line of sight" in out


def test_main_writes_logs_and_plots(tmp_path, monkeypatch):
    calls = {"constellation": 0, "convergence": 0}

    def fake_constellation(plan, body, show=False):
        calls["constellation"] += 1

    def fake_convergence(trace, show=False):
        calls["convergence"] += 1

    monkeypatch.setattr(main, "plot_constellation", fake_constellation)
    monkeypatch.setattr(main, "plot_convergence", fake_convergence)
    monkeypatch.chdir(tmp_path)

    main.main()

    assert (tmp_path / "secant_trace.txt").exists()
    assert (tmp_path / "constellation_plan.txt").exists()
    assert calls == {"constellation": 1, "convergence": 0}
