from soy.config import DEFAULT_SOLVER, SolverConfig, load_config
from soy.motion.models import Ease


def test_defaults():
    cfg = load_config()
    assert cfg.solver == SolverConfig()
    assert DEFAULT_SOLVER.newton_iterations == 8
    assert DEFAULT_SOLVER.epsilon == 1.0 / 200.0
    assert DEFAULT_SOLVER.slope_epsilon == 1e-6
    assert cfg.server.sample_steps == 100
    assert cfg.server.allow_origins == ["*"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SOY_EPSILON", "0.001")
    monkeypatch.setenv("SOY_NEWTON_ITERATIONS", "4")
    monkeypatch.setenv("SOY_MAX_BISECTIONS", "32")
    monkeypatch.setenv("SOY_SAMPLE_STEPS", "50")
    monkeypatch.setenv("SOY_ALLOW_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("SOY_LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg.solver.epsilon == 0.001
    assert cfg.solver.newton_iterations == 4
    assert cfg.solver.max_bisections == 32
    assert cfg.server.sample_steps == 50
    assert cfg.server.allow_origins == ["http://a.test", "http://b.test"]
    assert cfg.log_level == "DEBUG"


def test_solver_overrides_reach_curves(monkeypatch):
    monkeypatch.setenv("SOY_NEWTON_ITERATIONS", "0")
    monkeypatch.setenv("SOY_EPSILON", "0.2")
    cfg = load_config()
    curve = Ease(type="cubic-bezier", p=[0.42, 0.0, 0.58, 1.0]).to_lerper(cfg.solver)
    assert curve.solver == cfg.solver
    # bisection accepts the initial guess under the coarse tolerance
    assert curve.solve_x(0.3) == 0.3


def test_server_overrides(monkeypatch):
    monkeypatch.setenv("SOY_HOST", "127.0.0.1")
    monkeypatch.setenv("SOY_PORT", "9001")
    cfg = load_config()
    assert cfg.server.host == "127.0.0.1"
    assert cfg.server.port == 9001
