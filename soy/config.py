from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import List


@dataclass(frozen=True)
class SolverConfig:
    newton_iterations: int = 8
    epsilon: float = 1.0 / 200.0       # assumes a 1 second animation
    slope_epsilon: float = 1e-6        # below this Newton steps blow up
    max_bisections: int = 64           # float64 interval is exhausted well before this


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000
    sample_steps: int = 100
    max_sample_steps: int = 10_000
    allow_origins: List[str] = field(default_factory=lambda: ["*"])


@dataclass
class SoyConfig:
    solver: SolverConfig = field(default_factory=SolverConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    log_level: str = "INFO"


DEFAULT_SOLVER = SolverConfig()


def load_config() -> SoyConfig:
    cfg = SoyConfig()
    # Allow simple env overrides
    cfg.solver = replace(
        cfg.solver,
        newton_iterations=int(os.getenv("SOY_NEWTON_ITERATIONS", cfg.solver.newton_iterations)),
        epsilon=float(os.getenv("SOY_EPSILON", cfg.solver.epsilon)),
        slope_epsilon=float(os.getenv("SOY_SLOPE_EPSILON", cfg.solver.slope_epsilon)),
        max_bisections=int(os.getenv("SOY_MAX_BISECTIONS", cfg.solver.max_bisections)),
    )
    cfg.server.host = os.getenv("SOY_HOST", cfg.server.host)
    cfg.server.port = int(os.getenv("SOY_PORT", cfg.server.port))
    cfg.server.sample_steps = int(os.getenv("SOY_SAMPLE_STEPS", cfg.server.sample_steps))
    origins = os.getenv("SOY_ALLOW_ORIGINS")
    if origins:
        cfg.server.allow_origins = [o.strip() for o in origins.split(",") if o.strip()]
    cfg.log_level = os.getenv("SOY_LOG_LEVEL", cfg.log_level).upper()
    return cfg
