from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Tuple

from ..config import DEFAULT_SOLVER, SolverConfig

log = logging.getLogger(__name__)

Coeffs = Tuple[float, float, float]


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> "Bezier":
    """Shorthand for :meth:`Bezier.new`, mirroring CSS ``cubic-bezier()``."""
    return Bezier.new(x1, y1, x2, y2)


@dataclass(frozen=True)
class Bezier:
    """Unit cubic bezier timing function.

    Start and end points are fixed at (0,0) and (1,1). Each axis is stored as
    the polynomial coefficients (a, b, c) of ``a*t^3 + b*t^2 + c*t``.
    """

    x: Coeffs
    y: Coeffs
    solver: SolverConfig = field(default=DEFAULT_SOLVER, compare=False, repr=False)

    @classmethod
    def new(
        cls,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        solver: SolverConfig = DEFAULT_SOLVER,
    ) -> "Bezier":
        # Same coefficient layout as WebKit's UnitBezier
        cx = 3.0 * x1
        bx = 3.0 * (x2 - x1) - cx
        ax = 1.0 - cx - bx

        cy = 3.0 * y1
        by = 3.0 * (y2 - y1) - cy
        ay = 1.0 - cy - by

        return cls(x=(ax, bx, cx), y=(ay, by, cy), solver=solver)

    def sample_x(self, t: float) -> float:
        a, b, c = self.x
        # Horner form of a*t^3 + b*t^2 + c*t
        return ((a * t + b) * t + c) * t

    def sample_y(self, t: float) -> float:
        a, b, c = self.y
        return ((a * t + b) * t + c) * t

    def sample_derivative_x(self, t: float) -> float:
        a, b, c = self.x
        return (3.0 * a * t + 2.0 * b) * t + c

    def solve_x(self, x: float) -> float:
        """Return the curve parameter whose x coordinate is ``x``.

        Runs a few Newton-Raphson steps starting from ``t = x`` and falls back
        to bisection over [0, 1] when Newton stalls on a flat slope or does not
        converge. Never fails: the last estimate is returned when neither
        phase reaches the tolerance.
        """
        cfg = self.solver
        eps = cfg.epsilon

        t = x
        for _ in range(cfg.newton_iterations):
            x2 = self.sample_x(t)
            if abs(x2 - x) < eps:
                return t
            dx = self.sample_derivative_x(t)
            if abs(dx) < cfg.slope_epsilon:
                log.debug(f"Flat slope at t={t:.6f}, switching to bisection for x={x}")
                break
            t -= (x2 - x) / dx
            if not math.isfinite(t):
                log.debug(f"Newton diverged for x={x}, switching to bisection")
                break

        low, high, t = 0.0, 1.0, x
        if t < low:
            return low
        if t > high:
            return high

        for _ in range(cfg.max_bisections):
            if not low < high:
                break
            x2 = self.sample_x(t)
            if abs(x2 - x) < eps:
                return t
            if x > x2:
                low = t
            else:
                high = t
            t = (high - low) / 2.0 + low
        else:
            log.debug(f"Bisection hit the {cfg.max_bisections} iteration cap for x={x}")

        return t

    def with_solver(self, solver: SolverConfig) -> "Bezier":
        if solver == self.solver:
            return self
        return replace(self, solver=solver)

    def calculate(self, t: float) -> float:
        return self.sample_y(self.solve_x(t))

    def __call__(self, t: float) -> float:
        return self.calculate(t)

    @property
    def control_points(self) -> Tuple[float, float, float, float]:
        """Recover (x1, y1, x2, y2) from the stored coefficients."""
        _, bx, cx = self.x
        _, by, cy = self.y
        x1 = cx / 3.0
        y1 = cy / 3.0
        return x1, y1, (bx + cx) / 3.0 + x1, (by + cy) / 3.0 + y1
