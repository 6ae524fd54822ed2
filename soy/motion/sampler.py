from __future__ import annotations

from typing import Callable, List, Tuple, Union

from .easing import Lerper, as_lerper


def sample_curve(
    method: Union[Lerper, Callable[[float], float]], steps: int = 100
) -> Tuple[List[float], List[float]]:
    """Sample a timing function at ``steps + 1`` evenly spaced times.

    - steps: number of intervals over [0, 1]
    Returns (times, progress)
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")
    fn = as_lerper(method)
    times: List[float] = []
    values: List[float] = []
    for i in range(steps + 1):
        # i / steps keeps both ends exact, no accumulated drift
        t = i / steps
        times.append(t)
        values.append(fn.calculate(t))
    return times, values
