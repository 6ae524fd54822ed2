from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, Union, runtime_checkable

D = TypeVar("D")


@runtime_checkable
class Lerper(Protocol):
    """Anything that maps normalized time to interpolation progress."""

    def calculate(self, t: float) -> float:
        ...


class Linear:
    """Identity timing function: f(t) = t."""

    def calculate(self, t: float) -> float:
        return t

    def __call__(self, t: float) -> float:
        return t

    def __repr__(self) -> str:
        return "Linear()"


LINEAR = Linear()


class FunctionLerper:
    """Adapts a plain ``f(t) -> progress`` callable to the Lerper protocol."""

    def __init__(self, fn: Callable[[float], float]):
        self.fn = fn

    def calculate(self, t: float) -> float:
        return self.fn(t)

    def __call__(self, t: float) -> float:
        return self.fn(t)

    def __repr__(self) -> str:
        return f"FunctionLerper({self.fn!r})"


def as_lerper(method: Union[Lerper, Callable[[float], float]]) -> Lerper:
    if isinstance(method, Lerper):
        return method
    if callable(method):
        return FunctionLerper(method)
    raise TypeError(f"Expected a Lerper or a callable, got {type(method).__name__}")


def lerp(method: Union[Lerper, Callable[[float], float]], start: D, end: D, t: float) -> D:
    """Blend ``start`` towards ``end`` by the progress ``method`` gives at ``t``.

    Works for any value supporting ``+``, ``-`` and multiplication by a float
    (floats, numpy arrays, vector types).
    """
    progress = as_lerper(method).calculate(t)
    result: Any = start + (end - start) * progress
    return result
