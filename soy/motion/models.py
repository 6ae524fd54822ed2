from __future__ import annotations

import math
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from ..config import DEFAULT_SOLVER, SolverConfig
from .bezier import Bezier
from .easing import LINEAR, Lerper
from .presets import PRESETS, get_preset


class Ease(BaseModel):
    type: Literal["linear", "cubic-bezier", "preset"] = "linear"
    p: Optional[list[float]] = Field(default=None, description="Bezier control points [x1,y1,x2,y2]")
    name: Optional[str] = Field(default=None, description="Preset keyword, e.g. 'ease-in-out'")

    @model_validator(mode="after")
    def validate_ease(self):
        if self.type == "cubic-bezier":
            if not self.p or len(self.p) != 4:
                raise ValueError("cubic-bezier requires p=[x1,y1,x2,y2]")
            if not all(math.isfinite(v) for v in self.p):
                raise ValueError("cubic-bezier control points must be finite")
        elif self.type == "preset":
            if self.name not in PRESETS:
                raise ValueError(f"Unknown preset {self.name!r}, expected one of {sorted(PRESETS)}")
        return self

    def to_lerper(self, solver: SolverConfig = DEFAULT_SOLVER) -> Lerper:
        if self.type == "cubic-bezier":
            x1, y1, x2, y2 = self.p  # type: ignore
            return Bezier.new(x1, y1, x2, y2, solver=solver)
        if self.type == "preset":
            curve = get_preset(self.name)  # type: ignore
            if isinstance(curve, Bezier):
                return curve.with_solver(solver)
            return curve
        return LINEAR


class EvaluateRequest(BaseModel):
    ease: Ease = Field(default_factory=Ease)
    t: float = Field(..., allow_inf_nan=False, description="Normalized time, nominally in [0,1]")


class EvaluateResponse(BaseModel):
    t: float
    progress: float


class SampleRequest(BaseModel):
    ease: Ease = Field(default_factory=Ease)
    steps: Optional[int] = Field(default=None, ge=1, description="Intervals over [0,1]; server default if omitted")


class SampleResponse(BaseModel):
    times: List[float]
    values: List[float]


class LerpRequest(BaseModel):
    ease: Ease = Field(default_factory=Ease)
    start: float = Field(..., allow_inf_nan=False)
    end: float = Field(..., allow_inf_nan=False)
    t: float = Field(..., allow_inf_nan=False)


class LerpResponse(BaseModel):
    value: float


class PresetInfo(BaseModel):
    name: str
    x: List[float]
    y: List[float]
    control_points: List[float]

    @classmethod
    def from_curve(cls, name: str, curve: Bezier) -> "PresetInfo":
        return cls(
            name=name,
            x=list(curve.x),
            y=list(curve.y),
            control_points=[round(v, 6) for v in curve.control_points],
        )
