from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from ..config import load_config
from ..motion.bezier import Bezier
from ..motion.easing import lerp
from ..motion.models import (
    EvaluateRequest,
    EvaluateResponse,
    LerpRequest,
    LerpResponse,
    PresetInfo,
    SampleRequest,
    SampleResponse,
)
from ..motion.presets import PRESETS, UnknownPreset, get_preset
from ..motion.sampler import sample_curve

log = logging.getLogger(__name__)

cfg = load_config()


app = FastAPI(title="Soy Easing API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=cfg.server.allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/presets", response_model=List[PresetInfo])
def api_presets_list():
    return [
        PresetInfo.from_curve(name, curve)
        for name, curve in PRESETS.items()
        if isinstance(curve, Bezier)
    ]


@app.get("/api/presets/{name}/evaluate", response_model=EvaluateResponse)
def api_preset_evaluate(name: str, t: float = Query(..., allow_inf_nan=False)):
    try:
        curve = get_preset(name)
    except UnknownPreset:
        log.info(f"Unknown preset requested: {name}")
        raise HTTPException(404, detail="Preset not found")
    if isinstance(curve, Bezier):
        curve = curve.with_solver(cfg.solver)
    return EvaluateResponse(t=t, progress=curve.calculate(t))


@app.post("/api/evaluate", response_model=EvaluateResponse)
def api_evaluate(req: EvaluateRequest):
    curve = req.ease.to_lerper(cfg.solver)
    return EvaluateResponse(t=req.t, progress=curve.calculate(req.t))


@app.post("/api/sample", response_model=SampleResponse)
def api_sample(req: SampleRequest):
    steps = req.steps if req.steps is not None else cfg.server.sample_steps
    if steps > cfg.server.max_sample_steps:
        raise HTTPException(422, detail=f"steps must be <= {cfg.server.max_sample_steps}")
    times, values = sample_curve(req.ease.to_lerper(cfg.solver), steps=steps)
    return SampleResponse(times=times, values=values)


@app.post("/api/lerp", response_model=LerpResponse)
def api_lerp(req: LerpRequest):
    return LerpResponse(value=lerp(req.ease.to_lerper(cfg.solver), req.start, req.end, req.t))
