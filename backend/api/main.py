"""FastAPI application — CLT beam analysis API."""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from beam_analysis import BeamAnalysis, BeamAnalysisError, Condition, sample_diagram
from beam_analysis.series import DEFAULT_STEP

from .builder import build_beam, build_layup
from .diagrams import analysis_output, diagram_output
from .schemas import (
    AnalysisOutput,
    AnalysisRequest,
    ConditionInfo,
    DiagramOutput,
    DiagramRequest,
    LayerBandOutput,
    LayupOutput,
    LayupRequest,
)

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="CLT Beam Analysis API", version="0.1.0")

analysis = BeamAnalysis()


def _cors_origins() -> list[str]:
    raw_origins = os.getenv("CORS_ORIGINS", "")
    parsed = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]

    if parsed == ["*"]:
        return ["*"]

    defaults = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    return [*defaults, *parsed]


def _default_step() -> float:
    raw = os.getenv("DIAGRAM_STEP", "")
    try:
        return float(raw) if raw else DEFAULT_STEP
    except ValueError:
        logger.warning("Ignoring invalid DIAGRAM_STEP=%r", raw)
        return DEFAULT_STEP


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Conditions ────────────────────────────────────────────────


@app.get("/api/conditions", response_model=list[ConditionInfo])
def get_conditions() -> list[ConditionInfo]:
    """List the support conditions with a registered analyzer."""
    spans = {Condition.SIMPLY_SUPPORTED: 1, Condition.TWO_SPAN_UNEQUAL: 2}
    return [
        ConditionInfo(tag=cond.value, spans=spans.get(cond, 1))
        for cond in analysis.conditions
    ]


# ── Analysis ──────────────────────────────────────────────────


@app.post("/api/analyze", response_model=AnalysisOutput)
def analyze(data: AnalysisRequest) -> AnalysisOutput:
    """Solve reactions and evaluate one quantity at the requested positions."""
    logger.info(
        "analyze %s %s (L1=%g, L2=%g, w=%g, %d positions)",
        data.condition,
        data.quantity,
        data.beam.primary_span,
        data.beam.secondary_span,
        data.load,
        len(data.positions),
    )
    try:
        beam = build_beam(data.beam)
        result = analysis.get(data.quantity, beam, data.load, data.condition)
        return analysis_output(result, data.positions)
    except BeamAnalysisError as e:
        logger.info("analyze rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e))


# ── Force diagrams ────────────────────────────────────────────


@app.post("/api/diagrams", response_model=DiagramOutput)
def diagrams(data: DiagramRequest) -> DiagramOutput:
    """Sample a diagram over both spans for charting."""
    step = data.step if data.step is not None else _default_step()
    try:
        beam = build_beam(data.beam)
        result = analysis.get(data.quantity, beam, data.load, data.condition)
        series = sample_diagram(result, step=step)
    except (BeamAnalysisError, ValueError) as e:
        logger.info("diagram rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    return diagram_output(result, series)


# ── CLT layup ─────────────────────────────────────────────────


@app.post("/api/layup", response_model=LayupOutput)
def layup(data: LayupRequest) -> LayupOutput:
    """Proportional layer rectangles for drawing a CLT section."""
    try:
        lay = build_layup(data)
        bands = lay.bands(length=data.length)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return LayupOutput(
        total_thickness_mm=lay.total_thickness,
        bands=[
            LayerBandOutput(
                label=b.layer.label,
                caption=b.layer.caption,
                grain=b.layer.grain,
                y_offset=round(b.y_offset, 4),
                height=round(b.height, 4),
                width=round(b.width, 4),
            )
            for b in bands
        ],
    )


@app.get("/health")
def health() -> dict[str, str]:
    """Lightweight healthcheck for deployment platforms."""
    return {"status": "ok"}
