"""Pydantic request/response models for the API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


ConditionTag = Literal["simply-supported", "two-span-unequal"]
QuantityTag = Literal["deflection", "bending_moment", "shear_force"]


# ── Request Models ────────────────────────────────────────────


class MaterialInput(BaseModel):
    name: str = "Material"
    properties: dict[str, float]  # e.g. {"EI": 4200.0, "GA": 8e4, "j2": 1.0}


class BeamInput(BaseModel):
    primary_span: float  # metres
    secondary_span: float = 0.0  # metres
    material: MaterialInput


class AnalysisRequest(BaseModel):
    beam: BeamInput
    load: float  # kN/m, positive downward
    # Plain str so unknown tags reach the analyzer registry and fail there
    condition: str = "simply-supported"
    quantity: QuantityTag = "bending_moment"
    positions: list[float] = []  # metres


class DiagramRequest(BaseModel):
    beam: BeamInput
    load: float
    condition: str = "simply-supported"
    quantity: QuantityTag = "bending_moment"
    step: float | None = None  # metres; defaults to DIAGRAM_STEP


class LayerInput(BaseModel):
    label: str
    thickness: float  # mm
    grade: str = ""
    angle: Literal[0, 90] = 0


class LayupRequest(BaseModel):
    layers: list[LayerInput]
    length: float = 150.0  # mm


# ── Response Models ───────────────────────────────────────────


class PointOutput(BaseModel):
    x: float
    y: float | None


class EquationValueOutput(BaseModel):
    kind: Literal["continuous", "discontinuous"]
    points: list[PointOutput]


class ReactionsOutput(BaseModel):
    left_kN: float
    interior_kN: float
    right_kN: float
    support_moment_kNm: float


class AnalysisOutput(BaseModel):
    condition: ConditionTag
    quantity: QuantityTag
    load: float
    reactions: ReactionsOutput
    values: list[EquationValueOutput]


class DiagramOutput(BaseModel):
    condition: ConditionTag
    quantity: QuantityTag
    axis_title: str
    labels: list[str]
    primary: list[PointOutput]
    secondary: list[PointOutput]


class LayerBandOutput(BaseModel):
    label: str
    caption: str
    grain: Literal["parallel", "perpendicular"]
    y_offset: float
    height: float
    width: float


class LayupOutput(BaseModel):
    total_thickness_mm: float
    bands: list[LayerBandOutput]


class ConditionInfo(BaseModel):
    tag: ConditionTag
    spans: int
