"""Convert analysis results and sampled series into API response models."""

from __future__ import annotations

from beam_analysis import AnalysisResult, DiagramSeries, EquationValue, Point

from .schemas import (
    AnalysisOutput,
    DiagramOutput,
    EquationValueOutput,
    PointOutput,
    ReactionsOutput,
)


def _point(p: Point) -> PointOutput:
    return PointOutput(x=p.x, y=p.y)


def _value(value: EquationValue) -> EquationValueOutput:
    return EquationValueOutput(kind=value.kind, points=[_point(p) for p in value.points])


def analysis_output(result: AnalysisResult, positions: list[float]) -> AnalysisOutput:
    """Evaluate the result's equation at each requested position."""
    r = result.reactions
    return AnalysisOutput(
        condition=result.condition.value,
        quantity=result.quantity.tag,
        load=result.load,
        reactions=ReactionsOutput(
            left_kN=round(r.left, 6),
            interior_kN=round(r.interior, 6),
            right_kN=round(r.right, 6),
            support_moment_kNm=round(r.support_moment, 6),
        ),
        values=[_value(result.equation(x)) for x in positions],
    )


def diagram_output(result: AnalysisResult, series: DiagramSeries) -> DiagramOutput:
    return DiagramOutput(
        condition=result.condition.value,
        quantity=series.quantity.tag,
        axis_title=series.axis_title,
        labels=series.labels(),
        primary=[_point(p) for p in series.primary],
        secondary=[_point(p) for p in series.secondary],
    )
