"""Sample analysis equations into primary/secondary span series for charting."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .results import AnalysisResult, Continuous, Discontinuous, Point, Quantity

DEFAULT_STEP = 0.1  # m
MAX_SAMPLES = 10_000  # per diagram, both spans together


@dataclass
class DiagramSeries:
    """Sampled diagram split at the interior support, in display units."""

    quantity: Quantity
    axis_title: str
    primary: list[Point] = field(default_factory=list)
    secondary: list[Point] = field(default_factory=list)

    def points(self) -> list[Point]:
        return [*self.primary, *self.secondary]

    def labels(self) -> list[str]:
        return [f"{p.x:.2f}" for p in self.points()]

    def values(self) -> list[float | None]:
        return [p.y for p in self.points()]

    def extreme(self) -> Point | None:
        """Point with the largest absolute value, or None if nothing is defined."""
        defined = [p for p in self.points() if p.defined]
        if not defined:
            return None
        return max(defined, key=lambda p: abs(p.y))


def _positions(start: float, stop: float, step: float, *, include_stop: bool) -> list[float]:
    # Index-based so accumulated float error never drops or duplicates a sample
    n = math.floor((stop - start) / step + 1e-9)
    xs = [start] + [round(start + i * step, 6) for i in range(1, n + 1)]
    if include_stop:
        if stop - xs[-1] > 1e-9:
            xs.append(stop)
    else:
        xs = [x for x in xs if stop - x > 1e-9]
    return xs


def _display(point: Point, scale: float) -> Point:
    if point.y is None:
        return point
    return Point(point.x, round(point.y * scale, 4))


def sample_diagram(result: AnalysisResult, step: float = DEFAULT_STEP) -> DiagramSeries:
    """Sample ``result.equation`` over [0, L1) and [L1, L1 + L2].

    A discontinuous value sends its left limit to the primary series and its
    right limit to the secondary series.
    """
    if not step > 0:
        raise ValueError(f"Sample step must be positive, got {step!r}")

    beam = result.beam
    if beam.total_span / step > MAX_SAMPLES:
        raise ValueError(
            f"Step {step!r} m gives more than {MAX_SAMPLES} samples over {beam.total_span:g} m"
        )
    quantity = result.quantity
    series = DiagramSeries(quantity=quantity, axis_title=quantity.axis_title)

    L1 = beam.primary_span
    for x in _positions(0.0, L1, step, include_stop=False):
        value = result.equation(x)
        series.primary.extend(_display(p, quantity.scale) for p in value.points)

    for x in _positions(L1, beam.total_span, step, include_stop=True):
        value = result.equation(x)
        if isinstance(value, Discontinuous):
            series.primary.append(_display(value.left, quantity.scale))
            series.secondary.append(_display(value.right, quantity.scale))
        elif isinstance(value, Continuous):
            series.secondary.append(_display(value.point, quantity.scale))

    return series
