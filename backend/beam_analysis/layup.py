"""Cross-laminated timber layup and its proportional layer geometry.

Produces the rectangles a drawing backend needs to show the layup section;
no drawing happens here. Dimensions follow the section chart: a 180 mm
wide reference strip drawn into a canvas with a 70 px axis gutter.
"""

from __future__ import annotations

from dataclasses import dataclass

REFERENCE_LENGTH_MM = 180.0
AXIS_GUTTER_PX = 70.0
DEFAULT_CANVAS_WIDTH = 800.0
DEFAULT_CANVAS_HEIGHT = 435.0

GRAIN = {0: "parallel", 90: "perpendicular"}


@dataclass(frozen=True)
class Layer:
    """One CLT lamella: label, thickness (mm), timber grade and grain angle."""

    label: str
    thickness: float
    grade: str = ""
    angle: int = 0

    def __post_init__(self) -> None:
        if self.thickness <= 0:
            raise ValueError(f"Layer {self.label!r}: thickness must be positive")
        if self.angle not in GRAIN:
            raise ValueError(
                f"Layer {self.label!r}: angle must be one of {sorted(GRAIN)}, got {self.angle!r}"
            )

    @property
    def grain(self) -> str:
        return GRAIN[self.angle]

    @property
    def caption(self) -> str:
        return f"{self.label}: {self.thickness:g}mm {self.grade}".rstrip()


@dataclass(frozen=True)
class LayerBand:
    """Canvas rectangle for one layer, measured up from the chart's bottom edge."""

    layer: Layer
    y_offset: float
    height: float
    width: float

    @property
    def top(self) -> float:
        return self.y_offset + self.height


class Layup:
    """Ordered CLT layers, listed top face first."""

    def __init__(self, layers: list[Layer]) -> None:
        if not layers:
            raise ValueError("A layup needs at least one layer")
        self.layers = list(layers)

    @property
    def total_thickness(self) -> float:
        return sum(layer.thickness for layer in self.layers)

    def bands(
        self,
        length: float = 150.0,
        width: float = DEFAULT_CANVAS_WIDTH,
        height: float = DEFAULT_CANVAS_HEIGHT,
    ) -> list[LayerBand]:
        """Stack layers bottom-up (last layer at the bottom) scaled to the canvas."""
        if length <= 0:
            raise ValueError(f"Layup length must be positive, got {length!r}")
        thickness_scale = height / self.total_thickness
        band_width = (length / REFERENCE_LENGTH_MM) * (width - AXIS_GUTTER_PX)

        bands: list[LayerBand] = []
        y_offset = 0.0
        for layer in reversed(self.layers):
            band_height = layer.thickness * thickness_scale
            bands.append(
                LayerBand(layer=layer, y_offset=y_offset, height=band_height, width=band_width)
            )
            y_offset += band_height
        return bands

    def __repr__(self) -> str:
        return f"Layup({len(self.layers)} layers, {self.total_thickness:g} mm)"
