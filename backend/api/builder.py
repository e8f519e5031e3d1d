"""Converts JSON input into beam_analysis domain objects."""

from __future__ import annotations

from beam_analysis import Beam, Layer, Layup, Material

from .schemas import BeamInput, LayupRequest


def build_beam(data: BeamInput) -> Beam:
    """Build an immutable Beam (with its Material) from request data."""
    material = Material(name=data.material.name, properties=data.material.properties)
    return Beam(
        primary_span=data.primary_span,
        secondary_span=data.secondary_span,
        material=material,
    )


def build_layup(data: LayupRequest) -> Layup:
    return Layup(
        [
            Layer(label=layer.label, thickness=layer.thickness, grade=layer.grade, angle=layer.angle)
            for layer in data.layers
        ]
    )
