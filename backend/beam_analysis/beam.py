"""Beam geometry dataclass."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ._beam_math import is_real
from .errors import InvalidBeamError
from .material import Material


@dataclass(frozen=True)
class Beam:
    """Primary and secondary span lengths (m) plus the beam material."""

    primary_span: float
    secondary_span: float
    material: Material

    def __post_init__(self) -> None:
        for name in ("primary_span", "secondary_span"):
            value = getattr(self, name)
            if not is_real(value) or not math.isfinite(value):
                raise InvalidBeamError(f"{name} must be a finite number, got {value!r}")
            if value < 0:
                raise InvalidBeamError(f"{name} must be >= 0, got {value!r}")

    @property
    def total_span(self) -> float:
        return self.primary_span + self.secondary_span
