"""Material dataclass for beam analysis."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ._beam_math import is_real
from .errors import MaterialPropertyError

# Keys understood by the analyzers. Only EI enters the formulas; j2 and GA
# travel with the material for downstream consumers.
EI = "EI"  # flexural rigidity (kN·m^2)
GA = "GA"  # shear rigidity (kN)
J2 = "j2"  # secondary stiffness factor


@dataclass(frozen=True)
class Material:
    """Named bundle of physical properties, e.g. {"EI": 4.2e3, "GA": 8e4}."""

    name: str
    properties: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze a private copy so callers cannot mutate it mid-analysis
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def require(self, key: str) -> float:
        """Return a numeric property, failing fast when absent or not a number."""
        if key not in self.properties:
            raise MaterialPropertyError(self.name, key)
        value = self.properties[key]
        if not is_real(value) or math.isnan(value):
            raise MaterialPropertyError(self.name, key, reason=f"not a number ({value!r})")
        return float(value)

    def require_positive(self, key: str) -> float:
        value = self.require(key)
        if value <= 0:
            raise MaterialPropertyError(self.name, key, reason=f"not positive ({value!r})")
        return value

    def get(self, key: str, default: float | None = None) -> float | None:
        return self.properties.get(key, default)
