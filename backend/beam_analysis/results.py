"""Result containers: points, equation values, reactions and analysis bundles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Union

from .condition import Condition
from .errors import InvalidQuantityError

if TYPE_CHECKING:
    from .beam import Beam


class Quantity(Enum):
    """Response quantity with its diagram axis title and display scale."""

    DEFLECTION = ("deflection", "Deflection (mm)", 1e3)  # m -> mm
    BENDING_MOMENT = ("bending_moment", "Bending Moment (kNm)", 1.0)
    SHEAR_FORCE = ("shear_force", "Shear Force (kN)", 1.0)

    def __init__(self, tag: str, axis_title: str, scale: float) -> None:
        self.tag = tag
        self.axis_title = axis_title
        self.scale = scale

    @classmethod
    def parse(cls, value: Quantity | str) -> Quantity:
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.tag == value:
                return member
        raise InvalidQuantityError(value)


@dataclass(frozen=True)
class Point:
    """A sampled value; y is None outside the beam."""

    x: float
    y: float | None

    @property
    def defined(self) -> bool:
        return self.y is not None


@dataclass(frozen=True)
class Continuous:
    """Single-valued result at a position."""

    point: Point

    kind = "continuous"

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.point,)

    @property
    def value(self) -> float | None:
        return self.point.y


@dataclass(frozen=True)
class Discontinuous:
    """Jump at an interior support: left and right limits at the same x."""

    left: Point
    right: Point

    kind = "discontinuous"

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.left, self.right)

    @property
    def value(self) -> float | None:
        return self.left.y

    @property
    def jump(self) -> float:
        return self.right.y - self.left.y


EquationValue = Union[Continuous, Discontinuous]


@dataclass(frozen=True)
class Reactions:
    """Support reactions (kN) and interior support moment (kNm) for one load case."""

    left: float
    interior: float
    right: float
    support_moment: float = 0.0

    @property
    def total(self) -> float:
        return self.left + self.interior + self.right


@dataclass(frozen=True)
class AnalysisResult:
    """Beam/load context bundled with the equation for one quantity."""

    beam: Beam
    load: float
    condition: Condition
    quantity: Quantity
    reactions: Reactions
    equation: Callable[[float], EquationValue]

    def print_reactions(self) -> None:
        """Print support reactions and the equilibrium check."""
        r = self.reactions
        print(f"\n=== Reactions ({self.condition.value}, w = {self.load:g} kN/m) ===")
        print(f"{'Support':<12} {'R (kN)':>12}")
        print("-" * 26)
        print(f"{'Left':<12} {r.left:>12.3f}")
        if self.condition is not Condition.SIMPLY_SUPPORTED:
            print(f"{'Interior':<12} {r.interior:>12.3f}")
        print(f"{'Right':<12} {r.right:>12.3f}")
        print("-" * 26)
        print(f"{'Total':<12} {r.total:>12.3f}")
        if r.support_moment:
            print(f"Interior support moment: {r.support_moment:.3f} kNm")
