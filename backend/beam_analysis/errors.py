"""Exception hierarchy for beam analysis."""

from __future__ import annotations


class BeamAnalysisError(Exception):
    """Base class for all beam analysis failures."""


class InvalidConditionError(BeamAnalysisError, ValueError):
    """No analyzer is registered for the requested support condition."""

    def __init__(self, condition: object) -> None:
        self.condition = condition
        super().__init__(f"Invalid condition: {condition!r}")


class InvalidBeamError(BeamAnalysisError, ValueError):
    """Beam geometry is unusable for the requested analysis."""


class InvalidLoadError(BeamAnalysisError, TypeError):
    """Load magnitude is not a real number."""


class InvalidPositionError(BeamAnalysisError, TypeError):
    """Equation evaluated at a position that is not a real number."""

    def __init__(self, x: object) -> None:
        self.x = x
        super().__init__(f"Position must be a real number, got {x!r}")


class MaterialPropertyError(BeamAnalysisError, ValueError):
    """A material property required by an analyzer is missing or invalid."""

    def __init__(self, material: str, key: str, reason: str = "missing") -> None:
        self.material = material
        self.key = key
        super().__init__(f"Material {material!r}: property {key!r} is {reason}")


class InvalidQuantityError(BeamAnalysisError, ValueError):
    """Requested response quantity is not one of deflection, moment or shear."""

    def __init__(self, quantity: object) -> None:
        self.quantity = quantity
        super().__init__(f"Unknown quantity: {quantity!r}")
