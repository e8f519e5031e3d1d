"""beam_analysis — closed-form beam response and CLT layup geometry."""

from .analysis import BeamAnalysis, default_analyzers
from .analyzers import (
    Analyzer,
    Equation,
    SimplySupportedAnalyzer,
    SpanContext,
    TwoSpanUnequalAnalyzer,
)
from .beam import Beam
from .condition import Condition
from .errors import (
    BeamAnalysisError,
    InvalidBeamError,
    InvalidConditionError,
    InvalidLoadError,
    InvalidPositionError,
    InvalidQuantityError,
    MaterialPropertyError,
)
from .layup import Layer, LayerBand, Layup
from .material import Material
from .results import (
    AnalysisResult,
    Continuous,
    Discontinuous,
    EquationValue,
    Point,
    Quantity,
    Reactions,
)
from .series import DiagramSeries, sample_diagram

__all__ = [
    "AnalysisResult",
    "Analyzer",
    "Beam",
    "BeamAnalysis",
    "BeamAnalysisError",
    "Condition",
    "Continuous",
    "DiagramSeries",
    "Discontinuous",
    "Equation",
    "EquationValue",
    "InvalidBeamError",
    "InvalidConditionError",
    "InvalidLoadError",
    "InvalidPositionError",
    "InvalidQuantityError",
    "Layer",
    "LayerBand",
    "Layup",
    "Material",
    "MaterialPropertyError",
    "Point",
    "Quantity",
    "Reactions",
    "SimplySupportedAnalyzer",
    "SpanContext",
    "TwoSpanUnequalAnalyzer",
    "default_analyzers",
    "sample_diagram",
]
