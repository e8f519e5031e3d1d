"""BeamAnalysis facade — the single entry point for users."""

from __future__ import annotations

import logging
import math
from typing import Mapping

from ._beam_math import is_real
from .analyzers import Analyzer, SimplySupportedAnalyzer, TwoSpanUnequalAnalyzer
from .beam import Beam
from .condition import Condition
from .errors import InvalidConditionError, InvalidLoadError
from .results import AnalysisResult, Quantity

logger = logging.getLogger(__name__)


def default_analyzers() -> dict[Condition, Analyzer]:
    return {
        Condition.SIMPLY_SUPPORTED: SimplySupportedAnalyzer(),
        Condition.TWO_SPAN_UNEQUAL: TwoSpanUnequalAnalyzer(),
    }


class BeamAnalysis:
    """Dispatch deflection / moment / shear requests to the analyzer for a condition.

    Usage:
        timber = Material("CLT 5-ply", {"EI": 4.2e3})
        beam = Beam(primary_span=4.0, secondary_span=0.0, material=timber)
        ba = BeamAnalysis()
        moment = ba.get_bending_moment(beam, 10.0, "simply-supported")
        moment.equation(2.0).value   # 20.0 kNm
    """

    def __init__(self, analyzers: Mapping[Condition, Analyzer] | None = None) -> None:
        if analyzers is None:
            analyzers = default_analyzers()
        self._analyzers: dict[Condition, Analyzer] = {
            Condition.parse(cond): analyzer for cond, analyzer in analyzers.items()
        }

    @property
    def conditions(self) -> list[Condition]:
        return list(self._analyzers)

    def register(self, condition: Condition | str, analyzer: Analyzer) -> None:
        """Register (or replace) the analyzer used for a condition."""
        self._analyzers[Condition.parse(condition)] = analyzer

    def analyzer_for(self, condition: Condition | str) -> Analyzer:
        cond = Condition.parse(condition)
        try:
            return self._analyzers[cond]
        except KeyError:
            raise InvalidConditionError(condition) from None

    # ── Requests ─────────────────────────────────────────────────────

    def get_deflection(
        self, beam: Beam, load: float, condition: Condition | str
    ) -> AnalysisResult:
        return self.get(Quantity.DEFLECTION, beam, load, condition)

    def get_bending_moment(
        self, beam: Beam, load: float, condition: Condition | str
    ) -> AnalysisResult:
        return self.get(Quantity.BENDING_MOMENT, beam, load, condition)

    def get_shear_force(
        self, beam: Beam, load: float, condition: Condition | str
    ) -> AnalysisResult:
        return self.get(Quantity.SHEAR_FORCE, beam, load, condition)

    def get(
        self,
        quantity: Quantity | str,
        beam: Beam,
        load: float,
        condition: Condition | str,
    ) -> AnalysisResult:
        """Build the equation for any quantity; the get_* methods delegate here."""
        quantity = Quantity.parse(quantity)
        cond = Condition.parse(condition)
        analyzer = self.analyzer_for(cond)
        if not is_real(load) or not math.isfinite(load):
            raise InvalidLoadError(f"Load must be a finite number, got {load!r}")

        logger.debug(
            "%s requested for %s beam (L1=%g, L2=%g, w=%g)",
            quantity.tag,
            cond.value,
            beam.primary_span,
            beam.secondary_span,
            load,
        )
        if quantity is Quantity.DEFLECTION:
            equation = analyzer.deflection(beam, load)
        elif quantity is Quantity.BENDING_MOMENT:
            equation = analyzer.bending_moment(beam, load)
        else:
            equation = analyzer.shear_force(beam, load)

        return AnalysisResult(
            beam=beam,
            load=load,
            condition=cond,
            quantity=quantity,
            reactions=equation.reactions,
            equation=equation,
        )
