"""Closed-form analyzers, one per support condition.

Each analyzer solves its reactions once per request and hands them, with the
span geometry, to stateless evaluators wrapped in an ``Equation``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

from ._beam_math import (
    end_reaction,
    in_range,
    is_real,
    pinned_span_deflection,
    simply_supported_deflection,
    simply_supported_moment,
    simply_supported_shear,
    two_span_support_moment,
)
from .beam import Beam
from .condition import Condition
from .errors import InvalidBeamError, InvalidPositionError
from .material import EI
from .results import Continuous, Discontinuous, EquationValue, Point, Reactions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpanContext:
    """Per-request constants shared by every evaluation of one equation."""

    L1: float
    L2: float
    w: float
    reactions: Reactions
    ei: float | None = None

    @property
    def total_span(self) -> float:
        return self.L1 + self.L2


Evaluator = Callable[[float, SpanContext], EquationValue]


class Equation:
    """Position -> value function bound to one analysis request."""

    def __init__(self, evaluator: Evaluator, context: SpanContext) -> None:
        self._evaluator = evaluator
        self.context = context

    @property
    def reactions(self) -> Reactions:
        return self.context.reactions

    def __call__(self, x: float) -> EquationValue:
        if not is_real(x):
            raise InvalidPositionError(x)
        return self._evaluator(float(x), self.context)

    def __repr__(self) -> str:
        name = getattr(self._evaluator, "__name__", "equation")
        return f"Equation({name}, L1={self.context.L1}, L2={self.context.L2}, w={self.context.w})"


def _undefined(x: float) -> Continuous:
    return Continuous(Point(x, None))


class Analyzer(ABC):
    """Deflection, bending moment and shear force for one support condition."""

    condition: Condition

    def check_beam(self, beam: Beam) -> None:
        """Reject geometry the closed-form solution cannot handle."""

    @abstractmethod
    def reactions(self, beam: Beam, load: float) -> Reactions: ...

    @abstractmethod
    def deflection_at(self, x: float, ctx: SpanContext) -> EquationValue: ...

    @abstractmethod
    def bending_moment_at(self, x: float, ctx: SpanContext) -> EquationValue: ...

    @abstractmethod
    def shear_force_at(self, x: float, ctx: SpanContext) -> EquationValue: ...

    # ── Equation builders ───────────────────────────────────────────

    def deflection(self, beam: Beam, load: float) -> Equation:
        ei = beam.material.require_positive(EI)
        return self._equation(self.deflection_at, beam, load, ei=ei)

    def bending_moment(self, beam: Beam, load: float) -> Equation:
        return self._equation(self.bending_moment_at, beam, load)

    def shear_force(self, beam: Beam, load: float) -> Equation:
        return self._equation(self.shear_force_at, beam, load)

    def _equation(
        self, evaluator: Evaluator, beam: Beam, load: float, ei: float | None = None
    ) -> Equation:
        self.check_beam(beam)
        reactions = self.reactions(beam, load)
        logger.debug(
            "%s reactions for L1=%g L2=%g w=%g: %s",
            self.condition.value,
            beam.primary_span,
            beam.secondary_span,
            load,
            reactions,
        )
        ctx = SpanContext(
            L1=beam.primary_span,
            L2=beam.secondary_span,
            w=load,
            reactions=reactions,
            ei=ei,
        )
        return Equation(evaluator, ctx)


class SimplySupportedAnalyzer(Analyzer):
    """Single span pinned at both ends under a uniform load.

    The secondary span is ignored; the domain is [0, primary_span].
    """

    condition = Condition.SIMPLY_SUPPORTED

    def reactions(self, beam: Beam, load: float) -> Reactions:
        r = load * beam.primary_span / 2
        return Reactions(left=r, interior=0.0, right=r)

    def deflection_at(self, x: float, ctx: SpanContext) -> EquationValue:
        if not in_range(x, 0.0, ctx.L1):
            return _undefined(x)
        return Continuous(Point(x, simply_supported_deflection(x, ctx.L1, ctx.w, ctx.ei)))

    def bending_moment_at(self, x: float, ctx: SpanContext) -> EquationValue:
        if not in_range(x, 0.0, ctx.L1):
            return _undefined(x)
        return Continuous(Point(x, simply_supported_moment(x, ctx.L1, ctx.w)))

    def shear_force_at(self, x: float, ctx: SpanContext) -> EquationValue:
        if not in_range(x, 0.0, ctx.L1):
            return _undefined(x)
        return Continuous(Point(x, simply_supported_shear(x, ctx.L1, ctx.w)))


class TwoSpanUnequalAnalyzer(Analyzer):
    """Beam continuous over three supports with unequal spans L1 and L2.

    Span 1 covers [0, L1], span 2 covers (L1, L1 + L2]. Moment and shear
    are reported as left/right limits at the interior support.
    """

    condition = Condition.TWO_SPAN_UNEQUAL

    def check_beam(self, beam: Beam) -> None:
        if beam.primary_span <= 0 or beam.secondary_span <= 0:
            raise InvalidBeamError(
                "two-span-unequal needs both spans > 0, got "
                f"L1={beam.primary_span!r}, L2={beam.secondary_span!r}"
            )

    def reactions(self, beam: Beam, load: float) -> Reactions:
        L1, L2, w = beam.primary_span, beam.secondary_span, load
        m1 = two_span_support_moment(L1, L2, w)
        r1 = end_reaction(L1, w, m1)
        r3 = end_reaction(L2, w, m1)
        r2 = w * (L1 + L2) - r1 - r3
        return Reactions(left=r1, interior=r2, right=r3, support_moment=m1)

    # Span-local forms, valid on the closed span including the interior support

    @staticmethod
    def _moment_span1(x: float, ctx: SpanContext) -> float:
        return ctx.reactions.left * x - ctx.w * x**2 / 2

    @staticmethod
    def _moment_span2(x: float, ctx: SpanContext) -> float:
        r = ctx.reactions
        return r.left * x + r.interior * (x - ctx.L1) - ctx.w * x**2 / 2

    @staticmethod
    def _shear_span1(x: float, ctx: SpanContext) -> float:
        return ctx.reactions.left - ctx.w * x

    @staticmethod
    def _shear_span2(x: float, ctx: SpanContext) -> float:
        r = ctx.reactions
        return r.left + r.interior - ctx.w * x

    def _piecewise(
        self,
        x: float,
        ctx: SpanContext,
        span1: Callable[[float, SpanContext], float],
        span2: Callable[[float, SpanContext], float],
    ) -> EquationValue:
        if x == ctx.L1:
            return Discontinuous(Point(x, span1(x, ctx)), Point(x, span2(x, ctx)))
        if in_range(x, 0.0, ctx.L1):
            return Continuous(Point(x, span1(x, ctx)))
        if in_range(x, ctx.L1, ctx.total_span):
            return Continuous(Point(x, span2(x, ctx)))
        return _undefined(x)

    def deflection_at(self, x: float, ctx: SpanContext) -> EquationValue:
        r = ctx.reactions
        if in_range(x, 0.0, ctx.L1):
            y = pinned_span_deflection(x, ctx.L1, r.left, ctx.w, ctx.ei)
        elif in_range(x, ctx.L1, ctx.total_span):
            # Measured back from the right-hand support
            u = ctx.total_span - x
            y = pinned_span_deflection(u, ctx.L2, r.right, ctx.w, ctx.ei)
        else:
            return _undefined(x)
        return Continuous(Point(x, y))

    def bending_moment_at(self, x: float, ctx: SpanContext) -> EquationValue:
        return self._piecewise(x, ctx, self._moment_span1, self._moment_span2)

    def shear_force_at(self, x: float, ctx: SpanContext) -> EquationValue:
        return self._piecewise(x, ctx, self._shear_span1, self._shear_span2)
