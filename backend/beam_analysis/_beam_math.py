"""Closed-form Euler-Bernoulli relations for uniformly loaded spans.

Sign convention: w positive downward, sagging moment positive,
V = dM/dx, deflection positive downward with EI*y'' = -M.
"""

from __future__ import annotations

import math
import numbers


def is_real(value: object) -> bool:
    """True for int/float-like values; bools are rejected."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def in_range(x: float, lo: float, hi: float) -> bool:
    """Closed-interval test that treats NaN as out of range."""
    return not math.isnan(x) and lo <= x <= hi


# ── Simply supported span ───────────────────────────────────────────


def simply_supported_deflection(x: float, L: float, w: float, ei: float) -> float:
    """y = w*x*(L^3 - 2*L*x^2 + x^3) / (24*EI)"""
    return w * x * (L**3 - 2 * L * x**2 + x**3) / (24 * ei)


def simply_supported_moment(x: float, L: float, w: float) -> float:
    """M = w*x*(L - x) / 2"""
    return w * x * (L - x) / 2


def simply_supported_shear(x: float, L: float, w: float) -> float:
    """V = w*(L/2 - x)"""
    return w * (L / 2 - x)


# ── Two continuous spans ────────────────────────────────────────────


def two_span_support_moment(L1: float, L2: float, w: float) -> float:
    """Interior support moment from the three-moment equation.

    2*M1*(L1 + L2) = -w*(L1^3 + L2^3)/4 with zero end moments.
    """
    return -w * (L1**3 + L2**3) / (8 * (L1 + L2))


def end_reaction(L: float, w: float, support_moment: float) -> float:
    """Reaction at the pinned end of a span carrying w with a far-end moment."""
    return w * L / 2 + support_moment / L


def pinned_span_deflection(u: float, L: float, R: float, w: float, ei: float) -> float:
    """Deflection at distance u from the pinned end of a span of length L.

    Integrates EI*y'' = -(R*u - w*u^2/2) with y(0) = y(L) = 0.
    """
    c1 = R * L**2 / 6 - w * L**3 / 24
    return (-R * u**3 / 6 + w * u**4 / 24 + c1 * u) / ei
