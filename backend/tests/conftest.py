"""Shared beams and materials for the beam analysis tests."""

import pytest

from beam_analysis import Beam, BeamAnalysis, Material


@pytest.fixture
def analysis():
    return BeamAnalysis()


@pytest.fixture
def unit_material():
    return Material("unit", {"EI": 1.0, "GA": 1.0, "j2": 1.0})


@pytest.fixture
def simple_beam(unit_material):
    """4 m single span, EI = 1."""
    return Beam(primary_span=4.0, secondary_span=0.0, material=unit_material)


@pytest.fixture
def two_span_beam(unit_material):
    """3 m + 2 m continuous beam, EI = 1."""
    return Beam(primary_span=3.0, secondary_span=2.0, material=unit_material)
