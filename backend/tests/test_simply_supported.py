"""Simply supported beam under UDL against beam-table values."""

import math

import pytest

from beam_analysis import Beam, Continuous, Point

W = 10.0
L = 4.0


class TestBendingMoment:
    def test_midspan_moment(self, analysis, simple_beam):
        """M(2) = w*x*(L-x)/2 = 20 kNm."""
        result = analysis.get_bending_moment(simple_beam, W, "simply-supported")
        assert result.equation(2) == Continuous(Point(2.0, 20.0))

    def test_max_moment_is_wl2_over_8(self, analysis, simple_beam):
        result = analysis.get_bending_moment(simple_beam, W, "simply-supported")
        assert result.equation(L / 2).value == pytest.approx(W * L**2 / 8)

    def test_zero_at_supports(self, analysis, simple_beam):
        eq = analysis.get_bending_moment(simple_beam, W, "simply-supported").equation
        assert eq(0).value == 0.0
        assert eq(L).value == 0.0


class TestShearForce:
    def test_shear_at_left_support(self, analysis, simple_beam):
        eq = analysis.get_shear_force(simple_beam, W, "simply-supported").equation
        assert eq(0) == Continuous(Point(0.0, 20.0))

    def test_shear_at_right_support(self, analysis, simple_beam):
        eq = analysis.get_shear_force(simple_beam, W, "simply-supported").equation
        assert eq(4).value == -20.0

    def test_zero_shear_at_midspan(self, analysis, simple_beam):
        eq = analysis.get_shear_force(simple_beam, W, "simply-supported").equation
        assert eq(L / 2).value == 0.0

    def test_reactions_are_half_the_load(self, analysis, simple_beam):
        r = analysis.get_shear_force(simple_beam, W, "simply-supported").reactions
        assert r.left == r.right == pytest.approx(W * L / 2)
        assert r.interior == 0.0
        assert r.total == pytest.approx(W * L)


class TestDeflection:
    def test_zero_at_supports(self, analysis, simple_beam):
        eq = analysis.get_deflection(simple_beam, W, "simply-supported").equation
        assert eq(0).value == 0.0
        assert eq(L).value == pytest.approx(0.0, abs=1e-12)

    def test_midspan_is_5wl4_over_384ei(self, analysis, simple_beam):
        eq = analysis.get_deflection(simple_beam, W, "simply-supported").equation
        assert eq(L / 2).value == pytest.approx(5 * W * L**4 / 384)

    def test_symmetric_about_midspan(self, analysis, simple_beam):
        eq = analysis.get_deflection(simple_beam, W, "simply-supported").equation
        for x in (0.3, 1.0, 1.7):
            assert eq(x).value == pytest.approx(eq(L - x).value)

    def test_downward_load_deflects_positive(self, analysis, simple_beam):
        eq = analysis.get_deflection(simple_beam, W, "simply-supported").equation
        assert all(eq(x).value > 0 for x in (0.5, 1.5, 2.5, 3.5))

    def test_secondary_span_is_ignored(self, analysis, unit_material):
        beam = Beam(primary_span=4.0, secondary_span=2.0, material=unit_material)
        eq = analysis.get_deflection(beam, W, "simply-supported").equation
        assert eq(5.0).value is None


class TestContinuity:
    @pytest.mark.parametrize("getter", ["get_deflection", "get_bending_moment", "get_shear_force"])
    def test_no_jumps_along_span(self, analysis, simple_beam, getter):
        eq = getattr(analysis, getter)(simple_beam, W, "simply-supported").equation
        h = 1e-7
        for x in (0.5, 1.0, 2.0, 3.25):
            assert isinstance(eq(x), Continuous)
            assert math.isclose(eq(x - h).value, eq(x + h).value, rel_tol=1e-5, abs_tol=1e-5)
