"""
Coefficient Model Tests

Tests for the stall-blended lift curve, drag polar and CG offset torque.
"""

import pytest
import numpy as np

from planesim.core.coefficients import (
    AeroCoefficients,
    stall_blend,
    lift_coefficient,
    drag_coefficient,
    cg_offset_torque
)
from conftest import make_coefficients


class TestAeroCoefficients:
    """Test the coefficient container."""

    def test_defaults(self):
        """Test stock small-plane values."""
        coeffs = AeroCoefficients()

        assert coeffs.s == 0.45
        assert coeffs.b == 1.88
        assert coeffs.c_lift_a == 6.9
        assert coeffs.c_m_q == -20.0
        assert np.allclose(coeffs.cg_offset, [-0.15, 0.0, -0.05])

    def test_aspect_ratio(self):
        """Test AR = b^2 / S."""
        coeffs = make_coefficients(b=2.0, s=0.5)
        assert np.isclose(coeffs.aspect_ratio, 8.0)

    def test_frozen(self):
        """Coefficients cannot be reassigned after construction."""
        coeffs = AeroCoefficients()
        with pytest.raises(Exception):
            coeffs.c_lift_a = 1.0

    def test_field_names(self):
        """Every derivative group is configurable."""
        names = AeroCoefficients.field_names()

        for name in ['alpha_stall', 'mcoeff', 'c_lift_q', 'c_drag_deltae', 'oswald',
                     'c_y_deltar', 'c_l_deltaa', 'c_m_deltae', 'c_n_r', 'cg_offset']:
            assert name in names


class TestStallBlend:
    """Test the sigmoid stall weight."""

    def test_attached_flow(self):
        """Sigma is ~0 well below stall."""
        coeffs = AeroCoefficients()
        assert stall_blend(coeffs, 0.0) < 1e-8
        assert stall_blend(coeffs, 0.1) < 1e-6

    def test_stalled_flow(self):
        """Sigma is ~1 well beyond stall, on both sides."""
        coeffs = AeroCoefficients()
        assert np.isclose(stall_blend(coeffs, 1.2), 1.0, atol=1e-9)
        assert np.isclose(stall_blend(coeffs, -1.2), 1.0, atol=1e-9)

    def test_half_at_stall_angle(self):
        """Sigma crosses 0.5 at the stall angle."""
        coeffs = AeroCoefficients()
        assert np.isclose(stall_blend(coeffs, coeffs.alpha_stall), 0.5, atol=1e-6)
        assert np.isclose(stall_blend(coeffs, -coeffs.alpha_stall), 0.5, atol=1e-6)

    def test_symmetric(self):
        """Blend weight is even in alpha."""
        coeffs = AeroCoefficients()
        alpha = np.linspace(-1.5, 1.5, 31)
        assert np.allclose(stall_blend(coeffs, alpha), stall_blend(coeffs, -alpha))


class TestLiftCoefficient:
    """Test the blended lift curve."""

    def test_linear_region(self):
        """Below stall lift follows CL_0 + CL_alpha * alpha."""
        coeffs = AeroCoefficients()
        for alpha in [-0.1, 0.0, 0.05, 0.15]:
            expected = coeffs.c_lift_0 + coeffs.c_lift_a * alpha
            assert np.isclose(lift_coefficient(coeffs, alpha), expected, atol=1e-6)

    def test_flat_plate_region(self):
        """Beyond stall lift follows 2 sign(a) sin^2(a) cos(a)."""
        coeffs = AeroCoefficients()
        for alpha in [1.0, 1.2, -1.0, -1.2]:
            expected = 2 * np.sign(alpha) * np.sin(alpha)**2 * np.cos(alpha)
            assert np.isclose(lift_coefficient(coeffs, alpha), expected, atol=1e-9)

    def test_zero_lift_at_zero_alpha(self, zero_coeffs):
        """No zero-alpha lift gives exactly zero lift at alpha = 0."""
        assert lift_coefficient(zero_coeffs, 0.0) == 0.0

    def test_continuous(self):
        """No jumps across the stall transition."""
        coeffs = AeroCoefficients()
        alpha = np.linspace(-np.pi / 2, np.pi / 2, 2001)
        CL = lift_coefficient(coeffs, alpha)

        assert np.all(np.isfinite(CL))
        assert np.max(np.abs(np.diff(CL))) < 0.2

    def test_post_stall_lift_drop(self):
        """Lift falls off after the stall angle."""
        coeffs = AeroCoefficients()
        pre = lift_coefficient(coeffs, coeffs.alpha_stall - 0.1)
        post = lift_coefficient(coeffs, coeffs.alpha_stall + 0.1)
        assert post < pre

    def test_array_input(self):
        """Vectorized evaluation matches scalar evaluation."""
        coeffs = AeroCoefficients()
        alpha = np.array([-0.3, 0.0, 0.3, 0.8])
        CL = lift_coefficient(coeffs, alpha)

        assert CL.shape == (4,)
        for a, cl in zip(alpha, CL):
            assert np.isclose(lift_coefficient(coeffs, a), cl)


class TestDragCoefficient:
    """Test the drag polar."""

    def test_parasitic_only(self):
        """Drag equals CD_p when lift terms vanish."""
        coeffs = make_coefficients(c_drag_p=0.05)
        assert drag_coefficient(coeffs, 0.0) == 0.05

    def test_induced_drag(self):
        """Induced drag uses the linear lift term."""
        coeffs = make_coefficients(c_drag_p=0.02, c_lift_0=0.3, c_lift_a=5.0,
                                   oswald=0.8, b=2.0, s=0.5)
        alpha = 0.1
        CL = 0.3 + 5.0 * alpha
        expected = 0.02 + CL**2 / (np.pi * 0.8 * 8.0)
        assert np.isclose(drag_coefficient(coeffs, alpha), expected)

    def test_never_below_parasitic(self):
        """Induced term is non-negative for all alpha."""
        coeffs = AeroCoefficients()
        alpha = np.linspace(-np.pi, np.pi, 721)
        assert np.all(drag_coefficient(coeffs, alpha) >= coeffs.c_drag_p)


class TestCGOffsetTorque:
    """Test moment from CG misalignment."""

    def test_component_formula(self):
        """Torque matches r x F written out per axis."""
        ox, oy, oz = 0.1, -0.2, 0.3
        Fx, Fy, Fz = 1.5, -2.0, 4.0

        torque = cg_offset_torque(np.array([ox, oy, oz]), np.array([Fx, Fy, Fz]))
        expected = [oy * Fz - oz * Fy,
                    -ox * Fz + oz * Fx,
                    -oy * Fx + ox * Fy]

        assert np.allclose(torque, expected, rtol=0, atol=1e-15)

    def test_zero_force(self):
        """No force, no torque."""
        torque = cg_offset_torque(np.array([-0.15, 0.0, -0.05]), np.zeros(3))
        assert np.allclose(torque, 0.0)

    def test_force_through_cg(self):
        """A force parallel to the offset produces no moment."""
        offset = np.array([0.2, 0.0, 0.0])
        torque = cg_offset_torque(offset, np.array([5.0, 0.0, 0.0]))
        assert np.allclose(torque, 0.0)
