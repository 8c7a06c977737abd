"""
Aerodynamic coefficient set and stall-blended lift/drag curves.

Provides:
- AeroCoefficients: immutable stability/control derivative set
- Sigmoid stall blend between attached-flow and flat-plate lift
- Quadratic drag polar
- Center-of-gravity offset torque

Coefficient naming follows the usual body-axis convention:
c_l_* roll moment, c_m_* pitch moment, c_n_* yaw moment, c_y_* side force.
Suffixes: _0 bias, _a alpha, _b beta, _p/_q/_r body rates,
_deltaa/_deltae/_deltar aileron/elevator/rudder.
"""

import dataclasses

import numpy as np

from archimedes import struct, field


@struct(frozen=True)
class AeroCoefficients:
    """
    Stability and control derivatives for a small fixed-wing plane.

    Defaults describe a ~1 kg hand-launch airframe and are good enough
    to exercise control logic; they are not aerodynamically accurate.
    """

    # Reference geometry
    s: float = 0.45     # Wing area (m^2)
    b: float = 1.88     # Wing span (m)
    c: float = 0.24     # Mean chord (m)

    # Stall shape
    alpha_stall: float = 0.4712  # rad
    mcoeff: float = 50.0         # Blend sharpness

    # Lift
    c_lift_0: float = 0.56
    c_lift_a: float = 6.9
    c_lift_q: float = 0.0
    c_lift_deltae: float = 0.0

    # Drag
    c_drag_p: float = 0.1
    c_drag_q: float = 0.0
    c_drag_deltae: float = 0.0
    oswald: float = 0.9

    # Side force
    c_y_0: float = 0.0
    c_y_b: float = -0.98
    c_y_p: float = 0.0
    c_y_r: float = 0.0
    c_y_deltaa: float = 0.0
    c_y_deltar: float = -0.2

    # Roll moment
    c_l_0: float = 0.0
    c_l_b: float = -0.12
    c_l_p: float = -1.0
    c_l_r: float = 0.14
    c_l_deltaa: float = 0.25
    c_l_deltar: float = -0.037

    # Pitch moment
    c_m_0: float = 0.045
    c_m_a: float = -0.7
    c_m_q: float = -20.0
    c_m_deltae: float = 1.0

    # Yaw moment
    c_n_0: float = 0.0
    c_n_b: float = 0.25
    c_n_p: float = 0.022
    c_n_r: float = -1.0
    c_n_deltaa: float = 0.0
    c_n_deltar: float = 0.1

    # CG position relative to the aerodynamic reference point, body frame (m).
    # x is pulled aft of the true -0.02 so manual flight is not tail heavy.
    cg_offset: np.ndarray = field(default_factory=lambda: np.array([-0.15, 0.0, -0.05]))

    @property
    def aspect_ratio(self) -> float:
        """Wing aspect ratio b^2 / S."""
        return self.b**2 / self.s

    @classmethod
    def field_names(cls) -> tuple:
        """Names of every configurable coefficient."""
        return tuple(f.name for f in dataclasses.fields(cls))


def stall_blend(coeffs: AeroCoefficients, alpha):
    """
    Sigmoid weight between attached flow (0) and fully stalled flow (1).

    Symmetric about alpha = 0, centered on +/- alpha_stall, with steepness
    set by mcoeff.
    """
    alpha0 = coeffs.alpha_stall
    M = coeffs.mcoeff

    e_pos = np.exp(-M * (alpha - alpha0))
    e_neg = np.exp(M * (alpha + alpha0))

    return (1 + e_pos + e_neg) / (1 + e_pos) / (1 + e_neg)


def lift_coefficient(coeffs: AeroCoefficients, alpha):
    """
    Lift coefficient blended across stall.

    Parameters:
    -----------
    coeffs : AeroCoefficients
        Plane coefficient set
    alpha : float or np.ndarray
        Angle of attack (rad)

    Returns:
    --------
    CL : float or np.ndarray
        (1 - sigma) * linear lift + sigma * flat-plate lift
    """
    sigma = stall_blend(coeffs, alpha)

    # Lift at small AoA
    linear = (1.0 - sigma) * (coeffs.c_lift_0 + coeffs.c_lift_a * alpha)
    # Lift beyond stall
    flat_plate = sigma * (2 * np.copysign(1.0, alpha) * np.sin(alpha)**2 * np.cos(alpha))

    return linear + flat_plate


def drag_coefficient(coeffs: AeroCoefficients, alpha):
    """
    Drag coefficient from the parabolic drag polar.

    CD = CD_p + (CL_0 + CL_alpha * alpha)^2 / (pi * e * AR)
    """
    induced = (coeffs.c_lift_0 + coeffs.c_lift_a * alpha)**2 / (np.pi * coeffs.oswald * coeffs.aspect_ratio)
    return coeffs.c_drag_p + induced


def cg_offset_torque(cg_offset: np.ndarray, force: np.ndarray) -> np.ndarray:
    """
    Moment from a force applied away from the center of gravity.

    Returns r x F with r the CG offset, i.e.
    [oy*Fz - oz*Fy, -ox*Fz + oz*Fx, -oy*Fx + ox*Fy].
    """
    return np.cross(cg_offset, force)


if __name__ == "__main__":
    print("=== Stall-Blended Coefficient Curves ===\n")

    coeffs = AeroCoefficients()
    print(f"Aspect ratio: {coeffs.aspect_ratio:.2f}")
    print()

    print(f"{'alpha':>8} {'sigma':>8} {'CL':>8} {'CD':>8}")
    for alpha_deg in [-60, -30, -15, 0, 5, 10, 20, 27, 35, 60, 90]:
        alpha = np.radians(alpha_deg)
        print(f"{alpha_deg:8.1f} {stall_blend(coeffs, alpha):8.4f} "
              f"{lift_coefficient(coeffs, alpha):8.4f} {drag_coefficient(coeffs, alpha):8.4f}")
