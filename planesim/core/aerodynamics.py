"""
Aerodynamic force and moment model for a small fixed-wing plane.

Lift and drag come from the stall-blended curves in `coefficients`; side
force and the three moments come from linear stability and control
derivatives. Rate terms are normalized by 2V, so the model is singular at
zero airspeed and returns zero force and aerodynamic moment there.
"""

import numpy as np
from typing import Tuple, Dict

try:
    from .coefficients import AeroCoefficients, lift_coefficient, drag_coefficient, cg_offset_torque
    from .state import VehicleState
except ImportError:
    from coefficients import AeroCoefficients, lift_coefficient, drag_coefficient, cg_offset_torque
    from state import VehicleState

# Airspeeds below single-precision epsilon are treated as exactly zero
AIRSPEED_EPSILON = float(np.finfo(np.float32).eps)


def is_zero(value: float) -> bool:
    """True when value equals zero to within single-precision epsilon."""
    return abs(value) < AIRSPEED_EPSILON


class StallBlendAeroModel:
    """
    Fixed-wing aero model with a sigmoid-blended stall.

    Forces and moments are returned in body axes. Control inputs are
    normalized deflections in [-1, 1]; larger values are passed through.
    """

    def __init__(self, coefficients: AeroCoefficients = None):
        """
        Initialize aero model.

        Parameters:
        -----------
        coefficients : AeroCoefficients, optional
            Derivative set; defaults to the stock small-plane coefficients
        """
        if coefficients is None:
            coefficients = AeroCoefficients()
        self.coefficients = coefficients

    def lift_coefficient(self, alpha):
        """Lift coefficient at angle of attack alpha (rad)."""
        return lift_coefficient(self.coefficients, alpha)

    def drag_coefficient(self, alpha):
        """Drag coefficient at angle of attack alpha (rad)."""
        return drag_coefficient(self.coefficients, alpha)

    def compute_force(self, state: VehicleState, aileron: float,
                      elevator: float, rudder: float) -> np.ndarray:
        """
        Compute aerodynamic force in body frame.

        Uses the angle of attack and sideslip already stored on the state.

        Parameters:
        -----------
        state : VehicleState
            Current plane state
        aileron, elevator, rudder : float
            Normalized control deflections

        Returns:
        --------
        force : np.ndarray, shape (3,)
            Force in body frame [Fx, Fy, Fz]
        """
        k = self.coefficients
        alpha = state.angle_of_attack
        beta = state.beta
        airspeed = state.airspeed
        p, q, r = state.gyro

        c_lift_a = self.lift_coefficient(alpha)
        c_drag_a = self.drag_coefficient(alpha)

        # Wind axes to body axes
        c_x_a = -c_drag_a * np.cos(alpha) + c_lift_a * np.sin(alpha)
        c_x_q = -k.c_drag_q * np.cos(alpha) + k.c_lift_q * np.sin(alpha)
        c_z_a = -c_drag_a * np.sin(alpha) - c_lift_a * np.cos(alpha)
        c_z_q = -k.c_drag_q * np.sin(alpha) - k.c_lift_q * np.cos(alpha)

        # Dynamic pressure times wing area
        qbar = 0.5 * state.air_density * airspeed**2 * k.s

        if is_zero(airspeed):
            return np.zeros(3)

        # Elevator drag acts on |elevator|, elevator lift keeps its sign
        Fx = qbar * (c_x_a + c_x_q * k.c * q / (2 * airspeed)
                     - k.c_drag_deltae * np.cos(alpha) * abs(elevator)
                     + k.c_lift_deltae * np.sin(alpha) * elevator)
        Fy = qbar * (k.c_y_0 + k.c_y_b * beta
                     + k.c_y_p * k.b * p / (2 * airspeed)
                     + k.c_y_r * k.b * r / (2 * airspeed)
                     + k.c_y_deltaa * aileron + k.c_y_deltar * rudder)
        Fz = qbar * (c_z_a + c_z_q * k.c * q / (2 * airspeed)
                     - k.c_drag_deltae * np.sin(alpha) * abs(elevator)
                     - k.c_lift_deltae * np.cos(alpha) * elevator)

        return np.array([Fx, Fy, Fz])

    def compute_torque(self, state: VehicleState, aileron: float, elevator: float,
                       rudder: float, force: np.ndarray) -> np.ndarray:
        """
        Compute aerodynamic moment in body frame.

        The CG offset correction for `force` is always added, including
        at zero airspeed.

        Parameters:
        -----------
        state : VehicleState
            Current plane state
        aileron, elevator, rudder : float
            Normalized control deflections
        force : np.ndarray, shape (3,)
            Body-frame force acting at the aerodynamic reference point

        Returns:
        --------
        torque : np.ndarray, shape (3,)
            Moment in body frame [L, M, N]
        """
        k = self.coefficients
        alpha = state.angle_of_attack
        beta = state.beta
        airspeed = state.airspeed
        p, q, r = state.gyro

        qbar = 0.5 * state.air_density * airspeed**2 * k.s

        if is_zero(airspeed):
            torque = np.zeros(3)
        else:
            L_roll = qbar * k.b * (k.c_l_0 + k.c_l_b * beta
                                   + k.c_l_p * k.b * p / (2 * airspeed)
                                   + k.c_l_r * k.b * r / (2 * airspeed)
                                   + k.c_l_deltaa * aileron + k.c_l_deltar * rudder)
            M_pitch = qbar * k.c * (k.c_m_0 + k.c_m_a * alpha
                                    + k.c_m_q * k.c * q / (2 * airspeed)
                                    + k.c_m_deltae * elevator)
            N_yaw = qbar * k.b * (k.c_n_0 + k.c_n_b * beta
                                  + k.c_n_p * k.b * p / (2 * airspeed)
                                  + k.c_n_r * k.b * r / (2 * airspeed)
                                  + k.c_n_deltaa * aileron + k.c_n_deltar * rudder)
            torque = np.array([L_roll, M_pitch, N_yaw])

        return torque + cg_offset_torque(k.cg_offset, force)

    def compute_forces_moments(self, state: VehicleState,
                               controls: Dict[str, float] = None) -> Tuple[np.ndarray, np.ndarray]:
        """
        Compute force and CG-corrected moment together.

        Parameters:
        -----------
        state : VehicleState
            Current plane state
        controls : dict, optional
            Normalized deflections, e.g. {'aileron': 0.1, 'elevator': -0.2}

        Returns:
        --------
        forces, moments : np.ndarray, shape (3,)
        """
        if controls is None:
            controls = {}

        aileron = controls.get('aileron', 0.0)
        elevator = controls.get('elevator', 0.0)
        rudder = controls.get('rudder', 0.0)

        forces = self.compute_force(state, aileron, elevator, rudder)
        moments = self.compute_torque(state, aileron, elevator, rudder, forces)

        return forces, moments
