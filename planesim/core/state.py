"""
Kinematic state of a simulated plane.

State includes:
- Velocity in earth (NED) frame and in body frame
- Attitude as a body-to-earth direction cosine matrix
- Angular rates (p, q, r) in body frame
- Ambient air density
- Angle of attack and sideslip as last evaluated by the force model

The rigid-body integrator owns this state and advances it; the aerodynamic
step only refreshes the body-frame velocity and the flow angles.
"""

import numpy as np
from typing import Tuple

from archimedes import struct, field

try:
    from .rotation import dcm_from_euler, euler_from_dcm, earth_to_body, body_to_earth
except ImportError:
    from rotation import dcm_from_euler, euler_from_dcm, earth_to_body, body_to_earth


@struct(frozen=False)
class VehicleState:
    """
    Plane state read by the aerodynamic model every tick.

    Units are SI: m/s, rad, rad/s, kg/m^3.
    """

    # Velocity (m/s)
    velocity_ef: np.ndarray = field(default_factory=lambda: np.zeros(3))  # Earth frame (NED)
    velocity_bf: np.ndarray = field(default_factory=lambda: np.zeros(3))  # Body frame

    # Attitude, body to earth
    dcm: np.ndarray = field(default_factory=lambda: np.eye(3))

    # Angular rates in body frame (rad/s)
    gyro: np.ndarray = field(default_factory=lambda: np.zeros(3))

    # Air density (kg/m^3)
    air_density: float = 1.225

    # Flow angles (rad), stored at the start of each force evaluation
    angle_of_attack: float = 0.0
    beta: float = 0.0

    @property
    def airspeed(self) -> float:
        """True airspeed, magnitude of body-frame velocity (m/s)."""
        return float(np.linalg.norm(self.velocity_bf))

    @property
    def euler_angles(self) -> Tuple[float, float, float]:
        """Roll, pitch, yaw from the orientation matrix (rad)."""
        return euler_from_dcm(self.dcm)

    def set_euler_angles(self, phi: float, theta: float, psi: float):
        """
        Set attitude using Euler angles.

        Parameters:
        -----------
        phi : float
            Roll angle (rad)
        theta : float
            Pitch angle (rad)
        psi : float
            Yaw angle (rad)
        """
        self.dcm = dcm_from_euler(phi, theta, psi)

    def set_body_velocity(self, velocity_bf: np.ndarray):
        """Set body-frame velocity and the matching earth-frame velocity."""
        self.velocity_bf = np.asarray(velocity_bf, dtype=float)
        self.velocity_ef = body_to_earth(self.dcm, self.velocity_bf)

    def update_body_velocity(self):
        """Recompute body-frame velocity from earth-frame velocity and attitude."""
        self.velocity_bf = earth_to_body(self.dcm, self.velocity_ef)

    def update_flow_angles(self):
        """
        Recompute angle of attack and sideslip from body-frame velocity.

        alpha = atan2(w, u)
        beta = atan2(v, u)
        """
        u, v, w = self.velocity_bf
        self.angle_of_attack = float(np.arctan2(w, u))
        self.beta = float(np.arctan2(v, u))

    def copy(self) -> 'VehicleState':
        """Create a deep copy of the state."""
        return VehicleState(
            velocity_ef=np.array(self.velocity_ef, dtype=float),
            velocity_bf=np.array(self.velocity_bf, dtype=float),
            dcm=np.array(self.dcm, dtype=float),
            gyro=np.array(self.gyro, dtype=float),
            air_density=self.air_density,
            angle_of_attack=self.angle_of_attack,
            beta=self.beta,
        )

    def __str__(self) -> str:
        """Pretty print state."""
        phi, theta, psi = self.euler_angles

        return (
            f"Plane State:\n"
            f"  Velocity (earth): [{self.velocity_ef[0]:7.2f}, {self.velocity_ef[1]:7.2f}, {self.velocity_ef[2]:7.2f}] m/s\n"
            f"  Velocity (body):  [{self.velocity_bf[0]:7.2f}, {self.velocity_bf[1]:7.2f}, {self.velocity_bf[2]:7.2f}] m/s\n"
            f"  Airspeed:         {self.airspeed:7.2f} m/s\n"
            f"  Euler angles:     [{np.degrees(phi):6.2f}, {np.degrees(theta):6.2f}, {np.degrees(psi):6.2f}] deg\n"
            f"  Alpha, Beta:      [{np.degrees(self.angle_of_attack):6.2f}, {np.degrees(self.beta):6.2f}] deg\n"
            f"  Angular rates:    [{self.gyro[0]:7.4f}, {self.gyro[1]:7.4f}, {self.gyro[2]:7.4f}] rad/s\n"
            f"  Air density:      {self.air_density:7.4f} kg/m^3"
        )
