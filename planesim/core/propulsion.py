"""
Throttle to thrust scaling for a single body-axis motor.

Thrust is linear in throttle and scaled so that the motor holds the
plane vertically against gravity at the hover throttle.
"""

import numpy as np

GRAVITY_MSS = 9.80665  # m/s^2
HOVER_THROTTLE = 0.7


class ThrustModel:
    """
    Throttle-proportional thrust along the body x-axis.

    thrust = throttle * thrust_scale
    thrust_scale = mass * gravity / hover_throttle
    """

    def __init__(self, mass: float = 1.0, gravity: float = GRAVITY_MSS,
                 hover_throttle: float = HOVER_THROTTLE, reverse_thrust: bool = False):
        """
        Initialize thrust model.

        Parameters:
        -----------
        mass : float
            Plane mass (kg)
        gravity : float
            Gravitational acceleration (m/s^2)
        hover_throttle : float
            Throttle fraction that balances the weight
        reverse_thrust : bool
            Whether the motor can push backwards (throttle in [-1, 1])
        """
        if mass <= 0:
            raise ValueError(f"Mass must be positive, got {mass}")
        if hover_throttle <= 0:
            raise ValueError(f"Hover throttle must be positive, got {hover_throttle}")

        self.mass = mass
        self.gravity = gravity
        self.hover_throttle = hover_throttle
        self.reverse_thrust = reverse_thrust

        # Scaling from motor power to Newtons
        self.thrust_scale = (mass * gravity) / hover_throttle

    def compute_thrust(self, throttle: float) -> float:
        """Thrust (N) for a normalized throttle."""
        return throttle * self.thrust_scale

    def thrust_acceleration(self, thrust: float) -> np.ndarray:
        """Body-frame acceleration produced by thrust (m/s^2)."""
        return np.array([thrust / self.mass, 0.0, 0.0])

    def __repr__(self) -> str:
        mode = 'reverse' if self.reverse_thrust else 'forward'
        return f"ThrustModel(mass={self.mass}, thrust_scale={self.thrust_scale:.3f}, mode='{mode}')"
