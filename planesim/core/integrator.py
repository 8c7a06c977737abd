"""
Hand-off interface to the rigid-body integrator.

The plane model only produces accelerations. Advancing attitude, velocity
and position from them is left to an integrator supplied by the simulator.
"""

import numpy as np
from abc import ABC, abstractmethod

try:
    from .state import VehicleState
except ImportError:
    from state import VehicleState


class DynamicsIntegrator(ABC):
    """
    Base class for integrators driven by Plane.update.
    """

    @abstractmethod
    def update_dynamics(self, state: VehicleState, rot_accel: np.ndarray,
                        accel_body: np.ndarray):
        """
        Advance the state by one tick.

        Parameters:
        -----------
        state : VehicleState
            State to update in place
        rot_accel : np.ndarray, shape (3,)
            Angular acceleration in body frame (rad/s^2)
        accel_body : np.ndarray, shape (3,)
            Linear acceleration in body frame excluding gravity (m/s^2)
        """
        pass
