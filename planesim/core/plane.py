"""
Per-tick force and torque driver for a simple simulated plane.

Not aerodynamically accurate; enough to exercise control logic for a new
airframe against a simulator. One call to `step` maps servo signals to
control deflections, evaluates the aero model, refreshes body velocity and
returns angular and linear body-frame accelerations.
"""

import logging

import numpy as np
from typing import Sequence, Tuple

try:
    from .aerodynamics import StallBlendAeroModel
    from .coefficients import AeroCoefficients
    from .controls import ControlInputs
    from .integrator import DynamicsIntegrator
    from .noise import SensorNoise
    from .propulsion import ThrustModel, GRAVITY_MSS, HOVER_THROTTLE
    from .state import VehicleState
except ImportError:
    from aerodynamics import StallBlendAeroModel
    from coefficients import AeroCoefficients
    from controls import ControlInputs
    from integrator import DynamicsIntegrator
    from noise import SensorNoise
    from propulsion import ThrustModel, GRAVITY_MSS, HOVER_THROTTLE
    from state import VehicleState

logger = logging.getLogger(__name__)


class Plane:
    """
    Fixed-wing plane aerodynamics and thrust.

    Produces accelerations only; a DynamicsIntegrator advances the state.
    Not safe to step the same instance from more than one thread.
    """

    def __init__(self, coefficients: AeroCoefficients = None, mass: float = 1.0,
                 gravity: float = GRAVITY_MSS, hover_throttle: float = HOVER_THROTTLE,
                 reverse_thrust: bool = False, state: VehicleState = None,
                 noise: SensorNoise = None):
        """
        Initialize plane.

        Parameters:
        -----------
        coefficients : AeroCoefficients, optional
            Aerodynamic derivative set (stock small plane if omitted)
        mass : float
            Plane mass (kg)
        gravity : float
            Gravitational acceleration (m/s^2)
        hover_throttle : float
            Throttle fraction that holds the plane vertically against gravity
        reverse_thrust : bool
            Throttle channel centered at 1500 with thrust in both directions
        state : VehicleState, optional
            Shared kinematic state (fresh state at rest if omitted)
        noise : SensorNoise, optional
            Noise injector (default amplitudes, unseeded, if omitted)
        """
        self.aero = StallBlendAeroModel(coefficients)
        self.propulsion = ThrustModel(mass, gravity, hover_throttle, reverse_thrust)
        self.state = state if state is not None else VehicleState()
        self.noise = noise if noise is not None else SensorNoise()

        self.rot_accel = np.zeros(3)
        self.accel_body = np.zeros(3)

        logger.debug(
            "Plane created: mass=%.3f kg, thrust_scale=%.3f N, %s thrust",
            mass, self.propulsion.thrust_scale,
            'reverse' if reverse_thrust else 'forward'
        )

    @property
    def coefficients(self) -> AeroCoefficients:
        return self.aero.coefficients

    @property
    def mass(self) -> float:
        return self.propulsion.mass

    @property
    def thrust_scale(self) -> float:
        return self.propulsion.thrust_scale

    @property
    def reverse_thrust(self) -> bool:
        return self.propulsion.reverse_thrust

    def step(self, servos: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
        """
        Compute accelerations for one simulation tick.

        Parameters:
        -----------
        servos : sequence
            Servo pulse widths, at least 4 channels
            (aileron, elevator, throttle, rudder)

        Returns:
        --------
        rot_accel : np.ndarray, shape (3,)
            Angular acceleration in body frame
        accel_body : np.ndarray, shape (3,)
            Linear acceleration in body frame, thrust plus aero
        """
        controls = ControlInputs.from_servos(servos, self.reverse_thrust)
        state = self.state

        # Flow angles from the body velocity left by the previous tick
        state.update_flow_angles()

        force = self.aero.compute_force(state, controls.aileron, controls.elevator, controls.rudder)
        rot_accel = self.aero.compute_torque(state, controls.aileron, controls.elevator,
                                             controls.rudder, force)

        # Body velocity is refreshed after the aero evaluation, so the
        # flow angles used above lag the integrator by one tick.
        state.update_body_velocity()

        thrust = self.propulsion.compute_thrust(controls.throttle)
        accel_body = self.propulsion.thrust_acceleration(thrust) + force

        accel_body = self.noise.apply(state, accel_body, abs(thrust) / self.thrust_scale)

        self.rot_accel = rot_accel
        self.accel_body = accel_body

        return rot_accel, accel_body

    def update(self, servos: Sequence[float], integrator: DynamicsIntegrator) -> Tuple[np.ndarray, np.ndarray]:
        """
        Step the plane and hand the accelerations to the integrator.

        Returns the same pair as `step`.
        """
        rot_accel, accel_body = self.step(servos)
        integrator.update_dynamics(self.state, rot_accel, accel_body)
        return rot_accel, accel_body

    def __repr__(self) -> str:
        return (f"Plane(mass={self.mass}, thrust_scale={self.thrust_scale:.3f}, "
                f"reverse_thrust={self.reverse_thrust})")


if __name__ == "__main__":
    print("=== Plane Step Test ===\n")

    state = VehicleState()
    state.set_euler_angles(0.0, np.radians(3), 0.0)
    state.set_body_velocity(np.array([15.0, 0.0, 0.5]))
    state.gyro = np.array([0.0, 0.05, 0.0])

    plane = Plane(state=state, noise=SensorNoise.disabled())
    print(plane)
    print(state)
    print()

    for servos in ([1500, 1500, 1000, 1500],
                   [1500, 1500, 1700, 1500],
                   [1600, 1400, 1700, 1550]):
        rot_accel, accel_body = plane.step(servos)
        print(f"Servos {servos}:")
        print(f"  Angular accel: {rot_accel}")
        print(f"  Linear accel:  {accel_body}")
