"""
Throttle-proportional sensor noise.

Motor vibration shows up on the gyros and accelerometers roughly in
proportion to throttle. The injector perturbs the state's angular rates
and returns a perturbed copy of the body acceleration.
"""

import numpy as np

try:
    from .state import VehicleState
except ImportError:
    from state import VehicleState


class SensorNoise:
    """
    Gaussian gyro and accelerometer noise scaled by a magnitude.

    Uses its own numpy Generator so runs are reproducible from a seed.
    """

    def __init__(self, gyro_noise: float = np.radians(0.1), accel_noise: float = 0.3,
                 seed: int = None, rng: np.random.Generator = None):
        """
        Initialize noise injector.

        Parameters:
        -----------
        gyro_noise : float
            Gyro noise standard deviation at full magnitude (rad/s)
        accel_noise : float
            Accelerometer noise standard deviation at full magnitude (m/s^2)
        seed : int, optional
            Seed for a new Generator; ignored if rng is given
        rng : np.random.Generator, optional
            Random source to draw from
        """
        self.gyro_noise = gyro_noise
        self.accel_noise = accel_noise
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    @classmethod
    def disabled(cls) -> 'SensorNoise':
        """Injector with zero amplitude."""
        return cls(gyro_noise=0.0, accel_noise=0.0, seed=0)

    @property
    def enabled(self) -> bool:
        return self.gyro_noise != 0.0 or self.accel_noise != 0.0

    def apply(self, state: VehicleState, accel_body: np.ndarray, magnitude: float) -> np.ndarray:
        """
        Add noise to gyro rates (in place) and to body acceleration.

        Parameters:
        -----------
        state : VehicleState
            State whose gyro rates are perturbed
        accel_body : np.ndarray, shape (3,)
            Body-frame acceleration
        magnitude : float
            Noise scale, normally |throttle|

        Returns:
        --------
        accel_body : np.ndarray, shape (3,)
            Acceleration with noise added
        """
        if not self.enabled:
            return accel_body

        scale = abs(magnitude)
        state.gyro = state.gyro + self.rng.standard_normal(3) * self.gyro_noise * scale
        return accel_body + self.rng.standard_normal(3) * self.accel_noise * scale
