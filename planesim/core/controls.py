"""
Servo signal to control deflection mapping.

Servo channels carry pulse widths in microseconds:
- channel 1 (index 0): aileron, 1500 neutral, +/-500 full deflection
- channel 2 (index 1): elevator
- channel 3 (index 2): throttle, 1000-2000
- channel 4 (index 3): rudder
"""

import numpy as np
from typing import Sequence

from archimedes import struct

SERVO_NEUTRAL = 1500
SERVO_HALF_RANGE = 500.0
THROTTLE_MIN = 1000
THROTTLE_RANGE = 1000.0

AILERON_CHANNEL = 0
ELEVATOR_CHANNEL = 1
THROTTLE_CHANNEL = 2
RUDDER_CHANNEL = 3


def servo_to_deflection(signal: float) -> float:
    """Map a centered servo pulse to a normalized deflection (unclamped)."""
    return (float(signal) - SERVO_NEUTRAL) / SERVO_HALF_RANGE


def servo_to_throttle(signal: float, reverse_thrust: bool = False) -> float:
    """
    Map a throttle pulse to a normalized throttle.

    Parameters:
    -----------
    signal : float
        Throttle channel pulse width
    reverse_thrust : bool
        If True, 1500 is zero thrust and the range is [-1, 1];
        otherwise 1000 is zero thrust and the range is [0, 1]

    Returns:
    --------
    throttle : float
        Clamped normalized throttle
    """
    # Widen before subtracting; unsigned pulse widths would wrap below zero
    signal = float(signal)

    if reverse_thrust:
        return float(np.clip((signal - SERVO_NEUTRAL) / SERVO_HALF_RANGE, -1.0, 1.0))
    return float(np.clip((signal - THROTTLE_MIN) / THROTTLE_RANGE, 0.0, 1.0))


@struct(frozen=True)
class ControlInputs:
    """Normalized control deflections and throttle for one tick."""

    aileron: float = 0.0
    elevator: float = 0.0
    rudder: float = 0.0
    throttle: float = 0.0

    @classmethod
    def from_servos(cls, servos: Sequence[float], reverse_thrust: bool = False) -> 'ControlInputs':
        """
        Build control inputs from raw servo channels.

        Parameters:
        -----------
        servos : sequence
            At least four channel pulse widths
        reverse_thrust : bool
            Throttle mode, see servo_to_throttle

        Returns:
        --------
        controls : ControlInputs
        """
        if len(servos) < 4:
            raise ValueError(f"Expected at least 4 servo channels, got {len(servos)}")

        return cls(
            aileron=servo_to_deflection(servos[AILERON_CHANNEL]),
            elevator=servo_to_deflection(servos[ELEVATOR_CHANNEL]),
            rudder=servo_to_deflection(servos[RUDDER_CHANNEL]),
            throttle=servo_to_throttle(servos[THROTTLE_CHANNEL], reverse_thrust),
        )

    def as_dict(self) -> dict:
        """Surface deflections keyed by name."""
        return {'aileron': self.aileron, 'elevator': self.elevator, 'rudder': self.rudder}
