"""
Core fixed-wing aerodynamic step components.

This module provides the coefficient model, force and torque models, and
the per-tick step driver used inside a flight-dynamics simulator.
"""

from .coefficients import (
    AeroCoefficients,
    stall_blend,
    lift_coefficient,
    drag_coefficient,
    cg_offset_torque
)
from .aerodynamics import StallBlendAeroModel
from .state import VehicleState
from .controls import ControlInputs, servo_to_deflection, servo_to_throttle
from .propulsion import ThrustModel, GRAVITY_MSS, HOVER_THROTTLE
from .noise import SensorNoise
from .integrator import DynamicsIntegrator
from .plane import Plane

__all__ = [
    'AeroCoefficients',
    'stall_blend',
    'lift_coefficient',
    'drag_coefficient',
    'cg_offset_torque',
    'StallBlendAeroModel',
    'VehicleState',
    'ControlInputs',
    'servo_to_deflection',
    'servo_to_throttle',
    'ThrustModel',
    'GRAVITY_MSS',
    'HOVER_THROTTLE',
    'SensorNoise',
    'DynamicsIntegrator',
    'Plane'
]
