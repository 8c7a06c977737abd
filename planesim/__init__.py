"""
Fixed-wing plane aerodynamic step model for flight-dynamics simulation.
"""

from .core import (
    AeroCoefficients,
    StallBlendAeroModel,
    VehicleState,
    ControlInputs,
    ThrustModel,
    SensorNoise,
    DynamicsIntegrator,
    Plane
)

__version__ = '0.1.0'

__all__ = [
    'AeroCoefficients',
    'StallBlendAeroModel',
    'VehicleState',
    'ControlInputs',
    'ThrustModel',
    'SensorNoise',
    'DynamicsIntegrator',
    'Plane'
]
