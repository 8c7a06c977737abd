"""
Shared fixtures for plane model tests.
"""

import pytest
import numpy as np
import os
import sys

# Add package root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from planesim.core.coefficients import AeroCoefficients
from planesim.core.state import VehicleState


def make_coefficients(**overrides) -> AeroCoefficients:
    """
    Coefficient set with every derivative zeroed.

    Geometry, Oswald factor and stall shape get benign non-zero values so
    the drag polar stays finite; anything can be overridden.
    """
    values = {name: 0.0 for name in AeroCoefficients.field_names()}
    values.update(s=1.0, b=1.0, c=1.0, oswald=1.0, mcoeff=50.0, alpha_stall=0.4712)
    values['cg_offset'] = np.zeros(3)
    values.update(overrides)
    return AeroCoefficients(**values)


@pytest.fixture
def zero_coeffs():
    return make_coefficients()


@pytest.fixture
def level_state():
    """Wings level, 10 m/s straight ahead, sea-level density."""
    state = VehicleState(air_density=1.225)
    state.set_body_velocity(np.array([10.0, 0.0, 0.0]))
    state.update_flow_angles()
    return state
