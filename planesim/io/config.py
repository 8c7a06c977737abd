"""
Plane Configuration System

Provides YAML-based configuration loading for plane mass, thrust,
aerodynamic coefficients, sensor noise and initial state.
"""

import logging

import yaml
import numpy as np
from typing import Dict, Any
from pathlib import Path

from ..core.coefficients import AeroCoefficients
from ..core.noise import SensorNoise
from ..core.plane import Plane
from ..core.propulsion import GRAVITY_MSS, HOVER_THROTTLE
from ..core.state import VehicleState

logger = logging.getLogger(__name__)

REVERSE_THRUST_TAG = '-revthrust'


def reverse_thrust_from_frame(frame: str) -> bool:
    """
    Detect reverse-thrust variants from a frame name.

    Examples
    --------
    >>> reverse_thrust_from_frame('plane-revthrust')
    True
    >>> reverse_thrust_from_frame('plane')
    False
    """
    return REVERSE_THRUST_TAG in (frame or '')


class PlaneConfig:
    """
    Plane configuration loaded from YAML file.

    Attributes
    ----------
    name : str
        Plane name
    frame : str
        Frame variant name
    mass : float
        Plane mass (kg)
    gravity : float
        Gravitational acceleration (m/s^2)
    hover_throttle : float
        Throttle fraction that balances the weight
    reverse_thrust : bool
        Throttle mode, explicit flag or derived from the frame name
    air_density : float
        Initial air density (kg/m^3)
    coefficients : dict
        Aerodynamic coefficient overrides
    noise : dict
        Sensor noise configuration
    initial_state : dict
        Initial state configuration
    """

    def __init__(self, config_dict: Dict[str, Any]):
        """
        Initialize plane configuration from dictionary.

        Parameters
        ----------
        config_dict : dict
            Configuration dictionary (typically from YAML)
        """
        self.raw_config = config_dict
        self._parse_config()

    def _parse_config(self):
        """Parse configuration dictionary."""
        plane = self.raw_config.get('plane', {})

        self.name = plane.get('name', 'Unnamed Plane')
        self.frame = plane.get('frame', 'plane')

        # Mass and thrust
        self.mass = plane.get('mass', 1.0)
        self.gravity = plane.get('gravity', GRAVITY_MSS)
        self.hover_throttle = plane.get('hover_throttle', HOVER_THROTTLE)

        # An explicit flag wins over the frame naming convention
        if 'reverse_thrust' in plane:
            self.reverse_thrust = bool(plane['reverse_thrust'])
        else:
            self.reverse_thrust = reverse_thrust_from_frame(self.frame)

        self.air_density = plane.get('air_density', 1.225)

        self.coefficients = plane.get('coefficients', {}) or {}
        self.noise = plane.get('noise', {}) or {}
        self.initial_state = plane.get('initial_state', {}) or {}

    def create_coefficients(self) -> AeroCoefficients:
        """
        Create aerodynamic coefficient set from configuration.

        Unknown keys are skipped with a warning.

        Returns
        -------
        AeroCoefficients
            Configured coefficients
        """
        known = set(AeroCoefficients.field_names())
        kwargs = {}

        for key, value in self.coefficients.items():
            if key not in known:
                logger.warning("Ignoring unknown aerodynamic coefficient '%s' in %s", key, self.name)
                continue
            if key == 'cg_offset':
                value = np.asarray(value, dtype=float)
                if value.shape != (3,):
                    raise ValueError(f"cg_offset must have 3 components, got {value.shape}")
            else:
                value = float(value)
            kwargs[key] = value

        return AeroCoefficients(**kwargs)

    def create_noise_model(self) -> SensorNoise:
        """
        Create sensor noise injector from configuration.

        Returns
        -------
        SensorNoise
            Configured noise (disabled if `enabled: false`)
        """
        if not self.noise.get('enabled', True):
            return SensorNoise.disabled()

        return SensorNoise(
            gyro_noise=self.noise.get('gyro', np.radians(0.1)),
            accel_noise=self.noise.get('accel', 0.3),
            seed=self.noise.get('seed')
        )

    def create_state(self) -> VehicleState:
        """
        Create initial vehicle state from configuration.

        Angles are in degrees, velocity in body frame (m/s).

        Returns
        -------
        VehicleState
            Initial state
        """
        state = VehicleState(air_density=self.air_density)

        state.set_euler_angles(
            np.radians(self.initial_state.get('roll', 0.0)),
            np.radians(self.initial_state.get('pitch', 0.0)),
            np.radians(self.initial_state.get('yaw', 0.0))
        )
        state.set_body_velocity(np.array(self.initial_state.get('velocity', [0.0, 0.0, 0.0]), dtype=float))
        state.gyro = np.radians(np.array(self.initial_state.get('rates', [0.0, 0.0, 0.0]), dtype=float))

        return state

    def create_plane(self) -> Plane:
        """
        Create Plane from configuration.

        Returns
        -------
        Plane
            Configured plane with its initial state and noise model
        """
        return Plane(
            coefficients=self.create_coefficients(),
            mass=self.mass,
            gravity=self.gravity,
            hover_throttle=self.hover_throttle,
            reverse_thrust=self.reverse_thrust,
            state=self.create_state(),
            noise=self.create_noise_model()
        )

    def __repr__(self):
        """String representation."""
        return (f"PlaneConfig(name='{self.name}', "
                f"frame='{self.frame}', "
                f"mass={self.mass}, "
                f"reverse_thrust={self.reverse_thrust})")


def load_plane_config(yaml_file: str) -> PlaneConfig:
    """
    Load plane configuration from YAML file.

    Parameters
    ----------
    yaml_file : str
        Path to YAML configuration file

    Returns
    -------
    PlaneConfig
        Loaded plane configuration

    Examples
    --------
    >>> config = load_plane_config('planes/small_plane.yaml')
    >>> plane = config.create_plane()
    """
    path = Path(yaml_file)
    if not path.exists():
        raise FileNotFoundError(f"Plane configuration not found: {yaml_file}")

    with open(path, 'r') as f:
        config_dict = yaml.safe_load(f) or {}

    config = PlaneConfig(config_dict)
    logger.info("Loaded plane configuration '%s' from %s", config.name, path)
    return config


def save_plane_config(config: PlaneConfig, yaml_file: str):
    """
    Save plane configuration to YAML file.

    Parameters
    ----------
    config : PlaneConfig
        Plane configuration to save
    yaml_file : str
        Output YAML file path
    """
    with open(yaml_file, 'w') as f:
        yaml.dump(config.raw_config, f, default_flow_style=False, sort_keys=False)

    logger.info("Configuration saved to: %s", yaml_file)


def create_example_config() -> Dict[str, Any]:
    """
    Create example plane configuration dictionary.

    Returns
    -------
    dict
        Example configuration
    """
    config = {
        'plane': {
            'name': 'Small Plane',
            'frame': 'plane',
            'mass': 1.0,             # kg
            'gravity': GRAVITY_MSS,  # m/s^2
            'hover_throttle': HOVER_THROTTLE,
            'air_density': 1.225,    # kg/m^3
            'coefficients': {
                's': 0.45,           # m^2
                'b': 1.88,           # m
                'c': 0.24,           # m
                'c_lift_0': 0.56,
                'c_lift_a': 6.9,
                'c_drag_p': 0.1,
                'c_m_0': 0.045,
                'c_m_a': -0.7,
                'c_m_q': -20.0,
                'c_m_deltae': 1.0,
                'c_l_deltaa': 0.25,
                'c_n_deltar': 0.1,
                'cg_offset': [-0.15, 0.0, -0.05]  # m
            },
            'noise': {
                'enabled': True,
                'gyro': float(np.radians(0.1)),  # rad/s
                'accel': 0.3,                    # m/s^2
                'seed': 0
            },
            'initial_state': {
                'velocity': [15.0, 0.0, 0.0],  # m/s, body frame
                'pitch': 2.0,                  # deg
                'roll': 0.0,
                'yaw': 0.0
            }
        }
    }

    return config
