"""
Configuration System Tests

Tests for YAML plane configuration loading and model construction.
"""

import logging
import os

import pytest
import numpy as np
import yaml

from planesim.core.coefficients import AeroCoefficients
from planesim.core.plane import Plane
from planesim.io.config import (
    PlaneConfig,
    load_plane_config,
    save_plane_config,
    create_example_config,
    reverse_thrust_from_frame
)


class TestFrameName:
    """Test reverse-thrust detection from frame names."""

    def test_reverse_thrust_frames(self):
        assert reverse_thrust_from_frame('plane-revthrust')
        assert reverse_thrust_from_frame('plane-elevon-revthrust')

    def test_forward_frames(self):
        assert not reverse_thrust_from_frame('plane')
        assert not reverse_thrust_from_frame('plane-elevon')
        assert not reverse_thrust_from_frame(None)


class TestPlaneConfig:
    """Test configuration parsing."""

    def test_example_config(self):
        config = PlaneConfig(create_example_config())

        assert config.name == 'Small Plane'
        assert config.mass == 1.0
        assert not config.reverse_thrust
        assert 'PlaneConfig' in repr(config)

    def test_defaults_for_empty_config(self):
        config = PlaneConfig({})
        plane = config.create_plane()

        assert isinstance(plane, Plane)
        assert plane.mass == 1.0
        assert np.isclose(plane.thrust_scale, 9.80665 / 0.7)

    def test_reverse_thrust_from_frame(self):
        config = PlaneConfig({'plane': {'frame': 'plane-revthrust'}})
        assert config.reverse_thrust

    def test_explicit_flag_overrides_frame(self):
        config = PlaneConfig({'plane': {'frame': 'plane-revthrust', 'reverse_thrust': False}})
        assert not config.reverse_thrust

    def test_create_coefficients(self):
        config = PlaneConfig(create_example_config())
        coeffs = config.create_coefficients()

        assert isinstance(coeffs, AeroCoefficients)
        assert coeffs.c_lift_a == 6.9
        assert np.allclose(coeffs.cg_offset, [-0.15, 0.0, -0.05])
        # Keys not in the file keep their defaults
        assert coeffs.c_y_b == AeroCoefficients().c_y_b

    def test_unknown_coefficient_skipped(self, caplog):
        config = PlaneConfig({'plane': {'coefficients': {'c_lift_a': 5.0, 'CL_bogus': 1.0}}})

        with caplog.at_level(logging.WARNING, logger='planesim.io.config'):
            coeffs = config.create_coefficients()

        assert coeffs.c_lift_a == 5.0
        assert 'CL_bogus' in caplog.text

    def test_bad_cg_offset(self):
        config = PlaneConfig({'plane': {'coefficients': {'cg_offset': [0.1, 0.2]}}})
        with pytest.raises(ValueError):
            config.create_coefficients()

    def test_noise_model(self):
        config = PlaneConfig(create_example_config())
        noise = config.create_noise_model()

        assert noise.enabled
        assert noise.accel_noise == 0.3

    def test_noise_disabled(self):
        config = PlaneConfig({'plane': {'noise': {'enabled': False}}})
        assert not config.create_noise_model().enabled

    def test_initial_state(self):
        config = PlaneConfig(create_example_config())
        state = config.create_state()

        assert np.allclose(state.velocity_bf, [15.0, 0.0, 0.0])
        assert np.isclose(state.airspeed, 15.0)
        assert np.isclose(np.degrees(state.euler_angles[1]), 2.0)
        # Earth velocity is consistent with the attitude
        assert np.allclose(state.dcm.T @ state.velocity_ef, state.velocity_bf)

    def test_create_plane_steps(self):
        plane = PlaneConfig(create_example_config()).create_plane()
        rot_accel, accel_body = plane.step([1500, 1500, 1500, 1500])

        assert rot_accel.shape == (3,)
        assert accel_body.shape == (3,)
        assert np.all(np.isfinite(accel_body))


class TestConfigFiles:
    """Test YAML load/save."""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / 'plane.yaml'
        save_plane_config(PlaneConfig(create_example_config()), str(path))

        config = load_plane_config(str(path))

        assert config.name == 'Small Plane'
        assert config.create_coefficients().c_m_q == -20.0

    def test_load_handwritten_yaml(self, tmp_path):
        path = tmp_path / 'revthrust.yaml'
        path.write_text(yaml.dump({
            'plane': {
                'name': 'Pusher',
                'frame': 'plane-revthrust',
                'mass': 2.5,
                'hover_throttle': 0.5,
                'coefficients': {'c_drag_p': 0.08}
            }
        }))

        plane = load_plane_config(str(path)).create_plane()

        assert plane.reverse_thrust
        assert np.isclose(plane.thrust_scale, 2.5 * 9.80665 / 0.5)
        assert plane.coefficients.c_drag_p == 0.08

    @pytest.mark.parametrize('filename, reverse', [
        ('small_plane.yaml', False),
        ('small_plane_revthrust.yaml', True),
    ])
    def test_shipped_configs(self, filename, reverse):
        """Bundled configs reproduce the stock coefficient set."""
        path = os.path.join(os.path.dirname(__file__), '..', 'config', filename)
        plane = load_plane_config(path).create_plane()
        stock = AeroCoefficients()

        assert plane.reverse_thrust == reverse
        for name in AeroCoefficients.field_names():
            assert np.allclose(getattr(plane.coefficients, name), getattr(stock, name))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_plane_config(str(tmp_path / 'missing.yaml'))
