"""
Configuration input/output for plane models.
"""

from .config import (
    PlaneConfig,
    load_plane_config,
    save_plane_config,
    create_example_config,
    reverse_thrust_from_frame
)

__all__ = [
    'PlaneConfig',
    'load_plane_config',
    'save_plane_config',
    'create_example_config',
    'reverse_thrust_from_frame'
]
