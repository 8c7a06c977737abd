"""
Direction cosine matrix helpers for attitude representation.

Convention: the DCM rotates body-frame vectors into the earth (NED) frame,
built from ZYX Euler angles (yaw-pitch-roll sequence).
Its transpose maps earth-frame vectors into the body frame.
"""

import numpy as np
from typing import Tuple


def dcm_from_euler(phi: float, theta: float, psi: float) -> np.ndarray:
    """
    Create body-to-earth rotation matrix from Euler angles.

    Parameters:
    -----------
    phi : float
        Roll angle (radians)
    theta : float
        Pitch angle (radians)
    psi : float
        Yaw angle (radians)

    Returns:
    --------
    dcm : np.ndarray, shape (3, 3)
        Direction cosine matrix (body to earth)
    """
    cp, sp = np.cos(theta), np.sin(theta)
    cr, sr = np.cos(phi), np.sin(phi)
    cy, sy = np.cos(psi), np.sin(psi)

    return np.array([
        [cp * cy, sr * sp * cy - cr * sy, cr * sp * cy + sr * sy],
        [cp * sy, sr * sp * sy + cr * cy, cr * sp * sy - sr * cy],
        [-sp,     sr * cp,                cr * cp],
    ])


def euler_from_dcm(dcm: np.ndarray) -> Tuple[float, float, float]:
    """
    Convert body-to-earth rotation matrix to Euler angles.

    Returns:
    --------
    phi, theta, psi : float
        Roll, pitch, yaw (radians)
    """
    # Clamp to avoid numerical issues with arcsin
    theta = -np.arcsin(np.clip(dcm[2, 0], -1.0, 1.0))
    phi = np.arctan2(dcm[2, 1], dcm[2, 2])
    psi = np.arctan2(dcm[1, 0], dcm[0, 0])
    return phi, theta, psi


def earth_to_body(dcm: np.ndarray, v_earth: np.ndarray) -> np.ndarray:
    """Rotate an earth-frame vector into the body frame."""
    return dcm.T @ v_earth


def body_to_earth(dcm: np.ndarray, v_body: np.ndarray) -> np.ndarray:
    """Rotate a body-frame vector into the earth frame."""
    return dcm @ v_body
