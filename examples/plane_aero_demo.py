"""
Plane Aerodynamics Demonstration

Shows how to:
- Load a plane from a YAML configuration
- Inspect the stall-blended lift and drag curves
- Step the plane through a short servo sequence
"""

import numpy as np
import matplotlib.pyplot as plt
import logging
import sys
import os

# Add package root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from planesim.core.coefficients import stall_blend, lift_coefficient, drag_coefficient
from planesim.io.config import load_plane_config


def main():
    """Run aerodynamics demonstration."""
    logging.basicConfig(level=logging.INFO)

    print("=" * 70)
    print("Plane Aerodynamics Demonstration")
    print("=" * 70)
    print()

    config_path = os.path.join(os.path.dirname(__file__), '..', 'config', 'small_plane.yaml')
    config = load_plane_config(config_path)
    plane = config.create_plane()
    coeffs = plane.coefficients

    print(f"1. Loaded {config.name}")
    print(f"   Mass:          {plane.mass:.2f} kg")
    print(f"   Thrust scale:  {plane.thrust_scale:.2f} N")
    print(f"   Aspect ratio:  {coeffs.aspect_ratio:.2f}")
    print()

    # Coefficient curves
    alpha = np.radians(np.linspace(-90, 90, 721))
    CL = lift_coefficient(coeffs, alpha)
    CD = drag_coefficient(coeffs, alpha)
    sigma = stall_blend(coeffs, alpha)

    print("2. Coefficient curves")
    print(f"   CL max:        {np.max(CL):.3f} at {np.degrees(alpha[np.argmax(CL)]):.1f} deg")
    print(f"   CD min:        {np.min(CD):.4f}")
    print()

    # Servo sequence: cruise, pull up, roll right, idle
    print("3. Stepping servo sequence")
    sequence = [
        [1500, 1500, 1600, 1500],
        [1500, 1350, 1700, 1500],
        [1700, 1500, 1700, 1550],
        [1500, 1500, 1000, 1500],
    ]
    for servos in sequence:
        rot_accel, accel_body = plane.step(servos)
        print(f"   {servos}: alpha={np.degrees(plane.state.angle_of_attack):6.2f} deg  "
              f"accel={np.array2string(accel_body, precision=3)}  "
              f"rot={np.array2string(rot_accel, precision=3)}")
    print()

    fig, axes = plt.subplots(1, 3, figsize=(15, 4))

    axes[0].plot(np.degrees(alpha), CL)
    axes[0].axvline(np.degrees(coeffs.alpha_stall), color='gray', linestyle='--')
    axes[0].set_xlabel('Alpha (deg)')
    axes[0].set_ylabel('CL')
    axes[0].set_title('Lift Coefficient')
    axes[0].grid(True)

    axes[1].plot(np.degrees(alpha), CD)
    axes[1].set_xlabel('Alpha (deg)')
    axes[1].set_ylabel('CD')
    axes[1].set_title('Drag Coefficient')
    axes[1].grid(True)

    axes[2].plot(np.degrees(alpha), sigma)
    axes[2].set_xlabel('Alpha (deg)')
    axes[2].set_ylabel('sigma')
    axes[2].set_title('Stall Blend Weight')
    axes[2].grid(True)

    plt.tight_layout()

    output_dir = os.path.join(os.path.dirname(__file__), '..', 'output')
    os.makedirs(output_dir, exist_ok=True)
    output_file = os.path.join(output_dir, 'plane_aero_curves.png')
    plt.savefig(output_file, dpi=150)
    print(f"4. Saved coefficient plot to {output_file}")


if __name__ == "__main__":
    main()
