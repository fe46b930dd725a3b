# linear_speed_demo.py
# Run with: python linear_speed_demo.py
"""Compare parameter speed and constant speed tangents along a cubic Bezier curve."""

import numpy as np

from curvespeed.bezier import Bezier3
from curvespeed.linear_speed import LinearSpeed

POINTS = ((0.0, 0.0), (0.0, 100.0), (200.0, -100.0), (200.0, 0.0))
TABLE_SIZE = 200
STEPS_COUNT = 500
SAMPLES = 11


def main():
    """Main"""
    curve = Bezier3(*POINTS)
    constant = LinearSpeed(curve, TABLE_SIZE, STEPS_COUNT)

    print(f"Estimated length (precision 1e-4): {curve.estimate_length(1e-4):.6f}")
    print(f"Measured length ({STEPS_COUNT} steps):   {constant.length:.6f}")
    print()
    print("   t    | |curve'(t)| | |linear_speed'(t)|")
    print("-" * 42)
    for t in np.linspace(0.0, 1.0, SAMPLES):
        speed = np.linalg.norm(curve.tangent_at(t))
        constant_speed = np.linalg.norm(constant.tangent_at(t))
        print(f" {t:5.2f}  | {speed:10.4f} | {constant_speed:10.4f}")


if __name__ == "__main__":
    main()
