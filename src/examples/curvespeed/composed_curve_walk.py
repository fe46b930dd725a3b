# composed_curve_walk.py
# Run with: python composed_curve_walk.py
"""Walk along a closed path of mixed segments in equal distance steps."""

import numpy as np

from curvespeed.curve import Curve

STEPS = 8


def main():
    """Main"""
    path = Curve.composed_curve((0.0, 0.0))
    path.line_to((100.0, 0.0))
    path.quadratic_to((150.0, 50.0), (100.0, 100.0))
    path.cubic_to((60.0, 140.0), (40.0, 60.0), (0.0, 100.0))
    path.close()

    print(f"Segments: {[segment.degree for segment in path]}")
    print(f"Length:   {path.estimate_length(1e-3):.4f}")

    walk = path.linear_speed(table_size=400, steps_count=2000)
    print()
    print(" fraction |  parameter |         point")
    print("-" * 44)
    for s in np.linspace(0.0, 1.0, STEPS + 1):
        t = walk.parameter_at(s)
        x, y = path.value_at(t)
        print(f"   {s:5.3f}  |   {t:6.4f}   | ({x:8.3f}, {y:8.3f})")

    polyline = path.iter_points(STEPS * 4, include_last=True).to_array()
    print()
    print(f"Polyline of {len(polyline)} points, first {polyline[0]}, last {polyline[-1]}")


if __name__ == "__main__":
    main()
