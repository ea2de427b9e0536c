"""
Rectangular duct equivalency (Huebscher).

    De(a, b) = 1.30 · (a·b)^0.625 / (a + b)^0.25

There is no closed-form inverse for one side given the other and a target
De, so the unknown side is found by a bounded linear scan.
"""

import math

from .units import is_positive

# Scan bounds and resolution for the unknown side (inches)
SCAN_MIN = 2.0
SCAN_MAX = 150.0
SCAN_STEP = 0.5


def equivalent_diameter(side_a: float, side_b: float) -> float:
    """
    Equivalent round diameter of an ``side_a`` x ``side_b`` rectangle.

    Args:
        side_a: First side in inches
        side_b: Second side in inches

    Returns:
        Equivalent diameter in inches, 0 if either side is not positive
    """
    if not is_positive(side_a, side_b):
        return 0.0
    return 1.30 * (side_a * side_b) ** 0.625 / (side_a + side_b) ** 0.25


def scan_points(step: float = SCAN_STEP):
    """Yield candidate side lengths from SCAN_MIN up to SCAN_MAX."""
    if not step > 0:
        raise ValueError(f"Scan step must be positive, got {step}")
    count = math.floor((SCAN_MAX - SCAN_MIN) / step + 1e-9)
    for i in range(count + 1):
        yield SCAN_MIN + i * step


def solve_rect_dimension(target_diameter: float, known_side: float,
                         step: float = SCAN_STEP) -> float:
    """
    Find the side that, paired with ``known_side``, best matches ``target_diameter``.

    The scan runs from the low end upward and only a strictly smaller
    difference replaces the current best, so ties go to the smaller side.

    Args:
        target_diameter: Round diameter to match (in)
        known_side: Fixed rectangular side (in)
        step: Scan resolution (in); bounds stay at [SCAN_MIN, SCAN_MAX]

    Returns:
        Required side in inches, or 0 when either input is not positive
    """
    if not is_positive(target_diameter, known_side):
        return 0.0

    best_side = 0.0
    min_diff = math.inf
    for x in scan_points(step):
        diff = abs(equivalent_diameter(known_side, x) - target_diameter)
        if diff < min_diff:
            min_diff = diff
            best_side = x
    return best_side
