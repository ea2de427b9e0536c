import math

from .units import is_positive

# Velocity above which the derived value is flagged as a noise risk
HIGH_VELOCITY_FPM = 1500.0


def solve_dia_by_velocity(cfm, velocity_fpm):
    """
    Round duct diameter (in) that carries ``cfm`` at ``velocity_fpm``.

    Area = cfm / fpm (ft²), D = 2·sqrt(A/π) converted to inches.
    """
    if not is_positive(cfm, velocity_fpm):
        return 0.0
    area = cfm / velocity_fpm
    diameter = 2 * math.sqrt(area / math.pi) * 12  # in
    return diameter if is_positive(diameter) else 0.0


def calc_velocity(cfm, diameter_in):
    """Mean velocity (FPM) through a round duct; 0 for a non-positive diameter or airflow."""
    if not is_positive(cfm, diameter_in):
        return 0.0
    # radius in inches to feet in one step
    try:
        area = math.pi * (diameter_in / 24) ** 2
    except OverflowError:
        return 0.0
    if area <= 0:
        return 0.0
    velocity = cfm / area
    return velocity if is_positive(velocity) else 0.0


def is_high_velocity(velocity_fpm):
    return velocity_fpm > HIGH_VELOCITY_FPM
