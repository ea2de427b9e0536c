"""
Unit conversion between the Inch-Pound (IP) canonical system and the
Metric (SI) display system.

All solver functions work in IP units: CFM, in.wg per 100 ft, FPM and
inches. SI values are converted at the boundary with a single
multiplicative factor per quantity.
"""

import math
from enum import Enum


class UnitSystem(Enum):
    IP = "IP"
    SI = "SI"


class Quantity(Enum):
    AIRFLOW = "airflow"
    FRICTION = "friction"
    VELOCITY = "velocity"
    LENGTH = "length"


# SI -> IP multipliers
CMH_TO_CFM = 0.588578
PA_M_TO_IN_100FT = 0.1224
M_S_TO_FPM = 196.85
MM_TO_IN = 0.0393701

UNITS = {
    Quantity.AIRFLOW: {
        'si_to_ip': CMH_TO_CFM,
        'labels': {UnitSystem.IP: 'CFM', UnitSystem.SI: 'CMH'},
    },
    Quantity.FRICTION: {
        'si_to_ip': PA_M_TO_IN_100FT,
        'labels': {UnitSystem.IP: 'in.wg/100ft', UnitSystem.SI: 'Pa/m'},
    },
    Quantity.VELOCITY: {
        'si_to_ip': M_S_TO_FPM,
        'labels': {UnitSystem.IP: 'FPM', UnitSystem.SI: 'm/s'},
    },
    Quantity.LENGTH: {
        'si_to_ip': MM_TO_IN,
        'labels': {UnitSystem.IP: 'in', UnitSystem.SI: 'mm'},
    },
}


def _system(system):
    try:
        return UnitSystem(system)
    except ValueError:
        raise ValueError(f"Unknown unit system: {system!r}") from None


def _quantity(quantity):
    try:
        return Quantity(quantity)
    except ValueError:
        raise ValueError(f"Unknown quantity: {quantity!r}") from None


def conversion_factor(quantity) -> float:
    """Return the factor that turns an IP value into its SI value."""
    return 1.0 / UNITS[_quantity(quantity)]['si_to_ip']


def to_canonical(value: float, quantity, system) -> float:
    """
    Convert a value expressed in ``system`` units to canonical IP units.

    Args:
        value: Value in display units (any real, including 0 and negatives)
        quantity: Quantity kind (Quantity member or its string value)
        system: Unit system the value is expressed in

    Returns:
        Value in IP units
    """
    if _system(system) is UnitSystem.IP:
        _quantity(quantity)
        return value
    return value / conversion_factor(quantity)


def to_display(value: float, quantity, system) -> float:
    """
    Convert a canonical IP value into ``system`` display units.

    Args:
        value: Value in IP units
        quantity: Quantity kind (Quantity member or its string value)
        system: Target unit system

    Returns:
        Value in display units, unrounded
    """
    if _system(system) is UnitSystem.IP:
        _quantity(quantity)
        return value
    return value * conversion_factor(quantity)


def unit_label(quantity, system) -> str:
    """Return the display label for a quantity, e.g. 'CFM' or 'Pa/m'."""
    return UNITS[_quantity(quantity)]['labels'][_system(system)]


def is_positive(*values) -> bool:
    """True when every value is a finite number greater than zero."""
    for value in values:
        if value is None or not math.isfinite(value) or value <= 0:
            return False
    return True
