"""
Presentation helpers: rounding, nominal call-outs and the formatted
snapshot of a sizing result used for reports and advisory prompts.
"""

import math
from typing import Dict, Optional

from .aspect import AspectCheck
from .units import Quantity, UnitSystem, to_display, unit_label

# Decimal places per quantity and unit system
DISPLAY_DECIMALS = {
    Quantity.AIRFLOW: {UnitSystem.IP: 0, UnitSystem.SI: 0},
    Quantity.FRICTION: {UnitSystem.IP: 2, UnitSystem.SI: 2},
    Quantity.VELOCITY: {UnitSystem.IP: 0, UnitSystem.SI: 1},
    Quantity.LENGTH: {UnitSystem.IP: 1, UnitSystem.SI: 1},
}
SIDE_DECIMALS = 0
ASPECT_DECIMALS = 2


def format_number(value: Optional[float], decimals: int = 1) -> str:
    """Fixed-decimal string, or '-' when there is no number to show."""
    if value is None or math.isnan(value):
        return '-'
    return f"{value:.{decimals}f}"


def nominal_size(diameter: float) -> int:
    """Round a computed diameter up to the whole-number nominal call-out."""
    if not diameter > 0:
        return 0
    return math.ceil(diameter)


def format_quantity(value: float, quantity: Quantity, system, decimals: Optional[int] = None) -> str:
    """Convert a canonical value to ``system`` and format it with its unit."""
    system = UnitSystem(system)
    if decimals is None:
        decimals = DISPLAY_DECIMALS[quantity][system]
    shown = format_number(to_display(value, quantity, system), decimals)
    return f"{shown} {unit_label(quantity, system)}"


def format_aspect(check: AspectCheck) -> str:
    return f"1 : {format_number(check.ratio, ASPECT_DECIMALS)}"


def compliance_label(check: AspectCheck) -> str:
    return "SMACNA OK" if check.compliant else "Exceeds Limit"


def build_data_context(sizing_input, result, system) -> Dict[str, str]:
    """
    Formatted snapshot of a sizing result.

    Args:
        sizing_input: SizingInput the result was computed from
        result: SizingResult
        system: Unit system to display in

    Returns:
        Dictionary with 'airflow', 'velocity', 'friction', 'roundSize' and
        'rectSize' strings, each carrying its display unit
    """
    system = UnitSystem(system)
    shown = result.to_display(system)
    length_dec = DISPLAY_DECIMALS[Quantity.LENGTH][system]

    if system is UnitSystem.IP:
        round_size = f'{format_number(shown["diameter"], length_dec)}" Round'
        side_unit = 'inches'
    else:
        round_size = f'{format_number(shown["diameter"], length_dec)} mm Round'
        side_unit = 'mm'

    rect_size = (f'{format_number(shown["constraint_side"], SIDE_DECIMALS)} x '
                 f'{format_number(shown["required_side"], SIDE_DECIMALS)} {side_unit}')

    return {
        'airflow': format_quantity(sizing_input.airflow, Quantity.AIRFLOW, system),
        'velocity': format_quantity(result.velocity, Quantity.VELOCITY, system),
        'friction': format_quantity(result.friction_rate, Quantity.FRICTION, system),
        'roundSize': round_size,
        'rectSize': rect_size,
    }
