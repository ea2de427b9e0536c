"""
Duct sizing pipeline.

Turns a SizingInput (canonical IP units) into a SizingResult in a fixed
order: round diameter, the complementary velocity or friction value, the
rectangular side for the constraint, and the aspect-ratio check.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .aspect import AspectCheck, evaluate_aspect
from .friction import calc_friction, solve_dia_by_friction
from .rectangular import solve_rect_dimension
from .units import Quantity, UnitSystem, is_positive, to_canonical, to_display
from .velocity import calc_velocity, solve_dia_by_velocity

logger = logging.getLogger(__name__)


class SizingMode(Enum):
    FRICTION = "friction"
    VELOCITY = "velocity"


@dataclass(frozen=True)
class SizingInput:
    """Design inputs in canonical units (CFM, in.wg/100ft, FPM, in)."""
    airflow: float = 1000.0
    mode: SizingMode = SizingMode.FRICTION
    friction_target: float = 0.1
    velocity_target: float = 1200.0
    constraint_side: float = 12.0

    def __post_init__(self):
        object.__setattr__(self, 'mode', SizingMode(self.mode))

    @classmethod
    def from_display(cls, system, airflow: float, mode=SizingMode.FRICTION,
                     friction_target: float = 0.1, velocity_target: float = 1200.0,
                     constraint_side: float = 12.0) -> "SizingInput":
        """Build an input from values expressed in ``system`` units."""
        return cls(
            airflow=to_canonical(airflow, Quantity.AIRFLOW, system),
            mode=mode,
            friction_target=to_canonical(friction_target, Quantity.FRICTION, system),
            velocity_target=to_canonical(velocity_target, Quantity.VELOCITY, system),
            constraint_side=to_canonical(constraint_side, Quantity.LENGTH, system),
        )


@dataclass(frozen=True)
class SizingResult:
    """
    Computed duct size.

    Exactly one of ``velocity`` / ``friction_rate`` is the design target
    carried through from the input; the other is derived from the diameter.
    """
    diameter: float
    velocity: float
    friction_rate: float
    required_side: float
    mode: SizingMode
    constraint_side: float
    aspect: AspectCheck

    @property
    def derived_value(self) -> float:
        if self.mode is SizingMode.FRICTION:
            return self.velocity
        return self.friction_rate

    def to_display(self, system) -> Dict[str, float]:
        """Unrounded result values converted to ``system`` units."""
        system = UnitSystem(system)
        return {
            'diameter': to_display(self.diameter, Quantity.LENGTH, system),
            'velocity': to_display(self.velocity, Quantity.VELOCITY, system),
            'friction_rate': to_display(self.friction_rate, Quantity.FRICTION, system),
            'constraint_side': to_display(self.constraint_side, Quantity.LENGTH, system),
            'required_side': to_display(self.required_side, Quantity.LENGTH, system),
            'aspect_ratio': self.aspect.ratio,
        }


def _non_negative(value: float) -> float:
    return value if is_positive(value) else 0.0


def compute_sizing(sizing_input: SizingInput) -> SizingResult:
    """
    Size a duct from airflow and the active design target.

    Args:
        sizing_input: Inputs in canonical units

    Returns:
        SizingResult with diameter, velocity, friction rate, rectangular
        side and aspect check
    """
    cfm = sizing_input.airflow
    constraint = _non_negative(sizing_input.constraint_side)

    if sizing_input.mode is SizingMode.FRICTION:
        diameter = solve_dia_by_friction(cfm, sizing_input.friction_target)
        friction_rate = _non_negative(sizing_input.friction_target)
        velocity = calc_velocity(cfm, diameter)
    else:
        diameter = solve_dia_by_velocity(cfm, sizing_input.velocity_target)
        velocity = _non_negative(sizing_input.velocity_target)
        friction_rate = calc_friction(cfm, diameter)

    required_side = 0.0
    if diameter > 0 and constraint > 0:
        required_side = solve_rect_dimension(diameter, constraint)

    aspect = evaluate_aspect(constraint, required_side)

    logger.debug(
        "Sized %.1f CFM (%s): D=%.2f in, V=%.1f FPM, f=%.4f in.wg/100ft, rect %.1f x %.1f in (1:%.2f)",
        cfm, sizing_input.mode.value, diameter, velocity, friction_rate,
        constraint, required_side, aspect.ratio,
    )

    return SizingResult(
        diameter=diameter,
        velocity=velocity,
        friction_rate=friction_rate,
        required_side=required_side,
        mode=sizing_input.mode,
        constraint_side=constraint,
        aspect=aspect,
    )
