"""
Tabular sizing helpers built on pandas.

Produces DataFrames of rectangular alternatives for a round duct and of
sizing results across a range of airflows.
"""

import pandas as pd
from typing import Iterable, Tuple

from .aspect import evaluate_aspect
from .rectangular import solve_rect_dimension
from .sizing import SizingInput, SizingMode, compute_sizing

OPTION_COLUMNS = ['Constraint Side (in)', 'Required Side (in)', 'Aspect Ratio', 'Compliant']
SWEEP_COLUMNS = ['Airflow (CFM)', 'Diameter (in)', 'Velocity (FPM)',
                 'Friction (in.wg/100ft)', 'Required Side (in)', 'Aspect Ratio', 'Compliant']


def rectangular_options(target_diameter: float, sides: Iterable[float]) -> pd.DataFrame:
    """
    Rectangular alternatives for a round duct, one row per constraint side.

    Args:
        target_diameter: Round diameter to match (in)
        sides: Candidate constraint sides (in)

    Returns:
        DataFrame with OPTION_COLUMNS; sides that give no match are dropped
    """
    rows = []
    for side in sides:
        required = solve_rect_dimension(target_diameter, side)
        if required <= 0:
            continue
        check = evaluate_aspect(side, required)
        rows.append([float(side), required, check.ratio, check.compliant])

    return pd.DataFrame(rows, columns=OPTION_COLUMNS)


def sizing_sweep(airflows: Iterable[float], mode=SizingMode.FRICTION, target: float = 0.1,
                 constraint_side: float = 12.0) -> pd.DataFrame:
    """
    Size a duct for each airflow with a fixed design target.

    Args:
        airflows: Airflow values in CFM
        mode: SizingMode (or 'friction' / 'velocity')
        target: Friction (in.wg/100ft) or velocity (FPM) target, per mode
        constraint_side: Fixed rectangular side (in)

    Returns:
        DataFrame with SWEEP_COLUMNS
    """
    mode = SizingMode(mode)
    rows = []
    for cfm in airflows:
        if mode is SizingMode.FRICTION:
            sizing_input = SizingInput(airflow=cfm, mode=mode, friction_target=target,
                                       constraint_side=constraint_side)
        else:
            sizing_input = SizingInput(airflow=cfm, mode=mode, velocity_target=target,
                                       constraint_side=constraint_side)
        result = compute_sizing(sizing_input)
        rows.append([float(cfm), result.diameter, result.velocity, result.friction_rate,
                     result.required_side, result.aspect.ratio, result.aspect.compliant])

    return pd.DataFrame(rows, columns=SWEEP_COLUMNS)


def validate_options(options: pd.DataFrame) -> Tuple[bool, str]:
    """
    Validate a rectangular options table.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if options.empty:
        return False, "Options table is empty"

    missing_cols = [col for col in OPTION_COLUMNS if col not in options.columns]
    if missing_cols:
        return False, f"Missing required columns: {missing_cols}"

    if (options['Required Side (in)'] <= 0).any():
        return False, "All required sides must be positive"

    return True, ""
