"""
Friction-loss relation for round galvanized duct (SMACNA / ASHRAE fit).

    friction = K1 * cfm^1.9 / D^5.02

with friction in in.wg per 100 ft, airflow in CFM and D in inches. The
exponents are empirical curve-fit coefficients and stay as real literals.
Both directions are evaluated in log space so extreme but finite inputs
cannot overflow the intermediate powers.
"""

import math

from .units import is_positive

K1 = 0.109136
CFM_EXPONENT = 1.9
DIAMETER_EXPONENT = 5.02


def _finite_or_zero(log_value: float) -> float:
    try:
        value = math.exp(log_value)
    except OverflowError:
        return 0.0
    return value if is_positive(value) else 0.0


def solve_dia_by_friction(cfm: float, friction_rate: float) -> float:
    """
    Round duct diameter that produces the target friction rate.

    Args:
        cfm: Airflow in CFM
        friction_rate: Target friction in in.wg/100ft

    Returns:
        Diameter in inches, or 0 when either input is not positive or the
        result is not representable
    """
    if not is_positive(cfm, friction_rate):
        return 0.0
    log_d = (math.log(K1) + CFM_EXPONENT * math.log(cfm) - math.log(friction_rate)) / DIAMETER_EXPONENT
    return _finite_or_zero(log_d)


def calc_friction(cfm: float, diameter_in: float) -> float:
    """
    Friction rate (in.wg/100ft) of a round duct of the given diameter.

    Returns 0 when diameter or airflow is not positive, or when the rate
    over- or underflows.
    """
    if not is_positive(cfm, diameter_in):
        return 0.0
    return _finite_or_zero(
        math.log(K1) + CFM_EXPONENT * math.log(cfm) - DIAMETER_EXPONENT * math.log(diameter_in)
    )
