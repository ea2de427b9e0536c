"""
Aspect-ratio check for rectangular duct (SMACNA maximum 4:1).
"""

from dataclasses import dataclass

from .units import is_positive

MAX_ASPECT_RATIO = 4.0


@dataclass(frozen=True)
class AspectCheck:
    """Long side over short side, and whether it is within the limit."""
    ratio: float
    compliant: bool


def evaluate_aspect(side_a: float, side_b: float) -> AspectCheck:
    # A missing side counts as 1 so the ratio is still reported
    a = side_a if is_positive(side_a) else 1.0
    b = side_b if is_positive(side_b) else 1.0
    ratio = max(a, b) / min(a, b)
    return AspectCheck(ratio=ratio, compliant=ratio <= MAX_ASPECT_RATIO)
