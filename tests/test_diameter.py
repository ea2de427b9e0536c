"""
Unit tests for the round duct solvers and their complements.
"""

import math
import unittest

from ductcalc.friction import calc_friction, solve_dia_by_friction
from ductcalc.velocity import (
    HIGH_VELOCITY_FPM,
    calc_velocity,
    is_high_velocity,
    solve_dia_by_velocity,
)

INVALID = [0.0, -1.0, -1000.0, float('nan'), float('inf'), float('-inf')]


class TestFrictionSizing(unittest.TestCase):
    """Test diameter from a friction target."""

    def test_reference_case(self):
        """1000 CFM at 0.1 in.wg/100ft gives about 13.9 inches."""
        self.assertAlmostEqual(solve_dia_by_friction(1000, 0.1), 13.9, delta=0.05)

    def test_lower_friction_needs_larger_duct(self):
        self.assertGreater(solve_dia_by_friction(1000, 0.05), solve_dia_by_friction(1000, 0.2))

    def test_round_trip(self):
        """calc_friction(cfm, D) returns the target that produced D."""
        for cfm in [50, 400, 1000, 7500, 25000]:
            for friction in [0.02, 0.08, 0.1, 0.35, 1.0]:
                diameter = solve_dia_by_friction(cfm, friction)
                back = calc_friction(cfm, diameter)
                self.assertTrue(math.isclose(back, friction, rel_tol=1e-6),
                                f"{cfm} CFM @ {friction}: got {back}")

    def test_zero_guards(self):
        """Invalid inputs give exactly 0."""
        for bad in INVALID:
            self.assertEqual(solve_dia_by_friction(bad, 0.1), 0.0)
            self.assertEqual(solve_dia_by_friction(1000, bad), 0.0)
            self.assertEqual(calc_friction(bad, 12.0), 0.0)
            self.assertEqual(calc_friction(1000, bad), 0.0)

    def test_extreme_magnitudes(self):
        """Huge or tiny finite inputs return a finite non-negative value instead of raising."""
        diameter = solve_dia_by_friction(1e200, 0.1)
        self.assertTrue(math.isfinite(diameter))
        self.assertGreater(diameter, 0)
        for value in [calc_friction(1000, 1e-70), calc_friction(1e-300, 1e300),
                      solve_dia_by_friction(1e300, 1e-300)]:
            self.assertTrue(math.isfinite(value))
            self.assertGreaterEqual(value, 0.0)
        self.assertEqual(calc_friction(1000, 1e-70), 0.0)


class TestVelocitySizing(unittest.TestCase):
    """Test diameter from a velocity target."""

    def test_reference_case(self):
        """1000 CFM at 1200 FPM gives about 12.36 inches and 0.18 in.wg/100ft."""
        diameter = solve_dia_by_velocity(1000, 1200)
        self.assertAlmostEqual(diameter, 12.36, places=2)
        self.assertAlmostEqual(calc_friction(1000, diameter), 0.18, delta=0.005)

    def test_velocity_of_friction_sized_duct(self):
        """Velocity in the 13.9 in duct sized for 0.1 in.wg/100ft."""
        diameter = solve_dia_by_friction(1000, 0.1)
        self.assertAlmostEqual(calc_velocity(1000, diameter), 951, delta=5)

    def test_one_square_foot(self):
        """1000 CFM at 1000 FPM needs 1 ft² of area."""
        diameter = solve_dia_by_velocity(1000, 1000)
        area = math.pi * (diameter / 24) ** 2
        self.assertAlmostEqual(area, 1.0, places=12)

    def test_round_trip(self):
        """calc_velocity(cfm, D) returns the target that produced D."""
        for cfm in [50, 400, 1000, 7500, 25000]:
            for velocity in [300, 800, 1200, 2000, 3500]:
                diameter = solve_dia_by_velocity(cfm, velocity)
                self.assertTrue(math.isclose(calc_velocity(cfm, diameter), velocity, rel_tol=1e-9))

    def test_zero_guards(self):
        """Invalid inputs give exactly 0."""
        for bad in INVALID:
            self.assertEqual(solve_dia_by_velocity(bad, 1200), 0.0)
            self.assertEqual(solve_dia_by_velocity(1000, bad), 0.0)
            self.assertEqual(calc_velocity(1000, bad), 0.0)
            self.assertEqual(calc_velocity(bad, 12.0), 0.0)

    def test_extreme_magnitudes(self):
        """Huge or tiny finite inputs return a finite non-negative value instead of raising."""
        self.assertEqual(calc_velocity(1000, 1e-170), 0.0)
        self.assertEqual(calc_velocity(1000, 1e200), 0.0)
        self.assertEqual(solve_dia_by_velocity(1e300, 1e-300), 0.0)
        self.assertGreater(calc_velocity(1e200, 1e75), 0.0)

    def test_high_velocity_flag(self):
        self.assertFalse(is_high_velocity(HIGH_VELOCITY_FPM))
        self.assertTrue(is_high_velocity(HIGH_VELOCITY_FPM + 1))
        self.assertFalse(is_high_velocity(900))


if __name__ == '__main__':
    unittest.main()
