"""
Tests for interactive input prompts.
"""

import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from ductcalc.inputs import get_inputs
from ductcalc.sizing import SizingInput, SizingMode
from ductcalc.units import UnitSystem


def _run(answers):
    with patch('builtins.input', side_effect=answers), redirect_stdout(io.StringIO()):
        return get_inputs()


class TestGetInputs(unittest.TestCase):

    def test_defaults(self):
        sizing_input, system = _run(["", "", "", "", ""])
        self.assertIs(system, UnitSystem.IP)
        self.assertEqual(sizing_input, SizingInput())

    def test_si_velocity(self):
        sizing_input, system = _run(["SI", "1700", "velocity", "6", "300"])
        self.assertIs(system, UnitSystem.SI)
        self.assertIs(sizing_input.mode, SizingMode.VELOCITY)
        self.assertAlmostEqual(sizing_input.airflow, 1000.58, places=2)
        self.assertAlmostEqual(sizing_input.velocity_target, 1181.1, places=1)
        self.assertAlmostEqual(sizing_input.constraint_side, 11.811, places=3)

    def test_reprompts_on_bad_answers(self):
        sizing_input, system = _run(["metric", "ip", "abc", "2000", "", "0.08", "14"])
        self.assertIs(system, UnitSystem.IP)
        self.assertEqual(sizing_input.airflow, 2000.0)
        self.assertEqual(sizing_input.friction_target, 0.08)
        self.assertEqual(sizing_input.constraint_side, 14.0)


if __name__ == '__main__':
    unittest.main()
