"""
Tests for the command-line calculator.
"""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

import main
from ductcalc.advisory import AdvisoryError
from ductcalc.sizing import SizingInput, SizingMode
from ductcalc.units import UnitSystem


def run_cli(argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main.main(argv)
    return code, out.getvalue(), err.getvalue()


class TestCli(unittest.TestCase):
    """Test CLI output."""

    def test_friction_mode(self):
        code, out, _ = run_cli(["--airflow", "1000", "--friction", "0.1", "--side", "12"])
        self.assertEqual(code, 0)
        self.assertIn('13.9" Round', out)
        self.assertIn("Ø 14 in", out)
        self.assertIn("12 x 14 inches", out)
        self.assertIn("SMACNA OK", out)
        self.assertIn("(derived)", out.split("Velocity:")[1].splitlines()[0])

    def test_velocity_mode(self):
        code, out, _ = run_cli(["--airflow", "1000", "--mode", "velocity", "--velocity", "1200"])
        self.assertEqual(code, 0)
        self.assertIn("0.18 in.wg/100ft  (derived)", out)
        self.assertIn("1200 FPM", out)

    def test_defaults_apply(self):
        _, out, _ = run_cli(["--airflow", "1000"])
        self.assertIn("0.10 in.wg/100ft", out)
        self.assertIn("12 x 14 inches", out)

    def test_si_units(self):
        code, out, _ = run_cli(["--units", "SI", "--airflow", "1699", "--side", "305"])
        self.assertEqual(code, 0)
        self.assertIn("1699 CMH", out)
        self.assertIn("mm Round", out)
        self.assertIn("0.82 Pa/m", out)

    def test_aspect_warning(self):
        _, out, _ = run_cli(["--airflow", "4000", "--side", "4"])
        self.assertIn("Exceeds Limit", out)

    def test_table(self):
        _, out, _ = run_cli(["--airflow", "1000", "--table"])
        self.assertIn("Rectangular options:", out)
        self.assertIn("Constraint (in)", out)

    def test_high_velocity_flag(self):
        _, out, _ = run_cli(["--airflow", "10000", "--friction", "0.5"])
        self.assertIn("high velocity", out)

    def test_invalid_number(self):
        with self.assertRaises(SystemExit):
            with redirect_stderr(io.StringIO()):
                main.build_parser().parse_args(["--airflow", "lots"])


class TestCliAdvisory(unittest.TestCase):
    """Test --advise handling."""

    def test_advice_printed(self):
        with patch('main.advise', return_value="Looks good.") as advise:
            code, out, _ = run_cli(["--airflow", "1000", "--advise", "analyze"])
        self.assertEqual(code, 0)
        self.assertIn("Looks good.", out)
        self.assertEqual(advise.call_args[0][0], "analyze")

    def test_advice_failure(self):
        with patch('main.advise', side_effect=AdvisoryError("Failed to connect to AI. Please try again.")):
            code, _, err = run_cli(["--airflow", "1000", "--advise", "draft"])
        self.assertEqual(code, 1)
        self.assertIn("Failed to connect", err)


class TestCliInteractive(unittest.TestCase):

    def test_prompts_when_no_airflow(self):
        sizing_input = SizingInput(airflow=2000, mode=SizingMode.VELOCITY, velocity_target=1000)
        with patch('main.get_inputs', return_value=(sizing_input, UnitSystem.IP)) as get_inputs:
            code, out, _ = run_cli([])
        get_inputs.assert_called_once()
        self.assertEqual(code, 0)
        self.assertIn("2000 CFM", out)


if __name__ == '__main__':
    unittest.main()
