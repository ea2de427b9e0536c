#!/usr/bin/env python3
"""
Duct Sizer - CLI Calculator

Sizes a round duct from airflow and a friction or velocity target, then
finds the rectangular equivalent for a fixed side and checks its aspect
ratio against the SMACNA 4:1 limit.

Examples:
  python main.py --airflow 1000 --friction 0.1 --side 12
  python main.py --airflow 1000 --mode velocity --velocity 1200 --table
  python main.py --units SI --airflow 1700 --friction 0.8 --side 300
  python main.py              (interactive prompts)
"""

import argparse
import logging
import sys

from ductcalc.advisory import AdvisoryError, AdvisoryKind, advise
from ductcalc.formatting import (
    build_data_context, compliance_label, format_aspect, nominal_size,
)
from ductcalc.inputs import get_inputs
from ductcalc.sizing import SizingInput, SizingMode, compute_sizing
from ductcalc.tables import rectangular_options
from ductcalc.units import Quantity, UnitSystem, to_display, unit_label
from ductcalc.velocity import is_high_velocity

logger = logging.getLogger(__name__)

# Constraint sides (in) listed by --table
OPTION_SIDES = [6, 8, 10, 12, 14, 16, 18, 20, 24, 30, 36]


def build_parser():
    parser = argparse.ArgumentParser(description="Duct Sizer CLI (SMACNA / ASHRAE)")
    parser.add_argument("--airflow", type=float,
                        help="Air flow volume (CFM, or CMH with --units SI)")
    parser.add_argument("--mode", choices=[m.value for m in SizingMode], default="friction",
                        help="Design target driving the diameter (default: friction)")
    parser.add_argument("--friction", type=float, default=None,
                        help="Target friction (in.wg/100ft, or Pa/m) [default 0.1 in.wg/100ft]")
    parser.add_argument("--velocity", type=float, default=None,
                        help="Target velocity (FPM, or m/s) [default 1200 FPM]")
    parser.add_argument("--side", type=float, default=None,
                        help="Fixed rectangular side (in, or mm) [default 12 in]")
    parser.add_argument("--units", choices=[u.value for u in UnitSystem], default="IP",
                        help="Unit system for inputs and output (default: IP)")
    parser.add_argument("--table", action="store_true",
                        help="Also print rectangular options for common constraint sides")
    parser.add_argument("--advise", choices=[k.value for k in AdvisoryKind],
                        help="Request advisory text (needs GEMINI_API_KEY)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def _input_from_args(args):
    system = UnitSystem(args.units)
    defaults = SizingInput()

    def _value(given, default, quantity):
        if given is not None:
            return given
        return to_display(default, quantity, system)

    return SizingInput.from_display(
        system,
        airflow=args.airflow,
        mode=args.mode,
        friction_target=_value(args.friction, defaults.friction_target, Quantity.FRICTION),
        velocity_target=_value(args.velocity, defaults.velocity_target, Quantity.VELOCITY),
        constraint_side=_value(args.side, defaults.constraint_side, Quantity.LENGTH),
    )


def format_report(sizing_input, result, system):
    """Result block as printed by the CLI."""
    system = UnitSystem(system)
    context = build_data_context(sizing_input, result, system)
    shown = result.to_display(system)
    length_unit = unit_label(Quantity.LENGTH, system)

    lines = [
        "=" * 50,
        "DUCT SIZING RESULTS",
        "=" * 50,
        f"Air Flow:          {context['airflow']}",
        f"Design Mode:       {result.mode.value}",
        f"Round Diameter:    {context['roundSize']}",
        f"Nominal Size:      Ø {nominal_size(shown['diameter'])} {length_unit}",
    ]

    velocity_line = f"Velocity:          {context['velocity']}"
    if result.mode is SizingMode.FRICTION:
        velocity_line += "  (derived)"
        if is_high_velocity(result.velocity):
            velocity_line += "  ⚠️ high velocity"
    lines.append(velocity_line)

    friction_line = f"Friction:          {context['friction']}"
    if result.mode is SizingMode.VELOCITY:
        friction_line += "  (derived)"
    lines.append(friction_line)

    lines += [
        f"Rectangular:       {context['rectSize']}",
        f"Aspect Ratio:      {format_aspect(result.aspect)}  {compliance_label(result.aspect)}",
        "=" * 50,
    ]
    return "\n".join(lines)


def format_options(result, system):
    """Rectangular options table for the computed diameter, in display units."""
    system = UnitSystem(system)
    options = rectangular_options(result.diameter, OPTION_SIDES)
    if options.empty:
        return "No rectangular options available."

    unit = unit_label(Quantity.LENGTH, system)
    display = options.copy()
    for col in ['Constraint Side (in)', 'Required Side (in)']:
        display[col] = display[col].apply(lambda x: round(to_display(x, Quantity.LENGTH, system)))
    display = display.rename(columns={
        'Constraint Side (in)': f'Constraint ({unit})',
        'Required Side (in)': f'Required ({unit})',
    })
    display['Aspect Ratio'] = display['Aspect Ratio'].apply(lambda x: f"{x:.2f}")
    return display.to_string(index=False)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.airflow is None:
        sizing_input, system = get_inputs()
    else:
        system = UnitSystem(args.units)
        sizing_input = _input_from_args(args)

    logger.debug("Sizing input (canonical): %s", sizing_input)
    result = compute_sizing(sizing_input)
    print(format_report(sizing_input, result, system))

    if args.table:
        print("\nRectangular options:")
        print(format_options(result, system))

    if args.advise:
        try:
            text = advise(args.advise, sizing_input, result, system)
        except AdvisoryError as e:
            print(f"Advisory error: {e}", file=sys.stderr)
            return 1
        print(f"\n{text}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
