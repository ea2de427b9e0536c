from .sizing import SizingInput, SizingMode
from .units import Quantity, UnitSystem, unit_label


def _ask_float(prompt, default):
    while True:
        try:
            return float(input(prompt) or default)
        except ValueError:
            print("Please enter a valid number.")


def _ask_choice(prompt, options, default):
    while True:
        choice = (input(prompt) or default).strip()
        for option in options:
            if choice.lower() == option.value.lower():
                return option
        print(f"Please enter one of: {', '.join(o.value for o in options)}")


def get_inputs():
    print("Enter Duct Sizer inputs:")
    system = _ask_choice("Unit system (IP/SI) [default IP]: ", list(UnitSystem), "IP")

    # Defaults shown in the selected system
    si = system is UnitSystem.SI
    airflow = _ask_float(
        f"Air Flow ({unit_label(Quantity.AIRFLOW, system)}) [default {1700 if si else 1000}]: ",
        1700 if si else 1000)
    mode = _ask_choice("Design by (friction/velocity) [default friction]: ",
                       list(SizingMode), "friction")

    friction = 0.82 if si else 0.1
    velocity = 6.1 if si else 1200
    if mode is SizingMode.FRICTION:
        friction = _ask_float(
            f"Target Friction ({unit_label(Quantity.FRICTION, system)}) [default {friction}]: ", friction)
    else:
        velocity = _ask_float(
            f"Target Velocity ({unit_label(Quantity.VELOCITY, system)}) [default {velocity}]: ", velocity)

    side = _ask_float(
        f"Rectangular constraint side ({unit_label(Quantity.LENGTH, system)}) [default {300 if si else 12}]: ",
        300 if si else 12)

    sizing_input = SizingInput.from_display(
        system,
        airflow=airflow,
        mode=mode,
        friction_target=friction,
        velocity_target=velocity,
        constraint_side=side,
    )
    return sizing_input, system
