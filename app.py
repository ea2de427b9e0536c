#!/usr/bin/env python3
"""
Streamlit web application for the Duct Sizer.
Sizes round and rectangular ductwork from airflow and a friction or
velocity target, with aspect-ratio check, design charts and advisory notes.

Run locally:
  streamlit run app.py
"""

import os

import streamlit as st

from ductcalc.advisory import AdvisoryError, AdvisoryKind, advise
from ductcalc.formatting import (
    compliance_label, format_aspect, format_number, nominal_size,
)
from ductcalc.sizing import SizingInput, SizingMode, compute_sizing
from ductcalc.tables import rectangular_options
from ductcalc.units import Quantity, UnitSystem, to_canonical, to_display, unit_label
from ductcalc.velocity import HIGH_VELOCITY_FPM, is_high_velocity
from ductcalc.visualization import friction_figure, rectangle_figure

# Slider ranges (min, max, step) per unit system, in display units
SLIDER_RANGES = {
    Quantity.AIRFLOW: {UnitSystem.IP: (50.0, 10000.0, 50.0), UnitSystem.SI: (100.0, 17000.0, 100.0)},
    Quantity.FRICTION: {UnitSystem.IP: (0.05, 1.0, 0.01), UnitSystem.SI: (0.4, 8.0, 0.1)},
    Quantity.VELOCITY: {UnitSystem.IP: (500.0, 3500.0, 50.0), UnitSystem.SI: (2.5, 18.0, 0.5)},
}

OPTION_SIDES = [6, 8, 10, 12, 14, 16, 18, 20, 24, 30, 36]

# Page configuration
st.set_page_config(
    page_title="DuctMaster Pro",
    page_icon="🌬️",
    layout="wide",
    initial_sidebar_state="expanded"
)


def _init_state():
    """Canonical (IP) values survive unit toggles in session state."""
    defaults = SizingInput()
    st.session_state.setdefault('airflow', defaults.airflow)
    st.session_state.setdefault('friction', defaults.friction_target)
    st.session_state.setdefault('velocity', defaults.velocity_target)
    st.session_state.setdefault('side', defaults.constraint_side)


def quantity_slider(label, quantity, state_key, system, fmt, help_text=None):
    """Slider in display units backed by a canonical session value."""
    lo, hi, step = SLIDER_RANGES[quantity][system]
    shown = to_display(st.session_state[state_key], quantity, system)
    shown = min(max(shown, lo), hi)
    value = st.slider(
        f"{label} ({unit_label(quantity, system)})",
        min_value=lo,
        max_value=hi,
        value=float(shown),
        step=step,
        format=fmt,
        help=help_text,
    )
    st.session_state[state_key] = to_canonical(value, quantity, system)


def main():
    """Main Streamlit application."""
    _init_state()

    st.title("🌬️ DuctMaster Pro")
    st.markdown("**Round and rectangular duct sizing per SMACNA / ASHRAE friction charts**")
    st.divider()

    with st.sidebar:
        st.header("⚙️ System Inputs")

        system = UnitSystem(st.radio("Units", [u.value for u in UnitSystem], horizontal=True))

        quantity_slider("Air Flow Volume", Quantity.AIRFLOW, 'airflow', system, "%.0f",
                        "Design airflow for the duct run")

        mode = SizingMode(st.radio(
            "Design Target",
            [m.value for m in SizingMode],
            format_func=str.capitalize,
            horizontal=True,
        ))

        if mode is SizingMode.FRICTION:
            quantity_slider("Target Friction", Quantity.FRICTION, 'friction', system, "%.2f",
                            "Friction loss per 100 ft of duct")
        else:
            quantity_slider("Target Velocity", Quantity.VELOCITY, 'velocity', system,
                            "%.0f" if system is UnitSystem.IP else "%.1f",
                            "Mean air velocity in the duct")

        st.subheader("📐 Rectangular Sizer")
        side_unit = unit_label(Quantity.LENGTH, system)
        side_value = st.number_input(
            f"Constraint ({side_unit})",
            min_value=0.0,
            value=float(round(to_display(st.session_state['side'], Quantity.LENGTH, system))),
            step=1.0,
            help="Fixed side of the rectangular duct (e.g. ceiling depth)"
        )
        st.session_state['side'] = to_canonical(side_value, Quantity.LENGTH, system)

    sizing_input = SizingInput(
        airflow=st.session_state['airflow'],
        mode=mode,
        friction_target=st.session_state['friction'],
        velocity_target=st.session_state['velocity'],
        constraint_side=st.session_state['side'],
    )
    result = compute_sizing(sizing_input)
    shown = result.to_display(system)

    # Results
    st.header("📊 Results")
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Round", f"{format_number(shown['diameter'], 0)} {side_unit}")
        st.caption(f"Ø {nominal_size(shown['diameter'])} {side_unit} nominal")
    with col2:
        if mode is SizingMode.FRICTION:
            st.metric("Velocity", f"{format_number(shown['velocity'], 1)} {unit_label(Quantity.VELOCITY, system)}")
            if is_high_velocity(result.velocity):
                st.warning(f"Velocity above {HIGH_VELOCITY_FPM:.0f} FPM: check noise criteria.")
        else:
            st.metric("Friction", f"{format_number(shown['friction_rate'], 2)} {unit_label(Quantity.FRICTION, system)}")
    with col3:
        st.metric("Rectangular",
                  f"{format_number(shown['constraint_side'], 0)} x {format_number(shown['required_side'], 0)} {side_unit}")
        if result.aspect.compliant:
            st.success(f"{format_aspect(result.aspect)}: {compliance_label(result.aspect)} (max 1:4)")
        else:
            st.error(f"{format_aspect(result.aspect)}: {compliance_label(result.aspect)} (max 1:4)")

    # Charts
    st.header("📈 Design Charts")
    tab1, tab2, tab3 = st.tabs(["Friction & Velocity", "Rectangular Section", "Rectangular Options"])

    with tab1:
        st.plotly_chart(friction_figure(sizing_input.airflow, result, system), use_container_width=True)

    with tab2:
        st.plotly_chart(
            rectangle_figure(shown['constraint_side'], shown['required_side'], result.aspect, side_unit),
            use_container_width=True,
        )

    with tab3:
        options = rectangular_options(result.diameter, OPTION_SIDES)
        if options.empty:
            st.info("Enter a positive airflow and target to list rectangular options.")
        else:
            st.dataframe(options, use_container_width=True)

    # Advisory
    st.header("✨ AI Superintendent")
    if not os.environ.get("GEMINI_API_KEY"):
        st.info("Set GEMINI_API_KEY to enable advisory notes.")
        return

    col1, col2 = st.columns(2)
    with col1:
        analyze = st.button("💬 Safety Check", use_container_width=True)
    with col2:
        draft = st.button("📝 Draft Note", use_container_width=True)

    kind = AdvisoryKind.ANALYZE if analyze else AdvisoryKind.DRAFT if draft else None
    if kind is not None:
        with st.spinner("Consulting Standards..."):
            try:
                text = advise(kind, sizing_input, result, system)
            except AdvisoryError as e:
                st.error(str(e))
            else:
                st.subheader("SMACNA Assessment" if kind is AdvisoryKind.ANALYZE else "Field Instruction")
                st.code(text, language=None)


if __name__ == "__main__":
    main()
