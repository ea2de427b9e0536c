"""
Design charts for duct sizing using Plotly.

- Friction rate and velocity vs diameter for a given airflow
- Scaled rectangle preview with aspect-ratio status
"""

import plotly.graph_objects as go
import numpy as np
from plotly.subplots import make_subplots
from typing import Tuple

from .aspect import AspectCheck
from .formatting import compliance_label, format_aspect, format_quantity
from .friction import calc_friction
from .units import Quantity, UnitSystem, to_display, unit_label
from .velocity import HIGH_VELOCITY_FPM, calc_velocity


def friction_figure(cfm: float, result, system=UnitSystem.IP,
                    diameter_range: Tuple[float, float] = (4, 48)) -> go.Figure:
    """
    Friction rate and velocity vs round duct diameter.

    Args:
        cfm: Airflow in CFM
        result: SizingResult to mark on the chart
        system: Unit system for the axes and hover labels
        diameter_range: Tuple of (min, max) diameter in inches

    Returns:
        Plotly Figure object
    """
    system = UnitSystem(system)
    diameters_in = np.linspace(diameter_range[0], diameter_range[1], 200)
    frictions = [calc_friction(cfm, d) for d in diameters_in]
    velocities = [calc_velocity(cfm, d) for d in diameters_in]

    length_unit = unit_label(Quantity.LENGTH, system)
    friction_unit = unit_label(Quantity.FRICTION, system)
    velocity_unit = unit_label(Quantity.VELOCITY, system)
    x = to_display(diameters_in, Quantity.LENGTH, system)
    x_range = [to_display(d, Quantity.LENGTH, system) for d in diameter_range]
    high_velocity = to_display(HIGH_VELOCITY_FPM, Quantity.VELOCITY, system)

    fig = make_subplots(specs=[[{"secondary_y": True}]])

    fig.add_trace(go.Scatter(
        x=x,
        y=to_display(np.array(frictions), Quantity.FRICTION, system),
        mode='lines',
        name='Friction Rate',
        line=dict(color='seagreen', width=2),
        hovertemplate=f'Diameter: %{{x:.1f}} {length_unit}<br>Friction: %{{y:.3f}} {friction_unit}<extra></extra>'
    ), secondary_y=False)

    fig.add_trace(go.Scatter(
        x=x,
        y=to_display(np.array(velocities), Quantity.VELOCITY, system),
        mode='lines',
        name='Velocity',
        line=dict(color='darkorange', width=2, dash='dot'),
        hovertemplate=f'Diameter: %{{x:.1f}} {length_unit}<br>Velocity: %{{y:.1f}} {velocity_unit}<extra></extra>'
    ), secondary_y=True)

    if result.diameter > 0:
        shown = result.to_display(system)
        fig.add_trace(go.Scatter(
            x=[shown['diameter']],
            y=[shown['friction_rate']],
            mode='markers+text',
            name='Selected Duct',
            marker=dict(color='royalblue', size=12),
            text=[f"{shown['diameter']:.1f} {length_unit}"],
            textposition='top center',
        ), secondary_y=False)

    # Velocity guideline on the secondary axis
    fig.add_trace(go.Scatter(
        x=x_range,
        y=[high_velocity, high_velocity],
        mode='lines',
        name=f'High Velocity ({format_quantity(HIGH_VELOCITY_FPM, Quantity.VELOCITY, system)})',
        line=dict(color='red', width=1, dash='dash'),
        hoverinfo='skip',
    ), secondary_y=True)

    airflow_label = format_quantity(cfm, Quantity.AIRFLOW, system)
    fig.update_layout(
        template='plotly_white',
        title=f'Friction & Velocity vs Round Duct Diameter<br>Airflow: {airflow_label}',
        xaxis_title=f'Duct Diameter ({length_unit})',
        showlegend=True,
        height=500,
        xaxis=dict(range=x_range, gridcolor='lightgray'),
    )
    fig.update_yaxes(title_text=f'Friction ({friction_unit})', type='log', secondary_y=False)
    fig.update_yaxes(title_text=f'Velocity ({velocity_unit})', secondary_y=True)

    return fig


def rectangle_figure(side_a: float, side_b: float, aspect: AspectCheck, unit: str = 'in') -> go.Figure:
    """
    Scaled outline of a rectangular duct, red when the aspect ratio is exceeded.

    Args:
        side_a: Constraint side (width)
        side_b: Required side (height)
        aspect: AspectCheck for the pair
        unit: Label for the side lengths

    Returns:
        Plotly Figure object
    """
    width = side_a if side_a > 0 else 1.0
    height = side_b if side_b > 0 else 1.0
    color = 'purple' if aspect.compliant else 'red'

    fig = go.Figure()
    fig.add_shape(
        type='rect', x0=0, y0=0, x1=width, y1=height,
        line=dict(color=color, width=3),
        fillcolor=color, opacity=0.25,
    )
    fig.add_annotation(
        x=width / 2, y=height / 2, showarrow=False,
        text=f'{side_a:.0f} x {side_b:.0f} {unit}<br>{format_aspect(aspect)} ({compliance_label(aspect)})',
        font=dict(color=color),
    )

    extent = max(width, height) * 1.1
    fig.update_layout(
        template='plotly_white',
        title='Rectangular Section',
        height=350,
        xaxis=dict(range=[-0.05 * extent, extent], showgrid=False, zeroline=False, visible=False),
        yaxis=dict(range=[-0.05 * extent, extent], showgrid=False, zeroline=False, visible=False,
                   scaleanchor='x', scaleratio=1),
    )

    return fig
