"""Plotly 2D top-down orbit chart renderer.

Looks straight down on the orbital (x-z) plane with the star at the origin.
Three concentric bands show where the planet would be too hot (red), in the
Goldilocks zone (green), or too cold (blue).
"""

import numpy as np
import plotly.graph_objects as go

from goldilocks.simulation import SimulationState

_BG = "#050a1a"
_TOO_CLOSE_COLOR = "#663333"
_HABITABLE_COLOR = "#1f5a35"
_TOO_FAR_COLOR = "#2a3f6b"
_ORBIT_COLOR = "#ffffff"
_STAR_COLOR = "#ffcc66"
_PLANET_COLOR = "#ffffff"

_SIZE_PX = 800


def chart_extent(state: SimulationState) -> float:
    """Half-width (AU) of the view: the outer blue band or apoapsis, whichever is wider."""
    p = state.params
    too_far_outer = p.habitable_zone_outer_au + (
        p.habitable_zone_outer_au - p.habitable_zone_inner_au
    )
    apoapsis = p.orbit_semi_major_axis_au * (1 + p.eccentricity)
    return max(too_far_outer, apoapsis, p.star_radius_display) * 1.1


def _marker_px(radius_au: float, extent: float) -> float:
    """Scale a display radius to a marker diameter in pixels."""
    px = 2 * radius_au / (2 * extent) * _SIZE_PX
    return float(np.clip(px, 4, 40))


def _disc(radius: float, color: str) -> dict:
    return dict(
        type="circle",
        xref="x",
        yref="y",
        x0=-radius,
        y0=-radius,
        x1=radius,
        y1=radius,
        fillcolor=color,
        line=dict(width=0),
        layer="below",
    )


def render_plotly_chart(state: SimulationState) -> go.Figure:
    """Render the current SimulationState as a Plotly figure.

    The bands are drawn as stacked filled circles, largest first, so each
    smaller disc covers the middle of the one beneath it.

    Args:
        state: Simulation state; read only, never advanced here.

    Returns:
        Plotly Figure object.
    """
    p = state.params
    extent = chart_extent(state)
    inner = p.habitable_zone_inner_au
    outer = p.habitable_zone_outer_au
    too_far_outer = outer + (outer - inner)

    orbit_x = [pt.x for pt in state.orbit_points]
    orbit_z = [pt.z for pt in state.orbit_points]
    orbit_trace = go.Scatter(
        x=orbit_x,
        y=orbit_z,
        mode="lines",
        line=dict(color=_ORBIT_COLOR, width=1),
        hoverinfo="skip",
        name="orbit",
    )

    star_trace = go.Scatter(
        x=[0.0],
        y=[0.0],
        mode="markers",
        marker=dict(size=_marker_px(p.star_radius_display, extent), color=_STAR_COLOR),
        hovertext=[p.host_name],
        hoverinfo="text",
        name="star",
    )

    pos = state.position()
    planet_trace = go.Scatter(
        x=[pos.x],
        y=[pos.z],
        mode="markers",
        marker=dict(
            size=_marker_px(p.planet_radius_display, extent), color=_PLANET_COLOR
        ),
        hovertext=[p.pl_name],
        hoverinfo="text",
        name="planet",
    )

    fig = go.Figure(data=[orbit_trace, star_trace, planet_trace])
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        width=_SIZE_PX,
        height=_SIZE_PX,
        xaxis=dict(visible=False, range=[-extent, extent], fixedrange=True),
        yaxis=dict(
            visible=False,
            range=[-extent, extent],
            scaleanchor="x",
            scaleratio=1,
            fixedrange=True,
        ),
        shapes=[
            _disc(too_far_outer, _TOO_FAR_COLOR),
            _disc(outer, _HABITABLE_COLOR),
            _disc(inner, _TOO_CLOSE_COLOR),
        ],
    )
    fig._config = {"displayModeBar": False}  # type: ignore[attr-defined]

    return fig
