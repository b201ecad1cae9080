"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Annulus, Circle

from goldilocks.renderers.plotly_orbit import chart_extent
from goldilocks.simulation import SimulationState

_ROOT = Path(__file__).parent.parent.parent.parent


def render_static_chart(state: SimulationState, chart_size: int = 10) -> Figure:
    """Render the current SimulationState as a static matplotlib image.

    Args:
        state: Simulation state at the moment to capture.
        chart_size: Output image size in inches.

    Returns:
        matplotlib Figure object.
    """
    p = state.params
    fig, ax = plt.subplots(figsize=(chart_size, chart_size))
    fig.patch.set_facecolor("black")
    ax.set_facecolor("black")

    inner = p.habitable_zone_inner_au
    outer = p.habitable_zone_outer_au
    band = outer - inner
    # Non-overlapping bands: red disc, then green and blue rings of equal width.
    ax.add_patch(Circle((0, 0), inner, color="#cc4444", alpha=0.5, linewidth=0, zorder=0))
    if band > 0:
        for radius, color in ((outer, "#00aa44"), (outer + band, "#4488ff")):
            ax.add_patch(
                Annulus((0, 0), radius, band, color=color, alpha=0.5, linewidth=0, zorder=0)
            )

    orbit = np.array([(pt.x, pt.z) for pt in state.orbit_points])
    ax.plot(orbit[:, 0], orbit[:, 1], color="white", linewidth=0.8, zorder=1)

    ax.add_patch(Circle((0, 0), p.star_radius_display, color="#ffcc66", zorder=2))
    pos = state.position()
    ax.add_patch(Circle((pos.x, pos.z), p.planet_radius_display, color="white", zorder=3))

    extent = chart_extent(state)
    ax.set_xlim(-extent, extent)
    ax.set_ylim(-extent, extent)
    ax.set_aspect("equal")
    ax.axis("off")
    ax.set_title(
        f"{p.pl_name} ({p.host_name}) · {state.elapsed_days():.1f} d",
        color="#e8e8e8",
    )

    return fig


def save_static_chart(state: SimulationState, output_path: Path | None = None) -> Path:
    """Save the current SimulationState as a PNG file.

    Args:
        state: Simulation state at the moment to capture.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        days = int(state.elapsed_days())
        filename = f"{state.params.pl_name}__{days}d.png".replace(" ", "_")
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(state)
    fig.savefig(output_path, facecolor="black")
    plt.close(fig)
    return output_path
