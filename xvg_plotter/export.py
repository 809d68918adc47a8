"""
PNG export for the xvg Plotter.

Draws the same occupancy grid the terminal renderer shades onto a
matplotlib figure (light theme, greyscale, empty cells left white) and
saves it as a PNG.  The figure size is restored after saving, even on
error.
"""

import numpy as np
from matplotlib.figure import Figure

from .chart_density import bin_occupancy
from .constants import (
    COL_X, COL_Y, EXPORT_BINS_X, EXPORT_BINS_Y, EXPORT_CMAP, EXPORT_DPI,
    EXPORT_WIDTH_INCHES, PLOT_STYLE_LIGHT,
)
from .data_model import XvgData


def _axis_range(lo: float, hi: float) -> tuple:
    """Finite, non-degenerate ``(lo, hi)`` for an image extent."""
    if not (np.isfinite(lo) and np.isfinite(hi)):
        return (0.0, 1.0)
    if lo == hi:
        return (lo - 0.5, hi + 0.5)
    return (lo, hi)


def render_density_figure(
    fig: Figure,
    data: XvgData,
    *,
    graph_width: int,
    graph_height: int,
) -> None:
    """Render the occupancy grid of *data* on *fig*.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
        Figure to draw on (will be cleared).
    data : XvgData
        Parsed file with at least two columns.
    graph_width, graph_height : int
        Number of bins along x and y.
    """
    fig.clf()
    style = PLOT_STYLE_LIGHT
    fig.set_facecolor(style['figure.facecolor'])

    xs = data.col(COL_X)
    ys = data.col(COL_Y)
    grid = bin_occupancy(xs, ys, graph_width, graph_height)
    # Columns are stored largest-x first; flip so x grows to the right.
    image = np.ma.masked_equal(grid[:, ::-1], 0)

    ax = fig.add_subplot(111)
    ax.set_facecolor(style['axes.facecolor'])
    im = ax.imshow(
        image,
        cmap=EXPORT_CMAP,
        aspect='auto',
        origin='upper',
        interpolation='nearest',
        extent=_axis_range(xs.min_value(), xs.max_value())
        + _axis_range(ys.min_value(), ys.max_value()),
    )
    cbar = fig.colorbar(im, ax=ax)
    cbar.set_label("Points per cell", fontsize=style['axes.labelsize'])

    attrs = data.attributes
    if attrs.x_axis_label:
        ax.set_xlabel(attrs.x_axis_label, fontsize=style['axes.labelsize'],
                      color=style['axes.labelcolor'])
    if attrs.y_axis_label:
        ax.set_ylabel(attrs.y_axis_label, fontsize=style['axes.labelsize'],
                      color=style['axes.labelcolor'])
    title_lines = [t for t in (attrs.title, attrs.subtitle) if t]
    if title_lines:
        ax.set_title("\n".join(title_lines), fontsize=10, fontweight='bold',
                     color=style['text.color'])

    ax.tick_params(axis='x', colors=style['xtick.color'],
                   labelsize=style['xtick.labelsize'])
    ax.tick_params(axis='y', colors=style['ytick.color'],
                   labelsize=style['ytick.labelsize'])
    for spine in ax.spines.values():
        spine.set_edgecolor(style['axes.edgecolor'])

    fig.tight_layout(pad=1.5)


def export_png(
    fig: Figure,
    filepath: str,
    *,
    dpi: int = EXPORT_DPI,
    width_inches: float = EXPORT_WIDTH_INCHES,
) -> None:
    """Save *fig* as a PNG scaled to *width_inches*.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
    filepath : str
        Output file path (should end with ``.png``).
    dpi : int
        Export resolution.
    width_inches : float
        Figure width in inches.
    """
    current_w = fig.get_figwidth()
    current_h = fig.get_figheight()
    try:
        scale = width_inches / current_w if current_w > 0 else 1.0
        fig.set_size_inches(width_inches, current_h * scale)
        fig.savefig(
            filepath,
            dpi=dpi,
            bbox_inches='tight',
            facecolor=fig.get_facecolor(),
            edgecolor='none',
            pad_inches=0.1,
        )
    finally:
        fig.set_size_inches(current_w, current_h)


def export_density_png(
    data: XvgData,
    filepath: str,
    *,
    graph_width: int = EXPORT_BINS_X,
    graph_height: int = EXPORT_BINS_Y,
    dpi: int = EXPORT_DPI,
) -> str:
    """Render *data* off-screen and save it to *filepath*.

    Uses a bare ``Figure`` (no pyplot state, no GUI backend).
    """
    fig = Figure(figsize=(EXPORT_WIDTH_INCHES, EXPORT_WIDTH_INCHES * 0.75))
    render_density_figure(fig, data,
                          graph_width=graph_width, graph_height=graph_height)
    export_png(fig, filepath, dpi=dpi)
    return filepath
