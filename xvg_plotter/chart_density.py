"""
Terminal density chart for the xvg Plotter.

Projects the first two columns of an ``XvgData`` (x = column 0,
y = column 1) onto a fixed-size character grid, counts how many points
land in every cell and shades each cell with a glyph from a palette.

Layout for an output of ``width × height`` characters::

    <title, centred on width>           (if present)
    <subtitle, centred on width>        (if present)
    Y <graph row>                        × (height - 3)
    <x-axis label, centred on graph width>   (if present)

The left gutter holds one character of the vertically written y-axis
label and a space, so the graph is ``width - 2`` cells wide.
"""

import enum
from typing import List, Tuple

import numpy as np

from .constants import (
    ASCII_PALETTE, BLOCK_PALETTE, EMPTY_CELL, COL_X, COL_Y,
    Y_GUTTER_WIDTH, RESERVED_LINES, MIN_RENDER_WIDTH, MIN_RENDER_HEIGHT,
)
from .data_model import DataView, XvgData
from .labels import center, truncate


class DrawingStyle(enum.Enum):
    """Closed set of shading styles."""
    ASCII = "ascii"
    BLOCK = "block"

    @classmethod
    def from_name(cls, name: str) -> "DrawingStyle":
        for style in cls:
            if style.value == name:
                return style
        raise ValueError("unknown drawing style")

    @property
    def palette(self) -> str:
        if self is DrawingStyle.ASCII:
            return ASCII_PALETTE
        return BLOCK_PALETTE

    def glyph(self, count: int, lo: int, hi: int) -> str:
        """Glyph for a cell holding *count* points.

        *lo* is the smallest non-zero count on the grid and *hi* the
        largest; the palette is spread linearly between them.
        """
        if count <= 0:
            return EMPTY_CELL
        palette = self.palette
        idx = (len(palette) - 1) * (count - lo) // max(hi - lo, 1)
        return palette[idx]


# ── Binning ──────────────────────────────────────────────────────────────

def to_cell(value, lo: float, hi: float, size: int) -> np.ndarray:
    """Map *value* (scalar or array) from ``[lo, hi]`` onto ``0..size-1``.

    ``floor((value - lo) * (size - 1) / (hi - lo))``; a zero range uses
    a divisor of 1, which puts every value on cell 0.  NaN maps to 0
    and results are clipped to the valid cell range.
    """
    span = hi - lo
    if span == 0:
        span = 1.0
    with np.errstate(invalid='ignore', over='ignore'):
        scaled = np.floor(
            (np.asarray(value, dtype=np.float64) - lo) * (size - 1) / span
        )
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=size - 1, neginf=0.0)
    return np.clip(scaled, 0, size - 1).astype(np.intp)


def bin_occupancy(
    xs: DataView,
    ys: DataView,
    graph_width: int,
    graph_height: int,
) -> np.ndarray:
    """Count (x, y) pairs per screen cell.

    Pairs are formed value by value and stop at the shorter view; pairs
    with a NaN coordinate are skipped.

    Returns
    -------
    numpy.ndarray
        ``(graph_height, graph_width)`` integer grid.  Row 0 is the top
        of the screen (largest y).  Columns run from largest x to
        smallest, matching the right-to-left emission of
        ``shade_rows``.
    """
    x_vals = xs.values()
    y_vals = ys.values()
    n = min(x_vals.size, y_vals.size)
    x_vals = x_vals[:n]
    y_vals = y_vals[:n]
    keep = ~(np.isnan(x_vals) | np.isnan(y_vals))
    x_vals = x_vals[keep]
    y_vals = y_vals[keep]

    # Cells are measured down from the maximum: the top row and the
    # first grid column hold the largest values, a zero range lands there.
    grid_col = to_cell(-x_vals, -xs.max_value(), -xs.min_value(), graph_width)
    grid_row = to_cell(-y_vals, -ys.max_value(), -ys.min_value(), graph_height)

    grid = np.zeros((graph_height, graph_width), dtype=np.int64)
    np.add.at(grid, (grid_row, grid_col), 1)
    return grid


def count_bounds(grid: np.ndarray) -> Tuple[int, int]:
    """Return ``(lo, hi)``: smallest non-zero and largest cell count.

    A grid without any occupied cell gives ``lo == hi``.
    """
    hi = int(grid.max()) if grid.size else 0
    occupied = grid[grid > 0]
    lo = int(occupied.min()) if occupied.size else hi
    return lo, hi


def shade_rows(grid: np.ndarray, style: DrawingStyle) -> List[str]:
    """Convert an occupancy grid into glyph rows.

    Each row is emitted right to left (last grid column first).
    """
    lo, hi = count_bounds(grid)
    return [
        ''.join(style.glyph(int(v), lo, hi) for v in row[::-1])
        for row in grid
    ]


# ── Composition ──────────────────────────────────────────────────────────

def render_density(
    data: XvgData,
    style: DrawingStyle,
    width: int,
    height: int,
) -> List[str]:
    """Render *data* as a list of output lines.

    Parameters
    ----------
    data : XvgData
        Parsed file; needs at least one row and two columns.
    style : DrawingStyle
        Palette to shade with.
    width, height : int
        Output size in characters; ``width > 2`` and ``height > 3``.

    Raises
    ------
    ValueError
        On too small a size, or data that has nothing to plot.
    """
    if width <= MIN_RENDER_WIDTH or height <= MIN_RENDER_HEIGHT:
        raise ValueError(
            f"render size {width}x{height} too small, need width > "
            f"{MIN_RENDER_WIDTH} and height > {MIN_RENDER_HEIGHT}"
        )
    if data.is_empty or data.column_count <= COL_Y:
        raise ValueError(
            f"no plottable data: {data.row_count} rows of "
            f"{data.column_count} columns, need two columns"
        )

    graph_width = width - Y_GUTTER_WIDTH
    graph_height = height - RESERVED_LINES

    grid = bin_occupancy(data.col(COL_X), data.col(COL_Y),
                         graph_width, graph_height)
    graph_rows = shade_rows(grid, style)

    attrs = data.attributes
    lines: List[str] = []
    if attrs.title is not None:
        lines.append(center(truncate(attrs.title, width), width))
    if attrs.subtitle is not None:
        lines.append(center(truncate(attrs.subtitle, width), width))

    y_label = center(truncate(attrs.y_axis_label or "", graph_height),
                     graph_height)
    for label_ch, row in zip(y_label, graph_rows):
        lines.append(f"{label_ch} {row}")

    if attrs.x_axis_label is not None:
        lines.append(center(truncate(attrs.x_axis_label, graph_width),
                            graph_width))
    return lines
