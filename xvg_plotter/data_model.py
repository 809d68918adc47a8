"""
Data model for the xvg Plotter.

``XvgData`` is constructed once by ``xvg_parser`` and never mutated;
the chart renderer and the summary receive it read-only.  Numeric data
lives in one flat, row-major ``float32`` buffer.  ``DataView`` selects
a column or a row of that buffer through numpy basic slicing, so a view
never copies the data and any number of views may be read side by side.

A view borrows its ``XvgData`` and is only meaningful while the parse
result is in use.  The buffer is flagged read-only, so no view can
alter what another one sees.
"""

import enum
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

import numpy as np

from .constants import DEFAULT_STYLE


@dataclass
class Attributes:
    """Metadata collected from ``@`` lines.

    Every recognised key holds at most one value; a later line with the
    same key overwrites the earlier one.

    Parameters
    ----------
    title, subtitle : str or None
        Graph title and subtitle.
    x_axis_label, y_axis_label : str or None
        Axis labels from ``@ xaxis label "..."`` / ``@ yaxis label "..."``.
    declared_type : str or None
        Value of the bare ``@ TYPE xy`` attribute.
    misc : list of str
        Attribute lines (marker stripped) that were not recognised, in
        file order.  Never used for rendering.
    """
    title: Optional[str] = None
    subtitle: Optional[str] = None
    x_axis_label: Optional[str] = None
    y_axis_label: Optional[str] = None
    declared_type: Optional[str] = None
    misc: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class XvgData:
    """Parsed xvg file.

    Parameters
    ----------
    attributes : Attributes
        Title, labels and other metadata.
    column_count : int
        Number of numeric values on the first data row.
    row_count : int
        Number of data rows, whatever their parsed width.
    values : numpy.ndarray
        Flat row-major ``float32`` buffer.  For well-formed files its
        length is ``column_count * row_count``.
    """
    attributes: Attributes
    column_count: int
    row_count: int
    values: np.ndarray

    def __post_init__(self):
        values = np.ascontiguousarray(self.values, dtype=np.float32).reshape(-1)
        values.setflags(write=False)
        object.__setattr__(self, 'values', values)

    @property
    def is_empty(self) -> bool:
        return self.row_count == 0 or self.values.size == 0

    def col(self, idx: int) -> "DataView":
        """Return a column view (iterates over rows)."""
        return DataView(self, ViewKind.COLUMN, idx)

    def row(self, idx: int) -> "DataView":
        """Return a row view (iterates over columns)."""
        return DataView(self, ViewKind.ROW, idx)


def _running_total(vals: np.ndarray) -> float:
    # Strict left-to-right float32 accumulation; np.sum adds pairwise.
    if vals.size == 0:
        return 0.0
    return float(np.cumsum(vals, dtype=np.float32)[-1])


class ViewKind(enum.Enum):
    COLUMN = "column"
    ROW = "row"


class DataView:
    """Read-only strided window onto one column or row of ``XvgData``.

    The declared length is ``row_count`` for a column and
    ``column_count`` for a row.  Iteration stops at that length, or
    earlier where a short row leaves the buffer without a value at the
    computed position; nothing is ever padded in.

    Every call to ``iter()`` starts a fresh pass from the first value.
    """

    __slots__ = ('_data', '_kind', '_index')

    def __init__(self, data: XvgData, kind: ViewKind, index: int):
        if index < 0:
            raise IndexError(f"view index must be non-negative, got {index}")
        self._data = data
        self._kind = kind
        self._index = index

    def __repr__(self):
        return f"DataView({self._kind.value}={self._index}, len={len(self)})"

    @property
    def kind(self) -> ViewKind:
        return self._kind

    @property
    def index(self) -> int:
        return self._index

    def __len__(self) -> int:
        if self._kind is ViewKind.COLUMN:
            return self._data.row_count
        return self._data.column_count

    def is_empty(self) -> bool:
        return len(self) == 0

    def values(self) -> np.ndarray:
        """Values this view produces, as a non-copying numpy view."""
        data = self._data
        buf = data.values
        cols = data.column_count
        if self._kind is ViewKind.ROW:
            start = cols * self._index
            return buf[start:start + cols]

        rows = data.row_count
        if cols == 0:
            # Every step lands on the same position.
            if self._index < buf.size and rows > 0:
                return np.broadcast_to(buf[self._index], (rows,))
            return buf[:0]
        return buf[self._index:self._index + cols * rows:cols]

    def __iter__(self) -> Iterator[float]:
        for v in self.values():
            yield float(v)

    # ── Reductions ───────────────────────────────────────────────────

    def sum(self) -> float:
        """Sum in ``float32``, added one value at a time in view order."""
        return _running_total(self.values())

    def mean(self) -> float:
        """Mean over the declared length; NaN for an empty view."""
        n = np.float32(len(self))
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float32(self.sum()) / n)

    def variance(self) -> float:
        """Population variance (divisor is the view length)."""
        n = np.float32(len(self))
        mean = np.float32(self.mean())
        deviations = (self.values() - mean) ** 2
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float32(_running_total(deviations)) / n)

    def standard_deviation(self) -> float:
        """Population standard deviation."""
        return float(np.sqrt(np.float32(self.variance())))

    def standard_error(self) -> float:
        """Standard error of the mean, ``σ / √n``."""
        n = np.float32(len(self))
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float32(self.standard_deviation()) / np.sqrt(n))

    def _comparable(self) -> np.ndarray:
        vals = self.values()
        return vals[~np.isnan(vals)]

    def max_value(self) -> float:
        """Largest value, ``-inf`` for an empty view.  NaN is skipped."""
        vals = self._comparable()
        if vals.size == 0:
            return float('-inf')
        return float(vals.max())

    def min_value(self) -> float:
        """Smallest value, ``+inf`` for an empty view.  NaN is skipped."""
        vals = self._comparable()
        if vals.size == 0:
            return float('inf')
        return float(vals.min())


@dataclass(frozen=True)
class PlotOptions:
    """Resolved command-line configuration for one run.

    ``width``/``height`` are ``None`` when they should be taken from the
    terminal.
    """
    path: str
    style: str = DEFAULT_STYLE
    width: Optional[int] = None
    height: Optional[int] = None
    strict: bool = False
    export_path: Optional[str] = None
