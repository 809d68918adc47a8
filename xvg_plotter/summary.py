"""
One-line numeric summary of the plotted y column.

    Summary:  250 items,  mean ± σ  1.25 ± 0.5,  min … max  0 … 2.5

Values are 32-bit floats and are printed with the fewest digits that
still identify the float32 exactly, without exponent notation.
"""

import math
from dataclasses import dataclass

import numpy as np

from .data_model import DataView


@dataclass(frozen=True)
class SummaryStatistics:
    """Reductions of one ``DataView``.

    ``mean``/``std`` are NaN for an empty view and ``min``/``max`` are
    ``+inf``/``-inf``.
    """
    count: int
    mean: float
    std: float
    standard_error: float
    min: float
    max: float


def summarize(view: DataView) -> SummaryStatistics:
    return SummaryStatistics(
        count=len(view),
        mean=view.mean(),
        std=view.standard_deviation(),
        standard_error=view.standard_error(),
        min=view.min_value(),
        max=view.max_value(),
    )


def format_value(value: float) -> str:
    """Shortest positional text of *value* as a float32.

    >>> format_value(3.0)
    '3'
    >>> format_value(0.1)
    '0.1'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(np.float32(value), unique=True, trim='-')


def format_summary(stats: SummaryStatistics) -> str:
    return (
        f"Summary:  {stats.count} items,  "
        f"mean ± σ  {format_value(stats.mean)} ± {format_value(stats.std)},  "
        f"min … max  {format_value(stats.min)} … {format_value(stats.max)}"
    )
