"""Tests for the summary line."""

import math

import pytest

from xvg_plotter.summary import format_summary, format_value, summarize
from xvg_plotter.xvg_parser import parse_xvg


class TestFormatValue:
    @pytest.mark.parametrize("value,text", [
        (3.0, "3"),
        (2.5, "2.5"),
        (0.1, "0.1"),
        (-4.25, "-4.25"),
        (0.0, "0"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "NaN"),
    ])
    def test_shortest_text(self, value, text):
        assert format_value(value) == text


class TestSummary:
    def test_summarize(self):
        stats = summarize(parse_xvg("0 1\n0 3\n").col(1))
        assert stats.count == 2
        assert stats.mean == 2.0
        assert stats.std == 1.0
        assert stats.standard_error == pytest.approx(1.0 / math.sqrt(2), rel=1e-6)
        assert (stats.min, stats.max) == (1.0, 3.0)

    def test_summary_line(self):
        stats = summarize(parse_xvg("0 1\n0 3\n").col(1))
        assert format_summary(stats) == (
            "Summary:  2 items,  mean ± σ  2 ± 1,  min … max  1 … 3"
        )

    def test_empty_column(self):
        stats = summarize(parse_xvg("").col(1))
        assert stats.count == 0
        assert math.isnan(stats.mean)
        assert format_summary(stats) == (
            "Summary:  0 items,  mean ± σ  NaN ± NaN,  min … max  inf … -inf"
        )
