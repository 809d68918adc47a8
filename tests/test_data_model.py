"""Tests for XvgData and DataView."""

import math

import numpy as np
import pytest

from xvg_plotter.data_model import Attributes, DataView, ViewKind, XvgData
from xvg_plotter.xvg_parser import RaggedRowWarning, parse_xvg


def _data(rows):
    """Build an XvgData from a list of equally long rows."""
    cols = len(rows[0]) if rows else 0
    flat = [v for row in rows for v in row]
    return XvgData(
        attributes=Attributes(),
        column_count=cols,
        row_count=len(rows),
        values=np.array(flat, dtype=np.float32),
    )


# ---------------------------------------------------------------------------
# Dataset
# ---------------------------------------------------------------------------


class TestXvgData:
    def test_buffer_is_read_only(self, demo_data):
        assert not demo_data.values.flags.writeable
        with pytest.raises(ValueError):
            demo_data.values[0] = 99.0

    def test_frozen(self, demo_data):
        with pytest.raises(AttributeError):
            demo_data.row_count = 5

    def test_list_input_is_converted(self):
        data = XvgData(Attributes(), 2, 1, [1.0, 2.0])
        assert data.values.dtype == np.float32
        assert data.values.tolist() == [1.0, 2.0]

    def test_is_empty(self, demo_data):
        assert not demo_data.is_empty
        assert _data([]).is_empty


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------


class TestDataView:
    def test_lengths(self):
        data = _data([[1, 2, 3], [4, 5, 6]])
        for i in range(3):
            assert len(data.col(i)) == data.row_count
        for i in range(2):
            assert len(data.row(i)) == data.column_count

    def test_column_iteration(self, demo_data):
        assert list(demo_data.col(0)) == [1.0, 3.0]
        assert list(demo_data.col(1)) == [2.0, 4.0]

    def test_row_iteration(self, demo_data):
        assert list(demo_data.row(0)) == [1.0, 2.0]
        assert list(demo_data.row(1)) == [3.0, 4.0]

    def test_kind_and_index(self, demo_data):
        view = demo_data.col(1)
        assert view.kind is ViewKind.COLUMN
        assert view.index == 1
        assert demo_data.row(0).kind is ViewKind.ROW

    def test_fresh_pass_per_iteration(self, demo_data):
        view = demo_data.col(0)
        assert list(view) == list(view)

    def test_independent_views_zip(self, demo_data):
        pairs = list(zip(demo_data.col(0), demo_data.col(1)))
        assert pairs == [(1.0, 2.0), (3.0, 4.0)]

    def test_views_do_not_copy(self, demo_data):
        assert np.shares_memory(demo_data.col(1).values(), demo_data.values)
        assert np.shares_memory(demo_data.row(1).values(), demo_data.values)

    def test_is_empty(self):
        data = _data([])
        assert data.col(0).is_empty()
        assert data.row(0).is_empty()

    def test_out_of_range_row_ends_early(self, demo_data):
        view = demo_data.row(5)
        assert len(view) == 2
        assert list(view) == []

    def test_short_row_ends_column_early(self):
        with pytest.warns(RaggedRowWarning):
            data = parse_xvg("1 2\n3\n4 5\n")
        assert len(data.col(1)) == 3
        # Positions 1, 3 and 5; the last is past the end of the buffer.
        assert list(data.col(1)) == [2.0, 4.0]
        assert list(data.col(0)) == [1.0, 3.0, 5.0]

    def test_negative_index_rejected(self, demo_data):
        with pytest.raises(IndexError):
            demo_data.col(-1)

    def test_repr(self, demo_data):
        assert repr(demo_data.col(1)) == "DataView(column=1, len=2)"

    def test_direct_construction(self, demo_data):
        view = DataView(demo_data, ViewKind.ROW, 1)
        assert list(view) == [3.0, 4.0]


# ---------------------------------------------------------------------------
# Reductions
# ---------------------------------------------------------------------------


class TestReductions:
    @pytest.mark.parametrize("k", [0.0, 2.5, -7.0, 1024.0])
    def test_constant_column(self, k):
        data = _data([[0.0, k] for _ in range(8)])
        view = data.col(1)
        assert view.mean() == k
        assert view.variance() == 0.0
        assert view.standard_deviation() == 0.0
        assert view.standard_error() == 0.0

    def test_sum_accumulates_in_order(self):
        # 2**24 + 1 rounds back to 2**24 in float32 at every step.
        view = _data([[2.0 ** 24]] + [[1.0]] * 16).col(0)
        assert view.sum() == 2.0 ** 24
        assert view.mean() == float(np.float32(2.0 ** 24) / np.float32(17))

    def test_population_statistics(self):
        view = _data([[1.0], [2.0], [3.0], [4.0]]).col(0)
        assert view.mean() == 2.5
        assert view.variance() == pytest.approx(1.25)
        assert view.standard_deviation() == pytest.approx(math.sqrt(1.25), rel=1e-6)
        assert view.standard_error() == pytest.approx(math.sqrt(1.25) / 2, rel=1e-6)

    def test_min_max_bound_every_value(self):
        rng = np.random.default_rng(7)
        rows = rng.normal(size=(50, 2)).tolist()
        view = _data(rows).col(1)
        lo, hi = view.min_value(), view.max_value()
        assert all(lo <= v <= hi for v in view)
        assert lo in list(view)
        assert hi in list(view)

    def test_row_reductions(self):
        view = _data([[1.0, 5.0, 3.0]]).row(0)
        assert view.min_value() == 1.0
        assert view.max_value() == 5.0
        assert view.mean() == 3.0

    def test_empty_view_placeholders(self):
        view = _data([]).col(1)
        assert view.max_value() == -math.inf
        assert view.min_value() == math.inf
        assert math.isnan(view.mean())

    def test_nan_skipped_by_min_max(self):
        view = _data([[1.0], [float('nan')], [3.0]]).col(0)
        assert view.min_value() == 1.0
        assert view.max_value() == 3.0

    def test_mean_divides_by_declared_length(self):
        with pytest.warns(RaggedRowWarning):
            data = parse_xvg("1 2\n3\n4 5\n")
        # Produces 2.0 and 4.0 but the declared length is 3.
        assert data.col(1).mean() == pytest.approx(2.0)
