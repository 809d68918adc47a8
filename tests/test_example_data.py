"""Tests for the example data generator."""

import os

from xvg_plotter.example_data import generate_example_xvg, write_example_xvg
from xvg_plotter.xvg_parser import load_xvg, parse_xvg


class TestExampleData:
    def test_reproducible(self):
        assert generate_example_xvg(seed=1, n_points=50) == generate_example_xvg(seed=1, n_points=50)
        assert generate_example_xvg(seed=1, n_points=50) != generate_example_xvg(seed=2, n_points=50)

    def test_parses_as_ramachandran_plot(self):
        data = parse_xvg(generate_example_xvg(n_points=120), strict=True)
        assert data.column_count == 2
        assert data.row_count == 120
        attrs = data.attributes
        assert attrs.title == "Ramachandran Plot"
        assert attrs.subtitle == "synthetic example"
        assert attrs.x_axis_label == "Phi"
        assert attrs.y_axis_label == "Psi"
        assert attrs.declared_type == "xy"

    def test_angles_are_wrapped(self):
        data = parse_xvg(generate_example_xvg(n_points=500))
        for idx in (0, 1):
            view = data.col(idx)
            assert view.min_value() >= -180.0
            assert view.max_value() <= 180.0

    def test_write(self, tmp_path):
        path = write_example_xvg(str(tmp_path / "sub" / "rama.xvg"), n_points=10)
        assert os.path.isfile(path)
        assert load_xvg(path).row_count == 10
