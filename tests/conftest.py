"""Shared fixtures for the xvg Plotter test suite."""

import pytest

from xvg_plotter.xvg_parser import parse_xvg


DEMO_XVG = """\
# test
@ title "Demo"
@ TYPE xy
1.0 2.0
3.0 4.0
"""

# Four corners of a 10 x 10 box, the top-right corner twice.
CORNERS_XVG = """\
# corners
@    title "Demo"
@    subtitle "Sub"
@    xaxis  label "Phi"
@    yaxis  label "Psi"
@TYPE xy
 0.0   0.0  ALA-1
10.0   0.0  GLY-2
 0.0  10.0  LEU-3
10.0  10.0  SER-4
10.0  10.0  VAL-5
"""


@pytest.fixture
def demo_data():
    return parse_xvg(DEMO_XVG)


@pytest.fixture
def corners_data():
    return parse_xvg(CORNERS_XVG)


@pytest.fixture
def write_xvg(tmp_path):
    """Write *text* to an .xvg file under tmp_path and return its path."""
    def _write(text, name="data.xvg"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
