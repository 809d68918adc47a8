"""
xvg Plotter v1.0.0

Terminal density plots for xvg files written by molecular-dynamics
tools (GROMACS ``gmx rama``, ``gmx energy``, ...).

Reads the comment/attribute/data layout of an xvg file, bins the first
two data columns into a character grid and shades every cell by how
many points fall into it.  A one-line summary of the y column closes
the output.  The same grid can optionally be exported as a PNG.
"""

APP_NAME = "xvg Plotter"
APP_VERSION = "1.0.0"
APP_DATE = "2026-10-19"
__version__ = APP_VERSION
