"""
Example data generator for the xvg Plotter.

Creates a synthetic Ramachandran plot in the layout ``gmx rama``
writes: a comment header, title/axis attributes, ``@TYPE xy`` and one
``phi psi residue`` row per sample.  Samples are drawn around the
right-handed alpha-helix and beta-sheet basins, plus a sparse
left-handed helix population, so the density map has clearly separated
dense and sparse regions.
"""

import os
import random
from typing import List

from .constants import DEFAULT_EXAMPLE_POINTS, DEFAULT_EXAMPLE_SEED

# (phi centre, psi centre, spread in degrees, relative weight)
_BASINS = [
    (-63.0, -43.0, 12.0, 0.55),   # alpha-R
    (-120.0, 130.0, 18.0, 0.35),  # beta
    (60.0, 45.0, 10.0, 0.10),     # alpha-L
]

_RESIDUES = ["ALA", "GLY", "LEU", "SER", "VAL", "LYS", "GLU", "ASP"]


def _wrap_angle(deg: float) -> float:
    """Wrap an angle into ``[-180, 180)``."""
    return (deg + 180.0) % 360.0 - 180.0


def generate_example_xvg(
    seed: int = DEFAULT_EXAMPLE_SEED,
    n_points: int = DEFAULT_EXAMPLE_POINTS,
) -> str:
    """Return the text of a synthetic Ramachandran xvg file."""
    # Reproducible randomness
    rng = random.Random(seed)
    weights = [b[3] for b in _BASINS]

    lines: List[str] = [
        "# This file was created by xvg_plotter.example_data",
        "# Synthetic backbone dihedrals, not from a real trajectory",
        "#",
        '@    title "Ramachandran Plot"',
        '@    subtitle "synthetic example"',
        '@    xaxis  label "Phi"',
        '@    yaxis  label "Psi"',
        "@TYPE xy",
    ]
    for i in range(n_points):
        phi0, psi0, spread, _ = rng.choices(_BASINS, weights=weights)[0]
        phi = _wrap_angle(rng.gauss(phi0, spread))
        psi = _wrap_angle(rng.gauss(psi0, spread))
        residue = f"{_RESIDUES[i % len(_RESIDUES)]}-{i // len(_RESIDUES) + 1}"
        lines.append(f"{phi:10.3f}  {psi:10.3f}  {residue}")
    return "\n".join(lines) + "\n"


def write_example_xvg(
    filepath: str,
    seed: int = DEFAULT_EXAMPLE_SEED,
    n_points: int = DEFAULT_EXAMPLE_POINTS,
) -> str:
    """Write the example file to *filepath* and return the path."""
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filepath, 'w', encoding='utf-8', newline='\n') as fh:
        fh.write(generate_example_xvg(seed=seed, n_points=n_points))
    return filepath
