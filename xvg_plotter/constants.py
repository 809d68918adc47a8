"""
Constants for the xvg Plotter.

Centralises the shading palettes, the screen layout reserved around the
graph, minimum terminal geometry, xvg line markers, and the matplotlib
settings used for PNG export.
"""

# ── xvg line markers ─────────────────────────────────────────────────────
COMMENT_MARKER = '#'
ATTRIBUTE_MARKER = '@'
QUOTE_CHAR = '"'

# Attribute keys recognised in the quoted form ``@ key... "value"``
KEY_XAXIS = "xaxis"
KEY_YAXIS = "yaxis"
KEY_LABEL = "label"
KEY_TITLE = "title"
KEY_SUBTITLE = "subtitle"
# Bare form ``@ TYPE value``
KEY_TYPE = "TYPE"

# ── Named column indices (only the first two columns are drawn) ─────────
COL_X = 0
COL_Y = 1

# ── Shading palettes, sparse → dense ────────────────────────────────────
ASCII_PALETTE = ".:-=+*#%@"
BLOCK_PALETTE = "░▒▓█"
EMPTY_CELL = ' '

# ── Label truncation ─────────────────────────────────────────────────────
TRUNCATE_SYMBOL = '…'

# ── Screen layout around the graph ──────────────────────────────────────
# Left-hand gutter: one y-label character plus a space.
Y_GUTTER_WIDTH = 2
# Title, subtitle and x-axis label lines.
RESERVED_LINES = 3
# Smallest width/height the renderer accepts (exclusive bounds).
MIN_RENDER_WIDTH = 2
MIN_RENDER_HEIGHT = 3

# Terminal geometry below which no graph is attempted at all.
MIN_TERMINAL_WIDTH = 5
MIN_TERMINAL_HEIGHT = 7
# Lines kept free below the graph (summary line and shell prompt).
TERMINAL_BOTTOM_MARGIN = 2

# ── Default configuration values ─────────────────────────────────────────
DEFAULT_STYLE = "block"
STYLE_NAMES = ("ascii", "block")
DEFAULT_EXAMPLE_SEED = 42
DEFAULT_EXAMPLE_POINTS = 2000
LARGE_FILE_BYTES = 100 * 1024 * 1024

# ── Export settings ──────────────────────────────────────────────────────
EXPORT_DPI = 300
EXPORT_WIDTH_INCHES = 6.0
EXPORT_CMAP = "Greys"
# Bin counts of the exported grid, independent of the terminal size.
EXPORT_BINS_X = 100
EXPORT_BINS_Y = 100

# ── Matplotlib light-theme style dict (export) ──────────────────────────
PLOT_STYLE_LIGHT = {
    'figure.facecolor':  '#ffffff',
    'axes.facecolor':    '#ffffff',
    'axes.edgecolor':    '#333333',
    'axes.labelcolor':   '#1a1a2e',
    'text.color':        '#1a1a2e',
    'xtick.color':       '#333333',
    'ytick.color':       '#333333',
    'xtick.labelsize':   7,
    'ytick.labelsize':   7,
    'axes.labelsize':    8,
    'axes.titlesize':    9,
}
