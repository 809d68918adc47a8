"""
Entry point for the xvg Plotter.

Usage:
    python -m xvg_plotter [OPTIONS] PATH
    xvg-plot [OPTIONS] PATH
"""

import argparse
import os
import sys
import warnings
from typing import List, Optional, Tuple


def _check_dependencies():
    """Verify required packages are installed."""
    missing = []
    try:
        import numpy  # noqa: F401
    except ImportError:
        missing.append("numpy")

    if missing:
        print(
            f"Missing required packages: {', '.join(missing)}\n"
            f"Install with: pip install {' '.join(missing)}",
            file=sys.stderr,
        )
        sys.exit(1)


class UsageError(Exception):
    """Invalid command-line arguments."""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message):
        raise UsageError(message)


def _dimension(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size: {text!r}")
    if not 0 <= value <= 0xFFFF:
        raise argparse.ArgumentTypeError(f"size out of range: {text!r}")
    return value


def usage(bin_name: str) -> str:
    from . import APP_NAME, APP_VERSION
    return "\n".join([
        "Display xvg plots in the terminal",
        "",
        "Usage:",
        f"    {bin_name} [OPTIONS] PATH",
        "",
        "Options:",
        "    --style   -s    Set the drawing style.",
        "                    ascii, block (default)",
        "    --width   -w    Explicitly set width.",
        "    --height  -h    Explicitly set height.",
        "                    Width and/or height are determined from terminal size at",
        "                    runtime, if not specified explicitly.",
        "    --strict        Reject data rows whose width differs from the first row.",
        "    --export  PNG   Also write the density map to a PNG file.",
        "    --example PATH  Write an example xvg file to PATH and exit.",
        "    --version       Display version.",
        "    --help          Display help.",
        "",
        f"{APP_NAME} {APP_VERSION}",
    ])


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    from .constants import DEFAULT_STYLE, STYLE_NAMES

    parser = _ArgumentParser(prog=prog, add_help=False, allow_abbrev=False)
    parser.add_argument("path", nargs="?", metavar="PATH")
    parser.add_argument("-s", "--style", choices=STYLE_NAMES,
                        default=DEFAULT_STYLE)
    parser.add_argument("-w", "--width", type=_dimension)
    parser.add_argument("-h", "--height", type=_dimension)
    parser.add_argument("--strict", action="store_true")
    parser.add_argument("--export", dest="export_path", metavar="PNG")
    parser.add_argument("--example", dest="example_path", metavar="PATH")
    parser.add_argument("--version", action="store_true")
    parser.add_argument("--help", action="store_true")
    return parser


def terminal_geometry() -> Optional[Tuple[int, int]]:
    """``(columns, lines)`` of the terminal on stdout, or ``None``."""
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (AttributeError, ValueError, OSError):
        return None
    return size.columns, size.lines


def resolve_geometry(
    width: Optional[int],
    height: Optional[int],
) -> Optional[Tuple[int, int]]:
    """Fill in whichever of *width*/*height* is missing from the terminal.

    Returns ``None`` when a value is missing and the terminal size is
    unavailable.
    """
    if width is not None and height is not None:
        return width, height
    detected = terminal_geometry()
    if detected is None:
        return None
    term_w, term_h = detected
    return (width if width is not None else term_w,
            height if height is not None else term_h)


def _fail(message: str) -> int:
    print(f"ERROR: {message}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Run the xvg Plotter; returns the process exit status."""
    _check_dependencies()

    from . import APP_NAME, APP_VERSION
    from .chart_density import DrawingStyle, render_density
    from .constants import (
        COL_Y, MIN_TERMINAL_WIDTH, MIN_TERMINAL_HEIGHT,
        TERMINAL_BOTTOM_MARGIN,
    )
    from .data_model import PlotOptions
    from .example_data import write_example_xvg
    from .summary import format_summary, summarize
    from .xvg_parser import XvgFormatError, load_xvg

    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "xvg-plot"
    if prog == "__main__.py":
        prog = "python -m xvg_plotter"
    parser = build_parser(prog)

    try:
        args = parser.parse_args(argv)
        if args.help:
            print(usage(prog), file=sys.stderr)
            return 0
        if args.version:
            print(f"{APP_NAME} {APP_VERSION}")
            return 0
        if args.example_path is not None:
            path = write_example_xvg(args.example_path)
            print(f"Wrote example data to {path}", file=sys.stderr)
            return 0
        if args.path is None:
            raise UsageError("missing argument PATH")
    except UsageError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        print("Run with --help for usage information.", file=sys.stderr)
        return 1

    options = PlotOptions(
        path=args.path,
        style=args.style,
        width=args.width,
        height=args.height,
        strict=args.strict,
        export_path=args.export_path,
    )

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            data = load_xvg(options.path, strict=options.strict)
        except (XvgFormatError, FileNotFoundError, UnicodeDecodeError) as exc:
            return _fail(str(exc))
        except OSError as exc:
            return _fail(f"cannot read {options.path}: {exc}")
    for w in caught:
        print(f"WARNING: {w.message}", file=sys.stderr)

    if data.is_empty or data.column_count <= COL_Y:
        return _fail(
            f"no plottable data in {options.path}: {data.row_count} rows of "
            f"{data.column_count} columns, need at least two columns"
        )

    geometry = resolve_geometry(options.width, options.height)
    if geometry is None:
        print("Unable to get terminal size.", file=sys.stderr)
    else:
        width, height = geometry
        if width < MIN_TERMINAL_WIDTH or height < MIN_TERMINAL_HEIGHT:
            print("Size is too small to present a meaningful graph.",
                  file=sys.stderr)
        else:
            style = DrawingStyle.from_name(options.style)
            for line in render_density(data, style, width,
                                       height - TERMINAL_BOTTOM_MARGIN):
                print(line)

    print(format_summary(summarize(data.col(COL_Y))))

    if options.export_path:
        from .export import export_density_png
        try:
            export_density_png(data, options.export_path)
        except OSError as exc:
            return _fail(f"cannot write {options.export_path}: {exc}")
        print(f"Exported density plot to {options.export_path}",
              file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
