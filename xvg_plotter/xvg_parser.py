"""
xvg parser for the xvg Plotter.

Reads the line-oriented xvg format written by GROMACS and friends into
an ``XvgData`` in a single pass:

- ``#`` lines are comments and are skipped
- ``@`` lines are attributes (``@ title "..."``, ``@ TYPE xy``, ...)
- every other non-blank line is a row of whitespace-separated numbers;
  tokens that are not numbers (e.g. the residue name column of a
  Ramachandran plot) are dropped

Recovery policy: unparsable numeric tokens and unknown attributes are
tolerated; an attribute with an opening quote but no closing quote is a
corrupt file and raises ``XvgFormatError``.  Data rows whose width
differs from the first data row raise in strict mode and produce a
``RaggedRowWarning`` otherwise.
"""

import os
import re
import warnings
from typing import List, Optional

import numpy as np

from .constants import (
    ATTRIBUTE_MARKER, COMMENT_MARKER, QUOTE_CHAR, LARGE_FILE_BYTES,
    KEY_XAXIS, KEY_YAXIS, KEY_LABEL, KEY_TITLE, KEY_SUBTITLE, KEY_TYPE,
)
from .data_model import Attributes, XvgData


class XvgFormatError(ValueError):
    """Raised for structurally corrupt xvg input.

    Parameters
    ----------
    message : str
        Human-readable description.
    line_number : int or None
        1-based line number in the source text, when known.
    line : str or None
        Offending source line.
    """

    def __init__(self, message: str, line_number: Optional[int] = None,
                 line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class RaggedRowWarning(UserWarning):
    """A data row parsed to a different number of values than the first."""


# ── Numeric tokens ───────────────────────────────────────────────────────

# Decimal and exponent notation, inf/infinity/nan in any case.  Python's
# float() also takes underscores and surrounding whitespace; those are
# not numbers in an xvg file.
_FLOAT_TOKEN = re.compile(
    r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
    r'|inf(?:inity)?|nan)\Z',
    re.IGNORECASE,
)

# Field separators: space, tab, LF, form feed, CR.  Other Unicode
# whitespace such as a no-break space stays part of its token.
_FIELD_SEPARATOR = re.compile(r'[ \t\n\f\r]+')


def split_fields(text: str) -> List[str]:
    """Split *text* on ASCII whitespace, dropping empty fields."""
    return [field for field in _FIELD_SEPARATOR.split(text) if field]


def _parse_float(token: str) -> Optional[float]:
    if _FLOAT_TOKEN.match(token) is None:
        return None
    return float(token)


def parse_data_row(line: str) -> np.ndarray:
    """Parse one data line into ``float32`` values.

    Tokens that are not numbers are silently dropped, so
    ``"1.0 2.0 RESIDUE_A"`` yields ``[1.0, 2.0]``.
    """
    parsed = []
    for token in split_fields(line):
        value = _parse_float(token)
        if value is not None:
            parsed.append(value)
    # Values beyond float32 range become ±inf, as a float32 parse would.
    with np.errstate(over='ignore'):
        return np.array(parsed, dtype=np.float32)


# ── Attributes ───────────────────────────────────────────────────────────

def parse_attribute_line(line: str, attributes: Attributes,
                         line_number: Optional[int] = None) -> None:
    """Apply one ``@`` line to *attributes* in place.

    Two independent passes run over every line:

    1. Quoted form ``@ key... "value"``.  ``xaxis label``,
       ``yaxis label``, ``title`` and ``subtitle`` are stored; any other
       first key word sends the line to ``misc``.  ``xaxis``/``yaxis``
       followed by anything but ``label`` is ignored.  A missing
       closing quote raises ``XvgFormatError``.
    2. Bare form ``@ TYPE value``.  Exactly one key word ``TYPE``
       followed by a value sets ``declared_type``; every other line,
       including those already handled in pass 1, is appended to
       ``misc``.

    A recognised ``@ title "Demo"`` line therefore also lands in
    ``misc`` once.  Consumers of ``misc`` see that duplicate.

    Later lines overwrite earlier values of the same key.
    """
    body = line[len(ATTRIBUTE_MARKER):].strip() \
        if line.startswith(ATTRIBUTE_MARKER) else line.strip()

    if QUOTE_CHAR in body:
        key_part, _, value = body.partition(QUOTE_CHAR)
        keys = split_fields(key_part)
        if not value.endswith(QUOTE_CHAR):
            raise XvgFormatError(
                "expected trailing double quote in attribute",
                line_number=line_number, line=line,
            )
        value = value[:-len(QUOTE_CHAR)]

        first = keys[0] if keys else None
        second = keys[1] if len(keys) > 1 else None
        if first == KEY_XAXIS:
            if second == KEY_LABEL:
                attributes.x_axis_label = value
        elif first == KEY_YAXIS:
            if second == KEY_LABEL:
                attributes.y_axis_label = value
        elif first == KEY_TITLE:
            attributes.title = value
        elif first == KEY_SUBTITLE:
            attributes.subtitle = value
        else:
            attributes.misc.append(body)

    tokens = split_fields(body)
    if len(tokens) == 2 and tokens[0] == KEY_TYPE:
        attributes.declared_type = tokens[1]
    else:
        attributes.misc.append(body)


# ── Whole file ───────────────────────────────────────────────────────────

def _split_lines(text: str) -> List[str]:
    """Split on ``\\n``, dropping one trailing ``\\r`` per line."""
    lines = text.split('\n')
    if lines and lines[-1] == '':
        lines.pop()
    return [ln[:-1] if ln.endswith('\r') else ln for ln in lines]


def parse_xvg(text: str, *, strict: bool = False) -> XvgData:
    """Parse the full text of an xvg file.

    Parameters
    ----------
    text : str
        File contents.
    strict : bool
        If ``True``, a data row whose value count differs from the first
        data row raises ``XvgFormatError``.  Otherwise such rows are kept
        (later column reads may shift) and one ``RaggedRowWarning`` is
        issued for the whole text.

    Returns
    -------
    XvgData
        ``column_count`` is fixed by the first data row; with no data
        rows both counts are 0 and the buffer is empty.

    Raises
    ------
    XvgFormatError
        On an attribute line without a closing quote, or a ragged row in
        strict mode.
    """
    attributes = Attributes()
    column_count: Optional[int] = None
    row_count = 0
    chunks: List[np.ndarray] = []
    ragged: List[int] = []

    for line_number, line in enumerate(_split_lines(text), start=1):
        if line.startswith(COMMENT_MARKER):
            continue
        if line.startswith(ATTRIBUTE_MARKER):
            parse_attribute_line(line, attributes, line_number=line_number)
            continue
        if not line.strip():
            continue

        values = parse_data_row(line)
        if column_count is None:
            column_count = values.size
        elif values.size != column_count:
            if strict:
                raise XvgFormatError(
                    f"data row has {values.size} values, expected "
                    f"{column_count} (set by the first data row)",
                    line_number=line_number, line=line,
                )
            ragged.append(line_number)
        chunks.append(values)
        row_count += 1

    if ragged:
        warnings.warn(
            f"{len(ragged)} data row(s) differ in width from the first "
            f"data row ({column_count} values), first at line {ragged[0]}. "
            f"Column reads after that row may be misaligned.",
            RaggedRowWarning,
            stacklevel=2,
        )

    buffer = np.concatenate(chunks) if chunks else np.empty(0, dtype=np.float32)
    return XvgData(
        attributes=attributes,
        column_count=column_count or 0,
        row_count=row_count,
        values=buffer,
    )


def load_xvg(filepath: str, *, strict: bool = False) -> XvgData:
    """Read and parse an xvg file from disk.

    Raises
    ------
    FileNotFoundError
        If *filepath* does not exist.
    XvgFormatError
        See ``parse_xvg``.
    UnicodeDecodeError
        If the file is not valid UTF-8.
    """
    if not os.path.isfile(filepath):
        raise FileNotFoundError(f"xvg file not found: {filepath}")

    file_size = os.path.getsize(filepath)
    if file_size > LARGE_FILE_BYTES:
        warnings.warn(
            f"File is very large ({file_size / (1024 * 1024):.0f} MB). "
            f"Parsing may take a while.",
            stacklevel=2,
        )

    with open(filepath, 'r', encoding='utf-8-sig', newline='') as fh:
        text = fh.read()
    return parse_xvg(text, strict=strict)
