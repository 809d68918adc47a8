"""
Fixed-width label helpers for the terminal renderer.

Lengths are counted in characters, not encoded bytes, so a label with
non-ASCII text is never cut inside a character.
"""

from .constants import TRUNCATE_SYMBOL


def truncate(text: str, max_len: int) -> str:
    """Shorten *text* to exactly *max_len* characters, ending in ``…``.

    Text that already fits is returned unchanged; ``max_len == 0``
    always gives ``""``.

    >>> truncate("Time (ns)", 5)
    'Time…'
    >>> truncate("Time", 5)
    'Time'
    """
    if max_len < 0:
        raise ValueError(f"max_len must be non-negative, got {max_len}")
    if len(text) <= max_len:
        return text
    if max_len == 0:
        return ""
    return text[:max_len - 1] + TRUNCATE_SYMBOL


def center(text: str, width: int) -> str:
    """Pad *text* with spaces to *width*, centred.

    On odd padding the extra space goes to the right.  Text longer than
    *width* is returned as is.

    >>> center("ab", 5)
    ' ab  '
    """
    pad = width - len(text)
    if pad <= 0:
        return text
    left = pad // 2
    return ' ' * left + text + ' ' * (pad - left)
