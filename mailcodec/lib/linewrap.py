"""
Fixed-width line wrapping for text that has to pass through line-length limited gateways.
"""
from __future__ import annotations

CRLF = '\r\n'

MARKER_RESERVE = 3
"""
The number of columns that are left free at the end of each line, so that callers can append a
soft break marker.
"""


def wrap(text: str, width: int = 78, terminator: str = CRLF) -> str:
    """
    Split `text` into segments of `width - 3` characters and join them with the given line
    terminator. Input that fits into a single segment is not split. Leading line breaks are
    removed from the result in both cases. The operation is not idempotent: the inserted
    terminators count towards the length when the output is wrapped again.
    """
    step = width - MARKER_RESERVE
    if step < 1:
        raise ValueError(F'line width must be at least {MARKER_RESERVE + 1}, got {width}')
    if len(text) > step:
        text = terminator.join(text[k:k + step] for k in range(0, len(text), step))
    return text.lstrip('\r\n')
