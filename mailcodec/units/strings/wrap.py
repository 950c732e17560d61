from __future__ import annotations

from mailcodec.lib.decorators import unicoded
from mailcodec.lib.environment import environment
from mailcodec.lib.linewrap import wrap as wrap_lines
from mailcodec.units import Unit


class wrap(Unit):
    """
    Wrap incoming text to lines of fixed width, joined by CRLF line breaks. Three columns of every
    line are reserved for a soft break marker. By default, the width is taken from the environment
    variable `MAILCODEC_LINE_LENGTH`, or 78 if it is not set.
    """
    DEFAULT_WIDTH = 78

    def __init__(self, width: int = 0):
        super().__init__(width=width)

    @unicoded
    def process(self, data: str) -> str:
        width = self.args.width or environment.line_length.value or self.DEFAULT_WIDTH
        self.log_debug(F'wrapping {len(data)} characters to width {width}')
        return wrap_lines(data, width)
