from __future__ import annotations

from mailcodec.lib.decorators import unicoded
from mailcodec.lib.fieldnames import normalize
from mailcodec.units import Unit


class hdrname(Unit):
    """
    Normalize header field names, one per line, to their canonical spelling; for example,
    `message-id` becomes `Message-ID` and `content-type` becomes `Content-Type`.
    """
    @unicoded
    def process(self, data: str) -> str:
        lines = data.splitlines(keepends=True)
        for k, line in enumerate(lines):
            name = line.rstrip('\r\n')
            lines[k] = normalize(name) + line[len(name):]
        return ''.join(lines)
