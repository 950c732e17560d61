from __future__ import annotations

import codecs
import re

from typing import Optional

from mailcodec.lib import quotedprintable
from mailcodec.lib.charsets import detect, resolve
from mailcodec.units import Unit


class qp(Unit):
    """
    Quoted-printable encoding and decoding as used for MIME bodies, see RFC 2045. Decoding is
    lenient: malformed escape sequences are copied to the output verbatim. Without a charset,
    the unit operates on raw bytes. If a charset is given, decoding converts the text from that
    charset to UTF-8 and encoding converts UTF-8 input to that charset before quoting it. The
    charset name `auto` detects the charset of the decoded data.
    """
    AUTO = 'auto'

    def __init__(self, charset: Optional[str] = None):
        super().__init__(charset=charset)

    def process(self, data: bytearray):
        text = codecs.decode(data, 'latin1')
        outcomes = list(quotedprintable.scan(text))
        malformed = sum(1 for outcome in outcomes if outcome.malformed)
        if malformed:
            self.log_info(F'copied {malformed} malformed escape sequences verbatim')
        decoded = bytearray(outcome.value for outcome in outcomes)
        charset = self.args.charset
        if charset is None:
            return decoded
        if charset.lower() == self.AUTO:
            resolved = detect(decoded)
            self.log_info(F'detected charset: {resolved.name}')
        else:
            resolved = resolve(charset)
        return resolved.decode(decoded).rstrip('=').encode(self.codec)

    def reverse(self, data: bytearray):
        charset = self.args.charset
        if charset is None:
            return quotedprintable.quote(data).encode('ascii')
        if charset.lower() == self.AUTO:
            raise ValueError('the output charset must be specified explicitly for encoding')
        text = codecs.decode(data, self.codec, errors='replace')
        return quotedprintable.encode(text, charset).encode('ascii')

    @classmethod
    def handles(cls, data) -> Optional[bool]:
        if re.search(B'[^\\x09\\x0A\\x0D\\x20-\\x7E]', data):
            return False
        if re.search(B'=(?:[0-9A-F]{2}|\\r\\n)', data):
            return True
        return None
