from __future__ import annotations

import codecs

from mailcodec.lib import radix64
from mailcodec.units import MailcodecPartialResult, Unit


class r64(Unit):
    """
    Radix64 ASCII armor: base64 encoded data followed by a line with a CRC-24 checksum. Decoding
    verifies the checksum if one is present. A mismatch is reported as a warning, or as an error
    when the unit is strict; a strict unit in lenient mode still returns the decoded data.
    """
    def __init__(self, strict: bool = False):
        super().__init__(strict=strict)

    def process(self, data: bytearray):
        text = codecs.decode(data, 'latin1')
        payload, expected = radix64.split(text)
        decoded = radix64.decode(payload)
        if expected is None:
            self.log_info('the input has no checksum line')
            return decoded
        computed = radix64.checksum(decoded)
        if computed != expected:
            message = F'checksum mismatch: armor has {expected.hex().upper()}, data has {computed.hex().upper()}'
            if self.args.strict:
                raise MailcodecPartialResult(message, decoded)
            self.log_warn(message)
        else:
            self.log_debug(F'checksum {computed.hex().upper()} verified')
        return decoded

    def reverse(self, data: bytearray):
        return radix64.encode(data).encode('ascii')
