from __future__ import annotations

import codecs

from mailcodec.lib.bitstring import from_bitstring, to_bitstring
from mailcodec.units import MailcodecPartialResult, Unit


class bits(Unit):
    """
    Converts strings of binary digits to bytes, eight digits per byte with the most significant
    bit first. Whitespace in the input is ignored. The reverse operation renders every byte as a
    string of eight binary digits, separated by spaces.
    """
    def process(self, data: bytearray):
        digits = ''.join(codecs.decode(data, 'latin1').split())
        output = bytearray()
        cutoff = len(digits) - len(digits) % 8
        for k in range(0, cutoff, 8):
            output.append(from_bitstring(digits[k:k + 8]))
        if cutoff < len(digits):
            raise MailcodecPartialResult(
                F'input has {len(digits) - cutoff} trailing binary digits that do not form a byte', output)
        return output

    def reverse(self, data: bytearray):
        return ' '.join(to_bitstring(b) for b in data).encode(self.codec)
