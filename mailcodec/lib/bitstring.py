"""
Conversion of bytes and 16-bit words to strings of binary digits, most significant bit first.
"""
from __future__ import annotations

__all__ = ['from_bitstring', 'to_bitstring']

WIDTHS = (8, 16)


def to_bitstring(value: int, width: int = 8) -> str:
    """
    Render a byte (`width=8`) or a 16-bit word (`width=16`) as a string of ones and zeros. The
    value is truncated to the given width, so negative words appear in two's complement.
    """
    if width not in WIDTHS:
        raise ValueError(F'invalid bit string width {width}; must be one of {WIDTHS}')
    return format(value & ((1 << width) - 1), F'0{width}b')


def from_bitstring(bits: str) -> int:
    """
    The inverse of `mailcodec.lib.bitstring.to_bitstring` for bytes. Exactly the first eight
    characters are read, and only the character `1` sets a bit. Shorter input raises an
    `IndexError`.
    """
    value = 0
    for k in range(8):
        if bits[k] == '1':
            value |= 0x80 >> k
    return value
