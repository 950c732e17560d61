R"""
Byte-exact transcoders for moving data across the ASCII-only boundaries of legacy mail transport:

- `mailcodec.lib.quotedprintable`: quoted-printable encoding as in RFC 2045 and RFC 2046,
- `mailcodec.lib.radix64`: base64 armor with a CRC-24 checksum line,
- `mailcodec.lib.charsets`: lenient charset name resolution,
- `mailcodec.lib.linewrap`: fixed-width line wrapping,
- `mailcodec.lib.bitstring`: bytes and words as strings of binary digits,
- `mailcodec.lib.fieldnames`: canonical spelling of header field names.

The package `mailcodec` exports the units that wrap these codecs as pipeline-capable byte
transformations, see `mailcodec.units` for the pipeline syntax:

    >>> from mailcodec import qp
    >>> B'A=3D=E7.' | qp('latin1') | str
    'A=ç.'
"""
from __future__ import annotations

__version__ = '0.3.1'
__distribution__ = 'mailcodec'

from mailcodec.units import Unit
from mailcodec.units.encoding.bits import bits
from mailcodec.units.encoding.qp import qp
from mailcodec.units.encoding.r64 import r64
from mailcodec.units.strings.hdrname import hdrname
from mailcodec.units.strings.wrap import wrap

__all__ = [
    'Unit',
    'bits',
    'hdrname',
    'qp',
    'r64',
    'wrap',
]
