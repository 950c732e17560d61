#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Radix64 ASCII armor as used for binary attachments and OpenPGP messages: the base64 encoding of
the data, followed by a line that contains an equals sign and the base64 encoding of a 24-bit
CRC of the original data.
"""
from __future__ import annotations

import base64
import re

from typing import Optional, Tuple

from mailcodec.lib.types import buf

__all__ = [
    'checksum',
    'crc24',
    'decode',
    'encode',
    'split',
    'verify',
]

CRC24_INIT = 0xB704CE
CRC24_POLY = 0x1864CFB

ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/'

_SEXTETS = {character: value for value, character in enumerate(ALPHABET)}
_CHECKSUM_LINE = re.compile(r'^(.*?)\r?\n=([A-Za-z0-9+/]{4})\s*$', flags=re.DOTALL)


def crc24(data: buf) -> int:
    """
    Compute the CRC-24 of the given data.
    """
    crc = CRC24_INIT
    for byte in memoryview(data).cast('B'):
        crc ^= byte << 16
        for _ in range(8):
            crc <<= 1
            if crc & 0x1000000:
                crc ^= CRC24_POLY
    return crc & 0xFFFFFF


def checksum(data: buf) -> bytes:
    """
    The CRC-24 of the given data as three big endian bytes.
    """
    return crc24(data).to_bytes(3, 'big')


def encode(data: buf) -> str:
    """
    Armor the given data: base64 payload, a line break, and the checksum line.
    """
    payload = base64.b64encode(data).decode('ascii')
    crc = base64.b64encode(checksum(data)).decode('ascii')
    return F'{payload}\r\n={crc}'


def split(text: str) -> Tuple[str, Optional[bytes]]:
    """
    Separate an armored block into its base64 payload and the decoded checksum. If there is no
    checksum line, the second element of the result is `None`.
    """
    match = _CHECKSUM_LINE.match(text)
    if match is None:
        return text, None
    payload, crc = match.groups()
    return payload, bytes(_unpack(crc))


def _unpack(text: str) -> bytearray:
    text = text.rstrip('=')
    sextets = [_SEXTETS[c] for c in text if c in _SEXTETS]
    remainder = len(sextets) % 4
    length = len(sextets) - remainder
    output = bytearray()
    for k in range(0, length, 4):
        a, b, c, d = sextets[k:k + 4]
        output.append(((a << 2) | (b >> 4)) & 0xFF)
        output.append(((b & 0x0F) << 4 | (c >> 2)) & 0xFF)
        output.append(((c & 0x03) << 6 | d) & 0xFF)
    if remainder == 3:
        a, b, c = sextets[length:]
        output.append(((a << 2) | (b >> 4)) & 0xFF)
        output.append(((b & 0x0F) << 4 | (c >> 2)) & 0xFF)
    elif remainder == 2:
        a, b = sextets[length:]
        output.append(((a << 2) | (b >> 4)) & 0xFF)
    return output


def decode(text: str) -> bytes:
    """
    Decode an armored block or a bare base64 payload. Trailing padding is optional, line breaks
    and other characters outside the base64 alphabet are ignored, and an incomplete final group
    of two or three characters still yields its one or two bytes. The checksum is not verified;
    use `mailcodec.lib.radix64.verify` for that.
    """
    payload, _ = split(text)
    return bytes(_unpack(payload))


def verify(text: str) -> bool:
    """
    Check whether the checksum line of an armored block matches its payload. Returns `False` if
    the block has no checksum line.
    """
    payload, crc = split(text)
    if crc is None:
        return False
    return crc == checksum(_unpack(payload))
