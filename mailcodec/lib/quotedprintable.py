#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
The quoted-printable content transfer encoding as specified in RFC 2045 and RFC 2046. The encoder
produces 7-bit output where every byte outside the printable ASCII range (except the space) and
every equals sign is written as `=XX`, and long lines are continued with soft breaks. The decoder
is deliberately forgiving: real-world mail contains plenty of malformed escape sequences, and each
of them is copied to the output verbatim instead of aborting the decoding.

The byte-level functions are `mailcodec.lib.quotedprintable.quote` and its inverse
`mailcodec.lib.quotedprintable.unquote`. The text-level functions `encode` and `decode` combine
them with a charset, resolved by `mailcodec.lib.charsets.resolve`.
"""
from __future__ import annotations

import re

from typing import Iterator, List, NamedTuple, Optional

from mailcodec.lib.charsets import FALLBACK_CHARSET, resolve
from mailcodec.lib.types import buf

__all__ = [
    'ParseOutcome',
    'decode',
    'encode',
    'quote',
    'scan',
    'unquote',
]

SOFT_BREAK = '=\r\n'
SENTINEL = '=3D=3D'

LINE_WIDTH = 73
"""
The printable width at which a line is considered full. An escape sequence counts with all three
of its characters, so a full line holds between 73 and 75 characters before its soft break.
"""

_PERIOD = '.'
_ESCAPED_PERIOD = '=2E'
_HEXDIGITS = re.compile('[0-9A-Fa-f]{2}')


def _token(byte: int) -> str:
    if (byte < 0x21 or byte > 0x7E or byte == 0x3D) and byte != 0x20:
        return F'={byte:02X}'
    return chr(byte)


_TOKENS = tuple(_token(b) for b in range(0x100))


def quote(data: buf) -> str:
    """
    Encode binary data as quoted-printable text with CRLF soft breaks. A soft break is inserted
    as soon as a line is full, even if the input ends right there. When the next line would begin
    with a period, the break is moved backwards so that the period stays on the current line; a
    period that can not be kept off the start of a line is escaped.
    """
    tokens: List[str] = [_TOKENS[b] for b in memoryview(data).cast('B')]
    count = len(tokens)
    if count and tokens[0] == _PERIOD:
        tokens[0] = _ESCAPED_PERIOD
    output: List[str] = []
    start = 0
    while start < count:
        end = start
        width = 0
        while end < count and width < LINE_WIDTH:
            width += len(tokens[end])
            end += 1
        if width < LINE_WIDTH:
            output.extend(tokens[start:end])
            break
        while end < count and end - start > 1 and tokens[end] == _PERIOD:
            end -= 1
        if end < count and tokens[end] == _PERIOD:
            tokens[end] = _ESCAPED_PERIOD
        output.extend(tokens[start:end])
        output.append(SOFT_BREAK)
        start = end
    return ''.join(output)


def encode(text: Optional[str], charset: str = FALLBACK_CHARSET) -> str:
    """
    Encode text in the given charset and then as quoted-printable. Empty input, including `None`,
    produces empty output.
    """
    if not text:
        return ''
    return quote(resolve(charset).encode(text))


class ParseOutcome(NamedTuple):
    """
    The result of reading one byte from quoted-printable text: either an escape sequence that
    spans three characters, or a single literal character.
    """
    value: int
    escaped: bool

    @property
    def size(self) -> int:
        return 3 if self.escaped else 1

    @property
    def malformed(self) -> bool:
        """
        An equals sign can only appear literally when it starts an invalid escape sequence.
        """
        return not self.escaped and self.value == 0x3D


def _parse(text: str, position: int) -> ParseOutcome:
    character = text[position]
    if character == '=' and text[position + 1] != '=':
        digits = text[position + 1:position + 3]
        if _HEXDIGITS.fullmatch(digits):
            return ParseOutcome(int(digits, 16), True)
    return ParseOutcome(ord(character) & 0xFF, False)


def scan(text: str) -> Iterator[ParseOutcome]:
    """
    Remove all soft breaks from the input and generate one `ParseOutcome` per decoded byte. The
    sentinel `=3D=3D` is appended to the text so that looking ahead two characters never leaves
    the buffer; it is not part of the output.
    """
    text = text.replace(SOFT_BREAK, '')
    end = len(text)
    text += SENTINEL
    position = 0
    while position < end:
        outcome = _parse(text, position)
        position += outcome.size
        yield outcome


def unquote(text: str) -> bytearray:
    """
    Decode quoted-printable text to bytes. Malformed escape sequences are copied verbatim.
    """
    return bytearray(outcome.value for outcome in scan(text))


def decode(text: Optional[str], charset: str = FALLBACK_CHARSET) -> str:
    """
    Decode quoted-printable text and convert the resulting bytes to a string using the given
    charset. Trailing equals signs are removed from the result.
    """
    if not text:
        return ''
    return resolve(charset).decode(unquote(text)).rstrip('=')
