"""
The boundary to the RFC 2047 encoded-word transcoder, which embeds charset-tagged text in header
fields as `=?charset?encoding?payload?=`. This package does not implement that transcoder; it
consumes any object that provides the `mailcodec.lib.encodedword.EncodedWordCodec` interface.
The default is an adapter for the `email.header` module of the standard library.
"""
from __future__ import annotations

import email.charset
import email.header

from typing import Optional, Protocol

from mailcodec.lib.charsets import resolve

__all__ = [
    'EncodedWordCodec',
    'StandardEncodedWordCodec',
    'decode_header',
    'encode_header',
]


class EncodedWordCodec(Protocol):

    def encode(self, text: str, charset: str) -> str:
        ...

    def decode(self, text: str) -> str:
        ...


class StandardEncodedWordCodec:
    """
    Encodes header values as base64 encoded words and decodes both base64 and quoted-printable
    encoded words. Charset names are resolved leniently.
    """

    def encode(self, text: str, charset: str) -> str:
        cs = email.charset.Charset(resolve(charset).name)
        cs.header_encoding = email.charset.BASE64
        header = email.header.Header(text, cs, errors='replace')
        return header.encode(linesep='\r\n')

    def decode(self, text: str) -> str:
        parts = []
        for chunk, name in email.header.decode_header(text):
            if isinstance(chunk, str):
                parts.append(chunk)
            elif name is None:
                parts.append(chunk.decode('raw-unicode-escape'))
            else:
                parts.append(resolve(name).decode(chunk))
        return ''.join(parts)


DEFAULT_CODEC: EncodedWordCodec = StandardEncodedWordCodec()


def encode_header(text: str, charset: str, codec: Optional[EncodedWordCodec] = None) -> str:
    """
    Encode a header field value with the given codec, or with the default codec.
    """
    return (codec or DEFAULT_CODEC).encode(text, charset)


def decode_header(text: str, codec: Optional[EncodedWordCodec] = None) -> str:
    """
    Decode all encoded words in a header field value with the given codec, or with the default.
    """
    return (codec or DEFAULT_CODEC).decode(text)
