#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Resolution of charset names to Python text codecs. Mail software in the wild labels its content
with a remarkable variety of charset names, so the resolver is lenient: a name that does not
resolve verbatim is normalized once and retried, and if that fails as well, the result is the
ISO-8859-1 codec. Since every byte value is a valid Latin-1 character, the fallback can always
encode and decode, which makes `mailcodec.lib.charsets.resolve` a total function.
"""
from __future__ import annotations

import codecs

from typing import Callable, Iterator, NamedTuple, Optional, Tuple

from mailcodec.lib.environment import logger
from mailcodec.lib.types import buf

__all__ = [
    'Charset',
    'FALLBACK_CHARSET',
    'NAME_CANDIDATES',
    'detect',
    'lookup',
    'normalize',
    'resolve',
]

FALLBACK_CHARSET = 'ISO-8859-1'


class Charset(NamedTuple):
    """
    A resolved charset. The `name` is the name that was successfully looked up, `info` is the
    codec obtained for it.
    """
    name: str
    info: codecs.CodecInfo

    def encode(self, text: str) -> bytes:
        """
        Encode the given text; characters that the charset can not represent become `?`.
        """
        data, _ = self.info.encode(text, 'replace')
        return data

    def decode(self, data: buf) -> str:
        """
        Decode the given bytes; invalid sequences become the Unicode replacement character.
        """
        text, _ = self.info.decode(bytes(data), 'replace')
        return text


def normalize(name: str) -> str:
    """
    Apply the repairs for the most common malformations of charset names: `UTF8` without a
    hyphen, `ISO8859-1` without a hyphen after the ISO prefix, and underscores used in place
    of hyphens. The result is uppercase.
    """
    if name.upper() == 'UTF8':
        name = 'UTF-8'
    elif name.startswith('ISO') and name[3:4].isdigit():
        name = F'ISO-{name[3:]}'
    return name.replace('_', '-').upper()


def _verbatim(name: str) -> str:
    return name


NAME_CANDIDATES: Tuple[Callable[[str], str], ...] = (_verbatim, normalize)
"""
The strategies that are tried in order to turn a user-supplied name into a name that Python
can look up. The first one that produces a resolvable text codec wins.
"""


def lookup(name: str) -> Optional[codecs.CodecInfo]:
    """
    Look up a text codec by name without any leniency. Returns `None` if there is no such codec
    or if the codec is not a usable text encoding: binary codecs like `base64` or `rot13`, and
    codecs like `idna` or `undefined` that fail even on empty input with the `replace` handler.
    """
    try:
        info = codecs.lookup(name)
    except (LookupError, ValueError):
        return None
    if not getattr(info, '_is_text_encoding', True):
        return None
    try:
        info.encode('', 'replace')
        info.decode(b'', 'replace')
    except UnicodeError:
        return None
    return info


def _candidates(name: str) -> Iterator[str]:
    for strategy in NAME_CANDIDATES:
        yield strategy(name)


def resolve(name: Optional[str]) -> Charset:
    """
    Resolve a charset name to a `mailcodec.lib.charsets.Charset`. This function never fails; an
    unknown or malformed name resolves to ISO-8859-1.
    """
    if isinstance(name, str):
        for candidate in _candidates(name):
            info = lookup(candidate)
            if info is not None:
                return Charset(candidate, info)
    logger(__name__).debug(F'unable to resolve charset {name!r}, using {FALLBACK_CHARSET}')
    return Charset(FALLBACK_CHARSET, codecs.lookup(FALLBACK_CHARSET))


def detect(data: buf) -> Charset:
    """
    Guess the charset of the given binary data. Buffers with only zero bytes at every odd or
    every even offset are taken to be UTF-16, all other data is handed to `chardet`. When no
    guess can be made, the result is the fallback charset.
    """
    view = memoryview(data)
    if len(view) >= 2:
        if not any(view[1::2]):
            return resolve('UTF-16LE')
        if not any(view[0::2]):
            return resolve('UTF-16BE')
    import chardet
    detection = chardet.detect(bytes(view))
    return resolve(detection.get('encoding'))
