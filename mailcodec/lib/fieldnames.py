"""
Canonical spelling of message header field names.
"""
from __future__ import annotations

IRREGULAR_FIELD_NAMES = {
    'content-id'   : 'Content-ID',
    'content-md5'  : 'Content-MD5',
    'message-id'   : 'Message-ID',
    'mime-version' : 'MIME-Version',
}


def capitalize(name: str) -> str:
    """
    Uppercase the first character of every hyphen-separated segment.
    """
    return '-'.join(segment[:1].upper() + segment[1:] for segment in name.split('-'))


def normalize(name: str) -> str:
    """
    Return the canonical spelling of a header field name, e.g. `Message-ID` for `message-id` and
    `Content-Type` for `content-type`.
    """
    try:
        return IRREGULAR_FIELD_NAMES[name.lower()]
    except KeyError:
        return capitalize(name)
