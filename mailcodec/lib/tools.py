#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Miscellaneous helper functions used by the unit framework.
"""
from __future__ import annotations

from itertools import islice
from typing import Iterable, TypeVar

_T = TypeVar('_T')


def isbuffer(obj) -> bool:
    """
    Test whether `obj` supports the buffer protocol, like `bytes`, `bytearray` or `memoryview`.
    """
    try:
        with memoryview(obj):
            return True
    except TypeError:
        return False


class NotOne(LookupError):
    """
    Raised by `mailcodec.lib.tools.one` when the input does not have exactly one element. The
    property `empty` is `True` if it had none.
    """
    def __init__(self, empty: bool):
        super().__init__('expected exactly one item, got {}'.format('none' if empty else 'more'))
        self.empty = empty


def one(iterable: Iterable[_T]) -> _T:
    """
    Return the only element of `iterable`. At most two elements are consumed.
    """
    items = list(islice(iterable, 2))
    if len(items) != 1:
        raise NotOne(not items)
    return items[0]


def exception_to_string(exception: BaseException) -> str:
    """
    A short description of the exception for log output: the longest string argument, or the
    name of the exception type if there is no message at all.
    """
    messages = [a for a in exception.args if isinstance(a, str)]
    if messages:
        return max(messages, key=len).strip()
    return str(exception) or exception.__class__.__name__
