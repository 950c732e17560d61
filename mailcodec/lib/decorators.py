"""
Decorators for unit methods.
"""
from __future__ import annotations

import codecs

from functools import WRAPPER_ASSIGNMENTS, wraps
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

if TYPE_CHECKING:
    from mailcodec.units import Unit


_F = TypeVar('_F', bound=Callable)


def wraps_without_annotations(method: Callable) -> Callable[[_F], _F]:
    """
    This decorator works similar to `wraps` from `functools` but does not update the type
    annotations of the wrapped function, since the decorators in this module change the
    function signature.
    """
    assignments = set(WRAPPER_ASSIGNMENTS)
    assignments.discard('__annotations__')
    return wraps(method, assigned=assignments)


def unicoded(method: Callable[[Any, str], Optional[str]]) -> Callable[[Any, bytearray], Optional[bytes]]:
    """
    Can be used to decorate a `mailcodec.units.Unit.process` routine that takes a string argument
    and also returns one. The resulting routine takes a binary buffer as input, decodes it using
    the unit codec and encodes the result again. Undecodable bytes survive the round trip as
    surrogate escapes.
    """
    @wraps_without_annotations(method)
    def method_wrapper(self: Unit, data: bytearray) -> Optional[bytes]:
        text = codecs.decode(data, self.codec, errors='surrogateescape')
        result = method(self, text)
        if result is None:
            return None
        return codecs.encode(result, self.codec, errors='surrogateescape')
    return method_wrapper
