"""
Exceptions raised by mailcodec units. The codec functions in `mailcodec.lib` do not raise for
well-typed input; these exceptions are used by `mailcodec.units.Unit` and its children to signal
contract violations and truncated results.
"""
from __future__ import annotations

from typing import Optional


class MailcodecException(ValueError):
    """
    Base class for all custom exceptions of this package.
    """


class MailcodecCriticalException(MailcodecException):
    """
    An exception that terminates the pipeline regardless of the log level.
    """


class MailcodecPartialResult(MailcodecException):
    """
    Raised when a unit could only process a part of its input. The `partial` member holds the
    output produced up to that point; a unit in lenient mode returns it instead of failing.
    """
    def __init__(self, msg: str, partial: Optional[bytes], rest: Optional[bytes] = None):
        super().__init__(msg)
        self.message = msg
        self.partial = partial
        self.rest = rest

    def __str__(self):
        return self.message
