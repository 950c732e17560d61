"""
This module is used as a unified resource for types that are primarily used for type hints.
"""
from __future__ import annotations

from typing import Union

buf = Union[bytes, bytearray, memoryview]
"""
Any object that the codecs accept as binary input.
"""

__all__ = ['buf']
