"""
Generation of unique strings for MIME boundaries and message identifiers.
"""
from __future__ import annotations

import os
import random as _random

from datetime import datetime
from typing import Callable, Optional


def unique_string(
    clock: Callable[[], datetime] = datetime.now,
    random: Optional[_random.Random] = None,
    pid: Optional[int] = None,
) -> str:
    """
    Concatenate the process id, a `yyMMddhhmmss` timestamp on a 12-hour clock, the milliseconds
    and a random integer. All three sources can be injected to make the output reproducible.
    """
    now = clock()
    if pid is None:
        pid = os.getpid()
    if random is None:
        random = _random.SystemRandom()
    return F'{pid}{now:%y%m%d%I%M%S}{now.microsecond // 1000}{random.getrandbits(31)}'
