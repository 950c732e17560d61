#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Settings that can be changed through environment variables, and the logging setup of the units.
Every setting is read once, when this module is imported. The following variables are known:

- `MAILCODEC_VERBOSITY`: the log level of all units, either as the name of a
  `mailcodec.lib.environment.LogLevel` or as a verbosity number. When it is not set, units are
  detached and raise all exceptions to the caller.
- `MAILCODEC_LINE_LENGTH`: the default line width of the `mailcodec.units.strings.wrap.wrap` unit.
- `MAILCODEC_LENIENT`: when set to a true value, units return partial results by default.

The codec functions in `mailcodec.lib` do not read any of these.
"""
from __future__ import annotations

import os
import logging

from enum import IntEnum
from typing import Generic, Optional, TypeVar

_T = TypeVar('_T')

Logger = logging.Logger


class LogLevel(IntEnum):
    """
    The log levels of the standard library, extended by two levels above `CRITICAL`.
    """
    DETACHED = logging.CRITICAL + 100
    """
    The unit is used from code and not attached to any log output; failures are raised.
    """
    NONE = logging.CRITICAL + 50
    """
    The unit logs nothing, but failures are still swallowed.
    """

    NOTSET   = logging.NOTSET    # noqa
    CRITICAL = logging.CRITICAL  # noqa
    ERROR    = logging.ERROR     # noqa
    WARNING  = logging.WARNING   # noqa
    INFO     = logging.INFO      # noqa
    DEBUG    = logging.DEBUG     # noqa

    @classmethod
    def FromVerbosity(cls, verbosity: int) -> LogLevel:
        if verbosity < 0:
            return cls.DETACHED
        return (cls.WARNING, cls.INFO, cls.DEBUG)[min(verbosity, 2)]

    @property
    def verbosity(self) -> int:
        for level, verbosity in (
            (LogLevel.DETACHED, -1),
            (LogLevel.WARNING, 0),
            (LogLevel.INFO, 1),
            (LogLevel.DEBUG, 2),
        ):
            if self.value >= level:
                return verbosity
        return -1


class MailcodecFormatter(logging.Formatter):
    """
    Prints records as `(time) comment in mailcodec.qp: message`, where the word after the time
    replaces the level name.
    """
    FORMAT = '({asctime}) {custom_level_name} in {name}: {message}'

    NAMES = {
        logging.CRITICAL : 'failure',
        logging.ERROR    : 'failure',
        logging.WARNING  : 'warning',
        logging.INFO     : 'comment',
        logging.DEBUG    : 'verbose',
    }

    def __init__(self):
        super().__init__(self.FORMAT, style='{', datefmt='%H:%M:%S')

    def formatMessage(self, record: logging.LogRecord) -> str:
        record.custom_level_name = self.NAMES.get(record.levelno, 'message')
        return super().formatMessage(record)


def logger(name: str) -> logging.Logger:
    """
    Obtain a logger that writes to standard error using the `MailcodecFormatter`. The logger does
    not propagate its records to the root logger.
    """
    logger = logging.getLogger(name)
    if not logger.hasHandlers():
        stream = logging.StreamHandler()
        stream.setFormatter(MailcodecFormatter())
        logger.addHandler(stream)
    logger.propagate = False
    return logger


class EnvironmentVariableSetting(Generic[_T]):
    """
    A setting backed by the environment variable `MAILCODEC_<name>`. Subclasses convert the raw
    value in `parse`; if the variable is unset or its value can not be parsed, the setting has
    its default value.
    """
    key: str
    value: _T

    def __init__(self, name: str, default: _T):
        self.key = F'MAILCODEC_{name}'
        self.default = default
        self.value = self.read()

    def read(self) -> _T:
        raw = os.environ.get(self.key)
        if raw is None:
            return self.default
        try:
            return self.parse(raw.strip())
        except (KeyError, ValueError):
            logger(__name__).warning(F'ignoring invalid value {raw!r} of {self.key}')
            return self.default

    def parse(self, raw: str) -> _T:
        raise NotImplementedError


class EVBool(EnvironmentVariableSetting[bool]):
    def parse(self, raw: str) -> bool:
        return raw.lower() not in {'', '0', 'no', 'off', 'false'}


class EVInt(EnvironmentVariableSetting[int]):
    def parse(self, raw: str) -> int:
        return int(raw, 0)


class EVLog(EnvironmentVariableSetting[Optional[LogLevel]]):
    def parse(self, raw: str) -> LogLevel:
        if raw.lstrip('-').isdigit():
            return LogLevel.FromVerbosity(int(raw))
        return LogLevel[raw.upper()]


class environment:
    verbosity = EVLog('VERBOSITY', None)
    line_length = EVInt('LINE_LENGTH', 0)
    lenient = EVBool('LENIENT', False)
