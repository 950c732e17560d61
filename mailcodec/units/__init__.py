#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
This package contains all mailcodec units. A unit is a byte-to-byte transformation that wraps one
of the codecs in `mailcodec.lib`. To write a unit, it is sufficient to write a class inheriting
from `mailcodec.units.Unit` that implements `mailcodec.units.Unit.process`. If the operation can
be inverted, a method called `reverse` with the same signature implements the inverse. For
example, the following would be a minimalistic hex unit:

    from mailcodec.units import Unit

    class hex(Unit):
        def process(self, data): return bytes.fromhex(data.decode('ascii'))
        def reverse(self, data): return data.hex().encode(self.codec)

Parameters of a unit are passed to its constructor, which forwards them as keyword arguments to
the constructor of `mailcodec.units.Unit`. They are then available as members of `args`:

    class wrapped(Unit):
        def __init__(self, width=78):
            super().__init__(width=width)

        def process(self, data):
            return mailcodec.lib.linewrap.wrap(data.decode(self.codec), self.args.width).encode(self.codec)

### Pipeline Syntax

Units can be combined in Python code using the following syntax:

- The binary or operator `|` combines units into pipelines.
- Combining a pipeline from the left with a byte string, a string, or a list of them feeds the
  input into the first unit of the pipeline.
- Unary negation of a reversible unit selects its `reverse` operation.
- A pipeline is an iterable of output chunks. Piping it into `bytes`, `bytearray`, `str`, or any
  other callable converts the concatenated output; piping it into a list like `[str]` converts
  each chunk individually; piping it into a writable stream writes the output to it.

For example, the following decodes a quoted-printable body, and then armors it for transport:

    >>> from mailcodec import qp, r64
    >>> B'caf=E9' | qp | bytes
    b'caf\\xe9'
    >>> armored = B'caf=E9' | qp | -r64 | str

### Errors and Logging

Every unit class has its own logger, see `mailcodec.lib.environment.logger`. A unit that was
created in code is _detached_ by default, which means that any exception is raised to the caller.
The environment variable `MAILCODEC_VERBOSITY` can be used to attach units to their loggers; in
that case, exceptions are logged and the affected input chunk produces no output. A unit with a
positive `lenient` argument returns partial results and forwards input that it failed to process.
"""
from __future__ import annotations

import abc
import copy

from abc import ABCMeta
from argparse import Namespace
from functools import wraps
from typing import Any, Callable, Iterable, Iterator, List, Optional, TypeVar, Union, cast

from mailcodec.lib.environment import Logger, LogLevel, environment, logger
from mailcodec.lib.exceptions import (
    MailcodecCriticalException,
    MailcodecException,
    MailcodecPartialResult,
)
from mailcodec.lib.tools import exception_to_string, isbuffer, one
from mailcodec.lib.types import buf

__all__ = [
    'Executable',
    'LogLevel',
    'MailcodecCriticalException',
    'MailcodecException',
    'MailcodecPartialResult',
    'Unit',
]

_F = TypeVar('_F', bound=Callable)


def _UnitProcessorBoilerplate(operation: Callable[[Any, bytearray], Any]) -> Callable[[Any, buf], Iterable[bytearray]]:
    @wraps(operation)
    def wrapped(self: Unit, data: Optional[buf]) -> Iterable[bytearray]:
        if data is None:
            data = bytearray()
        elif not isinstance(data, bytearray):
            data = bytearray(data)
        result = operation(self, data)
        if result is None:
            return ()
        if isinstance(result, str):
            result = result.encode(self.codec)
        if isbuffer(result):
            return (result if isinstance(result, bytearray) else bytearray(result),)
        return (r if isinstance(r, bytearray) else bytearray(r) for r in result)
    return wrapped


class MissingFunction:
    """
    A singleton class that represents a missing function. Used internally to indicate that a
    unit does not implement a reverse operation.
    """
    def __init__(self, *_):
        pass

    def __call__(*_, **__):
        raise NotImplementedError('A non-invertible unit was operated in reverse.')

    @classmethod
    def Wrap(cls, _: _F) -> _F:
        return cast('_F', cls())


class Executable(ABCMeta):
    """
    This is the metaclass for mailcodec units. It wraps the `process` and `reverse` methods so
    that they accept any binary buffer and always produce an iterable of output chunks, and it
    implements the pipeline operators on the unit classes themselves, so that `data | qp` works
    without instantiating `qp` first.
    """

    def __new__(mcs, name: str, bases: tuple, nmspc: dict, abstract=False):
        for method in ('process', 'reverse'):
            try:
                old = nmspc[method]
            except KeyError:
                continue
            if isinstance(old, MissingFunction):
                continue
            if getattr(old, '__isabstractmethod__', False):
                continue
            nmspc[method] = _UnitProcessorBoilerplate(old)
        if not abstract and not any(getattr(b, 'is_reversible', False) for b in bases):
            nmspc.setdefault('reverse', MissingFunction())
        nmspc.setdefault('__doc__', '')
        return super().__new__(mcs, name, bases, nmspc)

    def __init__(cls, name: str, bases: tuple, nmspc: dict, abstract=False):
        super().__init__(name, bases, nmspc)

    def __or__(cls, other):
        return cls().__or__(other)

    def __pos__(cls):
        return cls()

    def __neg__(cls):
        unit = cls()
        unit.args.reverse = True
        return unit

    def __ror__(cls, other):
        return cls().__ror__(other)

    @property
    def is_reversible(cls) -> bool:
        """
        This property is `True` if and only if the unit has a member function named `reverse`. By
        convention, this member function implements the inverse of `mailcodec.units.Unit.process`.
        """
        r = cls.__dict__.get('reverse') or getattr(cls, 'reverse', None)
        if r is None or isinstance(r, MissingFunction):
            return False
        return not getattr(r, '__isabstractmethod__', False)

    @property
    def codec(cls) -> str:
        """
        The default codec for encoding textual information between units. The value of this
        property is hardcoded to `UTF8`.
        """
        return 'UTF8'

    @property
    def name(cls) -> str:
        return cls.__name__

    @property
    def logger(cls) -> Logger:
        """
        The debug logger instance for the unit.
        """
        try:
            return cls.__dict__['_logger']
        except KeyError:
            pass
        _logger = logger(F'mailcodec.{cls.name}')
        setattr(cls, '_logger', _logger)
        return _logger


class Unit(metaclass=Executable, abstract=True):
    """
    The base class for all mailcodec units. It implements the pipeline syntax, the exception
    handling, and logging.
    """
    _source: Union[None, Unit, List[buf]]

    @abc.abstractmethod
    def process(self, data: bytearray):
        """
        This routine is overridden by children of `mailcodec.units.Unit` to define how the unit
        processes a given chunk of binary data.
        """

    @MissingFunction.Wrap
    def reverse(self, data: bytearray):
        """
        If this routine is overridden by children of `mailcodec.units.Unit`, then it must implement
        an operation that reverses the `mailcodec.units.Unit.process` operation.
        """

    @classmethod
    def handles(cls, data: buf) -> Optional[bool]:
        """
        This tri-state routine returns `True` if the unit is certain that it can process the given
        input data, and `False` if it is convinced of the opposite. `None` is returned when no
        clear verdict is available.
        """
        return None

    def __init__(self, **keywords):
        keywords.setdefault('reverse', False)
        keywords.setdefault('lenient', int(environment.lenient.value))
        self.args = Namespace(**keywords)
        self._source = None
        verbosity = environment.verbosity.value
        self.log_level = LogLevel.DETACHED if verbosity is None else verbosity

    def __copy__(self):
        cls = self.__class__
        clone: Unit = cls.__new__(cls)
        clone.__dict__.update(self.__dict__)
        clone.args = copy.copy(self.args)
        return clone

    @property
    def is_reversible(self) -> bool:
        return self.__class__.is_reversible

    @property
    def codec(self) -> str:
        return self.__class__.codec

    @property
    def name(self) -> str:
        return self.__class__.name

    @property
    def logger(self) -> Logger:
        return self.__class__.logger

    @property
    def log_level(self) -> LogLevel:
        """
        Returns the current log level as an element of `mailcodec.lib.environment.LogLevel`.
        """
        return LogLevel(self.logger.getEffectiveLevel())

    @log_level.setter
    def log_level(self, value: Union[int, LogLevel]) -> None:
        if not isinstance(value, LogLevel):
            value = LogLevel.FromVerbosity(value)
        self.logger.setLevel(value)

    def log_detach(self) -> Unit:
        """
        Detach the unit from its logger, which means that any exceptions that occur during
        runtime will be raised to the caller.
        """
        self.log_level = LogLevel.DETACHED
        return self

    def _exception_handler(self, exception: BaseException, data: Optional[bytearray]) -> Optional[bytearray]:
        if isinstance(exception, MailcodecPartialResult):
            if self.args.lenient >= 1:
                return bytearray(exception.partial or B'')
            if self.log_level < LogLevel.DETACHED:
                self.log_warn(F'A partial result was returned, use lenient mode to retrieve it: {exception}')
                return None
            raise exception
        elif self.args.lenient >= 1 and data is not None:
            return data
        elif self.log_level >= LogLevel.DETACHED:
            raise exception
        elif isinstance(exception, MailcodecCriticalException):
            self.log_warn(F'critical error, terminating: {exception}')
            raise exception
        elif isinstance(exception, MailcodecException):
            self.log_fail(exception_to_string(exception))
        else:
            explanation = exception_to_string(exception)
            message = F'exception of type {exception.__class__.__name__}'
            if explanation and explanation != exception.__class__.__name__:
                message = F'{message}; {explanation}'
            self.log_fail(message)
        return None

    def act(self, data: bytearray) -> Iterable[bytearray]:
        if self.args.reverse:
            return self.reverse(data)
        return self.process(data)

    def _inputs(self) -> Iterator[bytearray]:
        source = self._source
        if source is None:
            return
        if isinstance(source, Unit):
            yield from source
            return
        for chunk in source:
            yield bytearray(chunk)

    def __iter__(self) -> Iterator[bytearray]:
        for data in self._inputs():
            try:
                outputs = list(self.act(bytearray(data)))
            except Exception as exception:
                result = self._exception_handler(exception, data)
                if result is not None:
                    yield result
            else:
                yield from outputs

    @property
    def nozzle(self) -> Unit:
        """
        The first unit of the pipeline that ends in this unit. Input that is piped into the
        pipeline is fed to this unit.
        """
        unit = self
        while isinstance(unit._source, Unit):
            unit = unit._source
        return unit

    def __ror__(self, stream: Union[None, Unit, str, buf, List[Union[str, buf]]]) -> Unit:
        if stream is None:
            return self
        if isinstance(stream, Unit):
            self.nozzle._source = stream
            return self
        if isinstance(stream, (list, tuple)):
            self.nozzle._source = [t.encode(self.codec) if isinstance(t, str) else t for t in stream]
            return self
        if isinstance(stream, str):
            stream = stream.encode(self.codec)
        if not isbuffer(stream):
            raise TypeError(F'unable to use object of type {type(stream).__name__} as unit input')
        self.nozzle._source = [stream]
        return self

    def __neg__(self) -> Unit:
        pipeline = []
        cursor = self
        while isinstance(cursor, Unit):
            reversed = copy.copy(cursor)
            reversed.args.reverse = True
            reversed._source = None
            pipeline.append(reversed)
            cursor = cursor._source
        reversed = None
        while pipeline:
            reversed = reversed | pipeline.pop()
        return cast(Unit, reversed)

    def __pos__(self):
        return self

    def __str__(self):
        return self | str

    def __bytes__(self):
        return self | bytes

    def _joined(self) -> bytearray:
        output = bytearray()
        for chunk in self:
            output.extend(chunk)
        return output

    def _converter(self, it: Iterable) -> Optional[Callable[[bytearray], Any]]:
        try:
            c = one(it)
        except LookupError:
            return None
        if c is ...:
            def identity(x):
                return x
            return identity
        if c is str:
            def decoder(v: bytearray):
                return v.decode(self.codec)
            return decoder
        if isinstance(c, type):
            def converter(v):
                return v if isinstance(v, c) else c(v)
            return converter
        if callable(c):
            return c
        return None

    def __or__(self, stream):
        if isinstance(stream, type) and issubclass(stream, Unit):
            stream = stream()
        if isinstance(stream, Unit):
            return copy.copy(stream).__ror__(self)
        if stream is ...:
            return self._joined()
        if isinstance(stream, list):
            converter = self._converter(stream)
            if converter is None:
                stream.extend(self)
                return stream
            return [converter(chunk) for chunk in self]
        if isinstance(stream, set):
            converter = self._converter(stream)
            if converter is None:
                stream.update(bytes(chunk) for chunk in self)
                return stream
            return {converter(chunk) for chunk in self}
        if isinstance(stream, bytearray):
            stream.extend(self._joined())
            return stream
        if callable(stream):
            out = self._joined()
            if isinstance(stream, type) and isinstance(out, stream):
                return out
            if stream is str:
                return out.decode(self.codec)
            return stream(out)
        if hasattr(stream, 'write'):
            for chunk in self:
                stream.write(chunk)
            return stream
        raise TypeError(F'unable to pipe unit output into object of type {type(stream).__name__}')

    def __call__(self, data: Optional[buf] = None) -> bytearray:
        unit = copy.copy(self)
        return unit.__ror__(B'' if data is None else data) | bytearray

    @classmethod
    def _output(cls, *messages) -> str:
        def transform(message):
            if callable(message):
                message = message()
            if isinstance(message, BaseException):
                return exception_to_string(message)
            if isinstance(message, str):
                return message
            if isbuffer(message):
                import codecs
                pmsg: str = codecs.decode(message, cls.codec, 'surrogateescape')
                if not pmsg.isprintable():
                    pmsg = bytes(message).hex().upper()
                return pmsg
            import pprint
            return pprint.pformat(message)
        return ' '.join(transform(msg) for msg in messages)

    @classmethod
    def _log(cls, level: LogLevel, messages: tuple) -> bool:
        enabled = cls.logger.isEnabledFor(level)
        if enabled and messages:
            cls.logger.log(level, cls._output(*messages))
        return enabled

    @classmethod
    def log_fail(cls, *messages) -> bool:
        """
        Log the messages at level `ERROR`. Returns whether that level is enabled, so that calling
        the method without arguments tests for it. Callable messages are evaluated only when they
        are logged.
        """
        return cls._log(LogLevel.ERROR, messages)

    @classmethod
    def log_warn(cls, *messages) -> bool:
        """
        Same as `mailcodec.units.Unit.log_fail`, at level `WARNING`.
        """
        return cls._log(LogLevel.WARNING, messages)

    @classmethod
    def log_info(cls, *messages) -> bool:
        return cls._log(LogLevel.INFO, messages)

    @classmethod
    def log_debug(cls, *messages) -> bool:
        return cls._log(LogLevel.DEBUG, messages)
