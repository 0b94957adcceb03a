#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A common interface to all configuration settings available via environment variables. Every
variable name carries the prefix `ISAAC_`. This module is also host to the logging configuration.

- `ISAAC_VERBOSITY`: either the name of a `isaacrng.lib.environment.LogLevel` or a number, where
  0 means warnings, 1 means info messages and 2 or more means debug output.
- `ISAAC_BACKEND`: force the backend that `isaacrng.ISAAC` uses; either `fast` or `pure`.
"""
from __future__ import annotations

import os
import logging

from enum import IntEnum
from typing import Optional, TypeVar, Generic

_T = TypeVar('_T')

Logger = logging.Logger


class LogLevel(IntEnum):
    """
    An enumeration representing the current log level:
    """
    DETACHED = logging.CRITICAL + 100
    """
    The generator is used as a library and nothing should be written to the terminal. Problems are
    only communicated by exceptions.
    """

    @classmethod
    def FromVerbosity(cls, verbosity: int):
        if verbosity < 0:
            return cls.DETACHED
        return {
            0: cls.WARNING,
            1: cls.INFO,
            2: cls.DEBUG
        }.get(verbosity, cls.DEBUG)

    NOTSET   = logging.NOTSET    # noqa
    CRITICAL = logging.CRITICAL  # noqa
    FATAL    = logging.FATAL     # noqa
    ERROR    = logging.ERROR     # noqa
    WARNING  = logging.WARNING   # noqa
    WARN     = logging.WARN      # noqa
    INFO     = logging.INFO      # noqa
    DEBUG    = logging.DEBUG     # noqa

    @property
    def verbosity(self) -> int:
        if self.value >= LogLevel.DETACHED:
            return -1
        if self.value >= LogLevel.WARNING:
            return +0
        if self.value >= LogLevel.INFO:
            return +1
        if self.value >= LogLevel.DEBUG:
            return +2
        else:
            return -1


class IsaacFormatter(logging.Formatter):

    NAMES = {
        logging.CRITICAL : 'failure',
        logging.ERROR    : 'failure',
        logging.WARNING  : 'warning',
        logging.INFO     : 'comment',
        logging.DEBUG    : 'verbose',
    }

    def formatMessage(self, record: logging.LogRecord) -> str:
        record.custom_level_name = self.NAMES.get(record.levelno, record.levelname.lower())
        return super().formatMessage(record)


_LOGGERS: set[str] = set()


def logger(name: str) -> logging.Logger:
    """
    Obtain a logger which is configured with the default format. If the `ISAAC_VERBOSITY`
    variable is set, the logger level is taken from there; the level is updated whenever
    `isaacrng.lib.environment.environment.reload` is called.
    """
    _LOGGERS.add(name)
    logger = logging.getLogger(name)
    if not logger.handlers:
        stream = logging.StreamHandler()
        stream.setFormatter(IsaacFormatter(
            '({asctime}) {custom_level_name} in {name}: {message}',
            style='{',
            datefmt='%H:%M:%S',
        ))
        logger.addHandler(stream)
    if (level := environment.verbosity.value) is not None:
        logger.setLevel(level)
    logger.propagate = False
    return logger


class EnvironmentVariableSetting(Generic[_T]):
    key: str
    value: Optional[_T]

    def __init__(self, name: str):
        self.key = F'ISAAC_{name}'
        self.value = self.read()

    def read(self) -> _T:
        return None


class EVStr(EnvironmentVariableSetting[Optional[str]]):
    def read(self):
        value = os.environ.get(self.key, None)
        if value is None:
            return None
        return value.strip().lower() or None


class EVLog(EnvironmentVariableSetting[Optional[LogLevel]]):
    def read(self):
        try:
            loglevel = os.environ[self.key]
        except KeyError:
            return None
        if loglevel.isdigit():
            return LogLevel.FromVerbosity(int(loglevel))
        try:
            loglevel = LogLevel[loglevel.upper()]
        except KeyError:
            levels = ', '.join(ll.name for ll in LogLevel)
            logging.getLogger(__name__).warning(
                F'ignoring unknown verbosity "{loglevel!r}"; pick from: {levels}')
            return None
        else:
            return loglevel


class environment:
    verbosity = EVLog('VERBOSITY')
    backend = EVStr('BACKEND')

    @classmethod
    def reload(cls):
        """
        Read all settings from the process environment again and apply the verbosity to all
        loggers obtained from `isaacrng.lib.environment.logger`.
        """
        for setting in vars(cls).values():
            if isinstance(setting, EnvironmentVariableSetting):
                setting.value = setting.read()
        level = cls.verbosity.value
        for name in _LOGGERS:
            logging.getLogger(name).setLevel(logging.NOTSET if level is None else level)
