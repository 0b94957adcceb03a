"""
Exceptions raised by the ISAAC generator and its support library.
"""
from __future__ import annotations

from typing import Collection


class IsaacError(Exception):
    """
    Base class of all exceptions raised by `isaacrng`.
    """


class SeedError(IsaacError, ValueError):
    """
    Raised when seed material cannot be used as given: too many words, a value that is not an
    integer, or a value outside the range of an unsigned 32-bit word. The generator never reduces
    or truncates seed material to make it fit.
    """
    def __init__(self, msg: str, index: int | None = None):
        if index is not None:
            msg = F'seed word {index}: {msg}'
        super().__init__(msg)
        self.index = index


class BackendError(IsaacError, RuntimeError):
    """
    Raised when a backend was explicitly requested but cannot be used.
    """
    def __init__(self, driver: str, reason: str):
        super().__init__(F'the {driver} backend is unusable: {reason}')
        self.driver = driver
        self.reason = reason


class IsaacImportMissing(IsaacError, ImportError):
    """
    Raised when an optional dependency is accessed that has not been installed.
    """
    def __init__(self, missing: str, install: Collection[str] | None = None, info: str | None = None):
        self.missing = missing
        self.install = ' '.join(sorted(install or [missing]))
        self.info = info
        msg = F'dependency {missing} is missing; run pip install {self.install}'
        if info:
            msg = F'{msg}; {info}'
        super().__init__(msg)
