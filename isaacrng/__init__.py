R"""
ISAAC (Indirection, Shift, Accumulate, Add, and Count) is a cryptographically secure pseudorandom
number generator that quickly produces high-quality random data. The results are uniformly
distributed, unbiased, and unpredictable unless you know the seed. The algorithm was published by
Bob Jenkins in 1996 along with a [reference implementation](http://burtleburtle.net/bob/rand/isaacafa.html),
and no feasible attacks have been identified to date.

    from isaacrng import ISAAC

    rng = ISAAC(0x12345678, 0x9ABCDEF0)
    for _ in range(30):
        print('Result:', rng.irand())

The package contains two compatible implementations of the algorithm: the reference in
`isaacrng.lib.isaac` and a faster variant in `isaacrng.lib.fast.isaac`. The `isaacrng.ISAAC`
class picks one of them; the first time a generator is constructed, the fast implementation is
verified against the reference and used if the results agree. The active implementation can be
queried as `isaacrng.DRIVER`:

    print('Backend type:', isaacrng.DRIVER)

In order to force the use of one or the other, set the environment variable `ISAAC_BACKEND` to
either `fast` or `pure`, pass the `driver` argument to `isaacrng.ISAAC`, or instantiate
`isaacrng.lib.isaac.Isaac` or `isaacrng.lib.fast.isaac.IsaacFast` directly.

By default, the generator is not seeded at all when no seed is given: the state is filled with
zeros. This is a reminder that picking seed material is the responsibility of the caller. There
is no way to reseed or clone a generator; construct a new one with new seed material instead.
"""
from __future__ import annotations

__version__ = '1.0.0'
__distribution__ = 'isaac-rng'

import functools

from threading import RLock
from typing import TYPE_CHECKING, Callable, TypeVar

from isaacrng.lib.environment import environment, logger
from isaacrng.lib.exceptions import BackendError, IsaacError, SeedError
from isaacrng.lib.isaac import Driver, Isaac, IsaacBase

if TYPE_CHECKING:
    from isaacrng.lib.types import buf


_T = TypeVar('_T')

_log = logger(__name__)


def _singleton(cls: type[_T]) -> _T:
    return cls()


@_singleton
class __backend__:
    """
    Selects the implementation used by `isaacrng.ISAAC`. The selection happens once, when it is
    first needed, and the result is kept for the lifetime of the process. The object is a context
    manager that holds a lock while it is used.
    """
    _lock: RLock = RLock()
    _driver: Driver | None
    _impls: dict[Driver, type[IsaacBase]]

    PROBE_SEED = (0x01234567, 0x89ABCDEF, 0xDEADBEEF, 0x0BADF00D, 0xFFFFFFFF)

    def __init__(self):
        self._driver = None
        self._impls = {Driver.PURE: Isaac}

    def __enter__(self):
        self._lock.__enter__()
        return self

    def __exit__(self, et, ev, tb):
        return self._lock.__exit__(et, ev, tb)

    def _load_fast(self) -> type[IsaacBase]:
        if (impl := self._impls.get(Driver.FAST)) is not None:
            return impl
        try:
            from isaacrng.lib.fast.isaac import IsaacFast
        except ImportError as E:
            raise BackendError(Driver.FAST.value, F'import failed: {E!s}') from E
        count = 3 * 0x100
        if IsaacFast(*self.PROBE_SEED).words(count) != Isaac(*self.PROBE_SEED).words(count):
            raise BackendError(Driver.FAST.value, 'output differs from the reference implementation')
        self._impls[Driver.FAST] = IsaacFast
        return IsaacFast

    def _requested(self) -> Driver | None:
        if (name := environment.backend.value) is None:
            return None
        try:
            return Driver(name)
        except ValueError:
            choices = ', '.join(d.value for d in Driver)
            _log.warning(F'ignoring unknown backend "{name}"; pick from: {choices}')
            return None

    def probe(self) -> Driver:
        """
        Determine the default implementation. A backend that was requested via the environment is
        used unconditionally, otherwise the fast implementation is preferred if it works.
        """
        if (driver := self._driver) is not None:
            return driver
        if (driver := self._requested()) is not None:
            self.resolve(driver)
            _log.info(F'using the {driver.value} backend as requested by the environment')
        else:
            try:
                self._load_fast()
            except BackendError as E:
                _log.warning(F'falling back to the reference implementation; {E!s}')
                driver = Driver.PURE
            else:
                driver = Driver.FAST
            _log.debug(F'selected the {driver.value} backend')
        self._driver = driver
        return driver

    @property
    def driver(self) -> Driver:
        return self.probe()

    def resolve(self, driver: Driver | str | None = None) -> type[IsaacBase]:
        """
        Return the implementation for the given driver, or the default implementation if no driver
        is specified. A `isaacrng.lib.exceptions.BackendError` is raised if the requested driver is
        unusable.
        """
        if driver is None:
            driver = self.probe()
        try:
            driver = Driver(driver)
        except ValueError:
            raise BackendError(str(driver), 'no backend of this name exists') from None
        if driver is Driver.FAST:
            return self._load_fast()
        return self._impls[driver]

    def reset(self):
        """
        Forget the selected implementation so that the next generator probes again.
        """
        self._driver = None
        self._impls = {Driver.PURE: Isaac}


def _serialized(method: Callable[..., _T]) -> Callable[..., _T]:
    @functools.wraps(method)
    def wrapper(self: ISAAC, *args, **kwargs) -> _T:
        if (lock := self._lock) is None:
            return method(self, *args, **kwargs)
        with lock:
            return method(self, *args, **kwargs)
    return wrapper


class ISAAC:
    """
    Creates a generator from the given seed words, using either the fast implementation of the
    algorithm or the reference implementation. Each seed word has to be an integer in the range of
    an unsigned 32-bit word and at most 256 of them can be given; invalid seeds raise a
    `isaacrng.lib.exceptions.SeedError`. Use `isaacrng.lib.seeding` to convert other kinds of seed
    material.

    A generator must not be used by several threads at once unless it was created with the
    `synchronized` flag, which guards every draw with a lock.

        rng = ISAAC(int(time.time()))
    """
    backend: IsaacBase

    def __init__(self, *seed: int, driver: Driver | str | None = None, synchronized: bool = False):
        with __backend__ as backend:
            impl = backend.resolve(driver)
        self.backend = impl(*seed)
        self._lock = RLock() if synchronized else None

    def __repr__(self):
        return F'<{self.__class__.__name__}:{self.driver.value}>'

    @property
    def driver(self) -> Driver:
        """
        The implementation that this generator uses.
        """
        return self.backend.driver

    @property
    def synchronized(self) -> bool:
        return self._lock is not None

    @_serialized
    def irand(self) -> int:
        """
        Returns the next unsigned 32-bit random integer, a value `x` with `0 <= x <= 2**32-1`.
        """
        return self.backend.irand()

    @_serialized
    def rand(self) -> float:
        """
        Returns a random double-precision floating point number which is normalized between 0 and
        1, inclusive; it is a closed interval. Internally, this takes the unsigned integer from
        `irand` and divides it by `2**32-1`.
        """
        return self.backend.rand()

    @_serialized
    def words(self, count: int) -> list[int]:
        """
        Returns the next `count` words; the same as calling `irand` that many times.
        """
        return self.backend.words(count)

    @_serialized
    def keystream(self, size: int, bigendian: bool = False) -> bytearray:
        """
        Returns `size` bytes of random data; each word is encoded as four bytes.
        """
        return self.backend.keystream(size, bigendian)

    @_serialized
    def xor(self, data: buf) -> bytearray:
        """
        Encrypt or decrypt the input with the output of the generator used as a keystream.
        """
        return self.backend.xor(data)


__all__ = [
    'BackendError',
    'Driver',
    'DRIVER',
    'ISAAC',
    'IsaacError',
    'SeedError',
    '__backend__',
]


def __getattr__(name):
    if name == 'DRIVER':
        with __backend__ as backend:
            return backend.driver
    raise AttributeError(name)


def __dir__():
    return __all__
