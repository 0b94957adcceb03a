"""
Optional third-party modules are imported lazily through the `isaacrng.lib.dependencies.dependency`
decorator. Every decorated import is recorded in `isaacrng.lib.dependencies.REGISTRY`, which the
setup script reads to compute the available extras.
"""
from __future__ import annotations

from typing import Callable, Collection, Generic, TypeVar, cast

from isaacrng.lib.exceptions import IsaacImportMissing

Mod = TypeVar('Mod')

REGISTRY: dict[str, LazyDependency] = {}


class MissingModule:
    """
    This class can wrap a module import that is currently missing. If any attribute of the missing
    module is accessed, it raises `isaacrng.lib.exceptions.IsaacImportMissing`.
    """
    def __init__(self, name, install=None, info=None, error=None):
        self.name = name
        self.install = install or [name]
        self.info = info
        self.error = error

    def __getattr__(self, key: str):
        if key.startswith('__') and key.endswith('__'):
            raise AttributeError(key)
        if (error := self.error) and isinstance(error, IsaacImportMissing):
            raise error
        raise IsaacImportMissing(self.name, self.install, info=self.info)


class LazyDependency(Generic[Mod]):
    """
    A lazily evaluated dependency. Functions decorated with `isaacrng.lib.dependencies.dependency`
    are converted into this type. Calling the object returns either the return value of that
    function, which should be an imported module, or a `isaacrng.lib.dependencies.MissingModule`
    wrapper which will raise a `isaacrng.lib.exceptions.IsaacImportMissing` exception as soon
    as any of its members is accessed.
    """
    _mod: Mod | None
    _imp: Callable[[], Mod]
    name: str
    dist: Collection[str]
    info: str | None

    __slots__ = (
        '_mod',
        '_imp',
        'name',
        'dist',
        'info',
    )

    def __init__(self, imp: Callable[[], Mod], name: str, dist: Collection[str], info: str | None):
        self.name = name
        self.dist = dist
        self.info = info
        self._imp = imp
        self._mod = None

    def __call__(self) -> Mod:
        if (mod := self._mod) is None:
            try:
                mod = self._imp()
            except ImportError as error:
                mod = cast(Mod, MissingModule(
                    self.name, install={self.name}, info=self.info, error=error))
            self._mod = mod
        return mod

    @property
    def available(self) -> bool:
        return not isinstance(self(), MissingModule)


def dependency(name: str, dist: Collection[str] = (), info: str | None = None):
    """
    A decorator to mark up an optional dependency. The decorated function can import the module
    and return the module object. The `name` argument of the decorator specifies the name of the
    dependency, while `dist` specifies a sequence of extra buckets at which this dependency will
    automatically be installed by the setup script. Functions that are decorated with this method
    will turn into a `isaacrng.lib.dependencies.LazyDependency`.
    """
    def decorator(imp: Callable[[], Mod]):
        REGISTRY[name] = dep = LazyDependency(imp, name, dist, info)
        return dep
    return decorator


def extras() -> dict[str, list[str]]:
    """
    Compute the extra buckets for the setup script from all registered dependencies.
    """
    buckets: dict[str, set[str]] = {'all': set()}
    for name, dep in REGISTRY.items():
        for bucket in dep.dist:
            buckets.setdefault(bucket, set()).add(name)
        buckets['all'].add(name)
    return {key: sorted(deps) for key, deps in buckets.items()}
