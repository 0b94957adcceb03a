#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Reference implementation of the ISAAC (Indirection, Shift, Accumulate, Add, Count) generator as
[published by Bob Jenkins](http://burtleburtle.net/bob/rand/isaacafa.html). The module is written
for clarity rather than speed; `isaacrng.lib.fast.isaac` contains a faster variant which has to
produce exactly the same output.

The generator state consists of the 256-word memory `mm`, the accumulators `aa`, `bb` and `cc`,
and the 256-word result block `randrsl`, which is handed out one word at a time. All arithmetic
is performed modulo 2**32.
"""
from __future__ import annotations

import abc
import enum
import operator

from typing import ClassVar, Iterable

from isaacrng.lib import chunks
from isaacrng.lib.dependencies import dependency
from isaacrng.lib.environment import logger
from isaacrng.lib.exceptions import SeedError
from isaacrng.lib.types import buf

__all__ = [
    'Driver',
    'GOLDEN_RATIO',
    'IsaacBase',
    'Isaac',
    'State',
    'check_seed',
    'generate_block',
    'initialize',
    'mix',
]

SIZE = 0x100
"""
The number of words in both the state memory and the result block.
"""

GOLDEN_RATIO = 0x9E3779B9
"""
The initial value of all eight registers used during seeding.
"""

U32 = 0xFFFFFFFF

_SHIFTS = [
    (operator.lshift, 13),
    (operator.rshift, 6),
    (operator.lshift, 2),
    (operator.rshift, 16),
]

_log = logger(__name__)


@dependency('numpy', ['speed'])
def numpy():
    import numpy
    return numpy


class Driver(str, enum.Enum):
    """
    Names the available implementations of the generator.
    """
    FAST = 'fast'
    PURE = 'pure'


class State:
    """
    The complete internal state of one generator. Both `mm` and `randrsl` always contain exactly
    256 words. The `cursor` counts the words of `randrsl` that were already handed out; at 256,
    the block is exhausted and a new one has to be generated.
    """
    __slots__ = 'mm', 'aa', 'bb', 'cc', 'randrsl', 'cursor'

    mm: list[int]
    aa: int
    bb: int
    cc: int
    randrsl: list[int]
    cursor: int

    def __init__(self):
        self.mm = [0] * SIZE
        self.randrsl = [0] * SIZE
        self.aa = 0
        self.bb = 0
        self.cc = 0
        self.cursor = SIZE


def check_seed(seed: Iterable[int]) -> list[int]:
    """
    Validate seed material and return it as a list of words. A seed may have at most 256 words,
    each of which has to be an integer in the range of an unsigned 32-bit word. Values that do not
    meet these requirements raise a `isaacrng.lib.exceptions.SeedError`; they are never truncated.
    To seed with wider integers, split them with `isaacrng.lib.seeding.split_integer` first.
    """
    if isinstance(seed, (str, bytes, bytearray, memoryview)):
        raise SeedError(
            F'expected a sequence of integers, got {type(seed).__name__}; '
            'use isaacrng.lib.seeding.words_from_bytes to convert byte strings')
    words = []
    for index, word in enumerate(seed):
        if index >= SIZE:
            raise SeedError(F'a seed can have at most {SIZE} words')
        if isinstance(word, bool):
            raise SeedError(F'expected an integer, got {type(word).__name__}', index)
        try:
            word = operator.index(word)
        except TypeError:
            raise SeedError(F'expected an integer, got {type(word).__name__}', index) from None
        if not 0 <= word <= U32:
            raise SeedError(F'the value {word:#x} does not fit into an unsigned 32-bit word', index)
        words.append(word)
    return words


def mix(r: list[int]) -> list[int]:
    """
    The mixing round used during seeding. It scrambles the eight registers in `r` in place and
    returns the same list.
    """
    a, b, c, d, e, f, g, h = r
    a ^= (b << 0x0B) & U32; d = d + a & U32; b = b + c & U32 # noqa
    b ^= (c >> 0x02) & U32; e = e + b & U32; c = c + d & U32 # noqa
    c ^= (d << 0x08) & U32; f = f + c & U32; d = d + e & U32 # noqa
    d ^= (e >> 0x10) & U32; g = g + d & U32; e = e + f & U32 # noqa
    e ^= (f << 0x0A) & U32; h = h + e & U32; f = f + g & U32 # noqa
    f ^= (g >> 0x04) & U32; a = a + f & U32; g = g + h & U32 # noqa
    g ^= (h << 0x08) & U32; b = b + g & U32; h = h + a & U32 # noqa
    h ^= (a >> 0x09) & U32; c = c + h & U32; a = a + b & U32 # noqa
    r[:] = a, b, c, d, e, f, g, h
    return r


def generate_block(state: State) -> list[int]:
    """
    Advance the state by one cycle of the generator. This fills `randrsl` with 256 fresh words,
    resets the cursor, and returns the new result block.
    """
    mm = state.mm
    rr = state.randrsl
    aa = state.aa
    state.cc = cc = state.cc + 1 & U32
    bb = state.bb + cc & U32
    for i in range(SIZE):
        x = mm[i]
        shift, k = _SHIFTS[i % 4]
        aa = (aa ^ shift(aa, k)) & U32
        aa = (aa + mm[(i + 0x80) % SIZE]) & U32
        mm[i] = y = (mm[(x >> 2) & 0xFF] + aa + bb) & U32
        rr[i] = bb = (mm[(y >> 10) & 0xFF] + x) & U32
    state.aa = aa
    state.bb = bb
    state.cursor = 0
    return rr


def initialize(seed: Iterable[int] = ()) -> State:
    """
    Create a new state from the given seed words. The seed is validated with
    `isaacrng.lib.isaac.check_seed` and missing seed words are zero. The returned state already
    holds the first result block and its cursor is at the beginning of that block.
    """
    state = State()
    mm = state.mm
    rr = state.randrsl
    seed = check_seed(seed)
    rr[:len(seed)] = seed
    registers = [GOLDEN_RATIO] * 8
    for _ in range(4):
        mix(registers)
    for source in (rr, mm):
        for i in range(0, SIZE, 8):
            registers[:] = [x + source[j] & U32 for j, x in enumerate(registers, i)]
            mm[i:i + 8] = mix(registers)
    generate_block(state)
    return state


class IsaacBase(abc.ABC):
    """
    Common interface of all generator implementations. Subclasses implement `irand`; everything
    else is derived from it. Instances are not thread-safe: when several threads draw from the
    same generator, they have to serialize access themselves, for example by constructing the
    generator with `isaacrng.ISAAC` and `synchronized=True`.
    """
    driver: ClassVar[Driver]

    @abc.abstractmethod
    def irand(self) -> int:
        """
        Returns the next unsigned 32-bit random integer.
        """
        ...

    def rand(self) -> float:
        """
        Returns a random double-precision floating point number between 0 and 1, inclusive at
        both ends. It is the value of `irand` divided by `2**32-1`.
        """
        return self.irand() / U32

    def words(self, count: int) -> list[int]:
        """
        Returns the next `count` words of the output stream.
        """
        if count < 0:
            raise ValueError(F'cannot draw a negative number of words: {count}')
        irand = self.irand
        return [irand() for _ in range(count)]

    def keystream(self, size: int, bigendian: bool = False) -> bytearray:
        """
        Returns `size` bytes of output. Each word is converted into four bytes, and bytes of the
        last word that exceed `size` are discarded.
        """
        if size < 0:
            raise ValueError(F'cannot generate a keystream of negative size: {size}')
        count, rest = divmod(size, 4)
        if rest:
            count += 1
        out = chunks.pack(self.words(count), 4, bigendian)
        del out[size:]
        return out

    def xor(self, data: buf) -> bytearray:
        """
        Combine the input data with the keystream using exclusive or. Using the same seed, the
        operation can be reverted by applying it again.
        """
        out = bytearray(data)
        key = self.keystream(len(out))
        try:
            np = numpy()
            view = np.frombuffer(out, dtype=np.uint8)
        except ImportError:
            _log.info('encryption could be faster if numpy was installed.')
            out[:] = bytearray(a ^ b for a, b in zip(out, key))
        else:
            view ^= np.frombuffer(key, dtype=np.uint8)
        return out


class Isaac(IsaacBase):
    """
    The reference implementation of the ISAAC generator. The positional arguments are the seed
    words; see `isaacrng.lib.isaac.check_seed` for what is accepted. Without a seed, the state is
    filled with zeros; the resulting stream is fixed and therefore not fit for any purpose that
    requires unpredictable output.
    """
    driver = Driver.PURE

    def __init__(self, *seed: int):
        self._state = initialize(seed)

    @property
    def state(self) -> State:
        return self._state

    def irand(self) -> int:
        state = self._state
        if state.cursor >= SIZE:
            generate_block(state)
        value = state.randrsl[state.cursor]
        state.cursor += 1
        return value
