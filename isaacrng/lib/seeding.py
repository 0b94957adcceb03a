#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
The generator only accepts seeds as sequences of unsigned 32-bit words. This module contains the
conversions that callers can use to turn other kinds of seed material into such a sequence; the
generator itself never guesses how wider values should be split.

Selecting good seed material is the responsibility of the caller. Seeding a random number
generator is essentially the same problem as encrypting the seed with a block cipher, and none of
the functions below add any entropy to their input.
"""
from __future__ import annotations

from Cryptodome.Hash import SHAKE256

from isaacrng.lib import chunks
from isaacrng.lib.exceptions import SeedError
from isaacrng.lib.isaac import SIZE
from isaacrng.lib.types import buf

__all__ = [
    'derive',
    'split_integer',
    'words_from_bytes',
]


def split_integer(value: int, words: int | None = None) -> list[int]:
    """
    Split a non-negative integer into 32-bit words, least significant word first. By default,
    the smallest number of words that can hold the value is used, and zero becomes a single zero
    word. When `words` is given, the result is padded with zero words to that length.
    """
    if value < 0:
        raise SeedError(F'cannot split the negative integer {value}')
    needed = max(1, (value.bit_length() + 31) // 32)
    if words is None:
        words = needed
    elif words < needed:
        raise SeedError(F'the value {value:#x} requires {needed} words, but only {words} were requested')
    if words > SIZE:
        raise SeedError(F'a seed can have at most {SIZE} words')
    return list(chunks.unpack(value.to_bytes(4 * words, 'little'), 4))


def words_from_bytes(data: buf) -> list[int]:
    """
    Convert a byte string into little-endian 32-bit words. If the length is not a multiple of
    four, the last word is padded with zero bytes. The byte string must not be longer than the
    state of the generator, i.e. 1024 bytes.
    """
    if len(data) > 4 * SIZE:
        raise SeedError(F'a seed can have at most {4 * SIZE} bytes, got {len(data)}')
    return list(chunks.unpack(data, 4, pad=True))


def derive(material: buf, count: int = SIZE) -> list[int]:
    """
    Expand arbitrary byte material into `count` seed words with the SHAKE256 extendable output
    function. This is useful when the seed material is longer than 1024 bytes, or when it is short
    but should still influence all words of the seed.
    """
    if not 0 <= count <= SIZE:
        raise SeedError(F'the number of derived words must be between 0 and {SIZE}, got {count}')
    if not count:
        return []
    xof = SHAKE256.new(data=bytes(material))
    return list(chunks.unpack(xof.read(4 * count), 4))
