#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Routines to convert between byte buffers and the arrays of unsigned 32-bit words that ISAAC
consumes as seed material and produces as output.
"""
from __future__ import annotations

import array
import sys

from typing import Iterable

from isaacrng.lib.types import buf


_BIG_ENDIAN = sys.byteorder == 'big'
_TYPE_CODES = {array.array(t).itemsize: t for t in 'BHILQ'}


def unpack(data: buf, blocksize: int = 4, bigendian: bool = False, pad: bool = False) -> Iterable[int]:
    """
    Returns an iterable of integers which have been unpacked from the given `data` buffer as
    chunks of `blocksize` many bytes. If `pad` is set, a trailing partial chunk is decoded as if
    it had been padded with zero bytes to the full block size; otherwise it is discarded.
    """
    view = memoryview(data)
    if blocksize == 1:
        return data
    bo = 'big' if bigendian else 'little'
    overlap = len(view) % blocksize
    if blocksize in _TYPE_CODES:
        body = view[:len(view) - overlap]
        unpacked = array.array(_TYPE_CODES[blocksize])
        unpacked.frombytes(body)
        if _BIG_ENDIAN != bigendian:
            unpacked.byteswap()
        if pad and overlap:
            rest = bytes(view[-overlap:]) + bytes(blocksize - overlap)
            unpacked.append(int.from_bytes(rest, bo))
        return unpacked
    ub = len(view) + 1 - blocksize
    return (int.from_bytes(view[k:k + blocksize], bo) for k in range(0, ub, blocksize))


def pack(data: Iterable[int], blocksize: int = 4, bigendian: bool = False) -> bytearray:
    """
    Returns a bytes object which contains the packed representation of the integers in `data`,
    where each item is encoded using `blocksize` many bytes. The numbers are assumed to fit this
    encoding.
    """
    if blocksize == 1:
        if isinstance(data, bytearray):
            return data
        return bytearray(data)
    out = bytearray()
    if blocksize in _TYPE_CODES:
        if not isinstance(data, array.array) or data.itemsize != blocksize:
            tmp = array.array(_TYPE_CODES[blocksize])
            tmp.extend(data)
            data = tmp
        elif _BIG_ENDIAN != bigendian:
            data = array.array(data.typecode, data)
        if _BIG_ENDIAN != bigendian:
            data.byteswap()
        out[:] = memoryview(data).cast('B')
    else:
        order = 'big' if bigendian else 'little'
        for number in data:
            out.extend(number.to_bytes(blocksize, order))
    return out
