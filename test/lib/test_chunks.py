#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from isaacrng.lib import chunks
from .. import TestBase


class TestChunks(TestBase):

    def test_odd_block_size(self):
        data = bytearray(range(1, 3 * 5 + 2))
        unpacked = list(chunks.unpack(data, 3, bigendian=True))
        self.assertEqual(unpacked, [0x010203, 0x040506, 0x070809, 0x0A0B0C, 0x0D0E0F])

    def test_words(self):
        data = bytes.fromhex('78563412 EFBEADDE 01')
        self.assertEqual(list(chunks.unpack(data, 4)), [0x12345678, 0xDEADBEEF])
        self.assertEqual(list(chunks.unpack(data, 4, pad=True)), [0x12345678, 0xDEADBEEF, 1])
        self.assertEqual(list(chunks.unpack(data, 4, bigendian=True, pad=True)), [0x78563412, 0xEFBEADDE, 0x01000000])

    def test_pack(self):
        self.assertEqual(chunks.pack([0x12345678, 1], 4), bytes.fromhex('78563412 01000000'))
        self.assertEqual(chunks.pack([0x12345678, 1], 4, bigendian=True), bytes.fromhex('12345678 00000001'))
        self.assertEqual(chunks.pack([0x010203], 3), bytes.fromhex('030201'))

    def test_pack_does_not_modify_input(self):
        words = chunks.unpack(bytes.fromhex('78563412'), 4)
        chunks.pack(words, 4, bigendian=True)
        self.assertEqual(list(words), [0x12345678])
