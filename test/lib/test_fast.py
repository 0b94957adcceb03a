#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from isaacrng.lib.exceptions import SeedError
from isaacrng.lib.fast.isaac import IsaacFast, generate, seed
from isaacrng.lib.isaac import Driver, Isaac, initialize, generate_block

from .. import TestBase


class TestIsaacFast(TestBase):

    def test_driver(self):
        self.assertEqual(IsaacFast.driver, Driver.FAST)
        self.assertEqual(Isaac.driver, Driver.PURE)

    def test_unseeded_stream_matches_reference(self):
        self.assertEqual(IsaacFast().words(0x400), Isaac().words(0x400))

    def test_seeded_streams_match_reference(self):
        for length in (1, 5, 8, 9, 100, 0xFF, 0x100):
            words = self.generate_random_words(length)
            self.assertEqual(
                IsaacFast(*words).words(0x300),
                Isaac(*words).words(0x300),
                msg=F'streams differ for a seed of length {length}')

    def test_extreme_seed_values(self):
        for words in ([0xFFFFFFFF] * 0x100, [0x80000000, 1] * 0x80):
            self.assertEqual(IsaacFast(*words).words(0x200), Isaac(*words).words(0x200))

    def test_seeding_matches_reference(self):
        words = self.generate_random_words(0x100)
        state = initialize(words)
        mm = [0] * 0x100
        rr = list(words)
        seed(mm, rr)
        aa, bb, cc = generate(mm, rr, 0, 0, 0)
        self.assertEqual(mm, state.mm)
        self.assertEqual(rr, state.randrsl)
        self.assertEqual((aa, bb, cc), (state.aa, state.bb, state.cc))
        aa, bb, cc = generate(mm, rr, aa, bb, cc)
        generate_block(state)
        self.assertEqual(rr, state.randrsl)
        self.assertEqual((aa, bb, cc), (state.aa, state.bb, state.cc))

    def test_mixed_draws_across_blocks(self):
        words = self.generate_random_words(16)
        fast = IsaacFast(*words)
        pure = Isaac(*words)
        for count in (1, 200, 100, 0, 256, 3, 700):
            self.assertEqual(fast.words(count), pure.words(count))
            self.assertEqual(fast.irand(), pure.irand())
            self.assertEqual(fast.rand(), pure.rand())

    def test_words_returns_copies(self):
        rng = IsaacFast(3)
        head = rng.words(0x100)
        copy = list(head)
        rng.words(0x200)
        self.assertEqual(head, copy)

    def test_keystream_and_xor(self):
        data = self.generate_random_buffer(517)
        self.assertEqual(IsaacFast(5, 6).keystream(517), Isaac(5, 6).keystream(517))
        self.assertEqual(IsaacFast(5, 6).xor(data), Isaac(5, 6).xor(data))

    def test_seed_validation(self):
        with self.assertRaises(SeedError):
            IsaacFast(*[1] * 0x101)
        with self.assertRaises(SeedError):
            IsaacFast(-5)
        with self.assertRaises(ValueError):
            IsaacFast().words(-1)
