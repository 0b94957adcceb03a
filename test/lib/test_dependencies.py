#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import isaacrng.lib.isaac

from isaacrng.lib.dependencies import REGISTRY, LazyDependency, MissingModule, dependency, extras
from isaacrng.lib.exceptions import IsaacImportMissing
from .. import TestBase


class TestDependencies(TestBase):

    def test_missing_module(self):
        module = MissingModule('nonexistent', info='only needed for testing')
        with self.assertRaises(IsaacImportMissing) as context:
            module.frobnicate
        self.assertIn('pip install nonexistent', str(context.exception))
        self.assertIn('only needed for testing', str(context.exception))
        with self.assertRaises(ImportError):
            module.frobnicate
        with self.assertRaises(AttributeError):
            module.__wrapped__

    def test_lazy_import(self):
        calls = []

        def imp():
            calls.append(1)
            import json
            return json

        dep = LazyDependency(imp, 'json', (), None)
        self.assertEqual(calls, [])
        self.assertTrue(dep.available)
        self.assertIs(dep(), dep())
        self.assertEqual(calls, [1])

    def test_failed_import(self):
        def imp():
            import isaacrng_does_not_exist
            return isaacrng_does_not_exist

        dep = LazyDependency(imp, 'isaacrng-does-not-exist', (), None)
        self.assertFalse(dep.available)
        self.assertIsInstance(dep(), MissingModule)

    def test_registry(self):
        self.assertIsInstance(isaacrng.lib.isaac.numpy, LazyDependency)
        self.assertIn('numpy', REGISTRY)
        buckets = extras()
        self.assertIn('numpy', buckets['speed'])
        self.assertIn('numpy', buckets['all'])

    def test_decorator(self):
        @dependency('isaacrng-test-dependency', ['testing'])
        def _test():
            raise ImportError
        try:
            self.assertIn('isaacrng-test-dependency', extras()['testing'])
            self.assertFalse(_test.available)
        finally:
            del REGISTRY['isaacrng-test-dependency']
