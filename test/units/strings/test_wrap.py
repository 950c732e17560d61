#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from .. import TestUnitBase


class TestWrap(TestUnitBase):

    def test_explicit_width(self):
        self.assertEqual(B'abcdefghijk' | self.load(6) | str, 'abc\r\ndef\r\nghi\r\njk')

    def test_short_input(self):
        self.assertEqual(B'abc' | self.load(6) | str, 'abc')

    def test_default_width(self):
        self.assertEqual(B'a' * 100 | self.load() | str, 'a' * 75 + '\r\n' + 'a' * 25)

    def test_not_reversible(self):
        self.assertFalse(self.unit().is_reversible)
        with self.assertRaises(NotImplementedError):
            B'abc' | -self.load() | bytes
