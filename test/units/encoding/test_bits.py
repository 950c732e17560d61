#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from mailcodec.units import MailcodecPartialResult

from .. import TestUnitBase


class TestBits(TestUnitBase):

    def test_decode(self):
        self.assertEqual(B'10110001' | self.load() | bytes, B'\xB1')
        self.assertEqual(B'01000001 01000010\n' | self.load() | bytes, B'AB')

    def test_encode(self):
        self.assertEqual(B'AB' | -self.load() | str, '01000001 01000010')

    def test_roundtrip(self):
        data = self.generate_random_buffer(64)
        self.assertEqual(data | -self.load() | self.load() | bytes, data)

    def test_trailing_digits(self):
        with self.assertRaises(MailcodecPartialResult):
            B'101100011' | self.load() | bytes
        unit = self.load()
        unit.args.lenient = 1
        self.assertEqual(B'101100011' | unit | bytes, B'\xB1')
