#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from mailcodec.units import LogLevel, MailcodecPartialResult

from .. import TestUnitBase


class TestRadix64(TestUnitBase):

    def test_armor(self):
        self.assertEqual(B'' | -self.load() | bytes, B'\r\n=twTO')
        self.assertEqual(B'\0' | -self.load() | bytes, B'AA==\r\n=YWnT')

    def test_roundtrip(self):
        for size in (0, 1, 2, 3, 100, 1000):
            data = self.generate_random_buffer(size)
            self.assertEqual(data | -self.load() | self.load(strict=True) | bytes, data)

    def test_missing_checksum(self):
        self.assertEqual(B'QUJD' | self.load() | bytes, B'ABC')
        self.assertEqual(B'QUJD' | self.load(strict=True) | bytes, B'ABC')

    def test_mismatch_is_tolerated(self):
        self.assertEqual(B'QUJD\r\n=AAAA' | self.load() | bytes, B'ABC')

    def test_mismatch_in_strict_mode(self):
        with self.assertRaises(MailcodecPartialResult) as context:
            B'QUJD\r\n=AAAA' | self.load(strict=True) | bytes
        self.assertEqual(context.exception.partial, B'ABC')

    def test_mismatch_in_strict_lenient_mode(self):
        unit = self.load(strict=True)
        unit.args.lenient = 1
        self.assertEqual(B'QUJD\r\n=AAAA' | unit | bytes, B'ABC')

    def test_mismatch_in_strict_attached_mode(self):
        unit = self.load(strict=True)
        unit.log_level = LogLevel.WARNING
        self.assertEqual(B'QUJD\r\n=AAAA' | unit | bytes, B'')
