#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from mailcodec.lib.bitstring import from_bitstring, to_bitstring

from .. import TestBase


class TestBitString(TestBase):

    def test_byte(self):
        self.assertEqual(to_bitstring(0b10110001), '10110001')
        self.assertEqual(to_bitstring(0), '00000000')
        self.assertEqual(to_bitstring(0xFF), '11111111')

    def test_word(self):
        self.assertEqual(to_bitstring(0x1234, 16), '0001001000110100')

    def test_negative_word_is_twos_complement(self):
        self.assertEqual(to_bitstring(-1, 16), '1' * 16)
        self.assertEqual(to_bitstring(-0x8000, 16), '1' + '0' * 15)

    def test_value_is_truncated_to_width(self):
        self.assertEqual(to_bitstring(0x1FF), '11111111')

    def test_invalid_width(self):
        for width in (0, 7, 12, 32):
            with self.assertRaises(ValueError):
                to_bitstring(1, width)

    def test_parse(self):
        self.assertEqual(from_bitstring('10110001'), 0b10110001)
        self.assertEqual(from_bitstring('00000000'), 0)

    def test_parse_reads_eight_characters(self):
        self.assertEqual(from_bitstring('1011000111'), 0b10110001)

    def test_parse_only_ones_set_bits(self):
        self.assertEqual(from_bitstring('1x2y0z.1'), 0b10000001)

    def test_parse_short_input(self):
        with self.assertRaises(IndexError):
            from_bitstring('101')

    def test_all_bytes(self):
        for byte in range(0x100):
            self.assertEqual(from_bitstring(to_bitstring(byte)), byte)
