#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import base64

from mailcodec.lib import radix64

from .. import TestBase


class TestCRC24(TestBase):

    def test_empty_input_yields_initial_value(self):
        self.assertEqual(radix64.crc24(B''), 0xB704CE)

    def test_single_zero_byte(self):
        self.assertEqual(radix64.crc24(B'\0'), 0x6169D3)

    def test_checksum_is_big_endian(self):
        self.assertEqual(radix64.checksum(B''), B'\xB7\x04\xCE')

    def test_checksum_is_deterministic(self):
        data = self.generate_random_buffer(300)
        self.assertEqual(radix64.checksum(data), radix64.checksum(bytearray(data)))
        self.assertEqual(radix64.checksum(data), radix64.checksum(memoryview(data)))

    def test_checksum_detects_bit_flips(self):
        data = bytearray(self.generate_random_buffer(64))
        crc = radix64.checksum(data)
        for k in (0, 17, 63):
            data[k] ^= 0x10
            self.assertNotEqual(radix64.checksum(data), crc)
            data[k] ^= 0x10


class TestRadix64(TestBase):

    def test_armor_of_empty_input(self):
        self.assertEqual(radix64.encode(B''), '\r\n=twTO')

    def test_armor_of_zero_byte(self):
        self.assertEqual(radix64.encode(B'\0'), 'AA==\r\n=YWnT')

    def test_armor_layout(self):
        data = self.generate_random_buffer(100)
        payload, _, crc = radix64.encode(data).partition('\r\n=')
        self.assertEqual(base64.b64decode(payload), data)
        self.assertEqual(base64.b64decode(crc), radix64.checksum(data))

    def test_roundtrip(self):
        for size in (0, 1, 2, 3, 4, 57, 1000):
            data = self.generate_random_buffer(size)
            armored = radix64.encode(data)
            self.assertEqual(radix64.decode(armored), data)
            self.assertTrue(radix64.verify(armored))

    def test_split(self):
        self.assertEqual(radix64.split('QUJD\r\n=twTO'), ('QUJD', B'\xB7\x04\xCE'))
        self.assertEqual(radix64.split('QUJD\n=twTO\n'), ('QUJD', B'\xB7\x04\xCE'))
        self.assertEqual(radix64.split('QUJD'), ('QUJD', None))

    def test_split_multiline_payload(self):
        payload, crc = radix64.split('QUJD\r\nREVG\r\n=twTO')
        self.assertEqual(payload, 'QUJD\r\nREVG')
        self.assertEqual(crc, B'\xB7\x04\xCE')

    def test_decode_bare_payload(self):
        self.assertEqual(radix64.decode('QUJD'), B'ABC')
        self.assertEqual(radix64.decode('QUJDREVG'), B'ABCDEF')

    def test_decode_ignores_line_breaks(self):
        self.assertEqual(radix64.decode('QUJD\r\nREVG\r\n=twTO'), B'ABCDEF')

    def test_decode_incomplete_groups(self):
        self.assertEqual(radix64.decode('QUI='), B'AB')
        self.assertEqual(radix64.decode('QUI'), B'AB')
        self.assertEqual(radix64.decode('QQ=='), B'A')
        self.assertEqual(radix64.decode('QQ'), B'A')
        self.assertEqual(radix64.decode('Q'), B'')

    def test_verify(self):
        armored = radix64.encode(B'ABC')
        self.assertTrue(radix64.verify(armored))
        self.assertFalse(radix64.verify('QUJE' + armored[4:]))
        self.assertFalse(radix64.verify('QUJD'))
