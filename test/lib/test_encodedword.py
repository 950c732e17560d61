#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from mailcodec.lib.encodedword import decode_header, encode_header

from .. import TestBase


class TestEncodedWords(TestBase):

    def test_decode_base64_word(self):
        self.assertEqual(
            decode_header('=?iso-8859-1?B?QWN0aXZlTWFpbCByb2NrcyAhIEhlcmUgYXJlIHNvbWUgd2VpcmQgY2hhcmFjdGVycyA95y4=?='),
            'ActiveMail rocks ! Here are some weird characters =ç.')

    def test_decode_quoted_printable_word(self):
        self.assertEqual(decode_header('=?utf-8?Q?Gr=C3=BC=C3=9Fe?='), 'Grüße')

    def test_decode_plain_text(self):
        self.assertEqual(decode_header('hello world'), 'hello world')

    def test_decode_unknown_charset(self):
        self.assertEqual(decode_header('=?x-no-such-charset?Q?caf=E9?='), 'café')

    def test_encode_uses_base64_words(self):
        encoded = encode_header('Grüße', 'utf-8')
        self.assertTrue(encoded.lower().startswith('=?utf-8?b?'))
        self.assertTrue(encoded.endswith('?='))

    def test_roundtrip(self):
        for text, charset in [
            ('Grüße aus Köln', 'utf8'),
            ('café crème', 'ISO8859-1'),
            ('Ωμέγα', 'UTF-8'),
        ]:
            self.assertEqual(decode_header(encode_header(text, charset)), text)

    def test_injected_codec(self):
        class codec:
            def encode(self, text, charset):
                return F'{charset}:{text}'

            def decode(self, text):
                return text.upper()

        self.assertEqual(encode_header('x', 'y', codec()), 'y:x')
        self.assertEqual(decode_header('abc', codec()), 'ABC')
