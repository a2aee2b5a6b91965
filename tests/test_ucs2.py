#!/usr/bin/env python3

import unittest

from sms_user_data.errors import InvalidInputError, MessageTooLongError
from sms_user_data.sms import Ucs2Encoder, utf16_units
from sms_user_data.udh import ConcatenationHeader


class Test_Ucs2Encoder(unittest.TestCase):
    def setUp(self):
        self.encoder = Ucs2Encoder()

    def test_single(self):
        segments = self.encoder.encode('Hi €')
        self.assertEqual(len(segments), 1)
        self.assertEqual(segments[0].buffer, bytes.fromhex('00480069002020ac'))
        self.assertEqual(segments[0].length, 8)
        self.assertFalse(segments[0].has_header)

    def test_single_limit(self):
        segments = self.encoder.encode('世' * 70)
        self.assertEqual(len(segments), 1)
        self.assertEqual(segments[0].length, 140)
        self.assertEqual(len(segments[0].buffer), 140)

    def test_two_parts(self):
        segments = self.encoder.encode('a' * 71)
        self.assertEqual(len(segments), 2)
        self.assertEqual(segments[0].length, 140)
        self.assertEqual(len(segments[0].buffer), 140)
        self.assertEqual(segments[0].header, bytes.fromhex('050003000201'))
        self.assertEqual(segments[1].length, 14)
        self.assertEqual(segments[1].buffer, bytes.fromhex('050003000202') + b'\x00a' * 4)

    def test_exact_multiple(self):
        segments = self.encoder.encode('a' * 134)
        self.assertEqual([s.length for s in segments], [140, 140])

    def test_newlines_are_kept(self):
        text = 'line\n' * 20
        segments = self.encoder.encode(text)
        payload = b''.join(s.buffer[s.header_length:] for s in segments)
        self.assertEqual(payload.decode('utf-16-be'), text)

    def test_surrogate_pairs_count_twice(self):
        self.assertEqual(utf16_units('\U0001f600'), 2)
        segments = self.encoder.encode('\U0001f600' * 35)
        self.assertEqual(len(segments), 1)
        self.assertEqual(segments[0].buffer[:4], bytes.fromhex('d83dde00'))
        self.assertEqual(len(self.encoder.encode('\U0001f600' * 36)), 2)

    def test_part_indices(self):
        segments = self.encoder.encode('x' * 500)
        headers = [ConcatenationHeader.from_bytes(s.buffer) for s in segments]
        self.assertEqual([h.index for h in headers], list(range(1, 9)))
        self.assertTrue(all(h.total == 8 for h in headers))

    def test_reference_number(self):
        segments = Ucs2Encoder(reference_number=0x99).encode('a' * 80)
        self.assertEqual(segments[1].buffer[:6], bytes.fromhex('050003990202'))

    def test_empty(self):
        segments = self.encoder.encode('')
        self.assertEqual(len(segments), 1)
        self.assertEqual(segments[0].length, 0)
        self.assertEqual(segments[0].buffer, b'')

    def test_too_long(self):
        self.assertEqual(len(self.encoder.encode('a' * 67 * 255)), 255)
        with self.assertRaises(MessageTooLongError) as ctx:
            self.encoder.encode('a' * (67 * 255 + 1))
        self.assertEqual(ctx.exception.parts, 256)

    def test_invalid_input(self):
        with self.assertRaises(InvalidInputError):
            self.encoder.encode(None)
        with self.assertRaises(InvalidInputError):
            self.encoder.encode(b'abc')


if __name__ == "__main__":
    unittest.main()
