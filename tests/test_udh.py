#!/usr/bin/env python3

import unittest

from sms_user_data.udh import ConcatenationHeader, check_reference_number


class Test_ConcatenationHeader(unittest.TestCase):
    def test_to_bytes(self):
        udh = ConcatenationHeader(reference=0, total=3, index=1)
        self.assertEqual(udh.to_bytes(), bytes.fromhex('050003000301'))

    def test_from_bytes(self):
        udh = ConcatenationHeader.from_bytes(bytes.fromhex('0500037f0f0e'))
        self.assertEqual(udh, ConcatenationHeader(reference=0x7F, total=0x0F, index=0x0E))

    def test_from_bytes_trailing_data(self):
        udh = ConcatenationHeader.from_bytes(bytes.fromhex('050003010201c832'))
        self.assertEqual((udh.reference, udh.total, udh.index), (1, 2, 1))

    def test_from_bytes_invalid(self):
        with self.assertRaises(ValueError):
            ConcatenationHeader.from_bytes(b'\x05\x00\x03')
        with self.assertRaises(ValueError):
            ConcatenationHeader.from_bytes(bytes.fromhex('060804000102'))

    def test_range_checks(self):
        with self.assertRaises(ValueError):
            ConcatenationHeader(reference=0, total=256, index=1)
        with self.assertRaises(ValueError):
            ConcatenationHeader(reference=0, total=2, index=3)
        with self.assertRaises(ValueError):
            ConcatenationHeader(reference=0, total=2, index=0)
        with self.assertRaises(ValueError):
            ConcatenationHeader(reference=300, total=2, index=1)

    def test_reference_number(self):
        self.assertEqual(check_reference_number(255), 255)
        with self.assertRaises(ValueError):
            check_reference_number(-1)
        with self.assertRaises(TypeError):
            check_reference_number('1')
        with self.assertRaises(TypeError):
            check_reference_number(True)


if __name__ == "__main__":
    unittest.main()
