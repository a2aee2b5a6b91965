"""GSM 7-bit and UCS2 user data encoders."""

from __future__ import annotations

from .gsm7 import Gsm7Encoder
from .ucs2 import Ucs2Encoder, utf16_units
from .user_data import encode_gsm7, encode_text, encode_ucs2, is_gsm7_acceptable

__all__ = [
    "Gsm7Encoder",
    "Ucs2Encoder",
    "utf16_units",
    "encode_gsm7",
    "encode_ucs2",
    "encode_text",
    "is_gsm7_acceptable",
]
