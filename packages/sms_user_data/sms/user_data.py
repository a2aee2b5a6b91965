"""User data encoding entry points."""

from __future__ import annotations

from typing import List

from .gsm7 import Gsm7Encoder
from .ucs2 import Ucs2Encoder
from ..segment import PduSegment

_GSM7 = Gsm7Encoder()
_UCS2 = Ucs2Encoder()


def is_gsm7_acceptable(text: str) -> bool:
    return _GSM7.is_acceptable(text)


def encode_gsm7(text: str) -> List[PduSegment]:
    return _GSM7.encode(text)


def encode_ucs2(text: str) -> List[PduSegment]:
    return _UCS2.encode(text)


def encode_text(
    text: str, encoding: str = "gsm7", reference_number: int = 0
) -> List[PduSegment]:
    """Encode *text* into TP-User-Data segments for the named alphabet."""

    encoding = (encoding or "gsm7").lower()
    if encoding in ("gsm7", "7bit"):
        encoder = _GSM7 if reference_number == 0 else Gsm7Encoder(
            reference_number=reference_number
        )
        return encoder.encode(text)
    if encoding == "ucs2":
        encoder = _UCS2 if reference_number == 0 else Ucs2Encoder(
            reference_number=reference_number
        )
        return encoder.encode(text)
    raise ValueError(f"Unsupported user data encoding {encoding}")


__all__ = ["is_gsm7_acceptable", "encode_gsm7", "encode_ucs2", "encode_text"]
