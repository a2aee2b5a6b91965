"""Public API for building SMS TP-User-Data segments."""

from __future__ import annotations

from .errors import (
    InternalInconsistencyError,
    InvalidInputError,
    MessageTooLongError,
    UnsupportedCharacterError,
    UserDataError,
)
from .segment import PduSegment
from .sms import (
    Gsm7Encoder,
    Ucs2Encoder,
    encode_gsm7,
    encode_text,
    encode_ucs2,
    is_gsm7_acceptable,
)
from .udh import ConcatenationHeader

__all__ = [
    "PduSegment",
    "ConcatenationHeader",
    "Gsm7Encoder",
    "Ucs2Encoder",
    "encode_gsm7",
    "encode_ucs2",
    "encode_text",
    "is_gsm7_acceptable",
    "UserDataError",
    "InvalidInputError",
    "UnsupportedCharacterError",
    "MessageTooLongError",
    "InternalInconsistencyError",
]
