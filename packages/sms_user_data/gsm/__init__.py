"""GSM 7-bit alphabet helpers for SMS user data."""

from __future__ import annotations

from .gsm7 import (
    ESCAPE,
    GSM7_BASIC_TABLE,
    GSM7_CHARACTER_MAP,
    GSM7_EXTENDED_TABLE,
    CharacterMap,
    create_septets,
    find_unsupported,
    is_acceptable,
    split_graphemes,
)
from .packing import (
    SeptetPacker,
    bits_to_bytes,
    bits_to_septets,
    bytes_to_bits_lsb,
    pack_septets,
    septets_to_bits,
    unpack_septets,
)
from .splitter import split_septets

__all__ = [
    "ESCAPE",
    "GSM7_BASIC_TABLE",
    "GSM7_EXTENDED_TABLE",
    "GSM7_CHARACTER_MAP",
    "CharacterMap",
    "split_graphemes",
    "is_acceptable",
    "find_unsupported",
    "create_septets",
    "split_septets",
    "SeptetPacker",
    "pack_septets",
    "unpack_septets",
    "septets_to_bits",
    "bits_to_septets",
    "bytes_to_bits_lsb",
    "bits_to_bytes",
]
