"""Septet packing for GSM 7-bit user data."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from ..errors import InternalInconsistencyError
from ..limits import CONCAT_UDH_LENGTH
from ..segment import PduSegment
from ..udh import ConcatenationHeader


def septets_to_bits(septets: Iterable[int]) -> List[int]:
    """Convert septets to a least-significant-bit-first bit stream."""

    bits: List[int] = []
    for septet in septets:
        for bit in range(7):
            bits.append((septet >> bit) & 0x01)
    return bits


def bits_to_septets(bits: Sequence[int]) -> List[int]:
    """Convert a bit stream back into septet values."""

    septets: List[int] = []
    for i in range(0, len(bits) - 6, 7):
        value = 0
        for idx, bit in enumerate(bits[i : i + 7]):
            value |= (bit & 0x01) << idx
        septets.append(value)
    return septets


def bytes_to_bits_lsb(data: bytes) -> List[int]:
    """Return a least-significant-bit-first bit stream for *data*."""

    bits: List[int] = []
    for byte in data:
        for bit in range(8):
            bits.append((byte >> bit) & 0x01)
    return bits


def bits_to_bytes(bits: Sequence[int]) -> bytes:
    """Pack a bit stream (lsb-first) into bytes, zero filling the last octet."""

    out = bytearray()
    for i in range(0, len(bits), 8):
        byte = 0
        for bit_index, bit in enumerate(bits[i : i + 8]):
            byte |= (bit & 0x01) << bit_index
        out.append(byte)
    return bytes(out)


def pack_septets(septets: Sequence[int], padding_bits: int = 0) -> bytes:
    """Pack *septets* into octets after *padding_bits* zero fill bits."""

    if any(not 0 <= septet <= 0x7F for septet in septets):
        raise ValueError("Septet values must be in range 0..127")
    return bits_to_bytes([0] * padding_bits + septets_to_bits(septets))


def unpack_septets(data: bytes, count: int, padding_bits: int = 0) -> List[int]:
    """Read *count* septets from *data*, skipping *padding_bits* fill bits."""

    bits = bytes_to_bits_lsb(data)[padding_bits : padding_bits + count * 7]
    if len(bits) != count * 7:
        raise ValueError("Insufficient GSM 7-bit payload bits")
    return bits_to_septets(bits)


class SeptetPacker:
    """Turns one chunk of septets into a user data segment.

    Multipart segments start with the 6 octet concatenation header. Six
    octets are 48 bits, so a single fill bit puts the first septet on the
    septet boundary at bit 49 of the user data.
    """

    def __init__(
        self,
        *,
        reference_number: int = 0,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._reference_number = reference_number
        self._logger = logger or logging.getLogger(__name__)

    @property
    def reference_number(self) -> int:
        return self._reference_number

    def header_for(
        self, multipart: bool, part_index: int, total_parts: int
    ) -> bytes:
        if not multipart:
            return b""
        return ConcatenationHeader(
            reference=self._reference_number,
            total=total_parts,
            index=part_index,
        ).to_bytes()

    @staticmethod
    def padding_for(header: bytes) -> int:
        if not header:
            return 0
        return (7 - (len(header) * 8) % 7) % 7

    def pack(
        self,
        chunk: Sequence[int],
        multipart: bool,
        part_index: int = 1,
        total_parts: int = 1,
    ) -> PduSegment:
        header = self.header_for(multipart, part_index, total_parts)
        padding_bits = self.padding_for(header)
        if not (
            (multipart and len(header) == CONCAT_UDH_LENGTH and padding_bits == 1)
            or (not multipart and not header and padding_bits == 0)
        ):
            raise InternalInconsistencyError(
                f"Header length {len(header)} does not match {padding_bits} fill bit(s)"
            )
        data = pack_septets(chunk, padding_bits)
        udl = len(chunk) + len(header) + (1 if multipart else 0)
        self._logger.debug(
            "Packed part %d/%d: %d septets into %d octets (UDL %d)",
            part_index,
            total_parts,
            len(chunk),
            len(data),
            udl,
        )
        return PduSegment(
            length=udl, buffer=header + data, header_length=len(header)
        )


__all__ = [
    "SeptetPacker",
    "pack_septets",
    "unpack_septets",
    "septets_to_bits",
    "bits_to_septets",
    "bytes_to_bits_lsb",
    "bits_to_bytes",
]
