"""Concatenated SMS user data header (8-bit reference)."""

from __future__ import annotations

from dataclasses import dataclass

from .limits import CONCAT_UDH_LENGTH, MAX_PARTS

UDHL_CONCAT = 0x05
IEI_CONCAT_8BIT = 0x00
IEDL_CONCAT_8BIT = 0x03


def check_reference_number(reference: int) -> int:
    """Return *reference* if it fits the 8-bit concatenation reference field."""

    if isinstance(reference, bool) or not isinstance(reference, int):
        raise TypeError("Concatenation reference must be an integer")
    if not 0 <= reference <= 0xFF:
        raise ValueError(f"Concatenation reference {reference} out of range 0..255")
    return reference


@dataclass(frozen=True)
class ConcatenationHeader:
    reference: int
    total: int
    index: int

    def __post_init__(self) -> None:
        check_reference_number(self.reference)
        if not 1 <= self.total <= MAX_PARTS:
            raise ValueError(f"Total part count {self.total} out of range")
        if not 1 <= self.index <= self.total:
            raise ValueError(f"Part index {self.index} out of range 1..{self.total}")

    def to_bytes(self) -> bytes:
        return bytes(
            [
                UDHL_CONCAT,
                IEI_CONCAT_8BIT,
                IEDL_CONCAT_8BIT,
                self.reference,
                self.total,
                self.index,
            ]
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "ConcatenationHeader":
        if len(data) < CONCAT_UDH_LENGTH:
            raise ValueError("Concatenation header needs 6 octets")
        if tuple(data[:3]) != (UDHL_CONCAT, IEI_CONCAT_8BIT, IEDL_CONCAT_8BIT):
            raise ValueError("Data does not start with an 8-bit concatenation header")
        return cls(reference=data[3], total=data[4], index=data[5])


__all__ = ["ConcatenationHeader", "check_reference_number"]
