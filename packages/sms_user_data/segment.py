"""User data segment handed to the PDU assembler."""

from __future__ import annotations

from dataclasses import dataclass
import binascii


@dataclass(frozen=True)
class PduSegment:
    """One TP-User-Data field.

    ``length`` is the TP-UDL value for the alphabet in use: septets (plus
    header and fill units) for GSM 7-bit, octets for UCS2. It is not always
    ``len(buffer)``. ``header_length`` counts the leading UDH octets of
    ``buffer``, so the assembler knows whether to set TP-UDHI.
    """

    length: int
    buffer: bytes
    header_length: int = 0

    @property
    def has_header(self) -> bool:
        return self.header_length > 0

    @property
    def header(self) -> bytes:
        return self.buffer[: self.header_length]

    def hex(self) -> str:
        return binascii.hexlify(self.buffer).decode("ascii")


__all__ = ["PduSegment"]
