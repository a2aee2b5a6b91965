"""UCS2 (UTF-16BE) user data encoder with concatenation support."""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from ..errors import InvalidInputError, MessageTooLongError
from ..limits import MAX_PARTS, UCS2_MULTI_UNITS, UCS2_SINGLE_UNITS
from ..segment import PduSegment
from ..udh import ConcatenationHeader, check_reference_number


def utf16_units(text: str) -> int:
    """Return the number of UTF-16 code units needed for *text*."""

    return len(text.encode("utf-16-be", "surrogatepass")) // 2


class Ucs2Encoder:
    """Encodes text into UCS2 TP-User-Data segments.

    Text is measured and cut in UTF-16 code units, so a character outside
    the BMP counts twice and may be split between two parts.
    """

    def __init__(
        self,
        *,
        reference_number: int = 0,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._reference_number = check_reference_number(reference_number)
        self._logger = logger or logging.getLogger(__name__)

    def encode(self, text: str) -> List[PduSegment]:
        if not isinstance(text, str):
            raise InvalidInputError("The text to encode must be a string")
        data = text.encode("utf-16-be", "surrogatepass")
        units = len(data) // 2
        if units <= UCS2_SINGLE_UNITS:
            self._logger.debug("Encoding %d code units as a single UCS2 part", units)
            return [PduSegment(length=len(data), buffer=data)]

        total = math.ceil(units / UCS2_MULTI_UNITS)
        if total > MAX_PARTS:
            raise MessageTooLongError(total, MAX_PARTS)
        self._logger.debug("Encoding %d code units as %d UCS2 parts", units, total)

        step = UCS2_MULTI_UNITS * 2
        segments: List[PduSegment] = []
        for index, offset in enumerate(range(0, len(data), step), start=1):
            header = ConcatenationHeader(
                reference=self._reference_number, total=total, index=index
            ).to_bytes()
            buffer = header + data[offset : offset + step]
            segments.append(
                PduSegment(length=len(buffer), buffer=buffer, header_length=len(header))
            )
        return segments


__all__ = ["Ucs2Encoder", "utf16_units"]
