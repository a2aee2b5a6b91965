"""GSM 7-bit user data encoder with concatenation support."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..errors import MessageTooLongError, UnsupportedCharacterError
from ..gsm import (
    GSM7_CHARACTER_MAP,
    CharacterMap,
    SeptetPacker,
    create_septets,
    find_unsupported,
    split_septets,
)
from ..limits import MAX_PARTS
from ..segment import PduSegment
from ..udh import check_reference_number


class Gsm7Encoder:
    """Encodes text into one or more GSM 7-bit TP-User-Data segments."""

    def __init__(
        self,
        *,
        reference_number: int = 0,
        charmap: CharacterMap = GSM7_CHARACTER_MAP,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._reference_number = check_reference_number(reference_number)
        self._charmap = charmap
        self._logger = logger or logging.getLogger(__name__)
        self._packer = SeptetPacker(
            reference_number=self._reference_number, logger=self._logger
        )

    @property
    def charmap(self) -> CharacterMap:
        return self._charmap

    def is_acceptable(self, text: str) -> bool:
        return find_unsupported(text, self._charmap) is None

    def create_septets(self, text: str) -> List[int]:
        return create_septets(text, self._charmap)

    def create_pdus(self, septets: Sequence[int]) -> List[List[int]]:
        return split_septets(septets)

    def encode(self, text: str) -> List[PduSegment]:
        unsupported = find_unsupported(text, self._charmap)
        if unsupported is not None:
            raise UnsupportedCharacterError(unsupported)
        septets = self.create_septets(text)
        chunks = self.create_pdus(septets)
        total = len(chunks)
        if total > MAX_PARTS:
            raise MessageTooLongError(total, MAX_PARTS)
        multipart = total > 1
        self._logger.debug(
            "Encoding %d septets as %d GSM 7-bit part(s)", len(septets), total
        )
        return [
            self._packer.pack(chunk, multipart, index, total)
            for index, chunk in enumerate(chunks, start=1)
        ]


__all__ = ["Gsm7Encoder"]
