"""GSM 03.38 7-bit alphabet lookup and septet building."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple, Union

import regex

from ..errors import InvalidInputError

logger = logging.getLogger(__name__)

ESCAPE = 0x1B

# Index is the GSM code, value the character. 0x1B is the escape to the
# extension table; GSM0338.TXT suggests displaying it as NO-BREAK SPACE.
GSM7_BASIC_TABLE = (
    "@£$¥èéùìòç\nØø\rÅå"
    "Δ_ΦΓΛΩΠΨΣΘΞ\u00a0ÆæßÉ"
    " !\"#¤%&'()*+,-./0123456789:;<=>?"
    "¡ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÑÜ§"
    "¿abcdefghijklmnopqrstuvwxyzäöñüà"
)

GSM7_EXTENDED_TABLE = MappingProxyType(
    {
        0x0A: "\u000c",
        0x14: "^",
        0x28: "{",
        0x29: "}",
        0x2F: "\\",
        0x3C: "[",
        0x3D: "~",
        0x3E: "]",
        0x40: "|",
        0x65: "€",
    }
)

EncodedChar = Union[int, Tuple[int, int]]

_GRAPHEME = regex.compile(r"\X")


class CharacterMap:
    """Read-only two-way mapping between characters and GSM 7-bit codes.

    The encode direction is built by inverting the code -> character tables.
    The escape code itself never appears as an encoding result for a basic
    character, so an escape in a septet sequence always starts a pair.
    """

    __slots__ = ("_basic", "_extension", "_basic_reverse", "_extension_reverse")

    def __init__(self, basic: str, extension: Mapping[int, str]) -> None:
        if len(basic) != 128:
            raise ValueError("GSM 7-bit basic table must hold 128 entries")
        self._basic = MappingProxyType(dict(enumerate(basic)))
        self._extension = MappingProxyType(dict(extension))
        self._basic_reverse = MappingProxyType(
            {ch: code for code, ch in enumerate(basic) if code != ESCAPE}
        )
        self._extension_reverse = MappingProxyType(
            {ch: code for code, ch in extension.items()}
        )
        overlap = set(self._basic_reverse) & set(self._extension_reverse)
        if overlap:
            raise ValueError(f"Characters present in both tables: {sorted(overlap)!r}")

    @property
    def basic(self) -> Mapping[int, str]:
        return self._basic

    @property
    def extension(self) -> Mapping[int, str]:
        return self._extension

    @property
    def basic_reverse(self) -> Mapping[str, int]:
        return self._basic_reverse

    @property
    def extension_reverse(self) -> Mapping[str, int]:
        return self._extension_reverse

    def is_mappable(self, char: str) -> bool:
        return char in self._basic_reverse or char in self._extension_reverse

    def encode_char(self, char: str) -> Optional[EncodedChar]:
        """Return the septet for *char*, an (escape, septet) pair, or None."""

        code = self._basic_reverse.get(char)
        if code is not None:
            return code
        code = self._extension_reverse.get(char)
        if code is not None:
            return (ESCAPE, code)
        return None

    def decode_septet(self, septet: int, extended: bool = False) -> Optional[str]:
        table = self._extension if extended else self._basic
        return table.get(septet)


GSM7_CHARACTER_MAP = CharacterMap(GSM7_BASIC_TABLE, GSM7_EXTENDED_TABLE)


def split_graphemes(text: str) -> List[str]:
    return _GRAPHEME.findall(text)


def is_acceptable(text: str, charmap: CharacterMap = GSM7_CHARACTER_MAP) -> bool:
    """Return True if every grapheme in *text* starts with a GSM 7-bit character.

    Only the leading code point of each cluster is checked, so a base letter
    followed by combining marks is accepted when the base letter is mappable.
    """

    return find_unsupported(text, charmap) is None


def find_unsupported(
    text: str, charmap: CharacterMap = GSM7_CHARACTER_MAP
) -> Optional[str]:
    """Return the first grapheme of *text* that cannot be encoded, if any."""

    if not isinstance(text, str) or not text:
        raise InvalidInputError("The text to encode must be a non-empty string")
    for grapheme in split_graphemes(text):
        if not charmap.is_mappable(grapheme[0]):
            return grapheme
    return None


def create_septets(
    text: str, charmap: CharacterMap = GSM7_CHARACTER_MAP
) -> List[int]:
    """Return the septet values for *text*, escaping extension characters.

    Characters absent from both tables are skipped without error; callers
    gate the text with :func:`is_acceptable` first.
    """

    septets: List[int] = []
    for char in text:
        encoded = charmap.encode_char(char)
        if encoded is None:
            logger.debug("Dropping unmapped character U+%04X", ord(char))
        elif isinstance(encoded, tuple):
            septets.extend(encoded)
        else:
            septets.append(encoded)
    return septets


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
]
