"""Exceptions raised while building SMS user data."""

from __future__ import annotations

from typing import Optional


class UserDataError(Exception):
    """Base class for every user data encoding failure."""


class InvalidInputError(UserDataError, TypeError):
    """Raised when the text to encode is missing or not a string."""


class UnsupportedCharacterError(UserDataError, ValueError):
    """Raised when text contains a character outside the GSM 7-bit alphabet."""

    def __init__(self, character: Optional[str] = None) -> None:
        self.character = character
        if character is None:
            message = "Text contains a character not in the GSM 7-bit alphabet"
        else:
            message = f"Character {character!r} not supported in GSM 7-bit alphabet"
        super().__init__(message)


class MessageTooLongError(UserDataError, ValueError):
    """Raised when a message would need more concatenated parts than allowed."""

    def __init__(self, parts: int, limit: int) -> None:
        self.parts = parts
        self.limit = limit
        super().__init__(f"Text needs {parts} parts, at most {limit} are allowed")


class InternalInconsistencyError(UserDataError, RuntimeError):
    """Raised when header length and fill bits disagree while packing."""


__all__ = [
    "UserDataError",
    "InvalidInputError",
    "UnsupportedCharacterError",
    "MessageTooLongError",
    "InternalInconsistencyError",
]
