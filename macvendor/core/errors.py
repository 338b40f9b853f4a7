"""Error taxonomy for MAC address handling and table loading."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NOT_A_STRING = "not_a_string"
    TOO_SHORT = "too_short"
    WRONG_LENGTH = "wrong_length"


class MacAddressError(ValueError):
    """Base class for rejected MAC address input."""

    kind: ErrorKind


class NotAStringError(MacAddressError, TypeError):
    kind = ErrorKind.NOT_A_STRING

    def __init__(self, message: str = "MAC address must be a string") -> None:
        super().__init__(message)


class TooShortError(MacAddressError):
    kind = ErrorKind.TOO_SHORT

    def __init__(self, message: str = "MAC address must contain at least 6 hex digits") -> None:
        super().__init__(message)


class WrongLengthError(MacAddressError):
    kind = ErrorKind.WRONG_LENGTH

    def __init__(self, message: str = "MAC address must contain exactly 12 hex digits") -> None:
        super().__init__(message)


class TableError(Exception):
    """The OUI reference table asset is missing or malformed."""
