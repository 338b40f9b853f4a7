"""MAC address normalization to a canonical 6-digit OUI."""

from __future__ import annotations

import re

from macvendor.core.errors import NotAStringError, TooShortError

OUI_LENGTH = 6

_NON_HEX = re.compile(r"[^0-9a-fA-F]")


def clean(mac: object) -> str:
    """Drop every non-hex character from *mac*."""
    if not isinstance(mac, str):
        raise NotAStringError()
    return _NON_HEX.sub("", mac)


def normalize(mac: object) -> str:
    """Return the uppercase OUI (first 6 hex digits) of *mac*.

    Accepts "00:1B:44:11:3A:B7", "00-1B-44-11-3A-B7", "001B44.113A.B7" and
    anything else that still has 6 hex digits once separators and junk are
    removed. Digits past the sixth are ignored.
    """
    cleaned = clean(mac)
    if len(cleaned) < OUI_LENGTH:
        raise TooShortError()
    return cleaned[:OUI_LENGTH].upper()
