"""Tests for macvendor.core.normalizer."""
from __future__ import annotations

import pytest

from macvendor.core.errors import ErrorKind, MacAddressError, NotAStringError, TooShortError
from macvendor.core.normalizer import clean, normalize


class TestNormalizeFormats:
    """Every common notation of the same address gives the same OUI."""

    _OUI = "001B44"

    def test_colons(self) -> None:
        assert normalize("00:1b:44:11:3a:b7") == self._OUI

    def test_hyphens(self) -> None:
        assert normalize("00-1B-44-11-3A-B7") == self._OUI

    def test_bare(self) -> None:
        assert normalize("001b44113ab7") == self._OUI

    def test_cisco_dots(self) -> None:
        assert normalize("001b.4411.3ab7") == self._OUI

    def test_surrounding_junk(self) -> None:
        assert normalize("  mx=00:1b:44 ") == self._OUI

    def test_hex_letters_in_labels_count(self) -> None:
        # "a" and "c" of "mac" are hex digits and come first
        assert normalize("  mac=00:1b:44 ") == "AC001B"

    def test_only_an_oui(self) -> None:
        assert normalize("00:1b:44") == self._OUI


class TestNormalizeTruncation:
    def test_extra_digits_are_ignored(self) -> None:
        assert normalize("aabbccddeeff00112233") == "AABBCC"

    def test_exactly_six_digits(self) -> None:
        assert normalize("abcdef") == "ABCDEF"

    def test_non_hex_letters_are_stripped_before_counting(self) -> None:
        # g..z are not hex digits, so only "ab" "cd" "ef" "01" survive
        assert normalize("gab:hcd:ief:j01") == "ABCDEF"


class TestNormalizeErrors:
    @pytest.mark.parametrize("value", [None, 100020113, b"100020113AB7", ["10", "00", "20"]])
    def test_non_string(self, value: object) -> None:
        with pytest.raises(NotAStringError, match="MAC address must be a string"):
            normalize(value)

    @pytest.mark.parametrize("value", ["", "123", "12:34", "GG:HH:II:JJ:KK:LL", "1-2-3-4-5"])
    def test_too_short(self, value: str) -> None:
        with pytest.raises(TooShortError, match="at least 6 hex digits"):
            normalize(value)

    def test_kinds_are_distinguishable(self) -> None:
        with pytest.raises(MacAddressError) as not_str:
            normalize(None)
        with pytest.raises(MacAddressError) as short:
            normalize("12")
        assert not_str.value.kind is ErrorKind.NOT_A_STRING
        assert short.value.kind is ErrorKind.TOO_SHORT

    def test_not_a_string_is_also_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            normalize(42)


class TestClean:
    def test_keeps_case(self) -> None:
        assert clean("aB:cD") == "aBcD"

    def test_rejects_non_string(self) -> None:
        with pytest.raises(NotAStringError):
            clean(None)
