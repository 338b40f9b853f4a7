"""MAC vendor/manufacturer resolution."""

from __future__ import annotations

import logging

from macvendor.core.errors import MacAddressError, WrongLengthError
from macvendor.core.models import StatisticsSnapshot, VendorRecord
from macvendor.core.normalizer import clean, normalize
from macvendor.core.table import ReferenceTable, get_default_table

logger = logging.getLogger(__name__)

MAC_LENGTH = 12


def is_valid(mac: object) -> bool:
    """True if *mac* carries at least an OUI's worth of hex digits."""
    try:
        normalize(mac)
    except MacAddressError:
        return False
    return True


def format(mac: str, separator: str = ":") -> str:  # noqa: A001
    """Render a full 12-digit MAC as six uppercase octets joined by *separator*.

    The separator is inserted verbatim.
    """
    cleaned = clean(mac)
    if len(cleaned) != MAC_LENGTH:
        raise WrongLengthError()
    octets = [cleaned[i:i + 2] for i in range(0, MAC_LENGTH, 2)]
    return separator.join(octets).upper()


def _first_line(raw: str) -> str:
    lines = raw.splitlines()
    return lines[0] if lines else ""


class VendorLookup:
    """Lookup and statistics over one reference table."""

    def __init__(self, table: ReferenceTable) -> None:
        self.table = table

    def lookup(self, mac: str) -> VendorRecord | None:
        """Resolve a MAC address to its table entry.

        Returns None if the OUI is not in the table. Input that cannot be
        normalized raises NotAStringError or TooShortError.
        """
        oui = normalize(mac)
        raw = self.table.get(oui)
        if raw is None:
            logger.debug("OUI %s not in table", oui)
            return None
        return VendorRecord.from_entry(oui, raw)

    def get_vendor(self, mac: str) -> str | None:
        """Vendor name for *mac*, or None if unknown."""
        record = self.lookup(mac)
        return record.vendor if record else None

    def stats(self) -> StatisticsSnapshot:
        vendors = {_first_line(raw) for raw in self.table.values()}
        return StatisticsSnapshot(
            total_entries=len(self.table),
            unique_vendors=len(vendors),
            version=self.table.version,
        )

    is_valid = staticmethod(is_valid)
    format = staticmethod(format)

    # Aliases
    find = lookup
    vendor = get_vendor
    validate = is_valid


_lookup_instance: VendorLookup | None = None


def _get_lookup() -> VendorLookup:
    """Lazily bind the module-level API to the default table."""
    global _lookup_instance
    table = get_default_table()
    if _lookup_instance is None or _lookup_instance.table is not table:
        _lookup_instance = VendorLookup(table)
    return _lookup_instance


def lookup(mac: str) -> VendorRecord | None:
    return _get_lookup().lookup(mac)


def get_vendor(mac: str) -> str | None:
    return _get_lookup().get_vendor(mac)


def stats() -> StatisticsSnapshot:
    return _get_lookup().stats()


find = lookup
vendor = get_vendor
validate = is_valid
