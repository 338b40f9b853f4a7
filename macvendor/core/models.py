"""Value models returned by the vendor lookup API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

UNKNOWN_VENDOR = "Unknown"


class VendorRecord(BaseModel):
    """A resolved OUI table entry."""

    model_config = ConfigDict(frozen=True)

    oui: str  # Canonical 6-digit uppercase identifier
    vendor: str
    address: str = ""
    raw: str

    @classmethod
    def from_entry(cls, oui: str, raw: str) -> VendorRecord:
        """Split a raw table entry into vendor name and address block."""
        lines = raw.splitlines()
        vendor = lines[0] if lines else ""
        address = "\n".join(lines[1:]).strip()
        return cls(oui=oui, vendor=vendor or UNKNOWN_VENDOR, address=address, raw=raw)

    @property
    def first_address_line(self) -> str:
        return self.address.split("\n", 1)[0] if self.address else ""


class StatisticsSnapshot(BaseModel):
    """Aggregate counts over the loaded reference table."""

    model_config = ConfigDict(frozen=True)

    total_entries: int
    unique_vendors: int
    version: str
