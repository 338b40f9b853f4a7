from __future__ import annotations

import json
from pathlib import Path

import pytest

from macvendor.core import table as table_module
from macvendor.core import vendor as vendor_module
from macvendor.core.table import ReferenceTable
from macvendor.core.vendor import VendorLookup

SAMPLE_ENTRIES = {
    "100020": "Apple, Inc.\n1 Infinite Loop\nCupertino  CA  95014\nUS",
    "000393": "Apple, Inc.\n1 Infinite Loop\nCupertino  CA  95014\nUS",
    "005056": "VMware, Inc.\n3401 Hillview Avenue\nPALO ALTO  CA  94304\nUS",
    "AABBCC": "TestVendor",
    "112233": "\nNameless Street 1\nSomewhere",
}


@pytest.fixture
def sample_table() -> ReferenceTable:
    return ReferenceTable(SAMPLE_ENTRIES, version="test-1")


@pytest.fixture
def vendors(sample_table: ReferenceTable) -> VendorLookup:
    return VendorLookup(sample_table)


@pytest.fixture
def table_file(tmp_path: Path) -> Path:
    path = tmp_path / "oui.json"
    path.write_text(json.dumps({"version": "file-7", "entries": SAMPLE_ENTRIES}), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolate_default_table(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep every test on a fresh default table and away from the user's config."""
    monkeypatch.setattr(table_module, "_default_table", None)
    monkeypatch.setattr(vendor_module, "_lookup_instance", None)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path / "home"))
    monkeypatch.delenv("MACVENDOR_TABLE_PATH", raising=False)
    monkeypatch.delenv("MACVENDOR_DEFAULT_SEPARATOR", raising=False)
    monkeypatch.delenv("MACVENDOR_LOG_LEVEL", raising=False)
