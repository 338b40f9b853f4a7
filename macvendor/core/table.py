"""Read-only OUI reference table loaded from a JSON data asset."""

from __future__ import annotations

import json
import logging
import re
import threading
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from macvendor.core.errors import TableError

logger = logging.getLogger(__name__)

BUNDLED_TABLE = Path(__file__).parent.parent / "data" / "oui.json"

_OUI_KEY = re.compile(r"^[0-9A-Fa-f]{6}$")

_default_table: ReferenceTable | None = None
_default_lock = threading.Lock()


class ReferenceTable(Mapping[str, str]):
    """Immutable mapping of canonical OUI to raw multi-line vendor text."""

    def __init__(self, entries: Mapping[str, str], version: str = "unknown") -> None:
        checked: dict[str, str] = {}
        for key, value in entries.items():
            if not isinstance(key, str) or not _OUI_KEY.match(key):
                raise TableError(f"Invalid OUI key: {key!r}")
            if not isinstance(value, str) or not value:
                raise TableError(f"Empty or non-text entry for OUI {key}")
            oui = key.upper()
            if oui in checked:
                raise TableError(f"Duplicate OUI key: {key!r}")
            checked[oui] = value
        self._entries = MappingProxyType(checked)
        self.version = version

    def __getitem__(self, oui: str) -> str:
        return self._entries[oui]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ReferenceTable({len(self)} entries, version={self.version!r})"

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries


def _parse(data: Any, source: Path) -> ReferenceTable:
    if not isinstance(data, dict) or not isinstance(data.get("entries"), dict):
        raise TableError(f"{source}: expected an object with an 'entries' mapping")
    version = data.get("version") or "unknown"
    return ReferenceTable(data["entries"], version=str(version))


def load_table(path: str | Path | None = None) -> ReferenceTable:
    """Load a reference table from *path*, or the bundled asset when omitted."""
    source = Path(path) if path else BUNDLED_TABLE
    try:
        with open(source, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise TableError(f"Cannot read OUI table {source}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise TableError(f"Malformed OUI table {source}: {exc}") from exc

    table = _parse(data, source)
    logger.info("Loaded %d OUI entries (version %s) from %s", len(table), table.version, source)
    return table


def get_default_table() -> ReferenceTable:
    """Return the process-wide table, loading it on first use."""
    global _default_table
    if _default_table is not None:
        return _default_table
    with _default_lock:
        if _default_table is None:
            from macvendor.config import get_settings

            _default_table = load_table(get_settings().resolved_table_path)
    return _default_table
