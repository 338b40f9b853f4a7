"""CLI command implementations for macvendor."""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from macvendor.config import get_settings
from macvendor.core.errors import MacAddressError, TableError
from macvendor.core.models import UNKNOWN_VENDOR, VendorRecord
from macvendor.core.table import get_default_table
from macvendor.core.vendor import VendorLookup, format as format_mac, is_valid

console = Console()


def _setup_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _open_lookup() -> VendorLookup:
    try:
        return VendorLookup(get_default_table())
    except TableError as exc:
        console.print(f"[red]{escape(str(exc))}[/]")
        raise typer.Exit(2)


def _build_lookup_table(rows: list[tuple[str, VendorRecord | None, str | None]]) -> Table:
    table = Table(
        title="MAC Vendors",
        show_lines=False,
        padding=(0, 1),
        title_style="bold cyan",
        border_style="bright_black",
    )
    table.add_column("MAC", no_wrap=True, style="dim")
    table.add_column("OUI", width=6, no_wrap=True)
    table.add_column("Vendor", no_wrap=True)
    table.add_column("Address")

    for mac, record, error in rows:
        if error:
            table.add_row(escape(mac), "-", f"[red]{error}[/]", "")
        elif record is None:
            table.add_row(escape(mac), "-", f"[yellow]{UNKNOWN_VENDOR}[/]", "")
        else:
            table.add_row(
                escape(mac), record.oui, escape(record.vendor), escape(record.first_address_line)
            )
    return table


def cmd_lookup(
    macs: List[str] = typer.Argument(help="MAC addresses in any common notation."),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Logging level."),
) -> None:
    """Look up vendor records and print them as a table."""
    _setup_logging(log_level or get_settings().log_level)
    vendors = _open_lookup()

    rows: list[tuple[str, VendorRecord | None, str | None]] = []
    failed = False
    for mac in macs:
        try:
            rows.append((mac, vendors.lookup(mac), None))
        except MacAddressError as exc:
            rows.append((mac, None, escape(str(exc))))
            failed = True

    console.print(_build_lookup_table(rows))
    if failed:
        raise typer.Exit(1)


def cmd_vendor(
    mac: str = typer.Argument(help="MAC address in any common notation."),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l"),
) -> None:
    """Print the vendor name, or Unknown."""
    _setup_logging(log_level or get_settings().log_level)
    vendors = _open_lookup()

    try:
        name = vendors.get_vendor(mac)
    except MacAddressError as exc:
        console.print(f"[red]{escape(str(exc))}[/]")
        raise typer.Exit(1)

    console.print(name or UNKNOWN_VENDOR, markup=False, highlight=False)
    if name is None:
        raise typer.Exit(1)


def cmd_validate(
    macs: List[str] = typer.Argument(help="MAC addresses to check."),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l"),
) -> None:
    """Report Valid/Invalid for each MAC address."""
    _setup_logging(log_level or get_settings().log_level)

    all_valid = True
    for mac in macs:
        ok = is_valid(mac)
        all_valid = all_valid and ok
        status = "[green]Valid[/]" if ok else "[red]Invalid[/]"
        console.print(f"{escape(mac) or '(empty string)'} -> {status}", highlight=False)

    if not all_valid:
        raise typer.Exit(1)


def cmd_format(
    mac: str = typer.Argument(help="Full 12-digit MAC address."),
    separator: Optional[str] = typer.Option(None, "--separator", "-s", help="Octet separator."),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l"),
) -> None:
    """Print the MAC as six uppercase octets."""
    settings = get_settings()
    _setup_logging(log_level or settings.log_level)
    sep = settings.default_separator if separator is None else separator

    try:
        console.print(format_mac(mac, sep), highlight=False)
    except MacAddressError as exc:
        console.print(f"[red]{escape(str(exc))}[/]")
        raise typer.Exit(1)


def cmd_stats(
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l"),
) -> None:
    """Show totals for the loaded reference table."""
    _setup_logging(log_level or get_settings().log_level)
    snapshot = _open_lookup().stats()

    panel_text = (
        f"[bold]OUI entries:[/]    {snapshot.total_entries:,}\n"
        f"[bold]Unique vendors:[/] {snapshot.unique_vendors:,}\n"
        f"[bold]Data version:[/]   {snapshot.version}"
    )
    console.print(Panel(panel_text, title="Reference Table", border_style="cyan"))
