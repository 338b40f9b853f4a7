"""Typer CLI application for macvendor."""

from __future__ import annotations

import typer

from macvendor.cli.commands import (
    cmd_format,
    cmd_lookup,
    cmd_stats,
    cmd_validate,
    cmd_vendor,
)

app = typer.Typer(
    name="macvendor",
    help="Resolve MAC addresses to their hardware vendor.",
    no_args_is_help=True,
    add_completion=False,
)

app.command("lookup", help="Look up the vendor record for one or more MAC addresses.")(cmd_lookup)
app.command("vendor", help="Print only the vendor name for a MAC address.")(cmd_vendor)
app.command("validate", help="Check whether MAC addresses carry a usable OUI.")(cmd_validate)
app.command("format", help="Reformat a full 12-digit MAC address.")(cmd_format)
app.command("stats", help="Show reference table statistics.")(cmd_stats)


if __name__ == "__main__":
    app()
