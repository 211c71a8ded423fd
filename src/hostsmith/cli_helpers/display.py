#!/usr/bin/env python3
"""
Display helper functions for the hostsmith CLI
"""

from typing import Iterable, List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..hostname import Hostname

console = Console()


def display_hostnames(hostnames: Iterable[Hostname], title: str = "Hosts") -> None:
    """Pretty-print a table with domain → address/state mapping."""
    rows: List[Hostname] = list(hostnames)
    if not rows:
        display_warning("No entries found.")
        return

    table = Table(title=title, header_style="bold magenta")
    table.add_column("Domain", style="cyan", no_wrap=True)
    table.add_column("Address", style="green")
    table.add_column("State", style="yellow")

    for hostname in rows:
        state = "on" if hostname.enabled else "off"
        table.add_row(hostname.domain, hostname.ip, state)

    console.print(table)


def display_rejections(errors: Iterable[Exception]) -> None:
    """Print entries rejected while parsing the hosts file."""
    for error in errors:
        display_warning(str(error))


def display_success(message: str):
    """Display success message"""
    console.print(f"[green]✅ {escape(message)}[/green]")


def display_warning(message: str):
    """Display warning message"""
    console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")


def display_error(message: str):
    """Display error message"""
    console.print(f"[red]❌ {escape(message)}[/red]")


def display_info(message: str):
    """Display info message"""
    console.print(f"[blue]ℹ️  {escape(message)}[/blue]")
