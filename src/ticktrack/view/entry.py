# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.padding import Padding
from rich.table import Table

from ticktrack.model.entry import Entry
from ticktrack.time import datetime_to_display_local_datetime_str, duration_to_display_str


def header(sub_header: Optional[str] = None) -> Padding:
    additional = ""
    if sub_header is not None:
        additional = f" [sandy_brown]{sub_header}[/sandy_brown]"
    return Padding(f"[dark_orange]ticktrack[/dark_orange]{additional}", (1, 0, 0, 1))


def status_symbol(entry: Entry) -> str:
    if entry["status"] == "running":
        return "[green]>[/green]"
    return " "


def entries_table(entries: list[Entry]) -> Table:
    entries_table = Table(box=box.SIMPLE)
    entries_table.add_column("#")
    entries_table.add_column("id")
    entries_table.add_column("")
    entries_table.add_column("description")
    entries_table.add_column("elapsed", justify="right")
    entries_table.add_column("created")

    for position, entry in enumerate(entries, start=1):
        description = entry["description"]
        entries_table.add_row(
            str(position),
            entry["id"][:8],
            status_symbol(entry),
            description if description is not None else "[dim]unnamed[/dim]",
            duration_to_display_str(entry["accumulated_time"]["total"]),
            datetime_to_display_local_datetime_str(entry["created"]),
        )
    return entries_table


def entries_view(entries: list[Entry]) -> None:
    console = Console()
    console.print(header("entries"))
    console.print(entries_table(entries))


def single_entry_view(entry: Entry) -> None:
    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    accumulated_time = entry["accumulated_time"]
    start = accumulated_time["start"]
    entry_table.add_row("id", entry["id"])
    entry_table.add_row("description", entry["description"] or "")
    entry_table.add_row("status", entry["status"])
    entry_table.add_row("elapsed", duration_to_display_str(accumulated_time["total"]))
    entry_table.add_row(
        "banked", duration_to_display_str(accumulated_time["accumulated_session"])
    )
    entry_table.add_row(
        "session", duration_to_display_str(accumulated_time["current_session"])
    )
    entry_table.add_row(
        "started",
        datetime_to_display_local_datetime_str(start) if start is not None else "",
    )
    entry_table.add_row("created", datetime_to_display_local_datetime_str(entry["created"]))
    entry_table.add_row("updated", datetime_to_display_local_datetime_str(entry["updated"]))

    console = Console()
    console.print(header("entry"))
    console.print(entry_table)
