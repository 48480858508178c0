# SPDX-License-Identifier: MIT

import typer

from ticktrack.model.entity_id import EntityId
from ticktrack.model.entry import Entry


def resolve_entry_ref(entries: list[Entry], ref: str) -> EntityId:
    """
    Resolve a command line reference to an entry id.

    A number is the 1-based position in the displayed list, anything else
    is matched as an id prefix.
    """
    ref = ref.strip()
    if ref.isdigit():
        position = int(ref)
        if position < 1 or position > len(entries):
            raise typer.BadParameter(f"No entry at position {position}")
        return entries[position - 1]["id"]

    matches = [entry["id"] for entry in entries if entry["id"].startswith(ref)]
    if len(matches) == 0:
        raise typer.BadParameter(f"No entry matches '{ref}'")
    if len(matches) > 1:
        raise typer.BadParameter(f"'{ref}' matches {len(matches)} entries")
    return matches[0]
