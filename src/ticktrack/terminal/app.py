# SPDX-License-Identifier: MIT

import typer

from ticktrack.terminal import entry
from ticktrack.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="ticktrack - Time entries in the CLI",
    no_args_is_help=True,
)
app.command(name="add, a")(entry.add)
app.command(name="start, s", no_args_is_help=True)(entry.start)
app.command(name="stop, x", no_args_is_help=True)(entry.stop)
app.command(name="toggle, t", no_args_is_help=True)(entry.toggle)
app.command(name="describe, d", no_args_is_help=True)(entry.describe)
app.command(name="remove, rm", no_args_is_help=True)(entry.remove)
app.command(name="clear")(entry.clear)
app.command(name="list, l")(entry.list_entries)
app.command(name="show", no_args_is_help=True)(entry.show)
app.command(name="watch, w")(entry.watch)


def run() -> None:
    app()
