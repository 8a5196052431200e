"""Commands for inspecting the provider mapping."""

import re
from pathlib import Path

import typer

from nbmap.cli.common.context import MappingAppContext, build_mapping_context
from nbmap.cli.common.exits import die, warn_exit
from nbmap.cli.common.options import (
    KindOpt,
    NameOpt,
    SchemaOpt,
    VersionOpt,
    parse_kind_or_exit,
)
from nbmap.cli.common.output import out
from nbmap.cli.tui import select_entries
from nbmap.core.models import EntryKind
from nbmap.core.table import filter_entries

map_app = typer.Typer(
    help="Inspect the mapping table",
    no_args_is_help=False,
    invoke_without_command=True,
)


@map_app.callback()
def _init(
    ctx: typer.Context,
    schema: Path | None = SchemaOpt,
    version: str | None = VersionOpt,
):
    """Build the provider once per invocation."""
    ctx.obj = build_mapping_context(schema, version)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


def _list(appctx: MappingAppContext, kind: EntryKind, name: str | None, title: str):
    try:
        entries = filter_entries(appctx.provider.table.entries(kind), name)
    except re.error as exc:
        out.error(f"Invalid regex for --name: {exc}")
        raise typer.Exit(2) from exc

    if not entries:
        warn_exit(f"No {kind.label}s found", code=0)

    out.entries_table(entries, title=title)


@map_app.command()
def resources(ctx: typer.Context, name: str | None = NameOpt):
    """List resource tokens."""
    _list(ctx.obj, EntryKind.RESOURCE, name, "Resources")


@map_app.command("data-sources")
def data_sources(ctx: typer.Context, name: str | None = NameOpt):
    """List data source tokens."""
    _list(ctx.obj, EntryKind.DATA_SOURCE, name, "Data sources")


@map_app.command()
def show(
    ctx: typer.Context,
    key: str | None = typer.Argument(None, help="Raw key, e.g. netbox_device"),
    kind: str = KindOpt,
):
    """
    Show one entry, or pick entries interactively when no key is given.
    """
    appctx: MappingAppContext = ctx.obj
    entry_kind = parse_kind_or_exit(kind)
    table = appctx.provider.table

    if key:
        entry = table.get(entry_kind, key)
        if entry is None:
            die(f"No {entry_kind.label} named {key!r} in the mapping", code=1)
        out.entry_detail(entry)
        return

    selected = select_entries(table.entries(entry_kind))
    if not selected:
        warn_exit("No entries selected", code=0)

    for entry in selected:
        out.entry_detail(entry)


@map_app.command()
def config(ctx: typer.Context):
    """List provider config keys and their env-var defaults."""
    appctx: MappingAppContext = ctx.obj
    out.config_table(appctx.source.config_types(), appctx.provider.config)
