"""Commands for checking the mapping against upstream and exporting it."""

from pathlib import Path

import typer

from nbmap.cli.common.context import build_mapping_context
from nbmap.cli.common.exits import exit_from_exc
from nbmap.cli.common.options import OutputOpt, SchemaOpt, VersionOpt
from nbmap.cli.common.output import out
from nbmap.core.config import load_settings
from nbmap.core.errors import ConfigError
from nbmap.core.export import write_mapping
from nbmap.core.models import EntryKind

schema_app = typer.Typer(
    help="Check and export the mapping",
    no_args_is_help=True,
)


@schema_app.command()
def check(
    schema: Path | None = SchemaOpt,
    version: str | None = VersionOpt,
):
    """
    Build the mapping against the upstream schema and report the result.
    """
    with out.status("Building mapping..."):
        appctx = build_mapping_context(schema, version)

    table = appctx.provider.table
    source = str(appctx.schema_path) if appctx.schema_path else "built-in snapshot"
    out.success("Mapping is complete and consistent")
    out.kv(
        {
            "upstream": source,
            "resources": len(table.entries(EntryKind.RESOURCE)),
            "data sources": len(table.entries(EntryKind.DATA_SOURCE)),
        }
    )


@schema_app.command()
def export(
    schema: Path | None = SchemaOpt,
    version: str | None = VersionOpt,
    output: Path | None = OutputOpt,
):
    """
    Write the mapping as JSON for SDK generators.
    """
    appctx = build_mapping_context(schema, version)
    if output is None:
        try:
            output = load_settings().output
        except ConfigError as exc:
            exit_from_exc(exc, message=str(exc), code=2)

    try:
        path = write_mapping(appctx.provider, output)
    except OSError as exc:
        exit_from_exc(exc, message=f"Cannot write {output}: {exc}", code=1)

    out.success(f"Mapping written to {path}")
