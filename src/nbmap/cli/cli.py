"""CLI application for the NetBox provider mapping."""

import typer

from nbmap.cli.commands.mapping import map_app
from nbmap.cli.commands.schema import schema_app
from nbmap.cli.common.exits import exit_from_exc
from nbmap.cli.common.options import KindOpt, ModuleOpt, parse_kind_or_exit
from nbmap.core.errors import MalformedNameError
from nbmap.core.models import EntryKind
from nbmap.core.tokens import data_source_token, resource_token

app = typer.Typer(
    help="nbmap - NetBox provider token mapping",
    no_args_is_help=True,
)

app.add_typer(map_app, name="map", help="Inspect resources, data sources and config.")
app.add_typer(schema_app, name="schema")


@app.command()
def token(
    name: str = typer.Argument(..., help="Entry name, e.g. IpAddress or getCluster"),
    kind: str = KindOpt,
    module: str = ModuleOpt,
):
    """Derive the token for a single entry name."""
    entry_kind = parse_kind_or_exit(kind)
    derive = resource_token if entry_kind is EntryKind.RESOURCE else data_source_token
    try:
        tok = derive(module, name)
    except MalformedNameError as exc:
        exit_from_exc(exc, message=str(exc), code=2)
    typer.echo(tok)


if __name__ == "__main__":
    app()
