"""Common CLI options for the CLI."""

import typer

from nbmap.cli.common.exits import die
from nbmap.core.models import EntryKind

SchemaOpt = typer.Option(
    None,
    "--schema",
    "-s",
    help="Upstream schema JSON from `terraform providers schema -json` "
    "(default: $NBMAP_SCHEMA_PATH, else the built-in snapshot)",
)

VersionOpt = typer.Option(
    None,
    "--version",
    help="Provider version used for the Go import path "
    "(default: $NBMAP_PROVIDER_VERSION)",
)

NameOpt = typer.Option(
    None,
    "--name",
    help="Regex on raw key or token",
)

KindOpt = typer.Option(
    "resource",
    "--kind",
    "-k",
    help="Entry kind: resource or data-source",
)

ModuleOpt = typer.Option(
    "index",
    "--module",
    "-m",
    help="Module the entry lives in",
)

OutputOpt = typer.Option(
    None,
    "--output",
    "-o",
    help="Where to write the mapping JSON (default: $NBMAP_OUTPUT or "
    "schema-mapping.json)",
)


def parse_kind_or_exit(value: str) -> EntryKind:
    """Translate a `--kind` value into an EntryKind or exit with a usage error."""
    normalized = value.strip().lower().replace("-", "_")
    try:
        return EntryKind(normalized)
    except ValueError:
        die(f"Unknown kind {value!r} (expected resource or data-source)", code=2)
