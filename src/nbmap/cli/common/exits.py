"""Exit handling utilities for the CLI."""

from typing import NoReturn

import typer

from nbmap.cli.common.output import out
from nbmap.core.errors import IncompleteMappingError, MappingError


def die(msg: str, code: int = 1) -> "None":
    """Exit with an error message and optional exit code."""
    out.error(msg)
    raise typer.Exit(code)


def warn_exit(msg: str, code: int = 0) -> "None":
    """Exit with a warning message and optional exit code."""
    out.warn(msg)
    raise typer.Exit(code)


def exit_from_exc(exc: Exception, *, message: str, code: int = 1) -> NoReturn:
    """Print `message` and exit with `code`, chaining the original exception."""
    out.error(message)
    raise typer.Exit(code) from exc


def exit_build_failed(exc: MappingError) -> NoReturn:
    """Report a failed mapping build; unmapped entries are listed per kind."""
    out.error(f"Mapping build failed: {exc}")
    if isinstance(exc, IncompleteMappingError):
        out.kv({f"unmapped {kind}": len(keys) for kind, keys in exc.missing.items()})
    raise typer.Exit(1) from exc
