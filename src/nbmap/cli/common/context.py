"""Application context management for the CLI."""

from dataclasses import dataclass
from pathlib import Path

from nbmap.cli.common.exits import die, exit_build_failed
from nbmap.core.config import load_settings, normalize_version
from nbmap.core.errors import ConfigError, MappingError
from nbmap.core.models import ProviderDescriptor
from nbmap.core.netbox_schema import NETBOX_SCHEMA
from nbmap.core.provider import build_provider
from nbmap.core.upstream import SchemaSource, load_schema


@dataclass
class MappingAppContext:
    """Application context holding the upstream source and the built provider."""

    schema_path: Path | None
    source: SchemaSource
    provider: ProviderDescriptor


def build_mapping_context(
    schema_path: Path | None, version: str | None = None
) -> MappingAppContext:
    """Resolve settings, load the upstream schema and build the provider.

    Args:
        schema_path: Optional schema JSON; falls back to $NBMAP_SCHEMA_PATH,
                     then to the built-in snapshot.
        version: Optional provider version; falls back to $NBMAP_PROVIDER_VERSION.

    Returns:
        MappingAppContext: Context with the sealed provider.
    """
    try:
        settings = load_settings()
        resolved_version = normalize_version(version) if version else settings.version
    except ConfigError as exc:
        die(str(exc), code=2)

    path = schema_path or settings.schema_path
    try:
        source = load_schema(path) if path else NETBOX_SCHEMA
        provider = build_provider(source, version=resolved_version)
    except MappingError as exc:
        exit_build_failed(exc)
    return MappingAppContext(schema_path=path, source=source, provider=provider)
