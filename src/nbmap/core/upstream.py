"""Upstream schema sources.

The mapping is checked against what the Terraform provider actually
exposes: its resource and data source keys, the fields of each entry, and
the declared types of the provider configuration keys. Sources come either
from the built-in snapshot (`nbmap.core.netbox_schema`) or from the output
of `terraform providers schema -json`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Protocol

from nbmap.core.errors import SchemaFormatError
from nbmap.core.models import EntryKind

NETBOX_PROVIDER_ADDRESS = "registry.terraform.io/e-breuninger/netbox"


class SchemaSource(Protocol):
    """Interface for the upstream provider schema used by the mapping."""

    def keys(self, kind: EntryKind) -> list[str]:
        """Return all raw keys of the given kind, in upstream order."""
        ...

    def fields(self, kind: EntryKind, raw_key: str) -> set[str] | None:
        """Return the field names of an entry, or None if it does not exist."""
        ...

    def config_types(self) -> dict[str, str]:
        """Return provider configuration keys and their value types."""
        ...


@dataclass(frozen=True)
class StaticSchemaSource:
    """In-memory schema source."""

    resources: Mapping[str, frozenset[str]] = field(default_factory=dict)
    data_sources: Mapping[str, frozenset[str]] = field(default_factory=dict)
    config: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_fields(
        cls,
        *,
        resources: Mapping[str, Iterable[str]],
        data_sources: Mapping[str, Iterable[str]],
        config: Mapping[str, str],
    ) -> StaticSchemaSource:
        """Build a source from plain field lists."""
        return cls(
            resources={k: frozenset(v) for k, v in resources.items()},
            data_sources={k: frozenset(v) for k, v in data_sources.items()},
            config=dict(config),
        )

    def _entries(self, kind: EntryKind) -> Mapping[str, frozenset[str]]:
        return self.resources if kind is EntryKind.RESOURCE else self.data_sources

    def keys(self, kind: EntryKind) -> list[str]:
        return list(self._entries(kind))

    def fields(self, kind: EntryKind, raw_key: str) -> set[str] | None:
        found = self._entries(kind).get(raw_key)
        return set(found) if found is not None else None

    def config_types(self) -> dict[str, str]:
        return dict(self.config)


def env_default_candidates(source: SchemaSource) -> list[str]:
    """Return config keys that can take a default from an environment variable."""
    return [key for key, typ in source.config_types().items() if typ == "string"]


def _render_type(raw: Any) -> str:
    """Render a Terraform type expression (`"string"`, `["map", "string"]`)."""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, list) and raw:
        head, *rest = raw
        return f"{head}({', '.join(_render_type(r) for r in rest)})"
    return "dynamic"


def _object(value: Any, where: str) -> Mapping[str, Any]:
    """Return `value` if it is a JSON object (missing counts as empty)."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SchemaFormatError(
            f"Schema document: {where} must be an object, got {type(value).__name__}"
        )
    return value


def _block_fields(schema: Any, where: str) -> frozenset[str]:
    """Collect attribute and nested block names of a schema entry."""
    block = _object(_object(schema, where).get("block"), f"{where}.block")
    names = set(_object(block.get("attributes"), f"{where}.block.attributes"))
    names.update(_object(block.get("block_types"), f"{where}.block.block_types"))
    return frozenset(names)


def _pick_provider(
    provider_schemas: Mapping[str, Any], provider_address: str | None
) -> Mapping[str, Any]:
    """Select one provider from a multi-provider schema document."""
    if provider_address:
        try:
            return provider_schemas[provider_address]
        except KeyError as exc:
            raise SchemaFormatError(
                f"Provider {provider_address!r} not found in schema document"
            ) from exc
    if NETBOX_PROVIDER_ADDRESS in provider_schemas:
        return provider_schemas[NETBOX_PROVIDER_ADDRESS]
    if len(provider_schemas) == 1:
        return next(iter(provider_schemas.values()))
    raise SchemaFormatError(
        "Schema document holds several providers; pass the provider address"
    )


def parse_schema(
    document: Mapping[str, Any], provider_address: str | None = None
) -> StaticSchemaSource:
    """
    Build a schema source from a parsed `terraform providers schema -json`
    document.

    Args:
        document: The decoded JSON document.
        provider_address: Provider to pick when the document holds more than
                          one (e.g. `registry.terraform.io/e-breuninger/netbox`).

    Raises:
        SchemaFormatError: If the document does not have the expected shape.
    """
    provider_schemas = document.get("provider_schemas")
    if not isinstance(provider_schemas, dict) or not provider_schemas:
        raise SchemaFormatError("Schema document has no provider_schemas")

    schema = _object(_pick_provider(provider_schemas, provider_address), "provider schema")
    provider = _object(schema.get("provider"), "provider")
    provider_block = _object(provider.get("block"), "provider.block")
    attributes = _object(provider_block.get("attributes"), "provider.block.attributes")
    resource_schemas = _object(schema.get("resource_schemas"), "resource_schemas")
    data_source_schemas = _object(schema.get("data_source_schemas"), "data_source_schemas")

    return StaticSchemaSource(
        resources={
            key: _block_fields(entry, f"resource_schemas.{key}")
            for key, entry in resource_schemas.items()
        },
        data_sources={
            key: _block_fields(entry, f"data_source_schemas.{key}")
            for key, entry in data_source_schemas.items()
        },
        config={
            key: _render_type(_object(attr, f"provider attribute {key}").get("type"))
            for key, attr in attributes.items()
        },
    )


def load_schema(
    path: str | Path, provider_address: str | None = None
) -> StaticSchemaSource:
    """Read a `terraform providers schema -json` file from disk."""
    try:
        document = json.loads(Path(path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise SchemaFormatError(f"Schema file {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise SchemaFormatError(f"Cannot read schema file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SchemaFormatError(f"Schema file {path} is not valid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise SchemaFormatError(f"Schema file {path} must hold a JSON object")
    return parse_schema(document, provider_address)
