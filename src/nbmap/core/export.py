"""Plain-data projection of the provider for SDK generators."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from nbmap.core.models import EntryDescriptor, EntryKind, FieldOverride, ProviderDescriptor


def _override_to_dict(override: FieldOverride) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if override.names:
        data["names"] = dict(override.names)
    if override.env_vars:
        data["default"] = {"envVars": list(override.env_vars)}
    if override.description is not None:
        data["description"] = override.description
    return data


def _entry_to_dict(entry: EntryDescriptor) -> dict[str, Any]:
    data: dict[str, Any] = {"tok": entry.token}
    if entry.overrides:
        data["fields"] = {o.field: _override_to_dict(o) for o in entry.overrides}
    return data


def provider_to_dict(provider: ProviderDescriptor) -> dict[str, Any]:
    """
    Project a provider descriptor into JSON-compatible data.

    Key order follows the table's registration order, so the output is
    stable for identical input.
    """
    table = provider.table
    return {
        "name": provider.name,
        "displayName": provider.display_name,
        "publisher": provider.publisher,
        "description": provider.description,
        "keywords": list(provider.keywords),
        "license": provider.license,
        "homepage": provider.homepage,
        "repository": provider.repository,
        "gitHubOrg": provider.github_org,
        "logoUrl": provider.logo_url,
        "pluginDownloadUrl": provider.plugin_download_url,
        "version": provider.version,
        "config": {o.field: _override_to_dict(o) for o in provider.config},
        "resources": {
            e.raw_key: _entry_to_dict(e) for e in table.entries(EntryKind.RESOURCE)
        },
        "dataSources": {
            e.raw_key: _entry_to_dict(e) for e in table.entries(EntryKind.DATA_SOURCE)
        },
        "javascript": {
            "dependencies": dict(provider.javascript.dependencies),
            "devDependencies": dict(provider.javascript.dev_dependencies),
        },
        "python": {"requires": dict(provider.python.requires)},
        "golang": {
            "importBasePath": provider.golang.import_base_path,
            "generateResourceContainerTypes": (
                provider.golang.generate_resource_container_types
            ),
        },
        "csharp": {"packageReferences": dict(provider.csharp.package_references)},
        "autonaming": {
            "maxLength": provider.autonaming.max_length,
            "separator": provider.autonaming.separator,
        },
    }


def write_mapping(provider: ProviderDescriptor, path: str | Path) -> Path:
    """Write the projection as JSON to `path` and return the path."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(provider_to_dict(provider), indent=2) + "\n")
    return target
