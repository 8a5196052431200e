"""Core records for the provider mapping.

These are plain immutable values. They carry no generation logic and know
nothing about the CLI; downstream SDK generators iterate them as-is.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from nbmap.core.table import MappingTable


LANGUAGES = ("nodejs", "python", "go", "csharp")


def _frozen(obj: object, *attrs: str) -> None:
    """Replace mapping attributes of a frozen dataclass with read-only copies."""
    for attr in attrs:
        object.__setattr__(obj, attr, MappingProxyType(dict(getattr(obj, attr))))


class EntryKind(str, Enum):
    """
    Kind of an upstream schema entry.

    Values:
        RESOURCE: Create/read/update/delete capable entry.
        DATA_SOURCE: Read-only query entry, exposed as a function.
    """

    RESOURCE = "resource"
    DATA_SOURCE = "data_source"

    @property
    def label(self) -> str:
        """Human-readable name used in messages."""
        return self.value.replace("_", " ")


@dataclass(frozen=True)
class FieldOverride:
    """
    Field-level adjustment applied on top of the derived mapping.

    Attributes:
        field: Upstream field name the override applies to.
        names: Per-language exposed name, keyed by language
               (`nodejs`, `python`, `go`, `csharp`).
        env_vars: Environment variables that back the field's default value,
                  in lookup order. Only declared here, never read.
        description: Replacement documentation for the field.
    """

    field: str
    names: Mapping[str, str] = field(default_factory=dict)
    env_vars: tuple[str, ...] = ()
    description: str | None = None

    def __post_init__(self) -> None:
        _frozen(self, "names")
        object.__setattr__(self, "env_vars", tuple(self.env_vars))


@dataclass(frozen=True)
class EntryDescriptor:
    """One row of the mapping table."""

    kind: EntryKind
    raw_key: str
    token: str
    overrides: tuple[FieldOverride, ...] = ()

    def override_for(self, field_name: str) -> FieldOverride | None:
        """Return the override for `field_name`, if any."""
        for override in self.overrides:
            if override.field == field_name:
                return override
        return None


@dataclass(frozen=True)
class AutonamingPolicy:
    """Limits the generator applies when it auto-names physical resources."""

    max_length: int = 255
    separator: str = "-"


@dataclass(frozen=True)
class JavaScriptInfo:
    dependencies: Mapping[str, str] = field(default_factory=dict)
    dev_dependencies: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _frozen(self, "dependencies", "dev_dependencies")


@dataclass(frozen=True)
class PythonInfo:
    requires: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _frozen(self, "requires")


@dataclass(frozen=True)
class GolangInfo:
    import_base_path: str
    generate_resource_container_types: bool = True


@dataclass(frozen=True)
class CSharpInfo:
    package_references: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _frozen(self, "package_references")


@dataclass(frozen=True)
class ProviderDescriptor:
    """
    Static metadata for the provider package plus its published mapping.

    Attributes:
        name: Package name used in tokens and package registries.
        display_name: Casing of the name shown in the registry.
        publisher: Publisher shown in the registry.
        github_org: Organisation of the upstream Terraform provider.
        config: Overrides for provider configuration keys.
        table: The sealed mapping table.
        autonaming: Name length and separator policy for the generator.
    """

    name: str
    display_name: str
    publisher: str
    description: str
    keywords: tuple[str, ...]
    license: str
    homepage: str
    repository: str
    github_org: str
    version: str
    config: tuple[FieldOverride, ...]
    table: MappingTable
    javascript: JavaScriptInfo
    python: PythonInfo
    golang: GolangInfo
    csharp: CSharpInfo
    autonaming: AutonamingPolicy = AutonamingPolicy()
    logo_url: str = ""
    plugin_download_url: str = ""

    def config_override(self, key: str) -> FieldOverride | None:
        """Return the override declared for config key `key`, if any."""
        for override in self.config:
            if override.field == key:
                return override
        return None
