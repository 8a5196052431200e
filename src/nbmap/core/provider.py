"""NetBox provider metadata and the full mapping table.

`build_provider` registers every upstream resource and data source under
the `index` module, declares the env-var backed config defaults and the
per-language package settings, and seals the table. A failing build raises
and never returns a partially filled descriptor.

`provider` runs the build at most once per process.
"""

from __future__ import annotations

from functools import cache
from types import MappingProxyType
from typing import Mapping

from nbmap.core.config import DEFAULT_VERSION, load_settings
from nbmap.core.errors import ConfigError, UnknownOverrideTargetError
from nbmap.core.models import (
    AutonamingPolicy,
    CSharpInfo,
    FieldOverride,
    GolangInfo,
    JavaScriptInfo,
    ProviderDescriptor,
    PythonInfo,
)
from nbmap.core.netbox_schema import NETBOX_SCHEMA
from nbmap.core.table import MappingTable
from nbmap.core.tokens import INDEX_MODULE, PACKAGE
from nbmap.core.upstream import SchemaSource, env_default_candidates, load_schema

REPOSITORY = "https://github.com/hbjydev/pulumi-netbox"
GO_MODULE = "github.com/hbjydev/pulumi-netbox"

RESOURCES: tuple[tuple[str, str], ...] = (
    ("netbox_aggregate", "Aggregate"),
    ("netbox_available_ip_address", "AvailableIpAddress"),
    ("netbox_available_prefix", "AvailablePrefix"),
    ("netbox_circuit", "Circuit"),
    ("netbox_circuit_provider", "CircuitProvider"),
    ("netbox_circuit_termination", "CircuitTermination"),
    ("netbox_circuit_type", "CircuitType"),
    ("netbox_cluster", "Cluster"),
    ("netbox_cluster_group", "ClusterGroup"),
    ("netbox_cluster_type", "ClusterType"),
    ("netbox_custom_field", "CustomField"),
    ("netbox_device", "Device"),
    ("netbox_device_role", "DeviceRole"),
    ("netbox_device_type", "DeviceType"),
    ("netbox_interface", "Interface"),
    ("netbox_ip_address", "IpAddress"),
    ("netbox_ip_range", "IpRange"),
    ("netbox_ipam_role", "IpamRole"),
    ("netbox_manufacturer", "Manufacturer"),
    ("netbox_platform", "Platform"),
    ("netbox_prefix", "Prefix"),
    ("netbox_primary_ip", "PrimaryIp"),
    ("netbox_region", "Region"),
    ("netbox_rir", "Rir"),
    ("netbox_service", "Service"),
    ("netbox_site", "Site"),
    ("netbox_tag", "Tag"),
    ("netbox_tenant", "Tenant"),
    ("netbox_tenant_group", "TenantGroup"),
    ("netbox_token", "Token"),
    ("netbox_user", "User"),
    ("netbox_virtual_machine", "VirtualMachine"),
    ("netbox_vlan", "Vlan"),
    ("netbox_vrf", "Vrf"),
)

DATA_SOURCES: tuple[tuple[str, str], ...] = (
    ("netbox_cluster", "getCluster"),
    ("netbox_cluster_group", "getClusterGroup"),
    ("netbox_cluster_type", "getClusterType"),
    ("netbox_device_role", "getDeviceRole"),
    ("netbox_device_type", "getDeviceType"),
    ("netbox_interfaces", "getInterfaces"),
    ("netbox_ip_addresses", "getIpAddresses"),
    ("netbox_ip_range", "getIpRange"),
    ("netbox_platform", "getPlatform"),
    ("netbox_prefix", "getPrefix"),
    ("netbox_region", "getRegion"),
    ("netbox_site", "getSite"),
    ("netbox_tag", "getTag"),
    ("netbox_tenant", "getTenant"),
    ("netbox_tenant_group", "getTenantGroup"),
    ("netbox_tenants", "getTenants"),
    ("netbox_virtual_machines", "getVirtualMachines"),
    ("netbox_vlan", "getVlan"),
    ("netbox_vrf", "getVrf"),
)

# C# forbids a member named like its enclosing type.
RESOURCE_OVERRIDES: Mapping[str, tuple[FieldOverride, ...]] = MappingProxyType(
    {
        "netbox_ip_address": (
            FieldOverride("ip_address", names={"csharp": "Address"}),
        ),
    }
)

CONFIG: tuple[FieldOverride, ...] = (
    FieldOverride("api_token", env_vars=("NETBOX_API_TOKEN",)),
    FieldOverride("server_url", env_vars=("NETBOX_SERVER_URL",)),
)


def module_major_version(version: str) -> str:
    """
    Return the Go module major version suffix for `version`.

    Go modules carry no suffix for v0 and v1; from v2 on the import path
    gets a `vN` element.

    Raises:
        ConfigError: If the major version is not a number.
    """
    major = version.lstrip("v").split(".", 1)[0]
    if not major.isdigit():
        raise ConfigError(f"Invalid version: {version!r}")
    return "" if int(major) < 2 else f"v{int(major)}"


def go_import_base_path(version: str) -> str:
    """Return the import base path of the generated Go SDK."""
    parts = [f"{GO_MODULE}/sdk", module_major_version(version), "go", PACKAGE]
    return "/".join(p for p in parts if p)


def _check_config(source: SchemaSource, config: tuple[FieldOverride, ...]) -> None:
    """Verify config overrides target real keys and env defaults target strings."""
    known = source.config_types()
    env_capable = set(env_default_candidates(source))
    for override in config:
        if override.field not in known:
            raise UnknownOverrideTargetError("config", PACKAGE, override.field)
        if override.env_vars and override.field not in env_capable:
            raise UnknownOverrideTargetError(
                "config",
                PACKAGE,
                override.field,
                f"type {known[override.field]} cannot take an env-var default",
            )


def build_table(source: SchemaSource | None = NETBOX_SCHEMA) -> MappingTable:
    """Register every resource and data source and seal the table."""
    table = MappingTable(PACKAGE, source=source)
    for raw_key, name in RESOURCES:
        table.resource(
            raw_key,
            name,
            module=INDEX_MODULE,
            overrides=RESOURCE_OVERRIDES.get(raw_key, ()),
        )
    for raw_key, name in DATA_SOURCES:
        table.data_source(raw_key, name, module=INDEX_MODULE)
    return table.seal()


def build_provider(
    source: SchemaSource | None = NETBOX_SCHEMA,
    version: str = DEFAULT_VERSION,
) -> ProviderDescriptor:
    """
    Build the provider descriptor.

    Args:
        source: Upstream schema to check the mapping against; None skips
                the upstream checks.
        version: Provider version, used for the Go import path.

    Returns:
        The descriptor owning the sealed mapping table.

    Raises:
        MappingError: Any construction failure; see `nbmap.core.errors`.
    """
    if source is not None:
        _check_config(source, CONFIG)
    table = build_table(source)

    return ProviderDescriptor(
        name=PACKAGE,
        display_name="Netbox",
        publisher="Hayden Young",
        description="A Pulumi package for creating and managing Netbox resources.",
        keywords=("pulumi", "netbox", "category/cloud"),
        license="Apache-2.0",
        homepage=REPOSITORY,
        repository=REPOSITORY,
        github_org="e-breuninger",
        version=version,
        config=CONFIG,
        table=table,
        javascript=JavaScriptInfo(
            dependencies={"@pulumi/pulumi": "^3.0.0"},
            dev_dependencies={"@types/node": "^10.0.0", "@types/mime": "^2.0.0"},
        ),
        python=PythonInfo(requires={"pulumi": ">=3.0.0,<4.0.0"}),
        golang=GolangInfo(import_base_path=go_import_base_path(version)),
        csharp=CSharpInfo(package_references={"Pulumi": "3.*"}),
        autonaming=AutonamingPolicy(max_length=255, separator="-"),
    )


@cache
def provider() -> ProviderDescriptor:
    """Return the process-wide provider, building it on first use."""
    settings = load_settings()
    source = load_schema(settings.schema_path) if settings.schema_path else NETBOX_SCHEMA
    return build_provider(source, version=settings.version)
