"""Built-in snapshot of the e-breuninger/netbox Terraform provider schema.

Used when no schema document is supplied. Only entry keys, field names and
config types are recorded; that is all the mapping checks against.
"""

from __future__ import annotations

from nbmap.core.upstream import StaticSchemaSource

_TAGGED = ("tags",)

RESOURCE_FIELDS: dict[str, tuple[str, ...]] = {
    "netbox_aggregate": ("prefix", "description", "rir_id", "tenant_id") + _TAGGED,
    "netbox_available_ip_address": (
        "prefix_id", "ip_range_id", "ip_address", "status", "dns_name",
        "description", "role", "tenant_id", "vrf_id", "interface_id",
        "object_type",
    ) + _TAGGED,
    "netbox_available_prefix": (
        "parent_prefix_id", "prefix_length", "prefix", "status", "description",
        "is_pool", "mark_utilized", "vrf_id", "tenant_id", "site_id", "vlan_id",
        "role_id",
    ) + _TAGGED,
    "netbox_circuit": ("cid", "status", "provider_id", "type_id", "tenant_id"),
    "netbox_circuit_provider": ("name", "slug"),
    "netbox_circuit_termination": (
        "circuit_id", "term_side", "site_id", "port_speed", "upstream_speed",
        "xconnect_id", "pp_info", "description", "custom_fields",
    ) + _TAGGED,
    "netbox_circuit_type": ("name", "slug"),
    "netbox_cluster": (
        "name", "cluster_type_id", "cluster_group_id", "site_id", "tenant_id",
    ) + _TAGGED,
    "netbox_cluster_group": ("name", "slug", "description"),
    "netbox_cluster_type": ("name", "slug"),
    "netbox_custom_field": (
        "name", "type", "content_types", "weight", "choices", "default",
        "description", "label", "required", "validation_maximum",
        "validation_minimum", "validation_regex",
    ),
    "netbox_device": (
        "name", "device_type_id", "role_id", "tenant_id", "platform_id",
        "location_id", "serial", "site_id", "cluster_id", "comments", "status",
        "custom_fields", "primary_ipv4", "primary_ipv6",
    ) + _TAGGED,
    "netbox_device_role": ("name", "slug", "color_hex", "vm_role") + _TAGGED,
    "netbox_device_type": (
        "model", "slug", "manufacturer_id", "part_number", "u_height",
        "is_full_depth",
    ) + _TAGGED,
    "netbox_interface": (
        "name", "virtual_machine_id", "description", "enabled", "mac_address",
        "mode", "mtu", "tagged_vlans", "untagged_vlan", "type",
    ) + _TAGGED,
    "netbox_ip_address": (
        "ip_address", "status", "dns_name", "description", "role", "tenant_id",
        "vrf_id", "interface_id", "object_type", "nat_inside_address_id",
    ) + _TAGGED,
    "netbox_ip_range": (
        "start_address", "end_address", "status", "description", "role_id",
        "tenant_id", "vrf_id",
    ) + _TAGGED,
    "netbox_ipam_role": ("name", "slug", "weight", "description") + _TAGGED,
    "netbox_manufacturer": ("name", "slug"),
    "netbox_platform": ("name", "slug"),
    "netbox_prefix": (
        "prefix", "status", "description", "is_pool", "mark_utilized", "vrf_id",
        "tenant_id", "site_id", "vlan_id", "role_id",
    ) + _TAGGED,
    "netbox_primary_ip": ("ip_address_id", "virtual_machine_id", "ip_address_version"),
    "netbox_region": ("name", "slug", "parent_region_id", "description"),
    "netbox_rir": ("name", "slug", "is_private"),
    "netbox_service": (
        "name", "virtual_machine_id", "protocol", "port", "ports", "description",
    ),
    "netbox_site": (
        "name", "slug", "status", "description", "facility", "asn", "time_zone",
        "region_id", "tenant_id", "custom_fields",
    ) + _TAGGED,
    "netbox_tag": ("name", "slug", "color_hex", "description"),
    "netbox_tenant": ("name", "slug", "description", "group_id") + _TAGGED,
    "netbox_tenant_group": ("name", "slug", "parent_id", "description"),
    "netbox_token": ("user_id", "key", "allowed_ips", "write_enabled", "expires"),
    "netbox_user": ("username", "password", "active", "staff"),
    "netbox_virtual_machine": (
        "name", "cluster_id", "site_id", "tenant_id", "platform_id", "role_id",
        "comments", "memory_mb", "vcpus", "disk_size_gb", "status",
        "custom_fields", "primary_ipv4", "primary_ipv6",
    ) + _TAGGED,
    "netbox_vlan": (
        "name", "vid", "status", "description", "site_id", "tenant_id",
        "role_id", "group_id",
    ) + _TAGGED,
    "netbox_vrf": ("name", "description", "enforce_unique", "rd", "tenant_id") + _TAGGED,
}

DATA_SOURCE_FIELDS: dict[str, tuple[str, ...]] = {
    "netbox_cluster": (
        "name", "cluster_id", "cluster_type_id", "cluster_group_id", "site_id",
    ) + _TAGGED,
    "netbox_cluster_group": ("id", "name", "slug", "description"),
    "netbox_cluster_type": ("id", "name", "slug"),
    "netbox_device_role": ("id", "name", "slug", "color_hex"),
    "netbox_device_type": (
        "id", "model", "slug", "part_number", "manufacturer", "u_height",
        "is_full_depth",
    ),
    "netbox_interfaces": ("filter", "name_regex", "limit", "interfaces"),
    "netbox_ip_addresses": ("filter", "limit", "ip_addresses"),
    "netbox_ip_range": ("id", "contains"),
    "netbox_platform": ("id", "name", "slug"),
    "netbox_prefix": (
        "id", "prefix", "cidr", "vrf_id", "vlan_vid", "vlan_id", "status",
        "description",
    ) + _TAGGED,
    "netbox_region": ("id", "filter", "name", "slug", "parent_region_id"),
    "netbox_site": (
        "id", "site_id", "name", "slug", "asn", "description", "region_id",
        "status", "tenant_id", "time_zone",
    ),
    "netbox_tag": ("id", "name", "slug", "description"),
    "netbox_tenant": ("id", "name", "slug", "description", "group_id"),
    "netbox_tenant_group": ("id", "name", "slug", "description", "parent_id"),
    "netbox_tenants": ("filter", "limit", "tenants"),
    "netbox_virtual_machines": ("filter", "name_regex", "limit", "vms"),
    "netbox_vlan": (
        "id", "name", "vid", "status", "description", "site", "tenant", "role",
        "group_id",
    ),
    "netbox_vrf": ("id", "name", "tenant_id", "description"),
}

CONFIG_TYPES: dict[str, str] = {
    "server_url": "string",
    "api_token": "string",
    "allow_insecure_https": "bool",
    "headers": "map(string)",
    "request_timeout": "number",
    "skip_version_check": "bool",
}

NETBOX_SCHEMA = StaticSchemaSource.from_fields(
    resources=RESOURCE_FIELDS,
    data_sources=DATA_SOURCE_FIELDS,
    config=CONFIG_TYPES,
)
