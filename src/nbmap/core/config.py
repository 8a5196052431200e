"""Environment-driven settings for the mapping tooling.

These only steer the tooling (where to read an upstream schema from, which
version to stamp into the Go import path, where to export). The provider's
own env-var defaults (`NETBOX_API_TOKEN`, `NETBOX_SERVER_URL`) are declared
in `nbmap.core.provider` and are never read here.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from nbmap.core.errors import ConfigError

SCHEMA_PATH_ENV = "NBMAP_SCHEMA_PATH"
PROVIDER_VERSION_ENV = "NBMAP_PROVIDER_VERSION"
OUTPUT_ENV = "NBMAP_OUTPUT"

DEFAULT_VERSION = "0.0.1"
DEFAULT_OUTPUT = Path("schema-mapping.json")

_VERSION_RE = re.compile(r"^v?(\d+)\.(\d+)\.(\d+)([-+].*)?$")


@dataclass(frozen=True)
class Settings:
    """Resolved tooling settings."""

    schema_path: Path | None
    version: str
    output: Path


def normalize_version(raw: str) -> str:
    """Strip a leading `v` and check the value looks like semver."""
    value = raw.strip()
    if not _VERSION_RE.match(value):
        raise ConfigError(f"Version must be a semantic version, got {raw!r}")
    return value[1:] if value.startswith("v") else value


def load_settings() -> Settings:
    """Resolve settings from the environment."""
    raw_schema = os.getenv(SCHEMA_PATH_ENV, "").strip()
    raw_version = os.getenv(PROVIDER_VERSION_ENV)
    raw_output = os.getenv(OUTPUT_ENV, "").strip()

    return Settings(
        schema_path=Path(raw_schema) if raw_schema else None,
        version=normalize_version(raw_version) if raw_version else DEFAULT_VERSION,
        output=Path(raw_output) if raw_output else DEFAULT_OUTPUT,
    )
