"""Error taxonomy for building the provider mapping.

Every failure here happens while the mapping is being constructed. None of
them is recoverable at runtime: the fix is always a change to the table
definition, so each error names the offending entry and kind.
"""

from __future__ import annotations

from typing import Mapping, Sequence


class MappingError(RuntimeError):
    """Base class for all mapping construction failures."""


class MalformedNameError(MappingError):
    """Raised when a name cannot be turned into a valid token."""

    def __init__(self, name: str, reason: str = "must start with a letter"):
        self.name = name
        super().__init__(f"Malformed name {name!r}: {reason}")


class DuplicateKeyError(MappingError):
    """Raised when a raw key is registered twice for the same kind."""

    def __init__(self, kind: str, raw_key: str, message: str | None = None):
        self.kind = kind
        self.raw_key = raw_key
        super().__init__(message or f"Duplicate {kind} key: {raw_key!r}")


class TokenCollisionError(DuplicateKeyError):
    """Raised when two different entries derive the same token."""

    def __init__(self, kind: str, raw_key: str, token: str, existing_key: str):
        self.token = token
        self.existing_key = existing_key
        super().__init__(
            kind,
            raw_key,
            f"Token {token!r} for {kind} {raw_key!r} is already used by "
            f"{existing_key!r}",
        )


class UnknownOverrideTargetError(MappingError):
    """Raised when an override points at a field the upstream entry lacks."""

    def __init__(self, kind: str, raw_key: str, field: str, reason: str = ""):
        self.kind = kind
        self.raw_key = raw_key
        self.field = field
        if reason:
            message = f"Override on {kind} {raw_key!r} field {field!r} rejected: {reason}"
        else:
            message = f"Override on {kind} {raw_key!r} targets unknown field {field!r}"
        super().__init__(message)


class UnknownEntryError(MappingError):
    """Raised when a raw key is not exposed by the upstream schema."""

    def __init__(self, kind: str, raw_key: str):
        self.kind = kind
        self.raw_key = raw_key
        super().__init__(f"Upstream schema has no {kind} named {raw_key!r}")


class IncompleteMappingError(MappingError):
    """Raised on seal when upstream entries were never registered."""

    def __init__(self, missing: Mapping[str, Sequence[str]]):
        self.missing = {k: list(v) for k, v in missing.items() if v}
        parts = [
            f"{kind}: {', '.join(keys)}" for kind, keys in self.missing.items()
        ]
        super().__init__("Unmapped upstream entries - " + "; ".join(parts))


class SealedTableError(MappingError):
    """Raised when a published table is modified."""


class SchemaFormatError(MappingError):
    """Raised when an upstream schema document cannot be read."""


class ConfigError(MappingError):
    """Raised when tooling settings from the environment are invalid."""
