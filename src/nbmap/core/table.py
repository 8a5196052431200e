"""Mapping table from upstream schema keys to package tokens.

The table is built once and then sealed. While under construction every
`register` call derives the token, checks overrides and enforces that both
the raw key is unique within its kind and the derived token is unique
across the whole table. Sealing
checks completeness against the upstream source (when one is attached) and
freezes the table; any later `register` raises `SealedTableError`.

Entries are kept in an ordered list for deterministic iteration, plus two
dictionaries for O(1) duplicate detection.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator

from nbmap.core.errors import (
    DuplicateKeyError,
    IncompleteMappingError,
    MalformedNameError,
    SealedTableError,
    TokenCollisionError,
    UnknownEntryError,
    UnknownOverrideTargetError,
)
from nbmap.core.models import LANGUAGES, EntryDescriptor, EntryKind, FieldOverride
from nbmap.core.tokens import INDEX_MODULE, PACKAGE, data_source_token, resource_token
from nbmap.core.upstream import SchemaSource


class MappingTable:
    """Ordered, unique-keyed set of entry descriptors for one package."""

    def __init__(self, package: str = PACKAGE, source: SchemaSource | None = None):
        """
        Create an empty table.

        Args:
            package: Package namespace used for every derived token.
            source: Optional upstream schema; when given, keys and override
                    targets are checked against it and `seal` checks that
                    every upstream entry is mapped.
        """
        self.package = package
        self.source = source
        self._entries: list[EntryDescriptor] = []
        self._by_key: dict[tuple[EntryKind, str], EntryDescriptor] = {}
        self._by_token: dict[str, EntryDescriptor] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def _derive(self, kind: EntryKind, module: str, name: str) -> str:
        if kind is EntryKind.RESOURCE:
            return resource_token(module, name, self.package)
        return data_source_token(module, name, self.package)

    def _check_overrides(
        self, kind: EntryKind, raw_key: str, overrides: tuple[FieldOverride, ...]
    ) -> None:
        seen: set[str] = set()
        for override in overrides:
            if override.field in seen:
                raise DuplicateKeyError(
                    kind.label,
                    raw_key,
                    f"Field {override.field!r} of {kind.label} {raw_key!r} "
                    "is overridden twice",
                )
            seen.add(override.field)
            unknown = sorted(set(override.names) - set(LANGUAGES))
            if unknown:
                raise UnknownOverrideTargetError(
                    kind.label,
                    raw_key,
                    override.field,
                    f"unknown language {', '.join(unknown)}",
                )

        if self.source is None:
            return
        known = self.source.fields(kind, raw_key)
        if known is None:
            raise UnknownEntryError(kind.label, raw_key)
        for override in overrides:
            if override.field not in known:
                raise UnknownOverrideTargetError(kind.label, raw_key, override.field)

    def register(
        self,
        raw_key: str,
        kind: EntryKind,
        name: str,
        module: str = INDEX_MODULE,
        overrides: Iterable[FieldOverride] = (),
    ) -> EntryDescriptor:
        """
        Derive the token for an upstream entry and add it to the table.

        Args:
            raw_key: Upstream key, e.g. `netbox_device`.
            kind: Whether the entry is a resource or a data source.
            name: Entry name in the package, e.g. `Device` or `getCluster`.
            module: Module the entry lives in.
            overrides: Field-level overrides for the entry.

        Returns:
            The inserted EntryDescriptor.

        Raises:
            SealedTableError: If the table was already sealed.
            MalformedNameError: If `raw_key` lacks the package prefix or
                                `name` does not start with a letter.
            DuplicateKeyError: If `raw_key` is already registered for `kind`.
            TokenCollisionError: If the derived token is already taken by
                                 any entry, of either kind.
            UnknownEntryError: If the upstream source lacks `raw_key`.
            UnknownOverrideTargetError: If an override targets an unknown field.
        """
        if self._sealed:
            raise SealedTableError(
                f"Cannot register {kind.label} {raw_key!r}: table is sealed"
            )
        prefix = f"{self.package}_"
        if not raw_key.startswith(prefix) or len(raw_key) == len(prefix):
            raise MalformedNameError(raw_key, f"raw key must start with {prefix!r}")
        if (kind, raw_key) in self._by_key:
            raise DuplicateKeyError(kind.label, raw_key)

        token = self._derive(kind, module, name)
        existing = self._by_token.get(token)
        if existing is not None:
            raise TokenCollisionError(kind.label, raw_key, token, existing.raw_key)

        overrides = tuple(overrides)
        self._check_overrides(kind, raw_key, overrides)

        entry = EntryDescriptor(
            kind=kind, raw_key=raw_key, token=token, overrides=overrides
        )
        self._entries.append(entry)
        self._by_key[(kind, raw_key)] = entry
        self._by_token[token] = entry
        return entry

    def resource(self, raw_key: str, name: str, **kwargs) -> EntryDescriptor:
        """Register a resource entry."""
        return self.register(raw_key, EntryKind.RESOURCE, name, **kwargs)

    def data_source(self, raw_key: str, name: str, **kwargs) -> EntryDescriptor:
        """Register a data source entry."""
        return self.register(raw_key, EntryKind.DATA_SOURCE, name, **kwargs)

    def missing(self) -> dict[str, list[str]]:
        """Return upstream keys per kind that have no entry yet."""
        if self.source is None:
            return {}
        return {
            kind.label: [
                key for key in self.source.keys(kind) if (kind, key) not in self._by_key
            ]
            for kind in EntryKind
        }

    def seal(self) -> MappingTable:
        """
        Publish the table.

        Raises:
            IncompleteMappingError: If an upstream entry has not been mapped.
        """
        if self._sealed:
            return self
        missing = self.missing()
        if any(missing.values()):
            raise IncompleteMappingError(missing)
        self._sealed = True
        return self

    def get(self, kind: EntryKind, raw_key: str) -> EntryDescriptor | None:
        return self._by_key.get((kind, raw_key))

    def entries(self, kind: EntryKind | None = None) -> list[EntryDescriptor]:
        """Return entries in registration order, optionally of one kind."""
        if kind is None:
            return list(self._entries)
        return [e for e in self._entries if e.kind is kind]

    def keys(self, kind: EntryKind) -> list[str]:
        return [e.raw_key for e in self.entries(kind)]

    def tokens(self, kind: EntryKind) -> list[str]:
        return [e.token for e in self.entries(kind)]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[EntryDescriptor]:
        return iter(list(self._entries))

    def __contains__(self, item: object) -> bool:
        """
        Check membership by `(kind, raw_key)` or by bare raw key of any kind.
        """
        if isinstance(item, str):
            return any((kind, item) in self._by_key for kind in EntryKind)
        return item in self._by_key


def filter_entries(
    entries: list[EntryDescriptor], name_regex: str | None
) -> list[EntryDescriptor]:
    """Filter entries by regex on raw key or token (or keep all if regex is None)."""
    if not name_regex:
        return entries
    rx = re.compile(name_regex)
    return [e for e in entries if rx.search(e.raw_key) or rx.search(e.token)]
