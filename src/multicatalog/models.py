# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Location, catalog specification, and catalog records."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, TypeAlias

from .types import (
    CATALOG_SUFFIX,
    DEFAULT_CATALOG_NAME,
    DEFAULT_VARIANT_GROUP,
    EXTERNAL_REFERENCE_PREFIX,
    ResourceKind,
)


@dataclass(frozen=True, slots=True, eq=False)
class Location:
    """Immutable build artifact record handed over by the build pipeline.

    Locations compare by identity: two records describe the same artifact
    only when they are the same object. Rewritten copies are new locations.

    Attributes:
        id: Opaque identifier unique within the location table.
        kind: Resource category; only bundles are path-rewritten.
        internal_path: Template or concrete path of the artifact.
        keys: Ordered lookup keys, the first one being the address.
        dependencies: Addresses of the locations required at load time.
        provider: Opaque provider tag carried through unchanged.
        payload: Opaque data carried through unchanged.
    """

    id: str
    kind: ResourceKind | str
    internal_path: str
    keys: tuple[str, ...] = ()
    dependencies: tuple[str, ...] = ()
    provider: str = ""
    payload: Any = field(default=None, repr=False)

    @property
    def address(self) -> str | None:
        """Return the canonical address (first key) or ``None`` without keys."""
        return self.keys[0] if self.keys else None

    @property
    def is_bundle(self) -> bool:
        """Return ``True`` when the location is a relocatable bundle."""
        return self.kind == ResourceKind.BUNDLE

    def is_external(self, prefix: str = EXTERNAL_REFERENCE_PREFIX) -> bool:
        """Return ``True`` when ``internal_path`` marks an externally managed reference."""
        return self.internal_path.startswith(prefix)

    def with_internal_path(self, internal_path: str) -> Location:
        """Return a copy of the location pointing at ``internal_path``."""
        return replace(self, internal_path=internal_path)


MembershipTest: TypeAlias = Callable[[Location], bool]


def _claims_nothing(location: Location) -> bool:
    del location
    return False


@dataclass(frozen=True, slots=True)
class CatalogSpec:
    """User-declared rule set describing one output catalog.

    Attributes:
        name: Catalog identifier and base filename.
        variant_group: Group tag shared by interchangeable catalogs.
        membership_test: Pure predicate selecting the locations of the catalog.
        output_path: Template of the directory receiving the catalog files.
        runtime_load_path: Template of the path bundles are loaded from at runtime.
        device_requirements: Device-class properties served by the catalog.
    """

    name: str
    variant_group: str | None = None
    membership_test: MembershipTest = field(default=_claims_nothing, compare=False)
    output_path: str = ""
    runtime_load_path: str = ""
    device_requirements: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), compare=False)

    @property
    def variant_name(self) -> str:
        """Return the variant group, falling back to the implicit group."""
        return self.variant_group or DEFAULT_VARIANT_GROUP

    @property
    def filename(self) -> str:
        """Return the filename of the serialized catalog."""
        return f"{self.name}{CATALOG_SUFFIX}"


@dataclass(slots=True)
class Catalog:
    """Ordered, duplicate-free collection of locations forming one loadable unit.

    ``spec`` is ``None`` for the implicit default catalog. Locations are only
    ever appended; ``files`` lists the side artifacts the catalog carries and
    ``unresolved`` the dependency addresses already reported for it.
    """

    spec: CatalogSpec | None = None
    locations: list[Location] = field(default_factory=list, init=False)
    files: list[str] = field(default_factory=list, init=False)
    unresolved: list[str] = field(default_factory=list, init=False)
    _members: set[Location] = field(default_factory=set, init=False, repr=False)
    _addresses: dict[str, Location] = field(default_factory=dict, init=False, repr=False)

    @property
    def is_default(self) -> bool:
        """Return ``True`` for the implicit default catalog."""
        return self.spec is None

    @property
    def name(self) -> str:
        """Return the catalog identifier."""
        return DEFAULT_CATALOG_NAME if self.spec is None else self.spec.name

    @property
    def filename(self) -> str:
        """Return the filename of the serialized catalog."""
        return f"{DEFAULT_CATALOG_NAME}{CATALOG_SUFFIX}" if self.spec is None else self.spec.filename

    @property
    def variant_group(self) -> str | None:
        """Return the resolved variant group, ``None`` for the default catalog."""
        return None if self.spec is None else self.spec.variant_name

    @property
    def declared_variant_group(self) -> str | None:
        """Return the variant group set on the spec, ``None`` when left unset."""
        return None if self.spec is None else (self.spec.variant_group or None)

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when no location has been assigned."""
        return not self.locations

    def __len__(self) -> int:
        return len(self.locations)

    def __iter__(self) -> Iterator[Location]:
        return iter(self.locations)

    def __contains__(self, location: object) -> bool:
        return location in self._members

    def add(self, location: Location) -> bool:
        """Append ``location`` unless it is already present.

        Args:
            location: Location to append.

        Returns:
            bool: ``True`` when the location was appended.
        """

        if location in self._members:
            return False
        self._members.add(location)
        self.locations.append(location)
        address = location.address
        if address is not None:
            self._addresses.setdefault(address, location)
        return True

    def extend(self, locations: Iterable[Location]) -> None:
        """Append every location in ``locations`` preserving order."""
        for location in locations:
            self.add(location)

    def find(self, address: str) -> Location | None:
        """Return the first location whose address equals ``address``."""
        return self._addresses.get(address)

    def addresses(self) -> list[str]:
        """Return the addresses of the catalog in insertion order."""
        return [location.address for location in self.locations if location.address is not None]


__all__ = [
    "Catalog",
    "CatalogSpec",
    "Location",
    "MembershipTest",
]
