# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Logical input handed to a platform resource-manifest generator."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .builder import CatalogBuildResult
from .models import Catalog
from .variants import group_by_variant


@dataclass(frozen=True, slots=True)
class ManifestInput:
    """Catalogs and variant groupings exposed to a manifest generator.

    Attributes:
        catalogs: Non-empty spec catalogs in declaration order.
        variant_groups: Catalog names keyed by variant group.
        device_requirements: Device properties keyed by catalog name.
    """

    catalogs: tuple[Catalog, ...]
    variant_groups: Mapping[str, tuple[str, ...]]
    device_requirements: Mapping[str, Mapping[str, str]]

    def requirements_for(self, group: str) -> dict[str, Mapping[str, str]]:
        """Return the device requirements of every catalog in ``group``."""

        return {name: self.device_requirements[name] for name in self.variant_groups.get(group, ())}


def manifest_input(result: CatalogBuildResult) -> ManifestInput:
    """Collect the catalog structure consumed by a manifest generator.

    Args:
        result: Completed catalog build.

    Returns:
        ManifestInput: Read-only view over the non-empty spec catalogs.
    """

    catalogs = tuple(catalog for catalog in result.catalogs if not catalog.is_empty)
    groups = {
        group: tuple(catalog.name for catalog in members)
        for group, members in group_by_variant(catalogs, implicit=True).items()
    }
    requirements = {
        catalog.name: MappingProxyType(dict(catalog.spec.device_requirements))
        for catalog in catalogs
        if catalog.spec is not None
    }
    return ManifestInput(
        catalogs=catalogs,
        variant_groups=MappingProxyType(groups),
        device_requirements=MappingProxyType(requirements),
    )


__all__ = ["ManifestInput", "manifest_input"]
