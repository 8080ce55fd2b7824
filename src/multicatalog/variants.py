# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Consistency checks across catalogs declared as variants of one another."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Catalog
from .types import EXTERNAL_REFERENCE_PREFIX


def group_by_variant(catalogs: Iterable[Catalog], *, implicit: bool = False) -> dict[str, list[Catalog]]:
    """Group spec catalogs by their variant group.

    The default catalog carries no variant tag and is always left out. Spec
    catalogs without a variant group stand alone and are left out too, unless
    ``implicit`` files them under the implicit group handed to manifest
    generators.

    Args:
        catalogs: Catalogs to group.
        implicit: Group untagged catalogs under the implicit variant group.

    Returns:
        dict[str, list[Catalog]]: Catalogs keyed by variant group, in input order.
    """

    groups: dict[str, list[Catalog]] = {}
    for catalog in catalogs:
        group = catalog.variant_group if implicit else catalog.declared_variant_group
        if group is None:
            continue
        groups.setdefault(group, []).append(catalog)
    return groups


def address_set(catalog: Catalog, *, external_prefix: str = EXTERNAL_REFERENCE_PREFIX) -> frozenset[str]:
    """Return the addresses a catalog exposes for variant comparison.

    Externally referenced bundles differ between variants by construction and
    are excluded, as are locations without keys.

    Args:
        catalog: Catalog to inspect.
        external_prefix: Prefix marking externally managed references.

    Returns:
        frozenset[str]: Addresses of the comparable locations.
    """

    return frozenset(
        location.address
        for location in catalog.locations
        if location.address is not None and not location.is_external(external_prefix)
    )


def check_variants(
    catalogs: Iterable[Catalog],
    *,
    external_prefix: str = EXTERNAL_REFERENCE_PREFIX,
) -> dict[str, frozenset[str]]:
    """Report catalogs whose addresses diverge from their variant group.

    Args:
        catalogs: Catalogs produced by a partitioning run.
        external_prefix: Prefix marking externally managed references.

    Returns:
        dict[str, frozenset[str]]: Catalog names mapped to the symmetric
        difference between their address set and the union of their group;
        catalogs without differences are omitted. Untagged and empty catalogs
        never diverge.
    """

    differences: dict[str, frozenset[str]] = {}
    # empty catalogs are never written
    written = [catalog for catalog in catalogs if not catalog.is_empty]
    for members in group_by_variant(written).values():
        if len(members) < 2:
            continue
        addresses = {catalog.name: address_set(catalog, external_prefix=external_prefix) for catalog in members}
        union = frozenset().union(*addresses.values())
        for name, exposed in addresses.items():
            difference = exposed ^ union
            if difference:
                differences[name] = difference
    return differences


__all__ = ["address_set", "check_variants", "group_by_variant"]
