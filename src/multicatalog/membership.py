# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Membership predicates deciding which locations a catalog claims."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass

from .models import Location, MembershipTest


@dataclass(frozen=True, slots=True)
class AssetEntry:
    """Authoring-side asset entry linking a guid to its group and bundle.

    Attributes:
        guid: Asset identifier, appears among the keys of asset locations.
        group: Name of the asset group holding the entry.
        bundle_file_id: Internal path of the bundle the entry was packed into.
    """

    guid: str
    group: str
    bundle_file_id: str = ""


class AssetGroupMembership:
    """Claim locations built from entries of the configured asset groups."""

    def __init__(self, groups: Collection[str], entries: Sequence[AssetEntry]) -> None:
        self._groups = frozenset(groups)
        member_entries = [entry for entry in entries if entry.group in self._groups]
        self._guids = frozenset(entry.guid for entry in member_entries)
        # first entry wins for a bundle id, members or not
        self._bundle_groups: dict[str, str] = {}
        for entry in entries:
            if entry.bundle_file_id:
                self._bundle_groups.setdefault(entry.bundle_file_id, entry.group)

    @property
    def groups(self) -> frozenset[str]:
        """Return the asset groups claimed by the predicate."""
        return self._groups

    def __call__(self, location: Location) -> bool:
        if not self._groups:
            return False
        if location.is_bundle:
            group = self._bundle_groups.get(location.internal_path)
            return group is not None and group in self._groups
        return any(key in self._guids for key in location.keys)


def in_asset_groups(groups: Collection[str], entries: Sequence[AssetEntry]) -> MembershipTest:
    """Return a predicate claiming locations that originate from ``groups``.

    A bundle belongs when the entry packed into it lives in one of the groups;
    any other location belongs when one of its keys is the guid of a group
    entry. An empty ``groups`` collection claims nothing.

    Args:
        groups: Asset group names owned by the catalog.
        entries: Every asset entry known to the build.

    Returns:
        MembershipTest: Predicate suitable for :class:`CatalogSpec`.
    """

    return AssetGroupMembership(groups, entries)


def any_of(*tests: MembershipTest) -> MembershipTest:
    """Return a predicate matching when any of ``tests`` matches."""

    return _AnyOf(tests)


@dataclass(frozen=True, slots=True)
class _AnyOf:
    tests: tuple[MembershipTest, ...]

    def __call__(self, location: Location) -> bool:
        return any(test(location) for test in self.tests)


__all__ = [
    "AssetEntry",
    "AssetGroupMembership",
    "any_of",
    "in_asset_groups",
]
