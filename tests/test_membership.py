# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for asset-group membership predicates."""

from __future__ import annotations

from multicatalog.membership import AssetEntry, any_of, in_asset_groups
from multicatalog.models import Location

ENTRIES = [
    AssetEntry(guid="guid-hero", group="Characters", bundle_file_id="characters_bundle"),
    AssetEntry(guid="guid-tree", group="Environment", bundle_file_id="environment_bundle"),
    AssetEntry(guid="guid-rock", group="Environment", bundle_file_id="environment_bundle"),
]


def test_asset_matches_on_guid_key() -> None:
    test = in_asset_groups(["Characters"], ENTRIES)
    assert test(Location(id="1", kind="asset", internal_path="Assets/hero.prefab", keys=("guid-hero", "Hero")))
    assert not test(Location(id="2", kind="asset", internal_path="Assets/tree.prefab", keys=("guid-tree",)))


def test_bundle_matches_on_bundle_file_id() -> None:
    test = in_asset_groups(["Environment"], ENTRIES)
    assert test(Location(id="b", kind="bundle", internal_path="environment_bundle", keys=("env.bundle",)))
    assert not test(Location(id="c", kind="bundle", internal_path="characters_bundle", keys=("chars.bundle",)))
    assert not test(Location(id="u", kind="bundle", internal_path="unknown_bundle", keys=("guid-tree",)))


def test_no_groups_claims_nothing() -> None:
    test = in_asset_groups([], ENTRIES)
    assert not test(Location(id="1", kind="asset", internal_path="x", keys=("guid-hero",)))


def test_any_of_combines_predicates() -> None:
    test = any_of(in_asset_groups(["Characters"], ENTRIES), lambda location: location.id == "special")
    assert test(Location(id="special", kind="asset", internal_path="x", keys=("k",)))
    assert test(Location(id="1", kind="asset", internal_path="x", keys=("guid-hero",)))
    assert not test(Location(id="2", kind="asset", internal_path="x", keys=("guid-rock",)))
