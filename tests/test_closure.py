# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for dependency closure of spec catalogs."""

from __future__ import annotations

import logging

import pytest

from multicatalog.closure import close_catalog, close_dependencies
from multicatalog.diagnostics import DiagnosticKind
from multicatalog.models import Catalog, CatalogSpec, Location
from multicatalog.partition import partition


def _loc(address: str, *dependencies: str) -> Location:
    return Location(id=address, kind="asset", internal_path=f"Assets/{address}", keys=(address,), dependencies=dependencies)


def _claims(*ids: str):
    wanted = set(ids)
    return lambda location: location.id in wanted


def _ids(catalog: Catalog) -> list[str]:
    return [location.id for location in catalog]


def test_scenario_pulls_dependency_without_moving_it(scenario_locations: list[Location]) -> None:
    result = partition(scenario_locations, [CatalogSpec(name="extra", membership_test=_claims("2"))])
    diagnostics = close_dependencies(result.default, result.others)
    assert diagnostics == []
    assert _ids(result.others[0]) == ["2", "1"]
    assert _ids(result.default) == ["1", "3"]
    assert result.others[0].locations[1] is result.default.locations[0]


def test_transitive_dependencies_are_pulled() -> None:
    locations = [_loc("A", "B"), _loc("B", "C"), _loc("C"), _loc("D")]
    result = partition(locations, [CatalogSpec(name="extra", membership_test=_claims("A"))])
    close_dependencies(result.default, result.others)
    assert _ids(result.others[0]) == ["A", "B", "C"]
    assert _ids(result.default) == ["B", "C", "D"]


def test_cycles_terminate_and_include_each_location_once() -> None:
    locations = [_loc("A", "B"), _loc("B", "A")]
    result = partition(locations, [CatalogSpec(name="extra", membership_test=_claims("A"))])
    diagnostics = close_dependencies(result.default, result.others)
    assert diagnostics == []
    assert _ids(result.others[0]) == ["A", "B"]


def test_diamond_dependency_added_once() -> None:
    locations = [_loc("top", "left", "right"), _loc("left", "base"), _loc("right", "base"), _loc("base")]
    result = partition(locations, [CatalogSpec(name="extra", membership_test=_claims("top"))])
    close_dependencies(result.default, result.others)
    assert _ids(result.others[0]) == ["top", "left", "right", "base"]


def test_unresolved_dependency_is_reported_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    result = partition([_loc("A", "ghost")], [CatalogSpec(name="extra", membership_test=_claims("A"))])
    with caplog.at_level(logging.WARNING, logger="multicatalog.closure"):
        diagnostics = close_dependencies(result.default, result.others)
    assert len(diagnostics) == 1
    diagnostic = diagnostics[0]
    assert diagnostic.kind is DiagnosticKind.UNRESOLVED_DEPENDENCY
    assert diagnostic.catalog == "extra"
    assert diagnostic.subjects == ("ghost",)
    assert "ghost" in caplog.text
    assert _ids(result.others[0]) == ["A"]


def test_dependency_present_locally_is_not_reported() -> None:
    locations = [_loc("A", "B"), _loc("B")]
    result = partition(locations, [CatalogSpec(name="extra", membership_test=_claims("A", "B"))])
    assert close_dependencies(result.default, result.others) == []
    assert _ids(result.others[0]) == ["A", "B"]


def test_dependency_in_other_spec_catalog_is_unresolved() -> None:
    locations = [_loc("A", "B"), _loc("B")]
    specs = [
        CatalogSpec(name="first", membership_test=_claims("A")),
        CatalogSpec(name="second", membership_test=_claims("B")),
    ]
    result = partition(locations, specs)
    diagnostics = close_dependencies(result.default, result.others)
    assert [(item.catalog, item.subjects) for item in diagnostics] == [("first", ("B",))]
    assert _ids(result.others[0]) == ["A"]


def test_closure_is_idempotent() -> None:
    locations = [_loc("A", "B", "ghost"), _loc("B", "C"), _loc("C")]
    result = partition(locations, [CatalogSpec(name="extra", membership_test=_claims("A"))])
    catalog = result.others[0]
    first = close_catalog(result.default, catalog)
    snapshot = list(catalog.locations)
    second = close_catalog(result.default, catalog)
    assert len(first) == 1
    assert second == []
    assert catalog.locations == snapshot


def test_default_catalog_is_not_mutated() -> None:
    locations = [_loc("A", "B"), _loc("B")]
    result = partition(locations, [CatalogSpec(name="extra", membership_test=_claims("A"))])
    before = list(result.default.locations)
    close_dependencies(result.default, [result.default, *result.others])
    assert result.default.locations == before


def test_lookup_uses_first_default_match() -> None:
    first = _loc("B")
    duplicate = Location(id="B-copy", kind="asset", internal_path="Assets/B2", keys=("B",))
    result = partition([_loc("A", "B"), first, duplicate], [CatalogSpec(name="extra", membership_test=_claims("A"))])
    close_dependencies(result.default, result.others)
    assert _ids(result.others[0]) == ["A", "B"]


def test_dependencies_match_addresses_not_ids() -> None:
    locations = [
        Location(id="1", kind="asset", internal_path="Assets/a", keys=("A",)),
        Location(id="2", kind="asset", internal_path="Assets/b", keys=("B",), dependencies=("A",)),
        Location(id="3", kind="asset", internal_path="Assets/c", keys=("C",), dependencies=("1",)),
    ]
    specs = [
        CatalogSpec(name="by-address", membership_test=_claims("2")),
        CatalogSpec(name="by-id", membership_test=_claims("3")),
    ]
    result = partition(locations, specs)
    diagnostics = close_dependencies(result.default, result.others)

    assert _ids(result.others[0]) == ["2", "1"]
    assert _ids(result.default) == ["1"]
    assert _ids(result.others[1]) == ["3"]
    assert [(item.catalog, item.subjects) for item in diagnostics] == [("by-id", ("1",))]
