# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""End-to-end tests for catalog build runs."""

from __future__ import annotations

import logging

import pytest

from multicatalog import CatalogBuilder, CatalogSpec, DiagnosticKind, Location, build_catalogs
from multicatalog.config import BuildSettings


def _loc(address: str, *dependencies: str) -> Location:
    return Location(id=address, kind="asset", internal_path=f"Assets/{address}", keys=(address,), dependencies=dependencies)


def _claims(*ids: str):
    wanted = set(ids)
    return lambda location: location.id in wanted


def test_build_closes_catalogs_and_gathers_outputs(scenario_locations: list[Location]) -> None:
    specs = [
        CatalogSpec(name="extra", membership_test=_claims("2")),
        CatalogSpec(name="unused"),
    ]
    result = build_catalogs(scenario_locations, specs)

    assert [catalog.name for catalog in result.catalogs] == ["extra", "unused"]
    assert [catalog.name for catalog in result.output_catalogs] == ["default", "extra"]
    assert [location.id for location in result.catalog("extra")] == ["2", "1"]
    assert [location.id for location in result.default] == ["1", "3"]
    assert result.catalog("missing") is None
    assert not result.has_issues


def test_build_reports_unresolved_and_variant_mismatch(caplog: pytest.LogCaptureFixture) -> None:
    locations = [_loc("hd-tex", "hd-shader"), _loc("shared"), _loc("sd-tex"), _loc("hd-shader"), _loc("orphan", "ghost")]
    specs = [
        CatalogSpec(name="hd", variant_group="textures", membership_test=_claims("hd-tex", "shared")),
        CatalogSpec(name="sd", variant_group="textures", membership_test=_claims("sd-tex")),
        CatalogSpec(name="dangling", membership_test=_claims("orphan")),
    ]

    with caplog.at_level(logging.WARNING):
        result = build_catalogs(locations, specs)

    assert [item.subjects for item in result.unresolved] == [("ghost",)]
    assert result.variant_differences == {
        "hd": frozenset({"sd-tex"}),
        "sd": frozenset({"hd-tex", "hd-shader", "shared"}),
    }
    kinds = [item.kind for item in result.diagnostics]
    assert kinds.count(DiagnosticKind.VARIANT_MISMATCH) == 2
    assert result.has_issues
    assert "ghost" in caplog.text


def test_builder_runs_are_independent(scenario_locations: list[Location]) -> None:
    builder = CatalogBuilder(settings=BuildSettings(profile_id="Debug"))
    spec = CatalogSpec(name="extra", membership_test=_claims("2"))
    first = builder.run(scenario_locations, [spec])
    second = builder.run(scenario_locations, [spec])
    assert first.catalogs[0] is not second.catalogs[0]
    assert len(second.catalogs[0]) == 2
    assert builder.settings.profile_id == "Debug"


def test_location_table_is_not_modified(scenario_locations: list[Location]) -> None:
    before = list(scenario_locations)
    build_catalogs(scenario_locations, [CatalogSpec(name="extra", membership_test=_claims("2", "3"))])
    assert scenario_locations == before


def test_untagged_catalogs_do_not_report_variant_differences() -> None:
    specs = [
        CatalogSpec(name="dlc1", membership_test=_claims("a")),
        CatalogSpec(name="dlc2", membership_test=_claims("b")),
    ]
    result = build_catalogs([_loc("a"), _loc("b")], specs)
    assert result.variant_differences == {}
    assert not result.has_issues
