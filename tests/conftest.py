# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from multicatalog.models import Location


@pytest.fixture
def scenario_locations() -> list[Location]:
    """Return three assets where ``2`` depends on ``1``."""
    return [
        Location(id="1", kind="asset", internal_path="Assets/a.prefab", keys=("1",)),
        Location(id="2", kind="asset", internal_path="Assets/b.prefab", keys=("2",), dependencies=("1",)),
        Location(id="3", kind="asset", internal_path="Assets/c.prefab", keys=("3",)),
    ]
