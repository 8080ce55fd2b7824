# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pull transitive dependencies from the default catalog into spec catalogs.

A spec catalog must load without the default catalog being resident, so every
location it depends on travels with it. Dependencies are looked up in the
default catalog only: a dependency assigned to a *different* spec catalog is
never found there and is reported as unresolved, even though it exists in the
build output.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from .diagnostics import CatalogDiagnostic, unresolved_dependency
from .models import Catalog, Location

LOGGER = logging.getLogger(__name__)


def close_catalog(default: Catalog, catalog: Catalog) -> list[CatalogDiagnostic]:
    """Append every default-catalog location ``catalog`` transitively needs.

    Args:
        default: Default catalog searched for dependencies; never mutated.
        catalog: Spec catalog extended in place (append-only).

    Returns:
        list[CatalogDiagnostic]: Unresolved dependencies not previously
        reported for ``catalog``.
    """

    diagnostics: list[CatalogDiagnostic] = []
    pending: deque[Location] = deque(catalog.locations)
    visited: set[Location] = set()
    while pending:
        entry = pending.popleft()
        if entry in visited:
            continue
        visited.add(entry)
        if not entry.dependencies:
            continue

        for address in entry.dependencies:
            dependency = default.find(address)
            if dependency is not None:
                pending.append(dependency)
                if catalog.add(dependency):
                    LOGGER.debug("Pulled %s into catalog '%s'", address, catalog.name)
            elif catalog.find(address) is None and address not in catalog.unresolved:
                catalog.unresolved.append(address)
                diagnostic = unresolved_dependency(catalog.name, address)
                LOGGER.warning("%s (catalog '%s')", diagnostic.message, catalog.name)
                diagnostics.append(diagnostic)
    return diagnostics


def close_dependencies(default: Catalog, others: Iterable[Catalog]) -> list[CatalogDiagnostic]:
    """Close every spec catalog in ``others`` independently.

    Args:
        default: Default catalog searched for dependencies.
        others: Spec catalogs extended in place.

    Returns:
        list[CatalogDiagnostic]: Unresolved dependency diagnostics for all catalogs.
    """

    diagnostics: list[CatalogDiagnostic] = []
    for catalog in others:
        if catalog.is_default:
            continue
        diagnostics.extend(close_catalog(default, catalog))
    return diagnostics


__all__ = ["close_catalog", "close_dependencies"]
