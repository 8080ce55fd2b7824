# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Assign locations to catalogs using first-match-wins membership rules."""

from __future__ import annotations

import logging
import os
import posixpath
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import cast

from .config import BuildSettings
from .models import Catalog, CatalogSpec, Location
from .types import ProfileEvaluator, identity_evaluator

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class PartitionResult:
    """Catalogs produced by a single partitioning run.

    Attributes:
        default: Catalog receiving every unclaimed location.
        others: One catalog per declared spec, in declaration order.
    """

    default: Catalog
    others: list[Catalog]

    @property
    def catalogs(self) -> list[Catalog]:
        """Return the default catalog followed by every spec catalog."""
        return [self.default, *self.others]


class Partitioner:
    """Distribute locations across the catalogs declared by a list of specs."""

    def __init__(
        self,
        *,
        settings: BuildSettings | None = None,
        evaluate: ProfileEvaluator | None = None,
    ) -> None:
        """Initialise the partitioner.

        Args:
            settings: Build-wide path settings; defaults apply when omitted.
            evaluate: Profile templating service resolving runtime load paths.
        """

        self._settings = settings or BuildSettings()
        self._evaluate = evaluate or identity_evaluator

    @property
    def settings(self) -> BuildSettings:
        """Return the build settings used for path rewriting."""
        return self._settings

    def partition(self, locations: Iterable[Location], specs: Sequence[CatalogSpec | None]) -> PartitionResult:
        """Assign every location to exactly one catalog.

        Specs are tried in declaration order and the first whose predicate
        accepts a location claims it. ``None`` entries in ``specs`` are skipped.

        Args:
            locations: Flat location table supplied by the build pipeline.
            specs: Ordered catalog specs.

        Returns:
            PartitionResult: Fresh catalogs populated for this run.
        """

        default = Catalog()
        others: list[Catalog] = []
        for spec in specs:
            if spec is None:
                LOGGER.debug("Skipping empty catalog spec entry")
                continue
            others.append(Catalog(spec))

        for location in locations:
            owner = _first_claiming(others, location)
            if owner is None:
                default.add(location)
            elif location.is_bundle:
                owner.add(self._relocate_bundle(owner, location))
            else:
                owner.add(location)

        LOGGER.debug(
            "Partitioned %d location(s) into %d catalog(s)",
            len(default) + sum(len(catalog) for catalog in others),
            len(others) + 1,
        )
        return PartitionResult(default=default, others=others)

    def _relocate_bundle(self, catalog: Catalog, location: Location) -> Location:
        """Rewrite a claimed bundle so it loads from the catalog's runtime path."""

        spec = cast(CatalogSpec, catalog.spec)
        if location.is_external(self._settings.external_prefix):
            # referenced externally; the catalog carries no file for it
            file_name = PurePosixPath(location.internal_path).name
        else:
            resolved = location.internal_path.replace(self._settings.runtime_path_token, self._settings.build_path)
            file_path = os.path.abspath(resolved)
            file_name = Path(file_path).name
            catalog.files.append(file_path)
        runtime_path = posixpath.join(spec.runtime_load_path, file_name)
        return location.with_internal_path(self._evaluate(self._settings.profile_id, runtime_path))


def _first_claiming(catalogs: Sequence[Catalog], location: Location) -> Catalog | None:
    for catalog in catalogs:
        spec = catalog.spec
        if spec is not None and spec.membership_test(location):
            return catalog
    return None


def partition(
    locations: Iterable[Location],
    specs: Sequence[CatalogSpec | None],
    *,
    settings: BuildSettings | None = None,
    evaluate: ProfileEvaluator | None = None,
) -> PartitionResult:
    """Partition ``locations`` across ``specs``; see :meth:`Partitioner.partition`."""

    return Partitioner(settings=settings, evaluate=evaluate).partition(locations, specs)


__all__ = ["PartitionResult", "Partitioner", "partition"]
