# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run orchestration: partition, close dependencies, check variants."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .closure import close_dependencies
from .config import BuildSettings
from .diagnostics import CatalogDiagnostic, DiagnosticKind, variant_mismatches
from .models import Catalog, CatalogSpec, Location
from .partition import Partitioner
from .types import ProfileEvaluator, identity_evaluator
from .variants import check_variants

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class CatalogBuildResult:
    """Outcome of a catalog build run."""

    default: Catalog
    catalogs: list[Catalog]
    diagnostics: list[CatalogDiagnostic] = field(default_factory=list)
    variant_differences: dict[str, frozenset[str]] = field(default_factory=dict)

    @property
    def output_catalogs(self) -> list[Catalog]:
        """Return the default catalog followed by every non-empty spec catalog."""
        return [self.default, *(catalog for catalog in self.catalogs if not catalog.is_empty)]

    @property
    def unresolved(self) -> list[CatalogDiagnostic]:
        """Return the unresolved-dependency diagnostics."""
        return [item for item in self.diagnostics if item.kind is DiagnosticKind.UNRESOLVED_DEPENDENCY]

    @property
    def has_issues(self) -> bool:
        """Return ``True`` when the run produced any diagnostic."""
        return bool(self.diagnostics)

    def catalog(self, name: str) -> Catalog | None:
        """Return the spec catalog called ``name``, if declared."""
        return next((catalog for catalog in self.catalogs if catalog.name == name), None)


class CatalogBuilder:
    """Build closed catalogs from a location table and catalog specs.

    The builder keeps no state between runs; every call to :meth:`run` works
    on freshly created catalogs.
    """

    def __init__(
        self,
        *,
        settings: BuildSettings | None = None,
        evaluate: ProfileEvaluator | None = None,
    ) -> None:
        self._settings = settings or BuildSettings()
        self._evaluate = evaluate or identity_evaluator

    @property
    def settings(self) -> BuildSettings:
        """Return the build settings applied to each run."""
        return self._settings

    def run(self, locations: Iterable[Location], specs: Sequence[CatalogSpec | None]) -> CatalogBuildResult:
        """Partition, close and check the catalogs for one build.

        Args:
            locations: Flat location table; only read.
            specs: Ordered catalog specs; ``None`` entries are skipped.

        Returns:
            CatalogBuildResult: Closed catalogs plus advisory diagnostics.
        """

        partitioner = Partitioner(settings=self._settings, evaluate=self._evaluate)
        result = partitioner.partition(locations, specs)
        diagnostics = close_dependencies(result.default, result.others)
        differences = check_variants(result.others, external_prefix=self._settings.external_prefix)
        mismatches = variant_mismatches(differences)
        for mismatch in mismatches:
            LOGGER.warning("%s: %s", mismatch.message, ", ".join(mismatch.subjects))
        diagnostics.extend(mismatches)
        return CatalogBuildResult(
            default=result.default,
            catalogs=result.others,
            diagnostics=diagnostics,
            variant_differences=differences,
        )


def build_catalogs(
    locations: Iterable[Location],
    specs: Sequence[CatalogSpec | None],
    *,
    settings: BuildSettings | None = None,
    evaluate: ProfileEvaluator | None = None,
) -> CatalogBuildResult:
    """Run a single catalog build; see :meth:`CatalogBuilder.run`."""

    return CatalogBuilder(settings=settings, evaluate=evaluate).run(locations, specs)


__all__ = ["CatalogBuildResult", "CatalogBuilder", "build_catalogs"]
