# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""File placement and cleanup plans handed to filesystem collaborators.

Nothing here touches the filesystem: the plans only describe which files a
collaborator should move (overwriting existing destinations) and which output
directories it may delete on a full rebuild.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .builder import CatalogBuildResult
from .config import BuildSettings
from .models import Catalog, CatalogSpec
from .types import BUNDLED_CATALOG_SUFFIX, CATALOG_SUFFIX, ProfileEvaluator, identity_evaluator


@dataclass(frozen=True, slots=True)
class FileMove:
    """Single move from the build output into a catalog directory."""

    source: Path
    destination: Path
    overwrite: bool = True


@dataclass(frozen=True, slots=True)
class PlacementItem:
    """Files that travel with one spec catalog."""

    catalog: str
    output_dir: Path
    catalog_file: FileMove
    artifacts: tuple[FileMove, ...]

    @property
    def moves(self) -> tuple[FileMove, ...]:
        """Return the catalog file move followed by the side-artifact moves."""
        return (self.catalog_file, *self.artifacts)


@dataclass(slots=True)
class PlacementPlan:
    """Placement items for every catalog written outside the build output."""

    items: list[PlacementItem] = field(default_factory=list)

    @property
    def output_dirs(self) -> list[Path]:
        """Return the directories that must exist before the moves run."""
        return [item.output_dir for item in self.items]

    def __bool__(self) -> bool:
        return bool(self.items)


def catalog_filename(catalog: Catalog, *, bundle_local_catalog: bool) -> str:
    """Return the serialized filename of ``catalog``.

    Args:
        catalog: Catalog whose file is placed.
        bundle_local_catalog: ``True`` when catalogs are packed into bundles.

    Returns:
        str: ``<name>.json``, or ``<name>.bundle`` for bundled catalogs.
    """

    filename = catalog.filename
    if bundle_local_catalog:
        filename = filename.replace(CATALOG_SUFFIX, BUNDLED_CATALOG_SUFFIX)
    return filename


def plan_placement(
    result: CatalogBuildResult,
    *,
    settings: BuildSettings | None = None,
    evaluate: ProfileEvaluator | None = None,
) -> PlacementPlan:
    """Describe the moves required to place each spec catalog on disk.

    Empty catalogs are not written, and catalogs without an output path stay
    in the build output.

    Args:
        result: Completed catalog build.
        settings: Build settings locating the build output.
        evaluate: Profile templating service resolving output paths.

    Returns:
        PlacementPlan: Moves grouped per catalog, in catalog order.
    """

    settings = settings or BuildSettings()
    evaluate = evaluate or identity_evaluator
    build_root = Path(settings.build_path)
    plan = PlacementPlan()
    for catalog in result.catalogs:
        spec = catalog.spec
        if spec is None or catalog.is_empty or not spec.output_path:
            continue
        output_dir = Path(evaluate(settings.profile_id, spec.output_path))
        filename = catalog_filename(catalog, bundle_local_catalog=settings.bundle_local_catalog)
        artifacts = tuple(
            FileMove(source=Path(file), destination=output_dir / Path(file).name) for file in catalog.files
        )
        plan.items.append(
            PlacementItem(
                catalog=catalog.name,
                output_dir=output_dir,
                catalog_file=FileMove(source=build_root / filename, destination=output_dir / filename),
                artifacts=artifacts,
            ),
        )
    return plan


def cleanup_targets(
    specs: Iterable[CatalogSpec | None],
    *,
    settings: BuildSettings | None = None,
    evaluate: ProfileEvaluator | None = None,
) -> list[Path]:
    """Return the evaluated output directories of every declared spec.

    A cleanup collaborator deletes these recursively when a full rebuild is
    requested. Specs without an output path are skipped, and each directory is
    listed once.

    Args:
        specs: Declared catalog specs; ``None`` entries are skipped.
        settings: Build settings providing the active profile.
        evaluate: Profile templating service resolving output paths.

    Returns:
        list[Path]: Unique output directories in declaration order.
    """

    settings = settings or BuildSettings()
    evaluate = evaluate or identity_evaluator
    targets: list[Path] = []
    for spec in specs:
        if spec is None or not spec.output_path:
            continue
        target = Path(evaluate(settings.profile_id, spec.output_path))
        if target not in targets:
            targets.append(target)
    return targets


__all__ = [
    "FileMove",
    "PlacementItem",
    "PlacementPlan",
    "catalog_filename",
    "cleanup_targets",
    "plan_placement",
]
