# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Multi-catalog partitioning with dependency closure and variant checks."""

from __future__ import annotations

from importlib import metadata

from .builder import CatalogBuilder, CatalogBuildResult, build_catalogs
from .closure import close_catalog, close_dependencies
from .diagnostics import CatalogDiagnostic, DiagnosticKind
from .models import Catalog, CatalogSpec, Location
from .partition import PartitionResult, partition
from .types import ResourceKind
from .variants import check_variants, group_by_variant

__all__ = [
    "Catalog",
    "CatalogBuildResult",
    "CatalogBuilder",
    "CatalogDiagnostic",
    "CatalogSpec",
    "DiagnosticKind",
    "Location",
    "PartitionResult",
    "ResourceKind",
    "__version__",
    "build_catalogs",
    "check_variants",
    "close_catalog",
    "close_dependencies",
    "group_by_variant",
    "partition",
]

try:
    __version__ = metadata.version("multicatalog")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
