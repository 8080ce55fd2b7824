# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Non-fatal diagnostics emitted while building catalogs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(str, Enum):
    """Categories of advisory findings produced by a catalog build."""

    UNRESOLVED_DEPENDENCY = "unresolved-dependency"
    VARIANT_MISMATCH = "variant-mismatch"


@dataclass(frozen=True, slots=True)
class CatalogDiagnostic:
    """Advisory finding attached to a single catalog.

    Attributes:
        kind: Diagnostic category.
        catalog: Name of the catalog the finding refers to.
        subjects: Addresses involved in the finding.
        message: Human-readable description.
    """

    kind: DiagnosticKind
    catalog: str
    subjects: tuple[str, ...]
    message: str


def unresolved_dependency(catalog: str, address: str) -> CatalogDiagnostic:
    """Return the diagnostic for a dependency missing from the default catalog."""

    return CatalogDiagnostic(
        kind=DiagnosticKind.UNRESOLVED_DEPENDENCY,
        catalog=catalog,
        subjects=(address,),
        message=f"Could not find location for dependency ID {address} in the default catalog.",
    )


def variant_mismatches(differences: Mapping[str, Iterable[str]]) -> list[CatalogDiagnostic]:
    """Convert a variant difference mapping into diagnostics.

    Args:
        differences: Mapping of catalog names to addresses diverging from
            their variant group.

    Returns:
        list[CatalogDiagnostic]: One diagnostic per diverging catalog.
    """

    diagnostics: list[CatalogDiagnostic] = []
    for catalog, addresses in differences.items():
        subjects = tuple(sorted(addresses))
        diagnostics.append(
            CatalogDiagnostic(
                kind=DiagnosticKind.VARIANT_MISMATCH,
                catalog=catalog,
                subjects=subjects,
                message=f"Catalog '{catalog}' differs from its variant group by {len(subjects)} address(es)",
            ),
        )
    return diagnostics


__all__ = [
    "CatalogDiagnostic",
    "DiagnosticKind",
    "unresolved_dependency",
    "variant_mismatches",
]
