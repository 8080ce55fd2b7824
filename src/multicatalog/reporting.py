# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rich rendering of catalog build results."""

from __future__ import annotations

from collections.abc import Mapping, Set

from rich import box
from rich.table import Table

from .builder import CatalogBuildResult
from .logging import diagnostic, info, ok, report_console, section, warn


def catalog_table(result: CatalogBuildResult, *, use_color: bool) -> Table:
    """Create a table summarising the catalogs written by a build.

    Args:
        result: Completed catalog build.
        use_color: Flag indicating whether styled output is desired.

    Returns:
        Table: One row per output catalog.
    """

    table = Table(box=box.SIMPLE_HEAVY if use_color else box.SIMPLE)
    table.add_column("Catalog", style="cyan" if use_color else None, no_wrap=True)
    table.add_column("Variant group", no_wrap=True)
    table.add_column("Locations", justify="right")
    table.add_column("Files", justify="right")
    for catalog in result.output_catalogs:
        table.add_row(
            catalog.filename,
            catalog.declared_variant_group or "-",
            str(len(catalog)),
            str(len(catalog.files)),
        )
    return table


def variant_table(differences: Mapping[str, Set[str]], *, use_color: bool) -> Table:
    """Create a table listing addresses missing from or extra to each variant.

    Args:
        differences: Catalog names mapped to their diverging addresses.
        use_color: Flag indicating whether styled output is desired.

    Returns:
        Table: One row per diverging catalog.
    """

    table = Table(box=box.SIMPLE_HEAVY if use_color else box.SIMPLE)
    table.add_column("Catalog", style="yellow" if use_color else None, no_wrap=True)
    table.add_column("Diverging addresses")
    for name, addresses in differences.items():
        table.add_row(name, ", ".join(sorted(addresses)))
    return table


def emit_build_report(result: CatalogBuildResult, *, use_color: bool = True, use_emoji: bool = True) -> None:
    """Print the catalog summary followed by every diagnostic of the build.

    Args:
        result: Completed catalog build.
        use_color: Flag indicating whether ANSI colour support is desired.
        use_emoji: Flag indicating whether emoji output is desired.
    """

    console = report_console(use_color=use_color, use_emoji=use_emoji)
    section("Catalogs", use_color=use_color)
    console.print(catalog_table(result, use_color=use_color))

    skipped = [catalog.name for catalog in result.catalogs if catalog.is_empty]
    if skipped:
        info(f"Skipped empty catalogs: {', '.join(skipped)}", use_emoji=use_emoji, use_color=use_color)

    for unresolved in result.unresolved:
        diagnostic(unresolved, use_emoji=use_emoji, use_color=use_color)

    if result.variant_differences:
        section("Variant consistency", use_color=use_color)
        warn(
            f"{len(result.variant_differences)} catalog(s) diverge from their variant group",
            use_emoji=use_emoji,
            use_color=use_color,
        )
        console.print(variant_table(result.variant_differences, use_color=use_color))

    if not result.has_issues:
        ok("Catalogs are closed and variant groups are consistent", use_emoji=use_emoji, use_color=use_color)


__all__ = ["catalog_table", "emit_build_report", "variant_table"]
