# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console output for catalog build reports.

Messages are printed with a tone (symbol plus Rich style); diagnostics pick
their tone from their kind, so unresolved dependencies read as failures and
variant mismatches as warnings.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import Final

from rich.console import Console
from rich.rule import Rule
from rich.text import Text

from .diagnostics import CatalogDiagnostic, DiagnosticKind


@dataclass(frozen=True, slots=True)
class Tone:
    """Prefix symbol and Rich style of a report line."""

    symbol: str
    style: str


INFO: Final[Tone] = Tone("ℹ️ ", "cyan")
OK: Final[Tone] = Tone("✅ ", "green")
WARN: Final[Tone] = Tone("⚠️ ", "yellow")
FAIL: Final[Tone] = Tone("❌ ", "red")


def stdout_is_terminal() -> bool:
    """Return ``True`` when stdout is attached to a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def _cached_console(color: bool, emoji: bool, terminal: bool) -> Console:
    return Console(
        color_system="auto" if color and terminal else None,
        force_terminal=terminal,
        no_color=not (color and terminal),
        emoji=emoji,
        soft_wrap=True,
    )


def report_console(*, use_color: bool, use_emoji: bool) -> Console:
    """Return the console used for build reports.

    Args:
        use_color: Flag indicating whether ANSI colour support is desired.
        use_emoji: Flag indicating whether emoji output is desired.

    Returns:
        Console: Console shared by every report with the same preferences.
    """

    return _cached_console(use_color, use_emoji, stdout_is_terminal())


def _emit(tone: Tone, msg: str, *, use_emoji: bool, use_color: bool | None) -> None:
    color_enabled = stdout_is_terminal() if use_color is None else use_color
    prefix = tone.symbol if use_emoji else ""
    text = Text(f"{prefix}{msg}")
    if color_enabled:
        text.stylize(tone.style)
    report_console(use_color=color_enabled, use_emoji=use_emoji).print(text)


def section(title: str, *, use_color: bool) -> None:
    """Print the header of a report section."""

    console = report_console(use_color=use_color, use_emoji=True)
    if use_color:
        console.print()
        console.print(Rule(title))
    else:
        console.print(f"\n--- {title} ---")


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print an informational line."""

    _emit(INFO, msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print a success line."""

    _emit(OK, msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print a warning line."""

    _emit(WARN, msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print a failure line; the build still continues."""

    _emit(FAIL, msg, use_emoji=use_emoji, use_color=use_color)


_DIAGNOSTIC_EMITTERS: Final[dict[DiagnosticKind, Callable[..., None]]] = {
    DiagnosticKind.UNRESOLVED_DEPENDENCY: fail,
    DiagnosticKind.VARIANT_MISMATCH: warn,
}


def diagnostic(item: CatalogDiagnostic, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``item`` prefixed with its catalog, in the tone of its kind.

    Args:
        item: Diagnostic produced by a catalog build.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding terminal detection.
    """

    _DIAGNOSTIC_EMITTERS[item.kind](f"[{item.catalog}] {item.message}", use_emoji=use_emoji, use_color=use_color)


__all__ = [
    "FAIL",
    "INFO",
    "OK",
    "WARN",
    "Tone",
    "diagnostic",
    "fail",
    "info",
    "ok",
    "report_console",
    "section",
    "stdout_is_terminal",
    "warn",
]
