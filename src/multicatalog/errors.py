# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while preparing a catalog build."""

from __future__ import annotations


class ConfigError(Exception):
    """Raised when catalog configuration input is invalid."""


__all__ = ("ConfigError",)
