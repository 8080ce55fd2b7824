# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for catalog partitioning."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Final, TypeAlias

EXTERNAL_REFERENCE_PREFIX: Final[str] = "res://"
RUNTIME_PATH_TOKEN: Final[str] = "{UnityEngine.AddressableAssets.Addressables.RuntimePath}"
DEFAULT_BUILD_PATH: Final[str] = "Library/com.unity.addressables/aa"
DEFAULT_PROFILE_ID: Final[str] = "Default"
DEFAULT_VARIANT_GROUP: Final[str] = "AssetCatalog"
DEFAULT_CATALOG_NAME: Final[str] = "default"
CATALOG_SUFFIX: Final[str] = ".json"
BUNDLED_CATALOG_SUFFIX: Final[str] = ".bundle"


class ResourceKind(str, Enum):
    """Resource categories understood by the partitioner."""

    BUNDLE = "bundle"
    ASSET = "asset"


ProfileEvaluator: TypeAlias = Callable[[str, str], str]


def identity_evaluator(profile_id: str, template: str) -> str:
    """Return ``template`` untouched; used when no profile service is supplied."""

    del profile_id
    return template


__all__ = [
    "BUNDLED_CATALOG_SUFFIX",
    "CATALOG_SUFFIX",
    "DEFAULT_BUILD_PATH",
    "DEFAULT_CATALOG_NAME",
    "DEFAULT_PROFILE_ID",
    "DEFAULT_VARIANT_GROUP",
    "EXTERNAL_REFERENCE_PREFIX",
    "RUNTIME_PATH_TOKEN",
    "ProfileEvaluator",
    "ResourceKind",
    "identity_evaluator",
]
