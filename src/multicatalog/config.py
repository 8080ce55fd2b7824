# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for multi-catalog builds."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import ConfigError
from .membership import AssetEntry, in_asset_groups
from .models import CatalogSpec
from .types import (
    DEFAULT_BUILD_PATH,
    DEFAULT_PROFILE_ID,
    EXTERNAL_REFERENCE_PREFIX,
    RUNTIME_PATH_TOKEN,
)

LOGGER = logging.getLogger(__name__)

PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "multicatalog"


class BuildSettings(BaseModel):
    """Build-wide parameters shared by every catalog of a run."""

    model_config = ConfigDict(validate_assignment=True)

    profile_id: str = DEFAULT_PROFILE_ID
    build_path: str = DEFAULT_BUILD_PATH
    runtime_path_token: str = RUNTIME_PATH_TOKEN
    external_prefix: str = Field(default=EXTERNAL_REFERENCE_PREFIX, min_length=1)
    bundle_local_catalog: bool = False


class CatalogSpecConfig(BaseModel):
    """Declarative description of one additional catalog."""

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(min_length=1)
    variant_group: str | None = None
    build_path: str = ""
    runtime_load_path: str = ""
    asset_groups: list[str] = Field(default_factory=list)
    device_requirements: dict[str, str] = Field(default_factory=dict)


class MultiCatalogConfig(BaseModel):
    """Top-level configuration bundling build settings and catalog declarations."""

    model_config = ConfigDict(validate_assignment=True)

    settings: BuildSettings = Field(default_factory=BuildSettings)
    catalogs: list[CatalogSpecConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_names(self) -> MultiCatalogConfig:
        seen: set[str] = set()
        for catalog in self.catalogs:
            if catalog.name in seen:
                raise ValueError(f"duplicate catalog name '{catalog.name}'")
            seen.add(catalog.name)
        return self


def parse_config(data: Mapping[str, Any], *, source: str = "<memory>") -> MultiCatalogConfig:
    """Validate a raw configuration mapping.

    Args:
        data: Mapping shaped like :class:`MultiCatalogConfig`.
        source: Description of the origin used in error messages.

    Returns:
        MultiCatalogConfig: Validated configuration.

    Raises:
        ConfigError: If the mapping does not validate.
    """

    try:
        return MultiCatalogConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(f"Invalid catalog configuration in {source}: {exc}") from exc


def load_config(path: Path) -> MultiCatalogConfig:
    """Load configuration from a TOML document.

    ``pyproject.toml`` files are read from the ``[tool.multicatalog]`` table;
    any other document is read from its top level. A missing file yields the
    defaults.

    Args:
        path: TOML file to read.

    Returns:
        MultiCatalogConfig: Validated configuration.

    Raises:
        ConfigError: If the document cannot be parsed or validated.
    """

    if not path.exists():
        LOGGER.debug("No catalog configuration at %s; using defaults", path)
        return MultiCatalogConfig()
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Malformed TOML in {path}: {exc}") from exc
    if path.name == "pyproject.toml":
        tool_section = document.get(PYPROJECT_TOOL_KEY)
        section = tool_section.get(PYPROJECT_SECTION_KEY) if isinstance(tool_section, Mapping) else None
        if not isinstance(section, Mapping):
            return MultiCatalogConfig()
        document = dict(section)
    return parse_config(document, source=str(path))


def build_specs(config: MultiCatalogConfig, entries: Sequence[AssetEntry]) -> list[CatalogSpec]:
    """Materialise :class:`CatalogSpec` objects from configuration.

    Args:
        config: Validated configuration.
        entries: Asset entries used by the asset-group membership predicates.

    Returns:
        list[CatalogSpec]: Specs in declaration order.
    """

    return [
        CatalogSpec(
            name=catalog.name,
            variant_group=catalog.variant_group,
            membership_test=in_asset_groups(catalog.asset_groups, entries),
            output_path=catalog.build_path,
            runtime_load_path=catalog.runtime_load_path,
            device_requirements=MappingProxyType(dict(catalog.device_requirements)),
        )
        for catalog in config.catalogs
    ]


__all__ = [
    "BuildSettings",
    "CatalogSpecConfig",
    "MultiCatalogConfig",
    "build_specs",
    "load_config",
    "parse_config",
]
