"""Configuration management for version-tagger."""

from __future__ import annotations

from version_tagger.config.loader import load_config
from version_tagger.config.models import (
    CONFIG_FILE,
    DEFAULT_MANIFEST_PATHS,
    ManifestKind,
    VersionTaggerConfig,
)

__all__ = [
    "CONFIG_FILE",
    "DEFAULT_MANIFEST_PATHS",
    "ManifestKind",
    "VersionTaggerConfig",
    "load_config",
]
