"""Configuration loading from ``.version.json``."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from version_tagger.config.models import CONFIG_FILE, ManifestKind, VersionTaggerConfig
from version_tagger.exceptions import ConfigError, ConfigValidationError

if TYPE_CHECKING:
    from pathlib import Path


def find_config_file(project_path: Path) -> Path | None:
    """Return the configuration file in ``project_path`` if there is one."""
    candidate = project_path / CONFIG_FILE
    return candidate if candidate.is_file() else None


def load_config_data(config_path: Path) -> dict[str, Any]:
    """Read and decode the configuration file.

    Raises:
        ConfigError: If the file is unreadable, not JSON, or not an object
    """
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")
    return data


def build_config(data: dict[str, Any]) -> VersionTaggerConfig:
    """Validate decoded configuration data.

    Manifest kinds missing from ``data`` are disabled rather than defaulted:
    a configuration file lists exactly the manifests to update.

    Raises:
        ConfigValidationError: If a manifest entry is neither a string nor a
            list of strings
    """
    values = {kind.value: data.get(kind.value) for kind in ManifestKind}
    try:
        return VersionTaggerConfig.model_validate(values)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise ConfigValidationError(
            f"{CONFIG_FILE}: {', '.join(fields)} should be a string or an array of strings"
        ) from e


def load_config(project_path: Path) -> tuple[VersionTaggerConfig, str | None]:
    """Load configuration for the repository at ``project_path``.

    A missing file yields the defaults. A file that cannot be decoded also
    yields the defaults, together with a warning for the caller to report.

    Args:
        project_path: Repository root

    Returns:
        The configuration and an optional warning message

    Raises:
        ConfigValidationError: If the file holds invalid manifest entries
    """
    config_path = find_config_file(project_path)
    if config_path is None:
        return VersionTaggerConfig(), None

    try:
        data = load_config_data(config_path)
    except ConfigError as e:
        return VersionTaggerConfig(), str(e)

    return build_config(data), None
