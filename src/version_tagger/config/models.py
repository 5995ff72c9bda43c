"""Configuration models.

The configuration lives in ``.version.json`` at the repository root and
selects the manifest files whose version string is rewritten on release.
Each manifest kind takes a single path, a list of paths, or null.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

CONFIG_FILE = ".version.json"

ManifestPaths = str | list[str] | None


class ManifestKind(StrEnum):
    """Manifest formats that carry a version string."""

    HELM = "helm"
    NPM = "npm"
    COMPOSER = "composer"


DEFAULT_MANIFEST_PATHS: dict[ManifestKind, str] = {
    ManifestKind.HELM: ".helm/Chart.yaml",
    ManifestKind.NPM: "package.json",
    ManifestKind.COMPOSER: "composer.json",
}


class VersionTaggerConfig(BaseModel):
    """Manifest paths to update on release.

    Instantiating the model without arguments gives the defaults used when
    no configuration file exists.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    helm: ManifestPaths = Field(default=DEFAULT_MANIFEST_PATHS[ManifestKind.HELM])
    npm: ManifestPaths = Field(default=DEFAULT_MANIFEST_PATHS[ManifestKind.NPM])
    composer: ManifestPaths = Field(default=DEFAULT_MANIFEST_PATHS[ManifestKind.COMPOSER])

    def paths_for(self, kind: ManifestKind) -> list[str]:
        """Return the configured paths for ``kind`` as a list."""
        value = getattr(self, kind.value)
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)
