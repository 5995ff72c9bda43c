"""Project file manipulation."""

from __future__ import annotations

from version_tagger.project.manifests import (
    ManifestUpdate,
    UpdateStatus,
    check_manifests,
    update_manifest,
    update_manifests,
)

__all__ = [
    "ManifestUpdate",
    "UpdateStatus",
    "check_manifests",
    "update_manifest",
    "update_manifests",
]
