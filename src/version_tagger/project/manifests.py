"""Version rewriting in manifest files.

Helm charts, npm ``package.json`` and Composer ``composer.json`` files carry
their own version string. On release the first version field in each file
is replaced with the new tag.

Formatting and comments are preserved by using a targeted regex
replacement rather than parsing and re-serializing the file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from version_tagger.config.models import ManifestKind
from version_tagger.exceptions import ManifestError

if TYPE_CHECKING:
    from pathlib import Path

    from version_tagger.config.models import VersionTaggerConfig

_HELM_PATTERN = re.compile(r"appVersion:[ \t]*(?P<version>.*)")
_JSON_PATTERN = re.compile(r'"version":\s*"(?P<version>[^"]*)"')

VERSION_PATTERNS: dict[ManifestKind, re.Pattern[str]] = {
    ManifestKind.HELM: _HELM_PATTERN,
    ManifestKind.NPM: _JSON_PATTERN,
    ManifestKind.COMPOSER: _JSON_PATTERN,
}


class UpdateStatus(StrEnum):
    UPDATED = "updated"
    MISSING = "missing"
    NO_VERSION = "no_version"


@dataclass(frozen=True)
class ManifestUpdate:
    """Outcome of rewriting one manifest path."""

    kind: ManifestKind
    path: str
    status: UpdateStatus
    previous: str | None = None

    @property
    def changed(self) -> bool:
        return self.status == UpdateStatus.UPDATED


def _replacement(kind: ManifestKind, tag: str) -> str:
    if kind == ManifestKind.HELM:
        return f"appVersion: {tag}"
    return f'"version": "{tag}"'


def update_manifest(root: Path, relative_path: str, kind: ManifestKind, tag: str) -> ManifestUpdate:
    """Rewrite the version field of a single manifest.

    Args:
        root: Repository root the path is relative to
        relative_path: Manifest path as written in the configuration
        kind: Manifest format, selects the version pattern
        tag: New version string

    Returns:
        What happened to the file; missing files and files without a
        version field are reported, not raised

    Raises:
        ManifestError: If the path exists but is not a regular file, or
            cannot be read or written
    """
    manifest_path = root / relative_path
    if not manifest_path.exists():
        return ManifestUpdate(kind, relative_path, UpdateStatus.MISSING)
    if not manifest_path.is_file():
        raise ManifestError(f"`{relative_path}` is not a file")

    try:
        content = manifest_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"Could not read {relative_path}: {e}") from e

    pattern = VERSION_PATTERNS[kind]
    match = pattern.search(content)
    if match is None:
        return ManifestUpdate(kind, relative_path, UpdateStatus.NO_VERSION)

    new_content = content[: match.start()] + _replacement(kind, tag) + content[match.end() :]
    try:
        manifest_path.write_text(new_content, encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"Could not write {relative_path}: {e}") from e

    return ManifestUpdate(
        kind, relative_path, UpdateStatus.UPDATED, previous=match["version"].strip()
    )


def check_manifests(root: Path, config: VersionTaggerConfig) -> None:
    """Reject configured manifest paths that exist but are not regular files.

    Run before anything is written so a bad path cannot leave a half-applied
    release in the work tree.

    Raises:
        ManifestError: For the first offending path
    """
    for kind in ManifestKind:
        for relative_path in config.paths_for(kind):
            manifest_path = root / relative_path
            if manifest_path.exists() and not manifest_path.is_file():
                raise ManifestError(f"`{relative_path}` is not a file")


def update_manifests(root: Path, config: VersionTaggerConfig, tag: str) -> list[ManifestUpdate]:
    """Rewrite every configured manifest.

    Manifest kinds are processed helm, npm, composer; paths in the order
    they are configured.

    Returns:
        One entry per configured path
    """
    updates = []
    for kind in ManifestKind:
        for relative_path in config.paths_for(kind):
            updates.append(update_manifest(root, relative_path, kind, tag))
    return updates
