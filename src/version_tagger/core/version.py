"""Semantic version parsing, tag ranking and bumping.

Versions are plain ``major.minor.patch`` triples. They are read from tag
names, which may carry a prefix such as ``v`` or ``release-``, and written
back as ``v{major}.{minor}.{patch}``.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterable

# Components are 0 or have no leading zero; the triple must not sit inside a
# longer run of digits.
SEMVER_PATTERN = re.compile(
    r"(?<!\d)(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)(?!\d)"
)

TAG_PREFIX = "v"


class BumpType(StrEnum):
    """Magnitude of a version increment."""

    NONE = "none"
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"


class Version(NamedTuple):
    """A ``(major, minor, patch)`` triple, ordered lexicographically."""

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, text: str) -> Version | None:
        """Extract the first semantic version found in ``text``.

        Args:
            text: A tag name or bare version string

        Returns:
            The parsed version, or None when ``text`` holds no triple
        """
        match = SEMVER_PATTERN.search(text)
        if match is None:
            return None
        return cls(int(match["major"]), int(match["minor"]), int(match["patch"]))

    def bump(self, bump_type: BumpType) -> Version:
        """Return the version that follows this one for ``bump_type``."""
        if bump_type == BumpType.MAJOR:
            return Version(self.major + 1, 0, 0)
        if bump_type == BumpType.MINOR:
            return Version(self.major, self.minor + 1, 0)
        if bump_type == BumpType.PATCH:
            return Version(self.major, self.minor, self.patch + 1)
        return self

    def to_tag(self) -> str:
        return f"{TAG_PREFIX}{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def rank_tags(tags: Iterable[str], limit: int = 2) -> list[tuple[str, Version]]:
    """Return the most recent semantic-version tags, newest first.

    Tags without a version are dropped. Tags resolving to the same version
    are ordered by name so the result does not depend on input order.

    Args:
        tags: Tag names, in any order
        limit: Maximum number of entries to return

    Returns:
        Up to ``limit`` ``(tag, version)`` pairs sorted by version descending
    """
    versions: list[tuple[str, Version]] = []
    for tag in tags:
        version = Version.parse(tag)
        if version is not None:
            versions.append((tag, version))

    # Name ascending first, then a stable sort by version descending.
    versions.sort(key=lambda item: item[0])
    versions.sort(key=lambda item: item[1], reverse=True)
    return versions[:limit]


def bump_version(bump_type: BumpType, base: Version) -> str:
    """Compute the next tag name.

    Args:
        bump_type: Level selected for this release
        base: Version of the latest release tag

    Returns:
        ``v{major}.{minor}.{patch}``, or an empty string for ``BumpType.NONE``
    """
    if bump_type == BumpType.NONE:
        return ""
    return base.bump(bump_type).to_tag()
