"""Core business logic for version-tagger.

This module contains the release-decision engine:
- Tag ranking and version bumping
- Conventional commit classification and bump selection
- Changelog rendering
"""

from __future__ import annotations

from version_tagger.core.changelog import (
    build_release_section,
    prepend_changelog,
    render_changelog,
)
from version_tagger.core.commits import (
    CommitType,
    ConventionalCommit,
    classify,
    select_bump,
)
from version_tagger.core.version import BumpType, Version, bump_version, rank_tags

__all__ = [
    # Version
    "BumpType",
    # Commits
    "CommitType",
    "ConventionalCommit",
    "Version",
    # Changelog
    "build_release_section",
    "bump_version",
    "classify",
    "prepend_changelog",
    "rank_tags",
    "render_changelog",
    "select_bump",
]
