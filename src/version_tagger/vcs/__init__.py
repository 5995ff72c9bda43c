"""Version control integration."""

from __future__ import annotations

from version_tagger.vcs.git import Commit, GitRepository

__all__ = ["Commit", "GitRepository"]
