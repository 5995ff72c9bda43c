"""Exception hierarchy for version-tagger.

Every error raised by the package derives from VersionTaggerError so the
CLI can report it uniformly and exit with status 1.
"""

from __future__ import annotations


class VersionTaggerError(Exception):
    """Base class for all version-tagger errors."""


# =============================================================================
# Git
# =============================================================================


class GitError(VersionTaggerError):
    """A git command failed."""

    def __init__(self, message: str, *, stderr: str | None = None) -> None:
        super().__init__(message)
        self.stderr = stderr

    def __str__(self) -> str:
        base = super().__str__()
        if self.stderr:
            return f"{base}: {self.stderr.strip()}"
        return base


class NotARepositoryError(GitError):
    """The working directory is not inside a git repository."""


class NoHeadError(GitError):
    """The repository has no commits, so HEAD cannot be resolved."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(VersionTaggerError):
    """Configuration could not be loaded."""


class ConfigValidationError(ConfigError):
    """Configuration was loaded but holds invalid values."""


# =============================================================================
# Project files
# =============================================================================


class ManifestError(VersionTaggerError):
    """A manifest file could not be rewritten."""


class ChangelogError(VersionTaggerError):
    """The changelog file could not be written."""


class ReleaseError(VersionTaggerError):
    """The release cannot proceed with the current repository state."""
