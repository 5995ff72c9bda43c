"""Conventional commit parsing and bump selection.

Two independent rule sets read the same commit subjects:

- ``classify`` applies the anchored conventional-commit grammar and feeds
  the changelog.
- ``select_bump`` applies plain prefix checks, in traversal order, and
  decides the release level.

They are kept apart on purpose: a subject such as ``featuring a fix``
triggers a minor bump through its prefix but is not a conventional commit.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from version_tagger.core.version import BumpType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from version_tagger.vcs.git import Commit


class CommitType(StrEnum):
    """Commit types recognized in changelog entries."""

    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    REFACTOR = "refactor"
    CHORE = "chore"
    REVERT = "revert"


# Letters, digits, underscore, whitespace and punctuation. ``re`` has no
# \p{P}, so common non-ASCII punctuation (quotes, dashes, CJK brackets and
# full-width marks) is listed. Symbol characters ($ + < = > ^ ` | ~) are not
# allowed in a scope.
_NOTE_CHARS = (
    r"[\w\s!\"#%&'()*,\-./:;?@\[\\\]{}"
    "«»‹›‘’‚‛“”„‟"
    "‐‑‒–—―…·•†‡‰′″§¶¡¿"
    "、。〈〉《》「」『』【】〔〕"
    "！（），．：；？［］｛｝"
    "]"
)

CONVENTIONAL_COMMIT_PATTERN = re.compile(
    r"^(?P<type>" + "|".join(t.value for t in CommitType) + r")!?"
    r"(?:\((?P<note>" + _NOTE_CHARS + r"+)\))?"
    r":(?P<subject>.+)$"
)

MAJOR_PREFIXES = ("fix!", "feat!")
MINOR_PREFIXES = ("feat",)
PATCH_PREFIXES = ("chore", "fix", "refactor")


@dataclass(frozen=True)
class ConventionalCommit:
    """A commit subject that follows the conventional-commit grammar."""

    commit_type: CommitType
    subject: str
    note: str | None = None
    short_id: str = ""

    @property
    def is_release(self) -> bool:
        """True for the ``chore(release)`` commits this tool creates."""
        return self.commit_type == CommitType.CHORE and self.note == "release"


def classify(subject: str, short_id: str = "") -> ConventionalCommit | None:
    """Parse a commit subject line.

    Args:
        subject: First line of the commit message
        short_id: Abbreviated commit id carried into the result

    Returns:
        The classified commit, or None if the subject is not conventional
    """
    match = CONVENTIONAL_COMMIT_PATTERN.match(subject)
    if match is None:
        return None

    return ConventionalCommit(
        commit_type=CommitType(match["type"]),
        subject=match["subject"].strip(),
        note=match["note"],
        short_id=short_id,
    )


def bump_for_subject(subject: str) -> BumpType:
    """Apply the prefix rules to a single subject."""
    if subject.startswith(MAJOR_PREFIXES):
        return BumpType.MAJOR
    if subject.startswith(MINOR_PREFIXES):
        return BumpType.MINOR
    if subject.startswith(PATCH_PREFIXES):
        return BumpType.PATCH
    return BumpType.NONE


def select_bump(commits: Sequence[Commit]) -> BumpType:
    """Decide the bump level for a release.

    The first commit, in the order given, whose subject matches any prefix
    rule decides the level. Later commits are not consulted, even when they
    would call for a larger bump.

    Args:
        commits: Commits since the last release, newest first

    Returns:
        The selected level, or ``BumpType.NONE`` when nothing matches
    """
    for commit in commits:
        bump_type = bump_for_subject(commit.subject)
        if bump_type != BumpType.NONE:
            return bump_type
    return BumpType.NONE
