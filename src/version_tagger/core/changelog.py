"""Changelog generation from conventional commits.

The changelog is built locally from the commit subjects collected for a
release. Entries are grouped by commit type in a fixed order and each
release is prepended to ``CHANGELOG.md`` as a new section.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from version_tagger.core.commits import CommitType, classify
from version_tagger.core.version import BumpType
from version_tagger.exceptions import ChangelogError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from version_tagger.vcs.git import Commit

CHANGELOG_FILE = "CHANGELOG.md"

NO_NOTABLE_CHANGES = "*no notable changes*\n"

# Subjects are sorted by the first of these prefixes they start with.
SORT_ORDER = ("feat!", "feat", "fix!", "fix", "refactor", "docs", "chore")

TYPE_HEADINGS = {
    CommitType.FEAT: "Features",
    CommitType.FIX: "Bug Fixes",
    CommitType.DOCS: "Documentation",
    CommitType.REFACTOR: "Code Refactoring",
    CommitType.CHORE: "Chores",
    CommitType.REVERT: "Reverts",
}


def _sort_key(commit: Commit) -> int:
    for position, prefix in enumerate(SORT_ORDER):
        if commit.subject.startswith(prefix):
            return position
    return len(SORT_ORDER)


def sort_commits(commits: Sequence[Commit]) -> list[Commit]:
    """Return a copy of ``commits`` in changelog order.

    The sort is stable: commits sharing a prefix keep their relative order.
    """
    return sorted(commits, key=_sort_key)


def render_changelog(commits: Sequence[Commit]) -> str:
    """Render the Markdown body of a release section.

    Args:
        commits: Commits since the last release, in traversal order

    Returns:
        Grouped Markdown entries, or an empty string if no commit is
        conventional
    """
    lines: list[str] = []
    last_type: CommitType | None = None

    for commit in sort_commits(commits):
        parsed = classify(commit.subject, commit.short_id)
        if parsed is None or parsed.is_release:
            continue

        if parsed.commit_type != last_type:
            if last_type is not None:
                lines.append("\n")
            lines.append(f"### {TYPE_HEADINGS[parsed.commit_type]}\n")
            last_type = parsed.commit_type

        note = f"**{parsed.note}:** " if parsed.note else ""
        lines.append(f"- {note}{parsed.subject} ({parsed.short_id})\n")

    return "".join(lines)


def build_release_section(
    tag: str,
    bump_type: BumpType,
    body: str,
    day: date | None = None,
) -> str:
    """Wrap a changelog body in a release heading.

    Patch releases get a third-level heading, larger releases a second-level
    one, so minor and major releases stand out when reading the file.

    Args:
        tag: New release tag
        bump_type: Level of the release
        body: Output of ``render_changelog``
        day: Release date, defaults to today

    Returns:
        The complete section, ready to prepend
    """
    heading = "###" if bump_type == BumpType.PATCH else "##"
    day = day or date.today()
    return f"{heading} {tag} ({day.isoformat()})\n\n{body or NO_NOTABLE_CHANGES}\n"


def prepend_changelog(path: Path, section: str) -> None:
    """Insert ``section`` at the top of the changelog, creating it if needed.

    Raises:
        ChangelogError: If the file cannot be read or written
    """
    try:
        existing = path.read_text(encoding="utf-8") if path.exists() else ""
        path.write_text(section + existing, encoding="utf-8")
    except OSError as e:
        raise ChangelogError(f"Could not write {path}: {e}") from e
