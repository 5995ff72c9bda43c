"""Unit tests for changelog generation."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import pytest

from version_tagger.core.changelog import (
    NO_NOTABLE_CHANGES,
    build_release_section,
    prepend_changelog,
    render_changelog,
    sort_commits,
)
from version_tagger.core.version import BumpType
from version_tagger.exceptions import ChangelogError
from version_tagger.vcs.git import Commit

if TYPE_CHECKING:
    from pathlib import Path


class TestRenderChangelog:
    """Tests for render_changelog()."""

    def test_groups_in_type_order(self):
        """Commits are grouped under headings in priority order."""
        commits = [
            Commit("xf0", "feat(foo): bar"),
            Commit("xf1", "fix: some"),
            Commit("xf3", "chore: some"),
            Commit("xf2", "docs(foo): bar"),
        ]

        assert render_changelog(commits) == (
            "### Features\n"
            "- **foo:** bar (xf0)\n"
            "\n"
            "### Bug Fixes\n"
            "- some (xf1)\n"
            "\n"
            "### Documentation\n"
            "- **foo:** bar (xf2)\n"
            "\n"
            "### Chores\n"
            "- some (xf3)\n"
        )

    def test_release_commits_are_skipped(self):
        """chore(release) commits never appear in the changelog."""
        commits = [
            Commit("a1", "chore(release): v1.2.3"),
            Commit("a2", "chore(deps): bump rich"),
            Commit("a3", "chore(release): v1.2.2"),
        ]

        result = render_changelog(commits)

        assert "v1.2.3" not in result
        assert "v1.2.2" not in result
        assert result == "### Chores\n- **deps:** bump rich (a2)\n"

    def test_only_release_commits_render_empty(self):
        """A range holding only release commits renders nothing."""
        assert render_changelog([Commit("a1", "chore(release): v1.2.3")]) == ""

    def test_non_conventional_commits_are_skipped(self):
        """Subjects outside the grammar are left out."""
        commits = [Commit("a1", "wip stuff"), Commit("a2", "fix: real fix")]

        assert render_changelog(commits) == "### Bug Fixes\n- real fix (a2)\n"

    def test_empty(self):
        """No commits renders an empty string."""
        assert render_changelog([]) == ""

    def test_breaking_sorted_before_plain(self):
        """feat! entries precede feat entries within the same heading."""
        commits = [
            Commit("a1", "feat: plain"),
            Commit("a2", "feat!: breaking"),
            Commit("a3", "fix: patch"),
            Commit("a4", "fix!: breaking fix"),
        ]

        assert render_changelog(commits) == (
            "### Features\n"
            "- breaking (a2)\n"
            "- plain (a1)\n"
            "\n"
            "### Bug Fixes\n"
            "- breaking fix (a4)\n"
            "- patch (a3)\n"
        )

    def test_reverts_follow_known_prefixes(self):
        """Types outside the sort order are rendered last."""
        commits = [Commit("r1", "revert: undo thing"), Commit("c1", "chore: tidy")]

        assert render_changelog(commits) == (
            "### Chores\n- tidy (c1)\n\n### Reverts\n- undo thing (r1)\n"
        )

    def test_deterministic(self, sample_commits: list[Commit]):
        """Rendering the same input twice gives identical output."""
        assert render_changelog(sample_commits) == render_changelog(list(sample_commits))

    def test_does_not_reorder_input(self, sample_commits: list[Commit]):
        """The caller's list is left untouched."""
        original = list(sample_commits)
        render_changelog(sample_commits)
        assert sample_commits == original


class TestSortCommits:
    """Tests for sort_commits()."""

    def test_stable_within_prefix(self):
        """Commits sharing a prefix keep their relative order."""
        commits = [
            Commit("1", "fix: first"),
            Commit("2", "feat: only feature"),
            Commit("3", "fix: second"),
            Commit("4", "something else"),
            Commit("5", "fix: third"),
        ]

        assert [c.short_id for c in sort_commits(commits)] == ["2", "1", "3", "5", "4"]


class TestBuildReleaseSection:
    """Tests for build_release_section()."""

    def test_minor_release_heading(self):
        """Minor and major releases use a second-level heading."""
        section = build_release_section(
            "v1.1.0", BumpType.MINOR, "### Features\n- x (a)\n", date(2024, 3, 1)
        )
        assert section == "## v1.1.0 (2024-03-01)\n\n### Features\n- x (a)\n\n"

    def test_patch_release_heading(self):
        """Patch releases use a third-level heading."""
        section = build_release_section("v1.0.1", BumpType.PATCH, "body\n", date(2024, 3, 1))
        assert section.startswith("### v1.0.1 (2024-03-01)\n\n")

    def test_empty_body_placeholder(self):
        """An empty body is replaced by a placeholder."""
        section = build_release_section("v1.0.1", BumpType.PATCH, "", date(2024, 3, 1))
        assert section == f"### v1.0.1 (2024-03-01)\n\n{NO_NOTABLE_CHANGES}\n"

    def test_defaults_to_today(self):
        """The release date defaults to today."""
        section = build_release_section("v2.0.0", BumpType.MAJOR, "body\n")
        assert date.today().isoformat() in section


class TestPrependChangelog:
    """Tests for prepend_changelog()."""

    def test_creates_file(self, tmp_path: Path):
        """A missing changelog is created."""
        path = tmp_path / "CHANGELOG.md"
        prepend_changelog(path, "## v1.0.0\n")
        assert path.read_text(encoding="utf-8") == "## v1.0.0\n"

    def test_prepends_to_existing(self, tmp_path: Path):
        """New sections go above existing content."""
        path = tmp_path / "CHANGELOG.md"
        path.write_text("## v1.0.0\n", encoding="utf-8")

        prepend_changelog(path, "## v1.1.0\n\n")

        assert path.read_text(encoding="utf-8") == "## v1.1.0\n\n## v1.0.0\n"

    def test_directory_raises(self, tmp_path: Path):
        """A directory in place of the changelog raises ChangelogError."""
        path = tmp_path / "CHANGELOG.md"
        path.mkdir()

        with pytest.raises(ChangelogError):
            prepend_changelog(path, "## v1.1.0\n")
