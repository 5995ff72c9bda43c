"""Shared test fixtures."""

from __future__ import annotations

import shutil
import subprocess
from typing import TYPE_CHECKING

import pytest

from version_tagger.vcs.git import Commit

if TYPE_CHECKING:
    from pathlib import Path

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not found")


def git(repo_path: Path, *args: str) -> str:
    """Run a git command in ``repo_path`` and return its stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo_path,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def make_commit(repo_path: Path, message: str, filename: str = "file.txt") -> None:
    """Append a line to ``filename`` and commit it with ``message``."""
    target = repo_path / filename
    with target.open("a", encoding="utf-8") as f:
        f.write(f"{message}\n")
    git(repo_path, "add", filename)
    git(repo_path, "commit", "--message", message)


@pytest.fixture
def temp_git_repo(tmp_path: Path) -> Path:
    """Create an empty git repository with a local identity."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    git(repo_path, "init", "--quiet")
    git(repo_path, "config", "user.name", "Test User")
    git(repo_path, "config", "user.email", "test@example.com")
    git(repo_path, "config", "commit.gpgsign", "false")
    git(repo_path, "config", "tag.gpgsign", "false")
    git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")
    return repo_path


@pytest.fixture
def tagged_git_repo(temp_git_repo: Path) -> Path:
    """Repository with one commit tagged v1.0.0."""
    make_commit(temp_git_repo, "chore: initial commit")
    git(temp_git_repo, "tag", "--annotate", "v1.0.0", "--message", "Release")
    return temp_git_repo


@pytest.fixture
def sample_commits() -> list[Commit]:
    """Commits since the last release, newest first."""
    return [
        Commit("a1b2c3d4e5", "feat(api): add pagination"),
        Commit("b2c3d4e5f6", "fix: handle empty response"),
        Commit("c3d4e5f6a7", "docs: describe configuration"),
        Commit("d4e5f6a7b8", "chore(release): v1.2.0"),
        Commit("e5f6a7b8c9", "Merge branch 'main'"),
        Commit("f6a7b8c9d0", "refactor(core): split parser"),
    ]
