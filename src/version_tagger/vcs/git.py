"""Git operations via the git command line.

GitRepository shells out to ``git`` for everything the release flow needs:
listing tags, walking commits since a tag, committing the release files,
tagging and pushing.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from version_tagger.exceptions import GitError, NoHeadError, NotARepositoryError

if TYPE_CHECKING:
    from collections.abc import Sequence

SHORT_ID_LENGTH = 10

# Separates fields in ``git log`` output; cannot appear in a commit subject.
_FIELD_SEP = "\x1f"


@dataclass(frozen=True)
class Commit:
    """A commit id abbreviated to SHORT_ID_LENGTH and its subject line."""

    short_id: str
    subject: str


class GitRepository:
    """A git work tree.

    Use ``GitRepository.discover`` to locate the repository that contains a
    directory; the constructor assumes ``path`` is already the work tree root.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    @classmethod
    def discover(cls, path: Path | None = None) -> GitRepository:
        """Find the repository containing ``path``.

        Args:
            path: Any directory inside the work tree, defaults to cwd

        Returns:
            Repository rooted at the top-level directory

        Raises:
            NotARepositoryError: If ``path`` is not inside a git work tree
        """
        start = path or Path.cwd()
        try:
            result = subprocess.run(
                ["git", "rev-parse", "--show-toplevel"],
                capture_output=True,
                text=True,
                check=True,
                cwd=start,
            )
        except FileNotFoundError as e:
            raise NotARepositoryError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            raise NotARepositoryError(f"Not a git repository: {start}", stderr=e.stderr) from e
        return cls(Path(result.stdout.strip()))

    def _run(self, *args: str) -> str:
        try:
            result = subprocess.run(
                ["git", *args],
                capture_output=True,
                text=True,
                check=True,
                cwd=self.path,
            )
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {args[0]} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout

    # =========================================================================
    # Queries
    # =========================================================================

    def tag_names(self) -> set[str]:
        """Return the names of all tags in the repository."""
        return {line for line in self._run("tag", "--list").splitlines() if line}

    def has_head(self) -> bool:
        """True if HEAD points at a commit."""
        try:
            self._run("rev-parse", "--verify", "--quiet", "HEAD^{commit}")
        except GitError:
            return False
        return True

    def get_commits_between(self, start: str, end: str = "HEAD") -> list[Commit]:
        """List commits reachable from ``end`` but not from ``start``.

        Args:
            start: Revision whose ancestors are excluded, usually a tag
            end: Revision to walk from

        Returns:
            Commits newest first

        Raises:
            NoHeadError: If ``end`` is HEAD and the repository has no commits
            GitError: If a revision cannot be resolved
        """
        if end == "HEAD" and not self.has_head():
            raise NoHeadError("HEAD was not found")

        output = self._run("log", f"--format=%H{_FIELD_SEP}%s", f"{start}..{end}")
        commits = []
        for line in output.splitlines():
            if not line:
                continue
            sha, _, subject = line.partition(_FIELD_SEP)
            commits.append(Commit(short_id=sha[:SHORT_ID_LENGTH], subject=subject))
        return commits

    def has_remote(self, name: str) -> bool:
        return name in self._run("remote").split()

    def current_branch(self) -> str:
        """Return the checked-out branch name.

        Raises:
            GitError: If HEAD is detached
        """
        return self._run("symbolic-ref", "--short", "HEAD").strip()

    # =========================================================================
    # Mutations
    # =========================================================================

    def commit_files(self, paths: Sequence[str], message: str) -> str:
        """Stage ``paths`` and commit them on top of HEAD.

        Args:
            paths: Files relative to the repository root
            message: Commit message

        Returns:
            Full id of the new commit
        """
        self._run("add", "--", *paths)
        self._run("commit", "--message", message, "--", *paths)
        return self._run("rev-parse", "HEAD").strip()

    def create_tag(self, name: str, message: str) -> None:
        """Create an annotated tag pointing at HEAD.

        Raises:
            GitError: If ``name`` is empty or the tag cannot be created
            NoHeadError: If the repository has no commits
        """
        if not name:
            raise GitError("Refusing to create a tag with an empty name")
        if not self.has_head():
            raise NoHeadError("HEAD was not found")
        self._run("tag", "--annotate", name, "--message", message, "HEAD")

    def push(self, remote: str, branch: str) -> None:
        """Push ``branch`` together with its annotated tags."""
        self._run("push", "--follow-tags", remote, f"refs/heads/{branch}:refs/heads/{branch}")
