"""Implementation of the release command.

The release command computes the next version from the commits since the
latest tag, updates the changelog and manifests, commits them and tags the
result.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

from version_tagger.config import load_config
from version_tagger.core.changelog import (
    CHANGELOG_FILE,
    build_release_section,
    prepend_changelog,
    render_changelog,
)
from version_tagger.core.commits import select_bump
from version_tagger.core.version import BumpType, Version, bump_version, rank_tags
from version_tagger.exceptions import (
    GitError,
    NoHeadError,
    NotARepositoryError,
    VersionTaggerError,
)
from version_tagger.project.manifests import UpdateStatus, check_manifests, update_manifests
from version_tagger.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console

    from version_tagger.messages import Messages

INITIAL_TAG = Version(0, 0, 1).to_tag()
INITIAL_TAG_MESSAGE = "Initial release"
TAG_MESSAGE = "Release"
RELEASE_COMMIT_MESSAGE = "chore(release): {tag}"
REMOTE = "origin"
DEFAULT_BRANCH = "master"


def _fail(err_console: Console, message: str, error: Exception | None = None) -> NoReturn:
    err_console.print(message)
    raise SystemExit(1) from error


def run_release(
    path: str | None,
    force: bool,
    verbose: bool,
    push: bool,
    messages: Messages,
    console: Console,
    err_console: Console,
) -> None:
    """Run the release command.

    Args:
        path: Optional path inside the repository, defaults to cwd
        force: Bump patch even when there are no new commits
        verbose: Report missing manifest files and the bump decision
        push: Push branch and tags to origin after tagging
        messages: Localized message catalog
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    try:
        repo = GitRepository.discover(project_path)
    except NotARepositoryError as e:
        _fail(err_console, messages.error("not_a_repository"), e)

    try:
        _release(repo, force, verbose, push, messages, console, err_console)
    except NoHeadError as e:
        _fail(err_console, messages.error("no_head"), e)
    except VersionTaggerError as e:
        _fail(err_console, messages.error("release_failed", error=e), e)


def _release(
    repo: GitRepository,
    force: bool,
    verbose: bool,
    push: bool,
    messages: Messages,
    console: Console,
    err_console: Console,
) -> None:
    config, config_warning = load_config(repo.path)
    if config_warning:
        err_console.print(messages.warning("config_unreadable", error=config_warning))

    # Everything a push needs is checked before the work tree is touched.
    push_branch = None
    if push:
        if not repo.has_remote(REMOTE):
            _fail(err_console, messages.error("origin_not_found"))
        try:
            push_branch = repo.current_branch()
        except GitError as e:
            _fail(err_console, messages.error("detached_head"), e)

    ranked = rank_tags(repo.tag_names())
    if not ranked:
        repo.create_tag(INITIAL_TAG, INITIAL_TAG_MESSAGE)
        console.print(messages.info("initial_tag_created", tag=INITIAL_TAG))
        return

    latest_tag, latest_version = ranked[0]
    commits = repo.get_commits_between(latest_tag)

    if commits:
        bump_type = select_bump(commits)
        if bump_type == BumpType.NONE:
            _fail(
                err_console,
                messages.error("no_releasable_changes", start=latest_tag, end="HEAD"),
            )
    elif force:
        bump_type = BumpType.PATCH
    else:
        _fail(
            err_console,
            messages.warning("no_commits", start=latest_tag, end="HEAD")
            + "\n"
            + messages.info("force_hint"),
        )

    new_tag = bump_version(bump_type, latest_version)
    if verbose:
        console.print(
            messages.info(
                "bump_decision",
                count=len(commits),
                start=latest_tag,
                bump=bump_type,
                tag=new_tag,
            )
        )

    check_manifests(repo.path, config)

    section = build_release_section(new_tag, bump_type, render_changelog(commits))
    prepend_changelog(repo.path / CHANGELOG_FILE, section)
    console.print(messages.success("write_changelog", path=CHANGELOG_FILE))

    changed_files = [CHANGELOG_FILE]
    for update in update_manifests(repo.path, config, new_tag):
        if update.status == UpdateStatus.UPDATED:
            changed_files.append(update.path)
            console.print(messages.success("version_changed", path=update.path))
        elif update.status == UpdateStatus.NO_VERSION:
            err_console.print(messages.warning("version_not_found", path=update.path))
        elif verbose:
            err_console.print(messages.warning("file_not_found", path=update.path))

    repo.commit_files(changed_files, RELEASE_COMMIT_MESSAGE.format(tag=new_tag))
    console.print(messages.success("committing", files=", ".join(changed_files)))

    repo.create_tag(new_tag, TAG_MESSAGE)
    console.print(messages.success("tag_created", tag=new_tag))

    if push_branch is None:
        try:
            branch = repo.current_branch()
        except GitError:
            branch = DEFAULT_BRANCH
        console.print(messages.info("push_hint", branch=branch))
        return

    repo.push(REMOTE, push_branch)
    console.print(messages.success("pushing", branch=push_branch))
