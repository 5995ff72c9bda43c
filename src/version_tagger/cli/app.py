"""Typer application.

A single command: running ``version-tagger`` cuts a release of the
repository containing the current directory.
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from version_tagger import __version__
from version_tagger.cli.commands.release import run_release
from version_tagger.messages import CATALOGS, Messages, detect_language

app = typer.Typer(
    name="version-tagger",
    help="Bump the semantic version from conventional commits, update the changelog and tag.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"v{__version__}")
        raise typer.Exit


def _language_callback(value: str | None) -> str | None:
    if value is not None and value not in CATALOGS:
        raise typer.BadParameter(f"choose from {', '.join(sorted(CATALOGS))}")
    return value


@app.command()
def release(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Force patch bump if there are no commits."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Increase output verbosity."),
    ] = False,
    push: Annotated[
        bool,
        typer.Option("--push", "-p", help="Push the branch and tags to origin after tagging."),
    ] = False,
    path: Annotated[
        str | None,
        typer.Option("--path", "-C", help="Run as if started in this directory."),
    ] = None,
    lang: Annotated[
        str | None,
        typer.Option("--lang", help="Message language (en, ru).", callback=_language_callback),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version number and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Cut a release: changelog, manifests, commit and tag."""
    messages = Messages(lang or detect_language())
    run_release(
        path=path,
        force=force,
        verbose=verbose,
        push=push,
        messages=messages,
        console=console,
        err_console=err_console,
    )


def main() -> None:
    app()
