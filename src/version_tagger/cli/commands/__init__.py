"""CLI command implementations."""

from __future__ import annotations

from version_tagger.cli.commands.release import run_release

__all__ = ["run_release"]
