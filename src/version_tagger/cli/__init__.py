"""Command-line interface for version-tagger."""

from __future__ import annotations

from version_tagger.cli.app import app, main

__all__ = ["app", "main"]
