"""Allow ``python -m version_tagger``."""

from __future__ import annotations

from version_tagger.cli import main

if __name__ == "__main__":
    main()
