"""Tests for localized messages."""

from __future__ import annotations

import pytest

from version_tagger.messages import (
    CATALOGS,
    ERROR_SYMBOL,
    SUCCESS_SYMBOL,
    Messages,
    detect_language,
)


class TestDetectLanguage:
    """Tests for detect_language()."""

    @pytest.mark.parametrize(
        ("environ", "expected"),
        [
            ({}, "en"),
            ({"LANG": "ru_RU.UTF-8"}, "ru"),
            ({"LANG": "ru-RU"}, "ru"),
            ({"LANG": "de_DE.UTF-8"}, "en"),
            ({"LANG": "C"}, "en"),
            ({"LANG": "ru_RU.UTF-8", "LC_ALL": "en_US.UTF-8"}, "en"),
            ({"LANG": "en_US.UTF-8", "LC_MESSAGES": "ru_RU.UTF-8"}, "ru"),
        ],
    )
    def test_locale_variables(self, environ: dict[str, str], expected: str):
        """LC_ALL beats LC_MESSAGES beats LANG."""
        assert detect_language(environ) == expected


class TestMessages:
    """Tests for Messages."""

    def test_catalogs_share_keys(self):
        """Every language defines the same messages."""
        assert set(CATALOGS["ru"]) == set(CATALOGS["en"])

    def test_format(self):
        """Placeholders are filled in."""
        assert Messages("en").get("tag_created", tag="v1.2.0") == "tagging release v1.2.0"
        assert Messages("ru").get("tag_created", tag="v1.2.0") == "создали тег v1.2.0"

    def test_bump_decision(self):
        """The verbose bump summary is localized."""
        values = {"count": 2, "start": "v1.0.0", "bump": "minor", "tag": "v1.1.0"}
        assert (
            Messages("en").get("bump_decision", **values)
            == "2 commit(s) since v1.0.0: minor bump to v1.1.0"
        )
        assert Messages("ru").get("bump_decision", **values) == (
            "коммитов после v1.0.0: 2, повышение minor до v1.1.0"
        )

    def test_unknown_language_falls_back(self):
        """Unknown languages use English."""
        messages = Messages("fr")
        assert messages.language == "en"
        assert messages.get("no_head") == CATALOGS["en"]["no_head"]

    def test_symbols(self):
        """Status helpers prefix the matching symbol."""
        messages = Messages()
        assert messages.success("committing", files="a").startswith(SUCCESS_SYMBOL)
        assert messages.error("origin_not_found").startswith(ERROR_SYMBOL)

    def test_values_are_escaped(self):
        """Values containing square brackets do not turn into markup."""
        text = Messages().get("release_failed", error="[rejected] main -> main")
        assert "\\[rejected]" in text
