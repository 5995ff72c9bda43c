"""Localized user-facing messages.

Messages are looked up in a per-language catalog. The language is resolved
once at the CLI boundary and a Messages instance is passed to whatever needs
to print; nothing here reads the environment on its own.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from rich.markup import escape

DEFAULT_LANGUAGE = "en"

SUCCESS_SYMBOL = "[green]✔[/]"
INFO_SYMBOL = "[blue]ℹ[/]"
WARNING_SYMBOL = "[yellow]⚠[/]"
ERROR_SYMBOL = "[red]✖[/]"

CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        "not_a_repository": "Not in a git repository",
        "no_head": "Make at least one commit. HEAD was not found",
        "initial_tag_created": "First tag was created - {tag}",
        "no_commits": "No commits between {start} and {end}",
        "force_hint": "If you want to create empty tag use --force or -f flag",
        "no_releasable_changes": (
            "No commits between {start} and {end} call for a release "
            "(only docs or non-conventional commits)"
        ),
        "config_unreadable": "{error}; using default manifest paths",
        "write_changelog": "outputting changes to {path}",
        "version_changed": "changing version in {path}",
        "file_not_found": "tried to update the file `{path}`, but couldn't find it",
        "version_not_found": "file `{path}` does not contain line with version",
        "committing": "committing {files}",
        "tag_created": "tagging release {tag}",
        "push_hint": "To publish, run: `git push --follow-tags origin {branch}`",
        "origin_not_found": "Remote with name `origin` was not found",
        "detached_head": "HEAD is detached; check out a branch before releasing with --push",
        "bump_decision": "{count} commit(s) since {start}: {bump} bump to {tag}",
        "pushing": "pushing {branch} and tags to origin",
        "release_failed": "Release failed: {error}",
    },
    "ru": {
        "not_a_repository": "Не в git репозитории",
        "no_head": "Сделайте хотя бы один коммит. HEAD не был найден",
        "initial_tag_created": "Был создан первый тэг - {tag}",
        "no_commits": "Нет коммитов между {start} и {end}",
        "force_hint": "Чтобы создать пустой тэг, используйте флаг --force или -f",
        "no_releasable_changes": (
            "Коммиты между {start} и {end} не требуют релиза "
            "(только docs или коммиты не по соглашению)"
        ),
        "config_unreadable": "{error}; используем пути по умолчанию",
        "write_changelog": "вписываем дополнения в {path}",
        "version_changed": "изменяем версию в {path}",
        "file_not_found": "пытались обновить файл `{path}`, но не нашли",
        "version_not_found": "файл `{path}` не содержит строчки с версией",
        "committing": "коммитим {files}",
        "tag_created": "создали тег {tag}",
        "push_hint": "Чтобы отправить изменения, запустите: `git push --follow-tags origin {branch}`",
        "origin_not_found": "Удаленный репозиторий `origin` не найден",
        "detached_head": "HEAD отсоединен; переключитесь на ветку перед релизом с --push",
        "bump_decision": "коммитов после {start}: {count}, повышение {bump} до {tag}",
        "pushing": "отправляем {branch} и теги в origin",
        "release_failed": "Не удалось выпустить релиз: {error}",
    },
}


def detect_language(environ: Mapping[str, str] | None = None) -> str:
    """Pick a catalog language from POSIX locale variables.

    ``LC_ALL`` wins over ``LC_MESSAGES``, which wins over ``LANG``. Values
    such as ``ru_RU.UTF-8`` or ``ru-RU`` select the ``ru`` catalog.
    """
    environ = os.environ if environ is None else environ
    for variable in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = environ.get(variable)
        if value:
            language = value.replace("-", "_").split("_", 1)[0].split(".", 1)[0].lower()
            return language if language in CATALOGS else DEFAULT_LANGUAGE
    return DEFAULT_LANGUAGE


class Messages:
    """Message catalog bound to one language.

    Keys missing from a catalog fall back to English.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        self.language = language if language in CATALOGS else DEFAULT_LANGUAGE
        self._catalog = CATALOGS[self.language]

    def get(self, key: str, **values: object) -> str:
        template = self._catalog.get(key) or CATALOGS[DEFAULT_LANGUAGE][key]
        # git output and paths may contain square brackets
        return template.format(**{name: escape(str(value)) for name, value in values.items()})

    def success(self, key: str, **values: object) -> str:
        return f"{SUCCESS_SYMBOL} {self.get(key, **values)}"

    def info(self, key: str, **values: object) -> str:
        return f"{INFO_SYMBOL} {self.get(key, **values)}"

    def warning(self, key: str, **values: object) -> str:
        return f"{WARNING_SYMBOL} {self.get(key, **values)}"

    def error(self, key: str, **values: object) -> str:
        return f"{ERROR_SYMBOL} {self.get(key, **values)}"
