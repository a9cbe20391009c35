# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Message lookup for Arbor diagnostics and help text.

Catalogs live in `arbor/locales/<locale>.yml` as flat `key: template`
mappings. Templates use `str.format` named fields:

    localizer = Localizer("en")
    localizer.get("missing_option", label="-f/--foo")
    localizer.missing_option(label="-f/--foo")

Unknown locales fall back to English. Unknown keys raise `KeyError`.
"""
from __future__ import annotations

from functools import lru_cache
from importlib import resources
from typing import Any, Callable

import yaml

from arbor.logger import logger

DEFAULT_LOCALE = "en"


@lru_cache(maxsize=None)
def load_catalog(locale: str) -> dict[str, str]:
    """Load and cache the message catalog for `locale`."""
    path = resources.files("arbor").joinpath("locales", f"{locale}.yml")
    if not path.is_file():
        raise FileNotFoundError(f"No message catalog for locale '{locale}'")
    with path.open("r", encoding="UTF-8") as catalog_file:
        catalog = yaml.safe_load(catalog_file) or {}
    if not isinstance(catalog, dict):
        raise ValueError(f"Message catalog for locale '{locale}' must be a mapping")
    return {str(key): str(value) for key, value in catalog.items()}


class Localizer:
    """Resolves message keys to formatted strings for one locale."""

    def __init__(self, locale: str | None = None) -> None:
        self.locale = DEFAULT_LOCALE
        self.messages = load_catalog(DEFAULT_LOCALE)
        if locale:
            self.set_locale(locale)

    def set_locale(self, locale: str) -> None:
        locale = str(locale).replace("-", "_").split("_")[0].lower()
        try:
            messages = load_catalog(locale)
        except FileNotFoundError:
            logger.debug("[i18n] Unknown locale '%s', keeping '%s'.", locale, self.locale)
            return
        self.locale = locale
        self.messages = {**load_catalog(DEFAULT_LOCALE), **messages}

    def get(self, key: str, **params: Any) -> str:
        template = self.messages[key]
        return template.format(**params) if params else template

    def __getattr__(self, key: str) -> Callable[..., str]:
        if key.startswith("_") or key not in self.__dict__.get("messages", {}):
            raise AttributeError(key)

        def _message(**params: Any) -> str:
            return self.get(key, **params)

        return _message

    def __repr__(self) -> str:
        return f"Localizer(locale={self.locale!r})"
