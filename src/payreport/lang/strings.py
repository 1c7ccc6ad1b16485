"""String lookup by (identifier, component) with lazy evaluation for titles."""

import logging
from typing import Any, Optional

from payreport.lang import en

logger = logging.getLogger(__name__)

LANGUAGES: dict[str, dict[str, dict[str, str]]] = {
    "en": en.STRINGS,
}


class StringManager:
    """Resolve localized strings. Falls back to English for unknown languages."""

    def __init__(self, lang: str = "en", strings: Optional[dict[str, dict[str, str]]] = None) -> None:
        if strings is None:
            strings = LANGUAGES.get(lang)
            if strings is None:
                logger.warning("No strings for language %s, using en", lang)
                strings = LANGUAGES["en"]
        self._lang = lang
        self._strings = strings

    @property
    def lang(self) -> str:
        return self._lang

    def string_exists(self, identifier: str, component: str = "core") -> bool:
        return identifier in self._strings.get(component, {})

    def get_string(self, identifier: str, component: str = "core", a: Any = None) -> str:
        """Return the string, substituting `{$a}` (or `{$a->key}` for dict `a`)."""
        text = self._strings.get(component, {}).get(identifier)
        if text is None:
            logger.warning("Missing string %s/%s", component, identifier)
            return f"[[{identifier}]]"
        if a is None:
            return text
        if isinstance(a, dict):
            for key, value in a.items():
                text = text.replace("{$a->" + key + "}", str(value))
            return text
        return text.replace("{$a}", str(a))


class LangString:
    """A string reference resolved only when rendered."""

    def __init__(self, manager: StringManager, identifier: str, component: str = "core", a: Any = None) -> None:
        self.manager = manager
        self.identifier = identifier
        self.component = component
        self.a = a

    def out(self) -> str:
        return self.manager.get_string(self.identifier, self.component, self.a)

    def __str__(self) -> str:
        return self.out()

    def __repr__(self) -> str:
        return f"LangString({self.identifier!r}, {self.component!r})"
