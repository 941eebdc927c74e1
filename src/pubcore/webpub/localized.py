# ABOUTME: LocalizedString value object for titles and other translatable manifest text.
# ABOUTME: Holds one string per language tag and resolves a default translation.

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# Preferred translation when no unlocalized value is present.
DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class LocalizedString:
    """A piece of text available in one or more languages.

    An unlocalized value is stored under the ``None`` key. Instances are
    immutable; build a localized one with ``LocalizedString.from_strings``.
    """

    value: str | None = None
    translations: Mapping[str | None, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        merged: dict[str | None, str] = {}
        if self.value is not None:
            merged[None] = self.value
        merged.update(self.translations)
        object.__setattr__(self, "translations", merged)
        object.__setattr__(self, "value", merged.get(None))

    @classmethod
    def from_strings(cls, strings: Mapping[str | None, str]) -> "LocalizedString":
        """Build a LocalizedString from a language -> text mapping."""
        return cls(translations=dict(strings))

    @property
    def string(self) -> str:
        """The default translation.

        Policy: the unlocalized value, then the English translation, then the
        first translation in insertion order, then an empty string.
        """
        if None in self.translations:
            return self.translations[None]
        if DEFAULT_LANGUAGE in self.translations:
            return self.translations[DEFAULT_LANGUAGE]
        for text in self.translations.values():
            return text
        return ""

    def get(self, language: str | None) -> str:
        """Return the translation for ``language``, or the default translation."""
        if language:
            text = self.translations.get(language)
            if text is not None:
                return text
        return self.string

    def to_json(self) -> Any:
        """Serialize as a bare string when unlocalized, else a language map."""
        if set(self.translations) <= {None}:
            return self.string
        return {lang or "und": text for lang, text in self.translations.items()}

    def __str__(self) -> str:
        return self.string
