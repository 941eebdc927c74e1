# ABOUTME: Publication-level descriptive metadata and the reading progression hint.
# ABOUTME: Metadata is an immutable value object owned by a WebPublication.

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any

from pubcore.webpub.localized import LocalizedString


class ReadingProgression(str, Enum):
    """Explicit reading direction hint declared by a manifest."""

    LTR = "ltr"
    RTL = "rtl"
    AUTO = "auto"

    @classmethod
    def parse(cls, value: "ReadingProgression | str | None") -> "ReadingProgression":
        """Coerce a manifest value to a member; absent or unknown values are AUTO."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.AUTO


@dataclass(frozen=True)
class Metadata:
    """Descriptive data about a publication.

    ``languages`` is ordered: the first entry is the primary language.
    Everything except the title is optional and defaults to empty.
    """

    localized_title: LocalizedString = field(default_factory=LocalizedString)
    languages: tuple[str, ...] = ()
    reading_progression: ReadingProgression = ReadingProgression.AUTO
    identifier: str | None = None
    type: str | None = None
    localized_subtitle: LocalizedString | None = None
    modified: datetime | None = None
    published: date | None = None
    authors: tuple[str, ...] = ()
    publishers: tuple[str, ...] = ()
    subjects: tuple[str, ...] = ()
    description: str | None = None
    duration: float | None = None
    number_of_pages: int | None = None

    def __post_init__(self) -> None:
        # A bare string would otherwise be split into characters.
        for name in ("languages", "authors", "publishers", "subjects"):
            value = getattr(self, name)
            object.__setattr__(
                self, name, (value,) if isinstance(value, str) else tuple(value or ())
            )
        if self.localized_title is None:
            object.__setattr__(self, "localized_title", LocalizedString())
        object.__setattr__(
            self, "reading_progression", ReadingProgression.parse(self.reading_progression)
        )

    @property
    def title(self) -> str:
        """Default translation of the title."""
        return self.localized_title.string

    @property
    def subtitle(self) -> str | None:
        """Default translation of the subtitle, if any."""
        return self.localized_subtitle.string if self.localized_subtitle else None

    @property
    def primary_language(self) -> str | None:
        """First declared language, or None when no language is declared."""
        return self.languages[0] if self.languages else None

    def to_json(self) -> dict[str, Any]:
        """Serialize in the web publication manifest shape, omitting empty fields."""
        data: dict[str, Any] = {"title": self.localized_title.to_json()}
        if self.identifier:
            data["identifier"] = self.identifier
        if self.type:
            data["@type"] = self.type
        if self.localized_subtitle is not None:
            data["subtitle"] = self.localized_subtitle.to_json()
        if self.modified is not None:
            data["modified"] = self.modified.isoformat()
        if self.published is not None:
            data["published"] = self.published.isoformat()
        if self.languages:
            data["language"] = list(self.languages)
        if self.authors:
            data["author"] = list(self.authors)
        if self.publishers:
            data["publisher"] = list(self.publishers)
        if self.subjects:
            data["subject"] = list(self.subjects)
        if self.description:
            data["description"] = self.description
        if self.duration is not None:
            data["duration"] = self.duration
        if self.number_of_pages is not None:
            data["numberOfPages"] = self.number_of_pages
        data["readingProgression"] = self.reading_progression.value
        return data
