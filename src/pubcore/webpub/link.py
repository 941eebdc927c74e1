# ABOUTME: Link value object: an addressable resource reference with relations.
# ABOUTME: Used for manifest links, reading order items, and ancillary resources.

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

SELF_REL = "self"
COVER_REL = "cover"


@dataclass(frozen=True)
class Link:
    """A reference to a resource in a publication manifest.

    ``href`` is the only required field. ``rels`` accepts any iterable of
    relation names and is stored as a frozenset, so ordering and duplicates
    don't affect equality.
    """

    href: str
    title: str | None = None
    rels: frozenset[str] = field(default_factory=frozenset)
    type: str | None = None
    templated: bool = False
    height: int | None = None
    width: int | None = None
    duration: float | None = None
    bitrate: float | None = None
    languages: tuple[str, ...] = ()
    properties: Mapping[str, Any] = field(default_factory=dict, hash=False)
    children: tuple["Link", ...] = ()
    alternates: tuple["Link", ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.rels, str):
            rels: Iterable[str] = (self.rels,)
        else:
            rels = self.rels or ()
        object.__setattr__(self, "rels", frozenset(rels))
        object.__setattr__(self, "languages", tuple(self.languages or ()))
        object.__setattr__(self, "properties", dict(self.properties or {}))
        object.__setattr__(self, "children", tuple(self.children or ()))
        object.__setattr__(self, "alternates", tuple(self.alternates or ()))

    def has_rel(self, rel: str) -> bool:
        """Whether this link carries the given relation."""
        return rel in self.rels

    def to_json(self) -> dict[str, Any]:
        """Serialize in the web publication manifest shape, omitting empty fields."""
        data: dict[str, Any] = {"href": self.href}
        if self.type:
            data["type"] = self.type
        if self.templated:
            data["templated"] = True
        if self.title:
            data["title"] = self.title
        if self.rels:
            data["rel"] = sorted(self.rels)
        if self.properties:
            data["properties"] = dict(self.properties)
        if self.height is not None:
            data["height"] = self.height
        if self.width is not None:
            data["width"] = self.width
        if self.duration is not None:
            data["duration"] = self.duration
        if self.bitrate is not None:
            data["bitrate"] = self.bitrate
        if self.languages:
            data["language"] = list(self.languages)
        if self.alternates:
            data["alternate"] = [link.to_json() for link in self.alternates]
        if self.children:
            data["children"] = [link.to_json() for link in self.children]
        return data
