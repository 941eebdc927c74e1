# ABOUTME: WebPublication manifest aggregate: metadata plus three ordered link collections.
# ABOUTME: `links` is the one mutable list; everything else is an immutable value.

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from pubcore.webpub.link import Link
from pubcore.webpub.metadata import Metadata


@dataclass(frozen=True)
class WebPublication:
    """The manifest of a publication.

    Collections are copied on construction so the manifest never shares a
    list with its caller. ``links`` stays a list so a Publication can edit
    it in place; ``reading_order`` and ``resources`` are tuples.
    """

    metadata: Metadata = field(default_factory=Metadata)
    links: list[Link] = field(default_factory=list, hash=False)
    reading_order: tuple[Link, ...] = ()
    resources: tuple[Link, ...] = ()

    def __post_init__(self) -> None:
        if self.metadata is None:
            object.__setattr__(self, "metadata", Metadata())
        object.__setattr__(self, "links", list(self.links or ()))
        object.__setattr__(self, "reading_order", tuple(self.reading_order or ()))
        object.__setattr__(self, "resources", tuple(self.resources or ()))

    def all_links(self) -> Iterable[Link]:
        """Yield links, then the reading order, then resources."""
        yield from self.links
        yield from self.reading_order
        yield from self.resources

    def to_json(self) -> dict[str, Any]:
        """Serialize in the web publication manifest shape."""
        return {
            "metadata": self.metadata.to_json(),
            "links": [link.to_json() for link in self.links],
            "readingOrder": [link.to_json() for link in self.reading_order],
            "resources": [link.to_json() for link in self.resources],
        }
