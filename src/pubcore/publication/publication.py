# ABOUTME: Publication facade over a WebPublication manifest.
# ABOUTME: Link lookup, content layout resolution, and self link management.

import logging
from collections.abc import Callable, Iterable
from typing import Any

from pubcore.publication.format import Format
from pubcore.publication.layout import ContentLayout, resolve_content_layout
from pubcore.webpub.link import COVER_REL, SELF_REL, Link
from pubcore.webpub.manifest import WebPublication
from pubcore.webpub.metadata import Metadata

logger = logging.getLogger(__name__)


class Publication:
    """Query surface over an exclusively owned WebPublication.

    All lookups scan ``links``, then ``reading_order``, then ``resources``,
    and return the first match or None. Hrefs and rels are not unique in a
    manifest, so the scan order decides which duplicate wins.

    The only mutation is ``set_self_link``, which edits ``links`` in place.
    Callers sharing an instance across threads must serialize it.
    """

    Format = Format

    def __init__(self, webpub: WebPublication | None = None) -> None:
        self.webpub = webpub if webpub is not None else WebPublication()

    def __repr__(self) -> str:
        return f"Publication(title={self.metadata.title!r})"

    @property
    def metadata(self) -> Metadata:
        return self.webpub.metadata

    @property
    def links(self) -> list[Link]:
        return self.webpub.links

    @property
    def reading_order(self) -> tuple[Link, ...]:
        return self.webpub.reading_order

    @property
    def resources(self) -> tuple[Link, ...]:
        return self.webpub.resources

    # Link lookup

    def link(self, predicate: Callable[[Link], bool]) -> Link | None:
        """Return the first link across all collections matching ``predicate``."""
        return _first(self.webpub.all_links(), predicate)

    def link_with_rel(self, rel: str) -> Link | None:
        """Return the first link whose relations include ``rel``."""
        if not rel:
            return None
        return self.link(lambda link: link.has_rel(rel))

    def links_with_rel(self, rel: str) -> list[Link]:
        """Return every link whose relations include ``rel``, in scan order."""
        if not rel:
            return []
        return [link for link in self.webpub.all_links() if link.has_rel(rel)]

    def link_with_href(self, href: str) -> Link | None:
        """Return the first link with the given href, including top-level links."""
        if not href:
            return None
        return self.link(lambda link: link.href == href)

    def resource_with_href(self, href: str) -> Link | None:
        """Return the first reading order or resource link with the given href.

        Top-level ``links`` (self, cover page, etc.) are never returned.
        """
        if not href:
            return None
        content = (*self.webpub.reading_order, *self.webpub.resources)
        return _first(content, lambda link: link.href == href)

    @property
    def cover_link(self) -> Link | None:
        """The first link with the ``cover`` relation."""
        return self.link_with_rel(COVER_REL)

    # Self link

    def set_self_link(self, href: str) -> None:
        """Replace any ``self`` links in ``links`` with a single new one."""
        links = self.webpub.links
        previous = [link for link in links if link.has_rel(SELF_REL)]
        if previous:
            logger.debug(
                "Replacing self link %s with %s", ", ".join(link.href for link in previous), href
            )
        links[:] = [link for link in links if not link.has_rel(SELF_REL)]
        links.append(Link(href=href, rels=frozenset({SELF_REL})))

    @property
    def base_url(self) -> str | None:
        """The self link's href up to its last '/', or None without a self link."""
        self_link = self.link_with_rel(SELF_REL)
        if self_link is None:
            return None
        href = self_link.href
        slash = href.rfind("/")
        return href[: slash + 1] if slash >= 0 else ""

    # Content layout

    @property
    def content_layout(self) -> ContentLayout:
        """Content layout for the primary language of the publication."""
        return self.content_layout_for_language(self.metadata.primary_language)

    def content_layout_for_language(self, language: str | None) -> ContentLayout:
        """Content layout for ``language``, falling back on the reading progression."""
        return resolve_content_layout(language, self.metadata.reading_progression)

    def to_json(self) -> dict[str, Any]:
        """Serialize the manifest in the web publication manifest shape."""
        return self.webpub.to_json()


def _first(links: Iterable[Link], predicate: Callable[[Link], bool]) -> Link | None:
    for link in links:
        if predicate(link):
            return link
    return None
