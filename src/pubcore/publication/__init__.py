# ABOUTME: Publication package: the query facade, content layout, and format resolver.
# ABOUTME: Exports Publication, ContentLayout, Format and resolve_format.

from pubcore.publication.format import Format, resolve_format
from pubcore.publication.layout import ContentLayout, resolve_content_layout
from pubcore.publication.publication import Publication

__all__ = [
    "ContentLayout",
    "Format",
    "Publication",
    "resolve_content_layout",
    "resolve_format",
]
