# ABOUTME: Manifest model package: value objects describing a web publication.
# ABOUTME: Exports Link, LocalizedString, Metadata, ReadingProgression and WebPublication.

from pubcore.webpub.link import COVER_REL, SELF_REL, Link
from pubcore.webpub.localized import LocalizedString
from pubcore.webpub.manifest import WebPublication
from pubcore.webpub.metadata import Metadata, ReadingProgression

__all__ = [
    "COVER_REL",
    "SELF_REL",
    "Link",
    "LocalizedString",
    "Metadata",
    "ReadingProgression",
    "WebPublication",
]
