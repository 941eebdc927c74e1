# ABOUTME: pubcore - an in-memory model of digital publications and their manifests.
# ABOUTME: Re-exports the manifest value objects and the Publication query facade.

from pubcore.publication import ContentLayout, Format, Publication, resolve_format
from pubcore.webpub import Link, LocalizedString, Metadata, ReadingProgression, WebPublication

__all__ = [
    "ContentLayout",
    "Format",
    "Link",
    "LocalizedString",
    "Metadata",
    "Publication",
    "ReadingProgression",
    "WebPublication",
    "resolve_format",
]
