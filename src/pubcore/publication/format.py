# ABOUTME: Packaging format classification from MIME type candidates and file extension.
# ABOUTME: Stateless resolver usable before any Publication exists.

import logging
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class Format(str, Enum):
    """Packaging format of a publication."""

    EPUB = "epub"
    CBZ = "cbz"
    PDF = "pdf"
    WEBPUB = "webpub"
    AUDIOBOOK = "audiobook"
    UNKNOWN = "unknown"

    @classmethod
    def resolve(
        cls,
        mimetypes: str | Iterable[str | None] | None = None,
        file_extension: str | None = None,
    ) -> "Format":
        """Classify a publication from MIME type candidates and an optional extension.

        MIME candidates are tried in order and the first one found in the
        table wins, regardless of the extension. The extension is only
        consulted when no candidate matches.

        Args:
            mimetypes: A single MIME type or an ordered sequence of candidates.
                None and empty entries are skipped.
            file_extension: Optional file extension, matched case-insensitively.

        Returns:
            The matching Format, or Format.UNKNOWN. Never None.
        """
        for mimetype in _candidates(mimetypes):
            fmt = MIME_TYPES.get(mimetype)
            if fmt is not None:
                return fmt

        if file_extension:
            ext = file_extension.strip().lower().lstrip(".")
            fmt = EXTENSIONS.get(ext)
            if fmt is not None:
                logger.debug("Resolved %s from file extension %r", fmt.name, file_extension)
                return fmt

        return cls.UNKNOWN

    @classmethod
    def from_mimetype(cls, mimetype: str | None, file_extension: str | None = None) -> "Format":
        """Classify from a single MIME type."""
        return cls.resolve(mimetype, file_extension)

    @classmethod
    def from_mimetypes(
        cls, mimetypes: Iterable[str | None], file_extension: str | None = None
    ) -> "Format":
        """Classify from an ordered sequence of MIME type candidates."""
        return cls.resolve(list(mimetypes), file_extension)

    @classmethod
    def from_path(
        cls, path: Path | str, mimetypes: str | Iterable[str | None] | None = None
    ) -> "Format":
        """Classify a file by name, using its suffix as the extension."""
        return cls.resolve(mimetypes, Path(path).suffix)

    @property
    def mimetypes(self) -> tuple[str, ...]:
        """MIME types that classify as this format."""
        return tuple(m for m, fmt in MIME_TYPES.items() if fmt is self)

    @property
    def extensions(self) -> tuple[str, ...]:
        """File extensions (lower case, no dot) that classify as this format."""
        return tuple(e for e, fmt in EXTENSIONS.items() if fmt is self)


# Exact, case-sensitive match.
MIME_TYPES: dict[str, Format] = {
    "application/epub+zip": Format.EPUB,
    "application/oebps-package+xml": Format.EPUB,
    "application/x-cbr": Format.CBZ,
    "application/pdf": Format.PDF,
    "application/pdf+lcp": Format.PDF,
    "application/webpub+json": Format.WEBPUB,
    "application/audiobook+zip": Format.AUDIOBOOK,
    "application/audiobook+json": Format.AUDIOBOOK,
}

# Keys are lower case; lookups lower-case the input first.
EXTENSIONS: dict[str, Format] = {
    "epub": Format.EPUB,
    "cbz": Format.CBZ,
    "pdf": Format.PDF,
    "lcpdf": Format.PDF,
    "json": Format.WEBPUB,
    "audiobook": Format.AUDIOBOOK,
}


def _candidates(mimetypes: str | Iterable[str | None] | None) -> list[str]:
    """Normalize the MIME argument to a list of non-empty strings."""
    if mimetypes is None:
        return []
    if isinstance(mimetypes, str):
        return [mimetypes] if mimetypes else []
    return [m for m in mimetypes if m]


def resolve_format(
    mimetypes: str | Iterable[str | None] | None = None,
    file_extension: str | None = None,
) -> Format:
    """Module-level shortcut for Format.resolve."""
    return Format.resolve(mimetypes, file_extension)
