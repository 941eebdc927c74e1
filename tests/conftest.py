# ABOUTME: Shared pytest fixtures for pubcore tests.
# ABOUTME: Provides publication builders and a sample directory of publication files.

from collections.abc import Callable
from pathlib import Path

import pytest

from pubcore import (
    Link,
    LocalizedString,
    Metadata,
    Publication,
    ReadingProgression,
    WebPublication,
)

PublicationFactory = Callable[..., Publication]


@pytest.fixture
def make_publication() -> PublicationFactory:
    """Factory building a Publication with one language and the given collections."""

    def _make(
        title: str = "Title",
        language: str = "EN",
        reading_progression: ReadingProgression = ReadingProgression.AUTO,
        links: list[Link] | None = None,
        reading_order: list[Link] | None = None,
        resources: list[Link] | None = None,
    ) -> Publication:
        return Publication(
            WebPublication(
                metadata=Metadata(
                    localized_title=LocalizedString(title),
                    languages=(language,),
                    reading_progression=reading_progression,
                ),
                links=links or [],
                reading_order=reading_order or [],
                resources=resources or [],
            )
        )

    return _make


@pytest.fixture
def publication_tree(tmp_path: Path) -> Path:
    """Create a directory tree with mixed publication and non-publication files.

    Layout:
        Library/
            Moby Dick.epub
            comics/
                Watchmen 01.CBZ
                notes.txt
            manifests/
                manifest.json
                audio.audiobook
            papers/
                report.pdf
                protected.lcpdf
            .cache/
                stale.epub
    """
    root = tmp_path / "Library"
    (root / "comics").mkdir(parents=True)
    (root / "manifests").mkdir()
    (root / "papers").mkdir()
    (root / ".cache").mkdir()

    (root / "Moby Dick.epub").write_bytes(b"fake epub")
    (root / "comics" / "Watchmen 01.CBZ").write_bytes(b"fake cbz")
    (root / "comics" / "notes.txt").write_text("notes")
    (root / "manifests" / "manifest.json").write_text("{}")
    (root / "manifests" / "audio.audiobook").write_bytes(b"fake audiobook")
    (root / "papers" / "report.pdf").write_bytes(b"fake pdf")
    (root / "papers" / "protected.lcpdf").write_bytes(b"fake lcpdf")
    (root / ".cache" / "stale.epub").write_bytes(b"fake epub")

    return root
