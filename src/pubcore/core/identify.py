# ABOUTME: Directory walker that classifies files by packaging format.
# ABOUTME: Uses the Format resolver on file extensions; never opens the files.

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path

from pubcore.publication.format import Format


@dataclass
class IdentifiedFile:
    """A single file and the format its name resolves to."""

    path: Path
    format: Format

    @property
    def is_publication(self) -> bool:
        """Whether the file resolved to a known publication format."""
        return self.format is not Format.UNKNOWN


@dataclass
class IdentifyResult:
    """Aggregated results from classifying a directory tree."""

    files: list[IdentifiedFile]
    format_counts: dict[str, int]
    scan_root: Path

    @property
    def total_files(self) -> int:
        """Total number of files classified, including unknown ones."""
        return len(self.files)

    def with_format(self, fmt: Format) -> list[IdentifiedFile]:
        """Return files that resolved to the given format."""
        return [entry for entry in self.files if entry.format is fmt]


def identify_directory(root: Path) -> IdentifyResult:
    """Walk a directory tree and classify every regular file by extension.

    Hidden files and files inside hidden directories are skipped.

    Args:
        root: The top-level directory to scan.

    Returns:
        An IdentifyResult with files in sorted path order and per-format counts
        keyed by Format value.
    """
    files: list[IdentifiedFile] = []
    format_counts: dict[str, int] = defaultdict(int)

    for path in sorted(root.rglob("*")):
        if not path.is_file():
            continue
        if any(part.startswith(".") for part in path.relative_to(root).parts):
            continue
        fmt = Format.from_path(path)
        files.append(IdentifiedFile(path=path, format=fmt))
        format_counts[fmt.value] += 1

    return IdentifyResult(files=files, format_counts=dict(format_counts), scan_root=root)
